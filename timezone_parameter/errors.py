"""Exceptions raised by the timezone parameter."""
from __future__ import annotations


class TimezoneParameterError(Exception):
    """Base class for timezone parameter failures."""


class CatalogError(TimezoneParameterError):
    """The zone catalog is empty or breaks a load-time invariant."""


class ParameterConfigurationError(TimezoneParameterError):
    """A parameter was reconfigured after it started serving values."""


class InvalidSelectionError(TimezoneParameterError, ValueError):
    """A submitted selection does not name a zone in the catalog."""

    def __init__(self, parameter_name: str, value: str) -> None:
        self.parameter_name = parameter_name
        self.value = value
        super().__init__(f"Illegal choice for parameter {parameter_name}: {value}")
