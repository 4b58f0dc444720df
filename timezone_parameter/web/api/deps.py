"""FastAPI dependencies used across routers."""
from __future__ import annotations

from fastapi import Depends

from timezone_parameter.config.timezones import ZoneCatalog, get_system_catalog
from timezone_parameter.parameters.descriptor import TimezoneParameterDescriptor


def get_catalog() -> ZoneCatalog:
    return get_system_catalog()


def get_descriptor(catalog: ZoneCatalog = Depends(get_catalog)) -> TimezoneParameterDescriptor:
    return TimezoneParameterDescriptor(catalog)
