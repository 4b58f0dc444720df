"""Timezone choice parameter definition and its resolved values."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

from timezone_parameter.config.timezones import ZoneCatalog, get_system_catalog
from timezone_parameter.errors import InvalidSelectionError, ParameterConfigurationError
from timezone_parameter.parameters.choices import build_choices, normalize_selection
from timezone_parameter.utils.logging import get_logger

logger = get_logger("parameter")


@dataclass(frozen=True)
class StringParameterValue:
    name: str
    value: str
    description: Optional[str] = None


class TimezoneParameter:
    """A build parameter whose choices are the zones of a :class:`ZoneCatalog`.

    The default value is the first zone of the catalog. ``calculate_offset``
    controls whether choices carry a ``(UTC+HH:MM)`` suffix; it can be changed
    while the parameter is being configured and is fixed once the parameter
    has produced choices or values, or has been hashed.
    """

    def __init__(
        self,
        name: str,
        description: Optional[str] = None,
        catalog: Optional[ZoneCatalog] = None,
    ) -> None:
        self._name = name
        self._description = description
        self._catalog = catalog if catalog is not None else get_system_catalog()
        self._default_value = self._catalog.first()
        self._calculate_offset = True
        self._in_use = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def catalog(self) -> ZoneCatalog:
        return self._catalog

    @property
    def default(self) -> str:
        return self._default_value

    @property
    def calculate_offset(self) -> bool:
        return self._calculate_offset

    @calculate_offset.setter
    def calculate_offset(self, value: bool) -> None:
        value = bool(value)
        if self._in_use and value != self._calculate_offset:
            raise ParameterConfigurationError(
                f"Parameter {self._name} is already in use; calculate_offset cannot change"
            )
        self._calculate_offset = value

    def choices(self) -> List[str]:
        self._in_use = True
        return build_choices(self._catalog, self._calculate_offset)

    def default_value(self) -> StringParameterValue:
        self._in_use = True
        return StringParameterValue(self._name, self._default_value, self._description)

    def is_valid(self, value: StringParameterValue | str) -> bool:
        candidate = value.value if isinstance(value, StringParameterValue) else value
        return candidate in self._catalog

    def create_value_from_submission(self, submission: str | Mapping[str, Any]) -> StringParameterValue:
        """Resolve a value picked from :meth:`choices` (or a form ``{"value": ...}``)."""
        raw = submission.get("value") if isinstance(submission, Mapping) else submission
        if not isinstance(raw, str):
            raise InvalidSelectionError(self._name, "" if raw is None else str(raw))
        return self._resolve(raw)

    def create_value_from_plain_string(self, value: str) -> StringParameterValue:
        return self._resolve(value)

    def _resolve(self, raw: str) -> StringParameterValue:
        self._in_use = True
        selected = normalize_selection(raw)
        parameter_value = StringParameterValue(self._name, selected, self._description)
        if not self.is_valid(parameter_value):
            logger.info("Rejected selection %r for parameter %s", raw, self._name)
            raise InvalidSelectionError(self._name, raw)
        return parameter_value

    def _key(self) -> tuple:
        return (self._name, self._description, self._default_value, self._calculate_offset)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if other is None or type(self) is not type(other):
            return False
        return self._key() == other._key()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        # Hashed parameters may sit in sets or dicts, so the flag locks here too.
        self._in_use = True
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"TimezoneParameter(name={self._name!r}, default={self._default_value!r}, "
            f"calculate_offset={self._calculate_offset})"
        )
