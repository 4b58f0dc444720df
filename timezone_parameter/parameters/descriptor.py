"""Host-facing descriptor: display metadata and construction from form data."""
from __future__ import annotations

from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from timezone_parameter.config.timezones import (
    TimezoneOption,
    ZoneCatalog,
    build_timezone_options,
    get_system_catalog,
)
from timezone_parameter.parameters.definition import TimezoneParameter

DISPLAY_NAME = "Timezone Choice Parameter"
SYMBOLS: tuple[str, ...] = ("timezone", "timezoneParam")


class ParameterFormData(BaseModel):
    name: str = Field(..., max_length=120)
    description: Optional[str] = None
    # An unchecked box is simply absent from submitted form data.
    calculate_offset: bool = False

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Parameter name cannot be empty")
        return value


class TimezoneParameterDescriptor:
    display_name = DISPLAY_NAME
    symbols = SYMBOLS

    def __init__(self, catalog: Optional[ZoneCatalog] = None) -> None:
        self._catalog = catalog

    @property
    def catalog(self) -> ZoneCatalog:
        if self._catalog is None:
            self._catalog = get_system_catalog()
        return self._catalog

    def fill_selected_timezone_items(self) -> List[TimezoneOption]:
        return build_timezone_options(self.catalog)

    def new_instance(self, form_data: ParameterFormData | Mapping[str, Any]) -> TimezoneParameter:
        if not isinstance(form_data, ParameterFormData):
            form_data = ParameterFormData.model_validate(dict(form_data))
        parameter = TimezoneParameter(form_data.name, form_data.description, catalog=self.catalog)
        parameter.calculate_offset = form_data.calculate_offset
        return parameter
