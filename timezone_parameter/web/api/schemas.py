"""Pydantic models for the timezone parameter routes."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from timezone_parameter.parameters.descriptor import ParameterFormData


class TimezoneItem(BaseModel):
    value: str
    label: str


class DescriptorResponse(BaseModel):
    display_name: str
    symbols: List[str]
    items: List[TimezoneItem]


class ChoicesResponse(BaseModel):
    name: str
    default_value: str
    calculate_offset: bool
    choices: List[str]


class ValueRequest(BaseModel):
    definition: ParameterFormData
    value: str


class ParameterValueResponse(BaseModel):
    name: str
    value: str
    description: Optional[str] = None
