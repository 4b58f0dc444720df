"""Routes exposing the timezone parameter to a host UI."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from timezone_parameter.errors import InvalidSelectionError
from timezone_parameter.parameters.descriptor import ParameterFormData, TimezoneParameterDescriptor

from . import deps, schemas

router = APIRouter(prefix="/api/parameters/timezone", tags=["parameters"])
logger = logging.getLogger("timezone_parameter.web")


@router.get("", response_model=schemas.DescriptorResponse)
def describe(descriptor: TimezoneParameterDescriptor = Depends(deps.get_descriptor)):
    items = [
        schemas.TimezoneItem(value=option.value, label=option.label)
        for option in descriptor.fill_selected_timezone_items()
    ]
    return schemas.DescriptorResponse(
        display_name=descriptor.display_name,
        symbols=list(descriptor.symbols),
        items=items,
    )


@router.post("/choices", response_model=schemas.ChoicesResponse)
def list_choices(
    payload: ParameterFormData,
    descriptor: TimezoneParameterDescriptor = Depends(deps.get_descriptor),
):
    parameter = descriptor.new_instance(payload)
    return schemas.ChoicesResponse(
        name=parameter.name,
        default_value=parameter.default_value().value,
        calculate_offset=parameter.calculate_offset,
        choices=parameter.choices(),
    )


@router.post("/value", response_model=schemas.ParameterValueResponse)
def resolve_value(
    payload: schemas.ValueRequest,
    descriptor: TimezoneParameterDescriptor = Depends(deps.get_descriptor),
):
    parameter = descriptor.new_instance(payload.definition)
    try:
        resolved = parameter.create_value_from_submission(payload.value)
    except InvalidSelectionError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"parameter": exc.parameter_name, "value": exc.value, "message": str(exc)},
        ) from exc
    logger.debug("Resolved %s=%s", resolved.name, resolved.value)
    return schemas.ParameterValueResponse(
        name=resolved.name,
        value=resolved.value,
        description=resolved.description,
    )
