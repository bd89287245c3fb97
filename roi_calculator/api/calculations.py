"""
ROI calculation API endpoints.

These endpoints accept inputs and return calculated results.
Used by HTMX for real-time updates.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, ConfigDict, Field, field_validator

from roi_calculator.calculations import parsing
from roi_calculator.calculations.roi import DEFAULT_CONSTANTS, DEFAULT_INPUTS, Inputs
from roi_calculator.services.calculator import ROICalculator
from roi_calculator.templating import templates

logger = logging.getLogger(__name__)

router = APIRouter()


class ROIInput(BaseModel):
    """
    Input for the ROI calculation.

    Fields use the page's ids (avgSalary, ...) or their snake_case names.
    Values may be numbers or text as typed ("$82,160", "10.1%").
    Missing or malformed values are 0.
    """

    model_config = ConfigDict(populate_by_name=True)

    employees: float = 0.0
    avg_salary: float = Field(0.0, alias="avgSalary")
    turnover_rate: float = Field(0.0, alias="turnoverRate")
    managers: float = 0.0
    avg_manager_salary: float = Field(0.0, alias="avgManagerSalary")
    absenteeism_rate: float = Field(0.0, alias="absenteeismRate")

    @field_validator("*", mode="before")
    @classmethod
    def coerce_raw_value(cls, value: Any) -> float:
        return parsing.coerce_number(value)

    def to_inputs(self) -> Inputs:
        return Inputs(**self.model_dump())


class ROIResults(BaseModel):
    """Calculated results, in whole dollars and whole percent."""

    turnover_savings: int
    absenteeism_savings: int
    manager_time_savings: int
    productivity_gains: int
    program_cost: int
    total_return: int
    net_benefit: int
    roi_percent: int


class ROIResponse(BaseModel):
    """Response with the inputs used, the results and their display text."""

    inputs: Dict[str, float]
    results: ROIResults
    display: Dict[str, str]


class FieldEditInput(BaseModel):
    """A single field edit applied on top of the current inputs."""

    inputs: ROIInput = Field(default_factory=ROIInput)
    field: str
    value: Any = None


class FieldEditResponse(ROIResponse):
    """Results after the edit, plus the edited field's display text."""

    field: str
    formatted_value: str


class DefaultsResponse(BaseModel):
    """Default inputs and the fixed benchmark assumptions."""

    inputs: Dict[str, float]
    formatted_inputs: Dict[str, str]
    constants: Dict[str, float]


def _build_response(calculator: ROICalculator) -> Dict[str, Any]:
    return {
        "inputs": calculator.inputs.to_dict(),
        "results": calculator.results.to_dict(),
        "display": calculator.display(),
    }


@router.post("/roi", response_model=ROIResponse)
async def calculate_roi(inputs: ROIInput):
    """Calculate savings, program cost and ROI."""
    calculator = ROICalculator(inputs=inputs.to_inputs())
    logger.debug(f"ROI calculation for {calculator.inputs.employees:g} employees")
    return ROIResponse(**_build_response(calculator))


@router.post("/roi/edit", response_model=FieldEditResponse)
async def edit_roi_field(edit: FieldEditInput):
    """Apply one field edit and return the new results."""
    calculator = ROICalculator(inputs=edit.inputs.to_inputs())

    try:
        calculator.update_input(edit.field, edit.value)
        formatted_value = calculator.format_input(edit.field)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return FieldEditResponse(
        **_build_response(calculator),
        field=edit.field,
        formatted_value=formatted_value,
    )


@router.post("/roi/fragment", response_class=HTMLResponse)
async def calculate_roi_fragment(request: Request):
    """Render the results panel from the page's form fields."""
    form = await request.form()
    calculator = ROICalculator.from_raw(dict(form))

    return templates.TemplateResponse(
        request,
        "partials/results.html",
        {"display": calculator.display()},
    )


@router.get("/roi/defaults", response_model=DefaultsResponse)
async def get_roi_defaults():
    """Return the default inputs and benchmark assumptions."""
    calculator = ROICalculator()

    return DefaultsResponse(
        inputs=DEFAULT_INPUTS.to_dict(),
        formatted_inputs=calculator.formatted_inputs(),
        constants=DEFAULT_CONSTANTS.to_dict(),
    )
