"""
ROI Calculations

Estimates the annual savings and return on investment of an employee
financial-wellbeing program from a handful of workforce inputs.
All calculations are pure functions; results are rounded to whole dollars.
"""

import math
from decimal import Decimal, ROUND_HALF_UP
from dataclasses import dataclass, asdict, replace
from typing import Dict

# Share of program participants who would otherwise have left
TURNOVER_REDUCTION = 0.30
# Share of participants' absence days avoided
ABSENTEEISM_REDUCTION = 0.25
# Share of manager attention time no longer needed per participant
MANAGER_TIME_REDUCTION = 0.40
WORKING_DAYS_PER_YEAR = 250
WORKING_HOURS_PER_YEAR = 2000


@dataclass(frozen=True)
class Inputs:
    """Workforce inputs entered by the user."""

    employees: float = 500
    avg_salary: float = 82160
    turnover_rate: float = 10.1  # Percent
    managers: float = 50  # Collected but not used by any formula
    avg_manager_salary: float = 85280
    absenteeism_rate: float = 2.2  # Percent

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    def updated(self, **changes) -> "Inputs":
        """Return a copy with the given fields changed."""
        return replace(self, **changes)


@dataclass(frozen=True)
class Constants:
    """Benchmark assumptions behind the estimate. Not user-editable."""

    participation_rate: float = 0.40
    turnover_replacement_cost: float = 0.50  # Fraction of salary
    absenteeism_disruption_factor: float = 1.3
    gst_rate: float = 0.10
    program_base_cost: float = 250000  # Before GST
    program_cost_per_employee: float = 500  # Before GST
    manager_time_per_employee: float = 2  # Hours per employee per year
    productivity_improvement_rate: float = 0.05

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class Results:
    """Calculated savings, cost and return. All values are whole numbers."""

    turnover_savings: int
    absenteeism_savings: int
    manager_time_savings: int
    productivity_gains: int
    program_cost: int
    total_return: int
    net_benefit: int
    roi_percent: int

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


DEFAULT_INPUTS = Inputs()
DEFAULT_CONSTANTS = Constants()


def round_half_away(value: float) -> int:
    """
    Round to the nearest integer, with halves rounded away from zero.

    round_half_away(2.5) == 3 and round_half_away(-2.5) == -3.
    NaN and infinity round to 0.
    """
    if math.isnan(value) or math.isinf(value):
        return 0
    rounded = Decimal(repr(float(value))).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return int(rounded)


def calculate_turnover_savings(
    inputs: Inputs, constants: Constants = DEFAULT_CONSTANTS
) -> int:
    """
    Calculate savings from reduced staff turnover.

    Of the employees who would leave each year, the program retains 30% of
    the participating fraction. Each retained employee avoids a replacement
    cost expressed as a fraction of salary.

    Args:
        inputs: Workforce inputs
        constants: Benchmark assumptions

    Returns:
        Annual turnover savings in dollars
    """
    annual_turnover = inputs.employees * (inputs.turnover_rate / 100)
    turnover_reduction = (
        annual_turnover * constants.participation_rate * TURNOVER_REDUCTION
    )
    savings = (
        turnover_reduction * inputs.avg_salary * constants.turnover_replacement_cost
    )
    return round_half_away(savings)


def calculate_absenteeism_savings(
    inputs: Inputs, constants: Constants = DEFAULT_CONSTANTS
) -> int:
    """
    Calculate savings from reduced absenteeism.

    Annual absence days drop by 25% among participants. Each avoided day is
    valued at the daily salary scaled by the disruption factor.

    Args:
        inputs: Workforce inputs
        constants: Benchmark assumptions

    Returns:
        Annual absenteeism savings in dollars
    """
    annual_absence_days = (
        inputs.employees * (inputs.absenteeism_rate / 100) * WORKING_DAYS_PER_YEAR
    )
    absence_reduction = (
        annual_absence_days * constants.participation_rate * ABSENTEEISM_REDUCTION
    )
    daily_salary = inputs.avg_salary / WORKING_DAYS_PER_YEAR
    savings = (
        absence_reduction * daily_salary * constants.absenteeism_disruption_factor
    )
    return round_half_away(savings)


def calculate_manager_time_savings(
    inputs: Inputs, constants: Constants = DEFAULT_CONSTANTS
) -> int:
    """
    Calculate the value of manager time freed up.

    Participants need 40% less manager attention. Hours saved are valued at
    the manager hourly rate (annual salary / 2000 hours).
    """
    hours_saved = (
        inputs.employees
        * constants.participation_rate
        * constants.manager_time_per_employee
        * MANAGER_TIME_REDUCTION
    )
    hourly_rate = inputs.avg_manager_salary / WORKING_HOURS_PER_YEAR
    return round_half_away(hours_saved * hourly_rate)


def calculate_productivity_gains(
    inputs: Inputs, constants: Constants = DEFAULT_CONSTANTS
) -> int:
    """Calculate a flat productivity uplift on the participants' salary base."""
    gains = (
        inputs.employees
        * constants.participation_rate
        * inputs.avg_salary
        * constants.productivity_improvement_rate
    )
    return round_half_away(gains)


def calculate_program_cost(
    inputs: Inputs, constants: Constants = DEFAULT_CONSTANTS
) -> int:
    """
    Calculate the program cost including GST.

    The base cost is the greater of the fixed floor and the per-employee
    rate.
    """
    base_cost = max(
        constants.program_base_cost,
        inputs.employees * constants.program_cost_per_employee,
    )
    return round_half_away(base_cost * (1 + constants.gst_rate))


def calculate_roi_percent(net_benefit: float, program_cost: float) -> int:
    """
    Calculate ROI as a whole percentage.

    Returns 0 when there is no program cost.
    """
    if program_cost <= 0:
        return 0
    return round_half_away((net_benefit / program_cost) * 100)


def compute(inputs: Inputs, constants: Constants = DEFAULT_CONSTANTS) -> Results:
    """
    Calculate every result from a snapshot of the inputs.

    Args:
        inputs: Workforce inputs (never modified)
        constants: Benchmark assumptions

    Returns:
        Results with savings, program cost, total return, net benefit and ROI
    """
    turnover_savings = calculate_turnover_savings(inputs, constants)
    absenteeism_savings = calculate_absenteeism_savings(inputs, constants)
    manager_time_savings = calculate_manager_time_savings(inputs, constants)
    productivity_gains = calculate_productivity_gains(inputs, constants)
    program_cost = calculate_program_cost(inputs, constants)

    total_return = (
        turnover_savings
        + absenteeism_savings
        + manager_time_savings
        + productivity_gains
    )
    net_benefit = total_return - program_cost

    return Results(
        turnover_savings=turnover_savings,
        absenteeism_savings=absenteeism_savings,
        manager_time_savings=manager_time_savings,
        productivity_gains=productivity_gains,
        program_cost=program_cost,
        total_return=total_return,
        net_benefit=net_benefit,
        roi_percent=calculate_roi_percent(net_benefit, program_cost),
    )
