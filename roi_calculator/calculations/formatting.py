"""
Display Formatting

Renders inputs and results as the page shows them: dollar amounts with
thousands separators (e.g. $1,234,567) and whole-number percentages.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Dict

from roi_calculator.calculations.roi import Results

SALARY_FIELDS = ("avg_salary", "avg_manager_salary")
RATE_FIELDS = ("turnover_rate", "absenteeism_rate")

# Results attribute -> page element id
RESULT_ELEMENT_IDS: Dict[str, str] = {
    "total_return": "totalReturn",
    "turnover_savings": "turnoverSavings",
    "absenteeism_savings": "absenteeismSavings",
    "manager_time_savings": "managerTimeSaved",
    "productivity_gains": "productivityGains",
    "program_cost": "programCost",
    "net_benefit": "netBenefit",
    "roi_percent": "roiPercent",
}


def format_number(value: float, decimals: int = 0, grouping: bool = True) -> str:
    """
    Format a number with a fixed number of decimals.

    Halves round away from zero. Thousands are separated with commas
    unless grouping is off.
    """
    quantum = Decimal(1).scaleb(-decimals)
    rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)
    if rounded == 0:
        rounded = abs(rounded)
    if grouping:
        return f"{rounded:,.{decimals}f}"
    return f"{rounded:.{decimals}f}"


def format_currency(amount: float, symbol: str = "$") -> str:
    """Format a whole-dollar amount, e.g. $1,234,567. Negatives give $-1,234."""
    return symbol + format_number(amount, 0)


def format_percent(value: float) -> str:
    return f"{format_number(value, 0, grouping=False)}%"


def format_input_value(field: str, value: float) -> str:
    """
    Format an input value for echoing back into its field.

    Salaries are grouped whole dollars, rates have one decimal place and
    counts are whole numbers.

    Args:
        field: Inputs attribute name
        value: Current numeric value
    """
    if field in SALARY_FIELDS:
        return format_number(value, 0)
    if field in RATE_FIELDS:
        return format_number(value, 1, grouping=False)
    return format_number(value, 0, grouping=False)


def format_results(results: Results, symbol: str = "$") -> Dict[str, str]:
    """
    Format every result for display, keyed by page element id.

    Returns:
        Dict of element id -> display text
    """
    display = {}
    for attr, element_id in RESULT_ELEMENT_IDS.items():
        value = getattr(results, attr)
        if attr == "roi_percent":
            display[element_id] = format_percent(value)
        else:
            display[element_id] = format_currency(value, symbol)
    return display
