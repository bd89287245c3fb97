"""
Input Parsing

Turns raw field values (typed text, JSON numbers, form data) into numbers
the calculation engine can use. Anything missing or unparseable becomes 0.
"""

import math
import re
from typing import Any, Dict, Mapping

from roi_calculator.calculations.roi import Inputs

# Page/API field id -> Inputs attribute
FIELD_NAMES: Dict[str, str] = {
    "employees": "employees",
    "avgSalary": "avg_salary",
    "turnoverRate": "turnover_rate",
    "managers": "managers",
    "avgManagerSalary": "avg_manager_salary",
    "absenteeismRate": "absenteeism_rate",
}

_FORMATTING_CHARS = re.compile(r"[$,%]")
_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def coerce_number(value: Any) -> float:
    """
    Coerce a raw field value to a float.

    Currency, grouping and percent characters are stripped and the leading
    number is read, so "$1,234" -> 1234.0, "10.1%" -> 10.1 and "12abc" -> 12.0.
    None, empty strings, text with no leading number, booleans, NaN,
    infinities and integers too large for a float all give 0.0.
    """
    if value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return 0.0
    else:
        text = _FORMATTING_CHARS.sub("", str(value))
        match = _LEADING_NUMBER.match(text)
        if not match:
            return 0.0
        try:
            number = float(match.group(1))
        except (ValueError, OverflowError):
            return 0.0

    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def resolve_field(field: str) -> str:
    """
    Map a page field id or attribute name to the Inputs attribute.

    Raises:
        KeyError: If the field is not one of the six inputs
    """
    if field in FIELD_NAMES:
        return FIELD_NAMES[field]
    if field in FIELD_NAMES.values():
        return field
    raise KeyError(field)


def parse_inputs(raw: Mapping[str, Any]) -> Inputs:
    """
    Build an Inputs snapshot from raw field values.

    Values are looked up by page field id first, then by attribute name.
    Missing fields are 0, not the defaults. Unknown keys are ignored.
    """
    values = {}
    for field_id, attr in FIELD_NAMES.items():
        raw_value = raw.get(field_id, raw.get(attr))
        values[attr] = coerce_number(raw_value)
    return Inputs(**values)
