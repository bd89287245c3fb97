"""
ROI calculator service.

Holds the current inputs for one calculator page and recomputes every result
each time an input changes.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from roi_calculator.calculations import formatting, parsing
from roi_calculator.calculations.roi import (
    DEFAULT_CONSTANTS,
    DEFAULT_INPUTS,
    Constants,
    Inputs,
    Results,
    compute,
)
from roi_calculator.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()


class UnknownInputError(ValueError):
    """Raised when an edit targets a field that is not a calculator input."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Unknown input field: {field}")


class ROICalculator:
    """Calculator state: the current inputs and the results derived from them."""

    def __init__(
        self,
        inputs: Optional[Inputs] = None,
        constants: Constants = DEFAULT_CONSTANTS,
    ):
        self.inputs = inputs if inputs is not None else DEFAULT_INPUTS
        self.constants = constants
        self.currency_symbol = settings.currency_symbol
        self.results = self.calculate()

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "ROICalculator":
        """Create a calculator from raw field values (form or JSON)."""
        return cls(inputs=parsing.parse_inputs(raw))

    def calculate(self) -> Results:
        """Recompute all results from the current inputs."""
        self.results = compute(self.inputs, self.constants)
        logger.debug(
            f"Recalculated ROI: {self.results.roi_percent}% "
            f"(net benefit {self.results.net_benefit})"
        )
        return self.results

    def _attr_for(self, field: str) -> str:
        try:
            return parsing.resolve_field(field)
        except KeyError:
            logger.warning(f"Ignoring edit to unknown input field: {field}")
            raise UnknownInputError(field) from None

    def update_input(self, field: str, raw_value: Any) -> Results:
        """
        Apply a single edit and recalculate.

        Args:
            field: Page field id (e.g. "avgSalary") or attribute name
            raw_value: Value as typed; malformed values become 0

        Returns:
            The recalculated results

        Raises:
            UnknownInputError: If field is not one of the calculator inputs
        """
        attr = self._attr_for(field)
        self.inputs = self.inputs.updated(**{attr: parsing.coerce_number(raw_value)})
        return self.calculate()

    def update_inputs(self, raw: Mapping[str, Any]) -> Results:
        """Apply several edits at once, then recalculate once."""
        changes = {
            self._attr_for(field): parsing.coerce_number(value)
            for field, value in raw.items()
        }
        self.inputs = self.inputs.updated(**changes)
        return self.calculate()

    def reset(self) -> Results:
        """Restore the default inputs."""
        self.inputs = DEFAULT_INPUTS
        return self.calculate()

    def format_input(self, field: str) -> str:
        """Text to show in an input field once the user leaves it."""
        attr = self._attr_for(field)
        return formatting.format_input_value(attr, getattr(self.inputs, attr))

    def formatted_inputs(self) -> Dict[str, str]:
        """All input fields formatted for display, keyed by field id."""
        return {
            field_id: self.format_input(field_id)
            for field_id in parsing.FIELD_NAMES
        }

    def display(self) -> Dict[str, str]:
        """All results formatted for display, keyed by page element id."""
        return formatting.format_results(self.results, self.currency_symbol)
