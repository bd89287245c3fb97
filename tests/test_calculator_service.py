"""
Tests for the ROI calculator service.
"""

import pytest
from roi_calculator.calculations.roi import Inputs
from roi_calculator.services.calculator import ROICalculator, UnknownInputError


@pytest.fixture
def calculator():
    """Calculator loaded with the default inputs."""
    return ROICalculator()


class TestInitialState:
    """Test the calculator as loaded."""

    def test_starts_with_defaults(self, calculator):
        """Test default inputs and results are ready on construction."""
        assert calculator.inputs == Inputs()
        assert calculator.results.roi_percent == 334
        assert calculator.results.total_return == 1194856

    def test_from_raw(self):
        """Test building from raw form values."""
        calculator = ROICalculator.from_raw({"employees": "1,000", "avgSalary": "$60,000"})
        assert calculator.inputs.employees == 1000
        assert calculator.inputs.avg_salary == 60000
        assert calculator.inputs.turnover_rate == 0
        assert calculator.results.program_cost == 550000


class TestEditing:
    """Test input edits."""

    def test_update_recalculates(self, calculator):
        """Test an edit is applied and results recomputed immediately."""
        results = calculator.update_input("employees", "1000")
        assert calculator.inputs.employees == 1000
        assert results.program_cost == 550000
        assert calculator.results is results

    def test_update_with_attribute_name(self, calculator):
        """Test edits may use snake_case names."""
        calculator.update_input("avg_salary", 0)
        assert calculator.results.productivity_gains == 0

    def test_malformed_value_becomes_zero(self, calculator):
        """Test unparseable text is treated as 0."""
        results = calculator.update_input("employees", "lots")
        assert calculator.inputs.employees == 0
        assert results.total_return == 0
        assert results.program_cost == 275000

    def test_huge_integer_becomes_zero(self, calculator):
        """Test an integer too large for a float does not raise."""
        results = calculator.update_input("employees", 10 ** 400)
        assert calculator.inputs.employees == 0
        assert results.program_cost == 275000

    def test_edit_does_not_mutate_previous_snapshot(self, calculator):
        """Test inputs are replaced, not mutated."""
        before = calculator.inputs
        calculator.update_input("turnoverRate", "12%")
        assert before.turnover_rate == 10.1
        assert calculator.inputs.turnover_rate == 12

    def test_unknown_field(self, calculator):
        """Test unknown fields raise and leave state unchanged."""
        with pytest.raises(UnknownInputError):
            calculator.update_input("bonus", "100")
        assert calculator.inputs == Inputs()

    def test_unknown_field_is_value_error(self, calculator):
        """Test callers can catch ValueError."""
        with pytest.raises(ValueError, match="bonus"):
            calculator.update_input("bonus", "100")

    def test_update_inputs(self, calculator):
        """Test bulk edits."""
        results = calculator.update_inputs(
            {"employees": "1000", "avgSalary": "60,000", "turnoverRate": "15"}
        )
        assert results.turnover_savings == 540000
        assert calculator.inputs.absenteeism_rate == 2.2

    def test_reset(self, calculator):
        """Test reset restores defaults."""
        calculator.update_input("employees", "10")
        results = calculator.reset()
        assert calculator.inputs == Inputs()
        assert results.roi_percent == 334


class TestDisplay:
    """Test formatted output."""

    def test_display(self, calculator):
        """Test results are keyed by page element id."""
        display = calculator.display()
        assert display["managerTimeSaved"] == "$6,822"
        assert display["roiPercent"] == "334%"

    def test_format_input(self, calculator):
        """Test the echo formatting of each field type."""
        calculator.update_input("avgSalary", "90000")
        assert calculator.format_input("avgSalary") == "90,000"
        assert calculator.format_input("turnoverRate") == "10.1"
        assert calculator.format_input("employees") == "500"

    def test_formatted_inputs(self, calculator):
        """Test every field is formatted."""
        assert calculator.formatted_inputs() == {
            "employees": "500",
            "avgSalary": "82,160",
            "turnoverRate": "10.1",
            "managers": "50",
            "avgManagerSalary": "85,280",
            "absenteeismRate": "2.2",
        }
