"""
Application services module.
"""

from roi_calculator.services.calculator import ROICalculator, UnknownInputError

__all__ = ["ROICalculator", "UnknownInputError"]
