"""
ROI Calculation Engine

Core calculation modules for estimating the return on an employee
financial-wellbeing program. The engine itself is a pure function of its
inputs; parsing and formatting sit at the boundary around it.
"""

from roi_calculator.calculations import roi, parsing, formatting

__all__ = ["roi", "parsing", "formatting"]
