"""
Financial wellbeing ROI calculator.
"""

__version__ = "0.1.0"
