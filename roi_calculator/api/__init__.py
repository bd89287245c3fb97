"""
API routes for the ROI calculator.
"""

from fastapi import APIRouter

from roi_calculator.api import calculations

router = APIRouter()

# Include sub-routers
router.include_router(calculations.router, prefix="/calculate", tags=["calculations"])
