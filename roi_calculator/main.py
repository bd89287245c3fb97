"""
Main FastAPI application entry point.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from fastapi.responses import HTMLResponse

from roi_calculator import __version__
from roi_calculator.config import get_settings
from roi_calculator.api import router as api_router
from roi_calculator.calculations.parsing import FIELD_NAMES
from roi_calculator.services.calculator import ROICalculator
from roi_calculator.templating import STATIC_DIR, templates

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Return on investment estimator for employee financial wellbeing programs",
    version=__version__,
    debug=settings.debug,
)

# Mount static files
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/", response_class=HTMLResponse)
async def home(request: Request):
    """Render the calculator page with default inputs and results."""
    calculator = ROICalculator()
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "title": settings.app_name,
            "fields": FIELD_NAMES,
            "inputs": calculator.formatted_inputs(),
            "display": calculator.display(),
        },
    )


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy", "version": __version__}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "roi_calculator.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
