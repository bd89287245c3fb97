"""
Jinja2 template and static file locations for the calculator page.
"""

from pathlib import Path

from fastapi.templating import Jinja2Templates

UI_DIR = Path(__file__).resolve().parent / "ui"
STATIC_DIR = UI_DIR / "static"

templates = Jinja2Templates(directory=str(UI_DIR / "templates"))
