"""Jinja2 템플릿 설정."""

from pathlib import Path

from fastapi.templating import Jinja2Templates

from apps.pastes_web.domain.relative_time import format_relative_time

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["relative_time"] = format_relative_time
