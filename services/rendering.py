from __future__ import annotations

from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from config.settings import Settings, get_settings
from models import AdoptersContent, STATUS_ORDER

TEMPLATES_DIR = Path(__file__).parent / "templates"
PAGE_TEMPLATE = "adopters.html.j2"


def is_link(source: str) -> bool:
    return source.startswith("http")


def build_environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "j2"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.tests["link"] = is_link
    return env


def render_adopters_page(content: AdoptersContent, settings: Optional[Settings] = None) -> str:
    """Render the adopters page (header, status snapshot, one card per adopter) as HTML."""
    settings = settings or get_settings()
    template = build_environment().get_template(PAGE_TEMPLATE)
    return template.render(
        title=settings.site_title,
        description=settings.site_description,
        technology=settings.tracked_technology,
        adopters=content.adopters,
        summary=[(status.label, content.summary.get(status, 0)) for status in STATUS_ORDER],
        last_updated=content.last_updated,
    )
