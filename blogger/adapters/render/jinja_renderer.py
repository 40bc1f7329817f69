"""Jinja2 renderer for backend templates."""

from collections.abc import Callable, Mapping
from datetime import datetime
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

TEMPLATES_DIR = Path(__file__).resolve().parent.parent.parent / "templates"


def format_datetime(value: datetime | None, fmt: str = "%Y-%m-%d %H:%M") -> str:
    return value.strftime(fmt) if value else ""


class JinjaRenderer:
    """Renders templates from a directory with HTML autoescaping.

    ``url_for`` is exposed to templates so they can link to named routes.
    """

    def __init__(
        self,
        template_dir: Path | None = None,
        url_for: Callable[..., str] | None = None,
    ) -> None:
        self.template_dir = template_dir or TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader(self.template_dir),
            autoescape=select_autoescape(["html", "htm", "xml"]),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["format_datetime"] = format_datetime
        if url_for is not None:
            self.env.globals["url_for"] = url_for

    def render(self, template_name: str, context: Mapping[str, Any]) -> str:
        return self.env.get_template(template_name).render(**context)
