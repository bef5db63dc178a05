"""
Email template loader and renderer.
Handles Jinja2 templates for notification emails.
"""

import logging
from typing import Dict, Any, Optional
from pathlib import Path
from datetime import datetime
from zoneinfo import ZoneInfo

from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape

logger = logging.getLogger(__name__)

DEFAULT_DATETIME_FORMAT = "%m/%d/%Y, %I:%M:%S %p"


def format_localtime(
    value: Optional[datetime],
    tz_name: Optional[str] = None,
    fmt: str = DEFAULT_DATETIME_FORMAT
) -> str:
    """
    Render a timestamp for humans.

    Converts to ``tz_name`` when given, otherwise to the server's local zone.
    """
    if value is None:
        return "Unknown"
    if tz_name:
        local = value.astimezone(ZoneInfo(tz_name))
    else:
        local = value.astimezone()
    return local.strftime(fmt)


class EmailTemplateLoader:
    """Loads and renders email templates using Jinja2."""

    def __init__(self, templates_dir: Optional[Path] = None):
        """Initialize template loader with email templates directory."""
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"

        # User supplied text is escaped in HTML templates only
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True
        )

        self._register_filters()

    def _register_filters(self):
        """Register custom Jinja2 filters for email templates."""
        self.env.filters["localtime"] = format_localtime

    async def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render email template with context.

        Args:
            template_name: Name of template file (e.g., 'notification.html')
            context: Template context variables

        Returns:
            Rendered template content

        Raises:
            jinja2.TemplateNotFound: If the template does not exist
        """
        template = self.env.get_template(template_name)
        rendered = template.render(**context)

        logger.debug(f"Successfully rendered template: {template_name}")
        return rendered

    async def render_email(self, template: str, context: Dict[str, Any]) -> tuple[str, Optional[str]]:
        """
        Render the HTML body and, when a .txt template exists, a plain-text
        alternative.
        """
        html_content = await self.render_template(f"{template}.html", context)

        try:
            text_content = await self.render_template(f"{template}.txt", context)
        except TemplateNotFound:
            text_content = None

        return html_content, text_content

    def template_exists(self, template_name: str) -> bool:
        """Check if template file exists."""
        template_path = self.templates_dir / template_name
        return template_path.exists()

    def list_templates(self) -> list[str]:
        """List all available email templates."""
        return sorted(file_path.name for file_path in self.templates_dir.glob("*.html"))


_template_loader: Optional[EmailTemplateLoader] = None


def get_template_loader() -> EmailTemplateLoader:
    """Get singleton template loader instance."""
    global _template_loader
    if _template_loader is None:
        _template_loader = EmailTemplateLoader()
    return _template_loader
