"""
Email template loader and renderer.
Renders the Jinja2 templates shipped next to this module.
"""

import logging
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict

from jinja2 import Environment, FileSystemLoader, TemplateError

from backoffice.domain.models.value_objects import format_currency


logger = logging.getLogger(__name__)


class EmailTemplateLoader:
    """Loads and renders email templates using Jinja2."""

    def __init__(self, templates_dir: Path = None):
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True
        )
        self._register_filters()

    def _register_filters(self):
        """Register custom Jinja2 filters for email templates."""

        def currency_filter(value, currency="USD"):
            try:
                return format_currency(float(value), currency)
            except (TypeError, ValueError):
                return str(value)

        def date_filter(value, fmt="%Y-%m-%d"):
            if isinstance(value, (date, datetime)):
                return value.strftime(fmt)
            return "" if value is None else str(value)

        self.env.filters["currency"] = currency_filter
        self.env.filters["date"] = date_filter

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: File name, e.g. 'invoice_sent.html'
            context: Template variables

        Returns:
            Rendered content
        """
        enhanced_context = {
            **context,
            "current_year": datetime.now().year,
        }
        try:
            template = self.env.get_template(template_name)
        except TemplateError as e:
            logger.error(f"Failed to load template {template_name}: {str(e)}")
            raise
        rendered = template.render(**enhanced_context)
        logger.debug(f"Rendered template: {template_name}")
        return rendered

    def template_exists(self, template_name: str) -> bool:
        return (self.templates_dir / template_name).exists()
