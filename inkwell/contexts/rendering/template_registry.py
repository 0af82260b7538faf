from pathlib import Path
from typing import Callable, Dict, Optional

from jinja2 import Environment, FileSystemLoader, Template, TemplateNotFound, select_autoescape

from inkwell.utils.timestamp import format_display_date

TEMPLATES_PATH = Path(__file__).parent / "templates"


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 page templates.

    Templates live in inkwell/contexts/rendering/templates/ and use the standard
    Jinja2 delimiters. HTML templates are autoescaped.

    Built-in filters:
        display_date(date_format): strftime a datetime, ISO 8601 if the format is empty
    """

    def __init__(self, templates_path: Path = None, filters: Optional[Dict[str, Callable]] = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Template directory. Defaults to the packaged templates/
            filters: Extra Jinja2 filters (e.g., a configured date formatter)
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = templates_path
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(templates_path)),
            autoescape=select_autoescape(enabled_extensions=("html", "html.jinja", "xml")),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["display_date"] = format_display_date
        if filters:
            self.env.filters.update(filters)

    def get_template(self, name: str) -> Template:
        """
        Get a template by file name, loading and caching it if necessary.

        Args:
            name: Template file name (e.g., 'tags.html.jinja')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if name in self._cache:
            return self._cache[name]

        try:
            template = self.env.get_template(name)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template '{name}' not found at {self.templates_path / name}"
            ) from e

        self._cache[name] = template
        return template

    def get_template_path(self, name: str) -> Path:
        """Get the file path for a template."""
        return self.templates_path / name

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, name: str) -> bool:
        """Check if a template is in the cache."""
        return name in self._cache
