"""
Tag page rendering.

Renders a TagIndex to HTML (tags.html.jinja) or markdown and writes it into
the site output directory.
"""

import time
from pathlib import Path
from typing import Optional

from jinja2 import TemplateError

from inkwell.contexts.indexing.tag_index import TagIndex
from inkwell.contexts.rendering.exceptions import TemplateRenderError
from inkwell.contexts.rendering.logger import _log_debug, _log_error, log_page_written
from inkwell.contexts.rendering.markdown_formatter import format_tag_index_markdown
from inkwell.contexts.rendering.template_registry import TemplateRegistry
from inkwell.utils.config import SiteConfig

TAGS_TEMPLATE = "tags.html.jinja"
OUTPUT_FORMATS = ("html", "markdown")


def render_tag_index(
    index: TagIndex,
    config: SiteConfig,
    registry: Optional[TemplateRegistry] = None,
) -> str:
    """
    Render the tag index page as HTML.

    Each tag becomes <h2 id="anchor">name</h2> followed by a list of
    <a href="url">title</a> <time datetime="iso">date</time> items.

    Args:
        index: TagIndex from build_tag_index()
        config: Site configuration (title, date_format)
        registry: Template registry to use. Defaults to the packaged templates

    Returns:
        HTML document

    Raises:
        TemplateRenderError: If the template is missing or fails to render
    """
    if registry is None:
        registry = TemplateRegistry()

    try:
        template = registry.get_template(TAGS_TEMPLATE)
        html = template.render(
            tags=list(index), site_title=config.title, date_format=config.date_format
        )
    except TemplateError as e:
        raise TemplateRenderError(
            "Failed to render tag index",
            template_name=TAGS_TEMPLATE,
            template_path=registry.get_template_path(TAGS_TEMPLATE),
            original_error=e,
        ) from e

    _log_debug(f"Rendered {len(index)} tags with {TAGS_TEMPLATE}")
    return html


def render_tag_page(index: TagIndex, config: SiteConfig, fmt: str = "html") -> str:
    """
    Render the tag index in the requested format.

    Raises:
        ValueError: If fmt is not "html" or "markdown"
    """
    if fmt == "html":
        return render_tag_index(index, config)
    if fmt == "markdown":
        return format_tag_index_markdown(index, config)
    raise ValueError(f"Unknown output format '{fmt}' (expected one of {', '.join(OUTPUT_FORMATS)})")


def write_tag_page(
    index: TagIndex,
    config: SiteConfig,
    output_path: Optional[Path] = None,
    fmt: str = "html",
) -> Path:
    """
    Render the tag index and write it to disk.

    Args:
        index: TagIndex from build_tag_index()
        config: Site configuration
        output_path: Destination file. Defaults to config.tags_page_path
            (with a .md suffix for markdown)
        fmt: "html" or "markdown"

    Returns:
        Path written
    """
    start = time.time()

    if output_path is None:
        output_path = config.tags_page_path
        if fmt == "markdown":
            output_path = output_path.with_suffix(".md")

    try:
        content = render_tag_page(index, config, fmt)
    except TemplateRenderError as e:
        _log_error(e.message)
        raise

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")

    log_page_written(output_path, len(index), time.time() - start)
    return output_path
