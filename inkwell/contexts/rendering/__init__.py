"""
Rendering Context

Responsibilities:
- Loads page templates
- Renders the tag index as HTML or markdown
- Writes pages into the site output directory

Owns: Templates, markup, output files
Never: Changes tag ordering or post content
"""

from inkwell.contexts.rendering.exceptions import TemplateRenderError
from inkwell.contexts.rendering.markdown_formatter import format_tag_index_markdown
from inkwell.contexts.rendering.tag_page import (
    render_tag_index,
    render_tag_page,
    write_tag_page,
)
from inkwell.contexts.rendering.template_registry import TemplateRegistry

__all__ = [
    "render_tag_index",
    "render_tag_page",
    "write_tag_page",
    "format_tag_index_markdown",
    "TemplateRegistry",
    "TemplateRenderError",
]
