"""
Markdown Utilities

Helper functions for formatting the tag index as markdown.
"""

from inkwell.contexts.indexing.tag_index import TagGroup, TagIndex
from inkwell.utils.config import SiteConfig
from inkwell.utils.timestamp import format_display_date


def _escape_link_text(text: str) -> str:
    return text.replace("[", "\\[").replace("]", "\\]")


def format_tag_group_markdown(group: TagGroup, date_format: str) -> str:
    """
    Format a single tag as markdown.

    ## tag
    - [Title](url) (date)
    - [Title](url) (date)
    """
    parts = [f"## {group.name}\n"]

    for entry in group.entries:
        date_text = format_display_date(entry.date, date_format)
        parts.append(f"- [{_escape_link_text(entry.title)}]({entry.url}) ({date_text})")

    return "\n".join(parts)


def format_tag_index_markdown(index: TagIndex, config: SiteConfig) -> str:
    """
    Format the whole tag index as markdown.

    Args:
        index: TagIndex from build_tag_index()
        config: Site configuration (date_format)

    Returns:
        Markdown document ending with a newline
    """
    parts = ["# Tags"]
    for group in index:
        parts.append(format_tag_group_markdown(group, config.date_format))
    return "\n\n".join(parts) + "\n"
