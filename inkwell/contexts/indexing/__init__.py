"""
Indexing Context

Responsibilities:
- Groups posts by tag
- Orders tags and each tag's posts
- Assigns heading anchor ids

Owns: Tag index structure and ordering
Never: Reads files or produces markup
"""

from inkwell.contexts.indexing.anchors import tag_anchor_id
from inkwell.contexts.indexing.tag_index import (
    TagEntry,
    TagGroup,
    TagIndex,
    build_tag_index,
    group_posts_by_tag,
)

__all__ = [
    "tag_anchor_id",
    "group_posts_by_tag",
    "build_tag_index",
    "TagEntry",
    "TagGroup",
    "TagIndex",
]
