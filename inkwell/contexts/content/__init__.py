"""
Content Context

Responsibilities:
- Reads markdown posts and their YAML front matter
- Normalizes dates, tags and categories
- Derives post URLs from permalink settings

Owns: Post representation, front matter parsing, permalinks
Never: Decides how posts are grouped or rendered
"""

from inkwell.contexts.content.exceptions import FrontMatterError, PostDateError
from inkwell.contexts.content.post_data_structure import LoadResult, Post
from inkwell.contexts.content.post_loader import load_post, load_posts

__all__ = [
    # Loading
    "load_post",
    "load_posts",
    # Data structures
    "Post",
    "LoadResult",
    # Errors
    "FrontMatterError",
    "PostDateError",
]
