"""
Post Data Structures

Defines data classes for blog posts and the result of loading a posts directory.
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple


@dataclass
class Post:
    """
    A single blog post.

    Attributes:
        source_path: Markdown file the post was read from
        slug: URL slug (front matter 'slug', otherwise from the filename)
        title: Post title
        date: Publication date, always timezone-aware
        tags: Tag names in front matter order, deduplicated
        categories: Category names in front matter order, deduplicated
        layout: Layout name (default "post")
        mermaid: Whether diagram rendering is enabled for the post
        published: False for drafts hidden with 'published: false'
        url: Site-relative URL including baseurl
        body: Markdown body following the front matter
        extra: All other front matter keys
    """

    source_path: Path
    slug: str
    title: str
    date: datetime
    tags: List[str] = field(default_factory=list)
    categories: List[str] = field(default_factory=list)
    layout: str = "post"
    mermaid: bool = False
    published: bool = True
    url: str = ""
    body: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass
class LoadResult:
    """Result from load_posts()."""

    posts: List[Post] = field(default_factory=list)
    errors: List[Tuple[Path, str]] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)
    posts_dir: Optional[Path] = None

    @property
    def success(self) -> bool:
        return not self.errors
