"""
Post loading.

Reads markdown files from the posts directory into Post objects, applying
front matter, filename conventions and site configuration.
"""

import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from inkwell.contexts.content.exceptions import FrontMatterError, PostDateError
from inkwell.contexts.content.front_matter import (
    normalize_labels,
    parse_post_date,
    parse_post_filename,
    split_front_matter,
)
from inkwell.contexts.content.logger import _log_debug, _log_info, log_load_result
from inkwell.contexts.content.permalinks import build_permalink
from inkwell.contexts.content.post_data_structure import LoadResult, Post
from inkwell.utils.config import SiteConfig, coerce_bool

POST_EXTENSIONS = (".md", ".markdown")

# Front matter keys mapped onto Post attributes
RESERVED_KEYS = {
    "title",
    "date",
    "tags",
    "categories",
    "category",
    "layout",
    "mermaid",
    "published",
    "permalink",
    "slug",
}


def _flag(metadata: Dict[str, Any], key: str, default: bool, path: Path) -> bool:
    try:
        return coerce_bool(metadata.get(key), default)
    except ValueError as e:
        raise FrontMatterError(f"Invalid value for '{key}': {e}", path) from e


def load_post(path: Path, config: SiteConfig) -> Post:
    """
    Load a single post file.

    The date comes from front matter, falling back to the filename prefix.

    Args:
        path: Markdown file
        config: Site configuration (timezone, permalink, baseurl)

    Returns:
        Post

    Raises:
        FrontMatterError: If the file is not UTF-8, or front matter is malformed or has no title
        PostDateError: If no valid date is available
    """
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise FrontMatterError(f"Post is not valid UTF-8: {e}", path) from e
    metadata, body = split_front_matter(text, path)

    title = metadata.get("title")
    if title is None or not str(title).strip():
        raise FrontMatterError("Missing required field 'title'", path)

    filename_date, filename_slug = parse_post_filename(path.name)
    tz = config.tzinfo

    if metadata.get("date") is not None:
        date = parse_post_date(metadata["date"], tz, path)
    elif filename_date is not None:
        date = parse_post_date(filename_date, tz, path)
    else:
        raise PostDateError("No date in front matter or filename", source_path=path)

    slug = str(metadata.get("slug") or filename_slug)
    categories = normalize_labels(metadata.get("categories", metadata.get("category")))

    permalink = metadata.get("permalink")
    if permalink:
        url = build_permalink(date, slug, categories, str(permalink), config.baseurl)
    else:
        url = build_permalink(date, slug, categories, config.permalink, config.baseurl)

    extra: Dict[str, Any] = {k: v for k, v in metadata.items() if k not in RESERVED_KEYS}

    return Post(
        source_path=path,
        slug=slug,
        title=str(title).strip(),
        date=date,
        tags=normalize_labels(metadata.get("tags")),
        categories=categories,
        layout=str(metadata.get("layout") or "post"),
        mermaid=_flag(metadata, "mermaid", False, path),
        published=_flag(metadata, "published", True, path),
        url=url,
        body=body,
        extra=extra,
    )


def load_posts(
    posts_dir: Path,
    config: SiteConfig,
    strict: bool = False,
    now: Optional[datetime] = None,
) -> LoadResult:
    """
    Load every post in a directory.

    Unpublished posts are skipped, as are future-dated posts unless
    config.future is set. In strict mode the first broken post raises;
    otherwise its error is recorded and loading continues.

    Args:
        posts_dir: Directory of markdown posts (searched recursively)
        config: Site configuration
        strict: Raise on the first invalid post
        now: Reference time for the future-post check (defaults to current time)

    Returns:
        LoadResult with posts sorted newest first

    Raises:
        FileNotFoundError: If posts_dir does not exist
        FrontMatterError, PostDateError: In strict mode
    """
    if not posts_dir.is_dir():
        raise FileNotFoundError(f"Posts directory not found: {posts_dir}")

    start = time.time()
    now = now or datetime.now(timezone.utc)
    result = LoadResult(posts_dir=posts_dir)

    paths = sorted(
        p for p in posts_dir.rglob("*") if p.is_file() and p.suffix.lower() in POST_EXTENSIONS
    )
    _log_info(f"Reading {len(paths)} post files from {posts_dir}")

    for path in paths:
        try:
            post = load_post(path, config)
        except (FrontMatterError, PostDateError) as e:
            if strict:
                raise
            result.errors.append((path, str(e)))
            continue

        if not post.published:
            _log_debug(f"Skipping unpublished post {path.name}")
            result.skipped.append(path)
            continue

        if post.date > now and not config.future:
            _log_debug(f"Skipping future-dated post {path.name} ({post.date.isoformat()})")
            result.skipped.append(path)
            continue

        result.posts.append(post)

    result.posts.sort(key=lambda p: (p.date, p.source_path.name), reverse=True)

    log_load_result(posts_dir, result, time.time() - start)
    return result
