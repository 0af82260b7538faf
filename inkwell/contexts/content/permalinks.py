"""
Permalink generation.

Builds a post URL from a permalink style or pattern. Named styles:

    date     /:categories/:year/:month/:day/:title:output_ext
    pretty   /:categories/:year/:month/:day/:title/
    ordinal  /:categories/:year/:y_day/:title:output_ext
    none     /:categories/:title:output_ext

Any other value is used as a pattern with the same placeholders.
"""

import re
from datetime import datetime
from typing import Dict, List
from urllib.parse import quote

PERMALINK_STYLES = {
    "date": "/:categories/:year/:month/:day/:title:output_ext",
    "pretty": "/:categories/:year/:month/:day/:title/",
    "ordinal": "/:categories/:year/:y_day/:title:output_ext",
    "none": "/:categories/:title:output_ext",
}

OUTPUT_EXT = ".html"

PLACEHOLDER_PATTERN = re.compile(r":([a-z_]+)")

# Characters left as-is when escaping a URL path
PATH_SAFE_CHARS = "/:@!$&'()*+,;=-._~"


def resolve_pattern(permalink: str) -> str:
    """Expand a named permalink style, or return a custom pattern unchanged."""
    return PERMALINK_STYLES.get(permalink, permalink)


def url_placeholders(date: datetime, slug: str, categories: List[str]) -> Dict[str, str]:
    """Values available to a permalink pattern."""
    return {
        "year": f"{date.year:04d}",
        "short_year": f"{date.year % 100:02d}",
        "month": f"{date.month:02d}",
        "i_month": str(date.month),
        "day": f"{date.day:02d}",
        "i_day": str(date.day),
        "y_day": f"{date.timetuple().tm_yday:03d}",
        "hour": f"{date.hour:02d}",
        "minute": f"{date.minute:02d}",
        "second": f"{date.second:02d}",
        "title": slug,
        "slug": slug,
        "categories": "/".join(category.lower() for category in categories),
        "output_ext": OUTPUT_EXT,
    }


def build_permalink(
    date: datetime,
    slug: str,
    categories: List[str],
    pattern: str = "date",
    baseurl: str = "",
) -> str:
    """
    Build a site-relative URL for a post.

    Unknown placeholders are left in place. Repeated slashes collapse and
    the path is percent-escaped.

    Args:
        date: Post date (placeholders use its own timezone)
        slug: Post slug
        categories: Post categories
        pattern: Permalink style name or pattern
        baseurl: Prefix such as "/blog"

    Returns:
        URL path, always starting with "/"

    Examples:
        build_permalink(datetime(2019, 3, 1), "persistent-vectors", [])
        # "/2019/03/01/persistent-vectors.html"

        build_permalink(datetime(2019, 3, 1), "persistent-vectors", ["Lisp"], "pretty", "/blog")
        # "/blog/lisp/2019/03/01/persistent-vectors/"
    """
    values = url_placeholders(date, slug, categories)
    path = PLACEHOLDER_PATTERN.sub(
        lambda m: values.get(m.group(1), m.group(0)), resolve_pattern(pattern)
    )

    url = f"/{baseurl.strip('/')}/{path}" if baseurl.strip("/") else f"/{path}"
    url = re.sub(r"/{2,}", "/", url)
    return quote(url, safe=PATH_SAFE_CHARS)
