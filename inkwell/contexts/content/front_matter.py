"""
Front matter parsing.

Posts open with a YAML block fenced by '---' lines:

    ---
    layout: post
    title: Persistent vectors, part 1
    date: 2019-03-01 09:30:00 +0100
    tags: [data-structures, clojure]
    mermaid: true
    ---
    Body text...

YAML is loaded through OmegaConf, like _config.yml. Dates and label lists are
normalized here so later stages only ever see aware datetimes and clean lists.
"""

import io
import re
from datetime import date, datetime, timedelta, timezone, tzinfo
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml
from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException

from inkwell.contexts.content.exceptions import FrontMatterError, PostDateError

FRONT_MATTER_DELIMITER = "---"

DATE_PATTERN = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d{1,2})-(?P<day>\d{1,2})"
    r"(?:[ T]+(?P<hour>\d{1,2}):(?P<minute>\d{2})(?::(?P<second>\d{2})(?:\.(?P<fraction>\d+))?)?)?"
    r"\s*(?P<offset>Z|[+-]\d{2}:?\d{2})?$"
)

# Jekyll-style post filename: 2019-03-01-persistent-vectors.md
FILENAME_PATTERN = re.compile(r"^(?P<date>\d{4}-\d{2}-\d{2})-(?P<slug>.+)$")


def split_front_matter(text: str, source_path: Optional[Path] = None) -> Tuple[Dict[str, Any], str]:
    """
    Split a post into its front matter mapping and body.

    Args:
        text: Full file contents
        source_path: Post path, used in error messages

    Returns:
        (metadata dict, body string). Text without front matter gives ({}, text).

    Raises:
        FrontMatterError: If the block is unterminated, malformed, or not a mapping
    """
    text = text.lstrip("\ufeff")
    lines = text.splitlines(keepends=True)

    if not lines or lines[0].rstrip() != FRONT_MATTER_DELIMITER:
        return {}, text

    for end, line in enumerate(lines[1:], start=1):
        if line.rstrip() in (FRONT_MATTER_DELIMITER, "..."):
            break
    else:
        raise FrontMatterError("Front matter is not terminated by '---'", source_path)

    block = "".join(lines[1:end])
    body = "".join(lines[end + 1 :])

    if not block.strip():
        return {}, body

    try:
        loaded = OmegaConf.load(io.StringIO(block))
    except (yaml.YAMLError, OmegaConfBaseException, OSError) as e:
        raise FrontMatterError(f"Invalid YAML front matter: {e}", source_path, block) from e

    if not isinstance(loaded, DictConfig):
        raise FrontMatterError("Front matter must be a mapping", source_path, block)

    return OmegaConf.to_container(loaded, resolve=False), body


def normalize_labels(value: Any) -> List[str]:
    """
    Normalize a tags/categories value into a clean list.

    Accepts a list or a whitespace-separated string. Labels are stripped,
    blanks dropped, and duplicates removed keeping the first occurrence.

    Examples:
        normalize_labels("clojure  data-structures clojure")
        # ["clojure", "data-structures"]

        normalize_labels(["Persistent data", " ", 2019])
        # ["Persistent data", "2019"]
    """
    if value is None:
        return []
    if isinstance(value, str):
        candidates = value.split()
    elif isinstance(value, (list, tuple)):
        candidates = [str(item).strip() for item in value if item is not None]
    else:
        candidates = [str(value).strip()]

    labels: List[str] = []
    for label in candidates:
        if label and label not in labels:
            labels.append(label)
    return labels


def _parse_offset(offset: str) -> tzinfo:
    if offset == "Z":
        return timezone.utc
    sign = -1 if offset[0] == "-" else 1
    digits = offset[1:].replace(":", "")
    hours, minutes = int(digits[:2]), int(digits[2:])
    if hours > 23 or minutes > 59:
        raise ValueError(f"offset {offset} out of range")
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


def parse_post_date(value: Any, tz: tzinfo, source_path: Optional[Path] = None) -> datetime:
    """
    Parse a front matter date into an aware datetime.

    Accepts date/datetime objects and strings such as:
        2019-03-01
        2019-03-01 09:30
        2019-03-01 09:30:00 +0100
        2019-03-01T09:30:00+01:00
        2019-03-01T08:30:00Z

    Naive values are localized to tz.

    Raises:
        PostDateError: If the value is not a recognized date
    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        match = DATE_PATTERN.match(value.strip())
        if not match:
            raise PostDateError("Unrecognized date format", value, source_path)
        parts = match.groupdict()
        fraction = (parts["fraction"] or "0")[:6].ljust(6, "0")
        try:
            dt = datetime(
                int(parts["year"]),
                int(parts["month"]),
                int(parts["day"]),
                int(parts["hour"] or 0),
                int(parts["minute"] or 0),
                int(parts["second"] or 0),
                int(fraction),
            )
        except ValueError as e:
            raise PostDateError(f"Invalid date: {e}", value, source_path) from e
        if parts["offset"]:
            try:
                dt = dt.replace(tzinfo=_parse_offset(parts["offset"]))
            except ValueError as e:
                raise PostDateError("Invalid UTC offset", value, source_path) from e
    else:
        raise PostDateError("Date must be a string", value, source_path)

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=tz)
    return dt


def parse_post_filename(name: str) -> Tuple[Optional[date], str]:
    """
    Split a Jekyll-style post filename into its date and slug.

    Examples:
        parse_post_filename("2019-03-01-persistent-vectors.md")
        # (date(2019, 3, 1), "persistent-vectors")

        parse_post_filename("about.md")
        # (None, "about")
    """
    stem = Path(name).stem
    match = FILENAME_PATTERN.match(stem)
    if not match:
        return None, stem
    try:
        post_date = date.fromisoformat(match.group("date"))
    except ValueError:
        return None, stem
    return post_date, match.group("slug")
