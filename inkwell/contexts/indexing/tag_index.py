"""
Tag index construction.

Groups posts by tag into an ordered index: tags alphabetically
(case-insensitive), and each tag's posts newest first.
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Set

from inkwell.contexts.content.post_data_structure import Post
from inkwell.contexts.indexing.anchors import tag_anchor_id
from inkwell.contexts.indexing.logger import _log_debug, _log_info, _log_warning
from inkwell.utils.timestamp import to_iso8601


@dataclass(frozen=True)
class TagEntry:
    """One post listed under a tag. source_path identifies the post when URLs collide."""

    url: str
    title: str
    date: datetime
    source_path: Optional[Path] = None

    @property
    def iso_date(self) -> str:
        return to_iso8601(self.date)

    @classmethod
    def from_post(cls, post: Post) -> "TagEntry":
        return cls(url=post.url, title=post.title, date=post.date, source_path=post.source_path)


@dataclass
class TagGroup:
    """
    A tag heading and its posts.

    Attributes:
        name: Tag name as written in front matter
        anchor_id: Unique id for the heading element
        entries: Posts carrying this tag, newest first
    """

    name: str
    anchor_id: str
    entries: List[TagEntry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)


class TagIndex:
    """
    Ordered collection of TagGroups.

    Iterates groups in display order; groups can also be looked up by tag name.
    """

    def __init__(self, groups: List[TagGroup]):
        self.groups = groups
        self._by_name = {group.name: group for group in groups}

    def __iter__(self) -> Iterator[TagGroup]:
        return iter(self.groups)

    def __len__(self) -> int:
        return len(self.groups)

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def get(self, name: str) -> Optional[TagGroup]:
        return self._by_name.get(name)

    @property
    def tag_names(self) -> List[str]:
        return [group.name for group in self.groups]

    @property
    def post_count(self) -> int:
        """Number of distinct posts across all tags."""
        return len({entry for group in self.groups for entry in group.entries})


def group_posts_by_tag(posts: Iterable[Post]) -> Dict[str, List[Post]]:
    """
    Map each tag name to the posts carrying it.

    Tag names compare exactly, so "Clojure" and "clojure" are separate tags.
    Posts keep their input order within each tag.
    """
    groups: Dict[str, List[Post]] = {}
    for post in posts:
        for tag in post.tags:
            groups.setdefault(tag, []).append(post)
    return groups


def _tag_sort_key(name: str):
    return (name.casefold(), name)


def _entry_sort_key(post: Post):
    # Newest first
    return (-post.date.timestamp(), post.title.casefold(), post.url)


def build_tag_index(posts: Iterable[Post]) -> TagIndex:
    """
    Build the tag index for a set of posts.

    Tags are ordered alphabetically, ignoring case, with the raw name as a
    tie-break. Each tag's posts are ordered by date descending, then title,
    then URL. When two tags lowercase to the same anchor id the later one gets
    a numeric suffix ("-2", "-3", ...).

    Args:
        posts: Published posts

    Returns:
        TagIndex
    """
    grouped = group_posts_by_tag(posts)

    groups: List[TagGroup] = []
    used_ids: Set[str] = set()

    for name in sorted(grouped, key=_tag_sort_key):
        base_id = tag_anchor_id(name)
        anchor_id = base_id
        suffix = 1
        while anchor_id in used_ids:
            suffix += 1
            anchor_id = f"{base_id}-{suffix}"
        if anchor_id != base_id:
            _log_warning(f"Tag '{name}' collides with another tag's anchor; using id '{anchor_id}'")
        used_ids.add(anchor_id)

        entries = [TagEntry.from_post(post) for post in sorted(grouped[name], key=_entry_sort_key)]
        groups.append(TagGroup(name=name, anchor_id=anchor_id, entries=entries))
        _log_debug(f"{name}: {len(entries)} posts")

    index = TagIndex(groups)
    _log_info(f"Indexed {index.post_count} posts under {len(index)} tags")
    return index
