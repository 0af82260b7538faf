"""Unit tests for tag grouping, ordering and anchor ids."""

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from inkwell.contexts.content.post_data_structure import Post
from inkwell.contexts.indexing import (
    TagEntry,
    build_tag_index,
    group_posts_by_tag,
    tag_anchor_id,
)


def make_post(title, day, tags, url=None):
    date = datetime(2019, 3, day, tzinfo=timezone.utc)
    slug = title.lower().replace(" ", "-")
    return Post(
        source_path=Path(f"2019-03-{day:02d}-{slug}.md"),
        slug=slug,
        title=title,
        date=date,
        tags=tags,
        url=url or f"/2019/03/{day:02d}/{slug}.html",
    )


@pytest.mark.unit
class TestTagAnchorId:
    """Test lowercase URI-escaped anchor ids."""

    def test_lowercases(self):
        assert tag_anchor_id("Clojure") == "clojure"

    def test_space_is_escaped(self):
        assert tag_anchor_id("Data Structures") == "data%20structures"

    def test_reserved_characters_kept(self):
        assert tag_anchor_id("C++") == "c++"
        assert tag_anchor_id("a/b:c") == "a/b:c"

    def test_non_ascii_is_utf8_escaped(self):
        assert tag_anchor_id("Bäume") == "b%C3%A4ume"


@pytest.mark.unit
def test_group_posts_by_tag_is_case_sensitive():
    posts = [make_post("One", 1, ["Clojure"]), make_post("Two", 2, ["clojure", "Clojure"])]
    grouped = group_posts_by_tag(posts)

    assert set(grouped) == {"Clojure", "clojure"}
    assert [p.title for p in grouped["Clojure"]] == ["One", "Two"]


@pytest.mark.unit
def test_tags_sorted_alphabetically_ignoring_case():
    posts = [
        make_post("One", 1, ["zippers", "Arrays"]),
        make_post("Two", 2, ["hash-maps", "btrees"]),
    ]
    index = build_tag_index(posts)

    assert index.tag_names == ["Arrays", "btrees", "hash-maps", "zippers"]


@pytest.mark.unit
def test_posts_sorted_newest_first():
    posts = [
        make_post("Oldest", 1, ["vectors"]),
        make_post("Newest", 20, ["vectors"]),
        make_post("Middle", 10, ["vectors"]),
    ]
    index = build_tag_index(posts)
    titles = [entry.title for entry in index.get("vectors").entries]

    assert titles == ["Newest", "Middle", "Oldest"]


@pytest.mark.unit
def test_same_date_ties_broken_by_title():
    posts = [make_post("Beta", 5, ["t"]), make_post("alpha", 5, ["t"])]
    index = build_tag_index(posts)

    assert [e.title for e in index.get("t").entries] == ["alpha", "Beta"]


@pytest.mark.unit
def test_offsets_compare_by_instant():
    early = make_post("Early", 1, ["t"])
    # 09:00 at +10:00 is 23:00 UTC on the previous day
    local_morning = Post(
        source_path=Path("x.md"),
        slug="x",
        title="Local morning",
        date=datetime(2019, 3, 1, 9, 0, tzinfo=timezone(timedelta(hours=10))),
        tags=["t"],
        url="/x.html",
    )
    index = build_tag_index([local_morning, early])

    assert [e.title for e in index.get("t").entries] == ["Early", "Local morning"]


@pytest.mark.unit
def test_colliding_anchor_ids_get_suffix():
    posts = [make_post("One", 1, ["Clojure", "clojure", "CLOJURE"])]
    index = build_tag_index(posts)

    ids = {group.name: group.anchor_id for group in index}
    assert ids == {"CLOJURE": "clojure", "Clojure": "clojure-2", "clojure": "clojure-3"}


@pytest.mark.unit
def test_index_lookup_and_counts():
    posts = [
        make_post("One", 1, ["a", "b"]),
        make_post("Two", 2, ["b"]),
        make_post("Untagged", 3, []),
    ]
    index = build_tag_index(posts)

    assert len(index) == 2
    assert "a" in index
    assert "missing" not in index
    assert index.get("missing") is None
    assert len(index.get("b")) == 2
    assert index.post_count == 2


@pytest.mark.unit
def test_empty_index():
    index = build_tag_index([])
    assert len(index) == 0
    assert index.post_count == 0


@pytest.mark.unit
def test_tag_entry_iso_date():
    entry = TagEntry(
        url="/a.html",
        title="A",
        date=datetime(2019, 3, 1, 9, 30, 15, 123456, tzinfo=timezone.utc),
    )
    assert entry.iso_date == "2019-03-01T09:30:15+00:00"


@pytest.mark.unit
def test_post_count_keeps_posts_with_colliding_urls():
    posts = [
        make_post("One", 1, ["a"], url="/same.html"),
        make_post("Two", 2, ["a", "b"], url="/same.html"),
    ]
    index = build_tag_index(posts)

    assert index.post_count == 2


@pytest.mark.unit
def test_tag_entry_from_post_keeps_source_path():
    post = make_post("One", 1, ["a"])
    assert TagEntry.from_post(post).source_path == post.source_path
