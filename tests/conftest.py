"""Shared fixtures: sample blog sites written to tmp_path."""

import sys
from pathlib import Path

import pytest
from loguru import logger

PERSISTENT_VECTORS_POST = """---
layout: post
title: "Persistent vectors: sharing structure"
date: 2019-03-01 09:30:00 +0100
tags: [data-structures, Clojure]
mermaid: true
---
A persistent vector keeps every prior version alive by sharing the
unchanged parts of its tree with each new version.
"""

RRB_TREES_POST = """---
layout: post
title: RRB trees & concatenation
date: 2019-04-12
tags:
  - data-structures
  - Data Structures
---
Relaxed radix balanced trees make concatenation cheap.
"""

TRANSIENTS_POST = """---
layout: post
title: Transients
tags: Clojure performance
---
Dated by its filename.
"""


def write_post(posts_dir: Path, filename: str, text: str) -> Path:
    posts_dir.mkdir(parents=True, exist_ok=True)
    path = posts_dir / filename
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_loguru():
    """Restore a plain stderr sink after tests that reconfigure loguru."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="DEBUG")


@pytest.fixture
def blog_site(tmp_path):
    """Site with three posts and a _config.yml."""
    site = tmp_path / "blog"
    site.mkdir()
    (site / "_config.yml").write_text(
        "title: Notes on Data\nbaseurl: /blog\nauthor: Jo\n", encoding="utf-8"
    )
    posts_dir = site / "_posts"
    write_post(posts_dir, "2019-03-01-persistent-vectors.md", PERSISTENT_VECTORS_POST)
    write_post(posts_dir, "2019-04-12-rrb-trees.md", RRB_TREES_POST)
    write_post(posts_dir, "2019-05-20-transients.markdown", TRANSIENTS_POST)
    return site
