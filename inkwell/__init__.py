"""
Inkwell - static blog tooling for tag index pages

Reads markdown posts with YAML front matter and renders the site's
tag-listing page.

Architecture:
- Content Context: Post loading, front matter and permalinks
- Indexing Context: Grouping posts by tag and ordering the index
- Rendering Context: Jinja2 templates and page output
"""

__version__ = "0.1.0"
