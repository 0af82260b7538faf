"""Anchor ids for tag headings."""

from urllib.parse import quote

# Unreserved and reserved URI characters kept literal by URI escaping
URI_SAFE_CHARS = "!#$&'()*+,/:;=?@[]~-._"


def tag_anchor_id(name: str) -> str:
    """
    Anchor id for a tag heading: the lowercased tag name, URI-escaped.

    Characters outside the URI character set (spaces, non-ASCII) are
    percent-encoded as UTF-8.

    Examples:
        tag_anchor_id("Data Structures")  # "data%20structures"
        tag_anchor_id("C++")              # "c++"
        tag_anchor_id("Persistenz-Bäume") # "persistenz-b%C3%A4ume"
    """
    return quote(name.lower(), safe=URI_SAFE_CHARS)
