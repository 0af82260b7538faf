"""Custom exceptions for the content context with source file references."""

from pathlib import Path
from typing import Optional


class FrontMatterError(ValueError):
    """
    Exception raised when a post's front matter cannot be parsed or is incomplete.

    Attributes:
        message: Error description
        source_path: Post file the front matter came from
        snippet: The front matter text that failed to parse
    """

    def __init__(
        self,
        message: str,
        source_path: Optional[Path] = None,
        snippet: Optional[str] = None,
    ):
        self.message = message
        self.source_path = source_path
        self.snippet = snippet

        parts = [message]

        if source_path:
            parts.append(f"\nPost: {source_path}")

        if snippet:
            snippet = snippet[:200] + "..." if len(snippet) > 200 else snippet
            parts.append(f"\nFront matter:\n{snippet}")

        super().__init__("\n".join(parts))


class PostDateError(ValueError):
    """
    Exception raised when a post date is missing or not in a recognized format.

    Attributes:
        message: Error description
        value: The raw date value
        source_path: Post file the date came from
    """

    def __init__(self, message: str, value=None, source_path: Optional[Path] = None):
        self.message = message
        self.value = value
        self.source_path = source_path

        parts = [message]
        if value is not None:
            parts.append(f"Value: {value!r}")
        if source_path:
            parts.append(f"Post: {source_path}")

        super().__init__("\n".join(parts))
