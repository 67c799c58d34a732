from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class PostError(Exception):
    """Base class for failures while reading the post store."""


class PostNotFoundError(PostError):
    """The requested slug or posts directory does not exist."""

    def __init__(self, message: str, slug: Optional[str] = None) -> None:
        super().__init__(message)
        self.slug = slug


class PostParseError(PostError):
    """A post file has malformed or incomplete front-matter."""

    def __init__(self, path: Union[str, Path], reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = Path(path)
        self.reason = reason


class PostIOError(PostError):
    """The file system refused a read (permissions, transient I/O)."""

    def __init__(self, path: Union[str, Path], reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = Path(path)
        self.reason = reason
