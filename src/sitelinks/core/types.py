"""Core type definitions.

Resolvable inputs are converted into one of a closed set of variants at the
API boundary so the resolver never has to guess what it was handed.
"""

from dataclasses import dataclass
from typing import NewType

# Root-relative path of a document or directory (e.g., "a/test/file.html", "a/")
# No leading slash; "" is the root; a trailing slash marks the directory itself
CanonicalPath = NewType("CanonicalPath", str)


class UnresolvableInputError(ValueError):
    """Raised when an input cannot be turned into a path."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Unable to determine a link: {value!r}")
        self.value = value


@dataclass(frozen=True)
class HandleRef:
    """Document handle found in the document set."""

    path: CanonicalPath
    handle: object


@dataclass(frozen=True)
class AbsolutePath:
    """Root-relative string such as "/guide/index.html"."""

    path: str


@dataclass(frozen=True)
class RelativePath:
    """String relative to the directory of the current document."""

    path: str


@dataclass(frozen=True)
class Empty:
    """Empty string, which stands for the site root."""


Resolvable = HandleRef | AbsolutePath | RelativePath | Empty
