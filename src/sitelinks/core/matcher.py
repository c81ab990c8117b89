"""Glob matching over document paths."""

from collections.abc import Callable, Iterable, Sequence
from pathlib import PurePosixPath
from typing import cast

from pathspec import PathSpec

DEFAULT_MATCH = "**/*"


class PathMatcher:
    """Predicate selecting documents by glob patterns.

    Patterns use gitwildmatch syntax, so a pattern without a slash such as
    ``*.md`` matches at any depth ("guide/setup.md" included), not only at
    the root. Anchor it with a leading slash (``/*.md``) to select root-level
    files only.

    Unless ``dot`` is enabled, a path segment starting with a dot
    (".git/config", "a/.hidden") only matches when a pattern spells out a
    dot-prefixed segment for it, as in ``.well-known/**`` or ``**/.*``.
    """

    __slots__ = ("_dot", "_dot_segments", "_patterns", "_spec")

    def __init__(
        self,
        patterns: str | Sequence[str] = DEFAULT_MATCH,
        *,
        dot: bool = False,
    ) -> None:
        """Initialize matcher.

        Args:
            patterns: Glob pattern or list of patterns
            dot: Whether wildcards may match dot-prefixed segments
        """
        self._patterns = [patterns] if isinstance(patterns, str) else list(patterns)
        self._dot = dot
        self._dot_segments = [
            segment
            for pattern in self._patterns
            for segment in pattern.lstrip("!").split("/")
            if segment.startswith(".")
        ]
        from_lines = cast("Callable[[str, Iterable[str]], PathSpec]", PathSpec.from_lines)
        self._spec = from_lines("gitwildmatch", self._patterns)

    @property
    def patterns(self) -> list[str]:
        """Configured glob patterns."""
        return list(self._patterns)

    def __call__(self, path: str) -> bool:
        """Check if a document path is selected.

        Args:
            path: Canonical document path

        Returns:
            True if path matches any pattern
        """
        if not self._dot:
            for part in path.split("/"):
                if part.startswith(".") and not self._names_dot_segment(part):
                    return False
        return self._spec.match_file(path)

    def _names_dot_segment(self, part: str) -> bool:
        """Check if a pattern explicitly matches a dot-prefixed segment."""
        return any(PurePosixPath(part).match(segment) for segment in self._dot_segments)
