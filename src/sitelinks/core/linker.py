"""Relative links between documents of a site.

A Linker is bound to one document of a document set. It resolves both ends
of a link, computes the shortest relative path between their directories
and passes the result through an optional transform.
"""

import logging
import posixpath
from collections.abc import Callable, Mapping

from sitelinks.core.resolver import HandleIndex, Resolver
from sitelinks.core.types import CanonicalPath

logger = logging.getLogger(__name__)

# (link, from_resolved, to_resolved) -> link
LinkModifier = Callable[[str, CanonicalPath, CanonicalPath], str]


class Linker:
    """Link function bound to the current document.

    Call it as ``link(from, to)``, or use ``link.from_(x)`` and
    ``link.to(x)`` to link towards or away from the current document.
    ``link.resolve(x)`` exposes path resolution for templates and custom
    transforms.
    """

    __slots__ = ("_current", "_documents", "_modify_links", "_resolver")

    def __init__(
        self,
        documents: Mapping[str, object],
        current_path: str,
        *,
        modify_links: object = None,
        handle_index: HandleIndex | None = None,
    ) -> None:
        """Initialize linker.

        Args:
            documents: Document set mapping canonical paths to handles
            current_path: Canonical path of the current document
            modify_links: Transform applied to every link. Anything that is
                not callable (including None) leaves links unchanged.
            handle_index: Reverse index shared by linkers over the same
                document set, built here if None
        """
        self._documents = documents
        self._resolver = Resolver(documents, current_path, handle_index=handle_index)
        self._modify_links = modify_links
        if current_path in documents:
            self._current: object = documents[current_path]
        else:
            self._current = f"/{current_path}"

    @property
    def current_path(self) -> str:
        """Canonical path of the current document."""
        return self._resolver.current_path

    @property
    def documents(self) -> Mapping[str, object]:
        """Document set this linker resolves handles against."""
        return self._documents

    @property
    def handle_index(self) -> HandleIndex:
        """Reverse index used to resolve document handles."""
        return self._resolver.handle_index

    def __call__(self, from_: object, to: object) -> str:
        """Return a relative URL between two things.

        Args:
            from_: Document handle or path the link starts from
            to: Document handle or path the link points to

        Returns:
            Relative link, after the transform if one is configured

        Raises:
            UnresolvableInputError: If either side cannot be resolved
        """
        from_resolved = self._resolver.resolve(from_)
        to_resolved = self._resolver.resolve(to)

        from_dir, _ = split_resolved(from_resolved)
        to_dir, to_basename = split_resolved(to_resolved)

        logger.debug(
            f"Linking: {from_resolved} (/{'/'.join(from_dir)}) -> "
            f"{to_resolved} (/{'/'.join(to_dir)}, {to_basename})"
        )
        result = relative_dir(from_dir, to_dir)
        if result:
            result += "/"
        result += to_basename
        logger.debug(f"Link: {result}")

        if callable(self._modify_links):
            result = self._modify_links(result, from_resolved, to_resolved)
            logger.debug(f"After link modification: {result}")

        return result

    def from_(self, from_: object) -> str:
        """Shorthand for ``link(from_, current_document)``."""
        return self(from_, self._current)

    def to(self, to: object) -> str:
        """Shorthand for ``link(current_document, to)``."""
        return self(self._current, to)

    def resolve(self, value: object) -> CanonicalPath:
        """Resolve a handle or path into a canonical path.

        Accepts document handles stored in the document set, strings relative
        to the current document (``../whatever.html``) and strings relative
        to the root (``/root.html``).

        Raises:
            UnresolvableInputError: When unable to figure out the path
        """
        return self._resolver.resolve(value)


def split_resolved(resolved: str) -> tuple[list[str], str]:
    """Split a canonical path into directory segments and basename.

    Paths ending with a slash, and the root itself, are directories and have
    no basename.

    Args:
        resolved: Canonical path

    Returns:
        Tuple of (normalized directory segments, basename)
    """
    if not resolved or resolved.endswith("/"):
        return _normalize_segments(resolved), ""
    return _normalize_segments(f"{resolved}/.."), posixpath.basename(resolved)


def relative_dir(from_dir: list[str], to_dir: list[str]) -> str:
    """Compute the relative path between two directories.

    Follows POSIX ``relative()``: equal directories give an empty string and
    the result never carries a trailing slash.

    Args:
        from_dir: Directory segments the link starts in
        to_dir: Directory segments the link points into

    Returns:
        Relative path with "/" separators
    """
    common = 0
    for from_part, to_part in zip(from_dir, to_dir, strict=False):
        if from_part != to_part:
            break
        common += 1
    parts = [".."] * (len(from_dir) - common) + to_dir[common:]
    return "/".join(parts)


def _normalize_segments(path: str) -> list[str]:
    """Split a path into segments, folding "." and ".." at the virtual root."""
    segments: list[str] = []
    for part in path.split("/"):
        if not part or part == ".":
            continue
        if part == "..":
            if segments:
                segments.pop()
            continue
        segments.append(part)
    return segments
