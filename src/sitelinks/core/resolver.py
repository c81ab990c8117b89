"""Resolution of links, paths and document handles into canonical paths."""

import posixpath
from collections.abc import Mapping

from sitelinks.core.types import (
    AbsolutePath,
    CanonicalPath,
    Empty,
    HandleRef,
    RelativePath,
    Resolvable,
    UnresolvableInputError,
)


class HandleIndex:
    """Reverse index from document handles to their paths.

    Keyed by identity, never by equality, so two documents with equal
    contents still map to their own paths. Built once per document set and
    shared by every resolver over that set; the set must not change
    afterwards.
    """

    __slots__ = ("_entries",)

    def __init__(self, documents: Mapping[str, object]) -> None:
        self._entries: dict[int, tuple[str, object]] = {}
        for path, handle in documents.items():
            # First key wins when one handle is stored under several paths
            self._entries.setdefault(id(handle), (path, handle))

    def __len__(self) -> int:
        return len(self._entries)

    def find(self, handle: object) -> str | None:
        """Return the path a handle is stored under, None if it is not stored."""
        entry = self._entries.get(id(handle))
        if entry is None or entry[1] is not handle:
            return None
        return entry[0]


class Resolver:
    """Resolves inputs relative to one document of a document set.

    Handles are matched by identity through a HandleIndex. Pass a shared
    index when creating many resolvers over the same document set.
    """

    __slots__ = ("_current_path", "_handle_index")

    def __init__(
        self,
        documents: Mapping[str, object],
        current_path: str,
        *,
        handle_index: HandleIndex | None = None,
    ) -> None:
        """Initialize resolver.

        Args:
            documents: Document set mapping canonical paths to handles
            current_path: Canonical path of the current document
            handle_index: Prebuilt index over documents, built here if None
        """
        self._current_path = current_path
        if handle_index is None:
            handle_index = HandleIndex(documents)
        self._handle_index = handle_index

    @property
    def current_path(self) -> str:
        """Canonical path relative inputs are resolved against."""
        return self._current_path

    @property
    def handle_index(self) -> HandleIndex:
        """Reverse index used for handle lookups."""
        return self._handle_index

    def classify(self, value: object) -> Resolvable:
        """Convert a raw input into a resolvable variant.

        Args:
            value: Document handle or path string

        Returns:
            Matching Resolvable variant

        Raises:
            UnresolvableInputError: If the value is neither a string nor a
                handle stored in the document set
        """
        if isinstance(value, HandleRef | AbsolutePath | RelativePath | Empty):
            return value

        if not isinstance(value, str):
            path = self._handle_index.find(value)
            if path is not None:
                return HandleRef(path=CanonicalPath(path), handle=value)
            raise UnresolvableInputError(value)

        if not value:
            return Empty()
        if value.startswith("/"):
            return AbsolutePath(value)
        return RelativePath(value)

    def resolve(self, value: object) -> CanonicalPath:
        """Resolve an input into a canonical path.

        Args:
            value: Document handle, path string or Resolvable variant

        Returns:
            Canonical path without leading slash ("" for the root)

        Raises:
            UnresolvableInputError: If the value cannot be classified
        """
        resolvable = self.classify(value)

        if isinstance(resolvable, HandleRef):
            return resolvable.path
        if isinstance(resolvable, Empty):
            return CanonicalPath("")
        if isinstance(resolvable, AbsolutePath):
            return CanonicalPath(resolvable.path[1:])
        return self._resolve_relative(resolvable.path)

    def _resolve_relative(self, path: str) -> CanonicalPath:
        """Resolve a path against the directory of the current document."""
        # normpath clamps ".." at "/", so results never escape the root
        joined = posixpath.join("/", self._current_path, "..", path)
        result = posixpath.normpath(joined).lstrip("/")
        if path.endswith("/"):
            result += "/"
        return CanonicalPath(result)
