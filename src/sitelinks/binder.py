"""Attach link helpers to the documents of a site build.

The build pipeline calls a RelativeLinks instance once per pass with the full
document set. Every selected document gets a Linker bound to its own path, so
templates can write ``link.to("/guide/")`` or ``link.from_(other_page)``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping, Sequence

from sitelinks.config import LinksConfig
from sitelinks.core.linker import Linker
from sitelinks.core.matcher import DEFAULT_MATCH, PathMatcher
from sitelinks.core.resolver import HandleIndex
from sitelinks.core.transforms import DEFAULT_EMPTY_LINK, make_link_rewriter

logger = logging.getLogger(__name__)


class RelativeLinks:
    """Binds a Linker to every matching document of a document set."""

    def __init__(
        self,
        *,
        link_property: str = "link",
        match: str | Sequence[str] = DEFAULT_MATCH,
        match_dot: bool = False,
        empty_link: str = DEFAULT_EMPTY_LINK,
        modify_links: object = None,
    ) -> None:
        """Initialize binder.

        Args:
            link_property: Key or attribute name the Linker is stored under
            match: Glob pattern(s) selecting documents by path
            match_dot: Whether dot-prefixed path segments may match
            empty_link: Placeholder used by the default transform
            modify_links: Link transform. None selects the default rewriter;
                any non-callable value (e.g. False) disables rewriting.
        """
        self._link_property = link_property
        self._matcher = PathMatcher(match, dot=match_dot)
        if modify_links is None:
            modify_links = make_link_rewriter(empty_link)
        self._modify_links = modify_links

    @classmethod
    def from_config(cls, config: LinksConfig) -> RelativeLinks:
        """Create binder from the [links] configuration section."""
        return cls(
            link_property=config.link_property,
            match=config.match,
            match_dot=config.match_dot,
            empty_link=config.empty_link,
            modify_links=None if config.rewrite_links else False,
        )

    @property
    def link_property(self) -> str:
        """Key or attribute name the Linker is stored under."""
        return self._link_property

    def matches(self, path: str) -> bool:
        """Check if a document path gets a link helper."""
        return self._matcher(path)

    def linker_for(
        self,
        documents: Mapping[str, object],
        path: str,
        handle_index: HandleIndex | None = None,
    ) -> Linker:
        """Create a Linker bound to one document."""
        return Linker(
            documents,
            path,
            modify_links=self._modify_links,
            handle_index=handle_index,
        )

    def __call__(self, documents: Mapping[str, object]) -> list[str]:
        """Attach link helpers to matching documents.

        The document set itself is not modified, only the selected handles.
        All linkers of one call share a single handle index.

        Args:
            documents: Document set mapping canonical paths to handles

        Returns:
            Paths of the documents that received a link helper

        Raises:
            ValueError: If a handle already has an attribute named
                link_property that is not a Linker
        """
        handle_index = HandleIndex(documents)
        bound: list[str] = []
        for path, handle in documents.items():
            if not self._matcher(path):
                continue
            _attach(handle, self._link_property, self.linker_for(documents, path, handle_index))
            logger.debug(f"Attached {self._link_property!r} to {path}")
            bound.append(path)

        logger.info(f"Attached link helpers to {len(bound)} of {len(documents)} documents")
        return bound


def _attach(handle: object, name: str, linker: Linker) -> None:
    """Store linker on a handle by key for mappings, by attribute otherwise.

    Attributes holding anything but a previously attached Linker are never
    overwritten, so document fields such as "path" stay intact.
    """
    if isinstance(handle, MutableMapping):
        handle[name] = linker
        return

    existing = getattr(handle, name, None)
    if existing is not None and not isinstance(existing, Linker):
        raise ValueError(
            f"Cannot attach link helper as {name!r}: "
            f"{type(handle).__name__} already has that attribute"
        )
    setattr(handle, name, linker)
