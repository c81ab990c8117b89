"""Relative links between the documents of a static site build.

Given the logical output path of every document, computes links that are
safe to embed in the rendered HTML of any other document.
"""

from .binder import RelativeLinks
from .config import Config, LinksConfig
from .core import (
    DEFAULT_EMPTY_LINK,
    Linker,
    PathMatcher,
    Resolver,
    UnresolvableInputError,
    make_link_rewriter,
)

__all__ = [
    "DEFAULT_EMPTY_LINK",
    "Config",
    "Linker",
    "LinksConfig",
    "PathMatcher",
    "RelativeLinks",
    "Resolver",
    "UnresolvableInputError",
    "make_link_rewriter",
]
