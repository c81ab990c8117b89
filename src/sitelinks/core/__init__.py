"""Path resolution and relative link computation.

Pure functions of a document set and the current document path; nothing in
this package touches the filesystem.
"""

from .linker import Linker, LinkModifier
from .matcher import PathMatcher
from .resolver import HandleIndex, Resolver
from .transforms import DEFAULT_EMPTY_LINK, make_link_rewriter
from .types import CanonicalPath, UnresolvableInputError

__all__ = [
    "DEFAULT_EMPTY_LINK",
    "CanonicalPath",
    "HandleIndex",
    "LinkModifier",
    "Linker",
    "PathMatcher",
    "Resolver",
    "UnresolvableInputError",
    "make_link_rewriter",
]
