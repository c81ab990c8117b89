"""Default link post-processing.

Links between rendered pages point at the HTML output, so markdown sources
are rewritten to ``.html`` and index pages are linked through their folder.
"""

import re

from sitelinks.core.linker import LinkModifier
from sitelinks.core.types import CanonicalPath

DEFAULT_EMPTY_LINK = "./"

MARKDOWN_EXTENSION_RE = re.compile(r"\.md$")
INDEX_FILE_RE = re.compile(r"(^|/|\\)index\.html$")


def make_link_rewriter(empty_link: str = DEFAULT_EMPTY_LINK) -> LinkModifier:
    """Build the default link transform.

    The transform rewrites ``.md`` to ``.html``, drops a trailing
    ``index.html`` (``dir/index.html`` -> ``dir/``) and replaces links that
    end up empty or ``/`` with ``empty_link``.

    Args:
        empty_link: Placeholder for links to the current directory

    Returns:
        Transform suitable for ``Linker(modify_links=...)``
    """

    def rewrite_link(
        uri: str,
        from_resolved: CanonicalPath,
        to_resolved: CanonicalPath,
    ) -> str:
        uri = MARKDOWN_EXTENSION_RE.sub(".html", uri)
        uri = INDEX_FILE_RE.sub(r"\1", uri)
        if not uri or uri == "/":
            return empty_link
        return uri

    return rewrite_link
