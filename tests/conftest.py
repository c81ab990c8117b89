"""Shared test fixtures."""

import pytest
from sitelinks.binder import RelativeLinks
from sitelinks.core.linker import Linker


@pytest.fixture
def documents() -> dict[str, dict[str, object]]:
    """Document set with a page and an image in a child folder."""
    return {
        "a/test/file.html": {},
        "a/test/child/image.gif": {},
    }


@pytest.fixture
def link(documents: dict[str, dict[str, object]]) -> Linker:
    """Default link helper bound to a/test/file.html."""
    RelativeLinks()(documents)
    linker = documents["a/test/file.html"]["link"]
    assert isinstance(linker, Linker)
    return linker
