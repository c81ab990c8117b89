"""Tests for Linker class."""

import logging

import pytest
from sitelinks.core.linker import Linker, relative_dir, split_resolved
from sitelinks.core.types import CanonicalPath, UnresolvableInputError


class TestLinkerCall:
    """Tests for link(from, to) with the default transform."""

    def test__modifies_links(self, link: Linker) -> None:
        """Rewrite index files to their folder."""
        assert link("x/index.html", "y/index.html") == "../y/"

    def test__files_off_root__stays_relative(self, link: Linker) -> None:
        """Do not make an absolute path when linking sibling files."""
        assert link("a", "b") == "b"

    def test__handles(self, link: Linker, documents: dict[str, dict[str, object]]) -> None:
        """Link between two document handles."""
        page = documents["a/test/file.html"]
        image = documents["a/test/child/image.gif"]

        assert link(page, image) == "child/image.gif"
        assert link(image, page) == "../file.html"

    def test__same_file__returns_basename(self, link: Linker) -> None:
        """Link a file to itself by its basename."""
        assert link("page.gif", "page.gif") == "page.gif"

    def test__unresolvable__raises(self, link: Linker) -> None:
        """Propagate resolution errors to the caller."""
        with pytest.raises(UnresolvableInputError):
            link(None, "x")


class TestLinkerFrom:
    """Tests for link.from_()."""

    def test__parent_file(self, link: Linker) -> None:
        """Link from a file in the parent folder."""
        assert link.from_("../xyz") == "test/file.html"

    def test__parent_folder(self, link: Linker) -> None:
        """Link from the parent folder itself."""
        assert link.from_("../xyz/") == "../test/file.html"

    def test__handle(self, link: Linker, documents: dict[str, dict[str, object]]) -> None:
        """Link from another document handle."""
        assert link.from_(documents["a/test/child/image.gif"]) == "../file.html"


class TestLinkerTo:
    """Tests for link.to()."""

    def test__parent_file(self, link: Linker) -> None:
        """Link to a file in the parent folder."""
        assert link.to("../xyz") == "../xyz"

    def test__parent_folder(self, link: Linker) -> None:
        """Link to the parent folder itself."""
        assert link.to("../xyz/") == "../xyz/"

    def test__root(self, link: Linker) -> None:
        """Link up to the root directory."""
        assert link.to("/") == "../../"

    def test__self(self, link: Linker) -> None:
        """Link to the current document by its basename."""
        assert link.to(link.documents["a/test/file.html"]) == "file.html"


class TestLinkerResolve:
    """Tests for link.resolve()."""

    def test__file_object(self, link: Linker, documents: dict[str, dict[str, object]]) -> None:
        """Resolve against a file object."""
        assert link.resolve(documents["a/test/child/image.gif"]) == "a/test/child/image.gif"

    def test__unknown_object__raises(self, link: Linker) -> None:
        """Throw when it can't find the object."""
        with pytest.raises(UnresolvableInputError):
            link.resolve({})

    def test__root(self, link: Linker) -> None:
        """Resolve both root spellings to the empty path."""
        assert link.resolve("") == link.resolve("/") == ""


class TestLinkerTransform:
    """Tests for the modify_links argument."""

    def test__no_transform__returns_raw_link(self) -> None:
        """Leave links alone when no transform is configured."""
        link = Linker({}, "a/b.html")

        assert link("x/index.html", "y/index.html") == "../y/index.html"

    def test__non_callable__ignored(self) -> None:
        """Treat a non-callable transform as no transform."""
        link = Linker({}, "a/b.html", modify_links=7)

        assert link("x/index.html", "y/index.html") == "../y/index.html"

    def test__receives_resolved_paths(self) -> None:
        """Pass the link and both resolved paths to the transform."""
        calls: list[tuple[str, CanonicalPath, CanonicalPath]] = []

        def modify(uri: str, from_resolved: CanonicalPath, to_resolved: CanonicalPath) -> str:
            calls.append((uri, from_resolved, to_resolved))
            return uri.upper()

        link = Linker({}, "a/b.html", modify_links=modify)

        assert link.to("../c/d.html") == "../C/D.HTML"
        assert calls == [("../c/d.html", "a/b.html", "c/d.html")]

    def test__logs_steps(self, caplog: pytest.LogCaptureFixture) -> None:
        """Log the computed link at debug level."""
        link = Linker({}, "a/b.html", modify_links=lambda uri, *_: uri + "#top")

        with caplog.at_level(logging.DEBUG, logger="sitelinks.core.linker"):
            link.to("c.html")

        assert "Link: c.html" in caplog.text
        assert "After link modification: c.html#top" in caplog.text


class TestLinkerBinding:
    """Tests for the current document binding."""

    def test__current_path(self, link: Linker) -> None:
        """Expose the bound path."""
        assert link.current_path == "a/test/file.html"

    def test__unknown_current_path__uses_path(self) -> None:
        """Fall back to the path string when the document set lacks it."""
        link = Linker({}, "guide/setup.html")

        assert link.to("/guide/") == ""
        assert link.from_("/index.html") == "guide/setup.html"


class TestSplitResolved:
    """Tests for split_resolved()."""

    def test__file(self) -> None:
        assert split_resolved("a/b/c.html") == (["a", "b"], "c.html")

    def test__directory(self) -> None:
        assert split_resolved("a/b/") == (["a", "b"], "")

    def test__root(self) -> None:
        assert split_resolved("") == ([], "")

    def test__root_file(self) -> None:
        assert split_resolved("index.html") == ([], "index.html")

    def test__unnormalized(self) -> None:
        """Normalize directory segments of absolute inputs."""
        assert split_resolved("a/./b/../c.html") == (["a"], "c.html")


class TestRelativeDir:
    """Tests for relative_dir()."""

    def test__same_directory__returns_empty(self) -> None:
        assert relative_dir(["a", "b"], ["a", "b"]) == ""

    def test__child(self) -> None:
        assert relative_dir(["a"], ["a", "b", "c"]) == "b/c"

    def test__parent(self) -> None:
        assert relative_dir(["a", "b", "c"], ["a"]) == "../.."

    def test__sibling(self) -> None:
        assert relative_dir(["a", "x"], ["a", "y"]) == "../y"

    def test__from_root(self) -> None:
        assert relative_dir([], ["a"]) == "a"

    def test__diverging_prefix(self) -> None:
        """Stop sharing segments at the first difference."""
        assert relative_dir(["x", "a"], ["y", "a"]) == "../../y/a"
