"""Document sets built from a source directory.

Used by the CLI to inspect links of an existing tree; build pipelines pass
their own document set straight to RelativeLinks.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(eq=False)
class Document:
    """Document handle for a file found in the source directory.

    Compared by identity so that handles behave like the opaque objects a
    build pipeline would pass around.
    """

    path: str
    source_path: Path


def collect_documents(source_dir: Path) -> dict[str, Document]:
    """Build a document set from every file under a directory.

    Args:
        source_dir: Root directory of the site sources

    Returns:
        Document set keyed by POSIX paths relative to source_dir, sorted,
        empty if the directory doesn't exist
    """
    if not source_dir.is_dir():
        return {}

    documents: dict[str, Document] = {}
    for source_path in sorted(source_dir.rglob("*")):
        if not source_path.is_file():
            continue
        path = source_path.relative_to(source_dir).as_posix()
        documents[path] = Document(path=path, source_path=source_path)
    return documents
