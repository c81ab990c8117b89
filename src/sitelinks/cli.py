"""CLI interface for Sitelinks.

Command-line tool for inspecting how links between site documents resolve.
"""

import logging
import sys
from pathlib import Path

import click

from sitelinks.binder import RelativeLinks
from sitelinks.config import Config
from sitelinks.core.linker import Linker
from sitelinks.core.transforms import make_link_rewriter
from sitelinks.documents import collect_documents

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path, dir_okay=False),
    default=None,
    help="Path to configuration file (default: auto-discover sitelinks.toml)",
)
empty_link_option = click.option(
    "--empty-link",
    default=None,
    help="Replacement for links that end up empty (overrides config)",
)
rewrite_option = click.option(
    "--rewrite/--no-rewrite",
    default=None,
    help="Enable/disable .md -> .html and index rewriting (overrides config)",
)


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (log every link computation)",
)
def cli(verbose: bool) -> None:
    """Sitelinks - relative links between site documents."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("current")
@click.argument("value")
def resolve(current: str, value: str) -> None:
    """Resolve VALUE as seen from the document at CURRENT."""
    linker = Linker({}, current)
    click.echo(linker.resolve(value))


@cli.command()
@click.argument("current")
@click.argument("source")
@click.argument("target")
@config_option
@empty_link_option
@rewrite_option
def link(
    current: str,
    source: str,
    target: str,
    config_path: Path | None,
    empty_link: str | None,
    rewrite: bool | None,
) -> None:
    """Print the link from SOURCE to TARGET, both resolved from CURRENT."""
    config = _load_config(config_path).with_overrides(
        empty_link=empty_link,
        rewrite_links=rewrite,
    )
    modify_links = make_link_rewriter(config.links.empty_link) if config.links.rewrite_links else None
    linker = Linker({}, current, modify_links=modify_links)
    click.echo(linker(source, target))


@cli.command()
@click.option(
    "--to",
    "target",
    required=True,
    help="Link target, resolved from each document (e.g., /index.md)",
)
@config_option
@click.option(
    "--source-dir",
    "-s",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Documentation source directory (overrides config)",
)
@click.option(
    "--match",
    "-m",
    "match",
    multiple=True,
    help="Glob pattern selecting documents, repeatable (overrides config)",
)
@click.option(
    "--dot/--no-dot",
    default=None,
    help="Allow patterns to match dot-prefixed paths (overrides config)",
)
@empty_link_option
@rewrite_option
def table(
    target: str,
    config_path: Path | None,
    source_dir: Path | None,
    match: tuple[str, ...],
    dot: bool | None,
    empty_link: str | None,
    rewrite: bool | None,
) -> None:
    """Print the link from every matching document to a target."""
    config = _load_config(config_path).with_overrides(
        source_dir=source_dir,
        match=list(match) if match else None,
        match_dot=dot,
        empty_link=empty_link,
        rewrite_links=rewrite,
    )
    source = config.docs.source_dir
    if not source.is_dir():
        click.echo(click.style(f"Error: source directory not found: {source}", fg="red"), err=True)
        sys.exit(1)

    documents = collect_documents(source)
    binder = RelativeLinks.from_config(config.links)
    try:
        bound = binder(documents)
    except ValueError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    for path in bound:
        linker = getattr(documents[path], binder.link_property)
        click.echo(f"{path}\t{linker.to(target)}")


def _load_config(config_path: Path | None) -> Config:
    """Load configuration or exit with an error message."""
    try:
        return Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
