"""Configuration management for Sitelinks.

Supports TOML configuration format with auto-discovery.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from sitelinks.core.matcher import DEFAULT_MATCH
from sitelinks.core.transforms import DEFAULT_EMPTY_LINK

CONFIG_FILENAME = "sitelinks.toml"


@dataclass
class DocsConfig:
    """Documentation source configuration."""

    source_dir: Path = field(default_factory=lambda: Path("docs"))


@dataclass
class LinksConfig:
    """Link helper configuration."""

    link_property: str = "link"
    match: list[str] = field(default_factory=lambda: [DEFAULT_MATCH])
    match_dot: bool = False
    empty_link: str = DEFAULT_EMPTY_LINK
    rewrite_links: bool = True


@dataclass
class Config:
    """Application configuration."""

    docs: DocsConfig
    links: LinksConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for sitelinks.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents."""
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> Config:
        return cls(docs=DocsConfig(), links=LinksConfig())

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            data = tomllib.load(f)

        if not isinstance(data, dict):
            raise ValueError("Configuration must be a dictionary")

        return cls(
            docs=cls._parse_docs(data.get("docs"), path.parent),
            links=cls._parse_links(data.get("links")),
            config_path=path,
        )

    @classmethod
    def _parse_docs(cls, data: object, config_dir: Path) -> DocsConfig:
        """Parse docs configuration section.

        Args:
            data: Raw docs section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            DocsConfig instance
        """
        if data is None:
            return DocsConfig(source_dir=config_dir / "docs")

        if not isinstance(data, dict):
            raise ValueError("docs section must be a dictionary")

        source_dir = data.get("source_dir", "docs")
        if not isinstance(source_dir, str):
            raise ValueError("docs.source_dir must be a string")

        return DocsConfig(source_dir=config_dir / source_dir)

    @classmethod
    def _parse_links(cls, data: object) -> LinksConfig:
        """Parse links configuration section.

        Args:
            data: Raw links section data

        Returns:
            LinksConfig instance
        """
        if data is None:
            return LinksConfig()

        if not isinstance(data, dict):
            raise ValueError("links section must be a dictionary")

        link_property = data.get("link_property", "link")
        if not isinstance(link_property, str) or not link_property:
            raise ValueError("links.link_property must be a non-empty string")

        match_raw = data.get("match", DEFAULT_MATCH)
        match: list[str] = []
        if isinstance(match_raw, str):
            match.append(match_raw)
        elif isinstance(match_raw, list):
            for item in match_raw:
                if not isinstance(item, str):
                    raise ValueError("links.match items must be strings")
                match.append(item)
        else:
            raise ValueError("links.match must be a string or a list of strings")

        match_dot = data.get("match_dot", False)
        if not isinstance(match_dot, bool):
            raise ValueError("links.match_dot must be a boolean")

        empty_link = data.get("empty_link", DEFAULT_EMPTY_LINK)
        if not isinstance(empty_link, str):
            raise ValueError("links.empty_link must be a string")

        rewrite_links = data.get("rewrite_links", True)
        if not isinstance(rewrite_links, bool):
            raise ValueError("links.rewrite_links must be a boolean")

        return LinksConfig(
            link_property=link_property,
            match=match,
            match_dot=match_dot,
            empty_link=empty_link,
            rewrite_links=rewrite_links,
        )

    def with_overrides(
        self,
        *,
        source_dir: Path | None = None,
        link_property: str | None = None,
        match: list[str] | None = None,
        match_dot: bool | None = None,
        empty_link: str | None = None,
        rewrite_links: bool | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            source_dir: Override docs.source_dir
            link_property: Override links.link_property
            match: Override links.match
            match_dot: Override links.match_dot
            empty_link: Override links.empty_link
            rewrite_links: Override links.rewrite_links

        Returns:
            New Config instance with overrides applied
        """
        docs = self.docs
        if source_dir is not None:
            docs = replace(self.docs, source_dir=source_dir)

        links = replace(
            self.links,
            link_property=link_property if link_property is not None else self.links.link_property,
            match=list(match) if match is not None else self.links.match,
            match_dot=match_dot if match_dot is not None else self.links.match_dot,
            empty_link=empty_link if empty_link is not None else self.links.empty_link,
            rewrite_links=rewrite_links if rewrite_links is not None else self.links.rewrite_links,
        )

        return replace(self, docs=docs, links=links)
