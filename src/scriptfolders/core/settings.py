"""Environment-driven settings for version-folder resolution.

``ResolverSettings`` reads ``SCRIPTFOLDERS_*`` environment variables (and a
``.env`` file when present) and turns them into :class:`ResolverOptions`.

Examples:
    >>> import os
    >>> os.environ["SCRIPTFOLDERS_ROOT_DIR"] = "/srv/sql"
    >>> os.environ["SCRIPTFOLDERS_TARGET_VERSION"] = "2.0"
    >>> settings = ResolverSettings()
    >>> settings.to_options().target_version
    '2.0'

Environment variables:
    SCRIPTFOLDERS_ROOT_DIR        Root directory holding the version folders
    SCRIPTFOLDERS_TARGET_VERSION  Upper version bound (unset or empty: no bound)
    SCRIPTFOLDERS_ENCODING        Text encoding of the scripts (default utf-8)
    SCRIPTFOLDERS_INCLUDE         fnmatch pattern applied as the name filter
    SCRIPTFOLDERS_LOG_LEVEL       structlog level for configure_logging()
"""

from __future__ import annotations

import codecs
import fnmatch
from collections.abc import Callable
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from scriptfolders.core.logging import configure_logging
from scriptfolders.core.scripts.resolver import ResolverOptions


def pattern_filter(pattern: str) -> Callable[[str], bool]:
    """Build a name filter accepting names that match glob ``pattern``."""

    def _accept(name: str) -> bool:
        return fnmatch.fnmatch(name, pattern)

    return _accept


class ResolverSettings(BaseSettings):
    """Settings for a single resolution run.

    Fields
    ──────
    root_dir        : Directory whose subfolders are version folders
    target_version  : Optional upper bound; folders above it are excluded
    encoding        : Codec used to decode script files
    include         : Optional glob pattern used as the name filter
    log_level       : Level passed to configure_logging()
    """

    model_config = SettingsConfigDict(
        env_prefix="SCRIPTFOLDERS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    root_dir: Path = Field(description="Root directory holding version folders")
    target_version: str | None = None
    encoding: str = "utf-8"
    include: str | None = Field(
        default=None,
        description="Glob pattern matched against folder and folder/file names",
    )
    log_level: str = "INFO"

    @field_validator("target_version", "include", mode="before")
    @classmethod
    def empty_to_none(cls, v: str | None) -> str | None:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("encoding")
    @classmethod
    def known_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding: {v!r}") from exc
        return v

    @field_validator("log_level")
    @classmethod
    def upper_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v!r}")
        return level

    def name_filter(self) -> Callable[[str], bool] | None:
        """Name filter built from ``include``, or None when unset."""
        if self.include is None:
            return None
        return pattern_filter(self.include)

    def configure_logging(self, json_format: bool | None = None) -> None:
        """Apply ``log_level`` to the package's structlog configuration."""
        configure_logging(level=self.log_level, json_format=json_format)

    def to_options(
        self, name_filter: Callable[[str], bool] | None = None
    ) -> ResolverOptions:
        """Build resolver options; an explicit ``name_filter`` overrides ``include``."""
        return ResolverOptions(
            root=self.root_dir,
            target_version=self.target_version,
            name_filter=name_filter or self.name_filter(),
            encoding=self.encoding,
        )


__all__ = ["ResolverSettings", "pattern_filter"]
