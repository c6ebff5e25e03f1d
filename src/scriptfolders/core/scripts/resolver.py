"""Version-folder script resolver.

Collects ``.sql`` scripts from the version-numbered subfolders of a root
directory. Every script is named ``<folder>/<file>`` so that same-named files
in different folders stay distinct.

Two modes, picked by whether a target version is configured:

- **unbounded** (no target): every subfolder, in enumeration order.
- **bounded** (target given): folders passing the name filter are parsed as
  versions; those at or below the target are loaded. Two accepted folders
  parsing to the same version raise :class:`AmbiguousVersionError`.

Resolution is all-or-nothing. Malformed versions, ambiguous folders and read
failures propagate to the caller and no partial list is returned.
"""

from __future__ import annotations

import codecs
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from scriptfolders.core.errors import AmbiguousVersionError, ConfigError, ScriptIOError
from scriptfolders.core.filesystem import LocalFileSystem
from scriptfolders.core.logging import LogContext, get_logger
from scriptfolders.core.protocols import FileSystem, StrPath
from scriptfolders.core.versioning import Version, parse_version

if TYPE_CHECKING:
    from scriptfolders.core.settings import ResolverSettings

SCRIPT_PATTERN = "*.sql"
DEFAULT_ENCODING = "utf-8"

# Byte-order marks override the configured encoding. UTF-32 LE must be
# checked before UTF-16 LE since it shares the same first two bytes.
_BOMS: list[tuple[bytes, str]] = [
    (codecs.BOM_UTF32_LE, "utf-32-le"),
    (codecs.BOM_UTF32_BE, "utf-32-be"),
    (codecs.BOM_UTF8, "utf-8"),
    (codecs.BOM_UTF16_LE, "utf-16-le"),
    (codecs.BOM_UTF16_BE, "utf-16-be"),
]


@dataclass(frozen=True)
class ScriptRecord:
    """A loaded script, keyed by its ``folder/file`` name."""

    name: str
    contents: str

    @property
    def folder(self) -> str:
        return self.name.partition("/")[0]

    @property
    def file_name(self) -> str:
        return self.name.partition("/")[2]


@dataclass
class ResolverOptions:
    """Configuration for one resolution run.

    Parameters
    ----------
    root
        Directory whose immediate subfolders are version folders.
    target_version
        Exclude folders whose version is higher. ``None`` or ``""`` loads
        every folder without parsing its name.
    name_filter
        Predicate applied to folder names (bounded mode only) and to
        ``folder/file`` names (both modes).
    encoding
        Codec used to decode script files.
    """

    root: Path
    target_version: str | None = None
    name_filter: Callable[[str], bool] | None = None
    encoding: str = DEFAULT_ENCODING

    def __post_init__(self) -> None:
        self.root = Path(self.root)
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ConfigError(f"Unknown encoding: {self.encoding!r}", cause=exc) from exc

    @property
    def bounded(self) -> bool:
        return bool(self.target_version)


def decode_script(data: bytes, encoding: str) -> str:
    """Decode script bytes, letting a byte-order mark pick the codec."""
    for bom, bom_encoding in _BOMS:
        if data.startswith(bom):
            return data[len(bom):].decode(bom_encoding)
    return data.decode(encoding)


class FolderResolver:
    """Resolves the scripts held in a root directory's version folders.

    Example::

        from scriptfolders import FolderResolver, ResolverOptions

        resolver = FolderResolver(ResolverOptions("db/scripts", target_version="2.1"))
        for script in resolver.resolve():
            print(script.name)
    """

    def __init__(
        self,
        options: ResolverOptions,
        filesystem: FileSystem | None = None,
    ) -> None:
        self._options = options
        self._fs = filesystem if filesystem is not None else LocalFileSystem()
        # Per-resolver logger so a configure_logging() made before construction applies.
        self._log = get_logger(__name__)

    @classmethod
    def from_settings(
        cls,
        settings: ResolverSettings,
        name_filter: Callable[[str], bool] | None = None,
        filesystem: FileSystem | None = None,
    ) -> FolderResolver:
        """Build a resolver from settings, applying their ``log_level`` first."""
        settings.configure_logging()
        return cls(settings.to_options(name_filter), filesystem)

    @property
    def options(self) -> ResolverOptions:
        return self._options

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def resolve(self) -> list[ScriptRecord]:
        """Return every script of the accepted folders, in folder order.

        Raises:
            MalformedVersionError: The target version or an accepted folder
                name has no version prefix (bounded mode).
            AmbiguousVersionError: Two accepted folders parse to the same
                version (bounded mode).
            ScriptIOError: Listing, opening, reading or decoding failed.
        """
        mode = "bounded" if self._options.bounded else "unbounded"
        with LogContext(root=str(self._options.root), mode=mode):
            self._log.info(
                "scripts.resolve.started",
                target_version=self._options.target_version,
            )

            try:
                if self._options.bounded:
                    scripts = self._resolve_bounded()
                else:
                    scripts = self._resolve_unbounded()
            except Exception as exc:
                self._log.error(
                    "scripts.resolve.failed",
                    error=str(exc),
                    error_type=type(exc).__name__,
                )
                raise

            self._log.info("scripts.resolve.completed", count=len(scripts))
        return scripts

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _resolve_unbounded(self) -> list[ScriptRecord]:
        scripts: list[ScriptRecord] = []
        for folder in self._list_folders():
            scripts.extend(self._load_folder(folder))
        return scripts

    def _resolve_bounded(self) -> list[ScriptRecord]:
        folders = self._list_folders()
        if self._options.name_filter is not None:
            folders = [f for f in folders if self._options.name_filter(f)]

        if not folders:
            return []

        target = parse_version(self._options.target_version)
        seen: set[Version] = set()
        scripts: list[ScriptRecord] = []

        for folder in folders:
            # Every folder surviving the filter must carry a version.
            version = parse_version(folder)
            if version > target:
                self._log.debug(
                    "scripts.folder.skipped",
                    folder=folder,
                    version=str(version),
                    target_version=str(target),
                )
                continue

            if version in seen:
                raise AmbiguousVersionError(version, folder).with_context(
                    root=str(self._options.root)
                )

            scripts.extend(self._load_folder(folder))
            seen.add(version)

        return scripts

    def _list_folders(self) -> list[str]:
        root = self._options.root
        try:
            return list(self._fs.list_subdirectories(root))
        except OSError as exc:
            raise ScriptIOError(root, cause=exc).with_context(root=str(root)) from exc

    def _load_folder(self, folder: str) -> list[ScriptRecord]:
        """Load the ``*.sql`` scripts directly inside ``folder``."""
        folder_path = self._options.root / folder
        try:
            file_names = list(self._fs.list_files(folder_path, SCRIPT_PATTERN))
        except OSError as exc:
            raise ScriptIOError(folder_path, cause=exc).with_context(
                root=str(self._options.root), folder=folder
            ) from exc

        names = [f"{folder}/{file_name}" for file_name in file_names]
        if self._options.name_filter is not None:
            names = [n for n in names if self._options.name_filter(n)]

        records = []
        for name in names:
            file_name = name.split("/", 1)[1]
            records.append(
                ScriptRecord(name=name, contents=self._read(folder_path / file_name, name))
            )
        self._log.debug("scripts.folder.loaded", folder=folder, count=len(records))
        return records

    def _read(self, path: StrPath, name: str) -> str:
        try:
            with self._fs.open_for_read(path) as stream:
                data = stream.read()
            return decode_script(data, self._options.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise ScriptIOError(path, cause=exc).with_context(
                root=str(self._options.root), script=name
            ) from exc


def resolve_scripts(
    root: StrPath,
    target_version: str | None = None,
    *,
    name_filter: Callable[[str], bool] | None = None,
    encoding: str = DEFAULT_ENCODING,
    filesystem: FileSystem | None = None,
) -> list[ScriptRecord]:
    """Convenience function to resolve the scripts under ``root``.

    Args:
        root: Directory holding the version folders.
        target_version: Optional upper version bound.
        name_filter: Optional predicate over folder and ``folder/file`` names.
        encoding: Codec used to decode script files.
        filesystem: FileSystem implementation (defaults to the local disk).

    Returns:
        The resolved scripts in folder-processing order.
    """
    options = ResolverOptions(
        root=Path(root),
        target_version=target_version,
        name_filter=name_filter,
        encoding=encoding,
    )
    return FolderResolver(options, filesystem).resolve()


__all__ = [
    "DEFAULT_ENCODING",
    "SCRIPT_PATTERN",
    "FolderResolver",
    "ResolverOptions",
    "ScriptRecord",
    "decode_script",
    "resolve_scripts",
]
