"""scriptfolders core.

Architecture::

    versioning.py      Version + try_parse_version / parse_version (leaf)
    errors.py          Structured error hierarchy (ScriptFoldersError)
    protocols.py       FileSystem protocol consumed by the resolver
    filesystem.py      LocalFileSystem (os.scandir based)
    logging.py         structlog configuration + get_logger()
    settings.py        ResolverSettings (pydantic-settings, SCRIPTFOLDERS_*)
    scripts/           FolderResolver and ScriptRecord
"""

from scriptfolders.core.errors import (
    AmbiguousVersionError,
    ConfigError,
    ErrorCategory,
    ErrorContext,
    MalformedVersionError,
    ScriptFoldersError,
    ScriptIOError,
)
from scriptfolders.core.filesystem import LocalFileSystem
from scriptfolders.core.protocols import FileSystem
from scriptfolders.core.scripts import (
    FolderResolver,
    ResolverOptions,
    ScriptRecord,
    resolve_scripts,
)
from scriptfolders.core.versioning import Version, parse_version, try_parse_version

__all__ = [
    # errors
    "AmbiguousVersionError",
    "ConfigError",
    "ErrorCategory",
    "ErrorContext",
    "MalformedVersionError",
    "ScriptFoldersError",
    "ScriptIOError",
    # filesystem
    "FileSystem",
    "LocalFileSystem",
    # scripts
    "FolderResolver",
    "ResolverOptions",
    "ScriptRecord",
    "resolve_scripts",
    # versioning
    "Version",
    "parse_version",
    "try_parse_version",
]
