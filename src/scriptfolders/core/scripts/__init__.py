"""Version-folder script resolution.

Collects ``.sql`` scripts from version-numbered subfolders of a root
directory, optionally bounded by a target version.

Modules
-------
resolver    FolderResolver, ResolverOptions, ScriptRecord, resolve_scripts()
"""

from scriptfolders.core.scripts.resolver import (
    FolderResolver,
    ResolverOptions,
    ScriptRecord,
    resolve_scripts,
)

__all__ = ["FolderResolver", "ResolverOptions", "ScriptRecord", "resolve_scripts"]
