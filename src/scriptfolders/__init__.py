"""
scriptfolders - Resolve SQL migration scripts from version-numbered folders.

    from scriptfolders import resolve_scripts

    scripts = resolve_scripts("db/upgrades", target_version="2.0")
"""

__version__ = "0.1.0"

from scriptfolders.core import *  # noqa: F401,F403
from scriptfolders.core import __all__  # noqa: F401
