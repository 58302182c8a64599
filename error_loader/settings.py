"""
Initializes the Dynaconf settings object for the error_loader component.
This module is the single source of truth for all configuration.
"""

from pathlib import Path
from dynaconf import Dynaconf

PACKAGE_ROOT = Path(__file__).parent

settings = Dynaconf(
    root_path=PACKAGE_ROOT,
    settings_files=["config/settings.toml"],
    secrets=["config/.secrets.toml"],
    merge_enabled=True,
    envvar_prefix=False,
)
