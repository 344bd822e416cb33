"""Configuration management for KICKOFF.

This package contains:
- settings: Settings dataclass with configuration fields
- manager: ConfigManager class for loading configuration

Configuration Format
====================
Flat KEY=VALUE lines (environment variable style), for example:

    TEMPLATE_SOURCE=ModyQyW/create/templates
    FETCH_TOOL="pnpx tiged"
    RUNTIME_INSTALL_REQUIRED=false
"""

from kickoff.config.manager import ConfigManager
from kickoff.config.settings import CONFIG_FILE, Settings

__all__ = [
    "CONFIG_FILE",
    "ConfigManager",
    "Settings",
]
