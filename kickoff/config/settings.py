"""Settings dataclass for KICKOFF configuration.

This module defines the Settings dataclass that holds all configuration
values, together with the mapping between config-file keys and attributes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_NODE_INDEX_URL = "https://nodejs.org/dist/index.json"
DEFAULT_TEMPLATES_MANIFEST_URL = "https://raw.githubusercontent.com/modyqyw/create/main/meta.json"
DEFAULT_TEMPLATE_SOURCE = "ModyQyW/create/templates"


@dataclass
class Settings:
    """Configuration settings for KICKOFF.

    All settings have sensible defaults and can be overridden from the
    configuration files (~/.kickoff-config, .kickoff) or the environment.

    Attributes:
        node_index_url: URL of the Node.js release index (JSON array)
        templates_manifest_url: URL of the template manifest (JSON array)
        template_source: Repository path prefix the template name is appended to
        fetch_tool: Command used to pull a template (split with shlex)
        version_manager: Node.js version manager used to install the LTS major
        fetch_timeout_seconds: HTTP timeout for catalog downloads
        fetch_max_retries: Automatic retries after a failed catalog download
        fetch_retry_delay_seconds: Base delay between catalog download attempts
        runtime_install_required: Treat a failed Node.js install as fatal
        update_check: Check PyPI for a newer kickoff release at startup
    """

    # Remote catalogs
    node_index_url: str = DEFAULT_NODE_INDEX_URL
    templates_manifest_url: str = DEFAULT_TEMPLATES_MANIFEST_URL
    template_source: str = DEFAULT_TEMPLATE_SOURCE

    # External tools
    fetch_tool: str = "pnpx tiged"
    version_manager: str = "fnm"

    # Network settings
    fetch_timeout_seconds: int = 30
    fetch_max_retries: int = 1
    fetch_retry_delay_seconds: float = 1.0

    # Behaviour
    runtime_install_required: bool = False
    update_check: bool = True

    # Config key to attribute mapping
    _key_mapping: dict[str, str] = field(
        default_factory=lambda: {
            "NODE_INDEX_URL": "node_index_url",
            "TEMPLATES_MANIFEST_URL": "templates_manifest_url",
            "TEMPLATE_SOURCE": "template_source",
            "FETCH_TOOL": "fetch_tool",
            "VERSION_MANAGER": "version_manager",
            "FETCH_TIMEOUT_SECONDS": "fetch_timeout_seconds",
            "FETCH_MAX_RETRIES": "fetch_max_retries",
            "FETCH_RETRY_DELAY_SECONDS": "fetch_retry_delay_seconds",
            "RUNTIME_INSTALL_REQUIRED": "runtime_install_required",
            "UPDATE_CHECK": "update_check",
        },
        repr=False,
    )

    def get_attribute_for_key(self, key: str) -> str | None:
        """Get the attribute name for a config key."""
        return self._key_mapping.get(key)

    def get_key_for_attribute(self, attr: str) -> str | None:
        """Get the config key for an attribute name."""
        for key, value in self._key_mapping.items():
            if value == attr:
                return key
        return None

    @classmethod
    def get_config_keys(cls) -> list[str]:
        """Get list of all valid configuration keys."""
        temp = cls()
        return list(temp._key_mapping.keys())


# Default configuration file path
CONFIG_FILE = Path.home() / ".kickoff-config"


__all__ = [
    "Settings",
    "CONFIG_FILE",
    "DEFAULT_NODE_INDEX_URL",
    "DEFAULT_TEMPLATES_MANIFEST_URL",
    "DEFAULT_TEMPLATE_SOURCE",
]
