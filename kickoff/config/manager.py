"""Configuration manager for KICKOFF.

This module provides the ConfigManager class for loading configuration
values with a cascading hierarchy:

    1. Environment Variables (highest priority)
    2. Local Config (.kickoff in project/parent directories)
    3. Global Config (~/.kickoff-config)
    4. Built-in Defaults (lowest priority)
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from rich.markup import escape

from kickoff.config.settings import CONFIG_FILE, Settings
from kickoff.utils.console import console, print_header, print_info
from kickoff.utils.logging import log_message
from kickoff.utils.retry import RetryConfig

logger = logging.getLogger(__name__)

_LINE_PATTERN = re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*)=(.*)$")


class ConfigManager:
    """Loads configuration with a cascading hierarchy.

    Configuration Precedence (highest to lowest):
    1. Environment Variables - CI/CD, temporary overrides
    2. Local Config (.kickoff) - Project-specific settings
    3. Global Config (~/.kickoff-config) - User defaults
    4. Built-in Defaults - Fallback values

    Files are parsed line by line (no eval/exec); only KEY=VALUE,
    KEY="VALUE" and KEY='VALUE' lines are read.

    Attributes:
        settings: Current settings instance
        global_config_path: Path to global ~/.kickoff-config file
        local_config_path: Path to discovered local .kickoff file (after load)
    """

    LOCAL_CONFIG_NAME = ".kickoff"
    GLOBAL_CONFIG_NAME = ".kickoff-config"

    def __init__(self, global_config_path: Path | None = None) -> None:
        """Initialize the configuration manager.

        Args:
            global_config_path: Optional custom path to global config file.
                                Defaults to ~/.kickoff-config.
        """
        self.global_config_path = global_config_path or CONFIG_FILE
        self.local_config_path: Path | None = None
        self.settings = Settings()
        self._raw_values: dict[str, str] = {}
        self._config_sources: dict[str, str] = {}

    def load(self) -> Settings:
        """Load configuration from all sources with cascading precedence.

        Each call starts from clean defaults so repeated loads never keep
        stale values.

        Returns:
            Settings instance with loaded values
        """
        self.settings = Settings()
        self.local_config_path = None
        self._raw_values = {}
        self._config_sources = {}

        if self.global_config_path.exists():
            log_message(f"Loading global configuration from {self.global_config_path}")
            self._load_file(self.global_config_path, source="global")

        local_path = self._find_local_config()
        if local_path:
            self.local_config_path = local_path
            log_message(f"Loading local configuration from {local_path}")
            self._load_file(local_path, source=f"local ({local_path})")

        self._load_environment()

        for key, value in self._raw_values.items():
            self._apply_value_to_settings(key, value)

        log_message(f"Configuration loaded successfully ({len(self._raw_values)} keys)")
        return self.settings

    def _find_local_config(self) -> Path | None:
        """Find local .kickoff config by traversing up from CWD.

        Stops at the first .kickoff file, at a directory containing .git,
        or at the filesystem root.

        Returns:
            Path to local config file, or None if not found
        """
        current = Path.cwd()
        while True:
            config_path = current / self.LOCAL_CONFIG_NAME
            if config_path.exists() and config_path.is_file():
                return config_path

            # Stop at repository root
            if (current / ".git").exists():
                break

            parent = current.parent
            if parent == current:  # Reached filesystem root
                break
            current = parent

        return None

    def _load_file(self, path: Path, source: str = "file") -> None:
        """Load key=value pairs from a config file.

        Args:
            path: Path to the config file
            source: Source identifier for get_config_source()
        """
        with path.open() as f:
            for line in f:
                line = line.strip()

                if not line or line.startswith("#"):
                    continue

                match = _LINE_PATTERN.match(line)
                if match:
                    key, value = match.groups()

                    # Only unescape for double-quoted values (single quotes are literal)
                    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
                        value = self._unescape_value(value[1:-1])
                    elif len(value) >= 2 and value.startswith("'") and value.endswith("'"):
                        value = value[1:-1]

                    self._raw_values[key] = value
                    self._config_sources[key] = source

    def _load_environment(self) -> None:
        """Override config with environment variables.

        Only known config keys are read so unrelated environment
        variables never leak into the configuration.
        """
        for key in Settings.get_config_keys():
            env_value = os.environ.get(key)
            if env_value is not None:
                self._raw_values[key] = env_value
                self._config_sources[key] = "environment"

    def _apply_value_to_settings(self, key: str, value: str) -> None:
        """Apply a raw config value to the settings object.

        The target type is taken from the attribute's default value.
        Unparseable numbers keep the default.

        Args:
            key: Configuration key
            value: Raw string value
        """
        attr = self.settings.get_attribute_for_key(key)
        if attr is None:
            return  # Unknown key, ignore

        current_value = getattr(self.settings, attr)

        if isinstance(current_value, bool):
            setattr(self.settings, attr, value.strip().lower() in ("true", "1", "yes"))
        elif isinstance(current_value, int):
            try:
                setattr(self.settings, attr, int(value))
            except ValueError:
                logger.warning(f"Invalid integer for {key}: {value!r}, keeping default")
        elif isinstance(current_value, float):
            try:
                setattr(self.settings, attr, float(value))
            except ValueError:
                logger.warning(f"Invalid number for {key}: {value!r}, keeping default")
        else:
            setattr(self.settings, attr, value)

    @staticmethod
    def _unescape_value(value: str) -> str:
        """Unescape backslashes and double quotes in a double-quoted value."""
        result = value.replace("\\\\", "\\")
        result = result.replace('\\"', '"')
        return result

    def get_config_source(self, key: str) -> str:
        """Describe where the effective value of a key came from.

        Returns:
            "environment", "global", "local (<path>)" or "default"
        """
        return self._config_sources.get(key, "default")

    def get_retry_config(self) -> RetryConfig:
        """Build the retry policy for catalog downloads.

        Negative values from configuration are clamped to zero.

        Returns:
            RetryConfig for the catalog fetchers
        """
        s = self.settings
        base_delay = max(0.0, s.fetch_retry_delay_seconds)
        return RetryConfig(
            max_retries=max(0, s.fetch_max_retries),
            base_delay_seconds=base_delay,
            max_delay_seconds=max(base_delay, RetryConfig.max_delay_seconds),
        )

    _SHOW_SECTIONS: tuple[tuple[str, tuple[tuple[str, str, str], ...]], ...] = (
        (
            "Catalogs",
            (
                ("Node.js Release Index", "node_index_url", ""),
                ("Template Manifest", "templates_manifest_url", ""),
                ("Template Source", "template_source", ""),
            ),
        ),
        (
            "Tools",
            (
                ("Template Fetch Tool", "fetch_tool", ""),
                ("Version Manager", "version_manager", ""),
            ),
        ),
        (
            "Network",
            (
                ("Timeout", "fetch_timeout_seconds", "s"),
                ("Max Retries", "fetch_max_retries", ""),
                ("Retry Delay", "fetch_retry_delay_seconds", "s"),
            ),
        ),
        (
            "Behaviour",
            (
                ("Runtime Install Required", "runtime_install_required", ""),
                ("Update Check", "update_check", ""),
            ),
        ),
    )

    def show(self) -> None:
        """Display the effective settings grouped by section.

        Each value is followed by the layer it came from.
        """
        print_header("Current Configuration")

        print_info(f"Global config: {self.global_config_path}")
        print_info(f"Local config:  {self.local_config_path or '(not found)'}")
        console.print()

        s = self.settings
        for title, rows in self._SHOW_SECTIONS:
            console.print(f"  [bold]{title}:[/bold]")
            for label, attr, unit in rows:
                key = s.get_key_for_attribute(attr)
                source = self.get_config_source(key) if key else "default"
                value = escape(f"{getattr(s, attr)}{unit}")
                console.print(f"    {label}: {value} [dim]({escape(source)})[/dim]")
            console.print()



__all__ = ["ConfigManager"]
