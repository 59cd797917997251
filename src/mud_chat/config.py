"""
Chat component configuration management.

Settings are loaded from multiple sources with a clear priority order:

    1. Environment variables (highest priority) - for containerized deployments
    2. Config file (config/chat.ini) - for static deployments
    3. Built-in defaults (lowest priority) - sensible fallbacks

Configuration is loaded once at module import time and cached. The ChatConfig
dataclass provides typed access to all settings.

Usage:
    from mud_chat.config import config

    print(config.locale.name)
    print(config.components.check_cycles)

Environment Variable Mapping:
    MUD_CHAT_LOCALE         -> locale.name
    MUD_CHAT_LOCALE_PATH    -> locale.path
    MUD_CHAT_CHECK_CYCLES   -> components.check_cycles
    MUD_CHAT_LOG_LEVEL      -> logging.level
"""

import configparser
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

# =============================================================================
# PATH CONFIGURATION
# =============================================================================

# Project root directory (contains src/, config/)
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Config file paths
CONFIG_DIR = PROJECT_ROOT / "config"
CONFIG_FILE = CONFIG_DIR / "chat.ini"
CONFIG_EXAMPLE = CONFIG_DIR / "chat.example.ini"

# Logger every package module hangs off.
PACKAGE_LOGGER = "mud_chat"


# =============================================================================
# CONFIGURATION DATACLASSES
# =============================================================================


@dataclass
class LocaleSettings:
    """Baseline locale used to resolve translation keys."""

    name: str = "en_US"
    path: str | None = None  # None = bundled locale for `name`

    @property
    def absolute_path(self) -> Path | None:
        """Absolute path to the configured locale file, if one is configured."""
        if not self.path:
            return None
        p = Path(self.path)
        if p.is_absolute():
            return p
        return PROJECT_ROOT / p


@dataclass
class ComponentSettings:
    """Component tree behaviour."""

    check_cycles: bool = True


@dataclass
class LoggingSettings:
    """Logging configuration."""

    level: str = "INFO"


@dataclass
class ChatConfig:
    """
    Complete chat component configuration.

    Aggregates all settings sections. Access via the module-level `config`
    singleton.
    """

    locale: LocaleSettings = field(default_factory=LocaleSettings)
    components: ComponentSettings = field(default_factory=ComponentSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)


# =============================================================================
# CONFIGURATION LOADING
# =============================================================================


def _parse_bool(value: str) -> bool:
    """Parse a string value to boolean."""
    return value.lower() in ("true", "yes", "1", "on", "enabled")


def _load_from_ini(parser: configparser.ConfigParser, cfg: ChatConfig) -> None:
    """Load configuration from parsed INI file into ChatConfig."""
    # Locale section
    if parser.has_section("locale"):
        if parser.has_option("locale", "name"):
            cfg.locale.name = parser.get("locale", "name")
        if parser.has_option("locale", "path"):
            cfg.locale.path = parser.get("locale", "path") or None

    # Components section
    if parser.has_section("components"):
        if parser.has_option("components", "check_cycles"):
            cfg.components.check_cycles = _parse_bool(parser.get("components", "check_cycles"))

    # Logging section
    if parser.has_section("logging"):
        if parser.has_option("logging", "level"):
            cfg.logging.level = parser.get("logging", "level").upper()


def _apply_env_overrides(cfg: ChatConfig) -> None:
    """Apply environment variable overrides to configuration."""
    if env_locale := os.getenv("MUD_CHAT_LOCALE"):
        cfg.locale.name = env_locale
    if env_locale_path := os.getenv("MUD_CHAT_LOCALE_PATH"):
        cfg.locale.path = env_locale_path
    if env_cycles := os.getenv("MUD_CHAT_CHECK_CYCLES"):
        cfg.components.check_cycles = _parse_bool(env_cycles)
    if env_log := os.getenv("MUD_CHAT_LOG_LEVEL"):
        cfg.logging.level = env_log.upper()


def load_config() -> ChatConfig:
    """
    Load configuration from all sources with proper priority.

    Priority (highest wins):
        1. Environment variables
        2. config/chat.ini
        3. config/chat.example.ini (fallback for development)
        4. Built-in defaults

    Returns:
        ChatConfig: Fully populated configuration object.
    """
    cfg = ChatConfig()

    config_file = None
    if CONFIG_FILE.exists():
        config_file = CONFIG_FILE
    elif CONFIG_EXAMPLE.exists():
        config_file = CONFIG_EXAMPLE

    if config_file:
        parser = configparser.ConfigParser()
        parser.read(config_file)
        _load_from_ini(parser, cfg)

    _apply_env_overrides(cfg)

    return cfg


def reload_config() -> "ChatConfig":
    """
    Reload configuration from disk and environment.

    Updates the fields of the module-level `config` singleton in place, so
    modules that imported it keep seeing current values.

    Returns:
        ChatConfig: The reloaded configuration (the same singleton object).
    """
    fresh = load_config()
    config.locale = fresh.locale
    config.components = fresh.components
    config.logging = fresh.logging
    return config


def apply_logging_settings(cfg: "ChatConfig | None" = None) -> None:
    """Set the package logger's level from the logging settings.

    Handlers are left to the host application.
    """
    cfg = cfg or config
    logging.getLogger(PACKAGE_LOGGER).setLevel(cfg.logging.level)


# =============================================================================
# MODULE-LEVEL SINGLETON
# =============================================================================

# Load configuration once at module import time
config = load_config()


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def get_config_status() -> dict:
    """
    Get configuration status for diagnostics.

    Returns a dictionary with configuration source information.
    """
    locale_path = config.locale.absolute_path
    return {
        "config_file_exists": CONFIG_FILE.exists(),
        "config_file_path": str(CONFIG_FILE),
        "using_example": not CONFIG_FILE.exists() and CONFIG_EXAMPLE.exists(),
        "locale": config.locale.name,
        "locale_path": str(locale_path) if locale_path else None,
        "check_cycles": config.components.check_cycles,
        "log_level": config.logging.level,
    }
