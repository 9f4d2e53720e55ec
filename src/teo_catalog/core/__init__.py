"""Core infrastructure layer - no business logic dependencies.

This module provides foundation-level services:
- Configuration management (TOML + .env)
- Unified logging output (Loguru)
"""

from .config import (
    CatalogConfig,
    Config,
    LoggingConfig,
    MediaConfig,
    NotificationsConfig,
    create_default_config,
    ensure_default_config,
    get_config_dir,
    get_config_path,
    get_content_file,
    get_data_dir,
    load_config,
)
from .output import log, set_quiet_mode, setup_from_config, setup_loguru

__all__ = [
    "CatalogConfig",
    "Config",
    "LoggingConfig",
    "MediaConfig",
    "NotificationsConfig",
    "create_default_config",
    "ensure_default_config",
    "get_config_dir",
    "get_config_path",
    "get_content_file",
    "get_data_dir",
    "load_config",
    "log",
    "set_quiet_mode",
    "setup_from_config",
    "setup_loguru",
]
