"""
Configuration management for the TeO catalog core
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from loguru import logger


@dataclass
class MediaConfig:
    """Configuration for media source classification and embedding."""

    audio_extensions: List[str] = field(
        default_factory=lambda: [".mp3", ".wav", ".ogg", ".m4a"]
    )
    trusted_storage_prefixes: List[str] = field(
        default_factory=lambda: ["https://storage.googleapis.com/"]
    )
    youtube_hosts: List[str] = field(
        default_factory=lambda: ["youtube.com", "youtu.be"]
    )
    embed_provider_domain: str = "suno.com"
    youtube_embed_base: str = "https://www.youtube.com/embed/"
    suno_embed_template: str = "https://suno.com/embed/playlist/{playlist_id}"

    def validate(self) -> None:
        """Validate media configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        bad_extensions = [ext for ext in self.audio_extensions if not ext.startswith(".")]
        if bad_extensions:
            raise ValueError(
                f"Audio extensions must start with '.': {bad_extensions}"
            )
        if "{playlist_id}" not in self.suno_embed_template:
            raise ValueError("suno_embed_template must contain '{playlist_id}'")


@dataclass
class CatalogConfig:
    """Configuration for catalog content and playlist grouping."""

    content_file: Optional[str] = None  # JSON catalog (default: <data dir>/content.json)
    category_order: List[str] = field(
        default_factory=lambda: [
            "TeO Official",
            "S.M.T. Selects",
            "Showcase",
            "Occasional",
            "User Playlists",
        ]
    )


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/teo-catalog/teo-catalog.log)
    )
    max_file_size_mb: int = 10
    backup_count: int = 5


@dataclass
class NotificationsConfig:
    """Configuration for user-facing notices."""

    enabled: bool = True
    show_success: bool = True
    show_errors: bool = True
    desktop: bool = False  # Also send notify-send desktop notifications


@dataclass
class Config:
    """Main configuration object."""

    media: MediaConfig = field(default_factory=MediaConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    notifications: NotificationsConfig = field(default_factory=NotificationsConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "teo-catalog"
    return Path.home() / ".config" / "teo-catalog"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "teo-catalog"
    return Path.home() / ".local" / "share" / "teo-catalog"


def _find_project_config() -> Optional[Path]:
    """Find config.toml in project root by looking for pyproject.toml.

    Returns:
        Path to config.toml in project root, or None if not found
    """
    current = Path(__file__).resolve().parent
    for parent in [current] + list(current.parents):
        if (parent / "pyproject.toml").exists():
            config_path = parent / "config.toml"
            if config_path.exists():
                return config_path
            return None
    return None


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. Project root (detected via pyproject.toml) - for development
    2. Current working directory
    3. XDG_CONFIG_HOME/teo-catalog (or ~/.config/teo-catalog)
    """
    project_config = _find_project_config()
    if project_config:
        return project_config

    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def get_content_file(config: Config) -> Path:
    """Resolve the catalog content file path from config."""
    if config.catalog.content_file:
        return Path(config.catalog.content_file).expanduser()
    return get_data_dir() / "content.json"


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return """
# TeO Catalog Configuration

[media]
# File extensions treated as directly streamable audio
audio_extensions = [".mp3", ".wav", ".ogg", ".m4a"]

# URL prefixes whose content is always streamable audio
trusted_storage_prefixes = ["https://storage.googleapis.com/"]

# Domain of the embeddable playlist provider
embed_provider_domain = "suno.com"

[catalog]
# JSON catalog with tracks, playlists, videos and news
# content_file = "~/.local/share/teo-catalog/content.json"

# Order of playlist sections (unknown categories go to "Other")
category_order = ["TeO Official", "S.M.T. Selects", "Showcase", "Occasional", "User Playlists"]

[logging]
# Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
level = "INFO"

# Maximum log file size in MB before rotation
max_file_size_mb = 10

# Number of backup log files to keep
backup_count = 5

[notifications]
# Enable user-facing notices
enabled = true
show_success = true
show_errors = true

# Also send desktop notifications via notify-send
desktop = false
""".strip()


def ensure_default_config(config_path: Optional[Path] = None) -> Path:
    """Write the default config.toml if none exists yet.

    Returns:
        Path of the (possibly pre-existing) configuration file
    """
    config_path = config_path or get_config_dir() / "config.toml"
    if not config_path.exists():
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            f.write(create_default_config())
        logger.info(f"Created default configuration at: {config_path}")
    return config_path


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file or fall back to defaults.

    Environment variables override TOML values:
    - TEO_CONTENT_FILE
    - TEO_LOG_LEVEL
    """
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    config_path = config_path or get_config_path()
    config = Config()

    if config_path.exists():
        try:
            with open(config_path, "rb") as f:
                toml_data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning(f"Could not read {config_path}: {e}. Using defaults.")
            toml_data = {}

        if "media" in toml_data:
            media_data = toml_data["media"]
            config.media = MediaConfig(
                audio_extensions=[
                    ext.lower()
                    for ext in media_data.get(
                        "audio_extensions", config.media.audio_extensions
                    )
                ],
                trusted_storage_prefixes=media_data.get(
                    "trusted_storage_prefixes", config.media.trusted_storage_prefixes
                ),
                youtube_hosts=media_data.get("youtube_hosts", config.media.youtube_hosts),
                embed_provider_domain=media_data.get(
                    "embed_provider_domain", config.media.embed_provider_domain
                ),
                youtube_embed_base=media_data.get(
                    "youtube_embed_base", config.media.youtube_embed_base
                ),
                suno_embed_template=media_data.get(
                    "suno_embed_template", config.media.suno_embed_template
                ),
            )
            try:
                config.media.validate()
            except ValueError as e:
                logger.warning(f"Invalid media configuration: {e}. Using defaults.")
                config.media = MediaConfig()

        if "catalog" in toml_data:
            catalog_data = toml_data["catalog"]
            config.catalog = CatalogConfig(
                content_file=catalog_data.get("content_file"),
                category_order=catalog_data.get(
                    "category_order", config.catalog.category_order
                ),
            )

        if "logging" in toml_data:
            logging_data = toml_data["logging"]
            log_file = logging_data.get("log_file")
            if log_file:
                log_file = str(Path(log_file).expanduser())
            config.logging = LoggingConfig(
                level=logging_data.get("level", config.logging.level).upper(),
                log_file=log_file,
                max_file_size_mb=logging_data.get(
                    "max_file_size_mb", config.logging.max_file_size_mb
                ),
                backup_count=logging_data.get(
                    "backup_count", config.logging.backup_count
                ),
            )

        if "notifications" in toml_data:
            notifications_data = toml_data["notifications"]
            config.notifications = NotificationsConfig(
                enabled=notifications_data.get(
                    "enabled", config.notifications.enabled
                ),
                show_success=notifications_data.get(
                    "show_success", config.notifications.show_success
                ),
                show_errors=notifications_data.get(
                    "show_errors", config.notifications.show_errors
                ),
                desktop=notifications_data.get(
                    "desktop", config.notifications.desktop
                ),
            )
    else:
        logger.debug(f"No config file at {config_path}, using defaults")

    # Environment overrides
    content_file = os.environ.get("TEO_CONTENT_FILE")
    if content_file:
        config.catalog.content_file = content_file

    log_level = os.environ.get("TEO_LOG_LEVEL")
    if log_level:
        config.logging.level = log_level.upper()

    return config
