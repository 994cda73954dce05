"""Woragis runtime configuration and settings."""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

PACKAGE_DIR = Path(__file__).parent.parent


@dataclass
class WoragisConfig:
    """Runtime configuration for scaffold operations.

    Attributes:
        templates_dir: Root holding one subdirectory per template id
        extras_dir: Root holding the .github and terraform overlays
        log_file: Optional log file path (None uses the logger default)
    """

    templates_dir: Path = field(default_factory=lambda: PACKAGE_DIR / "templates")
    extras_dir: Path = field(default_factory=lambda: PACKAGE_DIR / "extras")
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "WoragisConfig":
        """Create config from environment variables.

        Environment variables:
            WORAGIS_TEMPLATES_DIR: Templates root directory
            WORAGIS_EXTRAS_DIR: Overlay (extras) root directory
            WORAGIS_LOG_FILE: Log file path

        Returns:
            WoragisConfig instance with values from environment or defaults
        """
        config = cls()
        if templates_dir := os.getenv("WORAGIS_TEMPLATES_DIR"):
            config.templates_dir = Path(templates_dir)
        if extras_dir := os.getenv("WORAGIS_EXTRAS_DIR"):
            config.extras_dir = Path(extras_dir)
        config.log_file = os.getenv("WORAGIS_LOG_FILE") or None
        return config


# Global config instance (can be overridden)
_config: Optional[WoragisConfig] = None


def get_config() -> WoragisConfig:
    """Get the global Woragis configuration.

    Returns:
        WoragisConfig instance (creates from environment if not set)
    """
    global _config
    if _config is None:
        _config = WoragisConfig.from_env()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next call re-reads the environment."""
    global _config
    _config = None
