"""Application settings using pydantic-settings."""

import argparse
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from atlas_clock import __version__
from atlas_clock.core.config_store import get_default_config_path
from atlas_clock.terminal.themes import THEMES

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Runtime settings, read from ``ATLAS_CLOCK_*`` environment variables
    and overridden by command line flags."""

    model_config = SettingsConfigDict(
        env_prefix="ATLAS_CLOCK_",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    config_file: Path = Field(
        default_factory=get_default_config_path,
        description="JSON file holding the clock list",
    )

    refresh_interval: float = Field(
        default=0.05,
        ge=0.01,
        le=1.0,
        description="Seconds between display refresh ticks",
    )

    theme: str = Field(default="gold", description="Color theme")

    log_level: str = Field(default="INFO", description="Logging level")

    log_file: Optional[Path] = Field(
        default=None, description="Write logs to this file"
    )

    @field_validator("theme")
    @classmethod
    def validate_theme(cls, v: str) -> str:
        name = v.lower()
        if name not in THEMES:
            raise ValueError(
                f"Unknown theme: {v}. Choose one of: {', '.join(sorted(THEMES))}"
            )
        return name

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}")
        return level

    @field_validator("config_file", "log_file")
    @classmethod
    def expand_path(cls, v: Optional[Path]) -> Optional[Path]:
        return v.expanduser() if v is not None else None

    @classmethod
    def load(cls, argv: Optional[List[str]] = None) -> "Settings":
        """Load settings from the environment and command line.

        Args:
            argv: Command line arguments without the program name

        Returns:
            Validated settings
        """
        args = build_parser().parse_args(argv or [])
        overrides: Dict[str, Any] = {
            key: value for key, value in vars(args).items() if value is not None
        }
        if overrides:
            logger.debug(f"Command line overrides: {sorted(overrides)}")
        return cls(**overrides)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="atlas-clock",
        description="Terminal dashboard of world clocks.",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"atlas.clock v{__version__}",
    )
    parser.add_argument("--config-file", dest="config_file", type=Path)
    parser.add_argument("--refresh-interval", dest="refresh_interval", type=float)
    parser.add_argument("--theme", dest="theme", choices=sorted(THEMES))
    parser.add_argument("--log-level", dest="log_level")
    parser.add_argument("--log-file", dest="log_file", type=Path)
    return parser
