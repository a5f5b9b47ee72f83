"""Configuration management for the preview server."""

import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationError

load_dotenv()

LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


@dataclass
class PathConfig:
    """Path configuration for the preview server."""

    base_dir: Path = field(default_factory=lambda: Path(__file__).parent.parent)
    pages_dir: Optional[Path] = field(
        default_factory=lambda: os.getenv("PREVIEW_PAGES_DIR")
    )

    def __post_init__(self):
        self.base_dir = Path(self.base_dir)
        if self.pages_dir is None:
            self.pages_dir = self.base_dir / "preview"
        self.pages_dir = Path(self.pages_dir)
        self.logs_dir = self.base_dir / "logs"


@dataclass
class ServerConfig:
    """Configuration for the HTTP listener."""

    host: str = field(default_factory=lambda: os.getenv("PREVIEW_HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: os.getenv("PREVIEW_PORT", 5000))
    log_level: str = field(
        default_factory=lambda: os.getenv("PREVIEW_LOG_LEVEL", "info")
    )

    def __post_init__(self):
        try:
            self.port = int(self.port)
        except (TypeError, ValueError):
            raise ConfigurationError(f"Invalid port: {self.port!r}")

        if not 1 <= self.port <= 65535:
            raise ConfigurationError(f"Port out of range: {self.port}")

        self.log_level = str(self.log_level).lower()
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {self.log_level!r}")

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"


@dataclass
class ResponseConfig:
    """Fixed response settings for served pages."""

    content_type: str = "text/html"
    cache_control: str = "no-cache, no-store, must-revalidate"
    error_body: str = "Error loading page"


@dataclass
class Config:
    """Main configuration class."""

    paths: PathConfig = field(default_factory=PathConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    response: ResponseConfig = field(default_factory=ResponseConfig)

