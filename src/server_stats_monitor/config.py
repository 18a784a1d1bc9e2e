"""Configuration management for Server Stats Monitor."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

DEFAULT_URL = "http://srv.msk01.gigacorp.local/_stats"
DEFAULT_CONFIG_PATHS = ["ssm.yaml", "ssm.yml", "~/.config/ssm/config.yaml"]


@dataclass
class RetryConfig:
    """Retry settings for a fetch cycle."""

    max_attempts: int = 3
    delay: float = 2.0  # seconds between attempts

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RetryConfig":
        """Create from dictionary."""
        return cls(
            max_attempts=data.get("max_attempts", 3),
            delay=data.get("delay", 2.0),
        )


@dataclass
class Config:
    """Main configuration for Server Stats Monitor."""

    url: str = DEFAULT_URL
    timeout: float = 10.0  # seconds
    retry: RetryConfig = field(default_factory=RetryConfig)
    interval: int = 60  # seconds, watch mode only
    log_level: str = "WARNING"

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Create configuration from dictionary."""
        return cls(
            url=data.get("url", DEFAULT_URL),
            timeout=data.get("timeout", 10.0),
            retry=RetryConfig.from_dict(data.get("retry") or {}),
            interval=data.get("interval", 60),
            log_level=data.get("log_level", "WARNING"),
        )

    @classmethod
    def load(cls, path: str | Path | None = None) -> "Config":
        """Load from ``path``, else the first default location found, else defaults."""
        if path is not None:
            return cls.from_yaml(path)

        for default_path in DEFAULT_CONFIG_PATHS:
            candidate = Path(default_path).expanduser()
            if candidate.exists():
                return cls.from_yaml(candidate)
        return cls()

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            yaml.dump(self._to_dict(), f, default_flow_style=False, sort_keys=False)

    def _to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "url": self.url,
            "timeout": self.timeout,
            "retry": {
                "max_attempts": self.retry.max_attempts,
                "delay": self.retry.delay,
            },
            "interval": self.interval,
            "log_level": self.log_level,
        }
