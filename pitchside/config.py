"""
Pitchside configuration.

All settings can be overridden via environment variables.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Optional


def _optional_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    return int(value) if value not in (None, "") else None


@dataclass
class PitchsideConfig:
    """Configuration for the match server and feed client."""

    # Server settings
    host: str = field(default_factory=lambda: os.getenv("PITCHSIDE_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.getenv("PITCHSIDE_PORT", "8080")))

    # Simulation settings
    tick_ms: int = field(default_factory=lambda: int(os.getenv("PITCHSIDE_TICK_MS", "100")))
    seed: Optional[int] = field(default_factory=lambda: _optional_int("PITCHSIDE_SEED"))

    log_level: str = field(default_factory=lambda: os.getenv("PITCHSIDE_LOG_LEVEL", "INFO"))

    # Feed client reconnect policy
    reconnect_base_delay: float = 1.0
    reconnect_max_delay: float = 5.0
    max_reconnect_attempts: int = 5

    @classmethod
    def from_env(cls) -> "PitchsideConfig":
        """Create config from environment variables."""
        return cls()

    @property
    def tick_interval(self) -> float:
        """Seconds between ticks."""
        return self.tick_ms / 1000.0

    @property
    def feed_url(self) -> str:
        return f"ws://{self.host}:{self.port}/ws/match"

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if not 0 < self.port < 65536:
            errors.append("PITCHSIDE_PORT must be between 1 and 65535")
        if self.tick_ms <= 0:
            errors.append("PITCHSIDE_TICK_MS must be positive")
        if logging.getLevelName(self.log_level.upper()) not in (
            logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL
        ):
            errors.append(f"Unknown PITCHSIDE_LOG_LEVEL: {self.log_level}")
        return errors


# Singleton config instance
_config: Optional[PitchsideConfig] = None


def get_config() -> PitchsideConfig:
    """Get the global pitchside configuration."""
    global _config
    if _config is None:
        _config = PitchsideConfig.from_env()
    return _config


def configure_logging(level: str = "INFO") -> None:
    """Set up root logging for the command line entry points."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )
