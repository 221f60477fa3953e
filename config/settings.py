# config.py
"""Configuration management for the Ticks log bridge.

Centralized configuration using dataclasses for type safety and
environment variable integration.
"""

import logging
import os
from dataclasses import dataclass, field

DEFAULT_EVENT_NAME = "php_log"


def _env_bool(key: str, default: bool) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    return value.lower() not in ("0", "false", "no")


def _env_level(key: str, default: int) -> int:
    value = os.getenv(key)
    if not value:
        return default
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else default


@dataclass
class HandlerConfig:
    """Processing handler configuration."""
    event_name: str = DEFAULT_EVENT_NAME
    level: int = logging.DEBUG
    introspection: bool = True

    @classmethod
    def from_env(cls) -> "HandlerConfig":
        """Create configuration from environment variables."""
        return cls(
            event_name=os.getenv("TICKS_EVENT_NAME") or DEFAULT_EVENT_NAME,
            level=_env_level("TICKS_LOG_LEVEL", logging.DEBUG),
            introspection=_env_bool("TICKS_INTROSPECTION", True),
        )


@dataclass
class TracingConfig:
    """OpenTelemetry tracing configuration."""
    tracer_name: str = "ticks"

    @classmethod
    def from_env(cls) -> "TracingConfig":
        """Create configuration from environment variables."""
        return cls(
            tracer_name=os.getenv("TICKS_TRACER_NAME", "ticks"),
        )


@dataclass
class TicksConfig:
    """Main configuration container."""
    handler: HandlerConfig = field(default_factory=HandlerConfig)
    tracing: TracingConfig = field(default_factory=TracingConfig)

    @classmethod
    def from_env(cls) -> "TicksConfig":
        """Create complete configuration from environment variables."""
        return cls(
            handler=HandlerConfig.from_env(),
            tracing=TracingConfig.from_env(),
        )
