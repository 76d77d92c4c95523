"""Runtime configuration for the navigation API and CLI."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

_TRUTHY = ("1", "true", "yes")


def _default_origins() -> list[str]:
    return ["http://localhost:3000"]


@dataclass
class NavSchemaConfig:
    """Settings resolved from the environment.

    Attributes:
        log_level: Root logging level name (NAVSCHEMA_LOG_LEVEL)
        strict: Refuse to start the API when validation finds errors
            (NAVSCHEMA_STRICT)
        host: Bind address for ``navschema serve`` (NAVSCHEMA_HOST)
        port: Bind port for ``navschema serve`` (NAVSCHEMA_PORT)
        cors_origins: Allowed browser origins (NAVSCHEMA_CORS_ORIGINS,
            comma-separated)
    """

    log_level: str = "info"
    strict: bool = False
    host: str = "127.0.0.1"
    port: int = 8000
    cors_origins: list[str] = field(default_factory=_default_origins)

    @classmethod
    def from_env(cls) -> NavSchemaConfig:
        """Create config from environment variables, falling back to defaults."""
        origins = os.environ.get("NAVSCHEMA_CORS_ORIGINS")
        return cls(
            log_level=os.environ.get("NAVSCHEMA_LOG_LEVEL", "info").lower(),
            strict=os.environ.get("NAVSCHEMA_STRICT", "").lower() in _TRUTHY,
            host=os.environ.get("NAVSCHEMA_HOST", "127.0.0.1"),
            port=int(os.environ.get("NAVSCHEMA_PORT", "8000")),
            cors_origins=(
                [o.strip() for o in origins.split(",") if o.strip()]
                if origins
                else _default_origins()
            ),
        )

    @property
    def logging_level(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        return level


def configure_logging(config: NavSchemaConfig) -> None:
    """Apply the configured level to the root logger."""
    logging.basicConfig(
        level=config.logging_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
