"""Configuration management for the kid-friendly places map."""

import logging
import os
from typing import Optional

from pydantic import BaseModel, Field

from .models.region import SAN_FRANCISCO, BoundingBox

DEFAULT_OVERPASS_URL = "https://overpass-api.de/api/interpreter"


class AppConfig(BaseModel):
    """Application-level configuration."""

    # Overpass API
    overpass_url: str = Field(
        default=DEFAULT_OVERPASS_URL,
        description="Overpass API interpreter endpoint",
    )
    http_timeout: float = Field(
        default=120.0,
        gt=0,
        description="Client-side timeout for the Overpass request, in seconds",
    )
    query_timeout: int = Field(
        default=90,
        gt=0,
        description="Server-side timeout hint embedded in the Overpass query, in seconds",
    )

    # Region
    region: BoundingBox = Field(
        default=SAN_FRANCISCO,
        description="Bounding box searched for locations",
    )

    log_level: str = Field(default="INFO", description="Root logging level")

    @classmethod
    def load(cls) -> "AppConfig":
        """Load configuration from environment and defaults."""
        return cls(
            overpass_url=os.environ.get("KIDMAP_OVERPASS_URL", DEFAULT_OVERPASS_URL),
            http_timeout=float(os.environ.get(
                "KIDMAP_HTTP_TIMEOUT", cls.model_fields["http_timeout"].default
            )),
            query_timeout=int(os.environ.get(
                "KIDMAP_QUERY_TIMEOUT", cls.model_fields["query_timeout"].default
            )),
            log_level=os.environ.get("KIDMAP_LOG_LEVEL", "INFO").upper(),
        )


def configure_logging(level: str = "INFO") -> None:
    """Set up root logging for the CLI and server."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Global config instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get or create global configuration."""
    global _config
    if _config is None:
        _config = AppConfig.load()
    return _config
