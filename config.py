"""Runtime configuration for the traversal service.

Values come from the environment, with a ``.env`` file loaded first when
present.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


@dataclass
class ServerConfig:
    """Configuration for the HTTP service."""

    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Build a config from GRAPHWALK_* environment variables.

        Raises:
            ValueError: If GRAPHWALK_PORT is not an integer.
        """
        raw_port = os.getenv("GRAPHWALK_PORT", "8000")
        try:
            port = int(raw_port)
        except ValueError:
            raise ValueError(f"GRAPHWALK_PORT must be an integer, got {raw_port!r}")

        origins = os.getenv("GRAPHWALK_CORS_ORIGINS", "*")
        return cls(
            host=os.getenv("GRAPHWALK_HOST", "0.0.0.0"),
            port=port,
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()] or ["*"],
            log_level=os.getenv("GRAPHWALK_LOG_LEVEL", "INFO").upper(),
        )
