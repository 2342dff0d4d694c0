"""
Server Configuration

Loads configuration from environment variables and provides defaults.
Supports loading from .env file using python-dotenv.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

# Single .env at the project root
root_env = BASE_DIR / ".env"
if root_env.exists():
    load_dotenv(root_env)


@dataclass
class ServerConfig:
    """Server configuration."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    # Feed cache
    cache_ttl_ms: int = 10 * 60 * 1000
    episode_limit: int = 100

    # Upstream requests
    request_timeout: float = 30.0
    user_agent: str = "PodScript-Studio/1.0"
    noembed_url: str = "https://noembed.com/embed"

    # Front end
    static_dir: Path = BASE_DIR / "public"

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Load configuration from environment variables."""
        static_dir = Path(os.getenv("STATIC_DIR", str(BASE_DIR / "public")))
        if not static_dir.is_absolute():
            static_dir = (BASE_DIR / static_dir).resolve()

        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            cache_ttl_ms=int(os.getenv("CACHE_TTL_MS", str(10 * 60 * 1000))),
            episode_limit=int(os.getenv("EP_LIMIT", "100")),
            request_timeout=float(os.getenv("FEED_TIMEOUT_SECONDS", "30")),
            user_agent=os.getenv("USER_AGENT", "PodScript-Studio/1.0"),
            noembed_url=os.getenv("NOEMBED_URL", "https://noembed.com/embed"),
            static_dir=static_dir,
        )

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate the configuration.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        if self.cache_ttl_ms < 0:
            errors.append(f"CACHE_TTL_MS must be >= 0, got {self.cache_ttl_ms}")

        if self.episode_limit < 0:
            errors.append(f"EP_LIMIT must be >= 0, got {self.episode_limit}")

        if self.request_timeout <= 0:
            errors.append(f"FEED_TIMEOUT_SECONDS must be > 0, got {self.request_timeout}")

        # Static dir is optional; without it only the API is served

        return len(errors) == 0, errors


# Global config instance
_config: Optional[ServerConfig] = None


def get_config() -> ServerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ServerConfig.from_env()
    return _config


def reload_config() -> ServerConfig:
    """Reload configuration from environment."""
    global _config
    _config = None
    return get_config()
