"""Service configuration loaded from environment variables."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from urllib.parse import urlsplit


class ConfigError(ValueError):
    """Invalid or missing configuration."""


def _validate_url(name: str, value: str) -> str:
    parts = urlsplit(value)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ConfigError(f"{name} must be an http(s) URL, got {value!r}")
    return value.rstrip("/")


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the bridge."""

    base_url: str
    link_url: str
    host: str = "0.0.0.0"
    port: int = 8080
    request_timeout: float = 30.0
    log_level: str = "INFO"
    log_file: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """
        Build settings from the environment.

        Variables:
            JAEGER_BASE_URL: jaeger-query API root (required)
            JAEGER_LINK_URL: Jaeger UI root for trace links (defaults to base)
            API_HOST, API_PORT: listen address
            JAEGER_TIMEOUT: upstream request timeout in seconds
            LOG_LEVEL, LOG_FILE: logging setup
        """
        env = os.environ if environ is None else environ

        base_url = env.get("JAEGER_BASE_URL", "").strip()
        if not base_url:
            raise ConfigError("JAEGER_BASE_URL must be set")
        base_url = _validate_url("JAEGER_BASE_URL", base_url)

        link_url = env.get("JAEGER_LINK_URL", "").strip()
        link_url = _validate_url("JAEGER_LINK_URL", link_url) if link_url else base_url

        try:
            port = int(env.get("API_PORT", "8080"))
            timeout = float(env.get("JAEGER_TIMEOUT", "30"))
        except ValueError as e:
            raise ConfigError(f"Invalid numeric setting: {e}") from e

        return cls(
            base_url=base_url,
            link_url=link_url,
            host=env.get("API_HOST", "0.0.0.0"),
            port=port,
            request_timeout=timeout,
            log_level=env.get("LOG_LEVEL", "INFO"),
            log_file=env.get("LOG_FILE") or None,
        )
