"""
Cache Facade Configuration Module

All configuration values are loaded from environment variables.
Defaults are only for local development.
"""

import os
from typing import Optional
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class RedisConfig:
    """Redis connection configuration."""
    host: str = "localhost"
    port: int = 6379
    db: int = 0
    password: Optional[str] = None
    socket_timeout: float = 5
    socket_connect_timeout: float = 5
    retry_on_timeout: bool = True
    decode_responses: bool = True
    max_connections: Optional[int] = None

    @classmethod
    def from_env(cls) -> "RedisConfig":
        """Load Redis config from environment variables."""
        password = os.getenv("REDIS_PASSWORD")
        max_connections = os.getenv("REDIS_MAX_CONNECTIONS")
        return cls(
            host=os.getenv("REDIS_HOST", "localhost"),
            port=int(os.getenv("REDIS_PORT", "6379")),
            db=int(os.getenv("REDIS_DB", "0")),
            password=password if password else None,
            socket_timeout=float(os.getenv("REDIS_SOCKET_TIMEOUT", "5")),
            socket_connect_timeout=float(os.getenv("REDIS_SOCKET_CONNECT_TIMEOUT", "5")),
            retry_on_timeout=_env_bool("REDIS_RETRY_ON_TIMEOUT", True),
            max_connections=int(max_connections) if max_connections else None,
        )

    def to_pool_kwargs(self) -> dict:
        kwargs = {
            "host": self.host,
            "port": self.port,
            "db": self.db,
            "password": self.password,
            "socket_timeout": self.socket_timeout,
            "socket_connect_timeout": self.socket_connect_timeout,
            "retry_on_timeout": self.retry_on_timeout,
            "decode_responses": self.decode_responses,
        }
        if self.max_connections is not None:
            kwargs["max_connections"] = self.max_connections
        return kwargs


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "INFO"
    json_format: bool = False

    @classmethod
    def from_env(cls) -> "LogConfig":
        return cls(
            level=os.getenv("LOG_LEVEL", "INFO").upper(),
            json_format=os.getenv("LOG_FORMAT", "plain").lower() == "json",
        )


# Global config instances (lazy loaded)
_redis_config = None
_log_config = None


def get_redis_config() -> RedisConfig:
    """Get Redis configuration (singleton)."""
    global _redis_config
    if _redis_config is None:
        _redis_config = RedisConfig.from_env()
    return _redis_config


def get_log_config() -> LogConfig:
    """Get logging configuration (singleton)."""
    global _log_config
    if _log_config is None:
        _log_config = LogConfig.from_env()
    return _log_config
