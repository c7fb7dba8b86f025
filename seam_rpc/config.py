"""
Configuration settings for seam-rpc transports
"""
import os
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional

from seam_rpc.errors import ConfigError
from seam_rpc.transports.http.builder import DEFAULT_POOL_IDLE_TIMEOUT, HttpTransportBuilder

ENV_PREFIX = "SEAM_RPC_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass
class TransportConfig:
    """Configuration for the HTTP transport"""
    url: str = "http://localhost:8545"
    username: Optional[str] = None
    password: Optional[str] = None
    bearer_token: Optional[str] = None
    headers: Dict[str, str] = field(default_factory=dict)
    timeout: Optional[float] = None
    connect_timeout: Optional[float] = None
    pool_idle_timeout: Optional[float] = DEFAULT_POOL_IDLE_TIMEOUT
    pool_max_idle_per_host: Optional[int] = None
    tcp_keepalive: Optional[float] = None
    tcp_nodelay: bool = False
    https_only: bool = False

    @classmethod
    def from_env(cls) -> "TransportConfig":
        """Create config from environment variables"""
        defaults = cls()
        return cls(
            url=os.getenv(f"{ENV_PREFIX}URL", defaults.url),
            username=os.getenv(f"{ENV_PREFIX}USERNAME"),
            password=os.getenv(f"{ENV_PREFIX}PASSWORD"),
            bearer_token=os.getenv(f"{ENV_PREFIX}BEARER_TOKEN"),
            timeout=_env_float("TIMEOUT", defaults.timeout),
            connect_timeout=_env_float("CONNECT_TIMEOUT", defaults.connect_timeout),
            pool_idle_timeout=_env_float("POOL_IDLE_TIMEOUT", defaults.pool_idle_timeout),
            pool_max_idle_per_host=_env_int("POOL_MAX_IDLE_PER_HOST", defaults.pool_max_idle_per_host),
            tcp_keepalive=_env_float("TCP_KEEPALIVE", defaults.tcp_keepalive),
            tcp_nodelay=_env_bool("TCP_NODELAY", defaults.tcp_nodelay),
            https_only=_env_bool("HTTPS_ONLY", defaults.https_only),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TransportConfig":
        """Create config from a dictionary, unknown keys are rejected"""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigError(f"Unknown transport config keys: {sorted(unknown)}")
        return cls(**data)

    def to_builder(self) -> HttpTransportBuilder:
        """Translate this config into an HttpTransportBuilder"""
        builder = HttpTransportBuilder()
        builder.headers(self.headers)
        if self.bearer_token:
            builder.bearer_auth(self.bearer_token)
        elif self.username is not None:
            builder.basic_auth(self.username, self.password)
        if self.timeout is not None:
            builder.timeout(self.timeout)
        if self.connect_timeout is not None:
            builder.connect_timeout(self.connect_timeout)
        builder.pool_idle_timeout(self.pool_idle_timeout)
        if self.pool_max_idle_per_host is not None:
            builder.pool_max_idle_per_host(self.pool_max_idle_per_host)
        builder.tcp_keepalive(self.tcp_keepalive)
        builder.tcp_nodelay(self.tcp_nodelay)
        builder.https_only(self.https_only)
        return builder

    def build(self):
        """Build an HttpTransport for ``url``"""
        return self.to_builder().build(self.url)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging, credentials masked"""
        return {
            "url": self.url,
            "username": self.username,
            "password": "***" if self.password else None,
            "bearer_token": "***" if self.bearer_token else None,
            "headers": sorted(self.headers),
            "timeout": self.timeout,
            "connect_timeout": self.connect_timeout,
            "pool_idle_timeout": self.pool_idle_timeout,
            "pool_max_idle_per_host": self.pool_max_idle_per_host,
            "tcp_keepalive": self.tcp_keepalive,
            "tcp_nodelay": self.tcp_nodelay,
            "https_only": self.https_only,
        }


def _env_float(name: str, default: Optional[float]) -> Optional[float]:
    raw = os.getenv(ENV_PREFIX + name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigError(f"{ENV_PREFIX}{name} must be a number, got {raw!r}") from e


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(ENV_PREFIX + name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from e


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(ENV_PREFIX + name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{ENV_PREFIX}{name} must be a boolean, got {raw!r}")
