from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from .faults import FaultProfile, resolve_profile

DEFAULT_VERSION = "v1.0.0"
DEFAULT_CHANNEL = "stable"
DEFAULT_PORT = 8080


def _env_str(env: Mapping[str, str], name: str, default: str) -> str:
    # Unset and empty are treated the same.
    raw = env.get(name)
    if not raw:
        return default
    return raw


def _env_bool(env: Mapping[str, str], name: str, default: bool = False) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    """Resolved configuration.

    error_rate and latency_ms are not looked up here; use from_version or
    load_settings to get the values the fault table assigns to a version.
    """

    version: str = DEFAULT_VERSION
    channel: str = DEFAULT_CHANNEL
    error_rate: float = 0.0
    latency_ms: int = 50

    # Server
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT

    # Serve the channel-aware HTML page on "/"
    status_page: bool = True

    @property
    def is_canary(self) -> bool:
        return self.channel == "canary"

    @property
    def profile(self) -> FaultProfile:
        return FaultProfile(error_rate=self.error_rate, latency_ms=self.latency_ms)

    @classmethod
    def from_version(cls, version: str, **kwargs) -> Settings:
        profile = resolve_profile(version)
        return cls(version=version, error_rate=profile.error_rate, latency_ms=profile.latency_ms, **kwargs)


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Resolve settings from the environment.

    Never fails: unknown versions get the default fault profile and bad
    integers fall back to their defaults.
    """
    env = os.environ if environ is None else environ
    version = _env_str(env, "APP_VERSION", DEFAULT_VERSION)
    return Settings.from_version(
        version,
        channel=_env_str(env, "DEPLOYMENT_CHANNEL", DEFAULT_CHANNEL),
        host=_env_str(env, "HOST", "0.0.0.0"),
        port=_env_int(env, "PORT", DEFAULT_PORT),
        status_page=_env_bool(env, "APP_STATUS_PAGE", True),
    )
