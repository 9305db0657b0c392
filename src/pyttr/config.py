"""Client configuration for pyttr."""

from __future__ import annotations

import dataclasses
import os
from datetime import tzinfo
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pyttr._constants import BASE_URL, USER_AGENT
from pyttr.exceptions import TtrConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class TtrConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        API base URL, without a trailing slash.
    user_agent : str
        Descriptive client identifier sent as ``User-Agent``. The upstream
        API usage policy asks every client to identify itself, so this must
        not be empty.
    bypass_cache : bool
        Send ``Cache-Control: no-cache`` / ``Pragma: no-cache`` on every
        request so intermediaries never serve a stale feed.
    request_timeout : float or None
        Total request timeout in seconds. ``None`` keeps aiohttp's default.
    time_zone : str or None
        IANA time zone used when formatting feed timestamps for display.
        ``None`` means the local time zone.
    """

    base_url: str = BASE_URL
    user_agent: str = USER_AGENT
    bypass_cache: bool = True
    request_timeout: float | None = None
    time_zone: str | None = None

    def __post_init__(self) -> None:
        if not self.user_agent or not self.user_agent.strip():
            raise TtrConfigError("user_agent must be a non-empty client identifier")
        if self.request_timeout is not None and self.request_timeout <= 0:
            raise TtrConfigError(f"request_timeout must be positive, got {self.request_timeout}")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    def tzinfo(self) -> tzinfo | None:
        """Resolve ``time_zone`` to a tzinfo (``None`` for local time)."""
        if self.time_zone is None:
            return None
        try:
            return ZoneInfo(self.time_zone)
        except ZoneInfoNotFoundError as exc:
            raise TtrConfigError(f"Unknown time zone: {self.time_zone}") from exc

    @classmethod
    def from_env(cls, **overrides: Any) -> TtrConfig:
        """Create configuration from ``TTR_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "TTR_BASE_URL": "base_url",
            "TTR_USER_AGENT": "user_agent",
            "TTR_TIME_ZONE": "time_zone",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        if "bypass_cache" not in overrides:
            config_kwargs["bypass_cache"] = _env_bool(env.get("TTR_BYPASS_CACHE"), True)

        timeout_env = env.get("TTR_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            try:
                config_kwargs["request_timeout"] = float(timeout_env)
            except ValueError as exc:
                raise TtrConfigError(f"TTR_REQUEST_TIMEOUT is not a number: {timeout_env!r}") from exc

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
