"""HTTP transport for the public status endpoints."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import aiohttp

from pyttr.config import TtrConfig
from pyttr.exceptions import FetchErrorKind, TtrFetchError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by the feed pipelines.

    Having a protocol here makes it easy to pass test doubles while keeping
    the production implementation (`HttpTransport`) concrete.
    """

    async def get(self, endpoint: str) -> bytes:
        ...


def build_request_headers(config: TtrConfig) -> dict[str, str]:
    """Headers sent with every feed request."""
    headers: dict[str, str] = {
        "accept": "application/json",
        "user-agent": config.user_agent,
    }
    if config.bypass_cache:
        headers["cache-control"] = "no-cache"
        headers["pragma"] = "no-cache"
    return headers


class HttpTransport:
    """Plain GET transport. Never retries; every failure surfaces as :class:`TtrFetchError`."""

    def __init__(self, config: TtrConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._headers = build_request_headers(config)

    async def get(self, endpoint: str) -> bytes:
        url = f"{self._config.base_url}{endpoint}"
        request_kwargs: dict[str, Any] = {"headers": self._headers}
        if self._config.request_timeout is not None:
            request_kwargs["timeout"] = aiohttp.ClientTimeout(total=self._config.request_timeout)

        _logger.debug("GET %s", url)

        try:
            async with self._http.get(url, **request_kwargs) as resp:
                body = await resp.read()
                if resp.status != 200:
                    raise TtrFetchError(
                        f"HTTP {resp.status} from {endpoint}: {body[:200]!r}",
                        kind=FetchErrorKind.HTTP_STATUS,
                        status_code=resp.status,
                        endpoint=endpoint,
                    )
        except TtrFetchError:
            raise
        except TimeoutError as exc:
            raise TtrFetchError(
                f"Request to {endpoint} timed out",
                kind=FetchErrorKind.TIMEOUT,
                endpoint=endpoint,
            ) from exc
        except aiohttp.ClientError as exc:
            raise TtrFetchError(
                f"Request to {endpoint} failed: {exc}",
                kind=FetchErrorKind.NETWORK_UNREACHABLE,
                endpoint=endpoint,
            ) from exc

        _logger.debug("GET %s -> %d bytes", url, len(body))
        return body
