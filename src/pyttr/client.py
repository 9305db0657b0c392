"""High-level async client for the TTR status API."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from pyttr._transport import HttpTransport
from pyttr.config import TtrConfig
from pyttr.exceptions import TtrError, TtrRefreshError
from pyttr.feeds import FIELD_OFFICES, INVASIONS
from pyttr.models.field_office import FieldOfficeStatus
from pyttr.models.invasion import InvasionStatus
from pyttr.state.store import FeedStore

_logger = logging.getLogger(__name__)


class TtrClient:
    """Async client for the TTR invasion and field office feeds.

    The client doubles as the transport for its feed stores, so stores (and
    their subscribers) survive leaving and re-entering the context.

    Usage::

        async with TtrClient() as client:
            await client.invasions.refresh()
            for street, invasion in client.invasions.current().items_by_location.items():
                ...
    """

    def __init__(
        self,
        config: TtrConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self._config = config if config is not None else TtrConfig()
        self._external_session = session is not None
        self._http_session = session
        self._transport: HttpTransport | None = None
        self.invasions: FeedStore[str, InvasionStatus] = FeedStore(INVASIONS, self)
        self.field_offices: FeedStore[int, FieldOfficeStatus] = FeedStore(FIELD_OFFICES, self)

    @property
    def config(self) -> TtrConfig:
        return self._config

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> TtrClient:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = None

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _require_transport(self) -> HttpTransport:
        if self._transport is None:
            raise TtrError("Client not initialized. Use 'async with TtrClient(...) as client:'")
        return self._transport

    async def get(self, endpoint: str) -> bytes:
        return await self._require_transport().get(endpoint)

    # ------------------------------------------------------------------
    # Feeds
    # ------------------------------------------------------------------

    async def refresh_all(self) -> dict[str, TtrRefreshError | None]:
        """Refresh both feeds concurrently.

        Returns a mapping of feed name to the refresh error, or ``None`` for
        feeds that refreshed successfully. One feed failing never affects the
        other.
        """
        stores: tuple[FeedStore[Any, Any], ...] = (self.invasions, self.field_offices)
        results = await asyncio.gather(*(store.refresh() for store in stores), return_exceptions=True)

        outcome: dict[str, TtrRefreshError | None] = {}
        for store, result in zip(stores, results, strict=True):
            if isinstance(result, TtrRefreshError):
                outcome[store.name] = result
            elif isinstance(result, BaseException):
                raise result
            else:
                outcome[store.name] = None
        _logger.debug("refresh_all: %s", {name: err is None for name, err in outcome.items()})
        return outcome
