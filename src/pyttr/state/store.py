"""In-memory store holding the latest snapshot of one feed.

This is the only component allowed to replace a feed snapshot.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Generic

from pyttr._transport import Transport
from pyttr.exceptions import TtrDecodeError, TtrFetchError, TtrRefreshError
from pyttr.feeds import FeedDefinition
from pyttr.ingestion.pipeline import load_snapshot
from pyttr.models.snapshot import FeedSnapshot, KeyT, StatusT
from pyttr.state.status import FeedState, derive_state

_logger = logging.getLogger(__name__)

SnapshotListener = Callable[[FeedSnapshot[KeyT, StatusT]], None]


class FeedStore(Generic[KeyT, StatusT]):
    """Latest snapshot of a feed plus manual refresh.

    The snapshot is replaced by a single reference assignment after the whole
    pipeline has finished, so readers see either the old or the new snapshot
    and a failed or cancelled refresh leaves it untouched. Overlapping
    refreshes are not coalesced; the last one to finish wins.
    """

    def __init__(self, feed: FeedDefinition[KeyT, StatusT], transport: Transport) -> None:
        self._feed = feed
        self._transport = transport
        self._snapshot: FeedSnapshot[KeyT, StatusT] = feed.empty_snapshot()
        self._listeners: list[SnapshotListener[KeyT, StatusT]] = []
        self._loaded = False
        self._in_flight = 0
        self._last_error: TtrRefreshError | None = None

    @property
    def name(self) -> str:
        return self._feed.name

    @property
    def has_data(self) -> bool:
        """Whether at least one refresh has succeeded."""
        return self._loaded

    @property
    def last_error(self) -> TtrRefreshError | None:
        """Error from the most recent refresh, cleared by the next success."""
        return self._last_error

    @property
    def is_stale(self) -> bool:
        return self._loaded and self._last_error is not None

    @property
    def state(self) -> FeedState:
        return derive_state(
            has_data=self._loaded,
            in_flight=self._in_flight > 0,
            failed=self._last_error is not None,
        )

    def current(self) -> FeedSnapshot[KeyT, StatusT]:
        return self._snapshot

    def subscribe(self, listener: SnapshotListener[KeyT, StatusT]) -> None:
        """Call *listener* with the new snapshot after every successful refresh."""
        self._listeners.append(listener)

    async def refresh(self) -> FeedSnapshot[KeyT, StatusT]:
        """Fetch, decode and normalize the feed, then swap in the result.

        Raises
        ------
        TtrRefreshError
            If any stage fails. The previous snapshot is kept.
        """
        self._in_flight += 1
        try:
            snapshot = await load_snapshot(self._feed, self._transport)
        except (TtrFetchError, TtrDecodeError) as exc:
            error = TtrRefreshError(f"{self.name} refresh failed: {exc}", feed=self.name, cause=exc)
            self._last_error = error
            _logger.warning("%s refresh failed, keeping previous snapshot: %s", self.name, exc)
            raise error from exc
        finally:
            self._in_flight -= 1

        self._snapshot = snapshot
        self._loaded = True
        self._last_error = None
        _logger.debug("%s snapshot replaced (last_updated=%d)", self.name, snapshot.last_updated)
        self._notify(snapshot)
        return snapshot

    def _notify(self, snapshot: FeedSnapshot[KeyT, StatusT]) -> None:
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                _logger.exception("%s listener %r raised", self.name, listener)
