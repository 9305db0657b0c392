"""Fetch -> decode -> normalize for a single feed."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pyttr._transport import Transport
from pyttr.models.snapshot import FeedSnapshot, KeyT, StatusT

if TYPE_CHECKING:
    from pyttr.feeds import FeedDefinition

_logger = logging.getLogger(__name__)


async def load_snapshot(
    feed: FeedDefinition[KeyT, StatusT],
    transport: Transport,
) -> FeedSnapshot[KeyT, StatusT]:
    """Run the full pipeline for *feed*.

    Every stage raises immediately (:class:`TtrFetchError` or
    :class:`TtrDecodeError`); nothing here retries or recovers.
    """
    raw = await transport.get(feed.endpoint)
    payload = feed.decode(raw)
    snapshot = feed.normalize(payload)
    _logger.debug(
        "%s: normalized %d entries (last_updated=%d)",
        feed.name,
        len(snapshot.items_by_location),
        snapshot.last_updated,
    )
    return snapshot
