"""Feed lifecycle states."""

from __future__ import annotations

from enum import StrEnum


class FeedState(StrEnum):
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"
    STALE = "stale"
    """Serving data from an earlier refresh; the latest refresh failed."""


def derive_state(*, has_data: bool, in_flight: bool, failed: bool) -> FeedState:
    """Collapse store bookkeeping into a single lifecycle state.

    A refresh in flight always reports ``LOADING``; consumers that want to keep
    showing old data while loading should check ``FeedStore.has_data``.
    """
    if in_flight:
        return FeedState.LOADING
    if not has_data:
        return FeedState.UNINITIALIZED
    if failed:
        return FeedState.STALE
    return FeedState.READY
