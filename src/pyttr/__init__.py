"""pyttr - Async Python client for the Toontown Rewritten status API."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyttr")
except PackageNotFoundError:
    __version__ = "0+local"
from pyttr.client import TtrClient
from pyttr.config import TtrConfig
from pyttr.exceptions import (
    DecodeErrorKind,
    FetchErrorKind,
    TtrConfigError,
    TtrDecodeError,
    TtrError,
    TtrFetchError,
    TtrRefreshError,
)
from pyttr.feeds import FIELD_OFFICES, INVASIONS, FeedDefinition
from pyttr.models import FeedSnapshot, FieldOfficeStatus, InvasionStatus
from pyttr.state.status import FeedState
from pyttr.state.store import FeedStore

__all__ = [
    "__version__",
    "DecodeErrorKind",
    "FIELD_OFFICES",
    "FeedDefinition",
    "FeedSnapshot",
    "FeedState",
    "FeedStore",
    "FetchErrorKind",
    "FieldOfficeStatus",
    "INVASIONS",
    "InvasionStatus",
    "TtrClient",
    "TtrConfig",
    "TtrConfigError",
    "TtrDecodeError",
    "TtrError",
    "TtrFetchError",
    "TtrRefreshError",
]
