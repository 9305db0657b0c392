"""Custom exception hierarchy for pyttr."""

from __future__ import annotations

from enum import StrEnum


class FetchErrorKind(StrEnum):
    NETWORK_UNREACHABLE = "network_unreachable"
    HTTP_STATUS = "http_status"
    TIMEOUT = "timeout"


class DecodeErrorKind(StrEnum):
    MALFORMED_JSON = "malformed_json"
    SCHEMA_MISMATCH = "schema_mismatch"


class TtrError(Exception):
    """Base exception for all pyttr errors."""


class TtrConfigError(TtrError):
    """Invalid or missing configuration."""


class TtrFetchError(TtrError):
    """HTTP-level failure (network, non-200, timeout)."""

    def __init__(
        self,
        message: str,
        *,
        kind: FetchErrorKind,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.kind = kind
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class TtrDecodeError(TtrError):
    """Response body is not JSON or does not match the feed's wire schema.

    ``field`` carries the dotted wire path of the offending value for
    ``SCHEMA_MISMATCH`` (e.g. ``"fieldOffices.3100.difficulty"``).
    """

    def __init__(
        self,
        message: str,
        *,
        kind: DecodeErrorKind,
        field: str | None = None,
        endpoint: str = "",
    ) -> None:
        self.kind = kind
        self.field = field
        self.endpoint = endpoint
        super().__init__(message)


class TtrRefreshError(TtrError):
    """A feed refresh failed; the store kept its previous snapshot.

    Always raised ``from`` the underlying :class:`TtrFetchError` or
    :class:`TtrDecodeError`, which is also available as ``cause``.
    """

    def __init__(
        self,
        message: str,
        *,
        feed: str,
        cause: TtrFetchError | TtrDecodeError,
    ) -> None:
        self.feed = feed
        self.cause = cause
        super().__init__(message)
