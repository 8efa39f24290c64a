"""Hierarchical exception types for the BHD API client."""

from __future__ import annotations


class BhdError(Exception):
    """Base exception for all bhdapi errors."""


# ── Configuration ───────────────────────────────────────────────


class ConfigurationError(BhdError):
    """A required credential was not supplied."""


# ── Request encoding ────────────────────────────────────────────


class EncodeError(BhdError):
    """Search parameters could not be encoded for the wire."""


# ── Transport ───────────────────────────────────────────────────


class TransportError(BhdError):
    """The HTTP round-trip failed."""


class HTTPStatusError(TransportError):
    """The service answered with a status other than 200."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"invalid http status {status_code}")
        self.status_code = status_code


# ── Response decoding ───────────────────────────────────────────


class DecodeError(BhdError):
    """The response body did not match the expected shape."""


# ── Service ─────────────────────────────────────────────────────


class ServiceError(BhdError):
    """The service reported a failed call."""
