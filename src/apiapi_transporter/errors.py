"""Custom exceptions raised by the transporter."""

from __future__ import annotations

from typing import Any


class TransporterError(Exception):
    """Base error for all transporter failures."""

    def __init__(self, message: str, *, context: Any | None = None) -> None:
        super().__init__(message)
        self.context = context


class EncodingError(TransporterError):
    """Raised when request parameters cannot be serialized for the wire."""

    def __init__(self, url: str, *, context: Any | None = None) -> None:
        super().__init__(
            f"The request to {url} could not be sent as the data could not be JSON-encoded.",
            context=context,
        )
        self.url = url


class TransportError(TransporterError):
    """Raised when the network exchange itself fails."""

    def __init__(self, url: str, code: str, message: str, *, context: Any | None = None) -> None:
        super().__init__(
            f"The request to {url} could not be sent because of transport error {code}: {message}",
            context=context,
        )
        self.url = url
        self.code = code
        self.reason = message


class MalformedResponseError(TransporterError):
    """Raised when the raw response cannot be split into status, headers and body."""

    def __init__(self, url: str, expected: str, *, context: Any | None = None) -> None:
        super().__init__(
            f"The request to {url} returned an invalid response without {expected}.",
            context=context,
        )
        self.url = url
        self.expected = expected


class HTTPStatusError(TransporterError):
    """Raised for responses outside the 2xx range."""

    def __init__(self, url: str, status_code: int, reason: str, *, context: Any | None = None) -> None:
        super().__init__(
            f"The request to {url} returned status code {status_code}: {reason}",
            context=context,
        )
        self.url = url
        self.status_code = status_code
        self.reason = reason


class RegistryError(TransporterError):
    """Raised when a transporter name cannot be registered or resolved."""


__all__ = [
    "EncodingError",
    "HTTPStatusError",
    "MalformedResponseError",
    "RegistryError",
    "TransportError",
    "TransporterError",
]
