"""Common transport abstractions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from ..types import Request, ResponseResult

HEADER_TERMINATOR = b"\r\n"


@runtime_checkable
class Transporter(Protocol):
    name: str

    def send_request(self, request: Request) -> ResponseResult: ...


@dataclass
class TransferState:
    """Bytes captured during one exchange.

    A fresh instance belongs to exactly one call. Header lines and body
    chunks are appended in the order they are received.
    """

    header_data: bytearray = field(default_factory=bytearray)
    headers_done: bool = False
    body: bytearray = field(default_factory=bytearray)
    bytes_received: int = 0
    header_resets: int = 0

    def stream_headers(self, chunk: bytes) -> int:
        # A new block after a completed one (interim or redirect response)
        # replaces the earlier block.
        if self.headers_done:
            self.header_data.clear()
            self.headers_done = False
            self.header_resets += 1

        self.header_data += chunk

        if chunk == HEADER_TERMINATOR:
            self.headers_done = True

        return len(chunk)

    def stream_body(self, chunk: bytes) -> int:
        self.body += chunk
        self.bytes_received += len(chunk)
        return len(chunk)


__all__ = ["HEADER_TERMINATOR", "TransferState", "Transporter"]
