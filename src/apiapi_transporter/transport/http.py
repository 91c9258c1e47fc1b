"""HTTP transporter built on top of httpx."""

from __future__ import annotations

import time
from dataclasses import dataclass

import httpx

from ..encoder import EncodedRequest, encode_request
from ..errors import MalformedResponseError, TransportError
from ..logger import BoundLogger, LogLevel, create_logger
from ..parser import HEADER_SEPARATOR, parse_response
from ..types import Request, ResponseResult
from .base import HEADER_TERMINATOR, TransferState

TRANSPORTER_NAME = "httpx"

DEFAULT_TIMEOUT = 5.0


@dataclass
class TransporterOptions:
    connect_timeout: float = DEFAULT_TIMEOUT
    total_timeout: float = DEFAULT_TIMEOUT
    send_referer: bool = True
    client: httpx.Client | None = None
    logger: object | None = None
    log_level: LogLevel = "info"


class HttpTransporter:
    """Sends one request per call and returns the parsed 2xx response.

    Every call opens its own ``httpx.Client`` unless one is injected, in
    which case the caller keeps ownership of it. Capture state lives only for
    the duration of a call, so an instance can be shared between threads.
    """

    name = TRANSPORTER_NAME

    def __init__(
        self,
        *,
        connect_timeout: float = DEFAULT_TIMEOUT,
        total_timeout: float = DEFAULT_TIMEOUT,
        send_referer: bool = True,
        client: httpx.Client | None = None,
        logger: object | None = None,
        log_level: LogLevel = "info",
    ) -> None:
        options = TransporterOptions(
            connect_timeout=connect_timeout,
            total_timeout=total_timeout,
            send_referer=send_referer,
            client=client,
            logger=logger,
            log_level=log_level,
        )
        self._total_timeout = options.total_timeout
        self._timeout = httpx.Timeout(options.total_timeout, connect=options.connect_timeout)
        self._send_referer = options.send_referer
        self._client = options.client
        self._logger: BoundLogger = create_logger(logger=options.logger, level=options.log_level).child("http")

    def send_request(self, request: Request) -> ResponseResult:
        encoded = encode_request(request, send_referer=self._send_referer)
        return parse_transfer(encoded.url, self._transfer(encoded))

    def _transfer(self, encoded: EncodedRequest) -> TransferState:
        state = TransferState()
        deadline = time.monotonic() + self._total_timeout

        try:
            self._logger.debug(
                "HTTP %s %s bytes=%d", encoded.method, encoded.url, len(encoded.body or b"")
            )
            if self._client is not None:
                self._exchange(self._client, encoded, state, deadline)
            else:
                with httpx.Client(timeout=self._timeout) as client:
                    self._exchange(client, encoded, state, deadline)
        except httpx.TimeoutException as exc:
            self._logger.debug("HTTP timeout %s: %s", encoded.url, exc)
            raise TransportError(
                encoded.url,
                type(exc).__name__,
                str(exc) or f"timed out after {self._total_timeout}s",
            ) from exc
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            self._logger.debug("HTTP failure %s: %s", encoded.url, exc)
            raise TransportError(encoded.url, type(exc).__name__, str(exc)) from exc

        if state.header_resets:
            self._logger.trace("Discarded %d earlier header block(s) for %s", state.header_resets, encoded.url)
        self._logger.debug(
            "HTTP <- %s headers=%d bytes=%d",
            encoded.url,
            len(state.header_data),
            state.bytes_received,
        )
        return state

    def _exchange(
        self,
        client: httpx.Client,
        encoded: EncodedRequest,
        state: TransferState,
        deadline: float,
    ) -> None:
        with client.stream(
            encoded.method,
            encoded.url,
            content=encoded.body,
            headers=encoded.wire_headers,
            timeout=self._timeout,
        ) as response:
            for hop in (*response.history, response):
                _replay_headers(hop, state)

            for chunk in response.iter_bytes():
                state.stream_body(chunk)
                if time.monotonic() >= deadline:
                    self._logger.debug("HTTP deadline exceeded %s", encoded.url)
                    raise TransportError(
                        encoded.url,
                        "TotalTimeout",
                        f"transfer exceeded {self._total_timeout}s",
                    )


def parse_transfer(url: str, state: TransferState) -> ResponseResult:
    """Parse what one exchange captured; the header block must be complete."""
    if not state.headers_done:
        raise MalformedResponseError(url, HEADER_SEPARATOR)
    return parse_response(url, bytes(state.header_data), bytes(state.body))


def _replay_headers(response: httpx.Response, state: TransferState) -> None:
    status_line = f"{response.http_version} {response.status_code} {response.reason_phrase}\r\n"
    state.stream_headers(status_line.encode("iso-8859-1", errors="replace"))
    for name, value in response.headers.raw:
        state.stream_headers(name + b": " + value + b"\r\n")
    state.stream_headers(HEADER_TERMINATOR)


__all__ = ["DEFAULT_TIMEOUT", "HttpTransporter", "TRANSPORTER_NAME", "TransporterOptions", "parse_transfer"]
