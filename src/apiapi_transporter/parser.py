"""Turns captured header and body bytes into a ResponseResult."""

from __future__ import annotations

import re

import httpx

from .errors import HTTPStatusError, MalformedResponseError
from .types import ResponseResult, ResponseStatus

UNKNOWN_STATUS = "Unknown Status"

_STATUS_LINE = re.compile(r"^HTTP/(1\.\d)[ \t]+(\d{3})(?!\d)", re.IGNORECASE)
_FOLDED_LINE = re.compile(r"\n[ \t]")
_WHITESPACE = re.compile(r"\s+")

HEADER_SEPARATOR = "a header/body separator"
STATUS_LINE = "protocol and status code"


def status_message(code: int) -> str:
    return httpx.codes.get_reason_phrase(code) or UNKNOWN_STATUS


def locate_body(url: str, header_block: bytes, data: bytes) -> bytes:
    """Return what follows ``header_block`` inside a combined header+body stream."""
    position = data.find(header_block) if header_block else -1
    if position == -1:
        raise MalformedResponseError(url, HEADER_SEPARATOR)
    return data[position + len(header_block) :]


def parse_header_block(url: str, header_block: bytes) -> tuple[int, dict[str, str]]:
    text = header_block.decode("iso-8859-1").replace("\r\n", "\n")
    lines = _FOLDED_LINE.sub(" ", text).split("\n")

    match = _STATUS_LINE.match(lines[0])
    if not match:
        raise MalformedResponseError(url, STATUS_LINE, context=lines[0])
    code = int(match.group(2))

    headers: dict[str, str] = {}
    for line in lines[1:]:
        name, colon, value = line.partition(":")
        if not colon:
            continue
        headers[name] = _WHITESPACE.sub(" ", value.strip())
    return code, headers


def parse_response(
    url: str,
    header_block: bytes,
    body: bytes,
    *,
    combined: bool = False,
) -> ResponseResult:
    """Validate the captured response and build the result.

    ``combined`` marks a ``body`` buffer that still starts with (or contains)
    the header bytes, as delivered by transfer stacks that do not separate
    the two streams. Status codes outside 2xx raise ``HTTPStatusError``.
    """
    if combined:
        body = locate_body(url, header_block, body)

    code, headers = parse_header_block(url, header_block)
    message = status_message(code)
    if code < 200 or code >= 300:
        raise HTTPStatusError(url, code, message, context=headers)

    return ResponseResult(
        status=ResponseStatus(code=code, message=message),
        headers=headers,
        body=body,
    )


__all__ = [
    "UNKNOWN_STATUS",
    "locate_body",
    "parse_header_block",
    "parse_response",
    "status_message",
]
