"""Turns a Request into wire-level method, URL, body and header lines."""

from __future__ import annotations

import json
from dataclasses import dataclass, field

import httpx

from .errors import EncodingError
from .query import build_query, merge_query
from .types import Request

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


@dataclass(frozen=True)
class EncodedRequest:
    method: str
    url: str
    body: bytes | None = None
    headers: list[tuple[str, str]] = field(default_factory=list)

    @property
    def header_lines(self) -> list[str]:
        return [f"{name}: {value}" for name, value in self.headers]

    @property
    def wire_headers(self) -> list[tuple[bytes, bytes]]:
        # UTF-8 on the wire; httpx would encode str values as ASCII.
        return [(name.encode("utf-8"), value.encode("utf-8")) for name, value in self.headers]


def encode_request(request: Request, *, send_referer: bool = True) -> EncodedRequest:
    method = request.method or "GET"
    url = request.uri
    body: bytes | None = None
    headers = [(str(name), str(value)) for name, value in request.headers.items()]

    params = request.params
    if params:
        content_type = request.get_header("content-type")
        if method == "GET":
            url = merge_query(url, params)
        elif content_type.lower().startswith(JSON_CONTENT_TYPE):
            body = _encode_json(url, params)
        else:
            body = build_query(params).encode("ascii")
            if not content_type:
                headers.append(("Content-Type", FORM_CONTENT_TYPE))

    if send_referer and not request.get_header("referer"):
        headers.append(("Referer", _referer(url)))

    return EncodedRequest(method=method, url=url, body=body, headers=headers)


def _referer(url: str) -> str:
    # Header values must stay ASCII, so non-ASCII URLs are echoed percent-encoded.
    try:
        return str(httpx.URL(url))
    except httpx.InvalidURL:
        # The transfer reports the invalid URL itself.
        return url


def _encode_json(url: str, params: object) -> bytes:
    try:
        payload = json.dumps(params, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise EncodingError(url, context=params) from exc
    return payload.encode("utf-8")


__all__ = ["EncodedRequest", "FORM_CONTENT_TYPE", "JSON_CONTENT_TYPE", "encode_request"]
