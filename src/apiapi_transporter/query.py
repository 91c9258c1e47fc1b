"""Form-url-encoding and query string merging."""

from __future__ import annotations

from typing import Any, Iterator, Mapping
from urllib.parse import quote_plus


def build_query(params: Mapping[str, Any]) -> str:
    """Form-url-encode ``params`` into ``&``-joined ``key=value`` pairs.

    Nested mappings and lists flatten to bracket keys (``a[b]=1``,
    ``tags[0]=x``) before percent-encoding. Booleans are sent as ``1``/``0``
    and ``None`` values are left out.
    """
    return "&".join(
        f"{quote_plus(key)}={quote_plus(value)}" for key, value in _flatten(params, None)
    )


def merge_query(url: str, params: Mapping[str, Any]) -> str:
    """Append ``params`` to the query string of ``url``.

    The existing query is kept in front of the new pairs. Everything outside
    the query (scheme, host, path, fragment) is returned verbatim.
    """
    if not params:
        return url

    fragment_at = url.find("#")
    head, fragment = (url, "") if fragment_at == -1 else (url[:fragment_at], url[fragment_at:])

    query_at = head.find("?")
    if query_at == -1:
        base, existing = head, ""
    else:
        base, existing = head[:query_at], head[query_at + 1 :]

    merged = f"{existing}&{build_query(params)}".strip("&")
    return f"{base}?{merged}{fragment}"


def _flatten(value: Any, prefix: str | None) -> Iterator[tuple[str, str]]:
    if isinstance(value, Mapping):
        items: Iterator[tuple[Any, Any]] = iter(value.items())
    elif isinstance(value, (list, tuple)):
        items = iter(enumerate(value))
    else:
        if prefix is not None and value is not None:
            yield prefix, _scalar(value)
        return

    for key, item in items:
        name = str(key) if prefix is None else f"{prefix}[{key}]"
        yield from _flatten(item, name)


def _scalar(value: Any) -> str:
    if value is True:
        return "1"
    if value is False:
        return "0"
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)


__all__ = ["build_query", "merge_query"]
