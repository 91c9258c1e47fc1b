"""Scenario showing how a dispatcher selects and drives the httpx transporter."""

from __future__ import annotations

import logging
import os

from apiapi_transporter import (
    HTTPStatusError,
    Request,
    TransporterError,
    TransporterRegistry,
    register_transporter,
)

BASE_URL = os.getenv("APIAPI_DEMO_URL", "https://httpbin.org")


def log_section(title: str) -> None:
    print("\n" + "=" * 80)
    print(title)
    print("=" * 80)


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    registry = TransporterRegistry()
    register_transporter(registry)
    transporter = registry.create("httpx", log_level="debug")

    log_section("GET with query parameters")
    result = transporter.send_request(Request(method="GET", uri=f"{BASE_URL}/get?source=demo", params={"page": 1}))
    print(result.status, result.get_header("content-type"))
    print(result.body[:200])

    log_section("POST JSON body")
    result = transporter.send_request(
        Request(
            method="POST",
            uri=f"{BASE_URL}/post",
            headers={"Content-Type": "application/json"},
            params={"name": "demo", "tags": ["a", "b"]},
        )
    )
    print(result.status)

    log_section("Non-2xx status")
    try:
        transporter.send_request(Request(method="GET", uri=f"{BASE_URL}/status/404"))
    except HTTPStatusError as exc:
        print(f"{exc.status_code} {exc.reason}")


if __name__ == "__main__":
    try:
        main()
    except TransporterError as exc:
        print(f"Scenario failed: {exc}")
