"""Name-keyed registry the dispatcher uses to pick a transporter."""

from __future__ import annotations

from typing import Any, Callable

from .errors import RegistryError
from .logger import BoundLogger, create_logger
from .transport import HttpTransporter, Transporter
from .transport.http import TRANSPORTER_NAME

TransporterFactory = Callable[..., Transporter]


class TransporterRegistry:
    """Maps transporter names to factories (usually the transporter class)."""

    def __init__(self, *, logger: BoundLogger | None = None) -> None:
        self._factories: dict[str, TransporterFactory] = {}
        self._logger = (logger or create_logger()).child("registry")

    def register(self, name: str, factory: TransporterFactory) -> None:
        if not name:
            raise RegistryError("Transporter name must not be empty")

        current = self._factories.get(name)
        if current is factory:
            return
        if current is not None:
            self._logger.warn("Replacing transporter %r (%r -> %r)", name, current, factory)
        self._factories[name] = factory

    def unregister(self, name: str) -> None:
        self._factories.pop(name, None)

    def get(self, name: str) -> TransporterFactory:
        try:
            return self._factories[name]
        except KeyError:
            raise RegistryError(f"No transporter registered under {name!r}") from None

    def create(self, name: str, **kwargs: Any) -> Transporter:
        return self.get(name)(**kwargs)

    def names(self) -> list[str]:
        return list(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __len__(self) -> int:
        return len(self._factories)


def register_transporter(registry: TransporterRegistry, name: str = TRANSPORTER_NAME) -> None:
    """Register the httpx transporter; safe to call more than once."""
    registry.register(name, HttpTransporter)


__all__ = ["TransporterFactory", "TransporterRegistry", "register_transporter"]
