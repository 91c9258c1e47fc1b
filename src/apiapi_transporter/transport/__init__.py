"""Transporter implementations exposed to users."""

from .base import TransferState, Transporter
from .http import DEFAULT_TIMEOUT, HttpTransporter, TransporterOptions

__all__ = [
    "DEFAULT_TIMEOUT",
    "HttpTransporter",
    "TransferState",
    "Transporter",
    "TransporterOptions",
]
