"""Public surface for the httpx transporter."""

from .encoder import EncodedRequest, encode_request
from .errors import (
    EncodingError,
    HTTPStatusError,
    MalformedResponseError,
    RegistryError,
    TransportError,
    TransporterError,
)
from .parser import parse_response, status_message
from .query import build_query, merge_query
from .registry import TransporterRegistry, register_transporter
from .transport import HttpTransporter, TransferState, Transporter
from .types import Request, ResponseResult, ResponseStatus
from .version import __version__

__all__ = [
    "__version__",
    "EncodedRequest",
    "EncodingError",
    "HTTPStatusError",
    "HttpTransporter",
    "MalformedResponseError",
    "RegistryError",
    "Request",
    "ResponseResult",
    "ResponseStatus",
    "TransferState",
    "TransportError",
    "Transporter",
    "TransporterError",
    "TransporterRegistry",
    "build_query",
    "encode_request",
    "merge_query",
    "parse_response",
    "register_transporter",
    "status_message",
]
