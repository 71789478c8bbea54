"""Async client for the Roku External Control Protocol."""

from .adapters import AiohttpTransport, IconStore, RokuClient
from .commands import CommandChain, start
from .core import App, KeyAction, KeyActionKind, TransportResponse, encode
from .errors import (
    AmbiguousActiveApp,
    ChainAlreadySent,
    IconFetchFailed,
    InvalidInput,
    MalformedInfoResponse,
    MalformedResponse,
    RokuError,
    TransportFailure,
)
from .keys import RemoteKeys

__all__ = [
    "AiohttpTransport",
    "AmbiguousActiveApp",
    "App",
    "ChainAlreadySent",
    "CommandChain",
    "IconFetchFailed",
    "IconStore",
    "InvalidInput",
    "KeyAction",
    "KeyActionKind",
    "MalformedInfoResponse",
    "MalformedResponse",
    "RemoteKeys",
    "RokuClient",
    "RokuError",
    "TransportFailure",
    "TransportResponse",
    "encode",
    "start",
]
