"""Adapter modules for the device and local filesystem."""

from .icons import DEFAULT_EXTENSIONS, IconStore
from .roku import RokuClient
from .transport import AiohttpTransport

__all__ = [
    "AiohttpTransport",
    "DEFAULT_EXTENSIONS",
    "IconStore",
    "RokuClient",
]
