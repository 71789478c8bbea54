"""Core primitives for roku-remote."""

from .encoding import encode
from .mapper import (
    camel_case,
    parse_document,
    to_active_app,
    to_app_collection,
    to_device_info,
)
from .models import App, AppCollection, DeviceInfo, KeyAction, KeyActionKind
from .protocols import IconStorage, Transport, TransportResponse

__all__ = [
    "App",
    "AppCollection",
    "DeviceInfo",
    "IconStorage",
    "KeyAction",
    "KeyActionKind",
    "Transport",
    "TransportResponse",
    "camel_case",
    "encode",
    "parse_document",
    "to_active_app",
    "to_app_collection",
    "to_device_info",
]
