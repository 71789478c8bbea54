"""Protocol definitions for the transport and icon storage collaborators."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Protocol


@dataclass(slots=True)
class TransportResponse:
    status: int
    body: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def content_type(self) -> str:
        for name, value in self.headers.items():
            if name.lower() == "content-type":
                return value.split(";", 1)[0].strip().lower()
        return ""


class Transport(Protocol):
    """Minimal contract for issuing requests against the device."""

    async def request(self, method: str, url: str) -> TransportResponse:
        """Issue a request and return the complete response.

        Raises:
            TransportFailure: If the request could not be completed.
        """
        ...

    async def aclose(self) -> None:
        """Close any underlying resources."""
        ...


class IconStorage(Protocol):
    """Persists downloaded icons and decides their file extension."""

    def extension_for(self, content_type: str) -> Optional[str]:
        """Return the extension (with leading dot) for a content type."""
        ...

    def write(
        self, app_id: str, data: bytes, extension: str, directory: Optional[Path] = None
    ) -> Path:
        """Write the icon bytes and return the written path."""
        ...
