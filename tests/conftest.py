from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple

import pytest

from roku_remote import IconStore, RokuClient
from roku_remote.core import TransportResponse

FIXTURES = Path(__file__).parent / "fixtures"
BASE_URL = "http://192.168.1.61:8060"


def load_fixture(name: str) -> bytes:
    """Load a captured device response from tests/fixtures."""
    file_name = name if "." in name else f"{name}.xml"
    return (FIXTURES / file_name).read_bytes()


class RecordingTransport:
    """Transport double that records every request in call order."""

    def __init__(
        self,
        body: bytes = b"",
        *,
        status: int = 200,
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.calls: List[Tuple[str, str]] = []
        self.responses: Dict[str, TransportResponse] = {}
        self.default = TransportResponse(status=status, body=body, headers=dict(headers or {}))
        self.closed = False

    def respond(self, path: str, body: bytes = b"", *, status: int = 200, headers=None) -> None:
        self.responses[path] = TransportResponse(
            status=status, body=body, headers=dict(headers or {})
        )

    @property
    def urls(self) -> List[str]:
        return [url for _, url in self.calls]

    async def request(self, method: str, url: str) -> TransportResponse:
        self.calls.append((method, url))
        path = url[len(BASE_URL):] if url.startswith(BASE_URL) else url
        return self.responses.get(path, self.default)

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def client(transport, tmp_path) -> RokuClient:
    return RokuClient(BASE_URL, transport=transport, icon_store=IconStore(tmp_path))
