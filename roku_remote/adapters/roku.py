"""Client for the device's External Control Protocol."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional
from urllib.parse import quote

from .. import constants
from ..commands import CommandChain, start
from ..core import (
    App,
    AppCollection,
    DeviceInfo,
    IconStorage,
    KeyActionKind,
    Transport,
    TransportResponse,
    encode,
    parse_document,
    to_active_app,
    to_app_collection,
    to_device_info,
)
from ..errors import IconFetchFailed, InvalidInput, TransportFailure
from .icons import IconStore
from .transport import AiohttpTransport

LOGGER = logging.getLogger(__name__)

_KEY_PATHS = {
    KeyActionKind.PRESS: constants.KEYPRESS_PATH,
    KeyActionKind.DOWN: constants.KEYDOWN_PATH,
    KeyActionKind.UP: constants.KEYUP_PATH,
}


class RokuClient:
    """Async client bound to a single device base address.

    Every operation is a single request/response except :meth:`text`, which
    sends one keypress per character and awaits each before the next.
    """

    def __init__(
        self,
        base_url: str,
        *,
        transport: Optional[Transport] = None,
        icon_store: Optional[IconStorage] = None,
        timeout: float = constants.DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._transport: Transport = transport or AiohttpTransport(timeout=timeout)
        self._owns_transport = transport is None
        self._icon_store: IconStorage = icon_store or IconStore()

    async def __aenter__(self) -> "RokuClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_transport:
            await self._transport.aclose()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    async def apps(self) -> AppCollection:
        """Return the installed applications in device order."""

        response = await self._get(constants.APPS_PATH)
        return to_app_collection(parse_document(response.body))

    async def active(self) -> Optional[App]:
        """Return the foreground application, or ``None`` on the home screen.

        Raises:
            AmbiguousActiveApp: If the device reports more than one app.
        """

        response = await self._get(constants.ACTIVE_APP_PATH)
        return to_active_app(parse_document(response.body))

    async def info(self) -> DeviceInfo:
        """Return device metadata keyed by camelCase field name."""

        response = await self._get(constants.DEVICE_INFO_PATH)
        return to_device_info(parse_document(response.body))

    # ------------------------------------------------------------------
    # Key actions
    # ------------------------------------------------------------------
    async def keypress(self, key: str) -> None:
        await self.send_key(KeyActionKind.PRESS, encode(key))

    async def keydown(self, key: str) -> None:
        await self.send_key(KeyActionKind.DOWN, encode(key))

    async def keyup(self, key: str) -> None:
        await self.send_key(KeyActionKind.UP, encode(key))

    async def text(self, value: str) -> None:
        """Type ``value`` one literal character at a time, in order."""

        if not isinstance(value, str):
            raise InvalidInput(f"Text must be a string, got {type(value).__name__}")
        tokens = [encode(char) for char in value]
        for token in tokens:
            await self.send_key(KeyActionKind.PRESS, token)

    async def send_key(self, kind: KeyActionKind, token: str) -> None:
        """POST an already encoded token to the endpoint for ``kind``."""

        path = _KEY_PATHS.get(kind)
        if path is None:
            raise InvalidInput(f"{kind.value} actions are not sent to the device")
        await self._post(f"{path}/{token}")

    async def launch(self, app_id: str) -> None:
        if not app_id:
            raise InvalidInput("App id cannot be empty")
        await self._post(f"{constants.LAUNCH_PATH}/{quote(str(app_id), safe='')}")

    # ------------------------------------------------------------------
    # Icons
    # ------------------------------------------------------------------
    async def icon(self, app_id: str, directory: Optional[Path] = None) -> Path:
        """Download the icon for ``app_id`` and return the written path.

        Raises:
            IconFetchFailed: On transport errors, non-2xx responses, unknown
                content types, or when the file cannot be written.
        """

        if not app_id:
            raise InvalidInput("App id cannot be empty")

        url = self._url(f"{constants.ICON_PATH}/{quote(str(app_id), safe='')}")
        try:
            response = await self._transport.request("GET", url)
        except TransportFailure as exc:
            raise IconFetchFailed(
                f"Icon fetch for app {app_id} failed: {exc}", app_id=app_id
            ) from exc

        if not response.ok:
            raise IconFetchFailed(
                f"Icon fetch for app {app_id} failed with status {response.status}",
                app_id=app_id,
            )

        extension = self._icon_store.extension_for(response.content_type)
        if extension is None:
            raise IconFetchFailed(
                f"Unsupported icon content type {response.content_type!r} for app {app_id}",
                app_id=app_id,
            )

        try:
            return self._icon_store.write(app_id, response.body, extension, directory)
        except OSError as exc:
            raise IconFetchFailed(
                f"Could not store icon for app {app_id}: {exc}", app_id=app_id
            ) from exc

    # ------------------------------------------------------------------
    # Command chains
    # ------------------------------------------------------------------
    def command(self) -> CommandChain:
        """Start a new command chain bound to this client."""

        return start(self)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    async def _get(self, path: str) -> TransportResponse:
        return await self._request("GET", path)

    async def _post(self, path: str) -> TransportResponse:
        return await self._request("POST", path)

    async def _request(self, method: str, path: str) -> TransportResponse:
        url = self._url(path)
        response = await self._transport.request(method, url)
        if not response.ok:
            detail = response.body.decode("utf-8", errors="replace").strip()
            LOGGER.warning(
                "%s %s failed with status %d: %s", method, url, response.status, detail
            )
            raise TransportFailure(
                f"{method} {url} failed with status {response.status}: {detail}",
                url=url,
                status=response.status,
            )
        return response

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.base_url!r})"
