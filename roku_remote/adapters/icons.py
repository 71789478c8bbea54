"""Filesystem storage for downloaded app icons."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Mapping, Optional

from .. import constants

LOGGER = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: Mapping[str, str] = {
    "image/jpeg": ".jpeg",
    "image/jpg": ".jpeg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
    "image/bmp": ".bmp",
}

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")


class IconStore:
    """Writes icon bytes to ``<directory>/<app_id><extension>``.

    The content-type lookup is a plain mapping so callers can extend or
    replace it, e.g. ``IconStore(extensions={**DEFAULT_EXTENSIONS,
    "image/svg+xml": ".svg"})``.
    """

    def __init__(
        self,
        directory: Optional[Path] = None,
        *,
        extensions: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.directory = directory or constants.DEFAULT_ICON_DIRECTORY
        self._extensions = dict(DEFAULT_EXTENSIONS if extensions is None else extensions)

    def extension_for(self, content_type: str) -> Optional[str]:
        return self._extensions.get(content_type.split(";", 1)[0].strip().lower())

    def write(
        self,
        app_id: str,
        data: bytes,
        extension: str,
        directory: Optional[Path] = None,
    ) -> Path:
        target_dir = (directory or self.directory).expanduser()
        target_dir.mkdir(parents=True, exist_ok=True)

        path = target_dir / f"{_UNSAFE_CHARS.sub('_', app_id)}{extension}"
        path.write_bytes(data)
        LOGGER.debug("Wrote %d byte icon for app %s to %s", len(data), app_id, path)
        return path
