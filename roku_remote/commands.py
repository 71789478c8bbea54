"""Fluent builder for sequencing remote key actions.

Example::

    await client.command().volume_up().select().text("abc").send()

Actions are encoded when appended, so invalid input fails before anything is
sent, and are drained strictly in append order by :meth:`CommandChain.send`.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Callable, List, Tuple

from .core import KeyAction, KeyActionKind, encode
from .errors import ChainAlreadySent, InvalidInput
from .keys import key_for_method

if TYPE_CHECKING:
    from .adapters.roku import RokuClient

LOGGER = logging.getLogger(__name__)


class CommandChain:
    """Single-owner queue of key actions bound to one client.

    Besides the explicit methods, every named remote key is available as a
    chain method in snake_case (``volume_up()``) or camelCase
    (``volumeUp()``), appending a keypress for that key.
    """

    def __init__(self, client: "RokuClient") -> None:
        self._client = client
        self._actions: List[KeyAction] = []
        self._sent = False

    @property
    def actions(self) -> Tuple[KeyAction, ...]:
        return tuple(self._actions)

    @property
    def sent(self) -> bool:
        return self._sent

    def __len__(self) -> int:
        return len(self._actions)

    def __getattr__(self, name: str) -> Callable[[], "CommandChain"]:
        if name.startswith("_"):
            raise AttributeError(name)
        key = key_for_method(name)
        if key is None:
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}"
            )

        def press() -> CommandChain:
            return self.keypress(key)

        press.__name__ = name
        return press

    def keypress(self, key: str) -> "CommandChain":
        return self._append(KeyAction(KeyActionKind.PRESS, encode(key)))

    def keydown(self, key: str) -> "CommandChain":
        return self._append(KeyAction(KeyActionKind.DOWN, encode(key)))

    def keyup(self, key: str) -> "CommandChain":
        return self._append(KeyAction(KeyActionKind.UP, encode(key)))

    def text(self, value: str) -> "CommandChain":
        self._check_open()
        if not isinstance(value, str):
            raise InvalidInput(f"Text must be a string, got {type(value).__name__}")
        actions = [KeyAction(KeyActionKind.PRESS, encode(char)) for char in value]
        self._actions.extend(actions)
        return self

    def wait(self, seconds: float) -> "CommandChain":
        """Pause the drain for ``seconds`` before the next action."""

        if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
            raise InvalidInput(
                f"Wait duration must be a number, got {type(seconds).__name__}"
            )
        if seconds < 0:
            raise InvalidInput("Wait duration cannot be negative")
        return self._append(KeyAction(KeyActionKind.WAIT, delay=float(seconds)))

    async def send(self) -> None:
        """Send every queued action in order, awaiting each acknowledgement.

        Raises:
            ChainAlreadySent: If this chain was already sent.
        """

        self._check_open()
        self._sent = True
        LOGGER.debug(
            "Sending %d queued actions to %s", len(self._actions), self._client.base_url
        )

        for action in self._actions:
            if action.kind is KeyActionKind.WAIT:
                await asyncio.sleep(action.delay)
                continue
            await self._client.send_key(action.kind, action.token)

    def _append(self, action: KeyAction) -> "CommandChain":
        self._check_open()
        self._actions.append(action)
        return self

    def _check_open(self) -> None:
        if self._sent:
            raise ChainAlreadySent("Command chain has already been sent")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(actions={len(self._actions)}, sent={self._sent})"


def start(client: "RokuClient") -> CommandChain:
    """Create an empty command chain bound to ``client``."""

    return CommandChain(client)
