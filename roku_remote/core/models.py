"""Domain models for device queries and key actions."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, List, Optional

DeviceInfo = Dict[str, str]


@dataclass(frozen=True, slots=True)
class App:
    id: str
    name: str
    type: str
    version: str


AppCollection = List[App]


class KeyActionKind(str, enum.Enum):
    PRESS = "keypress"
    DOWN = "keydown"
    UP = "keyup"
    WAIT = "wait"


@dataclass(frozen=True, slots=True)
class KeyAction:
    """A pending remote input, already encoded to its wire token."""

    kind: KeyActionKind
    token: Optional[str] = None
    delay: float = 0.0
