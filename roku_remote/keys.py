"""Named remote keys understood by the External Control Protocol.

These names appear as the final segment of key action requests:
    /keypress/{key}, /keydown/{key}, /keyup/{key}

Literal characters are not listed here; they are sent as ``Lit_`` tokens
(see :mod:`roku_remote.core.encoding`).
"""

from __future__ import annotations

from typing import Dict, Optional


class RemoteKeys:
    """Key name constants matching the device's remote buttons."""

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    HOME = "Home"
    BACK = "Back"
    SELECT = "Select"
    LEFT = "Left"
    RIGHT = "Right"
    UP = "Up"
    DOWN = "Down"
    INFO = "Info"
    """The ``*`` options button."""

    # -------------------------------------------------------------------------
    # Playback
    # -------------------------------------------------------------------------

    PLAY = "Play"
    """Toggles between play and pause."""

    PAUSE = "Pause"
    REV = "Rev"
    FWD = "Fwd"
    INSTANT_REPLAY = "InstantReplay"

    # -------------------------------------------------------------------------
    # Text entry
    # -------------------------------------------------------------------------

    BACKSPACE = "Backspace"
    SEARCH = "Search"
    ENTER = "Enter"

    # -------------------------------------------------------------------------
    # Device control (TV models)
    # -------------------------------------------------------------------------

    FIND_REMOTE = "FindRemote"
    VOLUME_DOWN = "VolumeDown"
    VOLUME_MUTE = "VolumeMute"
    VOLUME_UP = "VolumeUp"
    POWER_OFF = "PowerOff"
    CHANNEL_UP = "ChannelUp"
    CHANNEL_DOWN = "ChannelDown"
    INPUT_TUNER = "InputTuner"
    INPUT_HDMI1 = "InputHDMI1"
    INPUT_HDMI2 = "InputHDMI2"
    INPUT_HDMI3 = "InputHDMI3"
    INPUT_HDMI4 = "InputHDMI4"
    INPUT_AV1 = "InputAV1"

    # -------------------------------------------------------------------------
    # Key Sets
    # -------------------------------------------------------------------------

    ALL = frozenset(
        {
            HOME, BACK, SELECT, LEFT, RIGHT, UP, DOWN, INFO,
            PLAY, PAUSE, REV, FWD, INSTANT_REPLAY,
            BACKSPACE, SEARCH, ENTER,
            FIND_REMOTE, VOLUME_DOWN, VOLUME_MUTE, VOLUME_UP, POWER_OFF,
            CHANNEL_UP, CHANNEL_DOWN, INPUT_TUNER,
            INPUT_HDMI1, INPUT_HDMI2, INPUT_HDMI3, INPUT_HDMI4, INPUT_AV1,
        }
    )
    """Every named key accepted by the device."""


# Python method name -> key name, e.g. ``volume_up`` -> ``VolumeUp``.
KEY_METHODS: Dict[str, str] = {
    name.lower(): value
    for name, value in vars(RemoteKeys).items()
    if name.isupper() and isinstance(value, str)
}

# camelCase aliases, e.g. ``volumeUp`` -> ``VolumeUp``.
KEY_ALIASES: Dict[str, str] = {key[0].lower() + key[1:]: key for key in RemoteKeys.ALL}

_BY_LOWER: Dict[str, str] = {key.lower(): key for key in RemoteKeys.ALL}


def canonical_key(value: str) -> Optional[str]:
    """Return the canonical spelling of a named key, or ``None``."""

    if value in RemoteKeys.ALL:
        return value
    return _BY_LOWER.get(value.lower())


def key_for_method(name: str) -> Optional[str]:
    """Resolve a chain method name (snake_case or camelCase) to a key."""

    return KEY_METHODS.get(name) or KEY_ALIASES.get(name)
