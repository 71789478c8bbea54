"""Encoding of key names and literal characters into wire tokens."""

from __future__ import annotations

from urllib.parse import quote

from ..constants import LITERAL_PREFIX
from ..errors import InvalidInput
from ..keys import canonical_key

# Characters left unescaped in literal tokens, matching encodeURIComponent.
_LITERAL_SAFE = "!*'()"


def encode(value: str) -> str:
    """Return the token sent as the last path segment of a key request.

    Named keys are sent as-is (``Home``). A single character is sent as
    ``Lit_`` followed by its percent-encoded UTF-8 bytes, so ``"€"`` becomes
    ``Lit_%E2%82%AC``.

    Raises:
        InvalidInput: For empty strings, non-strings, or multi-character
            strings that are not named keys.
    """

    if not isinstance(value, str):
        raise InvalidInput(f"Key input must be a string, got {type(value).__name__}")
    if not value:
        raise InvalidInput("Key input cannot be empty")

    if len(value) == 1:
        return LITERAL_PREFIX + quote(value, safe=_LITERAL_SAFE)

    key = canonical_key(value)
    if key is None:
        raise InvalidInput(
            f"Unknown key {value!r}; send text one character at a time"
        )
    return key
