"""Validation of the text entered in widgets."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Callable

_REPLACE_CHARS = "!@$&*"
_SEP_CHARS = "_-., "
_OTHER_SPECIAL_CHARS = "\"#%'()+/:;<=>?[\\]^{|}~"
_LOWER_CHARS = "abcdefghijklmnopqrstuvwxyz"
_UPPER_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_DIGIT_CHARS = "0123456789"

_CHARSETS = (
    _REPLACE_CHARS,
    _SEP_CHARS,
    _OTHER_SPECIAL_CHARS,
    _LOWER_CHARS,
    _UPPER_CHARS,
    _DIGIT_CHARS,
)

_MAX_SAME_CHAR = 2


class PasswordError(ValueError):
    """Raised when a password is not strong enough."""


def _charset_of(char: str) -> str | None:
    return next((charset for charset in _CHARSETS if char in charset), None)


def _base(password: str) -> int:
    used: set[str] = set()
    base = 0
    for char in set(password):
        charset = _charset_of(char)
        if charset is None:
            base += 1
        else:
            used.add(charset)
    return base + sum(len(charset) for charset in used)


def _length(password: str) -> int:
    return sum(min(count, _MAX_SAME_CHAR) for count in Counter(password).values())


def get_entropy(password: str) -> float:
    """Return the entropy of ``password`` in bits.

    Each character counts at most twice towards the length.
    """
    base = _base(password)
    if base == 0:
        return 0.0
    return _length(password) * math.log2(base)


def validate(password: str, min_entropy: float) -> None:
    """Raise ``PasswordError`` with advice if ``password`` is below ``min_entropy`` bits."""
    if get_entropy(password) >= min_entropy:
        return

    used = {_charset_of(char) for char in password}
    advice = []
    if not {_OTHER_SPECIAL_CHARS, _SEP_CHARS, _REPLACE_CHARS} <= used:
        advice.append("including more special characters")
    if _LOWER_CHARS not in used:
        advice.append("using lowercase letters")
    if _UPPER_CHARS not in used:
        advice.append("using uppercase letters")
    if _DIGIT_CHARS not in used:
        advice.append("using numbers")

    if advice:
        raise PasswordError(
            f"insecure password, try {', '.join(advice)} or using a longer password"
        )
    raise PasswordError("insecure password, try using a longer password")


def new_password(min_entropy: float) -> Callable[[str], None]:
    """Return a validator raising ``PasswordError`` for passwords below ``min_entropy``."""

    def validator(text: str) -> None:
        validate(text, min_entropy)

    return validator