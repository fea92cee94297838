# -*- coding: utf-8 -*-
"""
RU: Генерация паролей из настраиваемых классов символов.
EN: Password generation from configurable character classes.

- Ambiguous characters (O, 0, l) are left out of the alphabets
- Every enabled class contributes at least one character
- All randomness comes from ``secrets``
"""
from __future__ import annotations

import logging
import secrets
from typing import Final, List

from zxcvbn import zxcvbn

_LOGGER: Final = logging.getLogger(__name__)

UPPER: Final[str] = "ABCDEFGHIJKLMNPQRSTUVWXYZ"
LOWERCASE: Final[str] = "abcdefghijkmnopqrstuvwxyz"
NUMBERS: Final[str] = "123456789"
SYMBOLS: Final[str] = "!@#$%^&*_"

_MAX_PASSWORD_LEN: Final[int] = 255


def generate_password(
    length: int = 16,
    *,
    upper: bool = True,
    lowercase: bool = True,
    numbers: bool = True,
    symbols: bool = True,
) -> str:
    """
    Generate a random password.

    Args:
        length: password length (1..255).
        upper, lowercase, numbers, symbols: character classes to draw from.

    Returns:
        Password string of exactly ``length`` characters.

    Raises:
        ValueError: if no class is enabled or ``length`` cannot fit one
            character per enabled class.

    Examples:
        >>> pw = generate_password(32)
        >>> len(pw)
        32
    """
    classes = [
        alphabet
        for alphabet, enabled in (
            (UPPER, upper),
            (LOWERCASE, lowercase),
            (NUMBERS, numbers),
            (SYMBOLS, symbols),
        )
        if enabled
    ]
    if not classes:
        raise ValueError("At least one character class must be enabled")
    if not isinstance(length, int) or length < len(classes) or length > _MAX_PASSWORD_LEN:
        raise ValueError(
            f"length must be between {len(classes)} and {_MAX_PASSWORD_LEN}"
        )

    chars = "".join(classes)
    password: List[str] = [secrets.choice(alphabet) for alphabet in classes]
    password.extend(secrets.choice(chars) for _ in range(length - len(password)))
    secrets.SystemRandom().shuffle(password)

    _LOGGER.debug("Generated %d-character password from %d classes", length, len(classes))
    return "".join(password)


def estimate_strength(password: str) -> int:
    """
    zxcvbn strength score of a password, 0 (guessable) to 4 (very strong).

    Examples:
        >>> estimate_strength("")
        0
        >>> estimate_strength("password")
        0
    """
    if not password:
        return 0
    return int(zxcvbn(password)["score"])


__all__ = [
    "UPPER",
    "LOWERCASE",
    "NUMBERS",
    "SYMBOLS",
    "generate_password",
    "estimate_strength",
]
