# -*- coding: utf-8 -*-
"""
RU: Криптографические утилиты: RNG через HKDF‑микширование, сравнение в константное
время, URL-safe Base64 без паддинга, проверка длины ключей и строгие права на файлы.
"""
from __future__ import annotations

import base64
import hmac
import logging
import os
import re
import secrets
import stat
from collections import Counter
from pathlib import Path
from typing import Final, Union

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from textcrypt.crypto.exceptions import InvalidEncodingError

_LOGGER: Final = logging.getLogger(__name__)

_MAX_RANDOM_BYTES: Final[int] = 1024 * 1024
_SMALL_APT_MIN_N: Final[int] = 32
_ARMOR_RE: Final = re.compile(r"^[A-Za-z0-9_-]*$")

PathLike = Union[str, "os.PathLike[str]"]


def generate_random_bytes(n: int) -> bytes:
    """
    Generate cryptographically secure random bytes.

    Uses dual-source XOR (os.urandom + secrets.token_bytes) mixed via HKDF-SHA256.

    Args:
        n: number of bytes to generate (1..1MiB).

    Returns:
        Random bytes of requested length.

    Raises:
        ValueError: if n is out of range or the output fails sanity checks.
    """
    if not isinstance(n, int) or n <= 0 or n > _MAX_RANDOM_BYTES:
        raise ValueError("Requested random size must be in 1..1MiB")

    src1 = os.urandom(n)
    src2 = secrets.token_bytes(n)
    ikm = bytes(a ^ b for a, b in zip(src1, src2))
    salt = src2[:16]
    hkdf = HKDF(
        algorithm=hashes.SHA256(), length=n, salt=salt, info=b"TEXTCRYPT-RNG-v1"
    )
    out = hkdf.derive(ikm)

    _rct_apt_checks(out)
    _LOGGER.debug("Generated %d random bytes", n)
    return out


def _rct_apt_checks(data: bytes) -> None:
    """
    Repetition Count Test (RCT) and Adaptive Proportion Test (APT) sanity checks.

    Raises:
        ValueError: if data fails basic entropy sanity checks.
    """
    if len(data) > 1 and all(b == data[0] for b in data):
        raise ValueError("Degenerate RNG output (all bytes equal)")
    if len(data) >= _SMALL_APT_MIN_N:
        freq: Counter[int] = Counter(data)
        max_prop = max(freq.values()) / float(len(data))
        if max_prop > 0.80:
            raise ValueError("RNG output fails adaptive proportion sanity check")


def secure_compare(a: Union[bytes, bytearray], b: Union[bytes, bytearray]) -> bool:
    """Constant-time bytes comparison; different lengths compare unequal."""
    return hmac.compare_digest(bytes(a), bytes(b))


def armor(data: bytes) -> str:
    """
    Encode bytes as URL-safe base64 without padding.

    Examples:
        >>> armor(b"\\xfb\\xff")
        '-_8'
    """
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def dearmor(text: Union[str, bytes]) -> bytes:
    """
    Decode URL-safe, unpadded base64.

    Padding characters, the standard alphabet's ``+``/``/``, lengths that no
    byte string can produce and non-zero trailing bits are all rejected, so
    every byte string has exactly one accepted armored form.

    Raises:
        InvalidEncodingError: on any malformed input.
    """
    if isinstance(text, bytes):
        try:
            text = text.decode("ascii")
        except UnicodeDecodeError as exc:
            raise InvalidEncodingError("Armored text must be ASCII") from exc

    if not _ARMOR_RE.fullmatch(text) or len(text) % 4 == 1:
        raise InvalidEncodingError("Invalid URL-safe base64 (unpadded) text")

    padded = text + "=" * (-len(text) % 4)
    try:
        data = base64.urlsafe_b64decode(padded)
    except ValueError as exc:
        raise InvalidEncodingError("Invalid URL-safe base64 (unpadded) text") from exc
    if armor(data) != text:
        raise InvalidEncodingError("Non-canonical base64: trailing bits must be zero")
    return data


def validate_key_length(
    key: Union[bytes, bytearray], expected_length: int, name: str = "key"
) -> None:
    """
    Validate key length.

    Raises:
        ValueError: if length mismatch.
    """
    if len(key) != expected_length:
        raise ValueError(
            f"Invalid {name} length: {len(key)} bytes, expected {expected_length}"
        )


def read_file_bytes(path: PathLike) -> bytes:
    """Read the whole file; OSError propagates unchanged."""
    with open(path, "rb") as f:
        return f.read()


def set_secure_file_permissions(filepath: PathLike) -> None:
    """
    Set strict file permissions (0600 on POSIX).

    Notes:
        - Windows: best-effort via os.chmod (limited effect)
        - Logs warning on failure (non-fatal)
    """
    try:
        os.chmod(filepath, stat.S_IRUSR | stat.S_IWUSR)
        _LOGGER.debug("Applied 0600 permissions to %s", Path(filepath).name)
    except OSError as e:
        _LOGGER.warning("Could not set strict permissions for %s: %s", filepath, e)


__all__ = [
    "generate_random_bytes",
    "secure_compare",
    "armor",
    "dearmor",
    "validate_key_length",
    "read_file_bytes",
    "set_secure_file_permissions",
]
