# -*- coding: utf-8 -*-
"""
RU: Подпись текста ключевым хешем BLAKE3.
EN: Text signing with the BLAKE3 keyed hash.

Features:
- 32-byte key, 32-byte tag
- Deterministic: same key and input always give the same tag
- Verification recomputes the tag and compares in constant time
"""
from __future__ import annotations

import logging
from typing import Final

import blake3

from textcrypt.crypto.config import KEY_LEN
from textcrypt.crypto.keys import KeyedHashKey
from textcrypt.crypto.utils import secure_compare

_LOGGER: Final = logging.getLogger(__name__)

SIGNATURE_LEN: Final[int] = 32


def keyed_hash_blake3(key: bytes, message: bytes) -> bytes:
    """
    BLAKE3 keyed-mode hash (MAC).

    Args:
        key: exactly 32 bytes.
        message: message to authenticate.

    Returns:
        32-byte tag.

    Examples:
        >>> tag = keyed_hash_blake3(b"\\x01" * 32, b"Hello, World!")
        >>> len(tag)
        32
    """
    if len(key) != KEY_LEN:
        raise ValueError("BLAKE3 key must be 32 bytes")
    return blake3.blake3(message, key=key).digest(SIGNATURE_LEN)


class Blake3Signer:
    """
    Keyed-hash signer and verifier over a single ``KeyedHashKey``.

    Examples:
        >>> signer = Blake3Signer(KeyedHashKey(b"\\x01" * 32))
        >>> sig = signer.sign(b"hello")
        >>> signer.verify(b"hello", sig)
        True
        >>> signer.verify(b"hello", sig[:-1])
        False
    """

    __slots__ = ("_key",)

    signature_size: int = SIGNATURE_LEN

    def __init__(self, key: KeyedHashKey) -> None:
        if not isinstance(key, KeyedHashKey):
            raise TypeError("Blake3Signer requires a KeyedHashKey")
        self._key = key

    def sign(self, data: bytes) -> bytes:
        return keyed_hash_blake3(self._key.key, data)

    def verify(self, data: bytes, signature: bytes) -> bool:
        if len(signature) != SIGNATURE_LEN:
            _LOGGER.debug("BLAKE3 signature has wrong length %d", len(signature))
            return False
        return secure_compare(self.sign(data), signature)


__all__ = [
    "SIGNATURE_LEN",
    "keyed_hash_blake3",
    "Blake3Signer",
]
