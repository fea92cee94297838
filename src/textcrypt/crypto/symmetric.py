# -*- coding: utf-8 -*-
"""
RU: Симметричное шифрование ChaCha20-Poly1305 со случайным nonce на каждый вызов.

EN: ChaCha20-Poly1305 text cipher with a fresh random nonce per encryption.

Payload layout (bit-compatible with existing artifacts):
    nonce (12 bytes) || ciphertext || Poly1305 tag (16 bytes)

Security notes:
- Key is 32 bytes. Nonce is 12 bytes (RFC 8439). Tag length is 16 bytes.
- Nonces come from the CSPRNG in utils, never a counter or a timestamp.
- Tag mismatch is a hard failure (AuthenticationError); no partial plaintext is returned.
- No keys, nonces, tags, or plaintext fragments are logged.
- Birthday bound: safe for up to ~2^32 encryptions per key.
"""

from __future__ import annotations

import logging
from typing import Final

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import (
    ChaCha20Poly1305 as ChaCha20Poly1305Impl,
)

from textcrypt.crypto.exceptions import (
    AuthenticationError,
    EncryptionError,
    InvalidCiphertextError,
)
from textcrypt.crypto.keys import CipherKey
from textcrypt.crypto.utils import generate_random_bytes

_LOGGER: Final = logging.getLogger(__name__)

NONCE_LEN: Final[int] = 12
TAG_LEN: Final[int] = 16


class ChaCha20Poly1305Cipher:
    """
    ChaCha20-Poly1305 encryptor/decryptor over one ``CipherKey``.

    Examples:
        >>> cipher = ChaCha20Poly1305Cipher(CipherKey(b"\\x02" * 32))
        >>> payload = cipher.encrypt(b"hello")
        >>> len(payload) == NONCE_LEN + 5 + TAG_LEN
        True
        >>> cipher.decrypt(payload)
        b'hello'
    """

    __slots__ = ("_key",)

    algorithm_name = "ChaCha20-Poly1305"

    def __init__(self, key: CipherKey) -> None:
        if not isinstance(key, CipherKey):
            raise TypeError("ChaCha20Poly1305Cipher requires a CipherKey")
        self._key = key

    def encrypt(self, plaintext: bytes) -> bytes:
        nonce = generate_random_bytes(NONCE_LEN)
        try:
            sealed = ChaCha20Poly1305Impl(self._key.key).encrypt(
                nonce, bytes(plaintext), None
            )
        except Exception as exc:
            _LOGGER.error("ChaCha20-Poly1305 encryption failed: %s", exc.__class__.__name__)
            raise EncryptionError("ChaCha20-Poly1305 encryption failed") from exc
        return nonce + sealed

    def decrypt(self, payload: bytes) -> bytes:
        if len(payload) < NONCE_LEN:
            raise InvalidCiphertextError(
                f"Payload must be at least {NONCE_LEN} bytes, got {len(payload)}"
            )
        nonce = bytes(payload[:NONCE_LEN])
        sealed = bytes(payload[NONCE_LEN:])
        try:
            return ChaCha20Poly1305Impl(self._key.key).decrypt(nonce, sealed, None)
        except InvalidTag as exc:
            _LOGGER.warning("ChaCha20-Poly1305 tag verification failed")
            raise AuthenticationError("Invalid authentication tag") from exc


__all__ = [
    "NONCE_LEN",
    "TAG_LEN",
    "ChaCha20Poly1305Cipher",
]
