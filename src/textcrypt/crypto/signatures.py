# -*- coding: utf-8 -*-
"""
RU: Подписи Ed25519 для текстового криптоядра: подписывающая и проверяющая стороны
используют непересекающиеся типы ключей.

EN: Ed25519 signatures for the text crypto core.

Security & design:
- Ed25519Signer holds only a SigningKey (32-byte seed); Ed25519Verifier holds only a
  VerifyingKey (32-byte public point). A verifier cannot be built from a seed.
- Signatures are deterministic and exactly 64 bytes.
- A wrong-length signature is a structural error (InvalidSignatureEncodingError);
  a well-formed but invalid one is a plain ``False``.
- Secrets are never logged; only structural events.

Examples:
    >>> seed, pub = generate_ed25519_keypair()
    >>> sig = Ed25519Signer(SigningKey(seed)).sign(b"hello")
    >>> Ed25519Verifier(VerifyingKey(pub)).verify(b"hello", sig)
    True
"""
from __future__ import annotations

import logging
from typing import Final, Tuple

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from textcrypt.crypto.exceptions import (
    InvalidSignatureEncodingError,
    KeyGenerationError,
    SignatureGenerationError,
)
from textcrypt.crypto.keys import SigningKey, VerifyingKey
from textcrypt.crypto.utils import generate_random_bytes

_LOGGER: Final = logging.getLogger(__name__)

SEED_LEN: Final[int] = 32
SIGNATURE_LEN: Final[int] = 64


def generate_ed25519_keypair() -> Tuple[bytes, bytes]:
    """
    Generate a fresh Ed25519 keypair from the CSPRNG.

    Returns:
        (private_seed, public_key), 32 bytes each.

    Raises:
        KeyGenerationError: if the RNG or the provider fails.
    """
    try:
        seed = generate_random_bytes(SEED_LEN)
        priv = Ed25519PrivateKey.from_private_bytes(seed)
        pub = priv.public_key().public_bytes_raw()
    except ValueError as exc:
        _LOGGER.error("Ed25519 keygen failed: %s", exc.__class__.__name__)
        raise KeyGenerationError("Ed25519 key generation failed") from exc
    return seed, pub


class Ed25519Signer:
    """Ed25519 signer; needs the private half only."""

    __slots__ = ("_priv",)

    signature_size: int = SIGNATURE_LEN

    def __init__(self, key: SigningKey) -> None:
        if not isinstance(key, SigningKey):
            raise TypeError("Ed25519Signer requires a SigningKey")
        self._priv = key.to_private_key()

    def sign(self, data: bytes) -> bytes:
        try:
            return bytes(self._priv.sign(data))
        except Exception as exc:
            _LOGGER.error("Ed25519 sign failed: %s", exc.__class__.__name__)
            raise SignatureGenerationError("Signing failed") from exc


class Ed25519Verifier:
    """Ed25519 verifier; needs the public half only."""

    __slots__ = ("_pub",)

    signature_size: int = SIGNATURE_LEN

    def __init__(self, key: VerifyingKey) -> None:
        if not isinstance(key, VerifyingKey):
            raise TypeError("Ed25519Verifier requires a VerifyingKey")
        self._pub = key.to_public_key()

    def verify(self, data: bytes, signature: bytes) -> bool:
        if not isinstance(signature, (bytes, bytearray)) or len(signature) != SIGNATURE_LEN:
            raise InvalidSignatureEncodingError(
                f"Ed25519 signature must be {SIGNATURE_LEN} bytes"
            )
        try:
            self._pub.verify(bytes(signature), data)
            return True
        except InvalidSignature:
            return False


__all__ = [
    "SEED_LEN",
    "SIGNATURE_LEN",
    "generate_ed25519_keypair",
    "Ed25519Signer",
    "Ed25519Verifier",
]
