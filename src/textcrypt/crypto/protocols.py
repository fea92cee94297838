"""
Протокольные интерфейсы текстового криптоядра.

Capability contracts the concrete schemes satisfy structurally:
- TextSigner / TextVerifier: BLAKE3 keyed hash, Ed25519
- TextEncryptor / TextDecryptor: ChaCha20-Poly1305

All inputs are fully buffered ``bytes``; there is no streaming API.

Example:
    >>> from textcrypt.crypto.blake3_hash import Blake3Signer
    >>> from textcrypt.crypto.keys import KeyedHashKey
    >>> isinstance(Blake3Signer(KeyedHashKey(b"k" * 32)), TextSigner)
    True
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TextSigner(Protocol):
    """Produces a fixed-length signature over the whole input."""

    signature_size: int

    def sign(self, data: bytes) -> bytes:
        """Sign ``data`` and return the raw signature bytes."""
        ...


@runtime_checkable
class TextVerifier(Protocol):
    """
    Checks a signature produced by the matching signer.

    A mismatch is a ``False`` result. Structural problems (for schemes that
    define them) raise ``SignatureVerificationError``.
    """

    signature_size: int

    def verify(self, data: bytes, signature: bytes) -> bool:
        ...


@runtime_checkable
class TextEncryptor(Protocol):
    def encrypt(self, plaintext: bytes) -> bytes:
        """Return ``nonce || ciphertext || tag``."""
        ...


@runtime_checkable
class TextDecryptor(Protocol):
    def decrypt(self, payload: bytes) -> bytes:
        """Reverse ``encrypt``; tampering raises, it never yields partial plaintext."""
        ...


__all__ = [
    "TextSigner",
    "TextVerifier",
    "TextEncryptor",
    "TextDecryptor",
]
