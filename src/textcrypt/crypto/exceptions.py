# -*- coding: utf-8 -*-
"""
RU: Иерархия исключений текстового криптоядра. Сообщения не содержат секретов.

EN: Exception hierarchy for the text crypto core.

Guidelines:
- Do not put keys, nonces, tags or plaintext into exception messages.
- Raise the narrowest subclass so callers can tell a bad key file from a tampered payload.
- A failed verification is a ``False`` result, not an exception.
"""

from __future__ import annotations

from typing import Optional


class CryptoError(Exception):
    """Base exception for all crypto-related failures."""

    def __init__(
        self, message: str = "", *, cause: Optional[BaseException] = None
    ) -> None:
        super().__init__(message)
        self.__cause__ = cause


# Keys (avoid shadowing built-in KeyError)
class CryptoKeyError(CryptoError):
    """Base class for key loading and generation errors."""


class InvalidKeyError(CryptoKeyError):
    """Raised when key material does not fit the requested scheme."""


class InvalidKeyLengthError(InvalidKeyError):
    """Raised when a key file is shorter (or, under strict policy, longer) than required."""


class InvalidKeyEncodingError(InvalidKeyError):
    """Raised when public key bytes are not a valid curve point encoding."""


class KeyGenerationError(CryptoKeyError):
    """Raised on key generation failures."""


# Signatures
class SignatureError(CryptoError):
    """Base class for signature errors."""


class SignatureGenerationError(SignatureError):
    """Raised when signing fails inside the provider."""


class SignatureVerificationError(SignatureError):
    """Raised when verification fails structurally (not on a mere mismatch)."""


class InvalidSignatureEncodingError(SignatureVerificationError):
    """Raised when a signature does not have the scheme's fixed length."""


# Symmetric encryption
class EncryptionError(CryptoError):
    """Raised on encryption failures."""


class DecryptionError(CryptoError):
    """Raised on decryption failures."""


class InvalidCiphertextError(DecryptionError):
    """Raised when a payload is too short to carry a nonce."""


class AuthenticationError(DecryptionError):
    """Raised when the AEAD tag does not verify (tampered data or wrong key)."""


# Transport
class InvalidEncodingError(CryptoError):
    """Raised when armored text (or decrypted text) cannot be decoded."""


class UnsupportedSchemeError(CryptoError):
    """Raised for an unknown scheme tag."""


__all__ = [
    "CryptoError",
    "CryptoKeyError",
    "InvalidKeyError",
    "InvalidKeyLengthError",
    "InvalidKeyEncodingError",
    "KeyGenerationError",
    "SignatureError",
    "SignatureGenerationError",
    "SignatureVerificationError",
    "InvalidSignatureEncodingError",
    "EncryptionError",
    "DecryptionError",
    "InvalidCiphertextError",
    "AuthenticationError",
    "InvalidEncodingError",
    "UnsupportedSchemeError",
]
