# -*- coding: utf-8 -*-
"""
RU: Ключевой материал по схемам и загрузка ключей из плоских файлов.

EN: Per-scheme key material and the key loader.

Key files are flat raw bytes with no framing:
- BLAKE3 / ChaCha20-Poly1305 keys and Ed25519 seeds need at least 32 bytes;
  the first 32 are used and the rest is ignored (``KeyLengthPolicy.LENIENT``),
  or rejected (``KeyLengthPolicy.STRICT``).
- Ed25519 public keys must be exactly 32 bytes and a valid point encoding.

Key objects are immutable, never print their bytes, and are not cached.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Final, Type, TypeVar, Union

from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from textcrypt.crypto.config import KEY_LEN, KeyLengthPolicy
from textcrypt.crypto.exceptions import (
    InvalidKeyEncodingError,
    InvalidKeyLengthError,
    UnsupportedSchemeError,
)
from textcrypt.crypto.utils import PathLike, read_file_bytes, validate_key_length

_LOGGER: Final = logging.getLogger(__name__)

# Ed25519 field prime and curve constant (RFC 8032)
_P: Final[int] = 2**255 - 19
_D: Final[int] = (-121665 * pow(121666, _P - 2, _P)) % _P
_SQRT_M1: Final[int] = pow(2, (_P - 1) // 4, _P)

_K = TypeVar("_K", "KeyedHashKey", "SigningKey", "CipherKey")


class SignFormat(str, Enum):
    """Scheme tag for sign/verify; the set is closed."""

    BLAKE3 = "blake3"
    ED25519 = "ed25519"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: Union[str, "SignFormat"]) -> "SignFormat":
        """
        Parse a scheme tag such as ``"blake3"`` or ``"ed25519"``.

        Raises:
            UnsupportedSchemeError: for anything else.
        """
        if isinstance(text, SignFormat):
            return text
        try:
            return cls(str(text).strip().lower())
        except ValueError as exc:
            raise UnsupportedSchemeError(f"Invalid format: {text}") from exc


def _take_key_bytes(raw: bytes, policy: KeyLengthPolicy, name: str) -> bytes:
    if len(raw) < KEY_LEN:
        raise InvalidKeyLengthError(
            f"{name} requires at least {KEY_LEN} bytes, got {len(raw)}"
        )
    if len(raw) > KEY_LEN:
        if policy is KeyLengthPolicy.STRICT:
            raise InvalidKeyLengthError(
                f"{name} requires exactly {KEY_LEN} bytes, got {len(raw)}"
            )
        _LOGGER.debug("%s file has %d extra bytes; ignoring", name, len(raw) - KEY_LEN)
    return raw[:KEY_LEN]


def _check_len(key: bytes, name: str) -> None:
    try:
        validate_key_length(key, KEY_LEN, name)
    except ValueError as exc:
        raise InvalidKeyLengthError(str(exc)) from exc


def is_valid_ed25519_point(raw: bytes) -> bool:
    """
    Check that 32 bytes decode to a point on edwards25519 (RFC 8032, 5.1.3).

    Non-canonical encodings (y >= p) are rejected.
    """
    if len(raw) != KEY_LEN:
        return False
    y = int.from_bytes(raw, "little")
    sign = y >> 255
    y &= (1 << 255) - 1
    if y >= _P:
        return False

    u = (y * y - 1) % _P
    v = (_D * y * y + 1) % _P
    x = (u * pow(v, 3, _P) * pow(u * pow(v, 7, _P), (_P - 5) // 8, _P)) % _P
    vx2 = (v * x * x) % _P
    if vx2 == u:
        pass
    elif vx2 == (-u) % _P:
        x = (x * _SQRT_M1) % _P
    else:
        return False

    if x == 0 and sign:
        return False
    return True


class _LoadableKey:
    """Mixin: ``load(path)`` for keys that take the first 32 bytes of a file."""

    _name: str = "key"

    @classmethod
    def load(
        cls: Type[_K],
        path: PathLike,
        *,
        policy: KeyLengthPolicy = KeyLengthPolicy.LENIENT,
    ) -> _K:
        raw = read_file_bytes(path)
        return cls(_take_key_bytes(raw, policy, cls._name))


@dataclass(frozen=True)
class KeyedHashKey(_LoadableKey):
    """32-byte BLAKE3 key; held by the signer/verifier only."""

    key: bytes = field(repr=False)

    _name = "BLAKE3 key"

    def __post_init__(self) -> None:
        object.__setattr__(self, "key", bytes(self.key))
        _check_len(self.key, self._name)


@dataclass(frozen=True)
class CipherKey(_LoadableKey):
    """32-byte ChaCha20-Poly1305 key shared by both parties."""

    key: bytes = field(repr=False)

    _name = "ChaCha20-Poly1305 key"

    def __post_init__(self) -> None:
        object.__setattr__(self, "key", bytes(self.key))
        _check_len(self.key, self._name)


@dataclass(frozen=True)
class SigningKey(_LoadableKey):
    """Ed25519 private half, as its 32-byte seed."""

    seed: bytes = field(repr=False)

    _name = "Ed25519 private seed"

    def __post_init__(self) -> None:
        object.__setattr__(self, "seed", bytes(self.seed))
        _check_len(self.seed, self._name)

    def to_private_key(self) -> Ed25519PrivateKey:
        return Ed25519PrivateKey.from_private_bytes(self.seed)

    @property
    def public_bytes(self) -> bytes:
        """Raw 32-byte public key derived from the seed."""
        return self.to_private_key().public_key().public_bytes_raw()

    def verifying_key(self) -> "VerifyingKey":
        return VerifyingKey(self.public_bytes)


@dataclass(frozen=True)
class VerifyingKey:
    """Ed25519 public half (32 bytes, valid point)."""

    public: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "public", bytes(self.public))
        _check_len(self.public, "Ed25519 public key")
        if not is_valid_ed25519_point(self.public):
            raise InvalidKeyEncodingError("Ed25519 public key is not a valid point")

    @classmethod
    def load(
        cls,
        path: PathLike,
        *,
        policy: KeyLengthPolicy = KeyLengthPolicy.LENIENT,
    ) -> "VerifyingKey":
        # Public keys are always exact-length, whatever the policy
        return cls(read_file_bytes(path))

    def to_public_key(self) -> Ed25519PublicKey:
        try:
            return Ed25519PublicKey.from_public_bytes(self.public)
        except ValueError as exc:
            raise InvalidKeyEncodingError("Invalid Ed25519 public key") from exc


KeyMaterial = Union[KeyedHashKey, SigningKey, VerifyingKey, CipherKey]


def load_key(
    path: PathLike,
    kind: Type[KeyMaterial],
    *,
    policy: KeyLengthPolicy = KeyLengthPolicy.LENIENT,
) -> KeyMaterial:
    """
    Load key material of the given kind from a flat key file.

    Args:
        path: key file path.
        kind: one of KeyedHashKey, SigningKey, VerifyingKey, CipherKey.
        policy: treatment of oversized files.

    Raises:
        InvalidKeyLengthError: file too short (or too long under STRICT).
        InvalidKeyEncodingError: public key is not a valid point.
        OSError: the file cannot be read.
    """
    if kind not in (KeyedHashKey, SigningKey, VerifyingKey, CipherKey):
        raise TypeError(f"Unsupported key kind: {kind!r}")
    key = kind.load(path, policy=policy)
    _LOGGER.debug("Loaded %s", kind.__name__)
    return key


__all__ = [
    "SignFormat",
    "KeyedHashKey",
    "SigningKey",
    "VerifyingKey",
    "CipherKey",
    "KeyMaterial",
    "load_key",
    "is_valid_ed25519_point",
]
