# -*- coding: utf-8 -*-
"""
RU: Конфигурация текстового криптоядра: политика длины ключей и имена файлов ключей.
EN: Text crypto core configuration: key length policy and key artifact file names.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Final, Mapping

KEY_LEN: Final[int] = 32


class KeyLengthPolicy(str, Enum):
    """How the key loader treats key files longer than the scheme needs."""

    # Take the first 32 bytes and ignore the rest
    LENIENT = "lenient"

    # Anything but exactly 32 bytes is an error
    STRICT = "strict"


@dataclass(frozen=True)
class TextCryptConfig:
    """
    Text crypto core configuration.

    Attributes:
        key_policy: Treatment of oversized key files.
        blake3_key_file: File name for the generated BLAKE3 key.
        ed25519_private_file: File name for the generated Ed25519 seed.
        ed25519_public_file: File name for the generated Ed25519 public key.

    Examples:
        >>> TextCryptConfig().key_policy
        <KeyLengthPolicy.LENIENT: 'lenient'>

        >>> TextCryptConfig.from_mapping({"key_policy": "strict"}).key_policy
        <KeyLengthPolicy.STRICT: 'strict'>
    """

    key_policy: KeyLengthPolicy = KeyLengthPolicy.LENIENT
    blake3_key_file: str = "blake3.txt"
    ed25519_private_file: str = "ed25519.sk"
    ed25519_public_file: str = "ed25519.pk"

    def __post_init__(self) -> None:
        """Validate parameters."""
        if not isinstance(self.key_policy, KeyLengthPolicy):
            object.__setattr__(self, "key_policy", KeyLengthPolicy(self.key_policy))
        names = (
            self.blake3_key_file,
            self.ed25519_private_file,
            self.ed25519_public_file,
        )
        for name in names:
            if not isinstance(name, str) or not name or "/" in name or "\\" in name:
                raise ValueError("Key file names must be plain, non-empty file names")
        if self.ed25519_private_file == self.ed25519_public_file:
            raise ValueError("Ed25519 private and public files must differ")

    @staticmethod
    def from_mapping(values: Mapping[str, Any]) -> "TextCryptConfig":
        """
        Build a configuration from a mapping, ignoring unknown keys.

        Raises:
            ValueError: on invalid values.
        """
        known = {f.name for f in fields(TextCryptConfig)}
        return TextCryptConfig(**{k: v for k, v in values.items() if k in known})


DEFAULT_CONFIG: Final[TextCryptConfig] = TextCryptConfig()


__all__ = [
    "KEY_LEN",
    "KeyLengthPolicy",
    "TextCryptConfig",
    "DEFAULT_CONFIG",
]
