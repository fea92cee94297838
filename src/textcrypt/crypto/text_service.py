# -*- coding: utf-8 -*-
"""
TextCryptoService: sign / verify / encrypt / decrypt façade.

- Sign/verify dispatch on a closed scheme tag (blake3 | ed25519).
- Encryption is hard-wired to ChaCha20-Poly1305; there is no algorithm choice.
- Signatures and ciphertext travel as URL-safe base64 without padding.
- Every input is read fully into memory before processing.
- No secrets are logged.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Final, List, Union

from textcrypt.crypto.blake3_hash import Blake3Signer
from textcrypt.crypto.config import DEFAULT_CONFIG, TextCryptConfig
from textcrypt.crypto.exceptions import InvalidEncodingError
from textcrypt.crypto.keygen import generate_key
from textcrypt.crypto.keys import (
    CipherKey,
    KeyedHashKey,
    SignFormat,
    SigningKey,
    VerifyingKey,
)
from textcrypt.crypto.protocols import (
    TextDecryptor,
    TextEncryptor,
    TextSigner,
    TextVerifier,
)
from textcrypt.crypto.signatures import Ed25519Signer, Ed25519Verifier
from textcrypt.crypto.symmetric import ChaCha20Poly1305Cipher
from textcrypt.crypto.utils import PathLike, armor, dearmor, read_file_bytes

LOGGER: Final = logging.getLogger(__name__)

STDIN_SENTINEL: Final[str] = "-"


def read_input(source: Union[str, PathLike]) -> bytes:
    """
    Read a whole input source: ``"-"`` is stdin, anything else a file path.

    Raises:
        OSError: unreadable file.
    """
    if source == STDIN_SENTINEL:
        return sys.stdin.buffer.read()
    return read_file_bytes(source)


@dataclass(slots=True)
class TextCryptoService:
    """
    Unified text crypto façade.

    Key material is loaded per call and dropped on return; nothing is cached.
    """

    config: TextCryptConfig = field(default_factory=lambda: DEFAULT_CONFIG)

    # ---- Capability selection ----

    def signer_for(self, fmt: Union[SignFormat, str], key: PathLike) -> TextSigner:
        fmt = SignFormat.parse(fmt)
        policy = self.config.key_policy
        match fmt:
            case SignFormat.BLAKE3:
                return Blake3Signer(KeyedHashKey.load(key, policy=policy))
            case SignFormat.ED25519:
                return Ed25519Signer(SigningKey.load(key, policy=policy))

    def verifier_for(self, fmt: Union[SignFormat, str], key: PathLike) -> TextVerifier:
        fmt = SignFormat.parse(fmt)
        policy = self.config.key_policy
        match fmt:
            case SignFormat.BLAKE3:
                return Blake3Signer(KeyedHashKey.load(key, policy=policy))
            case SignFormat.ED25519:
                return Ed25519Verifier(VerifyingKey.load(key, policy=policy))

    def cipher_for(self, key: PathLike) -> ChaCha20Poly1305Cipher:
        return ChaCha20Poly1305Cipher(CipherKey.load(key, policy=self.config.key_policy))

    # ---- Signing façade ----

    def sign(self, input: str, key: PathLike, fmt: Union[SignFormat, str]) -> str:
        """Sign the input and return the armored signature."""
        signer = self.signer_for(fmt, key)
        data = read_input(input)
        signature = signer.sign(data)
        LOGGER.info("Signed %d bytes with %s", len(data), SignFormat.parse(fmt))
        return armor(signature)

    def verify(
        self,
        input: str,
        key: PathLike,
        fmt: Union[SignFormat, str],
        signature: str,
    ) -> bool:
        """
        Verify an armored signature.

        Raises:
            InvalidEncodingError: signature is not valid unpadded URL-safe base64.
            InvalidSignatureEncodingError: ed25519 signature of the wrong length.
        """
        raw_signature = dearmor(signature.strip())
        verifier = self.verifier_for(fmt, key)
        data = read_input(input)
        verified = verifier.verify(data, raw_signature)
        LOGGER.info("Verification with %s: %s", SignFormat.parse(fmt), verified)
        return verified

    # ---- Symmetric façade ----

    def encrypt(self, input: str, key: PathLike) -> str:
        encryptor: TextEncryptor = self.cipher_for(key)
        data = read_input(input)
        encrypted = encryptor.encrypt(data)
        LOGGER.info("Encrypted %d bytes", len(data))
        return armor(encrypted)

    def decrypt(self, input: str, key: PathLike) -> str:
        """
        Decrypt armored ciphertext read from the input and return UTF-8 text.

        Raises:
            InvalidEncodingError: bad armor, or plaintext that is not UTF-8.
            InvalidCiphertextError: payload shorter than the nonce.
            AuthenticationError: tag mismatch.
        """
        decryptor: TextDecryptor = self.cipher_for(key)
        encrypted = dearmor(read_input(input).strip())
        decrypted = decryptor.decrypt(encrypted)
        try:
            text = decrypted.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidEncodingError("Decrypted data is not valid UTF-8") from exc
        LOGGER.info("Decrypted %d bytes", len(decrypted))
        return text

    # ---- Key generation ----

    def generate_key(self, fmt: Union[SignFormat, str]) -> List[bytes]:
        return generate_key(fmt, config=self.config)


# ---- Module-level entry points ----

_DEFAULT_SERVICE: Final = TextCryptoService()


def process_text_sign(input: str, key: PathLike, fmt: Union[SignFormat, str]) -> str:
    return _DEFAULT_SERVICE.sign(input, key, fmt)


def process_text_verify(
    input: str, key: PathLike, fmt: Union[SignFormat, str], signature: str
) -> bool:
    return _DEFAULT_SERVICE.verify(input, key, fmt, signature)


def process_text_encrypt(input: str, key: PathLike) -> str:
    return _DEFAULT_SERVICE.encrypt(input, key)


def process_text_decrypt(input: str, key: PathLike) -> str:
    return _DEFAULT_SERVICE.decrypt(input, key)


def process_generate_key(fmt: Union[SignFormat, str]) -> List[bytes]:
    return _DEFAULT_SERVICE.generate_key(fmt)


__all__ = [
    "STDIN_SENTINEL",
    "TextCryptoService",
    "read_input",
    "process_text_sign",
    "process_text_verify",
    "process_text_encrypt",
    "process_text_decrypt",
    "process_generate_key",
]
