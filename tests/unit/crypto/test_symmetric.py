from __future__ import annotations

import os

import pytest

from textcrypt.crypto.exceptions import (
    AuthenticationError,
    EncryptionError,
    InvalidCiphertextError,
)
from textcrypt.crypto.keys import CipherKey
from textcrypt.crypto.protocols import TextDecryptor, TextEncryptor
from textcrypt.crypto.symmetric import NONCE_LEN, TAG_LEN, ChaCha20Poly1305Cipher


@pytest.fixture
def cipher() -> ChaCha20Poly1305Cipher:
    return ChaCha20Poly1305Cipher(CipherKey(os.urandom(32)))


def test_protocols(cipher: ChaCha20Poly1305Cipher) -> None:
    assert isinstance(cipher, TextEncryptor)
    assert isinstance(cipher, TextDecryptor)


@pytest.mark.parametrize("plaintext", [b"", b"Hello, World!", os.urandom(5000)])
def test_roundtrip(cipher: ChaCha20Poly1305Cipher, plaintext: bytes) -> None:
    payload = cipher.encrypt(plaintext)
    assert len(payload) == NONCE_LEN + len(plaintext) + TAG_LEN
    assert cipher.decrypt(payload) == plaintext


def test_fresh_nonce_per_call(cipher: ChaCha20Poly1305Cipher) -> None:
    p1 = cipher.encrypt(b"Hello, World!")
    p2 = cipher.encrypt(b"Hello, World!")
    assert p1[:NONCE_LEN] != p2[:NONCE_LEN]
    assert p1 != p2
    assert cipher.decrypt(p1) == cipher.decrypt(p2) == b"Hello, World!"


def test_nonce_uniqueness(cipher: ChaCha20Poly1305Cipher) -> None:
    nonces = {cipher.encrypt(b"x")[:NONCE_LEN] for _ in range(500)}
    assert len(nonces) == 500


def test_nonce_comes_from_rng(
    cipher: ChaCha20Poly1305Cipher, monkeypatch: pytest.MonkeyPatch
) -> None:
    calls = []

    def fake_rng(n: int) -> bytes:
        calls.append(n)
        return bytes(range(1, n + 1))

    monkeypatch.setattr("textcrypt.crypto.symmetric.generate_random_bytes", fake_rng)
    payload = cipher.encrypt(b"abc")
    assert calls == [NONCE_LEN]
    assert payload[:NONCE_LEN] == bytes(range(1, NONCE_LEN + 1))


def test_layout_is_nonce_ciphertext_tag() -> None:
    from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305

    key = os.urandom(32)
    payload = ChaCha20Poly1305Cipher(CipherKey(key)).encrypt(b"layout")
    nonce, sealed = payload[:NONCE_LEN], payload[NONCE_LEN:]
    assert ChaCha20Poly1305(key).decrypt(nonce, sealed, None) == b"layout"


@pytest.mark.parametrize("size", [0, 1, 11])
def test_short_payload_is_invalid_ciphertext(
    cipher: ChaCha20Poly1305Cipher, size: int
) -> None:
    with pytest.raises(InvalidCiphertextError):
        cipher.decrypt(b"\x00" * size)


@pytest.mark.parametrize("size", [12, 13, 27])
def test_payload_without_full_tag_fails_authentication(
    cipher: ChaCha20Poly1305Cipher, size: int
) -> None:
    with pytest.raises(AuthenticationError):
        cipher.decrypt(b"\x00" * size)


def test_tampering_is_detected(cipher: ChaCha20Poly1305Cipher) -> None:
    payload = cipher.encrypt(b"secret message")
    for i in (0, NONCE_LEN, len(payload) - 1):
        tampered = bytearray(payload)
        tampered[i] ^= 0x01
        with pytest.raises(AuthenticationError):
            cipher.decrypt(bytes(tampered))


def test_wrong_key_fails(cipher: ChaCha20Poly1305Cipher) -> None:
    payload = cipher.encrypt(b"secret")
    other = ChaCha20Poly1305Cipher(CipherKey(os.urandom(32)))
    with pytest.raises(AuthenticationError):
        other.decrypt(payload)


def test_encrypt_internal_failure_is_wrapped(
    cipher: ChaCha20Poly1305Cipher, monkeypatch: pytest.MonkeyPatch
) -> None:
    class Boom(Exception):
        pass

    monkeypatch.setattr(
        "textcrypt.crypto.symmetric.ChaCha20Poly1305Impl",
        lambda *a, **k: (_ for _ in ()).throw(Boom()),
    )
    with pytest.raises(EncryptionError):
        cipher.encrypt(b"data")


def test_requires_cipher_key() -> None:
    with pytest.raises(TypeError):
        ChaCha20Poly1305Cipher(b"\x00" * 32)  # type: ignore[arg-type]
