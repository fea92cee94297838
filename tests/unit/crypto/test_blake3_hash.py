"""Tests for the BLAKE3 keyed-hash signer."""

from __future__ import annotations

import blake3
import pytest

from textcrypt.crypto.blake3_hash import SIGNATURE_LEN, Blake3Signer, keyed_hash_blake3
from textcrypt.crypto.keys import KeyedHashKey
from textcrypt.crypto.protocols import TextSigner, TextVerifier

KEY = b"\x01" * 32
MESSAGE = b"Hello, World!"
GOLDEN_HEX = "35dc0dd8bc9d70e89085fb1e9c9be090819a4cf30e251b6797893b4950ac32b6"


@pytest.fixture
def signer() -> Blake3Signer:
    return Blake3Signer(KeyedHashKey(KEY))


class TestBlake3Signer:
    """BLAKE3 keyed-hash sign/verify tests."""

    def test_satisfies_protocols(self, signer: Blake3Signer) -> None:
        assert isinstance(signer, TextSigner)
        assert isinstance(signer, TextVerifier)
        assert signer.signature_size == 32

    def test_golden_signature(self, signer: Blake3Signer) -> None:
        """Known keyed-hash value for key 0x01 * 32 and "Hello, World!"."""
        sig = signer.sign(MESSAGE)
        assert len(sig) == SIGNATURE_LEN
        assert sig.hex() == GOLDEN_HEX

    def test_matches_incremental_hash(self, signer: Blake3Signer) -> None:
        hasher = blake3.blake3(key=KEY)
        hasher.update(b"Hello, ")
        hasher.update(b"World!")
        assert signer.sign(MESSAGE) == hasher.digest()

    def test_deterministic(self, signer: Blake3Signer) -> None:
        assert signer.sign(MESSAGE) == signer.sign(MESSAGE)
        assert Blake3Signer(KeyedHashKey(KEY)).sign(MESSAGE) == signer.sign(MESSAGE)

    def test_key_separation(self, signer: Blake3Signer) -> None:
        other = Blake3Signer(KeyedHashKey(b"\x02" * 32))
        assert other.sign(MESSAGE) != signer.sign(MESSAGE)

    def test_differs_from_unkeyed_hash(self, signer: Blake3Signer) -> None:
        assert signer.sign(MESSAGE) != blake3.blake3(MESSAGE).digest()

    @pytest.mark.parametrize("data", [b"", b"x", MESSAGE, bytes(range(256)) * 40])
    def test_roundtrip(self, signer: Blake3Signer, data: bytes) -> None:
        assert signer.verify(data, signer.sign(data)) is True

    def test_bit_flip_in_data(self, signer: Blake3Signer) -> None:
        sig = signer.sign(MESSAGE)
        for i in range(len(MESSAGE)):
            tampered = bytearray(MESSAGE)
            tampered[i] ^= 0x01
            assert signer.verify(bytes(tampered), sig) is False

    def test_bit_flip_in_signature(self, signer: Blake3Signer) -> None:
        sig = signer.sign(MESSAGE)
        for i in range(len(sig)):
            tampered = bytearray(sig)
            tampered[i] ^= 0x80
            assert signer.verify(MESSAGE, bytes(tampered)) is False

    @pytest.mark.parametrize("bad", [b"", b"\x00" * 31, b"\x00" * 33, b"\x00" * 64])
    def test_wrong_length_is_false_not_error(self, signer: Blake3Signer, bad: bytes) -> None:
        assert signer.verify(MESSAGE, bad) is False

    def test_requires_keyed_hash_key(self) -> None:
        with pytest.raises(TypeError):
            Blake3Signer(KEY)  # type: ignore[arg-type]


def test_keyed_hash_requires_32_byte_key() -> None:
    with pytest.raises(ValueError):
        keyed_hash_blake3(b"\x00" * 16, b"data")
