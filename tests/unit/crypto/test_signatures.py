"""Tests for Ed25519 signing and verification."""

from __future__ import annotations

from typing import Tuple

import pytest

from textcrypt.crypto.exceptions import InvalidSignatureEncodingError, KeyGenerationError
from textcrypt.crypto.keys import SigningKey, VerifyingKey
from textcrypt.crypto.protocols import TextSigner, TextVerifier
from textcrypt.crypto.signatures import (
    SIGNATURE_LEN,
    Ed25519Signer,
    Ed25519Verifier,
    generate_ed25519_keypair,
)

# RFC 8032, section 7.1, TEST 1
RFC_SEED = bytes.fromhex(
    "9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60"
)
RFC_PUBLIC = bytes.fromhex(
    "d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a"
)
RFC_SIGNATURE = bytes.fromhex(
    "e5564300c360ac729086e2cc806e828a84877f1eb8e5d974d873e065224901555"
    "fb8821590a33bacc61e39701cf9b46bd25bf5f0595bbe24655141438e7a100b"
)


@pytest.fixture
def keypair() -> Tuple[Ed25519Signer, Ed25519Verifier]:
    seed, pub = generate_ed25519_keypair()
    return Ed25519Signer(SigningKey(seed)), Ed25519Verifier(VerifyingKey(pub))


def test_rfc8032_vector() -> None:
    signer = Ed25519Signer(SigningKey(RFC_SEED))
    verifier = Ed25519Verifier(VerifyingKey(RFC_PUBLIC))
    assert signer.sign(b"") == RFC_SIGNATURE
    assert verifier.verify(b"", RFC_SIGNATURE) is True


def test_protocols(keypair: Tuple[Ed25519Signer, Ed25519Verifier]) -> None:
    signer, verifier = keypair
    assert isinstance(signer, TextSigner)
    assert isinstance(verifier, TextVerifier)
    assert not isinstance(signer, TextVerifier)
    assert not isinstance(verifier, TextSigner)


@pytest.mark.parametrize("msg", [b"", b"Hello, World!", b"\x00" * 4096])
def test_sign_and_verify(keypair: Tuple[Ed25519Signer, Ed25519Verifier], msg: bytes) -> None:
    signer, verifier = keypair
    sig = signer.sign(msg)
    assert len(sig) == SIGNATURE_LEN
    assert verifier.verify(msg, sig) is True


def test_deterministic(keypair: Tuple[Ed25519Signer, Ed25519Verifier]) -> None:
    signer, _ = keypair
    assert signer.sign(b"data") == signer.sign(b"data")


def test_bit_flips_fail(keypair: Tuple[Ed25519Signer, Ed25519Verifier]) -> None:
    signer, verifier = keypair
    msg = b"Hello, World!"
    sig = signer.sign(msg)
    for i in range(len(msg)):
        tampered = bytearray(msg)
        tampered[i] ^= 0x04
        assert verifier.verify(bytes(tampered), sig) is False
    for i in range(0, SIGNATURE_LEN, 7):
        bad = bytearray(sig)
        bad[i] ^= 0x01
        assert verifier.verify(msg, bytes(bad)) is False


def test_wrong_key_fails(keypair: Tuple[Ed25519Signer, Ed25519Verifier]) -> None:
    signer, _ = keypair
    other = Ed25519Verifier(VerifyingKey(RFC_PUBLIC))
    assert other.verify(b"data", signer.sign(b"data")) is False


@pytest.mark.parametrize("size", [0, 32, 63, 65])
def test_invalid_signature_length_raises(
    keypair: Tuple[Ed25519Signer, Ed25519Verifier], size: int
) -> None:
    _, verifier = keypair
    with pytest.raises(InvalidSignatureEncodingError):
        verifier.verify(b"data", b"\x00" * size)


def test_disjoint_key_types() -> None:
    with pytest.raises(TypeError):
        Ed25519Verifier(SigningKey(RFC_SEED))  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        Ed25519Signer(VerifyingKey(RFC_PUBLIC))  # type: ignore[arg-type]
    assert not hasattr(Ed25519Signer, "verify")
    assert not hasattr(Ed25519Verifier, "sign")


def test_generate_keypair_public_matches_seed() -> None:
    seed, pub = generate_ed25519_keypair()
    assert len(seed) == 32 and len(pub) == 32
    assert SigningKey(seed).public_bytes == pub
    assert generate_ed25519_keypair()[0] != seed


def test_generate_keypair_wraps_rng_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken(n: int) -> bytes:
        raise ValueError("Degenerate RNG output (all bytes equal)")

    monkeypatch.setattr("textcrypt.crypto.signatures.generate_random_bytes", broken)
    with pytest.raises(KeyGenerationError):
        generate_ed25519_keypair()
