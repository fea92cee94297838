# -*- coding: utf-8 -*-
"""
RU: Генерация ключей для схем подписи и запись ключевых файлов.
EN: Key generation for the signing schemes and key artifact writing.

Artifacts are returned in a fixed order:
- blake3:  [key]
- ed25519: [private_seed, public_key]

Cipher keys are provisioned externally and are not generated here.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Final, List, Union

from textcrypt.crypto.config import DEFAULT_CONFIG, KEY_LEN, TextCryptConfig
from textcrypt.crypto.keys import SignFormat
from textcrypt.crypto.passwords import estimate_strength, generate_password
from textcrypt.crypto.signatures import generate_ed25519_keypair
from textcrypt.crypto.utils import PathLike, set_secure_file_permissions

_LOGGER: Final = logging.getLogger(__name__)

_PRIVATE_MODE: Final[int] = 0o600


def generate_key(
    fmt: Union[SignFormat, str],
    *,
    config: TextCryptConfig = DEFAULT_CONFIG,
) -> List[bytes]:
    """
    Generate fresh key artifacts for a signing scheme.

    The BLAKE3 key is a 32-character generated password (all character classes)
    used as raw bytes. Its zxcvbn strength score is logged.

    Raises:
        UnsupportedSchemeError: unknown scheme tag.
        KeyGenerationError: RNG/provider failure (Ed25519).
    """
    fmt = SignFormat.parse(fmt)
    match fmt:
        case SignFormat.BLAKE3:
            password = generate_password(KEY_LEN)
            _LOGGER.info("BLAKE3 key password strength: %d", estimate_strength(password))
            artifacts = [password.encode("ascii")]
        case SignFormat.ED25519:
            seed, pub = generate_ed25519_keypair()
            artifacts = [seed, pub]
    _LOGGER.info("Generated %s key (%d artifacts)", fmt, len(artifacts))
    return artifacts


def _write_private_file(path: Path, data: bytes) -> None:
    """Write ``data`` to a file that is owner-only before any byte lands in it."""
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, _PRIVATE_MODE)
    with os.fdopen(fd, "wb") as fh:
        # O_CREAT leaves the mode of an existing file untouched
        set_secure_file_permissions(path)
        fh.write(data)


def artifact_names(
    fmt: Union[SignFormat, str],
    *,
    config: TextCryptConfig = DEFAULT_CONFIG,
) -> List[str]:
    """File names matching the artifacts returned by ``generate_key``, in order."""
    fmt = SignFormat.parse(fmt)
    match fmt:
        case SignFormat.BLAKE3:
            return [config.blake3_key_file]
        case SignFormat.ED25519:
            return [config.ed25519_private_file, config.ed25519_public_file]


def write_key_artifacts(
    fmt: Union[SignFormat, str],
    output_dir: PathLike,
    *,
    config: TextCryptConfig = DEFAULT_CONFIG,
) -> List[Path]:
    """
    Generate keys and write each artifact as a flat raw-bytes file.

    Private artifacts are created owner-only (0600 on POSIX).

    Returns:
        Written paths, in artifact order.

    Raises:
        NotADirectoryError: ``output_dir`` is not an existing directory.
        OSError: write failure.
    """
    out = Path(output_dir)
    if not out.is_dir():
        raise NotADirectoryError(f"Output path is not a directory: {out}")

    fmt = SignFormat.parse(fmt)
    artifacts = generate_key(fmt, config=config)
    names = artifact_names(fmt, config=config)

    written: List[Path] = []
    for index, (name, data) in enumerate(zip(names, artifacts)):
        path = out / name
        if index == 0:
            _write_private_file(path, data)
        else:
            # The public key (second ed25519 artifact) stays world-readable
            path.write_bytes(data)
        written.append(path)
    _LOGGER.info("Wrote %s key files: %s", fmt, ", ".join(names))
    return written


__all__ = [
    "generate_key",
    "artifact_names",
    "write_key_artifacts",
]
