"""
Текстовое криптоядро: подпись, проверка, шифрование и расшифровка байтовых потоков.
EN: Text crypto core API. Single import point for the sign/verify/encrypt/decrypt façade,
key material, key generation and the exception hierarchy.
"""

from .exceptions import (
    AuthenticationError,
    CryptoError,
    CryptoKeyError,
    DecryptionError,
    EncryptionError,
    InvalidCiphertextError,
    InvalidEncodingError,
    InvalidKeyEncodingError,
    InvalidKeyError,
    InvalidKeyLengthError,
    InvalidSignatureEncodingError,
    KeyGenerationError,
    SignatureError,
    SignatureGenerationError,
    SignatureVerificationError,
    UnsupportedSchemeError,
)
from .config import DEFAULT_CONFIG, KeyLengthPolicy, TextCryptConfig
from .keys import (
    CipherKey,
    KeyedHashKey,
    KeyMaterial,
    SignFormat,
    SigningKey,
    VerifyingKey,
    load_key,
)
from .blake3_hash import Blake3Signer
from .signatures import Ed25519Signer, Ed25519Verifier
from .symmetric import ChaCha20Poly1305Cipher
from .passwords import estimate_strength, generate_password
from .keygen import generate_key, write_key_artifacts
from .utils import armor, dearmor
from .text_service import (
    TextCryptoService,
    process_generate_key,
    process_text_decrypt,
    process_text_encrypt,
    process_text_sign,
    process_text_verify,
    read_input,
)

__all__ = [
    # Façade
    "TextCryptoService",
    "process_text_sign",
    "process_text_verify",
    "process_text_encrypt",
    "process_text_decrypt",
    "process_generate_key",
    "read_input",
    "armor",
    "dearmor",
    # Config
    "TextCryptConfig",
    "KeyLengthPolicy",
    "DEFAULT_CONFIG",
    # Keys
    "SignFormat",
    "KeyedHashKey",
    "SigningKey",
    "VerifyingKey",
    "CipherKey",
    "KeyMaterial",
    "load_key",
    "generate_key",
    "write_key_artifacts",
    "generate_password",
    "estimate_strength",
    # Schemes
    "Blake3Signer",
    "Ed25519Signer",
    "Ed25519Verifier",
    "ChaCha20Poly1305Cipher",
    # Errors
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
