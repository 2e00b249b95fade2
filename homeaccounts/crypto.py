"""Hashing, authenticated encryption and compression of section data."""

import hashlib
import secrets
import zlib

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

KEY_LEN = 16
IV_LEN = 32


class DecryptionError(ValueError):
    """Raised when data fails authentication on decryption."""


def _to_bytes(data):
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def digest(data):
    """Return the SHA-256 digest of ``data``."""
    return hashlib.sha256(_to_bytes(data)).digest()


def encrypt(data, key, iv):
    """Encrypt with AES-GCM; the result is the ciphertext followed by the tag."""
    return AESGCM(bytes(key)).encrypt(bytes(iv), _to_bytes(data), None)


def decrypt(data, key, iv):
    """Decrypt what :func:`encrypt` produced; raise DecryptionError on failure."""
    try:
        return AESGCM(bytes(key)).decrypt(bytes(iv), bytes(data), None)
    except InvalidTag as exc:
        raise DecryptionError("data failed authentication") from exc


def compress(data):
    """Compress ``data`` in zlib format."""
    return zlib.compress(_to_bytes(data))


def decompress(data):
    """Decompress zlib data."""
    return zlib.decompress(bytes(data))


def get_key(password):
    """Derive an encryption key from a password."""
    return digest(password)[:KEY_LEN]


def new_key():
    """Return a fresh random encryption key."""
    return get_key(secrets.token_bytes(KEY_LEN))


def make_iv(text):
    """Build an IV from ``text``: truncated, or padded with zero bytes."""
    return _to_bytes(text)[:IV_LEN].ljust(IV_LEN, b"\0")