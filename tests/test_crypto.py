import hashlib
import zlib

import pytest

from homeaccounts.crypto import (
    IV_LEN,
    KEY_LEN,
    DecryptionError,
    compress,
    decompress,
    decrypt,
    digest,
    encrypt,
    get_key,
    make_iv,
    new_key,
)


def test_encrypt_decrypt():
    key = get_key("secret")
    iv = make_iv("abcdefgh12345678ABCDEFGH87654321")
    text = "aBCDefghI"
    output = encrypt(text, key, iv)
    assert output != text.encode()
    assert decrypt(output, key, iv) == text.encode()


def test_encrypt_appends_tag():
    key = get_key("secret")
    iv = make_iv("ABC")
    assert len(encrypt(b"aBCDefghI", key, iv)) == len(b"aBCDefghI") + 16


def test_decrypt_with_wrong_key_fails():
    iv = make_iv("ABC")
    output = encrypt(b"aBCDefghI", get_key("secret"), iv)
    with pytest.raises(DecryptionError):
        decrypt(output, get_key("password"), iv)


def test_decrypt_tampered_data_fails():
    key = get_key("secret")
    iv = make_iv("ABC")
    output = bytearray(encrypt(b"aBCDefghI", key, iv))
    output[0] ^= 1
    with pytest.raises(DecryptionError):
        decrypt(bytes(output), key, iv)


def test_compress_decompress():
    data = b"123abcABCD"
    assert decompress(compress(data)) == data


def test_compress_decompress_string():
    output = compress("123abcABCD")
    assert decompress(output) == b"123abcABCD"
    assert zlib.decompress(output) == b"123abcABCD"


def test_digest_is_sha256():
    assert digest("abc") == hashlib.sha256(b"abc").digest()


def test_get_key_is_deterministic():
    key = get_key("password")
    assert len(key) == KEY_LEN
    assert key == get_key("password")
    assert key == digest("password")[:KEY_LEN]


def test_new_key_is_random():
    first, second = new_key(), new_key()
    assert len(first) == KEY_LEN
    assert first != second


def test_make_iv_pads_short_text():
    iv = make_iv("ABC")
    assert len(iv) == IV_LEN
    assert iv == b"ABC" + b"\0" * (IV_LEN - 3)


def test_make_iv_truncates_long_text():
    text = "x" * (IV_LEN + 5)
    assert make_iv(text) == b"x" * IV_LEN