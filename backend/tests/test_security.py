"""
Tests unitaires pour le hachage des mots de passe.
"""

import asyncio

from app.security import BCRYPT_MAX_BYTES, hash_password, password_bytes, verify_password


def test_password_bytes_tronque_a_72_octets():
    assert password_bytes("x" * 80) == b"x" * BCRYPT_MAX_BYTES
    assert len(password_bytes("é" * 50)) == BCRYPT_MAX_BYTES


def test_password_bytes_surrogate_isole():
    """Un surrogate isolé est encodé sans UnicodeEncodeError."""
    assert password_bytes("abc\ud800def") == b"abc\xed\xa0\x80def"


def test_hash_puis_verification_mot_de_passe_long():
    hashed = asyncio.run(hash_password("y" * 100))

    assert asyncio.run(verify_password("y" * 100, hashed))
    assert not asyncio.run(verify_password("y" * 71, hashed))


def test_hash_puis_verification_surrogate_isole():
    hashed = asyncio.run(hash_password("abc\ud800def"))

    assert asyncio.run(verify_password("abc\ud800def", hashed))
    assert not asyncio.run(verify_password("abcdef", hashed))
