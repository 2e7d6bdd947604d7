"""Random keys and password hashing."""

from __future__ import annotations

import hashlib
import secrets

import bcrypt

SYMBOLS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789!@#$%^&*()-_=+,.?/:;{}[]`~"
LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"


def _random_string(length: int, charset: str) -> str:
    size = len(charset)
    if size < 2 or size > 256:
        raise ValueError("wrong charset length")
    # Bytes above this bound are dropped so that every character is equally likely.
    max_byte = 255 - (256 % size)
    chars: list[str] = []
    while len(chars) < length:
        for byte in secrets.token_bytes(length + length // 4):
            if byte > max_byte:
                continue
            chars.append(charset[byte % size])
            if len(chars) == length:
                break
    return "".join(chars)


def generate_random_key20() -> str:
    """Return 20 random characters from letters, digits and symbols."""
    return _random_string(20, SYMBOLS)


def generate_random_key16() -> str:
    """Return 16 random characters from letters, digits and symbols."""
    return _random_string(16, SYMBOLS)


def generate_random_key6() -> str:
    """Return 6 random upper-case letters and digits."""
    return _random_string(6, LETTERS)


def set_password(password: str, salt: str) -> str:
    """Derive a hex scrypt hash from a plain password and a salt."""
    digest = hashlib.scrypt(
        password.encode(),
        salt=salt.encode(),
        n=16384,
        r=8,
        p=1,
        dklen=32,
        maxmem=64 * 1024 * 1024,
    )
    return digest.hex()


def compare_hash_and_password(hashed: str, password: str) -> bool:
    """Check a plain password against a bcrypt hash."""
    return bcrypt.checkpw(password.encode(), hashed.encode())