"""
Password hashing helpers.
"""

from __future__ import annotations

import os

import bcrypt

from core.errors import ValidationError

DEFAULT_BCRYPT_ROUNDS = 12


def bcrypt_rounds() -> int:
    raw = os.environ.get("BCRYPT_ROUNDS", "").strip()
    if not raw:
        return DEFAULT_BCRYPT_ROUNDS
    try:
        rounds = int(raw)
    except ValueError:
        return DEFAULT_BCRYPT_ROUNDS
    # bcrypt accepts 4..31.
    return min(max(rounds, 4), 31)


def hash_password(plain_password: str) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise ValidationError("Password is empty.")
    return bcrypt.hashpw(password, bcrypt.gensalt(rounds=bcrypt_rounds())).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = (plain_password or "").encode("utf-8")
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        return False
