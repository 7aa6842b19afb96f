"""
Gender is stored as a boolean column and sent over the wire as "0" / "1".
"""

from __future__ import annotations

from core.errors import ValidationError

_FROM_WIRE = {"0": False, "1": True}


def gender_to_bool(value: str) -> bool:
    try:
        return _FROM_WIRE[value]
    except (KeyError, TypeError):
        raise ValidationError('gender must be "0" or "1".') from None


def gender_to_str(value: bool) -> str:
    return "1" if value else "0"
