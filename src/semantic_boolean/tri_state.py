"""Tri-state coercion: ``True``, ``False`` or ``None`` for "don't know"."""

from __future__ import annotations

from enum import Enum
from typing import Any, Final, Optional

__all__ = ["TRI_STATE_FALSE_TOKENS", "to_tri_state_bool"]

TRI_STATE_FALSE_TOKENS: Final = frozenset({"0", "f", "F", "false", "FALSE", "off", "OFF"})


def _is_false_token(value: Any) -> bool:
    # Membership is type-aware: 0.0 and Decimal(0) compare equal to 0 but are not tokens.
    if value is False:
        return True
    if isinstance(value, Enum):
        return value.name in TRI_STATE_FALSE_TOKENS
    if isinstance(value, str):
        return value in TRI_STATE_FALSE_TOKENS
    if isinstance(value, int) and not isinstance(value, bool):
        return value == 0
    return False


def to_tri_state_bool(value: Any) -> Optional[bool]:
    """Cast *value* the way form-backed boolean attributes are cast.

    The empty string yields ``None``. Values from the falsy deny-list
    (``False``, ``0``, ``"0"``, ``"f"``, ``"F"``, ``"false"``, ``"FALSE"``,
    ``"off"``, ``"OFF"`` and enum labels with those names) yield ``False``.
    Everything else, ``None`` and ``"Off"`` included, yields ``True``.
    """

    if isinstance(value, str) and value == "" and not isinstance(value, Enum):
        return None
    return not _is_false_token(value)
