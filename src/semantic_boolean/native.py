"""Truthiness in the style of control expressions: only ``None`` and ``False`` are false."""

from __future__ import annotations

from typing import Any

__all__ = ["to_native_bool", "to_bool", "is_boolean", "is_true", "is_false"]


def to_native_bool(value: Any) -> bool:
    """Return ``False`` for ``None`` and ``False``, ``True`` for everything else.

    Unlike :func:`bool`, empty strings, zero and empty collections are ``True``.
    """

    return value is not None and value is not False


to_bool = to_native_bool


def is_boolean(value: Any) -> bool:
    return value is True or value is False


def is_true(value: Any) -> bool:
    return value is True


def is_false(value: Any) -> bool:
    return value is False
