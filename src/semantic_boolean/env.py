"""Environment-style boolean coercion."""

from __future__ import annotations

from enum import Enum
from typing import Any, Final, Optional

__all__ = ["ENV_TRUE_TOKENS", "DEFAULT_ENCODING", "to_env_bool"]

DEFAULT_ENCODING: Final = "utf-8"

ENV_TRUE_TOKENS: Final = frozenset(
    {"t", "T", "true", "True", "TRUE", "on", "On", "ON", "y", "Y", "yes", "Yes", "YES"}
)

_BYTES_LIKE = (bytes, bytearray, memoryview)


def _textual_form(value: Any, encoding: str) -> Optional[str]:
    """Return the text an environment variable would carry for *value*.

    ``None`` is returned when bytes cannot be decoded with *encoding*.
    """

    if value is None:
        return ""
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, str):
        return value
    if isinstance(value, _BYTES_LIKE):
        try:
            return bytes(value).decode(encoding)
        except UnicodeDecodeError:
            return None
    return str(value)


def _parse_int(text: str) -> Optional[int]:
    # int() also accepts non-ASCII decimal digits such as fullwidth "\uff11".
    if not text.isascii():
        return None
    try:
        return int(text, 0)
    except ValueError:
        pass
    # int(text, 0) rejects a bare leading zero; "007" and "010" read as octal, "09" fails.
    try:
        return int(text, 8)
    except ValueError:
        return None


def to_env_bool(value: Any, *, encoding: str = DEFAULT_ENCODING) -> bool:
    """Return ``True`` when *value* reads as an enabled environment flag.

    Only the exact tokens in :data:`ENV_TRUE_TOKENS` and strictly positive
    integers are truthy. Mixed-case spellings such as ``"TRue"``, fractional
    text such as ``"1.0"`` and undecodable bytes are ``False``.
    """

    text = _textual_form(value, encoding)
    if not text:
        return False
    if text in ENV_TRUE_TOKENS:
        return True
    parsed = _parse_int(text)
    if parsed is None:
        return False
    return parsed > 0
