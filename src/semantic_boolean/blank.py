"""Emptiness-based coercion: ``is_blank`` and ``is_present``.

Values may override the built-in rules by exposing a ``__blank__`` method
(see :class:`SupportsBlank`). Otherwise the value is classified by category:
``None`` and ``False`` are blank, collections and enum labels are blank when
empty, text is blank when it holds nothing but whitespace, and numbers and
temporal values are never blank.

Byte strings carry no encoding of their own, so the encoding is passed in by
the caller. The whitespace matcher for each distinct encoding is built on
first use and cached.
"""

from __future__ import annotations

import codecs
import datetime as _dt
import logging
import numbers
import re
from collections.abc import Mapping, Sequence, Set
from enum import Enum
from typing import Any, Dict, Final, List, Protocol, runtime_checkable

from .env import DEFAULT_ENCODING
from .errors import CapabilityMissingError

__all__ = [
    "BLANK_HOOK",
    "WHITESPACE",
    "SupportsBlank",
    "blank_matcher",
    "is_blank",
    "is_present",
]

logger = logging.getLogger(__name__)

BLANK_HOOK: Final = "__blank__"

# Unicode White_Space. str.isspace() also accepts U+001C..U+001F, which are separators, not spaces.
WHITESPACE: Final = (
    "\t\n\x0b\x0c\r "
    "\x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

_BLANK_TEXT_RE: Final = re.compile("[" + re.escape(WHITESPACE) + "]*")

_TEMPORAL = (_dt.date, _dt.time, _dt.timedelta)
_BYTES_LIKE = (bytes, bytearray, memoryview)

_ENCODED_BLANKS: Dict[str, re.Pattern[bytes]] = {}

# Codecs that take their byte order from a leading BOM.
_BOM_CODECS: Final = {
    "utf-16": ((codecs.BOM_UTF16_LE, "utf-16-le"), (codecs.BOM_UTF16_BE, "utf-16-be")),
    "utf-32": ((codecs.BOM_UTF32_LE, "utf-32-le"), (codecs.BOM_UTF32_BE, "utf-32-be")),
}


@runtime_checkable
class SupportsBlank(Protocol):
    """Objects that know whether they are blank."""

    def __blank__(self) -> bool: ...


def _encode_units(encoding: str) -> tuple[bytes, List[bytes]]:
    """Return the byte-order mark and the encoded form of every whitespace character.

    Characters the codec cannot encode, or can only encode with shift state,
    are left out.
    """

    bom = b""
    units: List[bytes] = []
    for char in WHITESPACE:
        try:
            single = char.encode(encoding)
            double = (char * 2).encode(encoding)
        except UnicodeEncodeError:
            continue
        width = len(double) - len(single)
        if width <= 0:
            continue
        unit = single[-width:]
        prefix = single[:-width]
        if double != prefix + unit * 2:
            continue
        if prefix and not bom:
            bom = prefix
        elif prefix != bom:
            continue
        units.append(unit)
    return bom, units


def _build_matcher(encoding: str) -> re.Pattern[bytes]:
    bom, units = _encode_units(encoding)
    # Longest first, so multi-byte sequences win over their leading byte.
    units.sort(key=len, reverse=True)
    body = b"|".join(re.escape(unit) for unit in units)
    pattern = b"(?:" + body + b")*" if body else b""
    if bom:
        pattern = b"(?:" + re.escape(bom) + b")?" + pattern
    logger.debug("Built blank matcher for %s (%d whitespace units)", encoding, len(units))
    return re.compile(pattern)


def blank_matcher(encoding: str = DEFAULT_ENCODING) -> re.Pattern[bytes]:
    """Return the cached whitespace matcher for *encoding*.

    Encoding aliases share one entry. Racing callers may each build the
    pattern; the first insert wins and every build is equivalent.

    Raises:
        LookupError: If *encoding* is not a known codec.
    """

    key = codecs.lookup(encoding).name
    matcher = _ENCODED_BLANKS.get(key)
    if matcher is None:
        matcher = _ENCODED_BLANKS.setdefault(key, _build_matcher(key))
    return matcher


def _blank_hook(value: Any) -> Any:
    # type(), not isinstance(): the latter consults the value's own __class__.
    if issubclass(type(value), type):
        return None
    try:
        hook = getattr(value, BLANK_HOOK, None)
    except Exception as exc:
        raise CapabilityMissingError(type(value).__name__) from exc
    return hook if callable(hook) else None


def _text_is_blank(value: str) -> bool:
    return _BLANK_TEXT_RE.fullmatch(value) is not None


def _bytes_are_blank(value: Any, encoding: str) -> bool:
    data = bytes(value)
    if not data:
        return True
    for bom, codec in _BOM_CODECS.get(codecs.lookup(encoding).name, ()):
        if data.startswith(bom):
            encoding, data = codec, data[len(bom):]
            break
    return blank_matcher(encoding).fullmatch(data) is not None


def is_blank(value: Any, *, encoding: str = DEFAULT_ENCODING) -> bool:
    """Return ``True`` when *value* is empty in the sense of ``blank?``.

    Args:
        value: Anything. A ``__blank__`` hook takes precedence and its result
            is returned unmodified.
        encoding: Codec used to recognise whitespace in ``bytes``-like values.

    Raises:
        CapabilityMissingError: If the value fails while being probed for its hook.
    """

    hook = _blank_hook(value)
    if hook is not None:
        return hook()

    if value is None or value is False:
        return True
    if value is True:
        return False
    if isinstance(value, Enum):
        return value.name == ""
    if isinstance(value, str):
        return _text_is_blank(value)
    if isinstance(value, _BYTES_LIKE):
        return _bytes_are_blank(value, encoding)
    if isinstance(value, (Sequence, Mapping, Set)):
        return len(value) == 0
    if isinstance(value, numbers.Number) or isinstance(value, _TEMPORAL):
        return False

    length = getattr(type(value), "__len__", None)
    if length is None:
        return False
    return length(value) == 0


def is_present(value: Any, *, encoding: str = DEFAULT_ENCODING) -> bool:
    """Inverse of :func:`is_blank`."""

    return not is_blank(value, encoding=encoding)
