"""Render coercion results into fixed output vocabularies."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, Final, Generic, Mapping, TypeVar, Union

from .blank import is_blank, is_present
from .env import to_env_bool
from .errors import UnsupportedSelectorError
from .native import is_boolean, is_false, is_true, to_bool, to_native_bool
from .tri_state import to_tri_state_bool

__all__ = [
    "DEFAULT_SELECTOR",
    "ONE_OR_ZERO",
    "ON_OR_OFF",
    "SELECTORS",
    "TRUE_OR_FALSE",
    "YES_OR_NO",
    "Y_OR_N",
    "Selector",
    "Vocabulary",
    "format_bool",
    "resolve_selector",
    "to_one_or_zero",
    "to_on_or_off",
    "to_true_or_false",
    "to_y_or_n",
    "to_yes_or_no",
]

T = TypeVar("T")

Coercion = Callable[[Any], Any]
Selector = Union[str, Coercion]

DEFAULT_SELECTOR: Final = "to_native_bool"

_COERCIONS: tuple[Coercion, ...] = (
    to_native_bool,
    to_env_bool,
    to_tri_state_bool,
    is_blank,
    is_present,
    is_boolean,
    is_true,
    is_false,
)


def _selector_names() -> Dict[str, Coercion]:
    names: Dict[str, Coercion] = {"to_bool": to_bool, "bool": to_bool}
    for func in _COERCIONS:
        name = func.__name__
        names[name] = func
        for prefix in ("to_", "is_"):
            if name.startswith(prefix):
                names[name[len(prefix):]] = func
    return names


SELECTORS: Final[Mapping[str, Coercion]] = MappingProxyType(_selector_names())


def resolve_selector(selector: Selector) -> Coercion:
    """Return the coercion function named by *selector*.

    *selector* is either one of the library's coercion functions or a key of
    :data:`SELECTORS` such as ``"to_env_bool"`` or ``"env_bool"``.

    Raises:
        UnsupportedSelectorError: If *selector* names anything else.
    """

    if isinstance(selector, str):
        func = SELECTORS.get(selector)
        if func is not None:
            return func
    elif any(selector is func for func in SELECTORS.values()):
        return selector
    raise UnsupportedSelectorError(selector, tuple(sorted(SELECTORS)))


@dataclass(frozen=True, slots=True)
class Vocabulary(Generic[T]):
    """A pair of outputs standing for true and false."""

    truthy: T
    falsy: T

    def render(self, flag: Any) -> T:
        return self.truthy if flag else self.falsy


ONE_OR_ZERO: Final = Vocabulary(1, 0)
Y_OR_N: Final = Vocabulary("y", "n")
YES_OR_NO: Final = Vocabulary("yes", "no")
ON_OR_OFF: Final = Vocabulary("on", "off")
TRUE_OR_FALSE: Final = Vocabulary(True, False)


def format_bool(
    value: Any,
    vocabulary: Vocabulary[T],
    *,
    selector: Selector = DEFAULT_SELECTOR,
    default: Any = False,
) -> Any:
    """Coerce *value* with *selector* and render the outcome with *vocabulary*.

    ``None`` short-circuits to *default*, which is returned as given without
    consulting the selector. A tri-state ``None`` outcome renders as the false side.
    """

    if value is None:
        return default
    coerce = resolve_selector(selector)
    return vocabulary.render(coerce(value))


def to_one_or_zero(value: Any, *, selector: Selector = DEFAULT_SELECTOR, default: Any = False) -> Any:
    """Convert *value* to ``1`` or ``0``.

    >>> to_one_or_zero("")
    1
    >>> to_one_or_zero("", selector="is_present")
    0
    >>> to_one_or_zero(None, default=127)
    127
    """

    return format_bool(value, ONE_OR_ZERO, selector=selector, default=default)


def to_y_or_n(value: Any, *, selector: Selector = DEFAULT_SELECTOR, default: Any = False) -> Any:
    """Convert *value* to ``"y"`` or ``"n"``.

    >>> to_y_or_n("n")
    'y'
    >>> to_y_or_n("n", selector="to_env_bool")
    'n'
    """

    return format_bool(value, Y_OR_N, selector=selector, default=default)


def to_yes_or_no(value: Any, *, selector: Selector = DEFAULT_SELECTOR, default: Any = False) -> Any:
    """Convert *value* to ``"yes"`` or ``"no"``."""

    return format_bool(value, YES_OR_NO, selector=selector, default=default)


def to_on_or_off(value: Any, *, selector: Selector = DEFAULT_SELECTOR, default: Any = False) -> Any:
    """Convert *value* to ``"on"`` or ``"off"``."""

    return format_bool(value, ON_OR_OFF, selector=selector, default=default)


def to_true_or_false(value: Any, *, selector: Selector = DEFAULT_SELECTOR, default: Any = False) -> Any:
    return format_bool(value, TRUE_OR_FALSE, selector=selector, default=default)
