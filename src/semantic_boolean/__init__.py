"""Coerce loosely typed values into booleans under several named rules."""

from __future__ import annotations

from .blank import BLANK_HOOK, SupportsBlank, blank_matcher, is_blank, is_present
from .env import ENV_TRUE_TOKENS, to_env_bool
from .errors import CapabilityMissingError, SemanticBooleanError, UnsupportedSelectorError
from .formatting import (
    SELECTORS,
    Vocabulary,
    resolve_selector,
    to_on_or_off,
    to_one_or_zero,
    to_true_or_false,
    to_y_or_n,
    to_yes_or_no,
)
from .native import is_boolean, is_false, is_true, to_bool, to_native_bool
from .tri_state import TRI_STATE_FALSE_TOKENS, to_tri_state_bool

__version__ = "1.1.0"

__all__ = [
    "to_native_bool",
    "to_bool",
    "is_boolean",
    "is_true",
    "is_false",
    "to_env_bool",
    "to_tri_state_bool",
    "is_blank",
    "is_present",
    "to_one_or_zero",
    "to_y_or_n",
    "to_yes_or_no",
    "to_on_or_off",
    "to_true_or_false",
    "resolve_selector",
    "blank_matcher",
    "SELECTORS",
    "ENV_TRUE_TOKENS",
    "TRI_STATE_FALSE_TOKENS",
    "BLANK_HOOK",
    "SupportsBlank",
    "Vocabulary",
    "SemanticBooleanError",
    "UnsupportedSelectorError",
    "CapabilityMissingError",
]
