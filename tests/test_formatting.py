from __future__ import annotations

import pytest

from semantic_boolean import (
    SELECTORS,
    UnsupportedSelectorError,
    Vocabulary,
    is_blank,
    resolve_selector,
    to_env_bool,
    to_native_bool,
    to_on_or_off,
    to_one_or_zero,
    to_true_or_false,
    to_tri_state_bool,
    to_y_or_n,
    to_yes_or_no,
)

FORMATTERS = [
    (to_one_or_zero, 1, 0),
    (to_y_or_n, "y", "n"),
    (to_yes_or_no, "yes", "no"),
    (to_on_or_off, "on", "off"),
    (to_true_or_false, True, False),
]

SELECTOR_NAMES = ["native_bool", "to_native_bool", "to_bool", "env_bool", "to_env_bool", "tri_state_bool"]


@pytest.mark.parametrize(("formatter", "truthy", "falsy"), FORMATTERS)
def test_default_selector_is_native_truthiness(formatter, truthy, falsy) -> None:
    assert formatter(True) == truthy
    assert formatter(False) == falsy
    assert formatter("") == truthy
    assert formatter(0) == truthy


@pytest.mark.parametrize(("formatter", "truthy", "falsy"), FORMATTERS)
@pytest.mark.parametrize("selector", SELECTOR_NAMES)
def test_named_selectors_agree_on_sentinels(formatter, truthy, falsy, selector: str) -> None:
    assert formatter(True, selector=selector) == truthy
    assert formatter(False, selector=selector) == falsy


@pytest.mark.parametrize(("formatter", "truthy", "falsy"), FORMATTERS)
def test_none_returns_default_unmodified(formatter, truthy, falsy) -> None:
    marker = object()
    assert formatter(None) is False
    assert formatter(None, default=marker) is marker


@pytest.mark.parametrize(("formatter", "truthy", "falsy"), FORMATTERS)
@pytest.mark.parametrize("selector", ["not_supported", "", "blank?", len, lambda value: True])
def test_unsupported_selector_raises(formatter, truthy, falsy, selector) -> None:
    with pytest.raises(UnsupportedSelectorError):
        formatter(True, selector=selector)
    with pytest.raises(UnsupportedSelectorError):
        formatter(False, selector=selector)


def test_default_bypasses_selector_lookup() -> None:
    assert to_one_or_zero(None, selector="not_supported", default=7) == 7


def test_selected_function_changes_outcome() -> None:
    assert to_one_or_zero(False) == 0
    assert to_one_or_zero(False, selector=is_blank) == 1
    assert to_one_or_zero("", selector="is_present") == 0
    assert to_y_or_n("n") == "y"
    assert to_y_or_n("n", selector="to_env_bool") == "n"
    assert to_yes_or_no([]) == "yes"
    assert to_yes_or_no([], selector="present") == "no"
    assert to_on_or_off(False, selector="blank") == "on"


def test_unknown_tri_state_renders_false_side() -> None:
    assert to_y_or_n("", selector=to_tri_state_bool) == "n"
    assert to_true_or_false("Off", selector="tri_state_bool") is True
    assert to_true_or_false("off", selector="tri_state_bool") is False


def test_to_true_or_false_returns_real_booleans() -> None:
    assert to_true_or_false("yes", selector="env_bool") is True
    assert to_true_or_false([], selector="blank") is True
    assert to_true_or_false(0, selector="tri_state_bool") is False


def test_resolve_selector_accepts_functions_and_names() -> None:
    assert resolve_selector(to_env_bool) is to_env_bool
    assert resolve_selector("env_bool") is to_env_bool
    assert resolve_selector("to_bool") is to_native_bool
    assert resolve_selector("is_blank") is is_blank
    assert resolve_selector("boolean") is SELECTORS["is_boolean"]


def test_selectors_mapping_is_read_only() -> None:
    with pytest.raises(TypeError):
        SELECTORS["custom"] = bool  # type: ignore[index]


def test_unsupported_selector_message_lists_choices() -> None:
    with pytest.raises(UnsupportedSelectorError) as excinfo:
        resolve_selector("nope")
    message = str(excinfo.value)
    assert "nope" in message
    assert "to_env_bool" in message
    assert excinfo.value.selector == "nope"


def test_vocabulary_render() -> None:
    vocabulary = Vocabulary("enabled", "disabled")
    assert vocabulary.render(1) == "enabled"
    assert vocabulary.render(None) == "disabled"
