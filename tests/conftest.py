from __future__ import annotations

from typing import Dict

import pytest

import semantic_boolean.blank as blank_module


@pytest.fixture
def fresh_matcher_cache(monkeypatch: pytest.MonkeyPatch) -> Dict[str, object]:
    """Swap in an empty per-encoding matcher cache for the duration of a test."""

    cache: Dict[str, object] = {}
    monkeypatch.setattr(blank_module, "_ENCODED_BLANKS", cache)
    return cache
