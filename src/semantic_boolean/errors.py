"""Exception hierarchy for semantic boolean coercion."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["SemanticBooleanError", "UnsupportedSelectorError", "CapabilityMissingError"]


class SemanticBooleanError(RuntimeError):
    """Base class for all coercion failures."""


@dataclass(slots=True, eq=False)
class UnsupportedSelectorError(SemanticBooleanError):
    """Raised when a formatter is asked to delegate to an unknown coercion."""

    selector: object
    supported: tuple[str, ...] = ()

    def __str__(self) -> str:
        name = getattr(self.selector, "__name__", None) or repr(self.selector)
        if not self.supported:
            return f"unsupported selector: {name}"
        return f"unsupported selector: {name} (expected one of: {', '.join(self.supported)})"


class CapabilityMissingError(SemanticBooleanError):
    """Raised when a value cannot even be probed for its blankness hook."""

    def __init__(self, type_name: str) -> None:
        super().__init__(f"{type_name} cannot report whether it is blank")
        self.type_name = type_name
