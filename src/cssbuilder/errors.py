"""Error hierarchy for the selector builder."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssbuilder.model.category import Category


class SelectorError(Exception):
    """Base error for all cssbuilder errors."""


class DuplicateSelectorError(SelectorError):
    """A singular fragment (element, id, pseudo-element) was set twice."""

    def __init__(self, category: Category) -> None:
        super().__init__(
            "Element, id and pseudo-element should not occur more then one "
            "time inside the selector"
        )
        self.category = category


class OrderViolationError(SelectorError):
    """A fragment was added after a fragment of a later category."""

    def __init__(self, category: Category, conflicting: Category) -> None:
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )
        self.category = category
        self.conflicting = conflicting


class InvalidCombinatorError(SelectorError, ValueError):
    """The combinator is not one of ' ', '+', '~', '>'."""

    def __init__(self, combinator: object) -> None:
        super().__init__(
            f"Invalid combinator {combinator!r}: expected one of ' ', '+', '~', '>'"
        )
        self.combinator = combinator


class CombinedSelectorError(SelectorError):
    """A combined selector cannot take plain fragments, and vice versa."""


class ConfigError(SelectorError):
    """Raised when a builder config file cannot be loaded."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path
