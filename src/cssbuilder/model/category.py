"""Fragment categories and combinators."""

from __future__ import annotations

from enum import Enum

from cssbuilder.errors import InvalidCombinatorError


class Category(Enum):
    """The six kinds of simple selector, in the order CSS requires them.

    Member values give the position in that order, so categories compare
    by value::

        element#id.class[attr]:pseudo-class::pseudo-element
    """

    TYPE = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def prefix(self) -> str:
        return _PUNCTUATION[self][0]

    @property
    def suffix(self) -> str:
        return _PUNCTUATION[self][1]

    @property
    def repeatable(self) -> bool:
        """True for categories that may occur several times in one selector."""
        return self in (Category.CLASS, Category.ATTRIBUTE, Category.PSEUDO_CLASS)

    def format(self, value: str) -> str:
        """Wrap *value* in this category's punctuation."""
        return f"{self.prefix}{value}{self.suffix}"

    def __lt__(self, other: Category) -> bool:
        if not isinstance(other, Category):
            return NotImplemented
        return self.value < other.value


_PUNCTUATION: dict[Category, tuple[str, str]] = {
    Category.TYPE: ("", ""),
    Category.ID: ("#", ""),
    Category.CLASS: (".", ""),
    Category.ATTRIBUTE: ("[", "]"),
    Category.PSEUDO_CLASS: (":", ""),
    Category.PSEUDO_ELEMENT: ("::", ""),
}


class Combinator(str, Enum):
    """Joiners between two complete selectors."""

    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    CHILD = ">"

    @classmethod
    def coerce(cls, value: Combinator | str) -> Combinator:
        """Return the member for *value*, or raise InvalidCombinatorError."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidCombinatorError(value) from None

    def __str__(self) -> str:
        return self.value
