"""SelectorBuilder: an immutable accumulator of CSS selector fragments."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, replace
from typing import Any

from cssbuilder.errors import (
    CombinedSelectorError,
    DuplicateSelectorError,
    InvalidCombinatorError,
    OrderViolationError,
)
from cssbuilder.model.category import Category, Combinator
from cssbuilder.serialization import to_json

logger = logging.getLogger(__name__)

# Dataclass field holding each category's rendered text.
_FIELDS: dict[Category, str] = {
    Category.TYPE: "type_fragment",
    Category.ID: "id_fragment",
    Category.CLASS: "class_fragments",
    Category.ATTRIBUTE: "attr_fragments",
    Category.PSEUDO_CLASS: "pseudo_class_fragments",
    Category.PSEUDO_ELEMENT: "pseudo_element_fragment",
}

_SNAPSHOT_FIELDS = (*_FIELDS.values(), "combined_fragment")


def resolve_combinator(combinator: Combinator | str, *, strict: bool = True) -> str:
    """Return the literal symbol for *combinator*.

    In strict mode anything outside ``' '``, ``'+'``, ``'~'``, ``'>'`` raises
    InvalidCombinatorError.  Otherwise unknown values pass through verbatim.
    """
    try:
        return Combinator.coerce(combinator).value
    except InvalidCombinatorError:
        if strict:
            raise
        logger.warning("Passing through non-standard combinator %r", combinator)
        return str(combinator)


@dataclass(frozen=True)
class SelectorBuilder:
    """One step of a selector builder chain.

    Every operation returns a new builder and leaves the receiver untouched,
    so a partially built selector can be reused as the base of several
    others::

        base = SelectorBuilder().element("div").id("main")
        base.class_("a").stringify()   # 'div#main.a'
        base.class_("b").stringify()   # 'div#main.b'

    A builder holding ``combined_fragment`` is the result of ``combine`` and
    renders that text alone; it accepts no further fragments.
    """

    type_fragment: str | None = None
    id_fragment: str | None = None
    class_fragments: str | None = None
    attr_fragments: str | None = None
    pseudo_class_fragments: str | None = None
    pseudo_element_fragment: str | None = None
    combined_fragment: str | None = None
    # Combinator validation mode, carried forward by every derived builder.
    strict: bool = field(default=True, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.combined_fragment is not None and self.categories:
            raise CombinedSelectorError(
                "A combined selector cannot also carry plain fragments"
            )

    # --- inspection -----------------------------------------------------------

    def fragment(self, category: Category) -> str | None:
        """Return the rendered text stored for *category*, if any."""
        return getattr(self, _FIELDS[category])

    @property
    def categories(self) -> tuple[Category, ...]:
        """Categories that carry a fragment, in selector order."""
        return tuple(c for c in Category if self.fragment(c) is not None)

    @property
    def is_combined(self) -> bool:
        return self.combined_fragment is not None

    @property
    def is_empty(self) -> bool:
        return not self.is_combined and not self.categories

    # --- fragments ------------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        """Set the type selector, e.g. ``div``."""
        return self._with_fragment(Category.TYPE, value)

    def id(self, value: str) -> SelectorBuilder:
        """Set the id selector, rendered ``#value``."""
        return self._with_fragment(Category.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        """Append a class selector, rendered ``.value``."""
        return self._with_fragment(Category.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        """Append an attribute selector, rendered ``[value]``."""
        return self._with_fragment(Category.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        """Append a pseudo-class, rendered ``:value``."""
        return self._with_fragment(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        """Set the pseudo-element, rendered ``::value``."""
        return self._with_fragment(Category.PSEUDO_ELEMENT, value)

    def _with_fragment(self, category: Category, value: str) -> SelectorBuilder:
        if self.is_combined:
            raise CombinedSelectorError(
                f"Cannot add a {category.name.lower()} fragment to a combined selector"
            )

        current = self.fragment(category)
        if current is not None and not category.repeatable:
            raise DuplicateSelectorError(category)

        for later in Category:
            if category < later and self.fragment(later) is not None:
                raise OrderViolationError(category, later)

        text = category.format(value)
        if current is not None:
            text = current + text
        return replace(self, **{_FIELDS[category]: text})

    # --- combination ----------------------------------------------------------

    def combine(
        self,
        left: SelectorBuilder,
        combinator: Combinator | str,
        right: SelectorBuilder,
        *,
        strict: bool | None = None,
    ) -> SelectorBuilder:
        """Join two selectors with *combinator*.

        The result renders ``"<left> <combinator> <right>"``.  When the
        receiver is already combined the new text is appended directly after
        its own.  *strict* defaults to the receiver's own mode and is kept
        on the result, so chained combines validate the same way.
        """
        if self.categories:
            raise CombinedSelectorError(
                "Cannot combine onto a selector that carries plain fragments"
            )
        if strict is None:
            strict = self.strict
        symbol = resolve_combinator(combinator, strict=strict)
        text = f"{left.stringify()} {symbol} {right.stringify()}"
        logger.debug("Combined selector: %r", text)
        return replace(
            self,
            combined_fragment=(self.combined_fragment or "") + text,
            strict=strict,
        )

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        """Render the selector string."""
        if self.combined_fragment is not None:
            return self.combined_fragment
        return "".join(self.fragment(c) or "" for c in Category)

    render = stringify

    def __str__(self) -> str:
        return self.stringify()

    # --- serialisation --------------------------------------------------------

    def to_dict(self) -> dict[str, str]:
        """Return the fragment fields that are set."""
        return {
            name: getattr(self, name)
            for name in _SNAPSHOT_FIELDS
            if getattr(self, name) is not None
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SelectorBuilder:
        unknown = set(data) - set(_SNAPSHOT_FIELDS)
        if unknown:
            raise ValueError(f"Unknown selector fields: {sorted(unknown)}")
        return cls(**data)

    def to_json(self) -> str:
        return to_json(self.to_dict())

    @classmethod
    def from_json(cls, text: str) -> SelectorBuilder:
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
        return cls.from_dict(data)

    # CSS calls the element selector a "type selector".
    type = element
