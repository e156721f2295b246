"""Stateless facade for starting selector builder chains.

The facade owns no selector state.  Each method starts from an empty
SelectorBuilder, so the same facade can begin any number of independent
chains::

    builder = css_selector_builder

    builder.id("main").class_("container").class_("editable").stringify()
        -> '#main.container.editable'

    builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
        -> 'a[href$=".png"]:focus'

    builder.combine(
        builder.element("div").id("main"),
        "+",
        builder.element("table").id("data"),
    ).stringify()
        -> 'div#main + table#data'
"""

from __future__ import annotations

from dataclasses import dataclass, field

from cssbuilder.config import BuilderConfig
from cssbuilder.model.category import Combinator
from cssbuilder.model.selector import SelectorBuilder

__all__ = [
    "SelectorFactory",
    "css_selector_builder",
    "element",
    "type",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
]

_EMPTY = SelectorBuilder()


@dataclass(frozen=True)
class SelectorFactory:
    """Entry point exposing the first call of every builder chain."""

    config: BuilderConfig = field(default_factory=BuilderConfig)

    def element(self, value: str) -> SelectorBuilder:
        return _EMPTY.element(value)

    def id(self, value: str) -> SelectorBuilder:
        return _EMPTY.id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return _EMPTY.class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return _EMPTY.attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return _EMPTY.pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return _EMPTY.pseudo_element(value)

    def combine(
        self,
        left: SelectorBuilder,
        combinator: Combinator | str,
        right: SelectorBuilder,
    ) -> SelectorBuilder:
        """Join *left* and *right* with *combinator* into a new selector."""
        return _EMPTY.combine(
            left, combinator, right, strict=self.config.strict_combinators
        )

    type = element


css_selector_builder = SelectorFactory()

element = css_selector_builder.element
type = css_selector_builder.type  # noqa: A001
id = css_selector_builder.id  # noqa: A001
class_ = css_selector_builder.class_
attr = css_selector_builder.attr
pseudo_class = css_selector_builder.pseudo_class
pseudo_element = css_selector_builder.pseudo_element
combine = css_selector_builder.combine
