"""cssbuilder model layer -- public type re-exports."""

from cssbuilder.model.category import Category, Combinator
from cssbuilder.model.selector import SelectorBuilder, resolve_combinator

__all__ = [
    # category
    "Category",
    "Combinator",
    # selector
    "SelectorBuilder",
    "resolve_combinator",
]
