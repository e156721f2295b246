"""cssbuilder -- fluent, immutable builder for CSS selector strings."""

__version__ = "0.1.0"

from cssbuilder.builder import (  # noqa: E402
    SelectorFactory,
    attr,
    class_,
    combine,
    css_selector_builder,
    element,
    id,
    type,
    pseudo_class,
    pseudo_element,
)
from cssbuilder.config import BuilderConfig, load_config  # noqa: E402
from cssbuilder.errors import (  # noqa: E402
    CombinedSelectorError,
    ConfigError,
    DuplicateSelectorError,
    InvalidCombinatorError,
    OrderViolationError,
    SelectorError,
)
from cssbuilder.model import Category, Combinator, SelectorBuilder  # noqa: E402
from cssbuilder.serialization import from_json, to_json  # noqa: E402

__all__ = [
    "__version__",
    # builder
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
    # model
    "Category",
    "Combinator",
    "SelectorBuilder",
    # config
    "BuilderConfig",
    "load_config",
    # errors
    "SelectorError",
    "DuplicateSelectorError",
    "OrderViolationError",
    "InvalidCombinatorError",
    "CombinedSelectorError",
    "ConfigError",
    # serialization
    "to_json",
    "from_json",
]
