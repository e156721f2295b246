"""CLI command: cssbuilder build -- assemble a selector from fragment tokens."""

from __future__ import annotations

import logging
import sys
from dataclasses import replace

import click

from cssbuilder.builder import SelectorFactory
from cssbuilder.config import BuilderConfig, load_config
from cssbuilder.errors import SelectorError
from cssbuilder.model.selector import SelectorBuilder
from cssbuilder.serialization import to_json

# Token kind -> SelectorBuilder method name.
_FRAGMENT_METHODS = {
    "element": "element",
    "type": "element",
    "id": "id",
    "class": "class_",
    "attr": "attr",
    "pseudo-class": "pseudo_class",
    "pseudo-element": "pseudo_element",
}

_COMBINATOR_WORDS = {"descendant": " "}


def _split_tokens(tokens: tuple[str, ...]) -> tuple[list[list[tuple[str, str]]], list[str]]:
    """Split tokens into compound selectors and the combinators between them."""
    compounds: list[list[tuple[str, str]]] = [[]]
    combinators: list[str] = []
    for token in tokens:
        if "=" in token:
            kind, _, value = token.partition("=")
            if kind not in _FRAGMENT_METHODS:
                raise click.UsageError(
                    f"Unknown fragment kind {kind!r} in {token!r}; expected one of "
                    + ", ".join(sorted(_FRAGMENT_METHODS))
                )
            compounds[-1].append((kind, value))
            continue
        if not compounds[-1]:
            raise click.UsageError(
                f"Combinator {token!r} must sit between two selectors"
            )
        combinators.append(_COMBINATOR_WORDS.get(token, token))
        compounds.append([])
    if not compounds[-1]:
        raise click.UsageError("Selector cannot end with a combinator")
    return compounds, combinators


def _build_compound(factory: SelectorFactory, fragments: list[tuple[str, str]]) -> SelectorBuilder:
    kind, value = fragments[0]
    selector = getattr(factory, _FRAGMENT_METHODS[kind])(value)
    for kind, value in fragments[1:]:
        selector = getattr(selector, _FRAGMENT_METHODS[kind])(value)
    return selector


@click.command()
@click.argument("tokens", nargs=-1, required=True)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON builder config file",
)
@click.option("--lenient", is_flag=True, help="Pass unknown combinators through verbatim")
@click.option("--json", "as_json", is_flag=True, help="Print a JSON object instead of the bare selector")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def build(
    tokens: tuple[str, ...],
    config_path: str | None,
    lenient: bool,
    as_json: bool,
    verbose: bool,
) -> None:
    """Build a CSS selector from TOKENS.

    Fragment tokens take the form KIND=VALUE with KIND one of element, id,
    class, attr, pseudo-class or pseudo-element.  A combinator token
    ('+', '~', '>', ' ' or 'descendant') joins the selectors either side.

    \b
    Example:
        cssbuilder build element=div id=main + element=table class=data
    """
    try:
        config = load_config(config_path) if config_path else BuilderConfig()
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if lenient:
        config = replace(config, strict_combinators=False)
    logging.basicConfig(level=logging.DEBUG if verbose else config.logging_level)

    compounds, combinators = _split_tokens(tokens)
    factory = SelectorFactory(config=config)

    try:
        selectors = [_build_compound(factory, fragments) for fragments in compounds]
        # Fold right: a + (b ~ (c d))
        result = selectors[-1]
        for left, combinator in zip(reversed(selectors[:-1]), reversed(combinators)):
            result = factory.combine(left, combinator, result)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(to_json({"selector": result.stringify(), "builder": result.to_dict()}))
    else:
        click.echo(result.stringify())
