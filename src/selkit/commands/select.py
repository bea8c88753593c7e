"""Command: build a CSS selector from ordered parts."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from selkit.commands._base import SelkitCommand

if TYPE_CHECKING:
    from selkit.commands._context import AppContext


@click.command(
    cls=SelkitCommand,
    examples="""\
  selkit select id=main class=container class=editable
  selkit select element=a 'attr=href$=".png"' pseudo-class=focus
  selkit select element=div id=main + element=table id=data
  selkit select element=ul descendant element=li pseudo-element=marker
  selkit --json select element=p '>' element=em""",
)
@click.argument("tokens", nargs=-1, required=True)
@click.pass_obj
def select(app: AppContext, tokens: tuple[str, ...]) -> None:
    """Build a selector from TOKENS (kind=value parts and combinators).

    Kinds: element, id, class, attr, pseudo-class, pseudo-element.
    Combinators: +, ~, >, descendant.
    """
    from selkit.services.selector import SelectorService

    app.emit(SelectorService().build(list(tokens)))
