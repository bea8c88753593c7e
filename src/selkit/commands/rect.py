"""Command: rectangle area."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from selkit.commands._base import SelkitCommand

if TYPE_CHECKING:
    from selkit.commands._context import AppContext


@click.command(
    cls=SelkitCommand,
    examples="""\
  selkit rect 10 20
  selkit -q rect 2.5 4""",
)
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.pass_obj
def rect(app: AppContext, width: float, height: float) -> None:
    """Build a WIDTH x HEIGHT rectangle and report its area."""
    from selkit.services.shapes import ShapeService

    app.emit(ShapeService().rectangle(width, height))
