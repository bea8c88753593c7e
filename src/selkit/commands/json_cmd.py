"""Command group: canonical JSON encoding and shape decoding."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from selkit.commands._base import SelkitGroup

if TYPE_CHECKING:
    from selkit.commands._context import AppContext
    from selkit.services.shapes import ShapeService


def _service(app: AppContext) -> ShapeService:
    from selkit.services.shapes import ShapeService

    return ShapeService(indent=app.settings.codec.indent)


@click.group(
    "json",
    cls=SelkitGroup,
    examples="""\
  selkit json encode '{"width": 10, "height": 20}'
  selkit json decode circle '{"radius": 10}'
  selkit json decode rectangle '{"width": 10, "height": 20}'""",
)
def json_group() -> None:
    """Encode JSON canonically or decode it into a shape."""


@json_group.command(
    examples="""\
  selkit json encode '[1, 2, 3]'
  selkit -q json encode '{"a": 1,  "b": [true, null]}'""",
)
@click.argument("text")
@click.pass_obj
def encode(app: AppContext, text: str) -> None:
    """Re-serialize TEXT in canonical form."""
    app.emit(_service(app).encode_text(text))


@json_group.command(
    examples="""\
  selkit json decode circle '{"radius": 10}'
  selkit --json json decode rectangle '{"width": 3, "height": 4}'""",
)
@click.argument("shape")
@click.argument("text")
@click.pass_obj
def decode(app: AppContext, shape: str, text: str) -> None:
    """Decode TEXT into SHAPE (rectangle or circle).

    Values are passed positionally in the order their keys appear in TEXT.
    """
    app.emit(_service(app).decode(shape, text))
