"""ShapeService — rectangle construction and JSON round-tripping."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any

from selkit.domain.codec import CodecError, JsonShape, decode, encode
from selkit.domain.shapes import Circle, Rectangle, make_rectangle
from selkit.services.result import ServiceResult

logger = logging.getLogger(__name__)

SHAPES: dict[str, JsonShape] = {
    "rectangle": JsonShape.of(Rectangle),
    "circle": JsonShape.of(Circle),
}


class ShapeService:
    """Shape operations for the CLI.

    Args:
        indent: Pretty-print width for encoded JSON; None keeps the
            canonical compact form.
    """

    def __init__(self, *, indent: int | None = None) -> None:
        self._indent = indent

    def rectangle(self, width: float, height: float) -> ServiceResult:
        rect = make_rectangle(width, height)
        return ServiceResult(
            ok=True,
            op="rectangle",
            data={"width": rect.width, "height": rect.height, "area": rect.get_area()},
        )

    def encode(self, value: Any) -> ServiceResult:
        op = "encode"
        try:
            text = encode(value, indent=self._indent)
        except CodecError as exc:
            return ServiceResult.failure(op, "ENCODE_FAILED", str(exc))
        return ServiceResult(ok=True, op=op, data={"json": text})

    def encode_text(self, text: str) -> ServiceResult:
        """Parse *text* and re-encode it in canonical form."""
        try:
            value = json.loads(text)
        except (json.JSONDecodeError, RecursionError) as exc:
            return ServiceResult.failure("encode", "ENCODE_FAILED", f"Invalid JSON: {exc}")
        return self.encode(value)

    def decode(self, shape_name: str, text: str) -> ServiceResult:
        """Decode *text* into the registered shape *shape_name*.

        Field values are assigned positionally in the order they appear in
        *text*; a differently ordered object yields swapped fields.
        """
        op = "decode"
        shape = SHAPES.get(shape_name)
        if shape is None:
            return ServiceResult.failure(
                op,
                "UNKNOWN_SHAPE",
                f"Unknown shape: {shape_name!r}",
                available=sorted(SHAPES),
            )

        try:
            instance = decode(shape, text)
        except (CodecError, TypeError) as exc:
            # TypeError: value count does not match the factory signature
            return ServiceResult.failure(op, "DECODE_FAILED", str(exc), shape=shape_name)

        fields = dataclasses.asdict(instance)
        non_numeric = sorted(name for name, value in fields.items() if not _is_number(value))
        if non_numeric:
            return ServiceResult.failure(
                op,
                "DECODE_FAILED",
                f"Non-numeric {shape_name} field(s): {', '.join(non_numeric)}",
                shape=shape_name,
                fields=non_numeric,
            )

        warnings: list[str] = []
        if list(json.loads(text)) != list(shape.fields):
            warnings.append(
                f"Field order differs from {shape_name} ({', '.join(shape.fields)}); "
                "values were assigned positionally"
            )
        logger.debug("Decoded %s from %d bytes", shape_name, len(text))
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "shape": shape_name,
                "fields": fields,
                "area": instance.get_area(),
            },
            warnings=warnings,
        )


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
