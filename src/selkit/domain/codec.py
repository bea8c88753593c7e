"""JSON encode/decode helpers.

``encode`` produces the canonical compact form: no whitespace after
separators, keys in insertion order, non-ASCII text left as-is.

``decode`` rebuilds an instance by passing the parsed values, in the order
the keys appear in the text, positionally to a factory.

FRAGILITY: decoding is only correct when the serialized key order matches
the factory's positional parameter order. A mismatch builds a wrongly
populated instance without raising.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

logger = logging.getLogger(__name__)

_SEPARATORS = (",", ":")


class CodecError(ValueError):
    """Raised when a value cannot be encoded or a text cannot be decoded."""


@dataclass(frozen=True)
class JsonShape:
    """Decode target: ordered field names plus a positional factory."""

    fields: tuple[str, ...]
    factory: Callable[..., Any]

    @classmethod
    def of(cls, target: type) -> JsonShape:
        """Derive a shape from a dataclass, using its field declaration order."""
        if not dataclasses.is_dataclass(target):
            msg = f"{target!r} is not a dataclass"
            raise TypeError(msg)
        names = tuple(f.name for f in dataclasses.fields(target) if f.init)
        return cls(fields=names, factory=target)


def _default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if isinstance(value, BaseModel):
        return value.model_dump()
    msg = f"Object of type {type(value).__name__} is not JSON serializable"
    raise TypeError(msg)


def encode(value: Any, *, indent: int | None = None) -> str:
    """Return the canonical JSON text for *value*.

    Dataclass instances serialize as their fields in declaration order and
    pydantic models via ``model_dump()``. *indent* switches to a
    pretty-printed layout.
    """
    try:
        if indent is not None:
            return json.dumps(value, default=_default, ensure_ascii=False, indent=indent)
        return json.dumps(value, default=_default, ensure_ascii=False, separators=_SEPARATORS)
    except (TypeError, ValueError, RecursionError) as exc:
        raise CodecError(str(exc)) from exc


def decode(shape: JsonShape | Callable[..., Any], text: str) -> Any:
    """Build an instance from *text* via the factory behind *shape*.

    *shape* is either a :class:`JsonShape` or any callable, which is then
    used as the factory directly.
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as exc:
        raise CodecError(f"Invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        msg = f"Expected a JSON object, got {type(data).__name__}"
        raise CodecError(msg)

    if isinstance(shape, JsonShape):
        factory = shape.factory
        if tuple(data) != shape.fields:
            logger.debug(
                "decode.field_order_mismatch: expected %s, got %s",
                list(shape.fields),
                list(data),
            )
    else:
        factory = shape

    return factory(*data.values())
