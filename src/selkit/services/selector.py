"""SelectorService — build selector text from an ordered token list.

Token grammar (one token per CLI argument)::

    element=a  id=main  class=x  attr=href$=".png"
    pseudo-class=focus  pseudo-element=before
    +  ~  >  descendant          # combinators (" " is accepted too)

Compound selectors separated by combinators fold right-nested, matching
``combine(a, "+", combine(b, "~", c))``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from selkit.domain.builder import builder
from selkit.domain.selectors import (
    MultiplicityError,
    OrderError,
    SelectorNode,
    Stringifiable,
)
from selkit.services.result import ServiceResult

logger = logging.getLogger(__name__)

# Token kind -> method name on both the builder facade and SelectorNode.
PART_METHODS: dict[str, str] = {
    "element": "element",
    "id": "id",
    "class": "class_",
    "attr": "attr",
    "pseudo-class": "pseudo_class",
    "pseudo-element": "pseudo_element",
}

COMBINATOR_TOKENS: dict[str, str] = {
    "+": "+",
    "~": "~",
    ">": ">",
    " ": " ",
    "descendant": " ",
}


class _TokenError(Exception):
    def __init__(self, message: str, index: int, token: str) -> None:
        super().__init__(message)
        self.index = index
        self.token = token


class SelectorService:
    """Builds compound and combined selectors for the CLI."""

    def build(self, tokens: Sequence[str]) -> ServiceResult:
        op = "build_selector"
        if not tokens:
            return ServiceResult.failure(op, "INVALID_TOKEN", "No selector tokens given")

        try:
            compounds, combinators = _parse(tokens)
        except _TokenError as exc:
            return ServiceResult.failure(
                op, "INVALID_TOKEN", str(exc), index=exc.index, token=exc.token
            )
        except MultiplicityError as exc:
            return ServiceResult.failure(op, "MULTIPLICITY", str(exc))
        except OrderError as exc:
            return ServiceResult.failure(op, "ORDER", str(exc))

        selector: Stringifiable = compounds[-1]
        for node, combinator in zip(reversed(compounds[:-1]), reversed(combinators), strict=True):
            selector = builder.combine(node, combinator, selector)

        text = selector.stringify()
        logger.debug("Built selector %r from %d compound(s)", text, len(compounds))
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "selector": text,
                "compounds": len(compounds),
                "combinators": combinators,
                "parts": [
                    [{"kind": kind, "value": value} for kind, value in node.parts()]
                    for node in compounds
                ],
            },
        )


def _parse(tokens: Sequence[str]) -> tuple[list[SelectorNode], list[str]]:
    """Split *tokens* into compound nodes and the combinators between them."""
    compounds: list[SelectorNode] = []
    combinators: list[str] = []
    current: SelectorNode | None = None

    for index, token in enumerate(tokens):
        if token in COMBINATOR_TOKENS:
            if current is None:
                msg = f"Combinator {token!r} must follow a selector part"
                raise _TokenError(msg, index, token)
            compounds.append(current)
            combinators.append(COMBINATOR_TOKENS[token])
            current = None
            continue

        kind, sep, value = token.partition("=")
        if not sep:
            msg = f"Expected kind=value, got {token!r}"
            raise _TokenError(msg, index, token)
        method = PART_METHODS.get(kind)
        if method is None:
            msg = f"Unknown selector part {kind!r}; expected one of {sorted(PART_METHODS)}"
            raise _TokenError(msg, index, token)

        target = builder if current is None else current
        current = getattr(target, method)(value)

    if current is None:
        msg = "Selector must not end with a combinator"
        raise _TokenError(msg, len(tokens) - 1, tokens[-1])
    compounds.append(current)
    return compounds, combinators
