"""Compound and combined CSS selector nodes.

A compound selector is assembled part by part in the canonical order::

    element#id.class[attr]:pseudo-class::pseudo-element

INVARIANT: a node's phase never decreases. Element, id and pseudo-element
occur at most once; classes, attributes and pseudo-classes may repeat while
the node is still in their phase.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol, runtime_checkable


class SelectorError(ValueError):
    """Base class for selector construction errors."""


class MultiplicityError(SelectorError):
    """A single-occurrence part was set twice on the same node."""


class OrderError(SelectorError):
    """A part was added after the node moved past its phase."""


MULTIPLICITY_MESSAGE = "element, id and pseudo-element must not occur more than once"
ORDER_MESSAGE = (
    "parts must be arranged in the order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)

COMBINATORS: tuple[str, ...] = (" ", "+", "~", ">")


class Phase(IntEnum):
    """Progress marker through the canonical part order."""

    NONE = 0
    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6


_SINGLE_PHASES = frozenset({Phase.ELEMENT, Phase.ID, Phase.PSEUDO_ELEMENT})


@runtime_checkable
class Stringifiable(Protocol):
    """Anything that renders itself as selector text."""

    def stringify(self) -> str: ...


class SelectorNode:
    """Mutable builder for one compound selector.

    Every setter returns the node itself, so calls chain::

        SelectorNode().element("a").attr('href$=".png"').pseudo_class("focus")
    """

    def __init__(self) -> None:
        self.phase = Phase.NONE
        self.element_part: str | None = None
        self.id_part: str | None = None
        self.class_parts: list[str] = []
        self.attr_parts: list[str] = []
        self.pseudo_class_parts: list[str] = []
        self.pseudo_element_part: str | None = None
        self._raw: list[tuple[str, str]] = []

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def element(self, text: str) -> SelectorNode:
        self._advance(Phase.ELEMENT)
        self.element_part = text
        self._raw.append(("element", text))
        return self

    def id(self, text: str) -> SelectorNode:
        self._advance(Phase.ID)
        self.id_part = f"#{text}"
        self._raw.append(("id", text))
        return self

    def class_(self, text: str) -> SelectorNode:
        self._advance(Phase.CLASS)
        self.class_parts.append(f".{text}")
        self._raw.append(("class", text))
        return self

    def attr(self, text: str) -> SelectorNode:
        self._advance(Phase.ATTRIBUTE)
        self.attr_parts.append(f"[{text}]")
        self._raw.append(("attr", text))
        return self

    def pseudo_class(self, text: str) -> SelectorNode:
        self._advance(Phase.PSEUDO_CLASS)
        self.pseudo_class_parts.append(f":{text}")
        self._raw.append(("pseudo-class", text))
        return self

    def pseudo_element(self, text: str) -> SelectorNode:
        self._advance(Phase.PSEUDO_ELEMENT)
        self.pseudo_element_part = f"::{text}"
        self._raw.append(("pseudo-element", text))
        return self

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def stringify(self) -> str:
        return "".join(
            (
                self.element_part or "",
                self.id_part or "",
                "".join(self.class_parts),
                "".join(self.attr_parts),
                "".join(self.pseudo_class_parts),
                self.pseudo_element_part or "",
            )
        )

    def parts(self) -> list[tuple[str, str]]:
        """Return ``(kind, text)`` pairs in the order they were added."""
        return list(self._raw)

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorNode({self.stringify()!r})"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _advance(self, target: Phase) -> None:
        """Check *target* against the current phase, then move to it."""
        if target in _SINGLE_PHASES and self.phase == target:
            raise MultiplicityError(MULTIPLICITY_MESSAGE)
        if self.phase > target:
            raise OrderError(ORDER_MESSAGE)
        self.phase = target


@dataclass(frozen=True)
class CombinatorNode:
    """Two selectors joined by a combinator token.

    The token is not validated; see :data:`COMBINATORS` for the CSS ones.
    """

    left: Stringifiable
    combinator: str
    right: Stringifiable

    def stringify(self) -> str:
        return f"{self.left.stringify()} {self.combinator} {self.right.stringify()}"

    def __str__(self) -> str:
        return self.stringify()
