"""Facade for starting selectors.

Each part entry point allocates a fresh :class:`SelectorNode` and forwards
the call, so the facade itself holds no state between calls::

    builder.id("main").class_("container").class_("editable").stringify()
    # '#main.container.editable'
"""

from __future__ import annotations

from selkit.domain.selectors import CombinatorNode, SelectorNode, Stringifiable


class CssSelectorBuilder:
    """Stateless entry points, one per selector part plus ``combine``."""

    @staticmethod
    def element(text: str) -> SelectorNode:
        return SelectorNode().element(text)

    @staticmethod
    def id(text: str) -> SelectorNode:
        return SelectorNode().id(text)

    @staticmethod
    def class_(text: str) -> SelectorNode:
        return SelectorNode().class_(text)

    @staticmethod
    def attr(text: str) -> SelectorNode:
        return SelectorNode().attr(text)

    @staticmethod
    def pseudo_class(text: str) -> SelectorNode:
        return SelectorNode().pseudo_class(text)

    @staticmethod
    def pseudo_element(text: str) -> SelectorNode:
        return SelectorNode().pseudo_element(text)

    @staticmethod
    def combine(left: Stringifiable, combinator: str, right: Stringifiable) -> CombinatorNode:
        return CombinatorNode(left, combinator, right)


builder = CssSelectorBuilder()
css_selector_builder = builder
