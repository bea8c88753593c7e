"""Tests for SelectorService token building."""

import pytest

from selkit.services.selector import SelectorService


@pytest.fixture
def svc() -> SelectorService:
    return SelectorService()


class TestBuild:
    def test_compound(self, svc: SelectorService) -> None:
        result = svc.build(["id=main", "class=container", "class=editable"])
        assert result.ok
        assert result.op == "build_selector"
        assert result.data["selector"] == "#main.container.editable"
        assert result.data["compounds"] == 1
        assert result.data["combinators"] == []

    def test_attr_value_may_contain_equals(self, svc: SelectorService) -> None:
        result = svc.build(["element=a", 'attr=href$=".png"', "pseudo-class=focus"])
        assert result.data["selector"] == 'a[href$=".png"]:focus'

    def test_combined(self, svc: SelectorService) -> None:
        result = svc.build(["element=div", "id=main", "+", "element=table", "id=data"])
        assert result.ok
        assert result.data["selector"] == "div#main + table#data"
        assert result.data["compounds"] == 2
        assert result.data["combinators"] == ["+"]

    def test_descendant_keyword(self, svc: SelectorService) -> None:
        result = svc.build(["element=ul", "descendant", "element=li"])
        assert result.data["selector"] == "ul   li"
        assert result.data["combinators"] == [" "]

    def test_right_nested_fold(self, svc: SelectorService) -> None:
        result = svc.build(["element=a", "+", "element=b", "~", "element=c", ">", "element=d"])
        assert result.data["selector"] == "a + b ~ c > d"

    def test_parts_payload(self, svc: SelectorService) -> None:
        result = svc.build(["element=p", "pseudo-element=first-line"])
        assert result.data["parts"] == [
            [
                {"kind": "element", "value": "p"},
                {"kind": "pseudo-element", "value": "first-line"},
            ]
        ]


class TestErrors:
    def test_multiplicity(self, svc: SelectorService) -> None:
        result = svc.build(["element=a", "element=b"])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "MULTIPLICITY"

    def test_order(self, svc: SelectorService) -> None:
        result = svc.build(["class=x", "id=main"])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "ORDER"

    def test_order_checked_per_compound(self, svc: SelectorService) -> None:
        result = svc.build(["class=x", "+", "id=main"])
        assert result.ok
        assert result.data["selector"] == ".x + #main"

    @pytest.mark.parametrize(
        "tokens",
        [
            [],
            ["main"],
            ["colour=red"],
            ["+", "element=a"],
            ["element=a", "+"],
            ["element=a", "+", "~", "element=b"],
        ],
    )
    def test_invalid_tokens(self, svc: SelectorService, tokens: list[str]) -> None:
        result = svc.build(tokens)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_TOKEN"

    def test_invalid_token_detail(self, svc: SelectorService) -> None:
        result = svc.build(["element=a", "bogus"])
        assert result.error is not None
        assert result.error.detail == {"index": 1, "token": "bogus"}
