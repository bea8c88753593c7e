"""Tests for canonical JSON encoding and positional decoding."""

import logging
from dataclasses import dataclass

import pytest
from pydantic import BaseModel

from selkit.domain.codec import CodecError, JsonShape, decode, encode
from selkit.domain.shapes import Circle, Rectangle, make_rectangle


class TestEncode:
    def test_array(self) -> None:
        assert encode([1, 2, 3]) == "[1,2,3]"

    def test_object_keeps_insertion_order(self) -> None:
        assert encode({"width": 10, "height": 20}) == '{"width":10,"height":20}'
        assert encode({"height": 20, "width": 10}) == '{"height":20,"width":10}'

    def test_nested(self) -> None:
        assert encode({"a": [1, {"b": None}], "c": True}) == '{"a":[1,{"b":null}],"c":true}'

    def test_rectangle_drops_methods(self) -> None:
        assert encode(make_rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_pydantic_model(self) -> None:
        class Point(BaseModel):
            x: int
            y: int

        assert encode(Point(x=1, y=2)) == '{"x":1,"y":2}'

    def test_non_ascii_left_unescaped(self) -> None:
        assert encode({"name": "café"}) == '{"name":"café"}'

    def test_indent(self) -> None:
        assert encode({"a": 1}, indent=2) == '{\n  "a": 1\n}'

    def test_unserializable_raises(self) -> None:
        with pytest.raises(CodecError):
            encode({"s": {1, 2}})


class TestJsonShape:
    def test_of_dataclass(self) -> None:
        shape = JsonShape.of(Rectangle)
        assert shape.fields == ("width", "height")
        assert shape.factory is Rectangle

    def test_of_non_dataclass_raises(self) -> None:
        with pytest.raises(TypeError):
            JsonShape.of(dict)


class TestDecode:
    def test_circle_from_text(self) -> None:
        c = decode(JsonShape.of(Circle), '{"radius":10}')
        assert isinstance(c, Circle)
        assert c.radius == 10

    def test_round_trip_matching_order(self) -> None:
        original = make_rectangle(10, 20)
        restored = decode(JsonShape.of(Rectangle), encode(original))
        assert restored == original
        assert restored.get_area() == 200

    def test_plain_callable_as_factory(self) -> None:
        c = decode(Circle, encode(Circle(7)))
        assert c == Circle(7)

    def test_custom_factory(self) -> None:
        @dataclass
        class Pair:
            first: str
            second: str

        shape = JsonShape(fields=("first", "second"), factory=lambda a, b: Pair(a.upper(), b))
        assert decode(shape, '{"first":"x","second":"y"}') == Pair("X", "y")

    def test_field_order_mismatch_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="selkit.domain.codec"):
            decode(JsonShape.of(Rectangle), '{"height":20,"width":10}')
        assert "decode.field_order_mismatch" in caplog.text

    def test_invalid_json(self) -> None:
        with pytest.raises(CodecError, match="Invalid JSON"):
            decode(Circle, "{radius: 10}")

    def test_top_level_must_be_object(self) -> None:
        with pytest.raises(CodecError, match="Expected a JSON object"):
            decode(Circle, "[10]")

    def test_deeply_nested_text(self) -> None:
        text = '{"radius":' + "[" * 200_000 + "]" * 200_000 + "}"
        with pytest.raises(CodecError, match="Invalid JSON"):
            decode(Circle, text)
