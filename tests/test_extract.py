from __future__ import annotations

import logging

import pytest

from carve import ChopperError, StringView, TemplateError, extract, template
from carve import choppers

from samples import FAMILY


def test_extract_single_value():
    result = extract(["Hello ", " World"], choppers.int)(StringView("Hello 123 World"))
    assert result == (123,)


def test_extract_multiple_values():
    result = extract(["Hello ", " World ", ""], choppers.int, choppers.int)(StringView("Hello 123 World 456"))
    assert result == (123, 456)


def test_extract_float():
    extractor = extract(["Hello ", " World ", ""], choppers.int, choppers.float)
    assert extractor(StringView("Hello 123 World 456.789")) == (123, 456.789)


def test_extract_word():
    extractor = extract(["Hello ", " World ", ""], choppers.int, choppers.word)
    assert extractor(StringView("Hello 123 World 456.789")) == (123, "456.789")


def test_extract_word_and_float():
    extractor = template("Hello {int} World {word} {float}")
    assert extractor(StringView("Hello 123 World Foo 456.789")) == (123, "Foo", 456.789)


def test_sensor_line():
    extractor = template("Sensor at x={int}, y={int}: closest beacon is at x={int}, y={int}")
    line = "Sensor at x=2, y=18: closest beacon is at x=-2, y=15"
    assert extractor(StringView(line)) == (2, 18, -2, 15)
    assert extractor(line) == (2, 18, -2, 15)


def test_valve_line_leaves_the_tail():
    extractor = template("Valve {word} has flow rate={int}; tunnel{optional} lead to valve{optional} ")
    line = StringView("Valve AA has flow rate=0; tunnels lead to valves DD, II, BB")
    assert extractor(line) == ("AA", 0, "s", "s")
    rest = []
    while line.size > 0:
        rest.append(line.chop_by_string_view(", ").data)
    assert rest == ["DD", "II", "BB"]


def test_extract_without_choppers():
    view = StringView("header: rest")
    assert extract(["header: "])(view) == ()
    assert view.data == "rest"


def test_part_count_must_match():
    with pytest.raises(TemplateError):
        extract(["a", "b"])
    with pytest.raises(TemplateError):
        extract(["a"], choppers.int)


def test_non_callable_chopper():
    with pytest.raises(TemplateError):
        extract(["a", "b"], "int")


def test_failing_chopper_aborts(caplog):
    caplog.set_level(logging.DEBUG, logger="carve")
    extractor = template("x={int}, y={int}")
    with pytest.raises(ChopperError) as info:
        extractor("x=1, y=abc")
    assert info.value.chopper == "int"
    assert info.value.remainder == "abc"
    assert "Chopper `int` failed" in caplog.text


def test_chopper_failure_log_is_lazy(caplog, monkeypatch):
    rendered = []
    monkeypatch.setattr(StringView, "__repr__", lambda self: rendered.append(self) or "<view>")
    caplog.set_level(logging.WARNING, logger="carve")
    with pytest.raises(ChopperError):
        choppers.int(StringView("abc"))
    assert rendered == []

    caplog.set_level(logging.DEBUG, logger="carve")
    with pytest.raises(ChopperError):
        choppers.int(StringView("abc"))
    record = caplog.records[-1]
    assert record.msg == "Chopper `%s` failed on %r"
    assert record.args[0] == "int"
    assert rendered


def test_missing_literal_consumes_the_rest():
    extractor = template("a={int} b={int}")
    with pytest.raises(ChopperError):
        extractor("a=1 c=2")


def test_template_escapes_braces():
    assert template("{{{int}}}")("{42}") == (42,)


@pytest.mark.parametrize("fmt", ["{nope}", "{}", "{int:d}", "{int!r}", "{int", "int}"])
def test_bad_templates(fmt):
    with pytest.raises(TemplateError):
        template(fmt)


def test_template_aliases():
    assert template("{i} {f} {w} {opt}")("1 2.5 word x") == (1, 2.5, "word", "x")


def test_registered_chopper_is_usable(monkeypatch):
    monkeypatch.setattr(choppers, "CHOPPERS", dict(choppers.CHOPPERS))

    @choppers.register("hex")
    def hex_number(view: StringView) -> int:
        return int(view.chop_left_while(lambda c: c in "0123456789abcdef").data, 16)

    assert choppers.CHOPPERS["hex"] is hex_number
    assert template("color=#{hex};")("color=#ff;") == (255,)


def test_word_chopper():
    sv = StringView(FAMILY + "abc def")
    assert choppers.word(sv) == FAMILY + "abc"
    assert sv.data == " def"
    assert choppers.word(sv) == ""


def test_optional_chopper():
    sv = StringView("s x")
    assert choppers.optional(sv) == "s"
    assert choppers.optional(sv) == ""
    assert sv.data == " x"
    assert choppers.optional(StringView("")) == ""
    assert choppers.optional(StringView(FAMILY + "x")) == FAMILY


def test_float_chopper_failure():
    sv = StringView("nan")
    with pytest.raises(ChopperError):
        choppers.float(sv)
    assert sv.data == "nan"
