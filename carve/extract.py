from __future__ import annotations

import string
from typing import Callable, Sequence

from . import choppers, errors
from .log import LOG
from .stringview import StringView
from .types import Chopper

Extractor = Callable[[StringView | str], tuple]


def extract(parts: Sequence[str], *parsers: Chopper) -> Extractor:
    """Builds a function that destructures a line into a tuple.

    `parts` are the literal pieces around the values, one more than there are
    `parsers`: ``extract(["Hello ", " World ", ""], choppers.int, choppers.word)``
    reads "Hello 123 World Foo" as (123, "Foo").
    Each literal is located with `StringView.chop_by_string_view`, so text before
    it is skipped and a missing literal swallows the rest of the line.
    Errors raised by a chopper propagate and abort the extraction.
    """
    parts = tuple(parts)
    if len(parts) != len(parsers) + 1:
        raise errors.TemplateError(
            f"Expected {len(parsers) + 1} literal parts for {len(parsers)} choppers, got {len(parts)}."
        )
    for parser in parsers:
        if not callable(parser):
            raise errors.TemplateError(f"{parser!r} is not a chopper.")
    delimiters = tuple(StringView(part) for part in parts)
    LOG.debug("Built extractor for %r with %d choppers", parts, len(parsers))

    def extractor(line: StringView | str) -> tuple:
        view = line if isinstance(line, StringView) else StringView(line)
        values = []
        for delim, parser in zip(delimiters, parsers):
            view.chop_by_string_view(delim)
            values.append(parser(view))
        view.chop_by_string_view(delimiters[-1])
        return tuple(values)

    return extractor


def template(fmt: str) -> Extractor:
    """Builds an extractor from a format string naming registered choppers.

    ``template("Sensor at x={int}, y={int}")`` is the same as
    ``extract(["Sensor at x=", ", y=", ""], choppers.int, choppers.int)``.
    Literal braces are written `{{` and `}}`.
    """
    parts = []
    parsers = []
    literal = ""
    try:
        pieces = list(string.Formatter().parse(fmt))
    except ValueError as err:
        raise errors.TemplateError(f"Malformed template {fmt!r}: {err}") from err
    for text, name, spec, conversion in pieces:
        literal += text
        if name is None:
            continue
        if spec or conversion:
            raise errors.TemplateError(f"Placeholder `{{{name}}}` can't have a format spec or conversion.")
        if name not in choppers.CHOPPERS:
            raise errors.TemplateError(
                f"Unknown chopper `{name}`. Known: {', '.join(sorted(choppers.CHOPPERS))}"
            )
        parts.append(literal)
        parsers.append(choppers.CHOPPERS[name])
        literal = ""
    parts.append(literal)
    return extract(parts, *parsers)
