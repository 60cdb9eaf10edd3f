from __future__ import annotations

from typing import Protocol, runtime_checkable

import regex

from . import constants, errors
from .log import LOG


@runtime_checkable
class Segmenter(Protocol):
    """Splits text into grapheme clusters.

    `segment` returns half-open (start, stop) spans, in order, that exactly
    cover the text."""
    name: str

    def segment(self, text: str) -> list[tuple[int, int]]: ...


class RegexSegmenter:
    """Unicode extended grapheme clusters, via the `regex` module's \\X."""
    name = "regex"

    def __init__(self, pattern: str = constants.GRAPHEME_PATTERN):
        self.pattern = regex.compile(pattern)

    def segment(self, text: str) -> list[tuple[int, int]]:
        return [match.span() for match in self.pattern.finditer(text)]

    def __repr__(self):
        return f"<RegexSegmenter: {self.pattern.pattern}>"


class CodepointSegmenter:
    """Every code point is its own cluster. Wrong for real text; useful for comparison."""
    name = "codepoint"

    def segment(self, text: str) -> list[tuple[int, int]]:
        return [(i, i + 1) for i in range(len(text))]

    def __repr__(self):
        return "<CodepointSegmenter>"


SEGMENTERS: dict[str, Segmenter] = {
    RegexSegmenter.name: RegexSegmenter(),
    CodepointSegmenter.name: CodepointSegmenter(),
}

_active: Segmenter = SEGMENTERS[constants.DEFAULT_SEGMENTER]


def get_segmenter() -> Segmenter:
    return _active


def set_segmenter(segmenter: str | Segmenter) -> Segmenter:
    """Selects the segmenter used by every StringView. Returns the previous one."""
    global _active
    if isinstance(segmenter, str):
        if segmenter not in SEGMENTERS:
            raise errors.SegmenterError(segmenter, SEGMENTERS.keys())
        segmenter = SEGMENTERS[segmenter]
    elif not isinstance(segmenter, Segmenter):
        raise TypeError(f"{segmenter!r} does not implement segment()")
    previous, _active = _active, segmenter
    LOG.debug("Grapheme segmenter switched from %r to %r", previous, segmenter)
    return previous


def graphemes(text: str) -> list[str]:
    return [text[start:stop] for start, stop in _active.segment(text)]
