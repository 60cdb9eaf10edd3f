# Originally based on https://gist.github.com/saxbophone/e988cef9f351863f4312f2eef41a3a83
from __future__ import annotations

from typing import Iterator, Optional

from attrs import define

from . import constants, segmentation, utils
from .types import NumberState, Predicate, Result


@define
class StringView:
    """
    StringView implementation using minimal copying with maximum use of
    reference semantics. Creating a view from another view, slicing one, or
    chopping a piece off one reüses the same source string object; only the
    (start, size) window differs.
    A brand new string object is only created when the view is materialised
    through `data` or cast to str.

    Offsets (`start`, `size`, `len()`) are in code units, which for a Python
    str are code points. Everything that counts characters (`char_at`,
    `chop_left`, iteration, indexing) counts grapheme clusters instead, so an
    emoji ZWJ sequence or a letter with combining accents is one character.

    Peeking methods (`trim*`, `take*`, `to_*`) never move the window. Chopping
    methods (`chop*`) shrink this view and return what they removed.
    A single view must not be chopped from several threads at once; separate
    views over the same source are independent.
    """
    __source: str
    __start: int
    __size: int
    __spans: Optional[list[tuple[int, int]]]
    __spans_key: Optional[tuple]

    def __init__(self, source: str | StringView = "", start: int = 0, size: int | None = None):
        """`start` and `size` are clamped to the source, or to the window of a
        source view, so the result is always a valid window."""
        if isinstance(source, StringView):
            text, base, available = source.__source, source.__start, source.__size
        else:
            text, base, available = source, 0, len(source)
        start = max(0, min(start, available))
        available -= start
        size = available if size is None else max(0, min(size, available))
        self._set(text, base + start, size)

    def _set(self, source: str, start: int, size: int) -> None:
        self.__source = source
        self.__start = start
        self.__size = size
        self.__spans = None
        self.__spans_key = None

    @classmethod
    def from_view(cls, view: StringView) -> StringView:
        return cls(view)

    @classmethod
    def from_parts(cls, source: str, start: int, size: int) -> StringView:
        """Raw constructor. The caller guarantees 0 <= start <= start + size <= len(source)."""
        view = cls.__new__(cls)
        view._set(source, start, size)
        return view

    def copy(self) -> StringView:
        return StringView(self)

    @property
    def source(self) -> str:
        return self.__source

    @property
    def start(self) -> int:
        return self.__start

    @property
    def size(self) -> int:
        return self.__size

    @property
    def data(self) -> str:
        return self.__source[self.__start:self.__start + self.__size]

    def __str__(self):
        return self.data

    def __repr__(self):
        return f'<StringView [{self.__start}:{self.__start + self.__size}]: {self.data!r}>'

    def __len__(self):
        return self.__size

    def __bool__(self):
        return self.__size > 0

    def __eq__(self, other):
        if isinstance(other, (StringView, str)):
            return self.data == str(other)
        return NotImplemented

    __hash__ = None

    # Graphemes

    def _spans(self) -> list[tuple[int, int]]:
        """Grapheme spans of the current window, relative to `start`."""
        segmenter = segmentation.get_segmenter()
        key = (self.__start, self.__size, segmenter)
        if self.__spans_key != key:
            self.__spans = segmenter.segment(self.data)
            self.__spans_key = key
        return self.__spans

    def _offset(self, index: int) -> int:
        """Code-unit offset of the boundary before grapheme `index`."""
        spans = self._spans()
        return spans[index][0] if index < len(spans) else self.__size

    def _cluster(self, span: tuple[int, int]) -> str:
        return self.__source[self.__start + span[0]:self.__start + span[1]]

    @property
    def grapheme_count(self) -> int:
        return len(self._spans())

    def char_at(self, index: int) -> str:
        """The grapheme cluster at `index`, or "" when out of range."""
        spans = self._spans()
        if not 0 <= index < len(spans):
            return ""
        return self._cluster(spans[index])

    def graphemes(self) -> Iterator[str]:
        text = self.data
        for start, stop in self._spans():
            yield text[start:stop]

    def __iter__(self) -> Iterator[str]:
        return self.graphemes()

    def __getitem__(self, key):
        count = self.grapheme_count
        if isinstance(key, slice):
            if key.step is not None:
                raise TypeError('StringView does not support step when slicing')
            first, last, _ = key.indices(count)
            last = max(first, last)
            offset = self._offset(first)
            return StringView.from_parts(self.__source, self.__start + offset, self._offset(last) - offset)
        index = key + count if key < 0 else key
        if not 0 <= index < count:
            raise IndexError('StringView index out of range')
        return self.char_at(index)

    # Queries

    def index_of(self, search: str | StringView) -> int:
        """Code-unit offset of `search` within the window, or -1."""
        stop = self.__start + self.__size
        index = self.__source.find(str(search), self.__start, stop)
        return -1 if index == -1 else index - self.__start

    def eq(self, other: str | StringView) -> bool:
        return self.data == str(other)

    def eq_ignore_case(self, other: str | StringView) -> bool:
        return self.data.casefold() == str(other).casefold()

    def starts_with(self, other: str | StringView) -> bool:
        return self.__source.startswith(str(other), self.__start, self.__start + self.__size)

    def ends_with(self, other: str | StringView) -> bool:
        return self.__source.endswith(str(other), self.__start, self.__start + self.__size)

    # Predicates

    def _leading(self, predicate: Predicate) -> int:
        """Code units covered by the longest prefix of clusters matching `predicate`."""
        end = 0
        for span in self._spans():
            if not predicate(self._cluster(span)):
                break
            end = span[1]
        return end

    def _trailing(self, predicate: Predicate) -> int:
        begin = self.__size
        for span in reversed(self._spans()):
            if not predicate(self._cluster(span)):
                break
            begin = span[0]
        return self.__size - begin

    def _advance(self, count: int) -> None:
        self.__start += count
        self.__size -= count

    def trim_left(self) -> StringView:
        count = self._leading(utils.is_whitespace)
        return StringView.from_parts(self.__source, self.__start + count, self.__size - count)

    def trim_right(self) -> StringView:
        count = self._trailing(utils.is_whitespace)
        return StringView.from_parts(self.__source, self.__start, self.__size - count)

    def trim(self) -> StringView:
        return self.trim_left().trim_right()

    def take_left_while(self, predicate: Predicate) -> StringView:
        return StringView.from_parts(self.__source, self.__start, self._leading(predicate))

    def take_right_while(self, predicate: Predicate) -> StringView:
        count = self._trailing(predicate)
        return StringView.from_parts(self.__source, self.__start + self.__size - count, count)

    def chop_left_while(self, predicate: Predicate) -> StringView:
        chopped = self.take_left_while(predicate)
        self._advance(chopped.__size)
        return chopped

    def chop_right_while(self, predicate: Predicate) -> StringView:
        chopped = self.take_right_while(predicate)
        self.__size -= chopped.__size
        return chopped

    # Counted chops

    def chop_left(self, count: int) -> StringView:
        """Removes the first `count` grapheme clusters."""
        if count <= 0:
            return StringView.from_parts(self.__source, self.__start, 0)
        if count >= self.grapheme_count:
            return self._chop_rest()
        offset = self._offset(count)
        chopped = StringView.from_parts(self.__source, self.__start, offset)
        self._advance(offset)
        return chopped

    def chop_right(self, count: int) -> StringView:
        """Removes the last `count` grapheme clusters."""
        if count <= 0:
            return StringView.from_parts(self.__source, self.__start + self.__size, 0)
        total = self.grapheme_count
        if count >= total:
            chopped = StringView(self)
            self.__size = 0
            return chopped
        offset = self._offset(total - count)
        chopped = StringView.from_parts(self.__source, self.__start + offset, self.__size - offset)
        self.__size = offset
        return chopped

    # Delimiters

    def _find(self, delim: str) -> tuple[int, int] | None:
        """Window-relative span of the first grapheme-aligned occurrence of `delim`."""
        width = len(segmentation.get_segmenter().segment(delim))
        if width == 0:
            return 0, 0
        spans = self._spans()
        for i in range(len(spans) - width + 1):
            span = spans[i][0], spans[i + width - 1][1]
            if self._cluster(span) == delim:
                return span
        return None

    def _chop_through(self, span: tuple[int, int]) -> StringView:
        chopped = StringView.from_parts(self.__source, self.__start, span[0])
        self._advance(span[1])
        return chopped

    def _chop_rest(self) -> StringView:
        chopped = StringView(self)
        self._advance(self.__size)
        return chopped

    def chop_by_delimiter(self, delim: str) -> StringView:
        """Chops everything before `delim` and the delimiter itself.

        Matching works on whole grapheme clusters, so "e" does not match the
        start of "é" written as e + combining accent. Without a match the whole
        window is chopped."""
        span = self._find(delim)
        if span is None:
            return self._chop_rest()
        return self._chop_through(span)

    def try_chop_by_delimiter(self, delim: str) -> Result[StringView]:
        """Like `chop_by_delimiter`, but leaves the view alone and fails without a match."""
        span = self._find(delim)
        if span is None:
            return Result.fail()
        return Result.ok(self._chop_through(span))

    def chop_by_string_view(self, delim: str | StringView) -> StringView:
        """Chops everything before the first raw occurrence of `delim` and the delimiter.

        This is a plain substring search and ignores grapheme boundaries. A match
        that ends the window leaves this view empty and is not part of the result.
        Without a match the whole window is chopped."""
        needle = str(delim)
        index = self.__source.find(needle, self.__start, self.__start + self.__size)
        if index == -1:
            return self._chop_rest()
        offset = index - self.__start
        return self._chop_through((offset, offset + len(needle)))

    # Numbers

    def _scan_number(self, fraction: bool) -> int:
        """Code-unit length of the numeric prefix, or 0 when there isn't one."""
        state = NumberState.START
        digits = 0
        length = 0
        for char in self.graphemes():
            if char in constants.SIGNS and state == NumberState.START:
                state = NumberState.SIGN
            elif utils.is_digit(char):
                digits += 1
                if state != NumberState.FRACTION:
                    state = NumberState.INTEGER
            elif char == constants.DECIMAL_POINT and fraction and state != NumberState.FRACTION:
                state = NumberState.FRACTION
            else:
                break
            length += len(char)
        return length if digits else 0

    def _parse(self, convert, fraction: bool) -> tuple[int, int | float | None]:
        length = self._scan_number(fraction)
        if not length:
            return 0, None
        return length, convert(self.__source[self.__start:self.__start + length])

    def try_to_int(self) -> Result[int]:
        _, value = self._parse(int, False)
        return Result.fail() if value is None else Result.ok(value)

    def try_to_float(self) -> Result[float]:
        _, value = self._parse(float, True)
        return Result.fail() if value is None else Result.ok(value)

    def to_int(self) -> int:
        """Integer at the front of the view, or 0 when there is none."""
        return self.try_to_int().unwrap_or(0)

    def to_float(self) -> float:
        """Float at the front of the view, or 0.0 when there is none."""
        return self.try_to_float().unwrap_or(0.0)

    def chop_int(self) -> Result[int]:
        length, value = self._parse(int, False)
        if value is None:
            return Result.fail()
        self._advance(length)
        return Result.ok(value)

    def chop_float(self) -> Result[float]:
        length, value = self._parse(float, True)
        if value is None:
            return Result.fail()
        self._advance(length)
        return Result.ok(value)
