from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .stringview import StringView


class CarveError(Exception):
    """Base class for every error raised by carve."""


class ChopperError(CarveError):
    """A chopper could not take the token it is required to produce."""

    def __init__(self, chopper: str, remainder: StringView | str) -> None:
        self.chopper = chopper
        self.remainder = str(remainder)
        preview = self.remainder if len(self.remainder) <= 32 else self.remainder[:29] + "..."
        super().__init__(f"Failed to chop `{chopper}` from {preview!r}")


class TemplateError(CarveError):
    """An extractor was built from an inconsistent template."""


class SegmenterError(CarveError):
    """The requested grapheme segmenter does not exist."""

    def __init__(self, name: str, available) -> None:
        self.name = name
        super().__init__(f"Unknown segmenter `{name}`. Available: {', '.join(sorted(available))}")


class ConfigError(CarveError):
    """The configuration file could not be read or contains unknown settings."""
