"""Grapheme-aware string views and a small line-extraction DSL."""
from .errors import CarveError, ChopperError, ConfigError, SegmenterError, TemplateError
from .extract import extract, template
from .stringview import StringView
from .types import Result
from .utils import is_digit, is_not_whitespace, is_whitespace

__version__ = "0.1.0"
