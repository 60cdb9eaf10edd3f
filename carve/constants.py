from __future__ import annotations

# Numeric lexemes
SIGNS = ("+", "-")
DECIMAL_POINT = "."
DIGITS = frozenset("0123456789")

# Whitespace that str.isspace() does not report but that should still be trimmed.
EXTRA_WHITESPACE = frozenset({
    "\ufeff",  # zero width no-break space
})

# Control characters str.isspace() reports that are not Unicode White_Space.
NOT_WHITESPACE = frozenset({
    "\x1c",  # file separator
    "\x1d",  # group separator
    "\x1e",  # record separator
    "\x1f",  # unit separator
    "\x85",  # next line
})

DEFAULT_SEGMENTER = "regex"
GRAPHEME_PATTERN = r"\X"

LOGGER_NAME = "carve"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(module)s:%(funcName)s %(lineno)s] %(message)s"

CONFIG_TABLE = "carve"
