from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from attrs import define, fields

from . import constants, errors, segmentation
from .log import LOG, setup_logging


@define
class Config:
    """Process-wide settings. Read from the `[carve]` table of a TOML file,
    or from the top level if there is no such table."""
    log_level: str = constants.DEFAULT_LOG_LEVEL
    log_format: str = constants.DEFAULT_LOG_FORMAT
    segmenter: str = constants.DEFAULT_SEGMENTER

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        known = {attribute.name for attribute in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise errors.ConfigError(f"Unknown setting(s): {', '.join(sorted(unknown))}")
        for key, value in data.items():
            if not isinstance(value, str):
                raise errors.ConfigError(f"Setting `{key}` must be a string, not {type(value).__name__}")
        return cls(**data)

    @classmethod
    def load(cls, path: str | Path) -> Config:
        path = Path(path)
        try:
            with path.open("rb") as f:
                data = tomllib.load(f)
        except OSError as err:
            raise errors.ConfigError(f"Couldn't read `{path}`: {err}") from err
        except tomllib.TOMLDecodeError as err:
            raise errors.ConfigError(f"`{path}` isn't valid TOML: {err}") from err
        return cls.from_dict(data.get(constants.CONFIG_TABLE, data))

    def apply(self) -> None:
        """Configures logging and selects the grapheme segmenter."""
        try:
            setup_logging(self.log_level, self.log_format)
        except ValueError as err:
            raise errors.ConfigError(str(err)) from err
        segmentation.set_segmenter(self.segmenter)
        LOG.debug("Applied %r", self)
