from __future__ import annotations

import logging

import pytest

from carve import ConfigError, SegmenterError, constants, segmentation
from carve.config import Config
from carve.log import LOG
from carve.segmentation import CodepointSegmenter


def test_defaults():
    config = Config()
    assert config.log_level == constants.DEFAULT_LOG_LEVEL
    assert config.segmenter == "regex"


def test_load_table(tmp_path):
    path = tmp_path / "carve.toml"
    path.write_text('[carve]\nlog_level = "debug"\nsegmenter = "codepoint"\n')
    config = Config.load(path)
    assert config == Config(log_level="debug", segmenter="codepoint")


def test_load_top_level(tmp_path):
    path = tmp_path / "carve.toml"
    path.write_text('segmenter = "codepoint"\n')
    assert Config.load(str(path)).segmenter == "codepoint"


def test_unknown_setting(tmp_path):
    path = tmp_path / "carve.toml"
    path.write_text('[carve]\ncolour = "blue"\n')
    with pytest.raises(ConfigError):
        Config.load(path)


def test_setting_type():
    with pytest.raises(ConfigError):
        Config.from_dict({"log_level": 10})


def test_invalid_toml(tmp_path):
    path = tmp_path / "carve.toml"
    path.write_text("[carve\n")
    with pytest.raises(ConfigError):
        Config.load(path)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        Config.load(tmp_path / "nope.toml")


def test_apply():
    Config(log_level="debug", segmenter="codepoint").apply()
    assert LOG.level == logging.DEBUG
    assert isinstance(segmentation.get_segmenter(), CodepointSegmenter)


def test_apply_bad_level():
    with pytest.raises(ConfigError):
        Config(log_level="loud").apply()


def test_apply_bad_segmenter():
    with pytest.raises(SegmenterError):
        Config(segmenter="icu").apply()
