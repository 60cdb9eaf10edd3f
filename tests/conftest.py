from __future__ import annotations

import pytest

from carve import segmentation
from carve.log import LOG

from samples import RAINBOW_FLAG, THUMBS_UP_MEDIUM


@pytest.fixture(autouse=True)
def restore_global_state():
    """Undo segmenter switches and log level changes made by a test."""
    segmenter = segmentation.get_segmenter()
    level = LOG.level
    yield
    segmentation.set_segmenter(segmenter)
    LOG.setLevel(level)


@pytest.fixture
def mixed_line():
    return "Hello " + THUMBS_UP_MEDIUM + " \U00004E16\U0000754C " + RAINBOW_FLAG
