"""Choppers: functions that take one typed value off the front of a StringView.

This module deliberately defines `int` and `float`, so it refers to the
builtins through `builtins`. Import the module, not its names:

    from carve import choppers as c
    extract(["x=", ", y=", ""], c.int, c.int)
"""
from __future__ import annotations

import builtins

from . import errors, utils
from .log import LOG
from .stringview import StringView
from .types import Chopper

CHOPPERS: dict[str, Chopper] = {}


def register(*names: str):
    """Makes a chopper available to `template` under each of `names`."""
    def decorator(f: Chopper) -> Chopper:
        for name in names or (f.__name__,):
            CHOPPERS[name] = f
        return f

    return decorator


def _required(name: str, view: StringView, result):
    if not result:
        LOG.debug("Chopper `%s` failed on %r", name, view)
        raise errors.ChopperError(name, view)
    return result.data


@register("int", "i")
def int(view: StringView) -> builtins.int:
    """A signed base-10 integer. Raises ChopperError when there is none."""
    return _required("int", view, view.chop_int())


@register("float", "f")
def float(view: StringView) -> builtins.float:
    """A signed decimal number such as -1.5, .5 or 5. Raises ChopperError when there is none."""
    return _required("float", view, view.chop_float())


@register("word", "w")
def word(view: StringView) -> str:
    """Everything up to the next whitespace. May be empty."""
    return view.chop_left_while(utils.is_not_whitespace).data


@register("optional", "opt")
def optional(view: StringView) -> str:
    """One character, unless the next character is whitespace (or there is none)."""
    if utils.is_whitespace(view.char_at(0)):
        return ""
    return view.chop_left(1).data
