#!/usr/bin/env python3
# from https://alexandra-zaharia.github.io/posts/make-your-own-custom-color-formatter-with-python-logging/
##-- imports
from __future__ import annotations

import logging
import re
from collections import defaultdict
from typing import ClassVar

from sty import bg, ef, fg, rs
##-- end imports

COLOUR_RESET = rs.all
LEVEL_MAP    = defaultdict(lambda: rs.all)
LEVEL_MAP.update({
    logging.DEBUG    : fg.grey,
    logging.INFO     : rs.all,
    logging.WARNING  : fg.yellow,
    logging.ERROR    : fg.red,
    logging.CRITICAL : fg.red,
    "blue"           : fg.blue,
    "cyan"           : fg.cyan,
    "green"          : fg.green,
    "red"            : fg.red,
    "yellow"         : fg.yellow,
    "bg_red"         : bg.red,
    "bold"           : ef.bold,
    "RESET"          : rs.all
    })

class PgmColourFormatter(logging.Formatter):
    """
    Stream Formatter for pgm_parms, enables use of colour sent to console
    Uses the sty module.

    A record can choose its colour with extra={"colour": "green"}

    # Do *not* use for on filehandler
    """

    _default_fmt      : ClassVar[str] = '{asctime} | {levelname:9} | {message}'
    _default_date_fmt : str           = "%H:%M:%S"
    _default_style                    = '{'

    def __init__(self, *, fmt:None|str=None):
        """
        Create the formatter with a given *Brace* style log format
        """
        super().__init__(fmt or self._default_fmt,
                         datefmt=self._default_date_fmt,
                         style=self._default_style)
        self.colours = LEVEL_MAP

    def format(self, record:logging.LogRecord) -> str:
        log_colour = self.colours[record.levelno]
        if hasattr(record, "colour"):
            log_colour = self.colours[record.colour]

        return log_colour + super().format(record) + COLOUR_RESET

class PgmColourStripFormatter(logging.Formatter):
    """
    Force Colour Command codes to be stripped out of a string.
    Useful for when you redirect printed strings with colour
    to a file
    """

    _default_fmt         = "{asctime} | {levelname:9} | {name:25} | {message}"
    _default_date_fmt    = "%Y-%m-%d %H:%M:%S"
    _default_style       = '{'
    _colour_strip_re     = re.compile(r'\x1b\[([\d;]+)m?')

    def __init__(self, *, fmt:None|str=None):
        super().__init__(fmt or self._default_fmt,
                         datefmt=self._default_date_fmt,
                         style=self._default_style)

    def format(self, record:logging.LogRecord) -> str:
        result    = super().format(record)
        no_colour = self._colour_strip_re.sub("", result)
        return no_colour
