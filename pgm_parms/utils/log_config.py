#!/usr/bin/env python3
"""
Logging setup for pgm_parms.

Two loggers are configured:
- 'pgm_parms'          : the general log, for internals. Defaults to warnings on stderr.
- 'pgm_parms._printer' : replaces 'print(x)'. Normal lines go to stdout, errors to stderr.

"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import os
from typing import TYPE_CHECKING

# ##-- end stdlib imports

# ##-- 1st party imports
from pgm_parms._structs.logger_spec import LoggerSpec
from pgm_parms.config import default_config
from pgm_parms.constants import PRINTER_NAME

# ##-- end 1st party imports

if TYPE_CHECKING:
    from tomlguard import TomlGuard

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

env : dict = os.environ

class PgmLogConfig:
    """ Utility class to setup [stream, printer] logging.
      The printer is applied on construction,
      so a Printer always has somewhere to write.
    """

    def __init__(self, config:None|TomlGuard=None):
        self.config       = config or default_config()
        self.stream_spec  = LoggerSpec.build(self.config.on_fail({}).logging.stream(),
                                             name="pgm_parms")
        self.printer_spec = LoggerSpec.build(self.config.on_fail({}).logging.printer(),
                                             name=PRINTER_NAME,
                                             target="split",
                                             propagate=False)
        self.printer_spec.apply()

    def setup(self) -> None:
        """ Apply both loggers """
        self.stream_spec.apply()
        self.printer_spec.apply()
        logging.debug("Post Log Setup")

    def set_level(self, level:int|str) -> None:
        self.stream_spec.set_level(level)
