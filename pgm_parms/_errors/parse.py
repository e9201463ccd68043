#!/usr/bin/env python3
"""
Errors raised while classifying the argument vector
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from .base import UserError

class ParseError(UserError):
    """ In the course of parsing CLI input, a failure occurred. """
    pass

class UnrecognizedParamError(ParseError):
    """ A token matched no named option, and no positional slot was left to absorb it.

      args: (msg, parm_name)
    """

    @property
    def parm_name(self) -> str:
        match self.args:
            case [_, str() as name, *_]:
                return name
            case _:
                return ""
