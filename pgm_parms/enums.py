#!/usr/bin/env python3
"""
These are the core enums used to convey information around pgm_parms.
"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import enum

# ##-- end stdlib imports

class ParamKind_e(enum.Enum):
    """ Which catalog a parameter descriptor belongs to """
    named      = "named"
    positional = "positional"

class ListPos_e(enum.Enum):
    """ The end of a delimited list to push to, or pop from """
    front = "front"
    back  = "back"

class ParseStatus_e(enum.Enum):
    """ How a parse of the argument vector ended """
    completed = enum.auto()
    help      = enum.auto()
    error     = enum.auto()
