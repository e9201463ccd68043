#!/usr/bin/env python3
"""
Splitting of name/value strings:

    <name><delim><value>

Only the first delimiter splits, so 'a=b=c' is ('a', 'b=c').
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import NamedTuple

# ##-- end stdlib imports

# ##-- 1st party imports
from pgm_parms.constants import ASSIGN_DELIM

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class NameValue(NamedTuple):
    name  : str
    value : str

def parse_name_value(name_value:str, delim:str=ASSIGN_DELIM, default:str="") -> NameValue:
    """ Parse a name/value string.
      If there is no delimiter, the value is 'default'.

      parse_name_value("adjective=blue") -> NameValue("adjective", "blue")
      parse_name_value("verbose", default="1") -> NameValue("verbose", "1")
    """
    name, sep, value = name_value.partition(delim)
    if not bool(sep):
        value = default

    logging.debug("Name/Value: %s -> (%s, %s)", name_value, name, value)
    return NameValue(name, value)
