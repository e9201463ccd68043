#!/usr/bin/env python3
"""
Path utilities for programs using pgm_parms
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import os
import pathlib as pl
import re
import sys
from dataclasses import dataclass

import __main__

# ##-- end stdlib imports

# ##-- 1st party imports
from pgm_parms.errors import LocationError

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

@dataclass(frozen=True)
class ProgramInfo:
    """
      file_path : The full path of the running program
      dir_path  : Its directory, with a trailing slash
      name      : The unqualified program name
    """
    file_path : str
    dir_path  : str
    name      : str

def normalize_path(path:str|pl.Path) -> str:
    """ The absolute, normalised, form of a path """
    return os.path.abspath(path)

def add_trailing_char(value:str, char:str="/") -> str:
    """ Make sure the value ends in one and only one 'char' """
    return re.sub(f"(?:{re.escape(char)})+$", "", value) + char

def valid_dir_path(path:str|pl.Path, *, normalize:bool=True) -> str:
    """ Fail if the directory does not exist.
      Otherwise returns the path, (normalised and with a trailing slash, if requested)
    """
    result = str(path)
    if normalize:
        result = add_trailing_char(normalize_path(result), "/")

    if pl.Path(result).is_dir():
        return result

    raise LocationError("Directory does not exist: %s", result)

def get_pgm_name(path:None|str=None) -> ProgramInfo:
    """ Identify the running program, from __main__ or argv[0] """
    match path:
        case str():
            pass
        case None if hasattr(__main__, "__file__"):
            path = __main__.__file__
        case None if bool(sys.argv) and bool(sys.argv[0]):
            path = sys.argv[0]
        case None:
            path = "<interactive>"

    file_path = normalize_path(path)
    return ProgramInfo(file_path=file_path,
                       dir_path=add_trailing_char(os.path.dirname(file_path)),
                       name=os.path.basename(file_path))
