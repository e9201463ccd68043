#!/usr/bin/env python3
"""
Loading of pgm_parms settings.

The packaged constants.toml provides the defaults,
user toml files are deep merged over the top,
and the result is wrapped in a TomlGuard for access:

    config.on_fail(" ").parse.list_delim()

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import functools as ftz
import logging as logmod
import pathlib as pl
import tomllib
from importlib.resources import files
from typing import TYPE_CHECKING, Any

# ##-- end stdlib imports

# ##-- 3rd party imports
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
from pgm_parms.constants import CONSTANTS_FILE
from pgm_parms.errors import InvalidConfigError

# ##-- end 1st party imports

if TYPE_CHECKING:
    from collections.abc import Mapping

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

def _merge(base:dict, over:Mapping) -> dict:
    """ recursively merge 'over' into a copy of 'base' """
    result = dict(base)
    for key, val in over.items():
        match result.get(key, None), val:
            case dict() as existing, dict():
                result[key] = _merge(existing, val)
            case _:
                result[key] = val

    return result

def _read_defaults() -> dict:
    text = files("pgm_parms").joinpath(CONSTANTS_FILE).read_text()
    return tomllib.loads(text)

def _read_file(path:pl.Path) -> dict:
    logging.debug("Reading Config: %s", path)
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except OSError as err:
        raise InvalidConfigError("Config file could not be read: %s", str(path)) from err
    except tomllib.TOMLDecodeError as err:
        raise InvalidConfigError("Config file is not valid toml: %s : %s", str(path), str(err)) from err

@ftz.cache
def default_config() -> TomlGuard:
    """ The packaged defaults, loaded once """
    return TomlGuard(_read_defaults())

def load_config(*paths:str|pl.Path, overrides:None|dict[str, Any]=None) -> TomlGuard:
    """
      Load the defaults, then merge each path in order, then any explicit overrides.
    """
    data = _read_defaults()
    for path in paths:
        data = _merge(data, _read_file(pl.Path(path)))

    if overrides:
        data = _merge(data, overrides)

    return TomlGuard(data)
