#!/usr/bin/env python3
"""
The Symbol Table: parameter name -> current value.

Seeded by catalog registration, updated by parsing,
read by the hosting program afterwards.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from collections.abc import MutableMapping
from typing import TYPE_CHECKING

# ##-- end stdlib imports

# ##-- 3rd party imports
from tomlguard import TomlGuard

# ##-- end 3rd party imports

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

def is_truthy(value:str) -> bool:
    """ Arithmetic truth, as a shell would see it: a non-zero integer """
    try:
        return int(value.strip()) != 0
    except ValueError:
        return False

class SymbolTable(MutableMapping[str, str]):
    """ Explicit name -> str value store, replacing indirect variable assignment """

    def __init__(self, data:None|Mapping[str, str]=None):
        self._table : dict[str, str] = {}
        if data:
            self.update(data)

    def __getitem__(self, key:str) -> str:
        return self._table[key]

    def __setitem__(self, key:str, value:str) -> None:
        if not isinstance(value, str):
            raise TypeError("Symbol values are strings", key, value)
        logging.debug("Setting Symbol: %s = %s", key, repr(value))
        self._table[key] = value

    def __delitem__(self, key:str) -> None:
        del self._table[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"<SymbolTable: {self._table!r}>"

    def lookup(self, key:str, default:str="") -> str:
        """ The value of the named symbol, or the default if it is unset """
        return self._table.get(key, default)

    def truthy(self, key:str) -> bool:
        return is_truthy(self.lookup(key, "0"))

    def to_dict(self) -> dict[str, str]:
        return dict(self._table)

    def to_guard(self) -> TomlGuard:
        """ A read only snapshot, allowing table.to_guard().machine access """
        return TomlGuard(self.to_dict())
