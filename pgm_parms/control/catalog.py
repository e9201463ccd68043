#!/usr/bin/env python3
"""
Parameter Catalogs, and the Context which owns them.

    ctx = ParmContext(help=my_help)
    ctx.longoptions("debug=0", "quiet=0")
    ctx.pos_parms("machine=denali", "user")
    ctx.symbols['machine'] -> 'denali'

Registration seeds the symbol table with each default,
and appends the name to the relevant catalog.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import TYPE_CHECKING

# ##-- end stdlib imports

# ##-- 1st party imports
from pgm_parms._structs.delim_list import DelimList
from pgm_parms._structs.param_spec import ParamSpec
from pgm_parms._structs.symbol_table import SymbolTable
from pgm_parms.config import default_config
from pgm_parms.enums import ParamKind_e

# ##-- end 1st party imports

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from tomlguard import TomlGuard
    from pgm_parms.parsers.parser import ParseResult

    HelpFn = Callable[[], None]

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class ParamCatalog:
    """ An ordered registry of parameter descriptors of a single kind.
      Duplicates are kept, in registration order.
    """

    def __init__(self, kind:ParamKind_e):
        self.kind   = kind
        self._specs : list[ParamSpec] = []

    def __repr__(self) -> str:
        return f"<ParamCatalog({self.kind.value}): {self.names()}>"

    def __contains__(self, name:object) -> bool:
        return any(x.name == name for x in self._specs)

    def __iter__(self) -> Iterator[ParamSpec]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __bool__(self) -> bool:
        return bool(self._specs)

    def add(self, spec:ParamSpec) -> ParamSpec:
        if spec.kind is not self.kind:
            spec = ParamSpec.build(spec, kind=self.kind)
        self._specs.append(spec)
        return spec

    def get(self, name:str) -> None|ParamSpec:
        """ The most recently registered spec of the name """
        for spec in reversed(self._specs):
            if spec.name == name:
                return spec
        return None

    def names(self) -> list[str]:
        return [x.name for x in self._specs]

    def unique_names(self) -> list[str]:
        return list(dict.fromkeys(self.names()))

    def queue(self, *, delim:str=" ") -> DelimList:
        """ A fresh working queue of the catalog's names, in declared order """
        return DelimList(self.names(), delim=delim, name=f"{self.kind.value}_parms")

class ParmContext:
    """ The Symbol Table, both catalogs, and the record of the last parse.

      help : the hosting program's zero argument help function, if it has one.
    """

    def __init__(self, *, help:None|HelpFn=None, config:None|TomlGuard=None):  # noqa: A002
        self.config        = config or default_config()
        self.symbols       = SymbolTable()
        self.named         = ParamCatalog(ParamKind_e.named)
        self.positional    = ParamCatalog(ParamKind_e.positional)
        self.help          = help
        self.command_line  = ""
        self.parm_list     : list[str]         = []
        self.last_result   : None|ParseResult  = None

    def __repr__(self) -> str:
        return f"<ParmContext: named={self.named.names()}, positional={self.positional.names()}>"

    def catalog(self, kind:ParamKind_e|str) -> ParamCatalog:
        match ParamKind_e(kind):
            case ParamKind_e.named:
                return self.named
            case ParamKind_e.positional:
                return self.positional

    def register(self, kind:ParamKind_e|str, *specs:str|dict|ParamSpec) -> list[ParamSpec]:
        """ For each spec of 'name' or 'name=default':
          set the symbol to its default, and add it to the catalog of 'kind'
        """
        catalog = self.catalog(kind)
        result  = []
        for spec in specs:
            built = catalog.add(ParamSpec.build(spec, kind=catalog.kind))
            logging.debug("Registering %s Param: %s = %s", catalog.kind.value, built.name, repr(built.default))
            self.symbols[built.name] = built.default
            result.append(built)

        return result

    def longoptions(self, *specs:str|dict|ParamSpec) -> list[ParamSpec]:
        return self.register(ParamKind_e.named, *specs)

    def pos_parms(self, *specs:str|dict|ParamSpec) -> list[ParamSpec]:
        return self.register(ParamKind_e.positional, *specs)

    def describe(self, name:str, desc:str="", data_desc:str="") -> ParamSpec:
        """ Attach help text to the most recent registration of a name """
        found = self.named.get(name)
        if found is None:
            found = self.positional.get(name)

        match found:
            case None:
                raise KeyError("No Parameter has been registered with that name", name)
            case ParamSpec() as spec:
                spec.desc      = desc or spec.desc
                spec.data_desc = data_desc or spec.data_desc
                return spec

    def set_help(self, help:None|HelpFn) -> None:  # noqa: A002
        self.help = help

    @property
    def has_help(self) -> bool:
        return callable(self.help)
