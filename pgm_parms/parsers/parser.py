#!/usr/bin/env python3
"""
The Program Parameter Parser.

All parameters take the form:
    <one or more dashes><parameter name>[=<parameter value>]
or are positional.

- With no value given, a named parameter's value is "1".
- "-h" is converted to "--help".
- Tokens which are not named options fill the positional parameters in order,
  and once all are filled, accumulate onto the last one.

The parser never exits. It returns a ParseResult, and the hosting program
decides what to do (see pgm_parms.control.dispatch).
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

# ##-- end stdlib imports

# ##-- 3rd party imports
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
from pgm_parms.enums import ParseStatus_e
from pgm_parms.parsers.parse_machine import ParmParseMachine, ParmParseModel
from pgm_parms.utils.paths import get_pgm_name

# ##-- end 1st party imports

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import Self
    from pgm_parms.control.catalog import ParmContext
    from pgm_parms.errors import UnrecognizedParamError

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

@dataclass(frozen=True)
class ParseResult:
    """ The outcome of one parse """
    status       : ParseStatus_e
    parm_list    : tuple[str, ...]              = ()
    command_line : str                          = ""
    error        : None|UnrecognizedParamError  = None
    values       : dict[str, str]               = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status is ParseStatus_e.completed

    def check(self) -> Self:
        """ Raise the parse error, if there was one """
        if self.error is not None:
            raise self.error
        return self

    def to_guard(self) -> TomlGuard:
        return TomlGuard(self.values)

class PgmParmParser:
    """
      Parses the args against the catalogs of a context,
      binding values into its symbol table.
    """

    _final_map = {
        "Finished"     : ParseStatus_e.completed,
        "Help"         : ParseStatus_e.help,
        "Unrecognized" : ParseStatus_e.error,
    }

    def __init__(self, ctx:ParmContext):
        self._ctx = ctx

    def parse(self, args:None|Sequence[str]=None, *, program:None|str=None) -> ParseResult:
        """ Classify and bind every arg, stopping early for help or an error.
          args defaults to sys.argv[1:], program to the running program's path.
        """
        match args:
            case None:
                args = sys.argv[1:]
            case _:
                args = list(args)

        program = program or get_pgm_name().file_path
        logging.debug("Parsing args: %s", args)
        model   = ParmParseModel(self._ctx, args, program=program)
        machine = ParmParseMachine(model)
        while not machine.current_state.final:
            machine.send("progress")

        status = self._final_map[machine.current_state.id]
        result = ParseResult(status=status,
                             parm_list=tuple(model.parm_list),
                             command_line=model.command_line,
                             error=model.error,
                             values=self._ctx.symbols.to_dict())
        logging.info("Parse %s: %s", status.name, list(result.parm_list))
        self._ctx.command_line = result.command_line
        self._ctx.parm_list    = list(result.parm_list)
        self._ctx.last_result  = result
        return result
