#!/usr/bin/env python3
"""
Help Dispatch, and the exit decisions of a hosting program.

The parser only reports what happened.
process_pgm_parms turns that report into the traditional behaviour:

- help requested     : call the program's help, exit 0. (exit 1 if it has none)
- unrecognized param : print the error, show help if possible, exit 1
- completed          : return the result
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import TYPE_CHECKING

# ##-- end stdlib imports

# ##-- 1st party imports
from pgm_parms.enums import ParseStatus_e
from pgm_parms.errors import MissingHelpError
from pgm_parms.parsers.parser import PgmParmParser
from pgm_parms.utils.printer import Printer

# ##-- end 1st party imports

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pgm_parms.control.catalog import HelpFn, ParmContext
    from pgm_parms.parsers.parser import ParseResult

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

def require_help(ctx:ParmContext) -> HelpFn:
    if not ctx.has_help:
        raise MissingHelpError("No help text is defined for this program.")
    return ctx.help

def dispatch_help(ctx:ParmContext, *, printer:None|Printer=None) -> int:
    """ Call the program's help function, returning the exit code to use """
    try:
        help_fn = require_help(ctx)
    except MissingHelpError as err:
        printer = printer or Printer(config=ctx.config)
        printer.print_error(str(err))
        return 1

    logging.debug("Calling Help: %s", help_fn)
    help_fn()
    return 0

def exit_code_for(ctx:ParmContext, result:ParseResult, *, printer:None|Printer=None) -> None|int:
    """ The code a program should exit with after a parse, or None to carry on """
    match result.status:
        case ParseStatus_e.completed:
            return None
        case ParseStatus_e.help:
            return dispatch_help(ctx, printer=printer)
        case ParseStatus_e.error:
            printer = printer or Printer(config=ctx.config)
            printer.print_error(str(result.error))
            if ctx.has_help:
                dispatch_help(ctx, printer=printer)
            return 1

def process_pgm_parms(ctx:ParmContext, args:None|Sequence[str]=None, *, program:None|str=None, printer:None|Printer=None) -> ParseResult:
    """ Parse the program's args, exiting on help or on error """
    result = PgmParmParser(ctx).parse(args, program=program)
    match exit_code_for(ctx, result, printer=printer):
        case None:
            return result
        case int() as code:
            raise SystemExit(code)
