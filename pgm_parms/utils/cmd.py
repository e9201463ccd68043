#!/usr/bin/env python3
"""
Print an "Issuing:" line, then run a shell command.

    cmd("hostname")
    -> #(CST) 2020/02/07 10:37:50.223731 - Issuing: hostname
    -> gfwr802

Failures are reported through the printer, and returned as the exit code.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import TYPE_CHECKING

# ##-- end stdlib imports

# ##-- 3rd party imports
import sh

# ##-- end 3rd party imports

# ##-- 1st party imports
from pgm_parms.utils.printer import Printer

# ##-- end 1st party imports

if TYPE_CHECKING:
    from pgm_parms.control.catalog import ParmContext

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

def cmd(cmd_buf:str, test_mode:bool=False, *, printer:None|Printer=None) -> int:
    """ Print and run the command, returning its exit code.
      In test mode, only the issuing line is printed, and 0 is returned.
    """
    printer = printer or Printer()
    printer.print_issuing(cmd_buf, test_mode)
    if test_mode:
        return 0

    try:
        result = sh.bash("-c", cmd_buf, _return_cmd=True, _tty_out=False)
    except sh.ErrorReturnCode as err:
        printer.print_error("The prior shell command failed.")
        printer.print_vars({"rc": err.exit_code}, "rc", err=True)
        if bool(err.stderr):
            logging.info("%s", err.stderr.decode(errors="replace"))
        return err.exit_code
    except sh.CommandNotFound as err:
        printer.print_error("Shell Command Not Found:", err.args[0])
        return 127

    output = result.stdout.decode(errors="replace").rstrip("\n")
    if bool(output):
        printer.echo(output)

    logging.debug("(%s) Shell Cmd: %s", result.exit_code, cmd_buf)
    return result.exit_code

def t_cmd(ctx:ParmContext, cmd_buf:str, *, printer:None|Printer=None) -> int:
    """ Call cmd with the 'test_mode' parameter of the program """
    printer = printer or Printer.from_context(ctx)
    return cmd(cmd_buf, ctx.symbols.truthy("test_mode"), printer=printer)
