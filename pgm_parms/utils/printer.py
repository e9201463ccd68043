#!/usr/bin/env python3
"""
The Printer: user facing, formatted, output.

Everything is written through the 'pgm_parms._printer' logger,
so output can be redirected or silenced with normal logging control.

    printer.print_time("Hello.")
    -> #(CST) 2020/02/06 17:53:42.833900 - Hello.

    printer.print_error("Invalid parameter.")
    -> #(CST) 2020/02/07 14:15:16.108436 - **ERROR** Invalid parameter.   (to stderr)

    printer.print_var("var1", 5)
    -> var1:                               5

Every print_* method also has two gated forms:
- qprint_* : does nothing when the printer is quiet
- dprint_* : only prints when $DEBUG is truthy, or when it is unset and the printer is in debug mode

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import datetime
import functools as ftz
import getpass
import logging as logmod
import os
import socket
from typing import TYPE_CHECKING, Any

# ##-- end stdlib imports

# ##-- 1st party imports
from pgm_parms._structs.symbol_table import is_truthy
from pgm_parms.config import default_config
from pgm_parms.constants import (DEBUG_ENV, ERROR_MARK, HEADER_VARS,
                                 PRINTER_NAME, TIME_FMT, VAR_COL_WIDTH)
from pgm_parms.utils.log_config import PgmLogConfig
from pgm_parms.utils.paths import ProgramInfo, get_pgm_name

# ##-- end 1st party imports

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from tomlguard import TomlGuard
    from pgm_parms.control.catalog import ParmContext

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

env : dict = os.environ

def _current_user() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return ""

class Printer:
    """ Formatted printing for programs using pgm_parms """

    _gates : tuple[str, ...] = ("q", "d")

    def __init__(self, *, quiet:bool=False, debug:bool=False, config:None|TomlGuard=None):
        self.quiet    = quiet
        self.debug    = debug
        self.config   = config or default_config()
        self._logger  = logmod.getLogger(PRINTER_NAME)
        if not bool(self._logger.handlers):
            PgmLogConfig(self.config)

    @classmethod
    def from_context(cls, ctx:ParmContext) -> Printer:
        """ A printer which respects the 'quiet' and 'debug' parameters of a program """
        return cls(quiet=ctx.symbols.truthy("quiet"),
                   debug=ctx.symbols.truthy("debug"),
                   config=ctx.config)

    def __getattr__(self, name:str) -> Callable:
        """ Build the q and d gated versions of print methods """
        gate, base = name[:1], name[1:]
        if gate not in self._gates or not (base.startswith("print_") or base == "echo"):
            raise AttributeError(name)

        func = getattr(self, base)

        @ftz.wraps(func)
        def _gated(*args, **kwargs) -> None:
            match gate:
                case "q" if self.quiet:
                    return
                case "d" if not self.debugging:
                    return
                case _:
                    func(*args, **kwargs)

        return _gated

    @property
    def debugging(self) -> bool:
        """ $DEBUG, when set, overrides the debug flag """
        match env.get(DEBUG_ENV, None):
            case None | "":
                return self.debug
            case str() as val:
                return is_truthy(val)

    def timestamp(self) -> str:
        fmt = self.config.on_fail(TIME_FMT).print.time_fmt()
        return datetime.datetime.now().astimezone().strftime(fmt)

    def echo(self, *parts:Any) -> None:
        self._logger.info("%s", " ".join(str(x) for x in parts))

    def print_time(self, *parts:Any) -> None:
        """ Print a time stamp followed by the parts """
        self._logger.info("%s%s", self.timestamp(), " ".join(str(x) for x in parts))

    def print_error(self, *parts:Any) -> None:
        """ Print a time stamped error line to stderr """
        self._logger.error("%s%s", self.timestamp(), " ".join(str(x) for x in (ERROR_MARK, *parts)))

    def print_issuing(self, cmd_buf:str, test_mode:bool=False) -> None:
        """ Print the command that is about to be issued """
        if test_mode:
            self.print_time(f"Issuing (test_mode): {cmd_buf}")
        else:
            self.print_time(f"Issuing: {cmd_buf}")

    def print_var(self, name:str, value:Any, indent:int=0, col1_width:None|int=None, *, err:bool=False) -> None:
        """ Print a name and value in two columns.
          col1_width is the total width of the first column, including the indent.
        """
        if col1_width is None:
            col1_width = self.config.on_fail(VAR_COL_WIDTH).print.var_col_width()

        width = max(col1_width - indent, 0)
        line  = f"{'':<{indent}}{name + ':':<{width}}{value}"
        if err:
            self._logger.error("%s", line)
        else:
            self._logger.info("%s", line)

    def print_vars(self, values:Mapping[str, Any], *names:str, err:bool=False) -> None:
        """ print_var each name, looking up its value. Missing values print as blank """
        for name in names:
            self.print_var(name, values.get(name, ""), err=err)

    def print_pgm_header(self, ctx:ParmContext, program:None|ProgramInfo=None) -> None:
        """ Print the program header, with its environment and all parameter values """
        program  = program or get_pgm_name()
        pid      = os.getpid()
        user     = _current_user()
        values   = {
            "command_line" : ctx.command_line,
            "pid"          : pid,
            "gpid"         : os.getpgid(pid),
            "uid"          : f"{os.getuid()} ({user})",
            "gid"          : f"{os.getgid()} ({user})",
            "host_name"    : socket.gethostname(),
            "DISPLAY"      : env.get("DISPLAY", ""),
            "PWD"          : os.getcwd(),
        }
        values.update(ctx.symbols)
        self.echo()
        self.print_time(f"Running {program.name}.")
        self.print_time("Program parameter values, etc.:")
        self.echo()
        self.print_vars(values, *HEADER_VARS, *ctx.named.unique_names(), *ctx.positional.unique_names())
        self.echo()

    def print_pgm_footer(self, program:None|ProgramInfo=None) -> None:
        program = program or get_pgm_name()
        self.echo()
        self.print_time(f"Finished running {program.name}.")
        self.echo()
