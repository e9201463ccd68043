#!/usr/bin/env python3
"""
Help text formatting for registered parameters.

    parm_help(ctx, "mw_toolkit", "0/1", "This indicates whether mw_toolkit should be installed.")
    ->  "  --mw_toolkit=<0/1>                         This indicates whether mw_toolkit should be installed.  The default value is "1"."

    pos_parm_help(ctx, "machine", "The name of the simics machine.")
    ->  "  MACHINE                                    The name of the simics machine.  The default value is "denali"."

The 'default' shown is the current value of the symbol,
so help should be rendered before parsing changes it.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import TYPE_CHECKING, Final

# ##-- end stdlib imports

# ##-- 1st party imports
from pgm_parms._structs.param_spec import ParamSpec
from pgm_parms.constants import COLUMN_WIDTH, STOCK_PARMS
from pgm_parms.enums import ParamKind_e
from pgm_parms.utils.paths import get_pgm_name

# ##-- end 1st party imports

if TYPE_CHECKING:
    from pgm_parms.control.catalog import ParmContext

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

STOCK_HELP : Final[dict[str, tuple[str, str]]] = {
    "test_mode" : ("0/1", "Go through all the motions but don't actually do anything substantial.  This is mainly to be used by the developer of {program}."),
    "quiet"     : ("0/1", "Print only essential information, i.e. it do not echo parameters, echo commands, print the total run time, etc."),
    "debug"     : ("0/1", "Print additional debug information."),
}

def _column_width(ctx:ParmContext, column_width:None|int) -> int:
    if column_width is not None:
        return column_width
    return ctx.config.on_fail(COLUMN_WIDTH).print.column_width()

def _default_text(ctx:ParmContext, name:str, print_default_text:bool) -> str:
    if not print_default_text:
        return ""
    return f'  The default value is "{ctx.symbols.lookup(name)}".'

def parm_help(ctx:ParmContext, name:str, data_desc:str="", help_text:str="", print_default_text:bool=True, column_width:None|int=None) -> str:
    """ The help line for a named parameter """
    width = _column_width(ctx, column_width)
    col1  = f"  {ParamSpec(name=name, data_desc=data_desc).key_str}"
    return f"{col1:<{width}}{help_text}{_default_text(ctx, name, print_default_text)}"

def pos_parm_help(ctx:ParmContext, name:str, help_text:str="", print_default_text:bool=True, column_width:None|int=None) -> str:
    """ The help line for a positional parameter, with its name in upper case """
    width = _column_width(ctx, column_width)
    col1  = f"  {ParamSpec(name=name, kind=ParamKind_e.positional).key_str}"
    return f"{col1:<{width}}{help_text}{_default_text(ctx, name, print_default_text)}"

def stock_help_text(ctx:ParmContext, *, program:None|str=None) -> list[str]:
    """ Help lines for any stock parameters (test_mode, quiet, debug) registered as long options """
    program = program or get_pgm_name().name
    stock   = ctx.config.on_fail(STOCK_PARMS).print.stock_parms()
    lines   = []
    for name in stock:
        if name not in ctx.named or name not in STOCK_HELP:
            continue
        data_desc, text = STOCK_HELP[name]
        lines.append(parm_help(ctx, name, data_desc, text.format(program=program)))

    return lines

def render_help(ctx:ParmContext, *, program:None|str=None, usage:None|str=None, description:None|str=None) -> str:
    """ Build a complete help text from the catalogs and any attached descriptions """
    program = program or get_pgm_name().name
    stock   = ctx.config.on_fail(STOCK_PARMS).print.stock_parms()
    pos     = ctx.positional.unique_names()
    if usage is None:
        pos_str = " ".join(x.upper() for x in pos)
        usage   = f"Usage: {program} [OPTIONS] {pos_str}".rstrip()

    lines = [usage, ""]
    if description:
        lines += [description, ""]

    if bool(pos):
        lines.append("positional parameters:")
        for name in pos:
            spec = ctx.positional.get(name)
            lines.append(pos_parm_help(ctx, name, spec.desc if spec else ""))
        lines.append("")

    named       = [x for x in ctx.named.unique_names() if x not in stock]
    stock_lines = stock_help_text(ctx, program=program)
    if bool(named) or bool(stock_lines):
        lines.append("parameters:")
        for name in named:
            spec = ctx.named.get(name)
            lines.append(parm_help(ctx, name, spec.data_desc if spec else "", spec.desc if spec else ""))
        lines += stock_lines
        lines.append("")

    return "\n".join(lines)
