#!/usr/bin/env python3
"""
pgm_parms : Catalog driven processing of program parameters.

Programs declare the long options and positional parameters they accept,
then have their args classified and bound into a symbol table:

    ctx = ParmContext(help=my_help)
    ctx.longoptions("debug=0", "quiet=0")
    ctx.pos_parms("machine=denali")
    result = process_pgm_parms(ctx)
    ctx.symbols['machine']

"""
# Imports:
from __future__ import annotations

import logging as logmod
from importlib.metadata import version

from pgm_parms.control.catalog import ParamCatalog, ParmContext
from pgm_parms.control.dispatch import dispatch_help, process_pgm_parms
from pgm_parms.enums import ListPos_e, ParamKind_e, ParseStatus_e
from pgm_parms.parsers.parser import ParseResult, PgmParmParser

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

__version__ = version("pgm-parms")
