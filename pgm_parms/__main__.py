#!/usr/bin/env python3
"""
The pgm_parms cli runner.

A small program which uses pgm_parms the way any hosting program would:
it declares the stock parameters, collects everything else as 'parms',
and prints the program header and footer.

    pgm-parms --debug one two three
"""
# Imports:
from __future__ import annotations

import logging as logmod
import sys

##-- logging
logging         = logmod.root
logging.setLevel(logmod.WARNING)
##-- end logging

def main() -> None:
    from pgm_parms.control.catalog import ParmContext
    from pgm_parms.control.dispatch import process_pgm_parms
    from pgm_parms.control.help import render_help
    from pgm_parms.utils.log_config import PgmLogConfig
    from pgm_parms.utils.paths import get_pgm_name
    from pgm_parms.utils.printer import Printer

    ctx     = ParmContext()
    log     = PgmLogConfig(ctx.config)
    log.setup()
    program = get_pgm_name(sys.argv[0])
    ctx.longoptions("test_mode=0", "quiet=0", "debug=0")
    ctx.pos_parms("parms")
    ctx.describe("parms", "Any number of values, collected into a single list.")

    def _help() -> None:
        Printer(config=ctx.config).echo(render_help(ctx,
                                                    program=program.name,
                                                    description="Show how the given parameters are classified."))

    ctx.set_help(_help)
    process_pgm_parms(ctx, program=program.file_path)

    printer = Printer.from_context(ctx)
    if printer.debugging:
        log.set_level(logmod.DEBUG)

    printer.qprint_pgm_header(ctx, program)
    printer.dprint_var("parm_list", " ".join(ctx.parm_list))
    printer.qprint_pgm_footer(program)

if __name__ == "__main__":
    main()
