##-- std imports
from __future__ import annotations

from typing import Final
##-- end std imports

PRINTER_NAME          : Final[str]       = "pgm_parms._printer"
CONSTANTS_FILE        : Final[str]       = "constants.toml"

DASH                  : Final[str]       = "-"
ASSIGN_DELIM          : Final[str]       = "="
LIST_DELIM            : Final[str]       = " "
FLAG_DEFAULT          : Final[str]       = "1"
HELP_NAME             : Final[str]       = "help"
HELP_SHORT            : Final[str]       = "-h"

COLUMN_WIDTH          : Final[int]       = 45
VAR_COL_WIDTH         : Final[int]       = 36
TIME_FMT              : Final[str]       = "#(%Z) %Y/%m/%d %H:%M:%S.%f - "
ERROR_MARK            : Final[str]       = "**ERROR**"
STOCK_PARMS           : Final[list[str]] = ["test_mode", "quiet", "debug"]

HEADER_VARS           : Final[list[str]] = ["command_line", "pid", "gpid", "uid", "gid", "host_name", "DISPLAY", "PWD"]

DEBUG_ENV             : Final[str]       = "DEBUG"
