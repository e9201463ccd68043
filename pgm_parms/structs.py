#!/usr/bin/env python3
"""
Public Access point for pgm_parms Structures
"""
from __future__ import annotations

from pgm_parms._structs.delim_list import (DelimList, add_list_element,
                                           retrieve_list_element, search_list)
from pgm_parms._structs.logger_spec import LoggerSpec
from pgm_parms._structs.name_value import NameValue, parse_name_value
from pgm_parms._structs.param_spec import ParamSpec
from pgm_parms._structs.symbol_table import SymbolTable, is_truthy
