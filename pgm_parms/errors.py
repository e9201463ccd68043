#!/usr/bin/env python3
"""
These are the pgm_parms specific errors that can occur
"""
# Imports:
from __future__ import annotations

# ##-- 1st party imports
from pgm_parms._errors.base import PgmParmError, BackendError, UserError
from pgm_parms._errors.config import ConfigError, InvalidConfigError, MissingHelpError
from pgm_parms._errors.parse import ParseError, UnrecognizedParamError
from pgm_parms._errors.state import StateError, LocationError
from pgm_parms._errors.struct import StructError, EmptyListError, DelimiterError

# ##-- end 1st party imports
