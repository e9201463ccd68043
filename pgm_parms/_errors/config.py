#!/usr/bin/env python3
"""

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from .base import UserError

class ConfigError(UserError):
    """ A Failure in the configuration of a program, or of pgm_parms """
    pass

class InvalidConfigError(ConfigError):
    """ A config file could not be read, or held the wrong types """
    pass

class MissingHelpError(ConfigError):
    """ Help was requested, but the hosting program defined no help collaborator """
    pass
