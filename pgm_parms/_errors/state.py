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

from .base import BackendError

class StateError(BackendError):
    """ The environment the program runs in was not as expected """
    pass

class LocationError(StateError):
    """ A Path was expected to exist, but didn't """
    pass
