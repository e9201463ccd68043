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

class StructError(BackendError):
    """ A Data structure was used incorrectly """
    pass

class EmptyListError(StructError):
    """ A required element was retrieved from an empty delimited list """
    pass

class DelimiterError(StructError):
    """ An element holding the list delimiter was added to a delimited list """
    pass
