#!/usr/bin/env python3
"""
The Classifier State Machine, and the Parse State it acts on.

Each token moves the machine:

    Ready --classify--> Named | Positional | Unrecognized | Finished
    Named --bind------> Ready | Help
    Positional --bind-> Ready

'progress' is the composite event which does the right one of those.
Help, Unrecognized and Finished are final.
"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import TYPE_CHECKING, NamedTuple

# ##-- end stdlib imports

# ##-- 3rd party imports
from statemachine import State, StateMachine

# ##-- end 3rd party imports

# ##-- 1st party imports
from pgm_parms._structs.name_value import parse_name_value
from pgm_parms._structs.symbol_table import is_truthy
from pgm_parms.constants import (ASSIGN_DELIM, DASH, FLAG_DEFAULT, HELP_NAME,
                                 HELP_SHORT, LIST_DELIM)
from pgm_parms.enums import ListPos_e
from pgm_parms.errors import UnrecognizedParamError

# ##-- end 1st party imports

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pgm_parms.control.catalog import ParmContext

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class Token(NamedTuple):
    raw      : str
    stripped : str
    name     : str
    value    : str

class ParmParseModel:
    """ The Parse State of a single pass over the args.

      queue           : positional names not yet filled
      last_positional : the most recently filled positional
      parm_list       : every name bound, in order, with duplicates
      command_line    : the program followed by the raw args
    """

    def __init__(self, ctx:ParmContext, args:Sequence[str], *, program:str):
        parse_conf           = ctx.config.on_fail({}).parse()
        self._ctx            = ctx
        self._dash           = parse_conf.get("dash", DASH)
        self._assign         = parse_conf.get("assign_delim", ASSIGN_DELIM)
        self._list_delim     = parse_conf.get("list_delim", LIST_DELIM)
        self._flag_default   = parse_conf.get("flag_default", FLAG_DEFAULT)
        self._help_name      = parse_conf.get("help_name", HELP_NAME)
        self._help_short     = parse_conf.get("help_short", HELP_SHORT)

        self.remaining       : list[str]              = list(args)
        self.queue                                    = ctx.positional.queue(delim=self._list_delim)
        self.last_positional : str                    = ""
        self.last_named      : str                    = ""
        self.parm_list       : list[str]              = []
        self.command_line    : str                    = " ".join([program, *args])
        self.error           : None|UnrecognizedParamError = None
        self._current        : None|Token             = None

    def tokenize(self, raw:str) -> Token:
        """ -h -> --help, strip leading dashes, then split name=value """
        if raw == self._help_short:
            raw = f"{self._dash * 2}{self._help_name}"

        stripped     = raw.lstrip(self._dash)
        name, value  = parse_name_value(stripped, delim=self._assign, default=self._flag_default)
        return Token(raw, stripped, name, value)

    @property
    def current(self) -> Token:
        if self._current is None:
            self._current = self.tokenize(self.remaining[0])
        return self._current

    def _consume(self) -> Token:
        token         = self.current
        self._current = None
        self.remaining.pop(0)
        return token

    ##-- conditions

    def tokens_exhausted(self) -> bool:
        return not bool(self.remaining)

    def token_is_named(self) -> bool:
        name = self.current.name
        return name in self._ctx.named or name == self._help_name

    def slot_available(self) -> bool:
        return bool(self.queue) or bool(self.last_positional)

    def help_is_requested(self) -> bool:
        return self.last_named == self._help_name and is_truthy(self._ctx.symbols.lookup(self._help_name))

    ##-- end conditions

    ##-- actions

    def bind_named(self) -> None:
        token                        = self._consume()
        logging.debug("Named Param: %s = %s", token.name, repr(token.value))
        self._ctx.symbols[token.name] = token.value
        self.parm_list.append(token.name)
        self.last_named              = token.name

    def bind_positional(self) -> None:
        """ Fill the next positional slot.
          Once all slots are filled, further tokens accumulate onto the last one.
        """
        token     = self._consume()
        candidate = self.queue.pop(ListPos_e.front, remove=True, fail_on_empty=False)
        if not bool(candidate):
            candidate = self.last_positional

        assert(bool(candidate))
        if candidate == self.last_positional:
            logging.debug("Accumulating Positional: %s += %s", candidate, repr(token.stripped))
            current = self._ctx.symbols.lookup(candidate)
            delim   = self._list_delim if bool(current) else ""
            # a plain append, tokens may hold the delimiter
            self._ctx.symbols[candidate] = f"{current}{delim}{token.stripped}"
        else:
            logging.debug("Positional Param: %s = %s", candidate, repr(token.stripped))
            self._ctx.symbols[candidate] = token.stripped

        self.last_positional = candidate
        self.last_named      = ""
        self.parm_list.append(candidate)

    def reject(self) -> None:
        token      = self._consume()
        logging.info("Unrecognized Param: %s", token.raw)
        self.error = UnrecognizedParamError("%s is an unrecognized parameter.", token.name)

    ##-- end actions

class ParmParseMachine(StateMachine):
    """
      A Statemachine classifying and binding each arg in turn
    """
    # State
    Ready        = State(initial=True)
    Named        = State()
    Positional   = State()
    Help         = State(final=True)
    Unrecognized = State(final=True)
    Finished     = State(final=True)

    # Events
    classify = (
        Ready.to(Finished, cond="tokens_exhausted")
        | Ready.to(Named, cond="token_is_named")
        | Ready.to(Positional, cond="slot_available")
        | Ready.to(Unrecognized)
        )

    bind = (
        Named.to(Help, cond="help_is_requested")
        | Named.to(Ready)
        | Positional.to(Ready)
        )

    # Composite Events
    progress = (classify | bind)

    # Listeners
    def on_enter_Named(self) -> None:
        self.model.bind_named()

    def on_enter_Positional(self) -> None:
        self.model.bind_positional()

    def on_enter_Unrecognized(self) -> None:
        self.model.reject()

    def on_enter_Help(self) -> None:
        logging.info("Help Requested")

    def on_enter_Finished(self) -> None:
        logging.debug("All Args Consumed")
