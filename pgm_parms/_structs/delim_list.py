#!/usr/bin/env python3
"""
Delimited Lists.

A sequence of tokens which is stored, and handed around,
as a single string with the tokens separated by a delimiter:

    "apple banana cherry"

DelimList is the explicit sequence form,
and the module functions work directly on the string form:

- search_list           : whole token membership
- add_list_element      : push to the front or back
- retrieve_list_element : get (and maybe remove) the front or back

An empty list is the empty string. No element may contain the delimiter.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import TYPE_CHECKING

# ##-- end stdlib imports

# ##-- 1st party imports
from pgm_parms.constants import LIST_DELIM
from pgm_parms.enums import ListPos_e
from pgm_parms.errors import DelimiterError, EmptyListError

# ##-- end 1st party imports

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from typing import Self

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class DelimList:
    """ An ordered sequence of str tokens, rendered with a delimiter between them """

    def __init__(self, items:Iterable[str]=(), *, delim:str=LIST_DELIM, name:str="list"):
        if not bool(delim):
            raise DelimiterError("A Delimited List needs a delimiter", name)

        self.delim   = delim
        self.name    = name
        self._items  : list[str] = []
        for item in items:
            self._items.append(self._check(item))

    @classmethod
    def from_str(cls, text:str, *, delim:str=LIST_DELIM, name:str="list") -> Self:
        """ Split the string form of a list. An empty string is an empty list """
        if not bool(text):
            return cls(delim=delim, name=name)

        return cls(text.split(delim), delim=delim, name=name)

    def _check(self, element:str) -> str:
        if self.delim in element:
            raise DelimiterError("Element contains the delimiter of %s: %s", self.name, repr(element))

        return element

    def __str__(self) -> str:
        return self.delim.join(self._items)

    def __repr__(self) -> str:
        return f"<DelimList({self.name}): {self._items!r}>"

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __contains__(self, element:object) -> bool:
        return element in self._items

    def __eq__(self, other:object) -> bool:
        match other:
            case DelimList():
                return self._items == other._items
            case str():
                return str(self) == other
            case _:
                return NotImplemented

    def contains(self, element:str) -> bool:
        """ True only for a whole token, never a substring of one """
        return element in self._items

    def push(self, element:str, pos:ListPos_e|str=ListPos_e.back) -> Self:
        """ Add an element to the front or back, returning the list """
        element = self._check(element)
        match ListPos_e(pos):
            case ListPos_e.front:
                self._items.insert(0, element)
            case ListPos_e.back:
                self._items.append(element)

        return self

    def pop(self, pos:ListPos_e|str=ListPos_e.back, *, remove:bool=True, fail_on_empty:bool=False) -> str:
        """ Retrieve the front or back element.

          When empty, either fail, or return an empty element.
          When not removing, the list is unchanged.
        """
        if not bool(self._items):
            if fail_on_empty:
                raise EmptyListError("%s is empty and therefore no entry may be retrieved from it.", self.name)
            return ""

        match ListPos_e(pos), remove:
            case ListPos_e.front, True:
                return self._items.pop(0)
            case ListPos_e.front, False:
                return self._items[0]
            case ListPos_e.back, True:
                return self._items.pop()
            case ListPos_e.back, False:
                return self._items[-1]

    def copy(self) -> DelimList:
        return DelimList(self._items, delim=self.delim, name=self.name)

def search_list(element:str, list_str:str, delim:str=LIST_DELIM) -> bool:
    """ Return True if the element is a whole entry in the delimited string """
    return DelimList.from_str(list_str, delim=delim).contains(element)

def add_list_element(element:str, list_str:str, pos:ListPos_e|str=ListPos_e.back, delim:str=LIST_DELIM) -> str:
    """ Add an element to a delimited string, returning the new string """
    return str(DelimList.from_str(list_str, delim=delim).push(element, pos))

def retrieve_list_element(list_str:str, pos:ListPos_e|str=ListPos_e.back, delim:str=LIST_DELIM, *, remove:bool=False, fail_on_empty:bool=False, name:str="list") -> tuple[str, str]:
    """ Retrieve an element from a delimited string.
      returns (element, resulting list string)
    """
    as_list = DelimList.from_str(list_str, delim=delim, name=name)
    element = as_list.pop(pos, remove=remove, fail_on_empty=fail_on_empty)
    return element, str(as_list)
