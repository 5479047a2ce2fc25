# util/_collections.py
# Copyright (C) 2026 the propreflect authors and contributors
# <see AUTHORS file>
#
# This module is part of propreflect and is released under
# the MIT License: https://www.opensource.org/licenses/mit-license.php

"""Collection classes and helpers."""

from __future__ import annotations

from typing import Any
from typing import Dict
from typing import TypeVar

_KT = TypeVar("_KT")
_VT = TypeVar("_VT")


class ImmutableContainer:
    def _immutable(self, *arg: Any, **kw: Any) -> Any:
        raise TypeError("%s object is immutable" % self.__class__.__name__)

    __delitem__ = __setitem__ = __setattr__ = _immutable


class immutabledict(ImmutableContainer, Dict[_KT, _VT]):
    clear = pop = popitem = setdefault = update = ImmutableContainer._immutable

    def __new__(cls, *args: Any) -> immutabledict[_KT, _VT]:
        new = dict.__new__(cls)
        dict.__init__(new, *args)
        return new

    def __init__(self, *args: Any):
        pass

    def __reduce__(self) -> Any:
        return immutabledict, (dict(self),)

    def __repr__(self) -> str:
        return "immutabledict(%s)" % dict.__repr__(self)


EMPTY_DICT: immutabledict[Any, Any] = immutabledict()


def coerce_to_immutabledict(d: Dict[_KT, _VT]) -> immutabledict[_KT, _VT]:
    if not d:
        return EMPTY_DICT
    elif isinstance(d, immutabledict):
        return d
    else:
        return immutabledict(d)
