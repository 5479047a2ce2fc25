# propreflect/inspection.py
# Copyright (C) 2026 the propreflect authors and contributors
# <see AUTHORS file>
#
# This module is part of propreflect and is released under
# the MIT License: https://www.opensource.org/licenses/mit-license.php

"""Base inspect API.

:func:`.inspect` provides access to a contextual object
regarding a subject.

Passing a class returns the :class:`.Reflector` for that class, built and
cached by the default :class:`.ReflectorFactory`.  Other parts of
propreflect, such as :class:`.Reflector` itself, register themselves with
the "inspection registry" here so that they may return a context object
given a certain kind of argument.
"""

from __future__ import annotations

from typing import Any
from typing import Callable
from typing import Dict
from typing import Type
from typing import TypeVar

from . import exc

_T = TypeVar("_T", bound=Any)

_registrars: Dict[type, Callable[[Any], Any]] = {}


def inspect(subject: Any, raiseerr: bool = True) -> Any:
    """Produce an inspection object for the given target.

    :param subject: the subject to be inspected.
    :param raiseerr: When ``True``, if the given subject
     does not correspond to a known inspection system,
     :class:`.exc.NoInspectionAvailable` is raised.
     If ``False``, ``None`` is returned.

    """
    type_ = type(subject)
    for cls in type_.__mro__:
        if cls in _registrars:
            reg = _registrars[cls]
            ret = reg(subject)
            if ret is not None:
                break
    else:
        reg = ret = None

    if raiseerr and (reg is None or ret is None):
        raise exc.NoInspectionAvailable(
            "No inspection system is "
            "available for object of type %s" % type_
        )
    return ret


def _inspects(*types: type) -> Callable[[_T], _T]:
    def decorate(fn_or_cls: _T) -> _T:
        for type_ in types:
            if type_ in _registrars:
                raise AssertionError(
                    "Type %s is already " "registered" % type_
                )
            _registrars[type_] = fn_or_cls
        return fn_or_cls

    return decorate


def _self_inspects(cls: Type[_T]) -> Type[_T]:
    _inspects(cls)(lambda subject: subject)
    return cls
