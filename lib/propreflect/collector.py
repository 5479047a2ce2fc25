# propreflect/collector.py
# Copyright (C) 2026 the propreflect authors and contributors
# <see AUTHORS file>
#
# This module is part of propreflect and is released under
# the MIT License: https://www.opensource.org/licenses/mit-license.php

"""Collection of the methods visible on a class.

The class and each of its superclasses are walked from the most derived
class upwards, stopping at the runtime root types; for each class in the
chain its own methods are taken first, then the public methods of every
interface it names.  Methods are de-duplicated on their signature, see
:func:`.method_signature`.

"""

from __future__ import annotations

from typing import Dict
from typing import List
from typing import Optional
from typing import Type

from .introspector import MethodInfo
from .introspector import PythonIntrospector
from .introspector import TypeIntrospector
from .util.typing import type_name


def method_signature(method: MethodInfo) -> str:
    """Return the de-duplication key for ``method``.

    E.g.::

        str#getName
        NoneType#setName:str

    Overrides share a signature with the method they override only when
    return and parameter types are the same; a covariant override is kept
    as a separate entry.

    """
    sig = "%s#%s" % (type_name(method.return_type), method.name)
    if method.parameter_types:
        sig += ":" + ",".join(type_name(t) for t in method.parameter_types)
    return sig


def _add_unique_methods(
    unique: Dict[str, MethodInfo], methods: List[MethodInfo]
) -> None:
    for method in methods:
        if method.is_synthetic:
            continue
        unique.setdefault(method_signature(method), method)


def collect_class_methods(
    cls: Type, introspector: Optional[TypeIntrospector] = None
) -> List[MethodInfo]:
    """Return the de-duplicated methods visible on ``cls``, most derived
    first."""

    if introspector is None:
        introspector = PythonIntrospector()

    unique: Dict[str, MethodInfo] = {}
    current: Optional[type] = cls
    while current is not None and not introspector.is_root_type(current):
        _add_unique_methods(
            unique, list(introspector.declared_methods(current))
        )

        for iface in introspector.interfaces(current):
            _add_unique_methods(
                unique, list(introspector.interface_methods(iface))
            )

        current = introspector.superclass(current)

    return list(unique.values())
