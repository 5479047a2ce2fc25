# propreflect/invoker.py
# Copyright (C) 2026 the propreflect authors and contributors
# <see AUTHORS file>
#
# This module is part of propreflect and is released under
# the MIT License: https://www.opensource.org/licenses/mit-license.php

"""Invokers perform a single get or set of a property on a target object.

An invoker is backed either by an accessor method or by a field;
:class:`.AmbiguousMethodInvoker` stands in for an accessor which could not be
resolved and fails every time it's used.

"""

from __future__ import annotations

import abc
from typing import Any
from typing import Optional
from typing import Sequence

from . import exc
from .introspector import FieldInfo
from .introspector import MethodInfo
from .util.typing import type_to_class


class Invoker(abc.ABC):
    """Perform one get or set operation against a target."""

    __slots__ = ()

    @abc.abstractmethod
    def invoke(self, target: Any, *args: Any) -> Any:
        ...

    @property
    @abc.abstractmethod
    def type(self) -> type:
        """The class of the value read or written."""


class MethodInvoker(Invoker):
    """Invoke an accessor method.

    The invoker's type is the parameter type of a one-argument method,
    otherwise its return type.

    """

    __slots__ = ("method", "_type")

    def __init__(self, method: MethodInfo):
        self.method = method
        if method.parameter_count == 1:
            self._type = method.parameter_types[0]
        else:
            self._type = method.return_type

    @property
    def type(self) -> type:
        return self._type

    def invoke(self, target: Any, *args: Any) -> Any:
        return self.method.call(target, *args)

    def __repr__(self) -> str:
        return "<%s %r>" % (self.__class__.__name__, self.method)


class AmbiguousMethodInvoker(MethodInvoker):
    """Placeholder for an accessor with conflicting candidates.

    Invoking it raises :class:`.exc.AmbiguousAccessorError`.

    """

    __slots__ = ("message", "property_name", "declaring_class", "types")

    def __init__(
        self,
        method: MethodInfo,
        message: str,
        property_name: Optional[str] = None,
        types: Sequence[Any] = (),
    ):
        super().__init__(method)
        self.message = message
        self.property_name = property_name
        self.declaring_class = method.declaring_class
        self.types = tuple(types)

    def invoke(self, target: Any, *args: Any) -> Any:
        raise exc.AmbiguousAccessorError(
            self.message,
            property_name=self.property_name,
            declaring_class=self.declaring_class,
            types=self.types,
        )


class GetFieldInvoker(Invoker):
    __slots__ = ("field",)

    def __init__(self, field: FieldInfo):
        self.field = field

    @property
    def type(self) -> type:
        return type_to_class(self.field.hint)

    def invoke(self, target: Any, *args: Any) -> Any:
        return self.field.get(target)

    def __repr__(self) -> str:
        return "<%s %r>" % (self.__class__.__name__, self.field)


class SetFieldInvoker(Invoker):
    __slots__ = ("field",)

    def __init__(self, field: FieldInfo):
        self.field = field

    @property
    def type(self) -> type:
        return type_to_class(self.field.hint)

    def invoke(self, target: Any, *args: Any) -> Any:
        (value,) = args
        self.field.set(target, value)
        return None

    def __repr__(self) -> str:
        return "<%s %r>" % (self.__class__.__name__, self.field)
