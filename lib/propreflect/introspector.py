# propreflect/introspector.py
# Copyright (C) 2026 the propreflect authors and contributors
# <see AUTHORS file>
#
# This module is part of propreflect and is released under
# the MIT License: https://www.opensource.org/licenses/mit-license.php

"""Runtime type introspection capability.

:class:`.TypeIntrospector` is the seam between the :class:`.Reflector` and
the host runtime's own reflection facilities.  It answers a fixed set of
questions about a class: which methods, fields and constructors it
declares, what its superclass and "interfaces" are, whether it is a value
record, and what a generic return / parameter / field type resolves to
against a given owning class.

:class:`.PythonIntrospector` is the implementation used by default.  Its
mapping onto Python's object model is:

* declared methods - plain functions, ``staticmethod`` and ``classmethod``
  objects in the class ``__dict__``; record components (frozen dataclass
  fields, named tuple fields) are presented as zero-argument accessors;
* superclass - the first entry of ``__bases__`` which isn't a runtime
  root type; interfaces - the remaining such entries (mixins, ABCs,
  protocols);
* declared fields - annotated names, ``__slots__`` entries, plain data
  attributes and ``property`` objects of the class body;
* synthetic members - dunder protocol methods and named tuple helpers.

"""

from __future__ import annotations

import abc
import enum
import inspect
import types
import typing
from typing import Any
from typing import Dict
from typing import List
from typing import Optional
from typing import Sequence
from typing import Tuple

from . import util
from .util import typing as typing_util

_ROOT_MODULES = frozenset(
    (
        "builtins",
        "typing",
        "typing_extensions",
        "abc",
        "collections.abc",
        "_collections_abc",
    )
)

_NAMEDTUPLE_HELPERS = frozenset(("_asdict", "_replace", "_make"))

# bookkeeping attributes the runtime places in a class body
_RUNTIME_ATTRIBUTES = frozenset(
    (
        "_abc_impl",
        "_is_protocol",
        "_is_runtime_protocol",
        "_fields",
        "_field_defaults",
    )
)

_VAR_KINDS = (
    inspect.Parameter.VAR_POSITIONAL,
    inspect.Parameter.VAR_KEYWORD,
)


class MethodKind(enum.Enum):
    FUNCTION = "function"
    STATICMETHOD = "staticmethod"
    CLASSMETHOD = "classmethod"
    COMPONENT = "component"


class FieldKind(enum.Enum):
    ANNOTATION = "annotation"
    SLOT = "slot"
    ATTRIBUTE = "attribute"
    PROPERTY = "property"


class MethodInfo:
    """Describes one method declared by a class.

    ``return_type`` and ``parameter_types`` are erased runtime classes,
    suitable for identity and subclass comparison;  ``return_hint`` and
    ``parameter_hints`` are the annotations as written, which may still
    refer to type variables of the declaring class.

    """

    __slots__ = (
        "name",
        "declaring_class",
        "kind",
        "descriptor",
        "return_hint",
        "parameter_hints",
        "return_type",
        "parameter_types",
        "is_synthetic",
    )

    def __init__(
        self,
        name: str,
        declaring_class: type,
        kind: MethodKind,
        descriptor: Any,
        return_hint: Any = object,
        parameter_hints: Sequence[Any] = (),
        is_synthetic: bool = False,
    ):
        self.name = name
        self.declaring_class = declaring_class
        self.kind = kind
        self.descriptor = descriptor
        self.return_hint = return_hint
        self.parameter_hints = tuple(parameter_hints)
        self.return_type = typing_util.type_to_class(return_hint)
        self.parameter_types = tuple(
            typing_util.type_to_class(hint) for hint in self.parameter_hints
        )
        self.is_synthetic = is_synthetic

    @property
    def parameter_count(self) -> int:
        return len(self.parameter_hints)

    def call(self, target: Any, *args: Any) -> Any:
        """Call the method against ``target``.

        Plain methods are looked up on ``target`` by name, so that the
        implementation which ``target.name(*args)`` would run is the one
        called, even when this :class:`.MethodInfo` was recorded from
        another class in the hierarchy.

        """
        if self.kind is MethodKind.COMPONENT:
            return getattr(target, self.name)
        elif self.kind is MethodKind.FUNCTION:
            return getattr(target, self.name)(*args)
        bound = self.descriptor.__get__(target, type(target))
        return bound(*args)

    def __repr__(self) -> str:
        return "<MethodInfo %s.%s(%s) -> %s>" % (
            self.declaring_class.__qualname__,
            self.name,
            ", ".join(typing_util.type_name(t) for t in self.parameter_types),
            typing_util.type_name(self.return_type),
        )


class FieldInfo:
    """Describes one field declared by a class."""

    __slots__ = (
        "name",
        "declaring_class",
        "kind",
        "hint",
        "is_static",
        "is_final",
        "is_read_only",
    )

    def __init__(
        self,
        name: str,
        declaring_class: type,
        kind: FieldKind,
        hint: Any = object,
        is_static: bool = False,
        is_final: bool = False,
        is_read_only: bool = False,
    ):
        self.name = name
        self.declaring_class = declaring_class
        self.kind = kind
        self.hint = hint
        self.is_static = is_static
        self.is_final = is_final
        self.is_read_only = is_read_only

    def get(self, target: Any) -> Any:
        if self.is_static:
            return getattr(self.declaring_class, self.name)
        return getattr(target, self.name)

    def set(self, target: Any, value: Any) -> None:
        if self.is_static:
            setattr(self.declaring_class, self.name, value)
        else:
            setattr(target, self.name, value)

    def __repr__(self) -> str:
        return "<FieldInfo %s.%s (%s)>" % (
            self.declaring_class.__qualname__,
            self.name,
            self.kind.value,
        )


class ConstructorInfo:
    """Describes the constructor of a class.

    ``parameter_count`` is the number of arguments which must be passed;
    calling the :class:`.ConstructorInfo` builds a new instance.

    """

    __slots__ = ("declaring_class", "parameter_count")

    def __init__(self, declaring_class: type, parameter_count: int):
        self.declaring_class = declaring_class
        self.parameter_count = parameter_count

    def __call__(self, *args: Any, **kw: Any) -> Any:
        return self.declaring_class(*args, **kw)

    def __repr__(self) -> str:
        return "<ConstructorInfo %s (%d required)>" % (
            self.declaring_class.__qualname__,
            self.parameter_count,
        )


class TypeIntrospector(abc.ABC):
    """Capability interface over the runtime's reflection facilities."""

    @abc.abstractmethod
    def is_root_type(self, cls: type) -> bool:
        """True if hierarchy walks stop at ``cls``."""

    @abc.abstractmethod
    def declared_methods(self, cls: type) -> Sequence[MethodInfo]:
        """Methods declared directly on ``cls``, in declaration order."""

    @abc.abstractmethod
    def interface_methods(self, iface: type) -> Sequence[MethodInfo]:
        """Public methods of ``iface``, including inherited ones."""

    @abc.abstractmethod
    def declared_fields(self, cls: type) -> Sequence[FieldInfo]:
        """Fields declared directly on ``cls``, private ones included."""

    @abc.abstractmethod
    def declared_constructors(self, cls: type) -> Sequence[ConstructorInfo]:
        """Constructors declared by ``cls``, regardless of visibility."""

    @abc.abstractmethod
    def superclass(self, cls: type) -> Optional[type]:
        """The superclass of ``cls``, or None at a root type."""

    @abc.abstractmethod
    def interfaces(self, cls: type) -> Sequence[type]:
        """Interfaces directly implemented by ``cls``."""

    @abc.abstractmethod
    def is_record(self, cls: type) -> bool:
        """True if ``cls`` is an immutable value record."""

    @abc.abstractmethod
    def resolve_return_type(self, method: MethodInfo, owner: type) -> Any:
        """Return annotation of ``method`` as seen from ``owner``."""

    @abc.abstractmethod
    def resolve_parameter_types(
        self, method: MethodInfo, owner: type
    ) -> Sequence[Any]:
        """Parameter annotations of ``method`` as seen from ``owner``."""

    @abc.abstractmethod
    def resolve_field_type(self, field: FieldInfo, owner: type) -> Any:
        """Annotation of ``field`` as seen from ``owner``."""


class PythonIntrospector(TypeIntrospector):
    """:class:`.TypeIntrospector` implementation for Python classes."""

    def is_root_type(self, cls: type) -> bool:
        return cls is object or cls.__module__ in _ROOT_MODULES

    def superclass(self, cls: type) -> Optional[type]:
        for base in cls.__bases__:
            if not self.is_root_type(base):
                return base
        return None

    def interfaces(self, cls: type) -> Sequence[type]:
        superclass = self.superclass(cls)
        return [
            base
            for base in cls.__bases__
            if base is not superclass and not self.is_root_type(base)
        ]

    def is_record(self, cls: type) -> bool:
        return util.is_frozen_dataclass(cls) or util.is_namedtuple_class(cls)

    def declared_methods(self, cls: type) -> Sequence[MethodInfo]:
        methods = self._record_components(cls)

        for name, value in vars(cls).items():
            if isinstance(value, staticmethod):
                kind, fn, bound = MethodKind.STATICMETHOD, value.__func__, 0
            elif isinstance(value, classmethod):
                kind, fn, bound = MethodKind.CLASSMETHOD, value.__func__, 1
            elif isinstance(value, types.FunctionType):
                kind, fn, bound = MethodKind.FUNCTION, value, 1
            else:
                continue

            params = self._parameters(fn, bound)
            hints = self._function_hints(fn)
            methods.append(
                MethodInfo(
                    name,
                    cls,
                    kind,
                    value,
                    return_hint=hints.get("return", object),
                    parameter_hints=[
                        hints.get(param.name, object) for param in params
                    ],
                    is_synthetic=self._is_synthetic(cls, name),
                )
            )
        return methods

    def interface_methods(self, iface: type) -> Sequence[MethodInfo]:
        return [
            method
            for klass in iface.__mro__
            if not self.is_root_type(klass)
            for method in self.declared_methods(klass)
            if not method.name.startswith("_")
        ]

    def declared_fields(self, cls: type) -> Sequence[FieldInfo]:
        namespace = vars(cls)
        annotations = self._class_annotations(cls)
        dataclass_names = {f.name for f in util.local_dataclass_fields(cls)}
        fields: List[FieldInfo] = []
        seen = set()

        for name, hint in annotations.items():
            final = typing_util.is_final(hint)
            static = typing_util.is_classvar(hint) or (
                final and name in namespace and name not in dataclass_names
            )
            declared = typing_util.strip_qualifiers(hint)
            if declared is Any and name in namespace:
                declared = type(namespace[name])
            seen.add(name)
            fields.append(
                FieldInfo(
                    name,
                    cls,
                    FieldKind.ANNOTATION,
                    declared,
                    is_static=static,
                    is_final=final,
                )
            )

        slots = namespace.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in seen or name in ("__dict__", "__weakref__"):
                continue
            seen.add(name)
            fields.append(FieldInfo(name, cls, FieldKind.SLOT))

        for name, value in namespace.items():
            if name in seen or name in _RUNTIME_ATTRIBUTES:
                continue
            if isinstance(value, property):
                hint = (
                    self._function_hints(value.fget).get("return", object)
                    if value.fget is not None
                    else object
                )
                fields.append(
                    FieldInfo(
                        name,
                        cls,
                        FieldKind.PROPERTY,
                        hint,
                        is_read_only=value.fset is None,
                    )
                )
            elif (
                isinstance(value, type)
                or callable(value)
                or hasattr(type(value), "__get__")
            ):
                continue
            else:
                fields.append(
                    FieldInfo(
                        name,
                        cls,
                        FieldKind.ATTRIBUTE,
                        type(value),
                        is_static=True,
                    )
                )
        return fields

    def declared_constructors(self, cls: type) -> Sequence[ConstructorInfo]:
        try:
            sig = inspect.signature(cls)
        except (TypeError, ValueError):
            if (
                cls.__init__ is object.__init__
                and cls.__new__ is object.__new__
            ):
                return [ConstructorInfo(cls, 0)]
            return []

        required = [
            param
            for param in sig.parameters.values()
            if param.default is param.empty and param.kind not in _VAR_KINDS
        ]
        return [ConstructorInfo(cls, len(required))]

    def resolve_return_type(self, method: MethodInfo, owner: type) -> Any:
        return typing_util.resolve_type_vars(
            method.return_hint, typing_util.type_var_map(owner)
        )

    def resolve_parameter_types(
        self, method: MethodInfo, owner: type
    ) -> Sequence[Any]:
        mapping = typing_util.type_var_map(owner)
        return [
            typing_util.resolve_type_vars(hint, mapping)
            for hint in method.parameter_hints
        ]

    def resolve_field_type(self, field: FieldInfo, owner: type) -> Any:
        return typing_util.resolve_type_vars(
            field.hint, typing_util.type_var_map(owner)
        )

    def _is_synthetic(self, cls: type, name: str) -> bool:
        return util.is_dunder(name) or (
            util.is_namedtuple_class(cls) and name in _NAMEDTUPLE_HELPERS
        )

    def _record_components(self, cls: type) -> List[MethodInfo]:
        if util.is_frozen_dataclass(cls):
            names: Tuple[str, ...] = tuple(
                f.name for f in util.local_dataclass_fields(cls)
            )
        elif util.is_namedtuple_class(cls) and "_fields" in vars(cls):
            names = cls._fields  # type: ignore[attr-defined]
        else:
            return []

        annotations = self._class_annotations(cls)
        return [
            MethodInfo(
                name,
                cls,
                MethodKind.COMPONENT,
                None,
                return_hint=typing_util.strip_qualifiers(
                    annotations.get(name, object)
                ),
            )
            for name in names
        ]

    def _parameters(
        self, fn: types.FunctionType, bound: int
    ) -> List[inspect.Parameter]:
        params = [
            param
            for param in inspect.signature(fn).parameters.values()
            if param.kind not in _VAR_KINDS
        ]
        positional = (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        )
        if bound and params and params[0].kind in positional:
            params = params[1:]
        return params

    def _function_hints(self, fn: Any) -> Dict[str, Any]:
        try:
            return typing.get_type_hints(fn)
        except (NameError, TypeError, SyntaxError, AttributeError) as err:
            util.warn(
                "Could not evaluate annotations of %r (%s); unresolved "
                "types will be treated as 'object'" % (fn, err)
            )
        try:
            return dict(inspect.get_annotations(fn))
        except NameError:
            return {}

    def _class_annotations(self, cls: type) -> Dict[str, Any]:
        try:
            return util.local_annotations(cls, eval_str=True)
        except (NameError, TypeError, SyntaxError, AttributeError) as err:
            util.warn(
                "Could not evaluate annotations of %r (%s); unresolved "
                "types will be treated as 'object'" % (cls, err)
            )
        try:
            return util.local_annotations(cls)
        except NameError:
            return {}
