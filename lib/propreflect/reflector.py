# propreflect/reflector.py
# Copyright (C) 2026 the propreflect authors and contributors
# <see AUTHORS file>
#
# This module is part of propreflect and is released under
# the MIT License: https://www.opensource.org/licenses/mit-license.php

"""The :class:`.Reflector`, a cached description of the properties of a
class.

A property is readable when the class has a zero-argument getter-shaped
method for it (``getName()``, ``isActive()``, ``get_name()``) or a field of
that name, and writable when it has a one-argument setter-shaped method or
a writable field.  Overloaded accessors are resolved to the most specific
candidate; where no candidate can be chosen, the accessor is recorded as
ambiguous and fails when invoked.

"""

from __future__ import annotations

from typing import Any
from typing import Dict
from typing import List
from typing import Mapping
from typing import Optional
from typing import Tuple
from typing import Type

from . import exc
from . import inspection
from . import log
from . import property_namer
from . import util
from .collector import collect_class_methods
from .introspector import ConstructorInfo
from .introspector import MethodInfo
from .introspector import PythonIntrospector
from .introspector import TypeIntrospector
from .invoker import AmbiguousMethodInvoker
from .invoker import GetFieldInvoker
from .invoker import Invoker
from .invoker import MethodInvoker
from .invoker import SetFieldInvoker
from .util.typing import type_name
from .util.typing import type_to_class


def is_valid_property_name(name: str) -> bool:
    return not (
        name.startswith("$")
        or name == "serialVersionUID"
        or name == "class"
        or util.is_dunder(name)
    )


def _is_assignable(sup: type, sub: type) -> bool:
    """True if ``sup`` is among the classes ``sub`` inherits from.

    Virtual subclasses registered with an ABC and structural protocol
    matches don't count.

    """
    return sup in sub.__mro__


@inspection._self_inspects
@log.class_logger
class Reflector:
    """Property metadata for one class.

    A :class:`.Reflector` is built in full by its constructor and is not
    modified afterwards; it's normally acquired through
    :meth:`.ReflectorFactory.find_for_class` or :func:`propreflect.inspect`
    so that each class is only reflected once::

        from propreflect import inspect

        reflector = inspect(User)
        reflector.get_set_invoker("name").invoke(user, "spongebob")

    """

    type: Type[Any]
    readable_properties: Tuple[str, ...]
    writable_properties: Tuple[str, ...]

    _get_methods: Mapping[str, Invoker]
    _set_methods: Mapping[str, Invoker]
    _get_types: Mapping[str, type]
    _set_types: Mapping[str, type]
    _case_insensitive_property_map: Mapping[str, str]
    _default_constructor: Optional[ConstructorInfo]

    def __init__(
        self,
        cls: Type[Any],
        introspector: Optional[TypeIntrospector] = None,
    ):
        if introspector is None:
            introspector = PythonIntrospector()

        self.type = cls
        self._introspector = introspector
        self._get_methods = {}
        self._set_methods = {}
        self._get_types = {}
        self._set_types = {}
        self._default_constructor = None

        self._add_default_constructor(cls)
        class_methods = collect_class_methods(cls, introspector)
        if introspector.is_record(cls):
            self._add_record_get_methods(class_methods)
        else:
            self._add_get_methods(class_methods)
            self._add_set_methods(class_methods)
            self._add_fields(cls)

        self.readable_properties = tuple(self._get_methods)
        self.writable_properties = tuple(self._set_methods)

        case_insensitive: Dict[str, str] = {}
        for prop_name in self.readable_properties + self.writable_properties:
            case_insensitive[prop_name.upper()] = prop_name

        self._get_methods = util.coerce_to_immutabledict(self._get_methods)
        self._set_methods = util.coerce_to_immutabledict(self._set_methods)
        self._get_types = util.coerce_to_immutabledict(self._get_types)
        self._set_types = util.coerce_to_immutabledict(self._set_types)
        self._case_insensitive_property_map = util.coerce_to_immutabledict(
            case_insensitive
        )

        if self._should_log_debug():
            self.logger.debug(
                "Reflected %s: readable %s, writable %s",
                type_name(cls),
                self.readable_properties,
                self.writable_properties,
            )

    def _add_default_constructor(self, cls: Type[Any]) -> None:
        for constructor in self._introspector.declared_constructors(cls):
            if constructor.parameter_count == 0:
                self._default_constructor = constructor
                break

    def _add_record_get_methods(self, methods: List[MethodInfo]) -> None:
        for method in methods:
            if method.parameter_count == 0:
                self._add_get_method(method.name, method)

    def _add_get_methods(self, methods: List[MethodInfo]) -> None:
        conflicting_getters: Dict[str, List[MethodInfo]] = util.defaultdict(
            list
        )
        for method in methods:
            if method.parameter_count == 0 and property_namer.is_getter(
                method.name
            ):
                self._add_method_conflict(
                    conflicting_getters,
                    property_namer.method_to_property(method.name),
                    method,
                )
        self._resolve_getter_conflicts(conflicting_getters)

    def _resolve_getter_conflicts(
        self, conflicting_getters: Dict[str, List[MethodInfo]]
    ) -> None:
        for prop_name, candidates in conflicting_getters.items():
            winner: Optional[MethodInfo] = None
            ambiguous_with: Optional[MethodInfo] = None
            for candidate in candidates:
                if winner is None:
                    winner = candidate
                    continue
                winner_type = winner.return_type
                candidate_type = candidate.return_type
                if candidate_type is winner_type:
                    if candidate_type is not bool:
                        ambiguous_with = candidate
                        break
                    elif candidate.name.startswith("is"):
                        winner = candidate
                elif _is_assignable(candidate_type, winner_type):
                    # winner is the more specific
                    pass
                elif _is_assignable(winner_type, candidate_type):
                    winner = candidate
                else:
                    ambiguous_with = candidate
                    break

            assert winner is not None
            self._add_get_method(prop_name, winner, ambiguous_with)

    def _add_get_method(
        self,
        name: str,
        method: MethodInfo,
        ambiguous_with: Optional[MethodInfo] = None,
    ) -> None:
        invoker: MethodInvoker
        if ambiguous_with is not None:
            types = (method.return_type, ambiguous_with.return_type)
            message = (
                "Illegal overloaded getter method with ambiguous type for "
                "property '%s' in class '%s' with types %s. This breaks the "
                "accessor naming convention and can cause unpredictable "
                "results."
                % (
                    name,
                    exc._safe_cls_name(method.declaring_class),
                    " and ".join("'%s'" % type_name(t) for t in types),
                )
            )
            invoker = AmbiguousMethodInvoker(
                method, message, property_name=name, types=types
            )
            if self._should_log_debug():
                self.logger.debug(message)
        else:
            invoker = MethodInvoker(method)

        self._get_methods[name] = invoker
        return_type = self._introspector.resolve_return_type(
            method, self.type
        )
        self._get_types[name] = type_to_class(return_type)

    def _add_set_methods(self, methods: List[MethodInfo]) -> None:
        conflicting_setters: Dict[str, List[MethodInfo]] = util.defaultdict(
            list
        )
        for method in methods:
            if method.parameter_count == 1 and property_namer.is_setter(
                method.name
            ):
                self._add_method_conflict(
                    conflicting_setters,
                    property_namer.method_to_property(method.name),
                    method,
                )
        self._resolve_setter_conflicts(conflicting_setters)

    def _add_method_conflict(
        self,
        conflicting_methods: Dict[str, List[MethodInfo]],
        name: str,
        method: MethodInfo,
    ) -> None:
        if is_valid_property_name(name):
            conflicting_methods[name].append(method)

    def _resolve_setter_conflicts(
        self, conflicting_setters: Dict[str, List[MethodInfo]]
    ) -> None:
        for prop_name, setters in conflicting_setters.items():
            getter_type = self._get_types.get(prop_name)
            is_getter_ambiguous = isinstance(
                self._get_methods.get(prop_name), AmbiguousMethodInvoker
            )
            is_setter_ambiguous = False
            match: Optional[MethodInfo] = None
            for setter in setters:
                if (
                    not is_getter_ambiguous
                    and setter.parameter_types[0] is getter_type
                ):
                    # setter matching the getter's type takes precedence
                    match = setter
                    break
                if not is_setter_ambiguous:
                    match = self._pick_better_setter(match, setter, prop_name)
                    is_setter_ambiguous = match is None
            if match is not None:
                self._add_set_method(prop_name, match)

    def _pick_better_setter(
        self,
        setter1: Optional[MethodInfo],
        setter2: MethodInfo,
        prop_name: str,
    ) -> Optional[MethodInfo]:
        if setter1 is None:
            return setter2
        param_type1 = setter1.parameter_types[0]
        param_type2 = setter2.parameter_types[0]
        if _is_assignable(param_type1, param_type2):
            return setter2
        elif _is_assignable(param_type2, param_type1):
            return setter1

        message = (
            "Ambiguous setters defined for property '%s' in class '%s' "
            "with types '%s' and '%s'."
            % (
                prop_name,
                exc._safe_cls_name(setter2.declaring_class),
                type_name(param_type1),
                type_name(param_type2),
            )
        )
        if self._should_log_debug():
            self.logger.debug(message)
        self._set_methods[prop_name] = AmbiguousMethodInvoker(
            setter1,
            message,
            property_name=prop_name,
            types=(param_type1, param_type2),
        )
        param_types = self._introspector.resolve_parameter_types(
            setter1, self.type
        )
        self._set_types[prop_name] = type_to_class(param_types[0])
        return None

    def _add_set_method(self, name: str, method: MethodInfo) -> None:
        self._set_methods[name] = MethodInvoker(method)
        param_types = self._introspector.resolve_parameter_types(
            method, self.type
        )
        self._set_types[name] = type_to_class(param_types[0])

    def _add_fields(self, cls: Type[Any]) -> None:
        introspector = self._introspector
        current: Optional[type] = cls
        while current is not None and not introspector.is_root_type(current):
            for field in introspector.declared_fields(current):
                if not is_valid_property_name(field.name):
                    continue
                if field.name not in self._set_methods and not (
                    (field.is_final and field.is_static) or field.is_read_only
                ):
                    self._set_methods[field.name] = SetFieldInvoker(field)
                    self._set_types[field.name] = type_to_class(
                        introspector.resolve_field_type(field, self.type)
                    )
                if field.name not in self._get_methods:
                    self._get_methods[field.name] = GetFieldInvoker(field)
                    self._get_types[field.name] = type_to_class(
                        introspector.resolve_field_type(field, self.type)
                    )
            current = introspector.superclass(current)

    def has_default_constructor(self) -> bool:
        return self._default_constructor is not None

    def get_default_constructor(self) -> ConstructorInfo:
        """Return the zero-argument constructor of the reflected class.

        :raises: :class:`.exc.NoDefaultConstructorError` if the class can't
         be constructed without arguments.

        """
        if self._default_constructor is None:
            raise exc.NoDefaultConstructorError(self.type)
        return self._default_constructor

    def get_set_invoker(self, property_name: str) -> Invoker:
        try:
            return self._set_methods[property_name]
        except KeyError as err:
            raise exc.NoSuchPropertyError(
                "setter", property_name, self.type
            ) from err

    def get_get_invoker(self, property_name: str) -> Invoker:
        try:
            return self._get_methods[property_name]
        except KeyError as err:
            raise exc.NoSuchPropertyError(
                "getter", property_name, self.type
            ) from err

    def get_setter_type(self, property_name: str) -> type:
        """Return the declared type of the value written by the setter for
        ``property_name``.

        :raises: :class:`.exc.NoSuchPropertyError` if the property isn't
         writable.

        """
        try:
            return self._set_types[property_name]
        except KeyError as err:
            raise exc.NoSuchPropertyError(
                "setter", property_name, self.type
            ) from err

    def get_getter_type(self, property_name: str) -> type:
        """Return the declared type of the value read by the getter for
        ``property_name``.

        :raises: :class:`.exc.NoSuchPropertyError` if the property isn't
         readable.

        """
        try:
            return self._get_types[property_name]
        except KeyError as err:
            raise exc.NoSuchPropertyError(
                "getter", property_name, self.type
            ) from err

    def has_setter(self, property_name: str) -> bool:
        return property_name in self._set_methods

    def has_getter(self, property_name: str) -> bool:
        return property_name in self._get_methods

    def find_property_name(self, name: str) -> Optional[str]:
        """Return the canonical spelling of a property name given in any
        case, or ``None`` if the class has no such property."""

        return self._case_insensitive_property_map.get(name.upper())

    def __repr__(self) -> str:
        return "<Reflector for %s>" % type_name(self.type)
