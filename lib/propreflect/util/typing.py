# util/typing.py
# Copyright (C) 2026 the propreflect authors and contributors
# <see AUTHORS file>
#
# This module is part of propreflect and is released under
# the MIT License: https://www.opensource.org/licenses/mit-license.php
# mypy: allow-untyped-defs, allow-untyped-calls

from __future__ import annotations

import re
import typing
from typing import Any
from typing import Dict
from typing import Type
from typing import TypeVar

from . import compat

if True:  # zimports removes the tailing comments
    from typing_extensions import Annotated as Annotated  # 3.8
    from typing_extensions import Final as Final  # 3.8
    from typing_extensions import get_args as get_args  # 3.10
    from typing_extensions import get_origin as get_origin  # 3.10

if compat.py310:
    from types import NoneType as NoneType
else:
    NoneType = type(None)  # type: ignore

typing_get_args = get_args
typing_get_origin = get_origin


_FINAL_FORMS = (typing.Final, Final)
_CLASSVAR_FORMS = (typing.ClassVar,)

_STRING_QUALIFIER = re.compile(
    r"^\s*(?:typing(?:_extensions)?\.)?(ClassVar|Final)\b"
)


def is_union(type_: Any) -> bool:
    return is_origin_of(type_, "Union", "UnionType")


def is_optional_union(type_: Any) -> bool:
    return is_union(type_) and NoneType in typing_get_args(type_)


def is_origin_of(type_: Any, *names: str) -> bool:
    """return True if the given type has an __origin__ with the given name."""

    origin = typing_get_origin(type_)
    if origin is None:
        return False

    return _get_type_name(origin) in names


def _get_type_name(type_: Any) -> str:
    typ_name = getattr(type_, "__name__", None)
    if typ_name is None:
        typ_name = getattr(type_, "_name", None)

    return typ_name  # type: ignore


def _is_form(type_: Any, forms: Any) -> bool:
    # identity only; annotations are not always hashable
    return any(type_ is form for form in forms)


def is_classvar(type_: Any) -> bool:
    """Return True if the annotation is ``ClassVar`` or ``ClassVar[X]``."""

    if isinstance(type_, str):
        match = _STRING_QUALIFIER.match(type_)
        return match is not None and match.group(1) == "ClassVar"
    if _is_form(type_, _CLASSVAR_FORMS):
        return True
    return _is_form(typing_get_origin(type_), _CLASSVAR_FORMS)


def is_final(type_: Any) -> bool:
    """Return True if the annotation is ``Final``, ``Final[X]`` or a
    ``ClassVar[Final[X]]``."""

    if isinstance(type_, str):
        match = _STRING_QUALIFIER.match(type_)
        if match is None:
            return False
        if match.group(1) == "Final":
            return True
        return "Final" in type_
    if _is_form(type_, _FINAL_FORMS):
        return True
    origin = typing_get_origin(type_)
    if _is_form(origin, _FINAL_FORMS):
        return True
    if _is_form(origin, _CLASSVAR_FORMS):
        return any(is_final(arg) for arg in typing_get_args(type_))
    return False


def strip_qualifiers(type_: Any) -> Any:
    """Remove ``ClassVar``, ``Final`` and ``Annotated`` wrappers.

    A bare ``Final`` or ``ClassVar`` returns ``Any``.

    """
    while True:
        if _is_form(type_, _FINAL_FORMS + _CLASSVAR_FORMS):
            return Any
        origin = typing_get_origin(type_)
        if _is_form(origin, _FINAL_FORMS + _CLASSVAR_FORMS):
            type_ = typing_get_args(type_)[0]
        elif origin is Annotated:
            type_ = typing_get_args(type_)[0]
        else:
            return type_


def type_var_map(cls: Type[Any]) -> Dict[Any, Any]:
    """Map each ``TypeVar`` parameterized by a generic ancestor of ``cls``
    to the argument the hierarchy supplies for it.

    E.g. given ``class Base(Generic[T])`` and ``class Sub(Base[int])``,
    ``type_var_map(Sub)`` returns ``{T: int}``.  Arguments which are
    themselves type variables are substituted with whatever a more derived
    class supplied.

    """
    mapping: Dict[Any, Any] = {}
    for klass in cls.__mro__:
        for base in klass.__dict__.get("__orig_bases__", ()):
            origin = typing_get_origin(base)
            if origin is None:
                continue
            params = getattr(origin, "__parameters__", ())
            for param, arg in zip(params, typing_get_args(base)):
                if isinstance(arg, TypeVar):
                    arg = mapping.get(arg, arg)
                mapping.setdefault(param, arg)
    return mapping


def resolve_type_vars(type_: Any, mapping: Dict[Any, Any]) -> Any:
    """Substitute a top-level ``TypeVar`` using the given mapping."""

    seen = set()
    while isinstance(type_, TypeVar) and type_ in mapping:
        if type_ in seen:
            break
        seen.add(type_)
        type_ = mapping[type_]
    return type_


def type_to_class(type_: Any) -> type:
    """Reduce an annotation to the runtime class it describes.

    Generic aliases reduce to their origin, ``Optional[X]`` to ``X``,
    unresolved type variables to their bound; anything that can't be
    reduced to a class becomes ``object``.

    """
    type_ = strip_qualifiers(type_)

    if type_ is None:
        return NoneType
    elif type_ is Any:
        return object
    elif isinstance(type_, type) and typing_get_origin(type_) is None:
        return type_
    elif isinstance(type_, TypeVar):
        if type_.__bound__ is not None:
            return type_to_class(type_.__bound__)
        return object
    elif is_union(type_):
        args = [a for a in typing_get_args(type_) if a is not NoneType]
        if len(args) == 1:
            return type_to_class(args[0])
        return object

    origin = typing_get_origin(type_)
    if isinstance(origin, type):
        return origin
    return object


def type_name(type_: Any) -> str:
    """Qualified name of a class, used when building method signatures
    and messages."""

    if isinstance(type_, type):
        if type_.__module__ == "builtins":
            return type_.__qualname__
        return "%s.%s" % (type_.__module__, type_.__qualname__)
    return repr(type_)
