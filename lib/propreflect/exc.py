# propreflect/exc.py
# Copyright (C) 2026 the propreflect authors and contributors
# <see AUTHORS file>
#
# This module is part of propreflect and is released under
# the MIT License: https://www.opensource.org/licenses/mit-license.php

"""Exceptions used with propreflect.

The base exception class is :exc:`.PropReflectError`.  Structural problems
found while introspecting a class derive from :exc:`.ReflectionError`;
failures of the underlying DB-API connection raised through a
:class:`.Transaction` are wrapped in :exc:`.DataAccessError`.

"""

from __future__ import annotations

from typing import Any
from typing import Optional
from typing import Sequence


class PropReflectError(Exception):
    """Generic error class."""

    def _message(self) -> str:
        # rules:
        #
        # 1. single arg string will usually be a unicode
        # object, but since __str__() must return unicode, check for
        # bytestring just in case
        #
        # 2. for multiple self.args, this is not a case in current
        # propreflect, call str() which does a repr().
        #
        if len(self.args) == 1:
            text = self.args[0]
            if isinstance(text, bytes):
                return text.decode("utf-8", errors="backslashreplace")
            else:
                return str(text)
        else:
            return str(self.args)

    def __str__(self) -> str:
        return self._message()


class ArgumentError(PropReflectError):
    """Raised when an invalid or conflicting function argument is supplied.

    This error generally corresponds to construction time state errors.

    """


class InvalidRequestError(PropReflectError):
    """propreflect was asked to do something it can't do.

    This error generally corresponds to runtime state errors.

    """


class NoInspectionAvailable(InvalidRequestError):
    """A subject passed to :func:`propreflect.inspect` produced
    no context for inspection."""


class ReflectionError(PropReflectError):
    """Base for errors describing a structural mismatch in an
    introspected class.

    These are deterministic; retrying the same operation against the same
    class will fail the same way.

    """


class InvalidPropertyNameError(ReflectionError):
    """A method name was asked to be converted to a property name but
    does not follow the ``is`` / ``get`` / ``set`` naming convention."""

    def __init__(self, name: str):
        super().__init__(
            "Error parsing property name '%s'.  Didn't start with "
            "'is', 'get' or 'set'." % (name,)
        )
        self.name = name


class AmbiguousAccessorError(ReflectionError):
    """An accessor which was found to be ambiguous at reflection time
    was invoked.

    Ambiguity is not reported when the class is reflected; it is raised each
    time the ambiguous accessor is used.

    """

    def __init__(
        self,
        message: str,
        property_name: Optional[str] = None,
        declaring_class: Optional[type] = None,
        types: Sequence[Any] = (),
    ):
        super().__init__(message)
        self.property_name = property_name
        self.declaring_class = declaring_class
        self.types = tuple(types)


class NoSuchPropertyError(ReflectionError):
    """A property was requested which isn't readable or writable on the
    reflected class."""

    def __init__(self, kind: str, property_name: str, class_: type):
        super().__init__(
            "There is no %s for property named '%s' in '%s'"
            % (kind, property_name, _safe_cls_name(class_))
        )
        self.property_name = property_name
        self.class_ = class_


class NoDefaultConstructorError(ReflectionError):
    """A default (zero-argument) constructor was requested for a class
    which doesn't have one."""

    def __init__(self, class_: type):
        super().__init__(
            "There is no default constructor for %s" % _safe_cls_name(class_)
        )
        self.class_ = class_


class DataAccessError(PropReflectError):
    """Raised when an operation on the connection held by a
    :class:`.Transaction` fails.

    The original DB-API exception is available as :attr:`.orig`, and is
    also the ``__cause__`` of this exception.

    """

    def __init__(self, message: str, orig: Optional[BaseException] = None):
        if orig is not None:
            message = "%s (%s.%s) %s" % (
                message,
                orig.__class__.__module__,
                orig.__class__.__name__,
                orig,
            )
        super().__init__(message)
        self.orig = orig

    def __reduce__(self) -> Any:
        return self.__class__, (self.args[0], None)


class ReflectionWarning(RuntimeWarning):
    """Issued at reflection time when a class can be introspected only
    partially, e.g. an annotation could not be evaluated."""


def _safe_cls_name(cls: Any) -> str:
    try:
        cls_name = ".".join((cls.__module__, cls.__qualname__))
    except AttributeError:
        cls_name = getattr(cls, "__name__", None)
        if cls_name is None:
            cls_name = repr(cls)
    return cls_name
