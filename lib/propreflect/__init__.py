# propreflect/__init__.py
# Copyright (C) 2026 the propreflect authors and contributors
# <see AUTHORS file>
#
# This module is part of propreflect and is released under
# the MIT License: https://www.opensource.org/licenses/mit-license.php

from .collector import collect_class_methods
from .collector import method_signature
from .exc import AmbiguousAccessorError
from .exc import DataAccessError
from .exc import InvalidPropertyNameError
from .exc import NoDefaultConstructorError
from .exc import NoSuchPropertyError
from .exc import PropReflectError
from .exc import ReflectionError
from .exc import ReflectionWarning
from .factory import ReflectorFactory
from .factory import reflector_for
from .inspection import inspect
from .introspector import ConstructorInfo
from .introspector import FieldInfo
from .introspector import MethodInfo
from .introspector import PythonIntrospector
from .introspector import TypeIntrospector
from .invoker import AmbiguousMethodInvoker
from .invoker import GetFieldInvoker
from .invoker import Invoker
from .invoker import MethodInvoker
from .invoker import SetFieldInvoker
from .property_namer import AccessorKind
from .property_namer import classify
from .property_namer import is_getter
from .property_namer import is_property
from .property_namer import is_setter
from .property_namer import method_to_property
from .reflector import Reflector
from .transaction import DBAPITransaction
from .transaction import ManagedTransaction
from .transaction import Transaction


__version__ = "1.0.0"


def __go(lcls):
    global __all__

    import inspect as _inspect

    __all__ = sorted(
        name
        for name, obj in lcls.items()
        if not (name.startswith("_") or _inspect.ismodule(obj))
    )


__go(locals())
