# util/compat.py
# Copyright (C) 2026 the propreflect authors and contributors
# <see AUTHORS file>
#
# This module is part of propreflect and is released under
# the MIT License: https://www.opensource.org/licenses/mit-license.php

"""Handle Python version/platform incompatibilities."""

from __future__ import annotations

import dataclasses
import inspect
import sys
import threading  # noqa
from typing import Any
from typing import Dict
from typing import List
from typing import Type

py310 = sys.version_info >= (3, 10)


def local_annotations(
    cls: Type[Any], eval_str: bool = False
) -> Dict[str, Any]:
    """Return the annotations declared in the body of ``cls`` only.

    Annotations inherited from superclasses are not included.

    """
    return dict(inspect.get_annotations(cls, eval_str=eval_str))


def dataclass_fields(cls: Type[Any]) -> List[dataclasses.Field[Any]]:
    """Return a sequence of all dataclasses.Field objects associated
    with a class."""

    if dataclasses.is_dataclass(cls):
        return list(dataclasses.fields(cls))
    else:
        return []


def local_dataclass_fields(cls: Type[Any]) -> List[dataclasses.Field[Any]]:
    """Return a sequence of all dataclasses.Field objects associated with
    a class, excluding those that originate from a superclass."""

    if dataclasses.is_dataclass(cls):
        super_fields = set()
        for sup in cls.__bases__:
            super_fields.update(f.name for f in dataclass_fields(sup))
        local = local_annotations(cls)
        return [
            f
            for f in dataclasses.fields(cls)
            if f.name not in super_fields or f.name in local
        ]
    else:
        return []


def is_frozen_dataclass(cls: Type[Any]) -> bool:
    return dataclasses.is_dataclass(cls) and bool(
        getattr(cls, "__dataclass_params__").frozen
    )


def is_namedtuple_class(cls: Type[Any]) -> bool:
    return (
        isinstance(cls, type)
        and issubclass(cls, tuple)
        and isinstance(getattr(cls, "_fields", None), tuple)
    )
