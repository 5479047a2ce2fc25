# propreflect/property_namer.py
# Copyright (C) 2026 the propreflect authors and contributors
# <see AUTHORS file>
#
# This module is part of propreflect and is released under
# the MIT License: https://www.opensource.org/licenses/mit-license.php

"""Classification of accessor method names.

Accessors follow the ``is`` / ``get`` / ``set`` prefix convention, in either
camel case (``getName``, ``isActive``) or snake case (``get_name``,
``is_active``)::

    >>> method_to_property("getURL")
    'URL'
    >>> method_to_property("getName")
    'name'
    >>> method_to_property("is_active")
    'active'

"""

from __future__ import annotations

import enum
from typing import Optional

from . import exc


class AccessorKind(enum.Enum):
    GETTER = "getter"
    SETTER = "setter"
    NEITHER = "neither"


def _strip_prefix(name: str) -> Optional[str]:
    if name.startswith("is"):
        rest = name[2:]
    elif name.startswith("get") or name.startswith("set"):
        rest = name[3:]
    else:
        return None
    if rest.startswith("_"):
        rest = rest[1:]
    return rest


def method_to_property(name: str) -> str:
    """Derive the property name from an accessor method name.

    The prefix is removed; the first character of the remainder is then
    lower-cased unless the remainder reads as an acronym, i.e. its second
    character is upper case.

    :raises: :class:`.exc.InvalidPropertyNameError` if ``name`` has none
     of the ``is`` / ``get`` / ``set`` prefixes.

    """
    rest = _strip_prefix(name)
    if rest is None:
        raise exc.InvalidPropertyNameError(name)

    if len(rest) == 1 or (len(rest) > 1 and not rest[1].isupper()):
        rest = rest[0].lower() + rest[1:]

    return rest


def is_getter(name: str) -> bool:
    return (name.startswith("get") or name.startswith("is")) and bool(
        _strip_prefix(name)
    )


def is_setter(name: str) -> bool:
    return name.startswith("set") and bool(_strip_prefix(name))


def is_property(name: str) -> bool:
    return is_getter(name) or is_setter(name)


def classify(name: str) -> AccessorKind:
    if is_getter(name):
        return AccessorKind.GETTER
    elif is_setter(name):
        return AccessorKind.SETTER
    else:
        return AccessorKind.NEITHER
