# util/langhelpers.py
# Copyright (C) 2026 the propreflect authors and contributors
# <see AUTHORS file>
#
# This module is part of propreflect and is released under
# the MIT License: https://www.opensource.org/licenses/mit-license.php

"""Routines to help with the creation, loading and introspection of
modules, classes, hierarchies, attributes, functions, and methods.

"""

from __future__ import annotations

import warnings

from .. import exc


def is_dunder(name: str) -> bool:
    return len(name) > 4 and name[:2] == name[-2:] == "__"


def warn(msg: str) -> None:
    """Issue a warning.

    :class:`.exc.ReflectionWarning` is used as the category.

    """
    warnings.warn(msg, exc.ReflectionWarning, stacklevel=2)
