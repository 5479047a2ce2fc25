# propreflect/factory.py
# Copyright (C) 2026 the propreflect authors and contributors
# <see AUTHORS file>
#
# This module is part of propreflect and is released under
# the MIT License: https://www.opensource.org/licenses/mit-license.php

"""Per-class cache of :class:`.Reflector` objects."""

from __future__ import annotations

from typing import Any
from typing import Dict
from typing import Optional
from typing import Type

from . import inspection
from . import log
from . import util
from .introspector import PythonIntrospector
from .introspector import TypeIntrospector
from .reflector import Reflector
from .util.typing import type_name


class ReflectorFactory(log.Identified):
    """Build and cache :class:`.Reflector` objects, one per class.

    Each class is reflected at most once per factory, including when the
    first requests for a class arrive from several threads at the same
    time; a :class:`.Reflector` becomes visible to other threads only once
    it's fully built.  Entries are kept for the lifetime of the factory.

    :param class_cache_enabled: when ``False``, each call to
     :meth:`.find_for_class` builds a new :class:`.Reflector`.

    :param introspector: the :class:`.TypeIntrospector` used to examine
     classes; defaults to :class:`.PythonIntrospector`.

    :param echo: if ``True``, the factory logs each class it reflects to
     the ``propreflect.factory.ReflectorFactory`` logger at INFO level;
     ``"debug"`` also logs cache hits.

    :param logging_name: string identifier used within the "name" field of
     logging records generated within the "propreflect.factory" logger.

    """

    echo = log.echo_property()

    def __init__(
        self,
        class_cache_enabled: bool = True,
        introspector: Optional[TypeIntrospector] = None,
        echo: log._EchoFlagType = None,
        logging_name: Optional[str] = None,
    ):
        self.class_cache_enabled = class_cache_enabled
        self.introspector = (
            introspector if introspector is not None else PythonIntrospector()
        )
        if logging_name:
            self.logging_name = logging_name
        self.echo = echo
        self._reflector_map: Dict[Type[Any], Reflector] = {}
        self._mutex = util.threading.Lock()

    def find_for_class(self, cls: Type[Any]) -> Reflector:
        """Return the :class:`.Reflector` for ``cls``, building it if
        needed."""

        if not self.class_cache_enabled:
            return self._build(cls)

        reflector = self._reflector_map.get(cls)
        if reflector is not None:
            if self._should_log_debug():
                self.logger.debug("Reflector cache hit for %s", type_name(cls))
            return reflector

        with self._mutex:
            reflector = self._reflector_map.get(cls)
            if reflector is None:
                reflector = self._reflector_map[cls] = self._build(cls)
            return reflector

    def _build(self, cls: Type[Any]) -> Reflector:
        if self._should_log_info():
            self.logger.info("Reflecting %s", type_name(cls))
        return Reflector(cls, self.introspector)

    def __repr__(self) -> str:
        return "ReflectorFactory(class_cache_enabled=%r)" % (
            self.class_cache_enabled,
        )


_default_factory = ReflectorFactory()


def reflector_for(cls: Type[Any]) -> Reflector:
    """Return the :class:`.Reflector` for ``cls`` from the default, process
    wide :class:`.ReflectorFactory`."""

    return _default_factory.find_for_class(cls)


@inspection._inspects(type)
def _inspect_type(cls: Type[Any]) -> Reflector:
    return reflector_for(cls)
