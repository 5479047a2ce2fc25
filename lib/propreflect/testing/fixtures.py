# testing/fixtures.py
# Copyright (C) 2026 the propreflect authors and contributors
# <see AUTHORS file>
#
# This module is part of propreflect and is released under
# the MIT License: https://www.opensource.org/licenses/mit-license.php

from __future__ import annotations

import pytest

from .. import factory


class TestBase:
    """Base for propreflect test classes.

    Subclasses may define ``setup_test()`` and ``teardown_test()``, which
    run before and after each test method.

    """

    @pytest.fixture(autouse=True)
    def _setup_teardown_test(self):
        self.setup_test()
        yield
        self.teardown_test()

    def setup_test(self):
        pass

    def teardown_test(self):
        pass

    @pytest.fixture
    def reflector_factory(self):
        """A new :class:`.ReflectorFactory` with its own, empty cache."""

        return factory.ReflectorFactory()
