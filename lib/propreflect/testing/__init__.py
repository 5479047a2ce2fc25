# testing/__init__.py
# Copyright (C) 2026 the propreflect authors and contributors
# <see AUTHORS file>
#
# This module is part of propreflect and is released under
# the MIT License: https://www.opensource.org/licenses/mit-license.php


from . import config  # noqa
from .assertions import assert_raises  # noqa
from .assertions import assert_raises_message  # noqa
from .assertions import eq_  # noqa
from .assertions import expect_raises  # noqa
from .assertions import expect_raises_message  # noqa
from .assertions import expect_warnings  # noqa
from .assertions import in_  # noqa
from .assertions import is_  # noqa
from .assertions import is_false  # noqa
from .assertions import is_instance_of  # noqa
from .assertions import is_not  # noqa
from .assertions import is_true  # noqa
from .assertions import not_in  # noqa
from .config import combinations  # noqa
from .config import fixture  # noqa
