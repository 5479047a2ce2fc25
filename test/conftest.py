#!/usr/bin/env python
"""
pytest plugin script.

This script is an extension to pytest which
makes the local propreflect package available to the test suite.

"""
import os
import sys

import pytest


# this requires that propreflect.testing was not already
# imported in order to work
pytest.register_assert_rewrite("propreflect.testing.assertions")


if not sys.flags.no_user_site:
    # this is needed so that plain "pytest" works against the package
    # that's locally present, since we have ./lib/, we need to punch
    # that in.
    # We check no_user_site to honor the use of this flag.
    sys.path.insert(
        0,
        os.path.abspath(
            os.path.join(
                os.path.dirname(os.path.abspath(__file__)), "..", "lib"
            )
        ),
    )
