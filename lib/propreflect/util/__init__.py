# util/__init__.py
# Copyright (C) 2026 the propreflect authors and contributors
# <see AUTHORS file>
#
# This module is part of propreflect and is released under
# the MIT License: https://www.opensource.org/licenses/mit-license.php


from collections import defaultdict as defaultdict

from ._collections import coerce_to_immutabledict as coerce_to_immutabledict
from ._collections import EMPTY_DICT as EMPTY_DICT
from ._collections import immutabledict as immutabledict
from .compat import dataclass_fields as dataclass_fields
from .compat import is_frozen_dataclass as is_frozen_dataclass
from .compat import is_namedtuple_class as is_namedtuple_class
from .compat import local_annotations as local_annotations
from .compat import local_dataclass_fields as local_dataclass_fields
from .compat import threading as threading
from .langhelpers import is_dunder as is_dunder
from .langhelpers import warn as warn
