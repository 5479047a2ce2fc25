import dataclasses
import typing
from typing import Any
from typing import ClassVar
from typing import Dict
from typing import Generic
from typing import List
from typing import NamedTuple
from typing import Optional
from typing import TypeVar
from typing import Union

from typing_extensions import Annotated
from typing_extensions import Final

from propreflect import exc
from propreflect import util
from propreflect.testing import assert_raises_message
from propreflect.testing import eq_
from propreflect.testing import expect_warnings
from propreflect.testing import fixtures
from propreflect.testing import in_
from propreflect.testing import is_
from propreflect.testing import is_false
from propreflect.testing import is_true
from propreflect.testing import not_in
from propreflect.util import typing as typing_util

T = TypeVar("T")
K = TypeVar("K")
N = TypeVar("N", bound=int)


class Box(Generic[T]):
    pass


class Pair(Generic[K, T]):
    pass


class IntBox(Box[int]):
    pass


class Middle(Pair[str, T]):
    pass


class Bottom(Middle[bytes]):
    pass


class ImmutableDictTest(fixtures.TestBase):
    def test_readonly(self):
        d = util.immutabledict({"a": 1})

        def go():
            d["b"] = 2

        assert_raises_message(
            TypeError, "immutabledict object is immutable", go
        )
        assert_raises_message(
            TypeError, "immutabledict object is immutable", d.update, {"b": 2}
        )
        assert_raises_message(
            TypeError, "immutabledict object is immutable", d.pop, "a"
        )
        eq_(d, {"a": 1})

    def test_repr(self):
        eq_(repr(util.immutabledict({"a": 1})), "immutabledict({'a': 1})")

    def test_coerce(self):
        is_(util.coerce_to_immutabledict({}), util.EMPTY_DICT)

        d = util.immutabledict({"a": 1})
        is_(util.coerce_to_immutabledict(d), d)

        d2 = util.coerce_to_immutabledict({"b": 2})
        is_true(isinstance(d2, util.immutabledict))
        eq_(d2, {"b": 2})


class LangHelpersTest(fixtures.TestBase):
    def test_is_dunder(self):
        is_true(util.is_dunder("__init__"))
        is_true(util.is_dunder("__x__"))
        is_false(util.is_dunder("____"))
        is_false(util.is_dunder("_private"))
        is_false(util.is_dunder("__mangled"))
        is_false(util.is_dunder("name"))

    def test_warn(self):
        with expect_warnings("some warning"):
            util.warn("some warning")

    def test_warn_category(self):
        with expect_warnings():
            util.warn("other")

        assert issubclass(exc.ReflectionWarning, RuntimeWarning)


class CompatTest(fixtures.TestBase):
    def test_local_annotations(self):
        class A:
            x: int

        class B(A):
            y: str

        eq_(util.local_annotations(B), {"y": str})

    def test_frozen_dataclass(self):
        @dataclasses.dataclass(frozen=True)
        class Frozen:
            x: int

        @dataclasses.dataclass
        class Thawed:
            x: int

        is_true(util.is_frozen_dataclass(Frozen))
        is_false(util.is_frozen_dataclass(Thawed))
        is_false(util.is_frozen_dataclass(int))

    def test_namedtuple_class(self):
        class Point(NamedTuple):
            x: int
            y: int

        is_true(util.is_namedtuple_class(Point))
        is_false(util.is_namedtuple_class(tuple))
        is_false(util.is_namedtuple_class(Point(1, 2)))

    def test_local_dataclass_fields(self):
        @dataclasses.dataclass
        class Base:
            x: int

        @dataclasses.dataclass
        class Sub(Base):
            y: int = 0

        eq_([f.name for f in util.local_dataclass_fields(Sub)], ["y"])
        eq_([f.name for f in util.dataclass_fields(Sub)], ["x", "y"])
        eq_(util.local_dataclass_fields(int), [])


class TypingUtilTest(fixtures.TestBase):
    def test_type_to_class_plain(self):
        is_(typing_util.type_to_class(int), int)
        is_(typing_util.type_to_class(Box), Box)

    def test_type_to_class_none(self):
        is_(typing_util.type_to_class(None), type(None))

    def test_type_to_class_any(self):
        is_(typing_util.type_to_class(Any), object)

    def test_type_to_class_generic_alias(self):
        is_(typing_util.type_to_class(List[int]), list)
        is_(typing_util.type_to_class(Dict[str, int]), dict)
        is_(typing_util.type_to_class(list[int]), list)
        is_(typing_util.type_to_class(Box[int]), Box)

    def test_type_to_class_optional(self):
        is_(typing_util.type_to_class(Optional[int]), int)
        is_(typing_util.type_to_class(Union[int, None]), int)
        is_(typing_util.type_to_class(int | None), int)

    def test_type_to_class_union(self):
        is_(typing_util.type_to_class(Union[int, str]), object)
        is_(typing_util.type_to_class(int | str), object)

    def test_type_to_class_typevar(self):
        is_(typing_util.type_to_class(T), object)
        is_(typing_util.type_to_class(N), int)

    def test_type_to_class_qualifiers(self):
        is_(typing_util.type_to_class(ClassVar[int]), int)
        is_(typing_util.type_to_class(Final[str]), str)
        is_(typing_util.type_to_class(Annotated[int, "meta"]), int)
        is_(typing_util.type_to_class(Final), object)

    def test_type_to_class_unresolved(self):
        is_(typing_util.type_to_class("SomeName"), object)

    def test_is_classvar(self):
        is_true(typing_util.is_classvar(ClassVar[int]))
        is_true(typing_util.is_classvar(typing.ClassVar))
        is_true(typing_util.is_classvar("ClassVar[int]"))
        is_true(typing_util.is_classvar("typing.ClassVar[int]"))
        is_false(typing_util.is_classvar(int))
        is_false(typing_util.is_classvar(Final[int]))

    def test_is_final(self):
        is_true(typing_util.is_final(Final[int]))
        is_true(typing_util.is_final(Final))
        is_true(typing_util.is_final(typing.Final[int]))
        is_true(typing_util.is_final("Final[int]"))
        is_false(typing_util.is_final(int))
        is_false(typing_util.is_final(ClassVar[int]))
        is_false(typing_util.is_final("int"))

    def test_is_optional_union(self):
        is_true(typing_util.is_optional_union(Optional[int]))
        is_true(typing_util.is_optional_union(int | None))
        is_false(typing_util.is_optional_union(Union[int, str]))
        is_false(typing_util.is_optional_union(int))

    def test_type_var_map(self):
        eq_(typing_util.type_var_map(IntBox), {T: int})

    def test_type_var_map_chained(self):
        mapping = typing_util.type_var_map(Bottom)
        is_(mapping[K], str)
        is_(typing_util.resolve_type_vars(T, mapping), bytes)

    def test_type_var_map_plain(self):
        eq_(typing_util.type_var_map(int), {})

    def test_resolve_type_vars_unmapped(self):
        is_(typing_util.resolve_type_vars(T, {}), T)
        is_(typing_util.resolve_type_vars(int, {T: str}), int)

    def test_type_name(self):
        eq_(typing_util.type_name(int), "int")
        eq_(typing_util.type_name(type(None)), "NoneType")
        eq_(typing_util.type_name(Box), "%s.Box" % __name__)
        in_("List", typing_util.type_name(List[int]))
        not_in(".", typing_util.type_name(str))
