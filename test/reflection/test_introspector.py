import abc
import collections.abc
import dataclasses
from typing import ClassVar
from typing import Generic
from typing import NamedTuple
from typing import TypeVar

from propreflect.introspector import ConstructorInfo
from propreflect.introspector import FieldKind
from propreflect.introspector import MethodKind
from propreflect.introspector import PythonIntrospector
from propreflect.reflector import Reflector
from propreflect.testing import eq_
from propreflect.testing import expect_warnings
from propreflect.testing import fixtures
from propreflect.testing import in_
from propreflect.testing import is_
from propreflect.testing import is_false
from propreflect.testing import is_instance_of
from propreflect.testing import is_true
from propreflect.testing import not_in

T = TypeVar("T")


class Widget:
    color: str
    count: ClassVar[int] = 0
    SHAPE = "square"

    def __init__(self, size, weight=None):
        self.size = size

    def resize(self, width: int, height: int = 0, *args, **kw) -> None:
        pass

    def configure(self, *, key: str) -> None:
        pass

    @staticmethod
    def make(color: str) -> "Widget":
        return Widget(1)

    @classmethod
    def create(cls, size: int) -> "Widget":
        return cls(size)

    @property
    def area(self) -> float:
        return 0.0


class Shape(abc.ABC):
    @abc.abstractmethod
    def getSides(self) -> int:
        ...


class Square(Widget, Shape):
    def getSides(self) -> int:
        return 4


class Holder(Generic[T]):
    content: T

    def getContent(self) -> T:
        return self.content


class StrHolder(Holder[str]):
    pass


class Unresolved:
    def getThing(self) -> "MissingType":  # noqa: F821
        return None


class UnresolvedField:
    thing: "MissingType"  # noqa: F821


@dataclasses.dataclass(frozen=True)
class Money:
    amount: int
    currency: str


class Pair(NamedTuple):
    left: int
    right: int


class IntrospectorTest(fixtures.TestBase):
    def setup_test(self):
        self.introspector = PythonIntrospector()

    def _methods(self, cls):
        return {m.name: m for m in self.introspector.declared_methods(cls)}

    def test_method_kinds(self):
        methods = self._methods(Widget)
        is_(methods["resize"].kind, MethodKind.FUNCTION)
        is_(methods["make"].kind, MethodKind.STATICMETHOD)
        is_(methods["create"].kind, MethodKind.CLASSMETHOD)
        not_in("area", methods)

    def test_parameter_count(self):
        methods = self._methods(Widget)
        eq_(methods["resize"].parameter_count, 2)
        eq_(methods["configure"].parameter_count, 1)
        eq_(methods["make"].parameter_count, 1)
        eq_(methods["create"].parameter_count, 1)

    def test_types(self):
        methods = self._methods(Widget)
        eq_(methods["resize"].parameter_types, (int, int))
        is_(methods["resize"].return_type, type(None))
        is_(methods["make"].return_type, Widget)
        eq_(methods["make"].parameter_types, (str,))

    def test_synthetic(self):
        methods = self._methods(Widget)
        is_true(methods["__init__"].is_synthetic)
        is_false(methods["resize"].is_synthetic)

    def test_call(self):
        methods = self._methods(Widget)
        widget = Widget(3)
        is_instance_of(methods["make"].call(widget, "red"), Widget)
        eq_(methods["create"].call(widget, 7).size, 7)

    def test_method_repr(self):
        methods = self._methods(Widget)
        eq_(
            repr(methods["resize"]),
            "<MethodInfo Widget.resize(int, int) -> NoneType>",
        )

    def test_superclass_interfaces(self):
        is_(self.introspector.superclass(Square), Widget)
        eq_(list(self.introspector.interfaces(Square)), [Shape])
        is_(self.introspector.superclass(Widget), None)
        eq_(list(self.introspector.interfaces(Widget)), [])

    def test_superclass_skips_generic(self):
        is_(self.introspector.superclass(Holder), None)
        is_(self.introspector.superclass(StrHolder), Holder)

    def test_root_types(self):
        for cls in (
            object,
            dict,
            int,
            Generic,
            abc.ABC,
            collections.abc.Mapping,
        ):
            is_true(self.introspector.is_root_type(cls), cls)
        is_false(self.introspector.is_root_type(Widget))

    def test_interface_methods(self):
        names = [m.name for m in self.introspector.interface_methods(Square)]
        in_("getSides", names)
        in_("resize", names)
        not_in("__init__", names)

    def test_declared_fields(self):
        fields = {f.name: f for f in self.introspector.declared_fields(Widget)}

        is_(fields["color"].kind, FieldKind.ANNOTATION)
        is_(fields["color"].hint, str)
        is_false(fields["color"].is_static)

        is_true(fields["count"].is_static)
        is_false(fields["count"].is_final)
        is_(fields["count"].hint, int)

        is_(fields["SHAPE"].kind, FieldKind.ATTRIBUTE)
        is_true(fields["SHAPE"].is_static)
        is_(fields["SHAPE"].hint, str)

        is_(fields["area"].kind, FieldKind.PROPERTY)
        is_true(fields["area"].is_read_only)
        is_(fields["area"].hint, float)

        for name in ("resize", "make", "create", "__init__"):
            not_in(name, fields)

    def test_abc_bookkeeping_not_a_field(self):
        names = [f.name for f in self.introspector.declared_fields(Shape)]
        not_in("_abc_impl", names)

    def test_field_get_set(self):
        fields = {f.name: f for f in self.introspector.declared_fields(Widget)}
        widget = Widget(1)
        fields["color"].set(widget, "blue")
        eq_(fields["color"].get(widget), "blue")
        eq_(fields["SHAPE"].get(widget), "square")

    def test_declared_constructors(self):
        (ctor,) = self.introspector.declared_constructors(Widget)
        is_instance_of(ctor, ConstructorInfo)
        eq_(ctor.parameter_count, 1)
        eq_(ctor(5).size, 5)

    def test_is_record(self):
        is_true(self.introspector.is_record(Money))
        is_true(self.introspector.is_record(Pair))
        is_false(self.introspector.is_record(Widget))

    def test_record_components(self):
        methods = self._methods(Money)
        is_(methods["amount"].kind, MethodKind.COMPONENT)
        eq_(methods["amount"].parameter_count, 0)
        is_(methods["currency"].return_type, str)
        eq_(methods["amount"].call(Money(5, "USD")), 5)

        methods = self._methods(Pair)
        eq_(methods["right"].call(Pair(1, 2)), 2)
        is_true(methods["_asdict"].is_synthetic)

    def test_resolve_generic(self):
        methods = self._methods(Holder)
        is_(
            self.introspector.resolve_return_type(
                methods["getContent"], StrHolder
            ),
            str,
        )
        is_(
            self.introspector.resolve_return_type(
                methods["getContent"], Holder
            ),
            T,
        )
        (field,) = [
            f
            for f in self.introspector.declared_fields(Holder)
            if f.name == "content"
        ]
        is_(self.introspector.resolve_field_type(field, StrHolder), str)

    def test_unresolvable_method_annotation(self):
        with expect_warnings("Could not evaluate annotations"):
            reflector = Reflector(Unresolved)
        is_(reflector.get_getter_type("thing"), object)

    def test_unresolvable_field_annotation(self):
        with expect_warnings("Could not evaluate annotations"):
            reflector = Reflector(UnresolvedField)
        is_(reflector.get_getter_type("thing"), object)
