"""Tests for classifying runtime values."""

import types

import qmeta
import metatest
from metatest import params


@params(
    "value kind is_record",
    empty_module=({}, qmeta.Kind.MODULE, False),
    module=({"_name": "math", "Add": metatest.add}, qmeta.Kind.MODULE, False),
    proxy=(types.MappingProxyType({"x": 1}), qmeta.Kind.MODULE, False),
    cls=(metatest.make_class(), qmeta.Kind.CLASS, False),
    obj=(metatest.make_class().new(x=1), qmeta.Kind.OBJECT, False),
    integer=(5, qmeta.Kind.HOST, False),
    text=("hello", qmeta.Kind.HOST, False),
    none=(None, qmeta.Kind.HOST, False),
    listing=([1, 2], qmeta.Kind.HOST, False),
    dataclass=(metatest.Person("Ada"), qmeta.Kind.HOST, True),
    dataclass_type=(metatest.Person, qmeta.Kind.HOST, False),
    named_tuple=(metatest.Point(1, 2), qmeta.Kind.HOST, True),
    plain_named_tuple=(metatest.Pair(1, 2), qmeta.Kind.HOST, True),
    plain_tuple=((1, 2), qmeta.Kind.HOST, False),
    plain_object=(metatest.Widget(), qmeta.Kind.HOST, False),
    ref=(qmeta.Ref(metatest.Person("Ada")), qmeta.Kind.HOST, True),
    ref_ref=(qmeta.Ref(qmeta.Ref(metatest.Point(1, 2))), qmeta.Kind.HOST, True),
    ref_int=(qmeta.Ref(5), qmeta.Kind.HOST, False),
    ref_none=(qmeta.Ref(None), qmeta.Kind.HOST, False),
)
def test_classify(key, value, kind, is_record):
    """Every value lands in exactly one kind."""
    result = qmeta.classify(value)
    assert result.kind is kind
    assert result.is_record is is_record


def test_classify_does_not_touch_value():
    """Classification leaves the value as it was."""
    obj = metatest.make_class().new(x=1)
    qmeta.classify(obj)
    assert obj.vars() == {"x": 1}
    assert list(obj.cls.fns) == ["Foo", "Bar"]


def test_classify_is_not_cached():
    """Classification follows the value's current shape."""
    ref = qmeta.Ref(5)
    assert not qmeta.classify(ref).is_record
    ref.elem = metatest.Person("Ada")
    assert qmeta.classify(ref).is_record
