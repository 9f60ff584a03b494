"""Reflection over host provided Python values.

Host values are anything the runtime did not create itself. They are
inspected structurally:

- Records are dataclass instances, named tuples, or instances of a type
  registered with a field table. Any number of `Ref` boxes are looked
  through first.
- Methods are the callables declared on the value's type.

Types that cannot be reflected usefully (slotted classes, extension types)
can be described with `register_host`.
"""

__all__ = [
    "HostAdapter",
    "register_host",
    "unregister_host",
    "deref",
    "is_record",
    "record_fields",
    "exported_fields",
    "type_methods",
    "exported_methods",
    "typename",
    "format_type",
    "signature_of",
]

import dataclasses
import inspect
import logging
import types

import qmeta


logger = logging.getLogger(__name__)


# Attribute types found on a class that count as methods
_METHOD_TYPES = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.WrapperDescriptorType,
    types.MethodDescriptorType,
    types.ClassMethodDescriptorType,
    staticmethod,
    classmethod,
)

# Registered adapters {type: HostAdapter}
_adapters = {}


@dataclasses.dataclass(frozen=True)
class HostAdapter:
    """Hand written description of a host type.

    Attributes:
        fields: (tuple[tuple[str, object], ...] | None) Field names and types
            in declaration order, None when the type is not a record
        methods: (tuple[str, ...] | None) Method names to report, None to
            discover them from the type
    """

    fields: tuple | None = None
    methods: tuple | None = None


def register_host(cls, fields=None, methods=None):
    """Describe a host type that reflection cannot inspect.

    Adapters apply to subclasses as well, the closest registration in the
    method resolution order wins.

    Args:
        cls: (type) Host type to describe
        fields: (Mapping[str, object] | None) Field name to field type, in
            declaration order. Makes instances records.
        methods: (Iterable[str] | None) Method names to report
    Returns:
        (HostAdapter) The registered adapter
    Raises:
        TypeError: If cls is not a type
    """
    if not isinstance(cls, type):
        raise TypeError(f"register_host requires a type, got {type(cls).__name__}")

    adapter = HostAdapter(
        fields=tuple(fields.items()) if fields is not None else None,
        methods=tuple(methods) if methods is not None else None,
    )
    _adapters[cls] = adapter
    logger.debug("Registered host adapter for %s", format_type(cls))
    return adapter


def unregister_host(cls):
    """Remove a previously registered adapter, if any."""
    _adapters.pop(cls, None)


def _adapter_for(tp):
    for base in tp.__mro__:
        adapter = _adapters.get(base)
        if adapter is not None:
            return adapter
    return None


def deref(value):
    """Follow `Ref` indirection down to the referenced value."""
    while isinstance(value, qmeta.Ref):
        value = value.elem
    return value


def is_record(value):
    """(bool) Value is a record, after following indirection."""
    value = deref(value)
    adapter = _adapter_for(type(value))
    if adapter is not None and adapter.fields is not None:
        return True
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return True
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def record_fields(value):
    """Get declared fields of a record value.

    Args:
        value: (object) Record, or a Ref leading to one
    Returns:
        (list[tuple[str, object]]) Field names and types in declaration order
    Raises:
        NotRecordError: If the referenced value is not a record
    """
    target = deref(value)
    tp = type(target)

    adapter = _adapter_for(tp)
    if adapter is not None and adapter.fields is not None:
        return list(adapter.fields)

    if dataclasses.is_dataclass(target) and not isinstance(target, type):
        return [(field.name, field.type) for field in dataclasses.fields(target)]

    if isinstance(target, tuple) and hasattr(tp, "_fields"):
        # Plain collections.namedtuple has no annotations
        hints = getattr(tp, "__annotations__", {})
        return [(name, hints.get(name, object)) for name in tp._fields]

    raise qmeta.NotRecordError(typename(value))


def exported_fields(value):
    """Like `record_fields` but only the exported ones."""
    return [(name, tp) for name, tp in record_fields(value) if qmeta.is_exported(name)]


def type_methods(value):
    """Get the callables declared on a value's type.

    Properties, nested classes and plain class attributes are not methods.
    Discovered methods come back sorted by name.

    Args:
        value: (object) Host value, or a Ref leading to one
    Returns:
        (list[tuple[str, object]]) Method names and the callables
    """
    tp = type(deref(value))
    adapter = _adapter_for(tp)
    if adapter is not None and adapter.methods is not None:
        names = adapter.methods
    else:
        names = dir(tp)

    methods = []
    for name in names:
        try:
            attr = inspect.getattr_static(tp, name)
        except AttributeError:
            continue
        if isinstance(attr, _METHOD_TYPES):
            methods.append((name, getattr(tp, name)))
    return methods


def exported_methods(value):
    """Like `type_methods` but only the exported ones."""
    return [(name, fn) for name, fn in type_methods(value) if qmeta.is_exported(name)]


def typename(value):
    """Static type name of a value, one `*` for each Ref level."""
    prefix = ""
    while isinstance(value, qmeta.Ref):
        prefix += "*"
        value = value.elem
    return prefix + format_type(type(value))


def format_type(tp):
    """Render a type or annotation as text.

    Builtin types are bare names, other classes are qualified with their
    module. Annotations kept as strings are returned unchanged.

    Args:
        tp: (type | str | object) Type, annotation, or generic alias
    Returns:
        (str) Readable type name
    """
    if isinstance(tp, str):
        return tp
    if isinstance(tp, type) and not isinstance(tp, types.GenericAlias):
        if tp.__module__ == "builtins":
            return tp.__qualname__
        return f"{tp.__module__}.{tp.__qualname__}"
    return repr(tp)


def signature_of(fn):
    """Render the call signature of a method, like `func(self, x: int) -> str`."""
    try:
        return f"func{inspect.signature(fn)}"
    except (TypeError, ValueError):
        # Some builtins carry no signature metadata
        return format_type(type(fn))
