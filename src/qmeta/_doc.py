"""Human readable descriptions of runtime values.

Descriptions are a header line followed by one line per member, each
holding the member name and its type (or value) separated by a tab.
"""

__all__ = ["CLASS_MARKER", "OBJECT_MARKER", "resolve_package_name", "describe", "format_value"]

import collections.abc
import logging

import qmeta


logger = logging.getLogger(__name__)


# Header lines for the runtime's own class and object values
CLASS_MARKER = "qmeta.Class"
OBJECT_MARKER = "qmeta.Object"


def resolve_package_name(value):
    """Find the declared name of a module value.

    Args:
        value: (object) Any runtime value, only mappings can have names
    Returns:
        (tuple[str, bool]) The name and True, or ("", False) if the value
        is not a module or has no string name
    """
    if not isinstance(value, collections.abc.Mapping):
        return "", False
    for key in value:
        if isinstance(key, str) and key == qmeta.NAME_KEY:
            name = value[key]
            if isinstance(name, str):
                return name, True
    return "", False


def format_value(value):
    """Render a value as a literal, strings get double quotes."""
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
        return f'"{escaped}"'
    try:
        return repr(value)
    except Exception as e:
        logger.debug("Cannot render %s: %s", qmeta.typename(value), e)
        return f"<{qmeta.typename(value)} repr failed>"


def describe(value):
    """Describe a value and its members for display.

    Header lines by kind:

    - named module: "package <name>", members show their value type
    - unnamed module: empty, members show their value
    - class: CLASS_MARKER, members show function types
    - object: OBJECT_MARKER, class functions then variables with types
    - host value: the static type name, exported fields with their
      declared types, then exported methods with signatures

    Args:
        value: (object) Any runtime value
    Returns:
        (str) Multi line description
    """
    kind = qmeta.classify(value)
    lines = []

    if kind.kind is qmeta.Kind.MODULE:
        name, named = resolve_package_name(value)
        if named:
            lines.append(f"package {name}")
            for key, item in value.items():
                if qmeta.is_private(key):
                    continue
                lines.append(f"{key}\t{qmeta.typename(item)}")
        else:
            lines.append("")
            for key, item in value.items():
                lines.append(f"{key}\t{format_value(item)}")

    elif kind.kind is qmeta.Kind.CLASS:
        lines.append(CLASS_MARKER)
        for key, fn in value.fns.items():
            lines.append(f"{key}\t{qmeta.typename(fn)}")

    elif kind.kind is qmeta.Kind.OBJECT:
        lines.append(OBJECT_MARKER)
        for key, fn in value.cls.fns.items():
            lines.append(f"{key}\t{qmeta.typename(fn)}")
        for key, item in value.vars().items():
            lines.append(f"{key}\t{qmeta.typename(item)}")

    else:
        lines.append(qmeta.typename(value))
        if kind.is_record:
            try:
                for key, tp in qmeta.exported_fields(value):
                    lines.append(f"{key}\t{qmeta.format_type(tp)}")
            except qmeta.NotRecordError as e:
                logger.debug("No fields described: %s", e)
        for key, fn in qmeta.exported_methods(value):
            lines.append(f"{key}\t{qmeta.signature_of(fn)}")

    return "\n".join(lines)
