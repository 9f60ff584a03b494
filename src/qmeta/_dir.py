"""Member enumeration for runtime values."""

__all__ = ["members"]

import logging

import qmeta


logger = logging.getLogger(__name__)


def members(value):
    """List the member names a value exposes.

    - module: every key of the mapping
    - class: every function name
    - object: class function names, then instance variable names
    - host value: exported record fields, then exported type methods

    Object members are not deduplicated, a variable named like one of the
    class functions is listed twice. Order carries no meaning.

    Args:
        value: (object) Any runtime value
    Returns:
        (list[str]) Member names, empty for shapes with no members
    """
    kind = qmeta.classify(value)

    if kind.kind is qmeta.Kind.MODULE:
        return [str(key) for key in value]

    if kind.kind is qmeta.Kind.CLASS:
        return list(value.fns)

    if kind.kind is qmeta.Kind.OBJECT:
        return list(value.cls.fns) + list(value.vars())

    names = []
    if kind.is_record:
        try:
            names.extend(name for name, _ in qmeta.exported_fields(value))
        except qmeta.NotRecordError as e:
            logger.debug("No fields listed: %s", e)
    names.extend(name for name, _ in qmeta.exported_methods(value))
    return names
