"""Classification of runtime values into their structural kind."""

__all__ = ["Kind", "Classified", "classify"]

import collections.abc
import dataclasses
import enum
import logging

import qmeta


logger = logging.getLogger(__name__)


class Kind(enum.Enum):
    """Structural variant of a runtime value."""

    MODULE = "module"
    CLASS = "class"
    OBJECT = "object"
    HOST = "host"


@dataclasses.dataclass(frozen=True)
class Classified:
    """Result of classifying a value.

    Attributes:
        kind: (Kind) Structural variant
        is_record: (bool) Host value has named fields after indirection,
            always False for the other kinds
    """

    kind: Kind
    is_record: bool = False


def classify(value):
    """Determine which variant a runtime value is.

    Modules are any mapping, classes and objects are the runtime's own
    representations, everything else is a host value.

    Args:
        value: (object) Any runtime value
    Returns:
        (Classified) Kind of the value
    """
    if isinstance(value, collections.abc.Mapping):
        result = Classified(Kind.MODULE)
    elif isinstance(value, qmeta.Class):
        result = Classified(Kind.CLASS)
    elif isinstance(value, qmeta.Object):
        result = Classified(Kind.OBJECT)
    else:
        result = Classified(Kind.HOST, qmeta.is_record(value))
    logger.debug("Classified %s as %s", type(value).__name__, result.kind.name)
    return result
