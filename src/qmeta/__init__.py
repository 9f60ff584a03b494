"""
qmeta Runtime Introspection

Member listing and readable descriptions for the values of a dynamic
scripting runtime: modules, classes, objects, and host Python values.
"""

__version__ = "0.1.0"


from ._error import *
from ._names import *
from ._value import *
from ._host import *
from ._kind import *
from ._dir import *
from ._doc import *
from ._registry import *
from .meta import *
