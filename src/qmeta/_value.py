"""Runtime representations for classes, objects, and references."""

__all__ = ["Class", "Object", "Ref"]


class Class:
    """A class defined by script code.

    Classes are a named set of member functions. The function table is
    shared by every object created from the class.

    Args:
        name: (str) Class name
        fns: (dict | None) Member functions by name

    Attributes:
        name: (str) Class name
        fns: (dict[str, callable]) Member function table
    """

    __slots__ = ("name", "fns")

    def __init__(self, name, fns=None):
        self.name = name
        self.fns = dict(fns) if fns else {}

    def __repr__(self):
        return f"Class<{self.name}>"

    def new(self, **variables):
        """Create an object of this class.

        Args:
            **variables: Initial instance variables
        Returns:
            (Object) New instance bound to this class
        """
        return Object(self, variables)


class Object:
    """An instance of a script defined class.

    Objects reference exactly one owning class and carry their own
    mutable variables.

    Args:
        cls: (Class) Owning class
        variables: (dict | None) Initial instance variables

    Attributes:
        cls: (Class) Owning class
    """

    __slots__ = ("cls", "_vars")

    def __init__(self, cls, variables=None):
        if not isinstance(cls, Class):
            raise TypeError(f"Object requires a Class, got {type(cls).__name__}")
        self.cls = cls
        self._vars = dict(variables) if variables else {}

    def __repr__(self):
        return f"Object<{self.cls.name}>"

    def vars(self):
        """(dict[str, object]) Current instance variables."""
        return self._vars

    def set(self, name, value):
        """Assign an instance variable."""
        self._vars[name] = value


class Ref:
    """Single owner reference to another value.

    Host values are sometimes handed to scripts boxed behind a reference.
    Introspection looks through any number of these to the value inside.

    Args:
        elem: (object) Referenced value

    Attributes:
        elem: (object) Referenced value
    """

    __slots__ = ("elem",)

    def __init__(self, elem):
        self.elem = elem

    def __repr__(self):
        return f"Ref({self.elem!r})"
