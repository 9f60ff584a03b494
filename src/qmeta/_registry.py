"""Read-only view of the runtime's global function and module tables."""

__all__ = ["Registry"]

import types

import qmeta


class Registry:
    """Global tables the runtime fills while starting up.

    The registry is handed to whatever needs it instead of being looked up
    from global state. It never copies or mutates the tables it wraps.

    Args:
        functions: (Mapping[str, callable] | None) Global function table
        modules: (Mapping[str, Mapping] | None) Host implemented modules by name

    Attributes:
        functions: (Mapping[str, callable]) Read-only global function table
        modules: (Mapping[str, Mapping]) Read-only module table
    """

    __slots__ = ("functions", "modules")

    def __init__(self, functions=None, modules=None):
        self.functions = types.MappingProxyType(functions if functions is not None else {})
        self.modules = types.MappingProxyType(modules if modules is not None else {})

    def __repr__(self):
        return f"Registry<{len(self.functions)} functions, {len(self.modules)} modules>"

    def fnlist(self):
        """(list[str]) Names of global functions, without internal ones."""
        return [name for name in self.functions if not qmeta.is_internal(name)]

    def fntable(self):
        """(dict[str, callable]) Copy of the global function table, without internal ones."""
        return {name: fn for name, fn in self.functions.items() if not qmeta.is_internal(name)}

    def pkgs(self):
        """(list[str]) Names of the host implemented modules."""
        return list(self.modules)

    def module(self, name):
        """Get the export table of a module.

        Args:
            name: (str) Module name
        Returns:
            (Mapping | None) Module value, or None if not registered
        """
        return self.modules.get(name)
