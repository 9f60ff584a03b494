"""The meta module, introspection functions exported to scripts.

The module is itself a module value: a mapping with a declared `_name`,
so it can describe itself.

    registry = create_registry()
    meta = registry.module("meta")
    meta["doc"](meta)
"""

__all__ = ["MODULE_NAME", "exports", "create_registry", "module_value"]

import inspect

import qmeta


# Declared name of the meta module
MODULE_NAME = "qmeta/meta"


def exports(registry):
    """Create the export table of the meta module.

    Args:
        registry: (Registry) Global tables the listing functions read
    Returns:
        (dict[str, object]) Module value with the meta functions
    """

    def fnlist():
        """List global function names."""
        return registry.fnlist()

    def fntable():
        """Get the global function table."""
        return registry.fntable()

    def pkgs():
        """List host implemented module names."""
        return registry.pkgs()

    return {
        qmeta.NAME_KEY: MODULE_NAME,
        "fnlist": fnlist,
        "fntable": fntable,
        "pkgs": pkgs,
        "dir": qmeta.members,
        "doc": qmeta.describe,
    }


def create_registry(functions=None, modules=None):
    """Create a registry that includes the meta module.

    The meta functions are added to the global function table and the meta
    module is registered as "meta". Tables passed in are not modified.

    Args:
        functions: (Mapping[str, callable] | None) Extra global functions
        modules: (Mapping[str, Mapping] | None) Extra host modules
    Returns:
        (Registry) Populated registry
    """
    function_table = dict(functions) if functions else {}
    module_table = dict(modules) if modules else {}
    registry = qmeta.Registry(function_table, module_table)

    # Tables are only filled here, the registry stays read-only afterwards
    meta = exports(registry)
    module_table["meta"] = meta
    for name, fn in meta.items():
        if not qmeta.is_private(name):
            function_table.setdefault(name, fn)
    return registry


def module_value(pymodule):
    """Convert a Python module into a module value.

    Only public attributes are kept, and the module name is declared under
    the reserved name key.

    Args:
        pymodule: (types.ModuleType) Imported Python module
    Returns:
        (dict[str, object]) Module value
    Raises:
        TypeError: If pymodule is not a module
    """
    if not inspect.ismodule(pymodule):
        raise TypeError(f"module_value requires a module, got {type(pymodule).__name__}")

    public = getattr(pymodule, "__all__", None)
    if public is None:
        public = [name for name in vars(pymodule) if not qmeta.is_private(name)]

    value = {qmeta.NAME_KEY: pymodule.__name__}
    for name in public:
        try:
            value[name] = getattr(pymodule, name)
        except AttributeError:
            continue
    return value
