"""Command-line interface for qmeta.

Inspect registered modules or any importable Python object from a shell:

    qmeta dir <target>     - List member names
    qmeta doc <target>     - Describe a value and its members
    qmeta pkgs             - List registered modules
    qmeta fnlist           - List global functions
"""

import inspect
import logging
import pydoc
import sys

import qmeta
from qmeta import _colorize


USAGE = """\
Usage:
  qmeta dir <target>     - List member names
  qmeta doc <target>     - Describe a value and its members
  qmeta pkgs             - List registered modules
  qmeta fnlist           - List global functions

Options:
  --verbose              Show debug logging
  --color / --no-color   Force colored output on or off"""


def resolve_target(registry, target):
    """Find the value a command line target names.

    Registered module names are checked first, then the name is located as
    a dotted Python path. Python modules become module values.

    Args:
        registry: (Registry) Registry with the known modules
        target: (str) Module name or dotted Python path
    Returns:
        (object) Runtime value to inspect
    Raises:
        LookupError: If nothing is found under the name
    """
    value = registry.module(target)
    if value is not None:
        return value

    try:
        obj = pydoc.locate(target)
    except pydoc.ErrorDuringImport as e:
        raise LookupError(f"Error importing {target!r}: {e.value}") from e
    if obj is None:
        raise LookupError(f"Could not locate {target!r}")
    if inspect.ismodule(obj):
        return qmeta.module_value(obj)
    return obj


def _take_flag(args, flag):
    if flag in args:
        args.remove(flag)
        return True
    return False


def main(argv=None):
    """Main entry point for the qmeta CLI."""
    args = list(sys.argv[1:] if argv is None else argv)

    if _take_flag(args, "--verbose"):
        logging.basicConfig(level=logging.DEBUG)
    color = None
    if _take_flag(args, "--color"):
        color = True
    if _take_flag(args, "--no-color"):
        color = False

    if not args:
        print(USAGE, file=sys.stderr)
        sys.exit(1)

    registry = qmeta.create_registry()
    command = args[0]

    if command == "pkgs":
        for name in sorted(registry.pkgs()):
            print(name)
        return

    if command == "fnlist":
        for name in sorted(registry.fnlist()):
            print(name)
        return

    if command not in ("dir", "doc"):
        print(f"Error: Unknown command {command!r}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        sys.exit(1)

    if len(args) < 2:
        print(f"Error: '{command}' command requires a target", file=sys.stderr)
        print(f"Usage: qmeta {command} <target>", file=sys.stderr)
        sys.exit(1)

    try:
        value = resolve_target(registry, args[1])
    except LookupError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if command == "dir":
        # Sorted for reading, members carry no order of their own
        for name in sorted(qmeta.members(value)):
            print(name)
        return

    text = qmeta.describe(value)
    if color is None:
        color = _colorize.should_use_color(sys.stdout)
    if color:
        text = _colorize.apply_ansi(_colorize.highlight_doc(text))
    print(text)


if __name__ == "__main__":
    main()
