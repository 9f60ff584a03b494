"""Identifier visibility and reserved naming conventions.

The runtime marks a handful of names as special by spelling alone. These
are collected here so the registry and the formatters agree on them.
"""

__all__ = [
    "NAME_KEY",
    "PRIVATE_PREFIX",
    "INTERNAL_PREFIX",
    "is_exported",
    "is_private",
    "is_internal",
]

import unicodedata


# Module key holding the declared module name
NAME_KEY = "_name"

# Module keys hidden from a named module's description
PRIVATE_PREFIX = "_"

# Registry functions used by the runtime itself, never listed
INTERNAL_PREFIX = "$"


def is_exported(name):
    """Check if an identifier is publicly visible.

    Only the first character matters, it must be an uppercase letter.

    Args:
        name: (str) Identifier to check
    Returns:
        (bool) True for exported identifiers, False for empty strings
    """
    return bool(name) and unicodedata.category(name[0]) == "Lu"


def is_private(key):
    """(bool) Module key uses the reserved private prefix."""
    return str(key).startswith(PRIVATE_PREFIX)


def is_internal(name):
    """(bool) Registry name uses the internal prefix."""
    return name.startswith(INTERNAL_PREFIX)
