"""Allow running qmeta with `python -m qmeta`."""

from .cli import main

main()
