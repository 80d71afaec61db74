"""Allow ``python -m oasis_vimiumc``."""

from oasis_vimiumc.cli import main

main()
