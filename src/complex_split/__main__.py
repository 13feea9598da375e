"""Allow ``python -m complex_split``."""

from complex_split.cli.main import main

main()
