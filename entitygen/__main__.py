"""Allow ``python -m entitygen``."""

from entitygen.cli import main

main()
