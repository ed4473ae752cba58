"""Run the terminal game with ``python -m cli``."""

from cli.main import main

main()
