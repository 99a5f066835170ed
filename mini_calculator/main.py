"""
Main entrypoint of the calculator.

This script:
- Validates the command line (no arguments besides --help)
- Runs the interactive loop on the process's standard streams
- Maps both ways of ending the session to exit status 0
"""

import argparse
import sys
from typing import List, Optional

from mini_calculator.common.logger import logger
from mini_calculator.repl.repl import CalculatorRepl


# Conventional shell status for a process ended by SIGINT
EXIT_INTERRUPTED: int = 130


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments to parse, defaults to sys.argv[1:]

    :return: Parsed arguments
    :rtype: argparse.Namespace
    """
    parser = argparse.ArgumentParser(
        description="Interactive calculator: enter '<op> <a> <b>', e.g. '+ 2 3'. Type 'exit' to quit."
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run one calculator session.

    :return: Process exit status
    :rtype: int
    """
    parse_args(argv)

    repl = CalculatorRepl()
    try:
        repl.run()
    except KeyboardInterrupt:
        print(file=repl.stdout)
        logger.warning("👋⚠️ Session interrupted")
        return EXIT_INTERRUPTED

    return 0


if __name__ == "__main__":
    sys.exit(main())
