"""Runs the embedded dblc program. Called from the dblc console script.

Any error ends the run: ErrorHandler prints a diagnostic to stderr and exits with status 1.
"""

from dblc.lang.error import ErrorHandler
from dblc.lang.session import Session


def main():
    """Runs the dblc interpreter on Session.DEFAULT_PROGRAM."""
    with ErrorHandler() as error_handler:
        Session(error_handler).run()
    return 0


if __name__ == "__main__":
    main()
