"""Session control for dblc: one Memory, one program at a time. Parses, evaluates and renders, leaving the decision to
halt on an error to the ErrorHandler that wraps it.
"""

import sys

from dblc.config import Config
from dblc.memory.arena import Memory
from dblc.pure.parser import Parser
from dblc.runtime.evaluator import Evaluator, recursion_limit
from dblc.runtime.value import EMPTY


class Session:
    """Governs a dblc run."""
    # sum of 1000 copies of 1000, by way of the Z combinator
    DEFAULT_PROGRAM = ("@ @ @ \\ @ \\ @ $1 \\ @ @ $1 $1 $0 \\ @ $1 \\ @ @ $1 $1 $0 "
                       "\\ \\ \\ ? $1 + $0 @ @ $2 + $1 -1 $0 0 1000 1000")

    def __init__(self, error_handler, config=None):
        self.error_handler = error_handler
        self.config = config if config is not None else Config.from_env()
        self.memory = Memory.from_config(self.config)

        self.results = []  # list of (term, value) from each run

    def parse(self, text):
        """Parses text into a term. Characters after the first complete term are ignored with a warning."""
        parser = Parser(text, self.memory)
        term = parser.parse()

        if not parser.eof():
            self.error_handler.warn("'{}' has trailing input after a complete term, ignoring it", text,
                                    start=parser.pos, end=len(text))
        return term

    def evaluate(self, term):
        with recursion_limit(self.config.recursion_limit):
            return Evaluator(self.memory).evaluate(term, EMPTY)

    def run(self, text=DEFAULT_PROGRAM, out=None):
        """Parses and evaluates text on a fresh Memory, printing both. Returns the value."""
        if out is None:
            out = sys.stdout

        self.memory.reset()

        term = self.parse(text)
        print("parsed:", file=out)
        print(term, file=out)

        value = self.evaluate(term)
        print("evaled:", file=out)
        print(value, file=out)

        self.results.append((term, value))
        return value

    def pop(self):
        """Removes and returns the latest (term, value)."""
        return self.results.pop()
