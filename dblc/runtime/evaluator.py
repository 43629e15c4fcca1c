"""Call-by-value evaluation of terms to values.

Substitution is never done by rewriting the tree: applying a closure evaluates its body under the closure's captured
environment with the argument pushed on front. Evaluation is plain recursion, strictly left to right, with no tail
calls and no cycle detection, so a non-terminating program ends in RecursionError.
"""

import sys
from contextlib import contextmanager

from dblc.config import RECURSION_LIMIT
from dblc.lang.error import GenericException, TypeMismatch
from dblc.pure.term import Abstraction, Addition, Application, Conditional, Number, Variable
from dblc.runtime.value import EMPTY, Closure, NumberValue, cons_environment, lookup, make_closure, make_number


@contextmanager
def recursion_limit(limit=RECURSION_LIMIT):
    """Raises the interpreter's recursion limit to at least limit for the duration of the block."""
    previous = sys.getrecursionlimit()
    sys.setrecursionlimit(max(limit, previous))
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


class Evaluator:
    """Evaluates terms, allocating values and environment cells from memory."""

    def __init__(self, memory):
        self.memory = memory

    def evaluate(self, term, environment=EMPTY):
        if isinstance(term, Variable):
            return lookup(environment, term.index)

        elif isinstance(term, Number):
            return make_number(self.memory, term.value)

        elif isinstance(term, Addition):
            left = self.evaluate(term.left, environment)
            right = self.evaluate(term.right, environment)
            return make_number(self.memory, self._number(left, "+") + self._number(right, "+"))

        elif isinstance(term, Conditional):
            condition = self.evaluate(term.condition, environment)
            if self._number(condition, "?"):
                return self.evaluate(term.then_branch, environment)
            return self.evaluate(term.else_branch, environment)

        elif isinstance(term, Abstraction):
            return make_closure(self.memory, term.body, environment)

        elif isinstance(term, Application):
            function = self.evaluate(term.function, environment)
            if not isinstance(function, Closure):
                raise TypeMismatch("@", "a closure", function)
            argument = self.evaluate(term.argument, environment)
            extended = cons_environment(self.memory, argument, function.environment)
            return self.evaluate(function.body, extended)

        raise GenericException("unhandled term '{}'", repr(term), internal=True)

    @staticmethod
    def _number(value, operation):
        if not isinstance(value, NumberValue):
            raise TypeMismatch(operation, "a number", value)
        return value.value
