"""Recursive descent parser for prefix-notation terms (see pure/term.py for the grammar).

There is no tokenizer: the parser walks a single forward-only cursor over the raw characters, with one character of
lookahead and no backtracking. Every node is allocated from the term pool of the Memory it is given, children before
their parent.
"""

from dblc.lang.error import LambdaSyntaxError
from dblc.pure.term import Abstraction, Addition, Application, Conditional, Number, Variable


class Parser:
    """Parses one term from text, allocating nodes from memory.terms."""
    SPACE = " "
    DIGITS = frozenset("0123456789")

    def __init__(self, text, memory):
        self.text = text
        self.memory = memory
        self.pos = 0

        self._dispatch = {
            "$": self.parse_var,
            "@": self.parse_app,
            "\\": self.parse_lam,
            "+": self.parse_plus,
            "?": self.parse_ite,
            "-": self.parse_neg,
        }

    def peek(self):
        """Returns the lookahead character, or "" at end of input."""
        return self.text[self.pos] if not self.eof() else ""

    def eof(self):
        return self.pos >= len(self.text)

    def pop(self):
        if self.eof():
            raise LambdaSyntaxError("'{}' ended unexpectedly", self.text, self.pos)
        char = self.text[self.pos]
        self.pos += 1
        return char

    def space(self):
        pos = self.pos
        char = self.pop()
        if char != Parser.SPACE:
            raise LambdaSyntaxError("'{}' expected a space, got '{}'", self.text, pos, char)

    def parse_int(self):
        """Parses an unsigned decimal integer of at least one digit."""
        if self.peek() not in Parser.DIGITS:
            self._unexpected("a digit")

        value = 0
        while not self.eof() and self.peek() in Parser.DIGITS:
            value = value * 10 + int(self.pop())
        return value

    def parse_term(self):
        char = self.peek()
        if char in self._dispatch:
            return self._dispatch[char]()
        elif char in Parser.DIGITS:
            return self.parse_num()
        self._unexpected("a term")

    def parse(self):
        """Parses a single term. Anything left after it is not consumed: check eof() afterwards."""
        return self.parse_term()

    def parse_num(self):
        return self._make(Number(self.parse_int()))

    def parse_neg(self):
        self.pop()
        return self._make(Number(-self.parse_int()))

    def parse_var(self):
        self.pop()
        return self._make(Variable(self.parse_int()))

    def parse_lam(self):
        self.pop()
        self.space()
        body = self.parse_term()
        return self._make(Abstraction(body))

    def parse_app(self):
        function, argument = self._parse_operands(2)
        return self._make(Application(function, argument))

    def parse_plus(self):
        left, right = self._parse_operands(2)
        return self._make(Addition(left, right))

    def parse_ite(self):
        condition, then_branch, else_branch = self._parse_operands(3)
        return self._make(Conditional(condition, then_branch, else_branch))

    def _parse_operands(self, count):
        """Pops the operator, then parses count space-prefixed operands."""
        self.pop()
        operands = []
        for __ in range(count):
            self.space()
            operands.append(self.parse_term())
        return operands

    def _make(self, term):
        return self.memory.terms.allocate(term)

    def _unexpected(self, expected):
        if self.eof():
            raise LambdaSyntaxError("'{}' ended unexpectedly, expected {}", self.text, self.pos, expected)
        raise LambdaSyntaxError("'{}' has unexpected character '{}', expected {}", self.text, self.pos, self.peek(),
                                expected)
