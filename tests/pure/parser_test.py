import unittest

from dblc.lang.error import AllocationExhausted, LambdaSyntaxError
from dblc.memory.arena import Memory
from dblc.pure.parser import Parser
from dblc.pure.term import Abstraction, Addition, Application, Conditional, Number, Variable


def parse(text, memory=None):
    return Parser(text, memory if memory is not None else Memory()).parse()


class ParserTestCase(unittest.TestCase):

    def test_parse_term(self):
        cases = {
            "$0": Variable(0),
            "$42": Variable(42),
            "0": Number(0),
            "1000": Number(1000),
            "-1": Number(-1),
            "-0": Number(0),
            "+ 2 3": Addition(Number(2), Number(3)),
            "@ \\ $0 4": Application(Abstraction(Variable(0)), Number(4)),
            "? 0 1 2": Conditional(Number(0), Number(1), Number(2)),
            "\\ \\ $1": Abstraction(Abstraction(Variable(1))),
            "+ -1 $0": Addition(Number(-1), Variable(0)),
            "@ @ \\ \\ + $1 $0 2 -5": Application(
                Application(Abstraction(Abstraction(Addition(Variable(1), Variable(0)))), Number(2)), Number(-5)),
        }
        for case, expected in cases.items():
            self.assertEqual(expected, parse(case), case)

    def test_syntax_errors(self):
        should_raise = ["", "+", "+ 2", "+2 3", "+ 2  3", "x", "$", "$x", "-", "--1", "\\$0", "\\ ", "? 1 2",
                        "@ 1", "@  1 2", " 1", "+ 2\t3"]
        for case in should_raise:
            self.assertRaises(LambdaSyntaxError, parse, case)

    def test_error_position(self):
        cases = {
            "+ 2x3": 3,      # missing space after the first operand
            "+ 2 ": 4,       # end of input where a term is expected
            "@ \\ $0 !": 7,  # unrecognized leading character
            "$": 1,          # variable without an index
        }
        for case, pos in cases.items():
            with self.assertRaises(LambdaSyntaxError) as context:
                parse(case)
            self.assertEqual(pos, context.exception.pos, case)
            self.assertEqual(case, context.exception.expr, case)

    def test_trailing_input(self):
        parser = Parser("1 2", Memory())
        self.assertEqual(Number(1), parser.parse())
        self.assertFalse(parser.eof())
        self.assertEqual(1, parser.pos)

        parser = Parser("+ 1 2", Memory())
        parser.parse()
        self.assertTrue(parser.eof())

    def test_allocates_every_node(self):
        cases = {"7": 1, "+ 2 3": 3, "@ \\ $0 4": 4, "? 0 1 2": 4}
        for case, count in cases.items():
            memory = Memory()
            parse(case, memory)
            self.assertEqual(count, len(memory.terms), case)
            self.assertEqual(0, len(memory.values), case)

    def test_children_allocated_first(self):
        memory = Memory()
        term = parse("+ 2 3", memory)
        self.assertEqual([Number(2), Number(3), term], memory.terms.slots)

    def test_term_pool_exhausted(self):
        memory = Memory(term_capacity=2)
        self.assertRaises(AllocationExhausted, parse, "+ 2 3", memory)
        self.assertEqual(0, len(memory.values))
        self.assertEqual(0, len(memory.environments))

    def test_round_trip(self):
        cases = [
            "$0",
            "-17",
            "? $0 + $1 -1 \\ $2",
            "@ @ @ \\ @ \\ @ $1 \\ @ @ $1 $1 $0 \\ @ $1 \\ @ @ $1 $1 $0 \\ \\ \\ ? $1 + $0 @ @ $2 + $1 -1 $0 0 1000 1000",
        ]
        for case in cases:
            term = parse(case)
            self.assertEqual(case, str(term))
            self.assertEqual(term, parse(str(term)), case)

        # canonical form drops redundant signs and leading zeros
        cases = {"-0": "0", "007": "7", "$01": "$1"}
        for case, rendered in cases.items():
            term = parse(case)
            self.assertEqual(rendered, str(term), case)
            self.assertEqual(term, parse(str(term)), case)


if __name__ == '__main__':
    unittest.main()
