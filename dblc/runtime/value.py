"""Runtime values and environments.

Environments are persistent singly linked lists of values: index 0 is the most recent binding, and a node is never
mutated once built, so any number of closures may share a tail. The empty environment is the EMPTY terminator, never
None.
"""

from abc import ABC
from dataclasses import dataclass

from dblc.lang.error import UnboundVariable
from dblc.pure.term import Term


class Value(ABC):
    """Superclass of runtime values. Only the evaluator builds them."""


@dataclass(frozen=True)
class NumberValue(Value):
    value: int

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class Closure(Value):
    body: Term  # owned by the term pool, not by the closure
    environment: "EnvList"

    def __str__(self):
        # the bracket is left open, as in the legacy output format
        return f"\\ {self.body}[" + "".join(f"{value}, " for value in self.environment)


class EnvList(ABC):
    """Persistent list of values. Iterates from the most recent binding outwards."""

    def __iter__(self):
        node = self
        while node is not EMPTY:
            yield node.head
            node = node.tail


class EmptyEnvironment(EnvList):
    """No bindings. Use the EMPTY singleton."""

    def __repr__(self):
        return "EMPTY"


EMPTY = EmptyEnvironment()


@dataclass(frozen=True)
class EnvCons(EnvList):
    head: Value
    tail: EnvList


def make_number(memory, value):
    return memory.values.allocate(NumberValue(value))


def make_closure(memory, body, environment):
    return memory.values.allocate(Closure(body, environment))


def cons_environment(memory, head, tail):
    """Binds head in front of tail. tail is shared, not copied."""
    return memory.environments.allocate(EnvCons(head, tail))


def lookup(environment, index):
    """Returns the value bound index links from the head of environment. Raises UnboundVariable if it is too short."""
    node = environment
    for walked in range(index):
        if node is EMPTY:
            raise UnboundVariable(index, walked)
        node = node.tail

    if node is EMPTY:
        raise UnboundVariable(index, index)
    return node.head
