r"""Lambda calculus terms with de Bruijn indices, integers, addition and conditionals.

Terms are written in prefix notation:

```
<term> ::= "$" <int>                        ; "variable"
                                            ; - de Bruijn index: 0 is the innermost enclosing abstraction
         | <int> | "-" <int>                ; "number"
         | "@ " <term> " " <term>           ; "application": function, then argument
         | "\ " <term>                      ; "abstraction"
                                            ; - single parameter, referred to as $0 inside the body
         | "+ " <term> " " <term>           ; "addition"
         | "? " <term> " " <term> " " <term> ; "conditional": condition, then, else (zero selects else)
```

Terms are immutable and compare structurally, so str(term) reparses to an equal term.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Term(ABC):
    """Superclass of every term. Subclasses are frozen dataclasses whose fields are listed in prefix order."""
    SYMBOL = ""

    @property
    @abstractmethod
    def nodes(self):
        """Child terms, in the order they are written and evaluated."""

    def __str__(self):
        return " ".join([self.SYMBOL] + [str(node) for node in self.nodes])

    def display(self, indents=0):
        """Recursively displays the term tree with readable format.

        Format:
        <Term>(expr='<expr>', nodes=[
            <Term>(expr='<expr>', nodes=[
                ...
                <Term>(expr='<expr>')  # <-- if nodes is empty
            ])
        ])
        """
        result = f"{'    ' * indents}{type(self).__name__}(expr='{self}'"
        if self.nodes:
            result += ", nodes=["
            for node in self.nodes:
                result += "\n" + node.display(indents + 1) + ","
            result = result[:-1] + f"\n{'    ' * indents}]"
        return result + ")"


@dataclass(frozen=True)
class Variable(Term):
    SYMBOL = "$"
    index: int

    @property
    def nodes(self):
        return ()

    def __str__(self):
        return f"{self.SYMBOL}{self.index}"


@dataclass(frozen=True)
class Number(Term):
    value: int

    @property
    def nodes(self):
        return ()

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class Application(Term):
    SYMBOL = "@"
    function: Term
    argument: Term

    @property
    def nodes(self):
        return self.function, self.argument


@dataclass(frozen=True)
class Abstraction(Term):
    SYMBOL = "\\"
    body: Term

    @property
    def nodes(self):
        return (self.body,)


@dataclass(frozen=True)
class Addition(Term):
    SYMBOL = "+"
    left: Term
    right: Term

    @property
    def nodes(self):
        return self.left, self.right


@dataclass(frozen=True)
class Conditional(Term):
    SYMBOL = "?"
    condition: Term
    then_branch: Term
    else_branch: Term

    @property
    def nodes(self):
        return self.condition, self.then_branch, self.else_branch
