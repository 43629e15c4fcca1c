"""Error handling for dblc. Only GenericExceptions should be encountered during a run: if another type of error is
raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.

Every error is fatal to the run it occurs in. Parser, allocator and evaluator raise; only the outermost driver (see
main.py) decides to halt, by way of ErrorHandler.
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error/warning message so that it can be used to throw a dblc error/warning."""

    def __init__(self, msg, exprs=None, start=0, end=-1, diagnosis=True, internal=False):
        """Parses args for GenericException or warning."""
        if exprs is None:
            exprs = ""
        if isinstance(exprs, str):
            exprs = [exprs]
        exprs = [str(expr) for expr in exprs]

        super().__init__(msg.format(*exprs))
        self.msg = msg.format(*(colored(expr, attrs=["bold"]) for expr in exprs))  # color expr snippets
        self.expr = exprs[0] if exprs else ""  # exprs[0] should be the offending expr that caused the error
        self.end = end if end != -1 else len(self.expr)  # needed for error display

        self.start = start
        self.diagnosis = diagnosis
        self.internal = internal


class AllocationExhausted(GenericException):
    """A memory pool has handed out all of its slots."""

    def __init__(self, pool, capacity):
        super().__init__("{} pool exhausted after {} allocations", (pool, capacity), diagnosis=False)
        self.pool = pool
        self.capacity = capacity


class LambdaSyntaxError(GenericException):
    """Malformed program text. expr is always the whole source so the diagnosis can point at the bad character."""

    def __init__(self, msg, source, pos, *others):
        super().__init__(msg, (source, *others), start=pos, end=pos + 1)
        self.pos = pos


class UnboundVariable(GenericException):
    """A de Bruijn index reaches past the end of the environment."""

    def __init__(self, index, bindings):
        super().__init__("'{}' is unbound: only {} binding(s) in scope", (f"${index}", bindings))
        self.index = index
        self.bindings = bindings


class TypeMismatch(GenericException):
    """An operand has the wrong runtime shape, e.g. a closure where a number is required."""

    def __init__(self, operation, expected, value):
        super().__init__("'{}' expected {}, got '{}'", (operation, expected, value), diagnosis=False)
        self.operation = operation
        self.expected = expected
        self.value = value


class ConfigError(GenericException):
    """Invalid configuration value."""


class ErrorHandler:
    """Context manager that will silently suppress Python errors and raise custom dblc errors/warnings."""
    ERROR = "red"
    WARNING = "magenta"

    def __init__(self, fatal=True, stream=None):
        self.fatal = fatal
        self.stream = stream if stream is not None else sys.stderr

    @staticmethod
    def diagnose(error, warning=False):
        """Returns offending part of error.expr highlighted and bolded."""
        color = ErrorHandler.WARNING if warning else ErrorHandler.ERROR

        diagnosis = "  " + error.expr[:error.start]

        end = max(error.end, error.start + 1)
        diagnosis += colored(error.expr[error.start:end], color, attrs=["bold"])
        diagnosis += error.expr[end:] + "\n"

        diagnosis += "  " + " " * error.start
        diagnosis += colored("^" + "~" * (end - error.start - 1), color, attrs=["bold"])

        return diagnosis

    def warn(self, *args, **kwargs):
        """Generates and prints runtime warning message based on args."""
        error = GenericException(*args, **kwargs)

        error_msg = colored("warning: ", ErrorHandler.WARNING, attrs=["bold"]) + error.msg
        print(error_msg, file=self.stream)

        if not error.internal and error.expr and error.diagnosis:
            print(ErrorHandler.diagnose(error, warning=True), file=self.stream)

    def throw(self, error):
        """Prints error, which must be a GenericException, and exits with status 1 if self.fatal."""
        error_msg = ""
        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(error_msg, file=self.stream)

        if not error.internal and error.expr and error.diagnosis:
            print(ErrorHandler.diagnose(error), file=self.stream)

        if self.fatal:
            sys.exit(1)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            return False
        if issubclass(exc_type, SystemExit):
            return False

        if issubclass(exc_type, KeyboardInterrupt):
            self.throw(GenericException("keyboard interrupt"))
        elif issubclass(exc_type, RecursionError):
            self.throw(GenericException("program might terminate, but maximum recursion depth exceeded"))
        elif issubclass(exc_type, GenericException):
            self.throw(exc_val)
        else:
            self.throw(GenericException("unknown error: '{}'", f"{exc_type.__name__}: {exc_val}", internal=True))
        return True
