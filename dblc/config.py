"""Run configuration: pool capacities and the evaluator's recursion limit.

Defaults are sized for the embedded demonstration program. Each one can be overridden through the environment, e.g.
DBLC_TERMS_SIZE=50000.
"""

import os
from dataclasses import dataclass, fields

from dblc.lang.error import ConfigError


TERMS_SIZE = 10_000          # 10^4
VALS_SIZE = 1_000_000        # 10^6
VAL_LIST_SIZE = 1_000_000    # 10^6
RECURSION_LIMIT = 100_000    # python frames available to one evaluation


@dataclass(frozen=True)
class Config:
    term_capacity: int = TERMS_SIZE
    value_capacity: int = VALS_SIZE
    env_capacity: int = VAL_LIST_SIZE
    recursion_limit: int = RECURSION_LIMIT

    ENV_VARS = {
        "term_capacity": "DBLC_TERMS_SIZE",
        "value_capacity": "DBLC_VALS_SIZE",
        "env_capacity": "DBLC_VAL_LIST_SIZE",
        "recursion_limit": "DBLC_RECURSION_LIMIT",
    }

    @classmethod
    def from_env(cls, environ=None):
        """Builds a Config from environ (os.environ by default). Unset variables keep their defaults."""
        if environ is None:
            environ = os.environ

        overrides = {}
        for field in fields(cls):
            name = cls.ENV_VARS[field.name]
            raw = environ.get(name)
            if raw is None or not raw.strip():
                continue
            try:
                value = int(raw)
                assert value > 0
            except (AssertionError, ValueError):
                raise ConfigError("'{}' must be a positive integer, got '{}'", (name, raw), diagnosis=False)
            overrides[field.name] = value

        return cls(**overrides)
