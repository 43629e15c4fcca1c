"""The dumbest allocator one can imagine: hand out the next slot in a fixed-size pool, and fail if there is none left.

There is one pool per kind of node (terms, values, environment cells). Nothing is ever freed on its own; a whole
Memory can only be reset once a run is over.
"""

from dblc.config import TERMS_SIZE, VALS_SIZE, VAL_LIST_SIZE
from dblc.lang.error import AllocationExhausted


class Arena:
    """Bump allocator over a growable list of slots, capped at capacity."""

    def __init__(self, name, capacity):
        self.name = name
        self.capacity = capacity
        self.slots = []

    @property
    def remaining(self):
        return self.capacity - len(self.slots)

    def allocate(self, node):
        """Stores node in the next slot and returns it. Raises AllocationExhausted if the pool is full."""
        if self.remaining <= 0:
            raise AllocationExhausted(self.name, self.capacity)
        self.slots.append(node)
        return node

    def reset(self):
        """Drops every slot at once. Only call between runs: live nodes stay reachable, but are no longer counted."""
        self.slots = []

    def __len__(self):
        return len(self.slots)

    def __repr__(self):
        return f"Arena('{self.name}', {len(self.slots)}/{self.capacity})"


class Memory:
    """The three pools used by one run."""

    def __init__(self, term_capacity=TERMS_SIZE, value_capacity=VALS_SIZE, env_capacity=VAL_LIST_SIZE):
        self.terms = Arena("term", term_capacity)
        self.values = Arena("value", value_capacity)
        self.environments = Arena("environment", env_capacity)

    @classmethod
    def from_config(cls, config):
        return cls(config.term_capacity, config.value_capacity, config.env_capacity)

    @property
    def arenas(self):
        return self.terms, self.values, self.environments

    def reset(self):
        for arena in self.arenas:
            arena.reset()

    def __repr__(self):
        return f"Memory({', '.join(repr(arena) for arena in self.arenas)})"
