"""
Exceptions raised by the theory engine.

Wrong notation is worse than a crash, so nothing here is ever caught
and coerced into a best-effort answer inside the engine.
"""


class TheoryError(ValueError):
    """Input or intermediate result that violates music-theory rules."""


class InternalConsistencyError(RuntimeError):
    """A lookup table disagrees with itself. Indicates a bug, not bad input."""
