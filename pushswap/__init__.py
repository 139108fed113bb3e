"""Two-stack sorting puzzle: a solver that emits operations, a checker that verifies them, and small text and buffer helpers."""

__version__ = "1.0.0"