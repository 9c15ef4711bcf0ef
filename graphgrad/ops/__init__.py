# graphgrad/ops/__init__.py

# Convenience re-exports so users can do: from graphgrad.ops import add, Addition, ...
from .arithmetic import Addition, Subtraction, Multiplication, Negation
from .arithmetic import add, sub, mul, neg

__all__ = [
    "Addition", "Subtraction", "Multiplication", "Negation",
    "add", "sub", "mul", "neg",
]
