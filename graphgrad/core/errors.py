# graphgrad/core/errors.py
"""
Exceptions raised by the graph engine.

All of them signal a contract violation by the caller (or, for
NodeNotFound, a handle that belongs to another network). None are
retried internally.
"""
from __future__ import annotations
from typing import Any, Optional


class GraphError(Exception):
    """Base class for graph engine errors. `handle` is the offending node, if any."""

    def __init__(self, message: str, handle: Optional[Any] = None):
        super().__init__(message)
        self.handle = handle


class NodeNotFound(GraphError, KeyError):
    """The handle was never registered in this network."""

    def __init__(self, handle: Any):
        super().__init__(f"{handle!r} is not registered in this network", handle)

    def __str__(self):
        # KeyError would otherwise wrap the message in quotes
        return self.args[0]


class UnfedPlaceholder(GraphError):
    """A forward pass reached a placeholder or variable that has no value."""

    def __init__(self, handle: Any, name: Optional[str] = None):
        label = f"{handle!r} ({name})" if name else f"{handle!r}"
        super().__init__(f"Placeholder {label} must be fed before evaluation", handle)


class NotEvaluated(GraphError):
    """A value or gradient was requested before the pass that produces it ran."""

    def __init__(self, handle: Any, what: str = "forward value"):
        super().__init__(f"No {what} for {handle!r}; run the required pass first", handle)
        self.what = what
