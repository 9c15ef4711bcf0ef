# graphgrad/core/__init__.py

"""
Core public API for graphgrad.

Exports:
    Network        : Owns a graph, its values and gradients; forward/backward entry points.
    NetworkConfig  : Configuration (dtype, arity checks, gradient accumulation, verbosity).
    NodeHandle     : Opaque, ordered, hashable reference to a node of one network.
    Node           : Node metadata (operator, inputs, differentiability).
    Operator       : Base class for operators (forward + backward).
    GraphError, NodeNotFound, UnfedPlaceholder, NotEvaluated : error kinds.
    grad, grads    : Convenience: gradients of a function built on a fresh network.
    value          : Convenience: forward value of a node.
"""

from .config import NetworkConfig
from .errors import GraphError, NodeNotFound, UnfedPlaceholder, NotEvaluated
from .node import Node, NodeHandle
from .operator import Operator
from .network import Network
from .seeds import grad, grads, value

__all__ = [
    "Network", "NetworkConfig",
    "Node", "NodeHandle",
    "Operator",
    "GraphError", "NodeNotFound", "UnfedPlaceholder", "NotEvaluated",
    "grad", "grads", "value",
]
