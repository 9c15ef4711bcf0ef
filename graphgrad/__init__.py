# graphgrad/__init__.py
# Computation graphs with forward evaluation and reverse-mode differentiation

from .core.config import NetworkConfig
from .core.errors import GraphError, NodeNotFound, UnfedPlaceholder, NotEvaluated
from .core.node import Node, NodeHandle
from .core.operator import Operator
from .core.network import Network
from .core.seeds import grad, grads, value
from .core.graph_utils import graph_summary, get_graph_stats, topological_order

# Operators
from . import ops
from .ops import Addition, Subtraction, Multiplication, Negation

__all__ = [
    # Core
    'Network',
    'NetworkConfig',
    'Node',
    'NodeHandle',
    'Operator',
    # Errors
    'GraphError',
    'NodeNotFound',
    'UnfedPlaceholder',
    'NotEvaluated',
    # Helpers
    'grad',
    'grads',
    'value',
    'graph_summary',
    'get_graph_stats',
    'topological_order',
    # Operators
    'ops',
    'Addition',
    'Subtraction',
    'Multiplication',
    'Negation',
]
