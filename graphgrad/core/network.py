# graphgrad/core/network.py
from __future__ import annotations
import itertools
import logging
from typing import Any, List, Optional, Set

from .config import NetworkConfig
from .errors import NotEvaluated, UnfedPlaceholder
from .feeder import Feeder
from .node import Node, NodeHandle
from .operator import Operator
from .registry import NodeRegistry
from .storage import GradientStorage, TensorStorage
from .tensor import Tensor, as_tensor

logger = logging.getLogger(__name__)

# Process-wide source of graph ids; handles carry the id of their network
_graph_ids = itertools.count()


class Network:
    """
    Computation graph with forward evaluation and reverse-mode gradients.

    Attributes
    ----------
    registry         : NodeRegistry
        Node metadata in creation order.
    forward_storage  : TensorStorage
        Latest value of every evaluated node (and of every variable).
    gradient_storage : GradientStorage
        Gradients from the last backward pass (or the running sum when
        `config.accumulate_gradients` is set).
    feeder           : Feeder
        Values supplied for placeholders.

    Usage:
        >>> net = Network()
        >>> x = net.variable([[1.0, 1.0], [2.0, 2.0]])
        >>> y = net.placeholder()
        >>> z = net.add(x, y)
        >>> net.feed(y, [[3.0, 4.0], [3.0, 4.0]]).forward(z)
        array([[4., 5.],
               [5., 6.]])
    """

    def __init__(self, config: Optional[NetworkConfig] = None):
        self.config = config or NetworkConfig()
        self.graph_id = next(_graph_ids)
        self.registry = NodeRegistry(self.graph_id)
        self.forward_storage = TensorStorage()
        self.gradient_storage = GradientStorage()
        self.feeder = Feeder()
        self.placeholders: List[NodeHandle] = []
        self.variables: List[NodeHandle] = []

    # ------------------------------------------------------------------ #
    # Graph construction
    # ------------------------------------------------------------------ #
    def placeholder(self, name: Optional[str] = None) -> NodeHandle:
        """Register an input slot whose value is fed before each evaluation."""
        handle = self.registry.register(Node(operator=None, is_differentiable=False, name=name))
        self.placeholders.append(handle)
        return handle

    def variable(self, initial: Any, name: Optional[str] = None) -> NodeHandle:
        """Register a differentiable input holding `initial` until reassigned."""
        value = as_tensor(initial, self.config.dtype)
        handle = self.registry.register(Node(operator=None, is_differentiable=True, name=name))
        self.forward_storage.insert(handle, value)
        self.variables.append(handle)
        return handle

    def apply(self, operator: Operator, *inputs: NodeHandle, name: Optional[str] = None) -> NodeHandle:
        """
        Register a node computing `operator` over `inputs`.
        Every operator constructor (add, sub, ...) goes through here.
        """
        if self.config.check_arity:
            operator.check_arity(len(inputs))
        node = Node(
            operator=operator,
            inputs=list(inputs),
            is_differentiable=operator.differentiable,
            name=name,
        )
        return self.registry.register(node)

    def add(self, lhs: NodeHandle, rhs: NodeHandle, name: Optional[str] = None) -> NodeHandle:
        from ..ops.arithmetic import add
        return add(self, lhs, rhs, name=name)

    def sub(self, lhs: NodeHandle, rhs: NodeHandle, name: Optional[str] = None) -> NodeHandle:
        from ..ops.arithmetic import sub
        return sub(self, lhs, rhs, name=name)

    def mul(self, lhs: NodeHandle, rhs: NodeHandle, name: Optional[str] = None) -> NodeHandle:
        from ..ops.arithmetic import mul
        return mul(self, lhs, rhs, name=name)

    def neg(self, x: NodeHandle, name: Optional[str] = None) -> NodeHandle:
        from ..ops.arithmetic import neg
        return neg(self, x, name=name)

    # ------------------------------------------------------------------ #
    # Values
    # ------------------------------------------------------------------ #
    def feed(self, handle: NodeHandle, value: Any) -> "Network":
        """
        Supply a value for a placeholder (or reassign a variable).
        Returns the network so feeds can be chained.
        """
        node = self.registry.get(handle)
        if node.is_variable:
            self.assign(handle, value)
        elif node.is_placeholder:
            self.feeder.feed(handle, as_tensor(value, self.config.dtype))
        else:
            raise ValueError(f"Cannot feed computed node {handle!r} ({node.op_tag})")
        return self

    def assign(self, handle: NodeHandle, value: Any):
        """Overwrite the value of a variable."""
        node = self.registry.get(handle)
        if not node.is_variable:
            raise ValueError(f"{handle!r} is a {node.op_tag}, not a variable")
        self.forward_storage.insert(handle, as_tensor(value, self.config.dtype))

    def value_of(self, handle: NodeHandle) -> Tensor:
        """Last forward value of `handle`, without recomputing anything."""
        self.registry.get(handle)
        value = self.forward_storage.get(handle)
        if value is None:
            raise NotEvaluated(handle)
        return value

    def gradient_of(self, handle: NodeHandle) -> Tensor:
        """Accumulated gradient of `handle` from the backward pass."""
        self.registry.get(handle)
        grad = self.gradient_storage.get(handle)
        if grad is None:
            raise NotEvaluated(handle, "gradient")
        return grad

    def zero_gradients(self):
        """Drop all accumulated gradients."""
        self.gradient_storage.clear()

    def node(self, handle: NodeHandle) -> Node:
        return self.registry.get(handle)

    def handles(self) -> List[NodeHandle]:
        return self.registry.handles()

    # ------------------------------------------------------------------ #
    # Forward pass
    # ------------------------------------------------------------------ #
    def forward(self, handle: NodeHandle) -> Tensor:
        """
        Evaluate `handle` and every node it depends on.

        Postorder DFS with an explicit stack of (handle, inputs_evaluated)
        pairs: a node is pushed back as evaluated before its inputs, so it is
        popped again only once all of its inputs are done. Everything on the
        way is recomputed on every call.
        """
        self.registry.get(handle)
        done: Set[NodeHandle] = set()
        stack = [(handle, False)]

        while stack:
            h, inputs_evaluated = stack.pop()
            if h in done:
                continue
            node = self.registry.get(h)

            if not inputs_evaluated:
                stack.append((h, True))
                for i in node.inputs:
                    if i not in done:
                        stack.append((i, False))
                continue

            if node.operator is not None:
                inputs = [self._input_value(h, i) for i in node.inputs]
                self.forward_storage.insert(h, node.operator.forward(inputs))
            elif node.is_placeholder:
                self.forward_storage.insert(h, self.feeder.get(h, node.name))
            elif h not in self.forward_storage:
                # a variable without a value
                raise UnfedPlaceholder(h, node.name)
            done.add(h)

        self._log("forward %r: %d nodes evaluated", handle, len(done))
        return self.forward_storage.get(handle)

    def _input_value(self, consumer: NodeHandle, handle: NodeHandle) -> Tensor:
        value = self.forward_storage.get(handle)
        if value is None:
            # postorder guarantees inputs first; reaching this is a bug
            raise RuntimeError(f"Value for {handle!r} (input of {consumer!r}) is not filled")
        return value

    # ------------------------------------------------------------------ #
    # Backward pass
    # ------------------------------------------------------------------ #
    def backward(self, handle: NodeHandle):
        """
        Accumulate d(handle)/d(node) for every differentiable ancestor.

        The target is seeded with ones shaped like its forward value. Nodes
        reachable from it are then swept in descending creation order: any
        consumer of a node was created after it, so a node's gradient is
        complete before its own operator distributes it to the inputs.
        Non-differentiable nodes never receive a gradient entry.
        """
        node = self.registry.get(handle)
        value = self.forward_storage.get(handle)
        if value is None:
            raise NotEvaluated(handle)

        grads = GradientStorage()
        if node.is_differentiable:
            grads.seed(handle, value)
            reachable = self._reachable(handle)
        else:
            reachable = set()

        for h in sorted(reachable, reverse=True):
            node = self.registry.get(h)
            if not node.is_differentiable or node.operator is None:
                continue
            out_grad = grads.get(h)
            if out_grad is None:
                continue
            inputs = [self._input_value(h, i) for i in node.inputs]
            input_grads = node.operator.backward(out_grad, inputs)
            for i, g in zip(node.inputs, input_grads):
                if self.registry.get(i).is_differentiable:
                    grads.accumulate(i, g)

        if not self.config.accumulate_gradients:
            self.gradient_storage.clear()
        for h, g in grads.items():
            self.gradient_storage.accumulate(h, g)

        self._log("backward %r: %d gradients", handle, len(grads))

    def _reachable(self, handle: NodeHandle) -> Set[NodeHandle]:
        """Differentiable nodes reachable from `handle` through differentiable nodes."""
        seen: Set[NodeHandle] = set()
        stack = [handle]
        while stack:
            h = stack.pop()
            if h in seen:
                continue
            node = self.registry.get(h)
            if not node.is_differentiable:
                continue
            seen.add(h)
            stack.extend(node.inputs)
        return seen

    # ------------------------------------------------------------------ #
    def _log(self, msg: str, *args):
        logger.log(logging.INFO if self.config.verbose else logging.DEBUG, msg, *args)

    def __len__(self) -> int:
        return len(self.registry)

    def __repr__(self):
        return (
            f"Network(nodes={len(self.registry)}, placeholders={len(self.placeholders)}, "
            f"variables={len(self.variables)})"
        )
