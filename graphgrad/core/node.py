# graphgrad/core/node.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from .operator import Operator


@dataclass(frozen=True, order=True)
class NodeHandle:
    """
    Opaque reference to one node of one network.

    Attributes
    ----------
    index    : int
        Creation index inside the owning network. Handles order by it.
    graph_id : int
        Identity of the owning network. A handle is never valid in another one.
    """
    index: int
    graph_id: int

    def __repr__(self):
        return f"NodeHandle({self.index})"


@dataclass
class Node:
    """
    Metadata of one node in the registry.

    Attributes
    ----------
    operator : Optional[Operator]
        Operator computing this node, or None for placeholders and variables.
    inputs   : List[NodeHandle]
        Ordered input handles; all of them were registered before this node.
    is_differentiable : bool
        Whether gradients are accumulated for this node.
    name     : Optional[str]
        Debug name.
    """
    operator: Optional["Operator"]
    inputs: List[NodeHandle] = field(default_factory=list)
    is_differentiable: bool = False
    name: Optional[str] = None

    @property
    def is_computed(self) -> bool:
        return self.operator is not None

    @property
    def is_placeholder(self) -> bool:
        return self.operator is None and not self.is_differentiable

    @property
    def is_variable(self) -> bool:
        return self.operator is None and self.is_differentiable

    @property
    def op_tag(self) -> str:
        if self.operator is not None:
            return self.operator.op_tag
        return "variable" if self.is_differentiable else "placeholder"
