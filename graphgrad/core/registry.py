# graphgrad/core/registry.py
from __future__ import annotations
from typing import Iterator, List
from .node import Node, NodeHandle
from .errors import NodeNotFound


class NodeRegistry:
    """
    Append-only node arena: records Nodes in creation order.
    A handle's index is its position in `nodes`.
    """
    def __init__(self, graph_id: int):
        self.graph_id = graph_id
        self.nodes: List[Node] = []

    def register(self, node: Node) -> NodeHandle:
        """
        Append `node` and return its handle.
        Every input must already be registered here, so the graph stays acyclic.
        """
        for h in node.inputs:
            if h not in self:
                raise NodeNotFound(h)
        self.nodes.append(node)
        return NodeHandle(len(self.nodes) - 1, self.graph_id)

    def get(self, handle: NodeHandle) -> Node:
        if handle not in self:
            raise NodeNotFound(handle)
        return self.nodes[handle.index]

    def handles(self) -> List[NodeHandle]:
        return [NodeHandle(i, self.graph_id) for i in range(len(self.nodes))]

    def __contains__(self, handle) -> bool:
        return (
            isinstance(handle, NodeHandle)
            and handle.graph_id == self.graph_id
            and 0 <= handle.index < len(self.nodes)
        )

    def __iter__(self) -> Iterator[NodeHandle]:
        return iter(self.handles())

    def __len__(self) -> int:
        return len(self.nodes)
