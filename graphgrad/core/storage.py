# graphgrad/core/storage.py
from __future__ import annotations
from typing import Dict, ItemsView, Optional
from .node import NodeHandle
from .tensor import Tensor, ones_like


class TensorStorage:
    """
    Per-node tensor values keyed by handle.

    Entries are created on first write and overwritten afterwards, so the
    storage only ever holds the latest value of each node.
    """
    def __init__(self):
        self.values: Dict[NodeHandle, Tensor] = {}

    def insert(self, handle: NodeHandle, value: Tensor):
        self.values[handle] = value

    def get(self, handle: NodeHandle) -> Optional[Tensor]:
        return self.values.get(handle)

    def clear(self):
        self.values.clear()

    def items(self) -> ItemsView[NodeHandle, Tensor]:
        return self.values.items()

    def __contains__(self, handle) -> bool:
        return handle in self.values

    def __len__(self) -> int:
        return len(self.values)


class GradientStorage(TensorStorage):
    """Accumulated gradients (adjoints), written only by backward passes."""

    def seed(self, handle: NodeHandle, like: Tensor):
        # d(out)/d(out) = 1, shaped like the forward value
        self.accumulate(handle, ones_like(like))

    def accumulate(self, handle: NodeHandle, gradient: Tensor):
        """
        Add `gradient` into the entry for `handle`.
        The first contribution is stored as is (shared, not copied); later
        ones produce a fresh array so shared gradients are never mutated.
        """
        current = self.values.get(handle)
        if current is None:
            self.values[handle] = gradient
        else:
            self.values[handle] = current + gradient
