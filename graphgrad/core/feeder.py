# graphgrad/core/feeder.py
from __future__ import annotations
import logging
from typing import Dict, Optional
from .node import NodeHandle
from .tensor import Tensor
from .errors import UnfedPlaceholder

logger = logging.getLogger(__name__)


class Feeder:
    """
    Externally supplied placeholder values.
    Feeding a handle twice overwrites the earlier value.
    """
    def __init__(self):
        self.feeds: Dict[NodeHandle, Tensor] = {}

    def feed(self, handle: NodeHandle, value: Tensor):
        if handle in self.feeds:
            logger.debug("Refeeding %r, previous value replaced", handle)
        self.feeds[handle] = value

    def get(self, handle: NodeHandle, name: Optional[str] = None) -> Tensor:
        try:
            return self.feeds[handle]
        except KeyError:
            raise UnfedPlaceholder(handle, name) from None

    def remove(self, handle: NodeHandle):
        self.feeds.pop(handle, None)

    def __contains__(self, handle) -> bool:
        return handle in self.feeds

    def __len__(self) -> int:
        return len(self.feeds)
