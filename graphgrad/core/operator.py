# graphgrad/core/operator.py
"""
Operator interface.

An operator computes a node's value from its input values (forward) and
splits the gradient arriving at the node's output into one gradient per
input (backward). The registry, the storages and both traversals only ever
talk to this interface, so new operators never touch the graph machinery.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from .tensor import Tensor


class Operator(ABC):
    """
    Abstract base class for all operators.

    Attributes:
        op_tag (str): Debug tag (e.g. "add", "mul")
        arity (Optional[int]): Number of inputs, None if variadic
        differentiable (bool): Whether nodes built from this operator take gradients
    """

    op_tag: str = "op"
    arity: Optional[int] = None
    differentiable: bool = True

    @abstractmethod
    def forward(self, inputs: Sequence[Tensor]) -> Tensor:
        """
        Compute the output value from the input values.

        Must be a pure function of `inputs` and return a freshly built array;
        inputs are never modified in place.
        """
        pass

    @abstractmethod
    def backward(self, output_gradient: Tensor, inputs: Sequence[Tensor]) -> List[Tensor]:
        """
        Distribute the output gradient to the inputs.

        Args:
            output_gradient: Gradient flowing into this node's output
            inputs: The input values used by `forward`

        Returns:
            One gradient per input, in input order
        """
        pass

    def check_arity(self, n_inputs: int):
        if self.arity is not None and n_inputs != self.arity:
            raise ValueError(
                f"{type(self).__name__} expects {self.arity} inputs, got {n_inputs}"
            )

    def __repr__(self):
        return f"{type(self).__name__}()"
