# graphgrad/ops/arithmetic.py
from __future__ import annotations
from typing import List, Sequence
from ..core.operator import Operator
from ..core.tensor import Tensor


class Addition(Operator):
    """
    out = lhs + rhs (numpy broadcasting).
    Local partials are the identity, so both inputs receive the very same
    gradient object.
    """
    op_tag = "add"
    arity = 2

    def forward(self, inputs: Sequence[Tensor]) -> Tensor:
        lhs, rhs = inputs
        return lhs + rhs

    def backward(self, output_gradient: Tensor, inputs: Sequence[Tensor]) -> List[Tensor]:
        return [output_gradient, output_gradient]


class Subtraction(Operator):
    op_tag = "sub"
    arity = 2

    def forward(self, inputs: Sequence[Tensor]) -> Tensor:
        lhs, rhs = inputs
        return lhs - rhs

    def backward(self, output_gradient: Tensor, inputs: Sequence[Tensor]) -> List[Tensor]:
        return [output_gradient, -output_gradient]


class Multiplication(Operator):
    """Elementwise product: d(x*y)/dx = y, d(x*y)/dy = x."""
    op_tag = "mul"
    arity = 2

    def forward(self, inputs: Sequence[Tensor]) -> Tensor:
        lhs, rhs = inputs
        return lhs * rhs

    def backward(self, output_gradient: Tensor, inputs: Sequence[Tensor]) -> List[Tensor]:
        lhs, rhs = inputs
        return [output_gradient * rhs, output_gradient * lhs]


class Negation(Operator):
    op_tag = "neg"
    arity = 1

    def forward(self, inputs: Sequence[Tensor]) -> Tensor:
        return -inputs[0]

    def backward(self, output_gradient: Tensor, inputs: Sequence[Tensor]) -> List[Tensor]:
        return [-output_gradient]


# Node constructors: add(net, x, y) is the same as net.add(x, y)
def add(network, lhs, rhs, name=None): return network.apply(Addition(), lhs, rhs, name=name)
def sub(network, lhs, rhs, name=None): return network.apply(Subtraction(), lhs, rhs, name=name)
def mul(network, lhs, rhs, name=None): return network.apply(Multiplication(), lhs, rhs, name=name)
def neg(network, x, name=None):        return network.apply(Negation(), x, name=name)
