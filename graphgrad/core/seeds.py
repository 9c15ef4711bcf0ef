# graphgrad/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the output node and let gradients grow
# backwards through the network.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Dict, Union
import numpy as np

from .network import Network
from .node import NodeHandle
from .tensor import Tensor


def value(network: Network, handle: NodeHandle) -> Tensor:
    """Evaluate `handle` in `network` and return its value."""
    return network.forward(handle)


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Network, NodeHandle], NodeHandle],
         x0: Union[float, np.ndarray]) -> np.ndarray:
    """
    Gradient of y = f(x) at x0 (single input), summed over the elements of y.
    Builds a fresh network, so nothing leaks between calls.

    Example
    -------
    grad(lambda net, x: net.mul(x, x), 3.0) -> 6.0
    """
    net = Network()
    x = net.variable(x0, name="x")
    y = f(net, x)
    net.forward(y)
    net.backward(y)
    return _gradient_or_zeros(net, x)


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Network, Dict[str, NodeHandle]], NodeHandle],
          inputs: Dict[str, Any]) -> Dict[str, np.ndarray]:
    """
    Gradients of y = f(vars) w.r.t. ALL inputs (dict form), from ONE backward pass.

    Parameters
    ----------
    f       : function taking (network, {name: handle}) and returning the output handle
    inputs  : dict {name: numeric}

    Returns
    -------
    dict {name: ndarray}  # in the same key order as `inputs`
    """
    net = Network()
    handles = {k: net.variable(v, name=k) for k, v in inputs.items()}
    y = f(net, handles)
    net.forward(y)
    net.backward(y)
    return {k: _gradient_or_zeros(net, h) for k, h in handles.items()}


def _gradient_or_zeros(net: Network, h: NodeHandle) -> np.ndarray:
    """Gradient of `h`; an input the output does not depend on has zero gradient."""
    g = net.gradient_storage.get(h)
    return g if g is not None else np.zeros_like(net.value_of(h))
