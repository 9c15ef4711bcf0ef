# graphgrad/core/tensor.py
from __future__ import annotations
import numpy as np
from typing import Any

# Every node value is a plain numpy array. Arrays are shared by reference
# between storages; nothing in the engine writes into them in place.
Tensor = np.ndarray


def as_tensor(value: Any, dtype: str = "float64") -> Tensor:
    """
    Convert a user-supplied value into a float ndarray.

    Only numeric scalars, sequences and numpy arrays are accepted.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, list, tuple, np.ndarray, np.number)):
        raise TypeError(
            f"Tensor values must be numeric (int, float, list, tuple, ndarray), "
            f"but got {type(value)}"
        )
    return np.asarray(value, dtype=dtype)


def ones_like(tensor: Tensor) -> Tensor:
    """All-ones array with the shape and dtype of `tensor` (the backward seed)."""
    return np.ones_like(tensor)
