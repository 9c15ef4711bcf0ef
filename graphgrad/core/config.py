# graphgrad/core/config.py
from dataclasses import dataclass


@dataclass
class NetworkConfig:
    """Configuration for a Network."""
    # Values
    dtype: str = "float64"  # dtype for fed and assigned tensors

    # Construction
    check_arity: bool = True  # validate operator arity when a node is built

    # Backward
    accumulate_gradients: bool = False  # keep gradients from previous backward calls

    # Logging
    verbose: bool = False  # pass summaries at INFO instead of DEBUG
