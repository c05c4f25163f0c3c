"""Shared mathematical utilities for discrete belief vectors."""
import numpy as np

from doorbayes.exceptions import DegenerateBeliefError


def normalize(x: np.ndarray) -> np.ndarray:
    """Normalize array to sum to 1.

    Zero mass is an error, never a uniform fallback: the models ruled out
    every state.

    Args:
        x: Non-negative unnormalized weights

    Returns:
        Normalized probability distribution

    Raises:
        DegenerateBeliefError: If the total mass is zero or not finite
    """
    x = np.asarray(x, dtype=np.float64)
    total = float(np.sum(x))
    if not np.isfinite(total) or total <= 0.0:
        raise DegenerateBeliefError(
            f"Cannot normalize belief with total mass {total} (weights={x.tolist()})"
        )
    # eta = 1 / total; dividing keeps a lone non-zero entry at exactly 1.0
    return x / total


def entropy(p: np.ndarray, eps: float = 1e-16) -> float:
    """Shannon entropy of probability distribution (nats).

    Args:
        p: Probability distribution
        eps: Small constant for numerical stability

    Returns:
        Entropy value (non-negative)
    """
    p = np.asarray(p, dtype=np.float64)
    p_safe = np.clip(p, eps, 1.0)
    return float(-np.sum(p * np.log(p_safe)))
