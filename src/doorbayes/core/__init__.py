"""Shared numeric utilities for belief filtering."""
from doorbayes.core.math import entropy, normalize

__all__ = ["entropy", "normalize"]
