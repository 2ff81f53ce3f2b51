"""
Vector layer - element-wise arithmetic over fixed-dimension float32 vectors.
Callers guarantee equal lengths; mismatches are not checked here.
"""

import numpy as np

DTYPE = np.float32


def as_vector(values) -> np.ndarray:
    """Coerce a sequence of numbers into a float32 vector."""
    return np.asarray(values, dtype=DTYPE)


def add(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Element-wise sum of two vectors."""
    return np.add(a, b, dtype=DTYPE)


def subtract(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Element-wise difference of two vectors."""
    return np.subtract(a, b, dtype=DTYPE)


def dot(a: np.ndarray, b: np.ndarray) -> float:
    """Sum of element-wise products."""
    return float(np.dot(a, b))


def magnitude(v: np.ndarray) -> float:
    return float(np.sqrt(dot(v, v)))


def normalize(v: np.ndarray) -> np.ndarray:
    """
    Scale a vector to unit length.

    A zero vector produces NaN components.
    """
    mag = magnitude(v)
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.divide(v, DTYPE(mag), dtype=DTYPE)
