"""Vector and matrix helpers."""

from __future__ import annotations

import math
import numbers

import numpy as np

_EPSILON = float(np.finfo(np.float32).eps)


def bit(x: int) -> int:
    """Return an integer with only bit ``x`` set."""
    return 1 << x


def is_power_of_two(value: int) -> bool:
    """Return True if ``value`` has at most one bit set (0 counts)."""
    return (value & (value - 1)) == 0


def radians(degrees: float) -> float:
    """Convert degrees to radians."""
    return math.radians(degrees)


def degrees(radians: float) -> float:
    """Convert radians to degrees."""
    return math.degrees(radians)


def clamp(value, min_value, max_value):
    """Limit ``value`` to the range [min_value, max_value], element-wise for arrays."""
    if all(isinstance(item, numbers.Real) for item in (value, min_value, max_value)):
        return min(max(value, min_value), max_value)
    return np.minimum(np.maximum(value, min_value), max_value)


def normalize(vector) -> np.ndarray:
    """Return ``vector`` scaled to unit length."""
    array = np.asarray(vector, dtype=float)
    norm = np.linalg.norm(array)
    if norm == 0:
        raise ValueError("cannot normalize a zero-length vector")
    return array / norm


def length(vector) -> float:
    """Return the Euclidean length of ``vector``."""
    return float(np.linalg.norm(np.asarray(vector, dtype=float)))


def dot(v1, v2) -> float:
    """Return the dot product of two vectors."""
    return float(np.dot(np.asarray(v1, dtype=float), np.asarray(v2, dtype=float)))


def cross(v1, v2) -> np.ndarray:
    """Return the cross product of two 3-vectors."""
    a = np.asarray(v1, dtype=float)
    b = np.asarray(v2, dtype=float)
    if a.shape != (3,) or b.shape != (3,):
        raise ValueError("cross product needs two 3-component vectors")
    return np.cross(a, b)


def decompose_transform(transform) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Split a 4x4 transform into translation, Euler rotation (radians) and scale.

    The matrix is indexed ``[row, column]`` with the translation in the last
    column. Raises ValueError if the homogeneous component is zero.
    """
    matrix = np.asarray(transform, dtype=float)
    if matrix.shape != (4, 4):
        raise ValueError("transform must be a 4x4 matrix")

    # Work column by column: local[i] is column i of the transform.
    local = matrix.T.copy()

    if abs(local[3, 3]) < _EPSILON:
        raise ValueError("transform cannot be decomposed: homogeneous component is zero")

    if np.any(np.abs(local[:3, 3]) >= _EPSILON):
        local[:3, 3] = 0.0
        local[3, 3] = 1.0

    translation = local[3, :3].copy()

    rows = local[:3, :3].copy()
    scale = np.linalg.norm(rows, axis=1)
    with np.errstate(divide="ignore", invalid="ignore"):
        rows = rows / scale[:, None]

    rotation = np.zeros(3)
    rotation[1] = math.asin(float(np.clip(-rows[0, 2], -1.0, 1.0)))
    if math.cos(rotation[1]) != 0:
        rotation[0] = math.atan2(rows[1, 2], rows[2, 2])
        rotation[2] = math.atan2(rows[0, 1], rows[0, 0])
    else:
        rotation[0] = math.atan2(-rows[2, 0], rows[1, 1])
        rotation[2] = 0.0

    return translation, rotation, scale