"""3D geometry utilities: transform decomposition, axis extraction, projection."""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

logger = logging.getLogger(__name__)

AXIS_EPSILON = 1e-3
FALLBACK_AXIS = np.array([1.0, 0.0, 0.0])


def transform_to_matrix(matrix_4x4: Sequence[float] | np.ndarray) -> np.ndarray:
    """Reshape a flat row-major 16-vector into a 4x4 matrix."""
    mat = np.asarray(matrix_4x4, dtype=np.float64)
    if mat.shape == (4, 4):
        return mat
    if mat.size != 16:
        raise ValueError(f"Expected 16 matrix values, got {mat.size}")
    return mat.reshape(4, 4)


def translation(matrix_4x4: Sequence[float] | np.ndarray) -> np.ndarray:
    """Translation column (x, y, z) of a 4x4 transform."""
    return transform_to_matrix(matrix_4x4)[:3, 3].copy()


def rotation_column(matrix_4x4: Sequence[float] | np.ndarray, index: int) -> np.ndarray:
    """Column ``index`` (0-2) of the rotation block of a 4x4 transform."""
    if index not in (0, 1, 2):
        raise ValueError(f"Rotation column index must be 0, 1 or 2, got {index}")
    return transform_to_matrix(matrix_4x4)[:3, index].copy()


def _unit(axis: np.ndarray) -> np.ndarray | None:
    """Normalized ``axis``, or None if it is non-finite or shorter than AXIS_EPSILON."""
    if not np.all(np.isfinite(axis)):
        return None
    # Rescale by the largest component first so huge columns cannot overflow the norm
    peak = float(np.max(np.abs(axis)))
    if peak == 0.0:
        return None
    scaled = axis / peak
    scaled_norm = float(np.linalg.norm(scaled))
    if peak * scaled_norm < AXIS_EPSILON:
        return None
    return scaled / scaled_norm


def primary_axis(matrix_4x4: Sequence[float] | np.ndarray) -> np.ndarray:
    """Unit-length dominant direction of a surface or object.

    Fallback chain: rotation column 0 -> rotation column 2 -> world X.
    Columns shorter than ``AXIS_EPSILON`` (or non-finite) are skipped, so the
    result never comes from normalizing a near-zero vector.
    """
    for index in (0, 2):
        unit = _unit(rotation_column(matrix_4x4, index))
        if unit is not None:
            return unit
    logger.debug("Degenerate rotation block, falling back to world X axis")
    return FALLBACK_AXIS.copy()


def project_xz(point: np.ndarray) -> np.ndarray:
    """Top-down projection: drop the vertical (y) component."""
    return np.array([point[0], point[2]], dtype=np.float64)
