"""Debug utilities."""

from __future__ import annotations
from typing import Tuple
import os

import numpy as np

DEBUG_ENV_VAR = "PROJ_DEBUG"


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled via environment variable."""
    return os.environ.get(DEBUG_ENV_VAR, "0").lower() not in ("0", "", "false")


def debug_print(*args, **kwargs):
    """Print debug message if debug mode is enabled."""
    if is_debug_enabled():
        print(*args, **kwargs)


def get_matrix_stats(matrix) -> Tuple[int, int]:
    """
    Count non-finite entries of a matrix.

    Args:
        matrix: Matrix4x4 or array-like

    Returns:
        (nan_count, inf_count)
    """
    M = np.asarray(matrix, dtype=np.float64)
    return int(np.isnan(M).sum()), int(np.isinf(M).sum())


def debug_matrix_info(name: str, matrix):
    """Print debug information about a matrix."""
    if is_debug_enabled():
        n_nan, n_inf = get_matrix_stats(matrix)
        print(f"[{name}] shape={tuple(np.shape(matrix))} nan={n_nan} inf={n_inf}")
