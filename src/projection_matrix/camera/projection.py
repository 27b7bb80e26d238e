"""Projection matrix construction."""

from __future__ import annotations
import numpy as np

from .utils import compute_aspect_ratio, compute_focal_scale, compute_depth_range
from .matrix import Matrix4x4


def build_perspective_matrix(
    near: float,
    far: float,
    fov: float,
    width: float,
    height: float
) -> Matrix4x4:
    """
    Build perspective projection matrix from frame size and vertical FOV.

    This matrix maps camera space coordinates to homogeneous clip space.
    Depth is mapped so that z = near lands on 0 and z = far on 1 after
    perspective division, with clip.w = z.

    Args:
        near, far: Near and far clip plane positions on the z axis
        fov: Vertical field of view (degrees)
        width, height: Frame dimensions (pixels)

    Returns:
        Matrix4x4 in column-major layout (P[column, row])

    Notes:
        - No range checks: degenerate inputs give inf/nan entries
        - far == near divides by zero in both depth terms
        - Arithmetic is float64, storage float32; entries match the float64
          formula to 1e-6 only after rounding the reference to float32
    """
    aspect = compute_aspect_ratio(width, height)
    f = compute_focal_scale(fov)
    depth_range = compute_depth_range(near, far)

    P = np.zeros((4, 4), dtype=np.float64)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        # Focal scale, x corrected for aspect
        P[0, 0] = f / aspect
        P[1, 1] = f

        # Depth encoding: near -> 0, far -> 1
        P[2, 2] = np.float64(far) / depth_range
        P[3, 2] = -(np.float64(far) * np.float64(near)) / depth_range

        # Perspective division: clip.w = z
        P[2, 3] = 1.0

        return Matrix4x4(P.astype(np.float32))
