"""Scalar pieces of the perspective projection formula."""

from __future__ import annotations
import numpy as np


def compute_aspect_ratio(width: float, height: float) -> np.float64:
    """
    Compute frame aspect ratio.

    Args:
        width: Frame width (pixels)
        height: Frame height (pixels)

    Returns:
        width / height (inf or nan when height is zero)
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.float64(width) / np.float64(height)


def degrees_to_radians(angle: float) -> np.float64:
    """Convert an angle from degrees to radians."""
    return np.float64(angle) * np.pi / 180.0


def compute_focal_scale(fov: float) -> np.float64:
    """
    Compute focal scale from vertical field of view.

    For a vertical FOV in degrees:
        f = 1 / tan(fov_rad / 2)

    Args:
        fov: Vertical field of view (degrees)

    Returns:
        Focal scale f
    """
    fov_rad = degrees_to_radians(fov)
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.float64(1.0) / np.tan(fov_rad / 2.0)


def compute_depth_range(near: float, far: float) -> np.float64:
    """Distance between the near and far clip planes."""
    return np.float64(far) - np.float64(near)
