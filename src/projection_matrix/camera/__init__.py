"""Camera projection for 3D rendering."""

from .utils import (
    compute_aspect_ratio,
    degrees_to_radians,
    compute_focal_scale,
    compute_depth_range,
)
from .config import ProjectionConfig
from .matrix import Matrix4x4, ensure_4x4_matrix
from .projection import build_perspective_matrix
from .builder import ProjectionMatrixBuilder

__all__ = [
    "compute_aspect_ratio",
    "degrees_to_radians",
    "compute_focal_scale",
    "compute_depth_range",
    "ProjectionConfig",
    "Matrix4x4",
    "ensure_4x4_matrix",
    "build_perspective_matrix",
    "ProjectionMatrixBuilder",
]
