"""
projection_matrix - Perspective Projection Matrix Builder

Builds 4x4 perspective projection matrices from near/far clip planes,
vertical field of view and frame size.

Components:
    - Camera: Projection config, builder and matrix value object
    - Utils: Validation, conversion and debug helpers

Example:
    >>> from projection_matrix import ProjectionMatrixBuilder
    >>> 
    >>> proj = (
    ...     ProjectionMatrixBuilder()
    ...     .set_width(1920)
    ...     .set_height(1080)
    ...     .set_fov(100.0)
    ...     .build()
    ... )
    >>> proj.entry(2, 3)
    1.0
"""

__version__ = "1.0.0"

# Camera
from .camera import (
    ProjectionConfig,
    ProjectionMatrixBuilder,
    Matrix4x4,
    build_perspective_matrix,
    ensure_4x4_matrix,
    compute_aspect_ratio,
    compute_focal_scale,
    compute_depth_range,
)

# Utils
from .utils import (
    to_torch_tensor,
    to_numpy_array,
    validate_projection_config,
    debug_print,
    is_debug_enabled,
)

__all__ = [
    "__version__",

    # Camera
    "ProjectionConfig",
    "ProjectionMatrixBuilder",
    "Matrix4x4",
    "build_perspective_matrix",
    "ensure_4x4_matrix",
    "compute_aspect_ratio",
    "compute_focal_scale",
    "compute_depth_range",

    # Utils
    "to_torch_tensor",
    "to_numpy_array",
    "validate_projection_config",
    "debug_print",
    "is_debug_enabled",
]
