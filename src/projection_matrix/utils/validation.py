"""Input validation utilities."""

from __future__ import annotations
from typing import TYPE_CHECKING
import math

if TYPE_CHECKING:
    from ..camera.config import ProjectionConfig


def validate_projection_config(config: "ProjectionConfig"):
    """
    Validate projection parameters.

    Args:
        config: Projection configuration

    Raises:
        ValueError: If parameters are invalid
    """
    for name in ("near", "far", "fov", "width", "height"):
        value = getattr(config, name)
        if not math.isfinite(value):
            raise ValueError(f"{name} must be finite, got {value}")

    if config.width <= 0:
        raise ValueError(f"width must be positive, got {config.width}")

    if config.height <= 0:
        raise ValueError(f"height must be positive, got {config.height}")

    if not 0.0 < config.fov < 180.0:
        raise ValueError(f"fov must be within (0, 180) degrees, got {config.fov}")

    if config.far <= config.near:
        raise ValueError(
            f"far must be greater than near, got near={config.near} far={config.far}"
        )
