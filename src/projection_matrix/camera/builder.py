"""Fluent builder for perspective projection matrices."""

from __future__ import annotations
from dataclasses import replace

from .config import ProjectionConfig
from .matrix import Matrix4x4
from .projection import build_perspective_matrix
from ..utils.debug import is_debug_enabled, debug_print, debug_matrix_info
from ..utils.validation import validate_projection_config


class ProjectionMatrixBuilder:
    """
    Accumulate projection parameters and compute the final matrix.

    Every setter returns the builder itself, so calls chain:

    Example:
        >>> matrix = (
        ...     ProjectionMatrixBuilder()
        ...     .set_width(1920)
        ...     .set_height(1080)
        ...     .set_fov(100.0)
        ...     .set_far(2000.0)
        ...     .set_near(1.0)
        ...     .build()
        ... )

    Setters perform no range validation. Degenerate parameters show up as
    inf/nan entries in the built matrix unless build(strict=True) is used.
    """

    def __init__(self):
        self._config = ProjectionConfig()

    @classmethod
    def from_config(cls, config: ProjectionConfig) -> 'ProjectionMatrixBuilder':
        """Create a builder seeded with a copy of an existing config."""
        builder = cls()
        builder._config = replace(config)
        return builder

    @property
    def config(self) -> ProjectionConfig:
        """Copy of the current parameters."""
        return replace(self._config)

    def set_near(self, value: float) -> 'ProjectionMatrixBuilder':
        """Set the near clip plane position on the z axis."""
        self._config.near = value
        return self

    def set_far(self, value: float) -> 'ProjectionMatrixBuilder':
        """Set the far clip plane position on the z axis."""
        self._config.far = value
        return self

    def set_fov(self, value: float) -> 'ProjectionMatrixBuilder':
        """Set the vertical field of view in degrees."""
        self._config.fov = value
        return self

    def set_width(self, value) -> 'ProjectionMatrixBuilder':
        """Set the frame width in pixels."""
        self._config.width = value
        return self

    def set_height(self, value) -> 'ProjectionMatrixBuilder':
        """Set the frame height in pixels."""
        self._config.height = value
        return self

    def build(self, strict: bool = False) -> Matrix4x4:
        """
        Build the projection matrix from the current parameters.

        Args:
            strict: Validate the parameters first and raise instead of
                producing inf/nan entries

        Returns:
            Matrix4x4

        Raises:
            ValueError: If strict and the parameters are out of range
        """
        cfg = self._config
        if strict:
            validate_projection_config(cfg)

        matrix = build_perspective_matrix(cfg.near, cfg.far, cfg.fov, cfg.width, cfg.height)

        if is_debug_enabled():
            debug_print(
                f"[Projection] near={cfg.near} far={cfg.far} fov={cfg.fov} "
                f"size={cfg.width}x{cfg.height}\n{matrix}"
            )
            debug_matrix_info("Projection", matrix)

        return matrix
