"""Projection configuration."""

from __future__ import annotations
from typing import Dict, Any, Union
from dataclasses import dataclass, asdict
from pathlib import Path

from omegaconf import OmegaConf, DictConfig


DEFAULT_NEAR = 0.0
DEFAULT_FAR = 1000.0
DEFAULT_FOV = 90.0
DEFAULT_WIDTH = 1280
DEFAULT_HEIGHT = 720

CONFIG_SECTION = "projection"


@dataclass
class ProjectionConfig:
    """
    Perspective projection parameters.

    Attributes:
        near: Near clip plane position on the z axis
        far: Far clip plane position on the z axis
        fov: Vertical field of view in degrees
        width: Frame width in pixels
        height: Frame height in pixels

    Notes:
        - Values are not range-checked on assignment; call validate()
          to enforce far > near, width/height > 0 and 0 < fov < 180
    """
    near: float = DEFAULT_NEAR
    far: float = DEFAULT_FAR
    fov: float = DEFAULT_FOV
    width: Union[int, float] = DEFAULT_WIDTH
    height: Union[int, float] = DEFAULT_HEIGHT

    def validate(self):
        """
        Check the projection invariants.

        Raises:
            ValueError: If any parameter is out of range
        """
        from ..utils.validation import validate_projection_config
        validate_projection_config(self)

    @classmethod
    def from_dict(cls, cfg: Union[Dict[str, Any], DictConfig]) -> 'ProjectionConfig':
        """Create ProjectionConfig from dictionary (missing keys use defaults)."""
        return cls(
            near=float(cfg.get('near', DEFAULT_NEAR)),
            far=float(cfg.get('far', DEFAULT_FAR)),
            fov=float(cfg.get('fov', DEFAULT_FOV)),
            width=_as_dimension(cfg.get('width', DEFAULT_WIDTH)),
            height=_as_dimension(cfg.get('height', DEFAULT_HEIGHT)),
        )

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> 'ProjectionConfig':
        """
        Load ProjectionConfig from a YAML file.

        The parameters are read from a top-level 'projection' section if
        present, otherwise from the top-level mapping.

        Args:
            path: Path to YAML file

        Returns:
            ProjectionConfig

        Raises:
            FileNotFoundError: If the file does not exist
        """
        if not Path(path).exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        cfg = OmegaConf.load(str(path))
        if CONFIG_SECTION in cfg:
            cfg = cfg[CONFIG_SECTION]

        return cls.from_dict(cfg)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


def _as_dimension(value) -> Union[int, float]:
    # Keep integral pixel counts as int, accept fractional sizes as float
    value = float(value)
    return int(value) if value.is_integer() else value
