"""
Command-line entry point for building perspective projection matrices

Loads projection parameters from YAML, applies command-line overrides,
builds the matrix and prints it.

Usage:
    python run.py --config configs/projection.yaml
    python run.py --width 1920 --height 1080 --fov 100 --far 2000 --near 1
"""

import argparse
import sys
from typing import List, Optional

from omegaconf import OmegaConf, DictConfig

from projection_matrix import ProjectionConfig, ProjectionMatrixBuilder


# ============================================================================
# Configuration & Setup
# ============================================================================

def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description="Perspective projection matrix builder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run.py --config configs/projection.yaml
  python run.py --config configs/projection.yaml --fov 60
  python run.py --width 1920 --height 1080 --strict
        """
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="Path to YAML configuration file (defaults used if omitted)"
    )

    for name, help_text in (
        ("near", "Override near clip plane"),
        ("far", "Override far clip plane"),
        ("fov", "Override vertical field of view (degrees)"),
        ("width", "Override frame width (pixels)"),
        ("height", "Override frame height (pixels)"),
    ):
        parser.add_argument(f"--{name}", type=float, default=None, help=help_text)

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject out-of-range parameters instead of emitting inf/nan"
    )

    parser.add_argument(
        "--row-major",
        action="store_true",
        help="Print the matrix transposed to row-major layout"
    )

    return parser.parse_args(argv)


def load_config(config_path: Optional[str]) -> DictConfig:
    """
    Load projection configuration

    Args:
        config_path: Path to YAML config file, or None for defaults

    Returns:
        OmegaConf configuration object holding the projection parameters
    """
    if config_path is None:
        return OmegaConf.create(ProjectionConfig().to_dict())

    projection = ProjectionConfig.from_yaml(config_path)
    print(f"[Config] Loaded configuration from: {config_path}")

    return OmegaConf.create(projection.to_dict())


def apply_cli_overrides(config: DictConfig, args) -> DictConfig:
    """
    Apply command-line argument overrides to config

    Args:
        config: Base configuration
        args: Parsed command-line arguments

    Returns:
        Modified configuration
    """
    for name in ("near", "far", "fov", "width", "height"):
        value = getattr(args, name)
        if value is not None:
            config[name] = value
            print(f"[Config] Override {name}: {value}")

    return config


# ============================================================================
# Main
# ============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
        config = apply_cli_overrides(config, args)

        projection = ProjectionConfig.from_dict(config)
        builder = ProjectionMatrixBuilder.from_config(projection)
        matrix = builder.build(strict=args.strict)
    except (FileNotFoundError, ValueError) as e:
        print(f"[Error] {e}")
        return 1

    print(
        f"[Projection] near={projection.near} far={projection.far} "
        f"fov={projection.fov} size={projection.width}x{projection.height}"
    )
    if args.row_major:
        print(matrix.to_numpy(row_major=True))
    else:
        print(matrix)

    return 0


if __name__ == "__main__":
    sys.exit(main())
