import pytest
from omegaconf import OmegaConf

from projection_matrix import ProjectionConfig
from projection_matrix.camera.config import (
    DEFAULT_NEAR,
    DEFAULT_FAR,
    DEFAULT_FOV,
    DEFAULT_WIDTH,
    DEFAULT_HEIGHT,
)


def test_defaults():
    cfg = ProjectionConfig()
    assert cfg.to_dict() == {
        "near": DEFAULT_NEAR,
        "far": DEFAULT_FAR,
        "fov": DEFAULT_FOV,
        "width": DEFAULT_WIDTH,
        "height": DEFAULT_HEIGHT,
    }
    assert (DEFAULT_NEAR, DEFAULT_FAR, DEFAULT_FOV) == (0.0, 1000.0, 90.0)
    assert (DEFAULT_WIDTH, DEFAULT_HEIGHT) == (1280, 720)


def test_from_dict_fills_missing_keys():
    cfg = ProjectionConfig.from_dict({"fov": 60, "width": "1920"})
    assert cfg.fov == 60.0
    assert cfg.width == 1920
    assert isinstance(cfg.width, int)
    assert cfg.height == DEFAULT_HEIGHT
    assert cfg.near == DEFAULT_NEAR


def test_from_dict_keeps_fractional_size():
    assert ProjectionConfig.from_dict({"height": 720.5}).height == 720.5


def test_from_dict_accepts_dictconfig():
    cfg = ProjectionConfig.from_dict(OmegaConf.create({"near": 1, "far": 2000}))
    assert (cfg.near, cfg.far) == (1.0, 2000.0)


def test_from_dict_rejects_non_numeric():
    with pytest.raises(ValueError):
        ProjectionConfig.from_dict({"fov": "wide"})


def test_from_yaml_section(tmp_path):
    path = tmp_path / "camera.yaml"
    path.write_text("projection:\n  fov: 100.0\n  width: 1920\n  height: 1080\n")
    cfg = ProjectionConfig.from_yaml(path)
    assert (cfg.fov, cfg.width, cfg.height) == (100.0, 1920, 1080)
    assert cfg.far == DEFAULT_FAR


def test_from_yaml_top_level(tmp_path):
    path = tmp_path / "camera.yaml"
    path.write_text("near: 0.5\nfar: 50\n")
    cfg = ProjectionConfig.from_yaml(str(path))
    assert (cfg.near, cfg.far) == (0.5, 50.0)


def test_from_yaml_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ProjectionConfig.from_yaml(tmp_path / "missing.yaml")


def test_validate_accepts_defaults():
    ProjectionConfig().validate()


@pytest.mark.parametrize("overrides, message", [
    ({"far": 0.0}, "far must be greater than near"),
    ({"near": 10.0, "far": 5.0}, "far must be greater than near"),
    ({"height": 0}, "height must be positive"),
    ({"width": -5}, "width must be positive"),
    ({"fov": 180.0}, "fov must be within"),
    ({"fov": -1.0}, "fov must be within"),
    ({"far": float("inf")}, "far must be finite"),
])
def test_validate_rejects(overrides, message):
    cfg = ProjectionConfig(**overrides)
    with pytest.raises(ValueError, match=message):
        cfg.validate()
