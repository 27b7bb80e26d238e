import math

import numpy as np
import pytest

from projection_matrix import compute_aspect_ratio, compute_focal_scale, compute_depth_range
from projection_matrix.camera.utils import degrees_to_radians
from projection_matrix.utils import (
    debug_print,
    is_debug_enabled,
    get_matrix_stats,
    to_numpy_array,
)


def test_aspect_ratio():
    assert compute_aspect_ratio(1920, 1080) == pytest.approx(16 / 9)
    assert math.isinf(compute_aspect_ratio(1920, 0))
    assert math.isnan(compute_aspect_ratio(0, 0))


def test_degrees_to_radians():
    assert degrees_to_radians(180.0) == pytest.approx(math.pi)


def test_focal_scale():
    assert compute_focal_scale(90.0) == pytest.approx(1.0)
    assert compute_focal_scale(60.0) == pytest.approx(math.sqrt(3.0))
    assert math.isinf(compute_focal_scale(0.0))


def test_depth_range():
    assert compute_depth_range(1.0, 2000.0) == 1999.0
    assert compute_depth_range(5.0, 5.0) == 0.0


@pytest.mark.parametrize("value, enabled", [
    ("1", True),
    ("true", True),
    ("0", False),
    ("false", False),
    ("", False),
])
def test_debug_env_var(monkeypatch, value, enabled):
    monkeypatch.setenv("PROJ_DEBUG", value)
    assert is_debug_enabled() is enabled


def test_debug_print(monkeypatch, capsys):
    debug_print("hidden")
    assert capsys.readouterr().out == ""

    monkeypatch.setenv("PROJ_DEBUG", "1")
    debug_print("shown")
    assert capsys.readouterr().out == "shown\n"


def test_matrix_stats():
    M = np.zeros((4, 4))
    M[0, 0] = np.nan
    M[1, 1] = np.inf
    M[2, 2] = -np.inf
    assert get_matrix_stats(M) == (1, 2)


def test_to_numpy_array_from_list():
    arr = to_numpy_array([[1, 2], [3, 4]])
    assert arr.dtype == np.float32
    assert arr.shape == (2, 2)
