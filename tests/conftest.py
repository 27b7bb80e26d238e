import math

import numpy as np
import pytest

from projection_matrix.utils.debug import DEBUG_ENV_VAR


def reference_matrix(near, far, fov, width, height):
    """Evaluate the projection formula directly, column-major P[column, row]."""
    aspect = width / height
    f = 1.0 / math.tan(math.radians(fov) / 2.0)
    depth_range = far - near
    P = np.zeros((4, 4), dtype=np.float64)
    P[0, 0] = f / aspect
    P[1, 1] = f
    P[2, 2] = far / depth_range
    P[2, 3] = 1.0
    P[3, 2] = -(far * near) / depth_range
    return P


@pytest.fixture(autouse=True)
def no_debug(monkeypatch):
    monkeypatch.delenv(DEBUG_ENV_VAR, raising=False)
