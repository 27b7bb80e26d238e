"""Immutable 4x4 matrix value object."""

from __future__ import annotations
from typing import List
import numpy as np

from ..utils.conversion import to_torch_tensor, to_numpy_array


def ensure_4x4_matrix(m) -> np.ndarray:
    """
    Convert input to 4x4 numpy array.

    Args:
        m: Input matrix (4x4 array, tensor, or flat list of 16 floats)

    Returns:
        4x4 float32 numpy array

    Raises:
        ValueError: If input cannot be reshaped to 4x4
    """
    M = np.array(to_numpy_array(m), dtype=np.float32)

    if M.shape == (16,):
        M = M.reshape(4, 4)

    if M.shape != (4, 4):
        raise ValueError(
            f"Expected 4x4 matrix or flat length-16 array, got shape {M.shape}"
        )

    return M


class Matrix4x4:
    """
    Read-only 4x4 projection matrix.

    Entries are addressed as m[i, j] in column-major layout: the first
    index selects the column.
        column 0: x scale
        column 1: y scale
        column 2: z mapping, plus w = z through m[2, 3]
        column 3: z translation

    Instances are produced by ProjectionMatrixBuilder.build().
    """

    __slots__ = ("_data",)

    def __init__(self, data):
        M = ensure_4x4_matrix(data)
        M.flags.writeable = False
        self._data = M

    def entry(self, column: int, row: int) -> float:
        """Return a single entry as a Python float."""
        return float(self._data[column, row])

    def __getitem__(self, index):
        return self._data[index]

    @property
    def shape(self):
        return self._data.shape

    @property
    def dtype(self):
        return self._data.dtype

    def __array__(self, dtype=None, copy=None):
        # copy=False hands out the read-only storage itself
        if copy is False:
            if dtype is not None and np.dtype(dtype) != self._data.dtype:
                raise ValueError(
                    f"Cannot convert {self._data.dtype} matrix to {np.dtype(dtype)} without a copy"
                )
            return self._data
        return np.array(self._data, dtype=dtype)

    def to_numpy(self, row_major: bool = False) -> np.ndarray:
        """
        Return a writable copy of the entries.

        Args:
            row_major: Transpose to the conventional math layout where the
                first index selects the row

        Returns:
            (4, 4) float32 array
        """
        if row_major:
            return self._data.T.copy()
        return self._data.copy()

    def to_list(self) -> List[List[float]]:
        """Entries as nested Python lists, in storage layout."""
        return self._data.tolist()

    def to_torch(self, device: str = "cpu", row_major: bool = False):
        """Entries as a torch tensor on the given device."""
        return to_torch_tensor(self.to_numpy(row_major=row_major), device=device)

    def allclose(self, other, atol: float = 1e-6, equal_nan: bool = False) -> bool:
        """Compare entries with an absolute tolerance."""
        other = ensure_4x4_matrix(other)
        return bool(np.allclose(self._data, other, rtol=0.0, atol=atol, equal_nan=equal_nan))

    def __eq__(self, other):
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    def __hash__(self):
        # +0.0 folds -0.0 into 0.0, which __eq__ already treats as equal
        return hash((self._data + 0.0).tobytes())

    def format_grid(self, precision: int = 6) -> str:
        """Render the sixteen entries as four lines of four columns."""
        rows = []
        for line in self._data:
            cells = [f"{value:>{precision + 8}.{precision}f}" for value in line]
            rows.append("[" + " ".join(cells) + "]")
        return "\n".join(rows)

    def __str__(self):
        return self.format_grid()

    def __repr__(self):
        body = self.format_grid().replace("\n", "\n" + " " * len("Matrix4x4("))
        return f"Matrix4x4({body})"
