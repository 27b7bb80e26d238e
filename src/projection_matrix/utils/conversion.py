"""Array/tensor conversion for matrix export and import."""

from __future__ import annotations
from typing import Union
import numpy as np


def to_torch_tensor(x: np.ndarray, device: str = "cpu"):
    """
    Copy a float32 array into a PyTorch tensor.

    Args:
        x: Source array
        device: Target device

    Returns:
        float32 tensor on device
    """
    import torch

    return torch.tensor(np.asarray(x, dtype=np.float32), dtype=torch.float32, device=device)


def to_numpy_array(
    x: Union[np.ndarray, "torch.Tensor", list],
    dtype: np.dtype = np.float32
) -> np.ndarray:
    """
    Convert input to NumPy array.

    Tensors are detached and moved to host memory first.
    """
    if hasattr(x, 'detach'):  # torch.Tensor
        return x.detach().cpu().numpy().astype(dtype)
    return np.asarray(x, dtype=dtype)
