"""Common utilities for projection building."""

from .conversion import (
    to_torch_tensor,
    to_numpy_array,
)
from .validation import validate_projection_config
from .debug import (
    is_debug_enabled,
    debug_print,
    get_matrix_stats,
    debug_matrix_info,
)

__all__ = [
    # Conversion
    "to_torch_tensor",
    "to_numpy_array",

    # Validation
    "validate_projection_config",

    # Debug
    "is_debug_enabled",
    "debug_print",
    "get_matrix_stats",
    "debug_matrix_info",
]
