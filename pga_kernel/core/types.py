"""
Type aliases for the PGA kernel.

Coordinates may be given as Python numbers or tensors; every entity stores
its components as a tensor whose last dimension holds the coordinates in the
order listed in ``pga_kernel.core.constants``.
"""

from typing import Union
import torch

from .constants import DEFAULT_DTYPE


# =============================================================================
# Basic Type Aliases
# =============================================================================

# A single coordinate value
Scalar = Union[int, float, torch.Tensor]

# A length-3 spatial vector (direction, moment, normal)
Vector3 = torch.Tensor

# A length-4 homogeneous coordinate tuple
Vector4 = torch.Tensor


def to_component(value: Scalar, dtype: torch.dtype = DEFAULT_DTYPE) -> torch.Tensor:
    """
    Coerce a coordinate to a tensor of the kernel dtype.

    Args:
        value: Python number or tensor
        dtype: Target dtype

    Returns:
        Tensor holding the value
    """
    if isinstance(value, torch.Tensor):
        return value.to(dtype)
    return torch.tensor(value, dtype=dtype)


def validate_components(tensor: torch.Tensor, expected: int, name: str) -> None:
    """
    Validate the size of the component dimension.

    Args:
        tensor: Component tensor of shape (..., expected)
        expected: Required size of the last dimension
        name: Name for error messages

    Raises:
        ValueError: If the last dimension has the wrong size
    """
    if tensor.ndim == 0 or tensor.shape[-1] != expected:
        got = tensor.shape[-1] if tensor.ndim > 0 else 0
        raise ValueError(f"{name}: expected {expected} components, got {got}")


def own_components(tensor: torch.Tensor, expected: int, name: str) -> torch.Tensor:
    """
    Validate a component tensor and take a private float32 copy of it.

    Later writes to the caller's tensor never reach the copy.

    Args:
        tensor: Component tensor of shape (..., expected)
        expected: Required size of the last dimension
        name: Name for error messages

    Returns:
        New tensor of dtype DEFAULT_DTYPE

    Raises:
        ValueError: If the last dimension has the wrong size
    """
    validate_components(tensor, expected, name)
    return tensor.to(DEFAULT_DTYPE).clone()


def components_equal(a: torch.Tensor, b: torch.Tensor) -> bool:
    """
    Exact component comparison.

    Shapes and dtypes must match and every component must compare equal
    under IEEE ``==`` (so -0.0 equals 0.0 and NaN equals nothing).
    """
    return a.shape == b.shape and a.dtype == b.dtype and bool(torch.all(a == b))
