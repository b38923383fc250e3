"""
Core module for the PGA kernel.

Contains:
- Constants: basis layout, component counts, default dtype
- Types: type aliases and component coercion helpers
"""

from .constants import (
    DEFAULT_DTYPE,
    ALGEBRA_DIMENSION,
    POINT_COMPONENTS,
    LINE_VECTOR_COMPONENTS,
    PLANE_COMPONENTS,
    MOTOR_PART_COMPONENTS,
    POINT_BASIS,
    LINE_DIRECTION_BASIS,
    LINE_MOMENT_BASIS,
    PLANE_BASIS,
    MOTOR_ROTOR_BASIS,
    MOTOR_TRANSLATOR_BASIS,
    GRADE_POINT,
    GRADE_LINE,
    GRADE_PLANE,
)

from .types import (
    Scalar,
    Vector3,
    Vector4,
    to_component,
    validate_components,
    own_components,
    components_equal,
)

__all__ = [
    # Constants
    "DEFAULT_DTYPE",
    "ALGEBRA_DIMENSION",
    "POINT_COMPONENTS",
    "LINE_VECTOR_COMPONENTS",
    "PLANE_COMPONENTS",
    "MOTOR_PART_COMPONENTS",
    "POINT_BASIS",
    "LINE_DIRECTION_BASIS",
    "LINE_MOMENT_BASIS",
    "PLANE_BASIS",
    "MOTOR_ROTOR_BASIS",
    "MOTOR_TRANSLATOR_BASIS",
    "GRADE_POINT",
    "GRADE_LINE",
    "GRADE_PLANE",
    # Types
    "Scalar",
    "Vector3",
    "Vector4",
    "to_component",
    "validate_components",
    "own_components",
    "components_equal",
]
