"""
Centralized constants for the PGA kernel.

The basis layout follows the 4D representation of 3D projective geometric
algebra, with e4 as the projective (degenerate) direction:

    +-------------+-----------------------+-----------------+
    |     Type    |        Values         | Grade/Antigrade |
    +-------------+-----------------------+-----------------+
    |    Scalar   |          1            |       0/4       |
    |   Vectors   |    e1, e2, e3, e4     |       1/3       |
    |  Bivectors  | e23, e31, e12,        |       2/2       |
    |             | e41, e42, e43         |                 |
    | Trivectors  | e234, e314, e124,     |       3/1       |
    |             | e321                  |                 |
    | Antiscalar  |   e1234               |       4/0       |
    +-------------+-----------------------+-----------------+

Usage:
    from pga_kernel.core.constants import DEFAULT_DTYPE, POINT_COMPONENTS
"""

import torch

# =============================================================================
# Numeric Constants
# =============================================================================

# All kernel coordinates are single precision
DEFAULT_DTYPE: torch.dtype = torch.float32

# Dimension of the underlying vector space (e1, e2, e3, e4)
ALGEBRA_DIMENSION: int = 4


# =============================================================================
# Component Counts
# =============================================================================

POINT_COMPONENTS: int = 4
LINE_VECTOR_COMPONENTS: int = 3
PLANE_COMPONENTS: int = 4
MOTOR_PART_COMPONENTS: int = 4


# =============================================================================
# Basis Names (component order within each entity)
# =============================================================================

POINT_BASIS = ("e1", "e2", "e3", "e4")
LINE_DIRECTION_BASIS = ("e41", "e42", "e43")
LINE_MOMENT_BASIS = ("e23", "e31", "e12")
PLANE_BASIS = ("e234", "e314", "e124", "e321")
MOTOR_ROTOR_BASIS = ("e41", "e42", "e43", "e1234")
MOTOR_TRANSLATOR_BASIS = ("e23", "e31", "e12", "scalar")


# =============================================================================
# Grades
# =============================================================================

GRADE_POINT: int = 1
GRADE_LINE: int = 2
GRADE_PLANE: int = 3


# =============================================================================
# Environment Variables
# =============================================================================

ENV_LOG_LEVEL: str = "PGA_KERNEL_LOG_LEVEL"
ENV_LOG_FILE: str = "PGA_KERNEL_LOG_FILE"
