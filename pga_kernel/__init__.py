"""
pga-kernel: a 3D Projective Geometric Algebra kernel in PyTorch

Points, lines and planes of 3D PGA in its 4D representation, related by the
incidence operations join (^), meet (&) and dual, plus rigid motions
(motors). Degenerate configurations such as coincident points or parallel
planes produce zero-weight results instead of errors.

Package layout:
- core: constants and type aliases
- pga: entities, incidence operators, motors and transforms
- checks: verification harness (``python -m pga_kernel``)
- utils: harness configuration and logging

Example:
    >>> from pga_kernel.pga import point, meet, dual
    >>> f = point(1, 0, 0) ^ point(0, 1, 0) ^ point(0, 0, 1)
    >>> p = point(1, 1, 1)
    >>> foot = meet(dual(f) ^ p, f)  # projection of p onto f
"""

__version__ = "0.1.0"
__author__ = "pga-kernel Contributors"

from . import core
from . import pga
from . import utils
from . import checks

__all__ = [
    "core",
    "pga",
    "utils",
    "checks",
]
