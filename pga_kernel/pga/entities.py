"""
Geometric entities of 3D Projective Geometric Algebra (PGA).

The algebra is built on the vectors e1, e2, e3, e4 with e4 the projective
direction (e4² = 0). Entities are stored as plain float32 tensors:

- Point: grade-1 vector  x*e1 + y*e2 + z*e3 + w*e4
- Line:  grade-2 bivector, direction (e41, e42, e43) and moment (e23, e31, e12)
- Plane: grade-3 trivector  x*e234 + y*e314 + z*e124 + w*e321

Every coordinate has one storage slot and two read-only names: the Cartesian
one (x, y, z, w) and the algebraic one (e1, e234, ...).

Operators:
- ``^`` (join):  point ^ point -> line, line ^ point -> plane
- ``&`` (meet):  plane & plane -> line, line & plane -> point
- ``==``: exact comparison of every component

Entities never change after construction. Constructors copy their input
into float32 storage and every accessor returns a fresh tensor, so writing
to a tensor obtained from an entity leaves the entity untouched.
"""

from __future__ import annotations
from typing import Tuple
import torch

from ..core.constants import (
    ALGEBRA_DIMENSION,
    POINT_COMPONENTS,
    LINE_VECTOR_COMPONENTS,
    PLANE_COMPONENTS,
    POINT_BASIS,
    LINE_DIRECTION_BASIS,
    LINE_MOMENT_BASIS,
    PLANE_BASIS,
    GRADE_POINT,
    GRADE_LINE,
    GRADE_PLANE,
)
from ..core.types import Vector3, Vector4, own_components, components_equal


def _format_components(names: Tuple[str, ...], values: torch.Tensor) -> str:
    return ", ".join(f"{n}={v:g}" for n, v in zip(names, values.tolist()))


class Point:
    """
    A homogeneous point x*e1 + y*e2 + z*e3 + w*e4.

    The e4 coordinate is the weight; w = 0 is a point at infinity
    (a pure direction).
    """

    grade = GRADE_POINT
    antigrade = ALGEBRA_DIMENSION - GRADE_POINT

    def __init__(self, coords: Vector4):
        """
        Args:
            coords: Tensor of shape (..., 4) holding [e1, e2, e3, e4];
                    copied and converted to float32
        """
        self._coords = own_components(coords, POINT_COMPONENTS, "Point")

    @property
    def coords(self) -> torch.Tensor:
        """All four components [e1, e2, e3, e4]."""
        return self._coords.clone()

    @property
    def shape(self) -> torch.Size:
        return self._coords.shape[:-1]

    @property
    def dtype(self) -> torch.dtype:
        return self._coords.dtype

    @property
    def device(self) -> torch.device:
        return self._coords.device

    # === Cartesian names ===

    @property
    def x(self) -> torch.Tensor:
        return self._coords[..., 0].clone()

    @property
    def y(self) -> torch.Tensor:
        return self._coords[..., 1].clone()

    @property
    def z(self) -> torch.Tensor:
        return self._coords[..., 2].clone()

    @property
    def w(self) -> torch.Tensor:
        return self._coords[..., 3].clone()

    # === Algebraic names ===

    e1 = x
    e2 = y
    e3 = z
    e4 = w

    def is_zero(self) -> bool:
        """True if every coordinate is zero."""
        return bool(torch.all(self._coords == 0))

    def dual(self) -> 'Plane':
        """Weight dual: the plane at infinity scaled by -w."""
        from .primitives import dual
        return dual(self)

    def __xor__(self, other):
        """Operator ^: join."""
        from . import primitives
        if isinstance(other, Point):
            return primitives.join_points(self, other)
        if isinstance(other, Line):
            return primitives.join_line_point(other, self)
        return NotImplemented

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return components_equal(self._coords, other._coords)

    __hash__ = None

    def __repr__(self) -> str:
        if self._coords.ndim == 1:
            return f"Point({_format_components(POINT_BASIS, self._coords)})"
        return f"Point(shape={tuple(self.shape)})"


class Line:
    """
    An oriented line stored as a direction/moment pair.

    Direction v = (e41, e42, e43) carries the line's weight; moment
    m = (e23, e31, e12) locates it. Lines joined from two finite points
    satisfy v . m = 0.
    """

    grade = GRADE_LINE
    antigrade = ALGEBRA_DIMENSION - GRADE_LINE

    def __init__(self, v: Vector3, m: Vector3):
        """
        Args:
            v: Direction of shape (..., 3) as [e41, e42, e43]
            m: Moment of shape (..., 3) as [e23, e31, e12]
        """
        self._v = own_components(v, LINE_VECTOR_COMPONENTS, "Line direction")
        self._m = own_components(m, LINE_VECTOR_COMPONENTS, "Line moment")

    @property
    def v(self) -> torch.Tensor:
        """Direction [e41, e42, e43]."""
        return self._v.clone()

    @property
    def m(self) -> torch.Tensor:
        """Moment [e23, e31, e12]."""
        return self._m.clone()

    @property
    def shape(self) -> torch.Size:
        return self._v.shape[:-1]

    @property
    def dtype(self) -> torch.dtype:
        return self._v.dtype

    @property
    def device(self) -> torch.device:
        return self._v.device

    @property
    def coords(self) -> torch.Tensor:
        """All six components [e41, e42, e43, e23, e31, e12]."""
        return torch.cat([self._v, self._m], dim=-1)

    # === Algebraic names ===

    @property
    def e41(self) -> torch.Tensor:
        return self._v[..., 0].clone()

    @property
    def e42(self) -> torch.Tensor:
        return self._v[..., 1].clone()

    @property
    def e43(self) -> torch.Tensor:
        return self._v[..., 2].clone()

    @property
    def e23(self) -> torch.Tensor:
        return self._m[..., 0].clone()

    @property
    def e31(self) -> torch.Tensor:
        return self._m[..., 1].clone()

    @property
    def e12(self) -> torch.Tensor:
        return self._m[..., 2].clone()

    def weight(self) -> Point:
        """The line's direction as a point at infinity."""
        zero = torch.zeros_like(self._v[..., :1])
        return Point(torch.cat([self._v, zero], dim=-1))

    def is_zero(self) -> bool:
        """True if direction and moment are both zero."""
        return bool(torch.all(self._v == 0)) and bool(torch.all(self._m == 0))

    def dual(self) -> 'Line':
        """Weight dual: the line at infinity with moment -v."""
        from .primitives import dual
        return dual(self)

    def __xor__(self, other):
        """Operator ^: join with a point."""
        from . import primitives
        if isinstance(other, Point):
            return primitives.join_line_point(self, other)
        return NotImplemented

    def __and__(self, other):
        """Operator &: meet with a plane."""
        from . import primitives
        if isinstance(other, Plane):
            return primitives.meet_line_plane(self, other)
        return NotImplemented

    def __eq__(self, other) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return components_equal(self._v, other._v) and components_equal(self._m, other._m)

    __hash__ = None

    def __repr__(self) -> str:
        if self._v.ndim == 1:
            return (
                f"Line({_format_components(LINE_DIRECTION_BASIS, self._v)}, "
                f"{_format_components(LINE_MOMENT_BASIS, self._m)})"
            )
        return f"Line(shape={tuple(self.shape)})"


class Plane:
    """
    An oriented plane x*e234 + y*e314 + z*e124 + w*e321.

    (x, y, z) is the normal and w the signed offset: the plane contains the
    homogeneous point p iff x*p.x + y*p.y + z*p.z + w*p.w = 0.
    """

    grade = GRADE_PLANE
    antigrade = ALGEBRA_DIMENSION - GRADE_PLANE

    def __init__(self, coords: Vector4):
        """
        Args:
            coords: Tensor of shape (..., 4) holding [e234, e314, e124, e321];
                    copied and converted to float32
        """
        self._coords = own_components(coords, PLANE_COMPONENTS, "Plane")

    @property
    def coords(self) -> torch.Tensor:
        """All four components [e234, e314, e124, e321]."""
        return self._coords.clone()

    @property
    def shape(self) -> torch.Size:
        return self._coords.shape[:-1]

    @property
    def dtype(self) -> torch.dtype:
        return self._coords.dtype

    @property
    def device(self) -> torch.device:
        return self._coords.device

    # === Cartesian names ===

    @property
    def x(self) -> torch.Tensor:
        return self._coords[..., 0].clone()

    @property
    def y(self) -> torch.Tensor:
        return self._coords[..., 1].clone()

    @property
    def z(self) -> torch.Tensor:
        return self._coords[..., 2].clone()

    @property
    def w(self) -> torch.Tensor:
        return self._coords[..., 3].clone()

    # === Algebraic names ===

    e234 = x
    e314 = y
    e124 = z
    e321 = w

    @property
    def normal(self) -> torch.Tensor:
        """Normal direction of shape (..., 3)."""
        return self._coords[..., :3].clone()

    def weight(self) -> Point:
        """The plane's normal as a point at infinity."""
        zero = torch.zeros_like(self._coords[..., :1])
        return Point(torch.cat([self._coords[..., :3], zero], dim=-1))

    def is_zero(self) -> bool:
        """True if every coordinate is zero."""
        return bool(torch.all(self._coords == 0))

    def dual(self) -> Point:
        """Weight dual: the point at infinity along the normal."""
        from .primitives import dual
        return dual(self)

    def __and__(self, other):
        """Operator &: meet with a plane or a line."""
        from . import primitives
        if isinstance(other, Plane):
            return primitives.meet_planes(self, other)
        if isinstance(other, Line):
            return primitives.meet_line_plane(other, self)
        return NotImplemented

    def __eq__(self, other) -> bool:
        if not isinstance(other, Plane):
            return NotImplemented
        return components_equal(self._coords, other._coords)

    __hash__ = None

    def __repr__(self) -> str:
        if self._coords.ndim == 1:
            return f"Plane({_format_components(PLANE_BASIS, self._coords)})"
        return f"Plane(shape={tuple(self.shape)})"
