"""
Construction and incidence of PGA primitives.

Key operations:
- Join (^, wedge product): smallest entity containing the operands
  - point ^ point -> line
  - line ^ point -> plane  (point ^ line delegates here)
- Meet (&, antiwedge product): intersection of the operands
  - plane & plane -> line
  - line & plane -> point  (plane & line delegates here)
- Dual: the weight dual, mapping grade k to grade 4 - k
  - point -> plane at infinity, line -> line at infinity, plane -> point at infinity

Degenerate configurations never raise. Coincident points join to the zero
line, parallel planes meet in a line with zero direction, and a line parallel
to a plane meets it in a point of zero weight.

The composed constructions at the end of this module (perpendiculars and
projections) are built only from join, meet and dual.
"""

from __future__ import annotations
from typing import Union
import torch

from ..core.constants import DEFAULT_DTYPE
from ..core.types import Scalar, Vector3, to_component
from .entities import Point, Line, Plane


Entity = Union[Point, Line, Plane]


def _stack(*values: Scalar, dtype: torch.dtype = DEFAULT_DTYPE) -> torch.Tensor:
    tensors = torch.broadcast_tensors(*(to_component(v, dtype) for v in values))
    return torch.stack(tensors, dim=-1)


# =============================================================================
# Constructors
# =============================================================================

def point(x: Scalar, y: Scalar, z: Scalar, w: Scalar = 1.0) -> Point:
    """
    Create a homogeneous point.

    Args:
        x, y, z: Spatial coordinates (e1, e2, e3)
        w: Weight (e4); 1 for a unit point, 0 for a point at infinity

    Returns:
        Point
    """
    return Point(_stack(x, y, z, w))


def ideal_point(dx: Scalar, dy: Scalar, dz: Scalar) -> Point:
    """Create a point at infinity (zero weight) in direction (dx, dy, dz)."""
    return point(dx, dy, dz, 0.0)


def point_to_cartesian(p: Point) -> torch.Tensor:
    """
    Divide out the weight of a point.

    Points at infinity map to infinite (or NaN) coordinates.

    Returns:
        Tensor of shape (..., 3)
    """
    return p.coords[..., :3] / p.coords[..., 3:]


def line_from_plucker(direction: Vector3, moment: Vector3) -> Line:
    """
    Create a line from raw Plücker coordinates.

    The coordinates are not required to satisfy direction . moment = 0.

    Args:
        direction: (..., 3) as [e41, e42, e43]
        moment: (..., 3) as [e23, e31, e12]
    """
    direction = to_component(direction)
    moment = to_component(moment)
    return Line(direction, moment)


def line_from_points(p: Point, q: Point) -> Line:
    """Line through two points, oriented from p to q."""
    return join_points(p, q)


def plane(x: Scalar, y: Scalar, z: Scalar, w: Scalar) -> Plane:
    """
    Create a plane x*e234 + y*e314 + z*e124 + w*e321.

    The plane equation is x*X + y*Y + z*Z + w = 0.
    """
    return Plane(_stack(x, y, z, w))


def plane_from_points(a: Point, b: Point, c: Point) -> Plane:
    """Plane through three points: (a ^ b) ^ c."""
    return join_line_point(join_points(a, b), c)


def origin() -> Point:
    """The origin (0, 0, 0)."""
    return point(0.0, 0.0, 0.0)


def xy_plane() -> Plane:
    """The XY plane (z = 0)."""
    return plane(0.0, 0.0, 1.0, 0.0)


def xz_plane() -> Plane:
    """The XZ plane (y = 0)."""
    return plane(0.0, 1.0, 0.0, 0.0)


def yz_plane() -> Plane:
    """The YZ plane (x = 0)."""
    return plane(1.0, 0.0, 0.0, 0.0)


def x_axis() -> Line:
    """The X axis."""
    return line_from_plucker(torch.tensor([1.0, 0.0, 0.0]), torch.zeros(3))


def y_axis() -> Line:
    """The Y axis."""
    return line_from_plucker(torch.tensor([0.0, 1.0, 0.0]), torch.zeros(3))


def z_axis() -> Line:
    """The Z axis."""
    return line_from_plucker(torch.tensor([0.0, 0.0, 1.0]), torch.zeros(3))


# =============================================================================
# Join
# =============================================================================

def join_points(p: Point, q: Point) -> Line:
    """
    Line containing points p and q.

    Zero if p and q are coincident (equal up to scale).
    """
    px, py, pz, pw = p.coords.unbind(dim=-1)
    qx, qy, qz, qw = q.coords.unbind(dim=-1)

    v = torch.stack([
        qx * pw - px * qw,
        qy * pw - py * qw,
        qz * pw - pz * qw,
    ], dim=-1)

    # Moment is the cross product of the spatial parts
    m = torch.stack([
        py * qz - pz * qy,
        pz * qx - px * qz,
        px * qy - py * qx,
    ], dim=-1)

    return Line(v, m)


def join_line_point(l: Line, p: Point) -> Plane:
    """
    Plane containing line l and point p.

    The normal is zero if p lies on l.
    """
    vx, vy, vz = l.v.unbind(dim=-1)
    mx, my, mz = l.m.unbind(dim=-1)
    px, py, pz, pw = p.coords.unbind(dim=-1)

    return Plane(torch.stack([
        vy * pz - vz * py + mx * pw,
        vz * px - vx * pz + my * pw,
        vx * py - vy * px + mz * pw,
        -(mx * px + my * py + mz * pz),
    ], dim=-1))


def join(a: Union[Point, Line], b: Union[Point, Line]) -> Union[Line, Plane]:
    """
    Join operation (wedge product).

    - point ^ point -> line
    - line ^ point -> plane
    - point ^ line -> plane

    Raises:
        TypeError: For any other combination of operands
    """
    if isinstance(a, Point) and isinstance(b, Point):
        return join_points(a, b)
    if isinstance(a, Line) and isinstance(b, Point):
        return join_line_point(a, b)
    if isinstance(a, Point) and isinstance(b, Line):
        return join_line_point(b, a)
    raise TypeError(f"Cannot join {type(a).__name__} with {type(b).__name__}")


# =============================================================================
# Meet
# =============================================================================

def meet_planes(f: Plane, g: Plane) -> Line:
    """
    Line where planes f and g intersect.

    The direction is zero if f and g are parallel.
    """
    fx, fy, fz, fw = f.coords.unbind(dim=-1)
    gx, gy, gz, gw = g.coords.unbind(dim=-1)

    v = torch.stack([
        fz * gy - fy * gz,
        fx * gz - fz * gx,
        fy * gx - fx * gy,
    ], dim=-1)

    m = torch.stack([
        fx * gw - gx * fw,
        fy * gw - gy * fw,
        fz * gw - gz * fw,
    ], dim=-1)

    return Line(v, m)


def meet_line_plane(l: Line, f: Plane) -> Point:
    """
    Point where line l crosses plane f.

    The weight is zero if l is parallel to f.
    """
    vx, vy, vz = l.v.unbind(dim=-1)
    mx, my, mz = l.m.unbind(dim=-1)
    fx, fy, fz, fw = f.coords.unbind(dim=-1)

    return Point(torch.stack([
        my * fz - mz * fy + vx * fw,
        mz * fx - mx * fz + vy * fw,
        mx * fy - my * fx + vz * fw,
        -(vx * fx + vy * fy + vz * fz),
    ], dim=-1))


def meet(a: Union[Line, Plane], b: Union[Line, Plane]) -> Union[Line, Point]:
    """
    Meet operation (antiwedge product).

    - plane & plane -> line
    - line & plane -> point
    - plane & line -> point

    Raises:
        TypeError: For any other combination of operands
    """
    if isinstance(a, Plane) and isinstance(b, Plane):
        return meet_planes(a, b)
    if isinstance(a, Line) and isinstance(b, Plane):
        return meet_line_plane(a, b)
    if isinstance(a, Plane) and isinstance(b, Line):
        return meet_line_plane(b, a)
    raise TypeError(f"Cannot meet {type(a).__name__} with {type(b).__name__}")


# =============================================================================
# Dual and complements
# =============================================================================

def dual(x: Entity) -> Entity:
    """
    Weight dual: the left complement of the entity's weight part.

    - point (x, y, z, w) -> plane (0, 0, 0, -w)
    - line (v, m)        -> line (0, -v)
    - plane (x, y, z, w) -> point (x, y, z, 0)

    The image is always pure bulk, so dual(dual(x)) is zero.

    Raises:
        TypeError: If x is not a point, line or plane
    """
    if isinstance(x, Point):
        w = x.coords[..., 3]
        zero = torch.zeros_like(w)
        return Plane(torch.stack([zero, zero, zero, -w], dim=-1))
    if isinstance(x, Line):
        return Line(torch.zeros_like(x.v), -x.v)
    if isinstance(x, Plane):
        zero = torch.zeros_like(x.coords[..., :1])
        return Point(torch.cat([x.normal, zero], dim=-1))
    raise TypeError(f"Cannot dualize {type(x).__name__}")


def right_complement(x: Entity) -> Entity:
    """
    Right complement: x ^ right_complement(x) spans the antiscalar e1234.

    - point (x, y, z, w) -> plane (x, y, z, w)
    - line (v, m)        -> line (-m, -v)
    - plane (x, y, z, w) -> point (-x, -y, -z, -w)
    """
    if isinstance(x, Point):
        return Plane(x.coords)
    if isinstance(x, Line):
        return Line(-x.m, -x.v)
    if isinstance(x, Plane):
        return Point(-x.coords)
    raise TypeError(f"Cannot complement {type(x).__name__}")


def left_complement(x: Entity) -> Entity:
    """
    Left complement: left_complement(x) ^ x spans the antiscalar e1234.

    Inverse of right_complement. On points and planes it differs from the
    right complement by a sign; on lines the two agree.
    """
    if isinstance(x, Point):
        return Plane(-x.coords)
    if isinstance(x, Line):
        return Line(-x.m, -x.v)
    if isinstance(x, Plane):
        return Point(x.coords)
    raise TypeError(f"Cannot complement {type(x).__name__}")


def bulk_part(x: Entity) -> Entity:
    """
    Components of x that the weight dual discards.

    - point: (x, y, z, 0)
    - line: (0, m)
    - plane: (0, 0, 0, w)
    """
    if isinstance(x, Point):
        return Point(torch.cat([x.coords[..., :3], torch.zeros_like(x.coords[..., 3:])], dim=-1))
    if isinstance(x, Line):
        return Line(torch.zeros_like(x.v), x.m)
    if isinstance(x, Plane):
        return Plane(torch.cat([torch.zeros_like(x.normal), x.coords[..., 3:]], dim=-1))
    raise TypeError(f"Cannot take bulk of {type(x).__name__}")


def weight_part(x: Entity) -> Entity:
    """
    Components of x that carry its weight.

    - point: (0, 0, 0, w)
    - line: (v, 0)
    - plane: (x, y, z, 0)
    """
    if isinstance(x, Point):
        return Point(torch.cat([torch.zeros_like(x.coords[..., :3]), x.coords[..., 3:]], dim=-1))
    if isinstance(x, Line):
        return Line(x.v, torch.zeros_like(x.m))
    if isinstance(x, Plane):
        return Plane(torch.cat([x.normal, torch.zeros_like(x.coords[..., 3:])], dim=-1))
    raise TypeError(f"Cannot take weight of {type(x).__name__}")


# =============================================================================
# Composed constructions
# =============================================================================

def perpendicular_line(f: Plane, p: Point) -> Line:
    """Line through p perpendicular to plane f."""
    return join_points(dual(f), p)


def perpendicular_plane(l: Line, p: Point) -> Plane:
    """Plane through p perpendicular to line l."""
    return join_line_point(dual(l), p)


def orthogonal_plane(l: Line, f: Plane) -> Plane:
    """Plane containing line l and perpendicular to plane f."""
    return join_line_point(l, dual(f))


def project_point_plane(p: Point, f: Plane) -> Point:
    """
    Project a point onto a plane.

    Meets the perpendicular through p with f. The result carries the
    weight (f . f) * p.w and is not unitized.
    """
    return meet_line_plane(perpendicular_line(f, p), f)


def project_point_line(p: Point, l: Line) -> Point:
    """
    Project a point onto a line.

    Meets l with the plane through p perpendicular to it. The result
    carries the weight (v . v) * p.w and is not unitized.
    """
    return meet_line_plane(l, perpendicular_plane(l, p))
