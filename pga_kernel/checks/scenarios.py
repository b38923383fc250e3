"""
Self-checks for the PGA kernel.

Each check builds a small configuration, computes the same geometric result
in two independent ways and compares them exactly:

- a closed-form formula written directly in coordinates, and
- a composition of dual, join and meet from ``pga_kernel.pga``.

All inputs are small integers, so every intermediate product is exactly
representable in float32 and the two derivations must agree bit for bit.
"""

from __future__ import annotations
from typing import Callable, Dict, Tuple
import math
import torch

from ..pga import (
    Point, Line, Plane, Motor,
    point, plane,
    join, meet, dual,
    line_from_points, line_from_plucker, plane_from_points,
    right_complement, left_complement, weight_part,
    perpendicular_line, perpendicular_plane, orthogonal_plane,
    project_point_plane, project_point_line,
    z_axis, transform_point,
)


# =============================================================================
# Closed-form derivations
# =============================================================================

def perpendicular_line_closed_form(f: Plane, p: Point) -> Line:
    """Line through p along the normal n of f: v = -p.w n, m = n x p."""
    fx, fy, fz, _ = f.coords.unbind(dim=-1)
    px, py, pz, pw = p.coords.unbind(dim=-1)
    v = torch.stack([-(fx * pw), -(fy * pw), -(fz * pw)], dim=-1)
    m = torch.stack([
        fy * pz - fz * py,
        fz * px - fx * pz,
        fx * py - fy * px,
    ], dim=-1)
    return Line(v, m)


def perpendicular_plane_closed_form(l: Line, p: Point) -> Plane:
    """Plane through p with normal -p.w v and offset v . p."""
    vx, vy, vz = l.v.unbind(dim=-1)
    px, py, pz, pw = p.coords.unbind(dim=-1)
    return Plane(torch.stack([
        -(vx * pw),
        -(vy * pw),
        -(vz * pw),
        vx * px + vy * py + vz * pz,
    ], dim=-1))


def orthogonal_plane_closed_form(l: Line, f: Plane) -> Plane:
    """Plane containing l with normal v x n and offset -(m . n)."""
    vx, vy, vz = l.v.unbind(dim=-1)
    mx, my, mz = l.m.unbind(dim=-1)
    fx, fy, fz, _ = f.coords.unbind(dim=-1)
    return Plane(torch.stack([
        vy * fz - vz * fy,
        vz * fx - vx * fz,
        vx * fy - vy * fx,
        -(mx * fx + my * fy + mz * fz),
    ], dim=-1))


def project_point_plane_closed_form(p: Point, f: Plane) -> Point:
    """f²·p − (f·p)·n, with weight f²·p.w."""
    fx, fy, fz, fw = f.coords.unbind(dim=-1)
    px, py, pz, pw = p.coords.unbind(dim=-1)
    ff = fx * fx + fy * fy + fz * fz
    fp = fx * px + fy * py + fz * pz + fw * pw
    return Point(torch.stack([
        ff * px - fp * fx,
        ff * py - fp * fy,
        ff * pz - fp * fz,
        ff * pw,
    ], dim=-1))


def project_point_line_closed_form(p: Point, l: Line) -> Point:
    """(v·p) v + p.w (v x m), with weight p.w (v·v)."""
    vx, vy, vz = l.v.unbind(dim=-1)
    mx, my, mz = l.m.unbind(dim=-1)
    px, py, pz, pw = p.coords.unbind(dim=-1)
    vp = vx * px + vy * py + vz * pz
    vv = vx * vx + vy * vy + vz * vz
    return Point(torch.stack([
        vp * vx + pw * (vy * mz - vz * my),
        vp * vy + pw * (vz * mx - vx * mz),
        vp * vz + pw * (vx * my - vy * mx),
        pw * vv,
    ], dim=-1))


# =============================================================================
# Scenarios: (closed form, composed)
# =============================================================================

def perpendicular_line_scenario() -> Tuple[Line, Line]:
    """Line through (1,1,1) perpendicular to the plane x + y + z = 1."""
    f = plane_from_points(point(1, 0, 0), point(0, 1, 0), point(0, 0, 1))
    p = point(1, 1, 1)
    return perpendicular_line_closed_form(f, p), perpendicular_line(f, p)


def perpendicular_plane_scenario() -> Tuple[Plane, Plane]:
    """Plane through (1,1,1) perpendicular to a skew line."""
    l = line_from_points(point(1, 0, 0), point(0, 1, 1))
    p = point(1, 1, 1)
    return perpendicular_plane_closed_form(l, p), perpendicular_plane(l, p)


def orthogonal_plane_scenario() -> Tuple[Plane, Plane]:
    """Plane containing a line of the xz-plane, perpendicular to the xy-plane."""
    f = plane_from_points(point(1, 0, 0), point(0, 1, 0), point(0, 0, 0))
    l = line_from_points(point(1, 0, 0), point(0, 0, 1))
    return orthogonal_plane_closed_form(l, f), orthogonal_plane(l, f)


def project_point_plane_scenario() -> Tuple[Point, Point]:
    """Projection of (1,-1,1) onto the xy-plane."""
    f = plane_from_points(point(1, 0, 0), point(0, 1, 0), point(0, 0, 0))
    p = point(1, -1, 1)
    return project_point_plane_closed_form(p, f), project_point_plane(p, f)


def project_point_line_scenario() -> Tuple[Point, Point]:
    """Projection of (1,1,1) onto the line x + y = 1, z = 0."""
    l = line_from_points(point(1, 0, 0), point(0, 1, 0))
    p = point(1, 1, 1)
    return project_point_line_closed_form(p, l), project_point_line(p, l)


SCENARIOS: Dict[str, Callable[[], Tuple]] = {
    'perpendicular_line': perpendicular_line_scenario,
    'perpendicular_plane': perpendicular_plane_scenario,
    'orthogonal_plane': orthogonal_plane_scenario,
    'project_point_plane': project_point_plane_scenario,
    'project_point_line': project_point_line_scenario,
}


# =============================================================================
# Checks
# =============================================================================

def check_line_from_points() -> bool:
    """Line through (2,3,7) and (2,1,0)."""
    line = line_from_points(point(2, 3, 7), point(2, 1, 0))
    expected = line_from_plucker(
        torch.tensor([0.0, -2.0, -7.0]),
        torch.tensor([-7.0, 14.0, -4.0]),
    )
    return line == expected


def check_plane_from_points() -> bool:
    """Plane through (0,0,0), (0,1,0), (1,1,0) is z = 0 with normal -z."""
    f = point(0, 0, 0) ^ point(0, 1, 0) ^ point(1, 1, 0)
    return f == plane(0, 0, -1, 0) and f.weight() == point(0, 0, -1, 0)


def check_degenerate_join() -> bool:
    """A point joined with itself, or a multiple of itself, is the zero line."""
    p = point(1, 2, 3)
    return join(p, p).is_zero() and join(p, point(2, 4, 6, 2)).is_zero()


def check_degenerate_meet() -> bool:
    """A plane met with itself is the zero line."""
    f = plane(1, -2, 3, 4)
    return meet(f, f).is_zero()


def check_duality() -> bool:
    """The weight dual annihilates itself; the complements invert each other."""
    entities = [
        point(1, 2, 3),
        line_from_points(point(1, 0, 0), point(0, 1, 1)),
        plane(1, -2, 3, 4),
    ]
    for x in entities:
        if not dual(dual(x)).is_zero():
            return False
        if dual(x) != left_complement(weight_part(x)):
            return False
        if left_complement(right_complement(x)) != x:
            return False
        if right_complement(left_complement(x)) != x:
            return False
    return True


def check_join_meet_duality() -> bool:
    """Complement turns join into meet for point/point and line/point pairs."""
    p = point(1, 2, 3)
    q = point(-1, 0, 2, 2)
    l = line_from_points(point(1, 0, 0), point(0, 1, 1))
    pairs = [(p, q), (l, p)]
    for a, b in pairs:
        lhs = meet(right_complement(a), right_complement(b))
        rhs = right_complement(join(a, b))
        if lhs != rhs:
            return False
    return True


def check_motor_identity() -> bool:
    """Zero angle and zero distance give the identity motor for any axis."""
    axis = line_from_points(point(1, 2, 3), point(-4, 5, 0.5))
    return Motor.from_axis(axis, 0.0, 0.0) == Motor.identity()


def check_motor_half_turn() -> bool:
    """A half turn (phi = pi/2) about the z axis maps (1,0,0) to (-1,0,0)."""
    motor = Motor.from_axis(z_axis(), math.pi / 2)
    moved = transform_point(motor, point(1, 0, 0))
    return bool(torch.allclose(moved.coords, torch.tensor([-1.0, 0.0, 0.0, 1.0]), atol=1e-6))


def _scenario_check(name: str) -> Callable[[], bool]:
    def check() -> bool:
        closed_form, composed = SCENARIOS[name]()
        return closed_form == composed
    check.__name__ = f"check_{name}"
    check.__doc__ = SCENARIOS[name].__doc__
    return check


CHECKS: Dict[str, Callable[[], bool]] = {
    'line_from_points': check_line_from_points,
    'plane_from_points': check_plane_from_points,
    'degenerate_join': check_degenerate_join,
    'degenerate_meet': check_degenerate_meet,
    'duality': check_duality,
    'join_meet_duality': check_join_meet_duality,
    **{name: _scenario_check(name) for name in SCENARIOS},
    'motor_identity': check_motor_identity,
    'motor_half_turn': check_motor_half_turn,
}
