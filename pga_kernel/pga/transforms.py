"""
Rigid transformations of PGA primitives by motors.

All functions assume a unit motor and go through its 4x4 matrix
``[[R, t], [0, 1]]``:

- point (x, w)      -> (R x + t w, w)
- line (v, m)       -> (R v, R m + t x R v)
- plane (n, w)      -> (R n, w - (R n) . t)
"""

from __future__ import annotations
from typing import Union
import torch

from .entities import Point, Line, Plane
from .motors import Motor


def _rotation_translation(motor: Motor):
    M = motor.to_matrix()
    return M[..., :3, :3], M[..., :3, 3]


def _rotate(R: torch.Tensor, vectors: torch.Tensor) -> torch.Tensor:
    return (R @ vectors.unsqueeze(-1)).squeeze(-1)


def transform_point(motor: Motor, p: Point) -> Point:
    """
    Apply a motor to a point.

    Points at infinity are rotated but not translated.
    """
    return Point(motor.apply(p.coords))


def transform_line(motor: Motor, l: Line) -> Line:
    """
    Apply a motor to a line.

    The direction rotates; the moment rotates and picks up t x v'.
    """
    R, t = _rotation_translation(motor)
    v = _rotate(R, l.v)
    m = _rotate(R, l.m) + torch.cross(t.expand_as(v), v, dim=-1)
    return Line(v, m)


def transform_plane(motor: Motor, f: Plane) -> Plane:
    """
    Apply a motor to a plane.

    The normal rotates and the offset shifts by the translation's
    component along the new normal.
    """
    R, t = _rotation_translation(motor)
    n = _rotate(R, f.normal)
    w = f.w - (n * t).sum(dim=-1)
    return Plane(torch.cat([n, w.unsqueeze(-1)], dim=-1))


def transform(motor: Motor, x: Union[Point, Line, Plane]) -> Union[Point, Line, Plane]:
    """
    Apply a motor to any primitive.

    Raises:
        TypeError: If x is not a point, line or plane
    """
    if isinstance(x, Point):
        return transform_point(motor, x)
    if isinstance(x, Line):
        return transform_line(motor, x)
    if isinstance(x, Plane):
        return transform_plane(motor, x)
    raise TypeError(f"Cannot transform {type(x).__name__}")
