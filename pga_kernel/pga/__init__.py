"""
PGA (Projective Geometric Algebra) module.

Implements points, lines and planes of 3D PGA in its 4D representation,
the incidence operations join, meet and dual, and rigid motions (motors).
"""

from .entities import (
    Point,
    Line,
    Plane,
)

from .primitives import (
    point,
    ideal_point,
    point_to_cartesian,
    plane,
    plane_from_points,
    line_from_points,
    line_from_plucker,
    origin,
    xy_plane, xz_plane, yz_plane,
    x_axis, y_axis, z_axis,
    join,
    join_points,
    join_line_point,
    meet,
    meet_planes,
    meet_line_plane,
    dual,
    right_complement,
    left_complement,
    bulk_part,
    weight_part,
    perpendicular_line,
    perpendicular_plane,
    orthogonal_plane,
    project_point_plane,
    project_point_line,
)

from .motors import (
    Motor,
    motor_from_axis,
)

from .transforms import (
    transform,
    transform_point,
    transform_line,
    transform_plane,
)

__all__ = [
    # Entities
    "Point",
    "Line",
    "Plane",
    # Constructors
    "point",
    "ideal_point",
    "point_to_cartesian",
    "plane",
    "plane_from_points",
    "line_from_points",
    "line_from_plucker",
    "origin",
    "xy_plane", "xz_plane", "yz_plane",
    "x_axis", "y_axis", "z_axis",
    # Incidence
    "join",
    "join_points",
    "join_line_point",
    "meet",
    "meet_planes",
    "meet_line_plane",
    "dual",
    "right_complement",
    "left_complement",
    "bulk_part",
    "weight_part",
    # Composed constructions
    "perpendicular_line",
    "perpendicular_plane",
    "orthogonal_plane",
    "project_point_plane",
    "project_point_line",
    # Motors
    "Motor",
    "motor_from_axis",
    # Transforms
    "transform",
    "transform_point",
    "transform_line",
    "transform_plane",
]
