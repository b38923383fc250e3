"""
Motor operations for Projective Geometric Algebra (PGA).

A motor represents a rigid body motion (rotation about an axis line combined
with a translation along it). It lives in the even subalgebra and is stored
as two 4-component parts:

    r = (e41, e42, e43, e1234)   rotor part
    u = (e23, e31, e12, scalar)  translator part

Built from an axis line (v, m) with half angle phi and half distance d:

    r = (v sin(phi), cos(phi))
    u = (d v cos(phi) + m sin(phi), -d sin(phi))

For a unit axis direction the motor rotates by 2*phi about the axis and
translates by 2*d along it. Applying the motor uses its 4x4 homogeneous
matrix, which is exact for unit motors (r . r = 1, r . u = 0).
"""

from __future__ import annotations
import torch

from ..core.constants import DEFAULT_DTYPE, MOTOR_PART_COMPONENTS, MOTOR_ROTOR_BASIS, MOTOR_TRANSLATOR_BASIS
from ..core.types import Scalar, Vector4, to_component, own_components, components_equal
from .entities import Line


# Antireverse sign table: bivector parts flip, scalar and antiscalar stay
ANTIREVERSE_SIGNS = torch.tensor([-1.0, -1.0, -1.0, 1.0], dtype=DEFAULT_DTYPE)


class Motor:
    """
    A motor representing a screw motion in PGA.

    Can be constructed from:
    - An axis line, half angle and half distance (``from_axis``)
    - Raw rotor and translator parts
    """

    def __init__(self, r: Vector4, u: Vector4):
        """
        Initialize a Motor.

        Args:
            r: Rotor part of shape (..., 4) as [e41, e42, e43, e1234]
            u: Translator part of shape (..., 4) as [e23, e31, e12, scalar]

        Both parts are copied and converted to float32.
        """
        self._r = own_components(r, MOTOR_PART_COMPONENTS, "Motor rotor part")
        self._u = own_components(u, MOTOR_PART_COMPONENTS, "Motor translator part")

    @classmethod
    def from_axis(cls, axis: Line, phi: Scalar, d: Scalar = 0.0) -> 'Motor':
        """
        Create a motor from an axis line.

        Args:
            axis: Axis line; its direction should be unit length for the
                  motor to be a unit motor
            phi: Half of the rotation angle, in radians
            d: Half of the translation distance along the axis

        Returns:
            Motor
        """
        vx, vy, vz = axis.v.unbind(dim=-1)
        mx, my, mz = axis.m.unbind(dim=-1)

        phi = to_component(phi, axis.dtype)
        d = to_component(d, axis.dtype)
        sin_phi = torch.sin(phi)
        cos_phi = torch.cos(phi)

        r = torch.stack(torch.broadcast_tensors(
            vx * sin_phi,
            vy * sin_phi,
            vz * sin_phi,
            cos_phi,
        ), dim=-1)

        u = torch.stack(torch.broadcast_tensors(
            d * vx * cos_phi + mx * sin_phi,
            d * vy * cos_phi + my * sin_phi,
            d * vz * cos_phi + mz * sin_phi,
            -d * sin_phi,
        ), dim=-1)

        return cls(r, u)

    @classmethod
    def identity(cls) -> 'Motor':
        """Create identity motor (no transformation)."""
        r = torch.tensor([0.0, 0.0, 0.0, 1.0], dtype=DEFAULT_DTYPE)
        u = torch.zeros(4, dtype=DEFAULT_DTYPE)
        return cls(r, u)

    @property
    def r(self) -> torch.Tensor:
        """Rotor part [e41, e42, e43, e1234]."""
        return self._r.clone()

    @property
    def u(self) -> torch.Tensor:
        """Translator part [e23, e31, e12, scalar]."""
        return self._u.clone()

    @property
    def shape(self) -> torch.Size:
        """Batch shape."""
        return self._r.shape[:-1]

    @property
    def dtype(self) -> torch.dtype:
        return self._r.dtype

    @property
    def device(self) -> torch.device:
        return self._r.device

    # === Algebraic names ===

    @property
    def e41(self) -> torch.Tensor:
        return self._r[..., 0].clone()

    @property
    def e42(self) -> torch.Tensor:
        return self._r[..., 1].clone()

    @property
    def e43(self) -> torch.Tensor:
        return self._r[..., 2].clone()

    @property
    def e1234(self) -> torch.Tensor:
        return self._r[..., 3].clone()

    antiscalar = e1234

    @property
    def e23(self) -> torch.Tensor:
        return self._u[..., 0].clone()

    @property
    def e31(self) -> torch.Tensor:
        return self._u[..., 1].clone()

    @property
    def e12(self) -> torch.Tensor:
        return self._u[..., 2].clone()

    @property
    def scalar(self) -> torch.Tensor:
        return self._u[..., 3].clone()

    def inverse(self) -> 'Motor':
        """
        Inverse of a unit motor.

        For unit motors the inverse equals the antireverse, which negates the
        bivector components and keeps the scalar and antiscalar.
        """
        signs = ANTIREVERSE_SIGNS.to(device=self.device, dtype=self.dtype)
        return Motor(self._r * signs, self._u * signs)

    def to_matrix(self) -> torch.Tensor:
        """
        Convert a unit motor to a 4x4 homogeneous transformation matrix.

        The matrix acts on column vectors (x, y, z, w); the translation column
        is scaled by the point's weight, so points at infinity only rotate.

        Returns:
            Matrix of shape (..., 4, 4)
        """
        rx, ry, rz, rw = self._r.unbind(dim=-1)
        ux, uy, uz, uw = self._u.unbind(dim=-1)

        batch_shape = self._r.shape[:-1]
        M = torch.eye(4, device=self.device, dtype=self.dtype)
        M = M.expand(*batch_shape, 4, 4).clone()

        # Rotation block: quaternion matrix with w = e1234
        M[..., 0, 0] = 1.0 - 2.0 * (ry * ry + rz * rz)
        M[..., 0, 1] = 2.0 * (rx * ry - rw * rz)
        M[..., 0, 2] = 2.0 * (rz * rx + rw * ry)
        M[..., 1, 0] = 2.0 * (rx * ry + rw * rz)
        M[..., 1, 1] = 1.0 - 2.0 * (rz * rz + rx * rx)
        M[..., 1, 2] = 2.0 * (ry * rz - rw * rx)
        M[..., 2, 0] = 2.0 * (rz * rx - rw * ry)
        M[..., 2, 1] = 2.0 * (ry * rz + rw * rx)
        M[..., 2, 2] = 1.0 - 2.0 * (rx * rx + ry * ry)

        # Translation column
        M[..., 0, 3] = 2.0 * (rw * ux + ry * uz - rz * uy - rx * uw)
        M[..., 1, 3] = 2.0 * (rw * uy + rz * ux - rx * uz - ry * uw)
        M[..., 2, 3] = 2.0 * (rw * uz + rx * uy - ry * ux - rz * uw)

        return M

    def apply(self, coords: Vector4) -> torch.Tensor:
        """
        Apply the motor to homogeneous point coordinates.

        Args:
            coords: Points of shape (..., 4) as [x, y, z, w]

        Returns:
            Transformed coordinates of shape (..., 4)
        """
        M = self.to_matrix()
        return (M @ coords.unsqueeze(-1)).squeeze(-1)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Motor):
            return NotImplemented
        return components_equal(self._r, other._r) and components_equal(self._u, other._u)

    __hash__ = None

    def __repr__(self) -> str:
        if self._r.ndim == 1:
            parts = [
                f"{n}={v:g}"
                for n, v in zip(
                    MOTOR_ROTOR_BASIS + MOTOR_TRANSLATOR_BASIS,
                    self._r.tolist() + self._u.tolist(),
                )
            ]
            return f"Motor({', '.join(parts)})"
        return f"Motor(shape={tuple(self.shape)})"


def motor_from_axis(axis: Line, phi: Scalar, d: Scalar = 0.0) -> Motor:
    """
    Create a motor from an axis line, half angle and half distance.

    Convenience function equivalent to ``Motor.from_axis``.
    """
    return Motor.from_axis(axis, phi, d)
