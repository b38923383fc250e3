"""
Tests for PGA motor operations.
"""

import pytest
import torch
import math

from pga_kernel.pga import (
    Motor,
    motor_from_axis,
    point,
    ideal_point,
    line_from_points,
    line_from_plucker,
    z_axis,
)


def _unit(line):
    """Rescale a line so its direction has unit length."""
    norm = line.v.norm()
    return line_from_plucker(line.v / norm, line.m / norm)


class TestMotorCreation:
    """Test motor creation methods."""

    def test_identity_motor(self):
        """Test identity motor creation."""
        motor = Motor.identity()

        assert torch.equal(motor.r, torch.tensor([0.0, 0.0, 0.0, 1.0]))
        assert torch.equal(motor.u, torch.zeros(4))
        assert motor.dtype == torch.float32

    def test_from_axis_formula(self):
        """Test r = (v sin phi, cos phi), u = (d v cos phi + m sin phi, -d sin phi)."""
        axis = line_from_points(point(1, 0, 0), point(1, 0, 1))
        phi, d = 0.3, 0.7
        motor = Motor.from_axis(axis, phi, d)

        s, c = math.sin(phi), math.cos(phi)
        expected_r = torch.tensor([0.0, 0.0, s, c])
        expected_u = torch.tensor([0.0, -s, d * c, -d * s])

        assert torch.allclose(motor.r, expected_r, atol=1e-6)
        assert torch.allclose(motor.u, expected_u, atol=1e-6)

    def test_zero_angle_is_identity(self):
        """Test that zero angle and distance give the identity for any axis."""
        axis = line_from_points(point(1, 2, 3), point(-4, 5, 0.5))

        assert Motor.from_axis(axis, 0.0, 0.0) == Motor.identity()

    def test_motor_from_axis_function(self, skew_line):
        """Test that the function matches the classmethod."""
        assert motor_from_axis(skew_line, 0.5, 1.0) == Motor.from_axis(skew_line, 0.5, 1.0)

    def test_accessors(self):
        """Test algebraic component names."""
        motor = Motor(torch.tensor([1.0, 2.0, 3.0, 4.0]), torch.tensor([5.0, 6.0, 7.0, 8.0]))

        assert motor.e41.item() == 1.0
        assert motor.e42.item() == 2.0
        assert motor.e43.item() == 3.0
        assert motor.e1234.item() == 4.0
        assert motor.antiscalar.item() == 4.0
        assert motor.e23.item() == 5.0
        assert motor.e31.item() == 6.0
        assert motor.e12.item() == 7.0
        assert motor.scalar.item() == 8.0

    def test_wrong_size(self):
        """Test that malformed parts are rejected."""
        with pytest.raises(ValueError, match="Motor rotor part"):
            Motor(torch.zeros(3), torch.zeros(4))

    def test_repr(self):
        """Test repr lists every component."""
        assert repr(Motor.identity()) == (
            "Motor(e41=0, e42=0, e43=0, e1234=1, e23=0, e31=0, e12=0, scalar=0)"
        )

    def test_unit_motor(self, skew_line):
        """Test a unit axis gives r . r = 1 and r . u = 0."""
        motor = Motor.from_axis(_unit(skew_line), 0.4, 1.3)

        assert torch.allclose((motor.r * motor.r).sum(), torch.tensor(1.0), atol=1e-6)
        assert torch.allclose((motor.r * motor.u).sum(), torch.tensor(0.0), atol=1e-6)


class TestMotorInverse:
    """Test the antireverse inverse."""

    def test_inverse_signs(self):
        """Test that bivector parts flip and scalar parts stay."""
        motor = Motor(torch.tensor([1.0, 2.0, 3.0, 4.0]), torch.tensor([5.0, 6.0, 7.0, 8.0]))
        inv = motor.inverse()

        assert torch.equal(inv.r, torch.tensor([-1.0, -2.0, -3.0, 4.0]))
        assert torch.equal(inv.u, torch.tensor([-5.0, -6.0, -7.0, 8.0]))

    def test_inverse_reverses_screw(self, skew_line):
        """Test that the inverse equals the screw with negated angle and distance."""
        axis = _unit(skew_line)

        inv = Motor.from_axis(axis, 0.4, 1.3).inverse()
        expected = Motor.from_axis(axis, -0.4, -1.3)

        assert torch.allclose(inv.r, expected.r, atol=1e-6)
        assert torch.allclose(inv.u, expected.u, atol=1e-6)

    def test_inverse_matrix(self):
        """Test that the inverse's matrix inverts the motor's matrix."""
        axis = line_from_points(point(1, 0, 0), point(1, 0, 1))
        motor = Motor.from_axis(axis, 0.3, 0.5)

        product = motor.inverse().to_matrix() @ motor.to_matrix()

        assert torch.allclose(product, torch.eye(4), atol=1e-5)


class TestMotorMatrix:
    """Test the homogeneous matrix form."""

    def test_identity_matrix(self):
        """Test identity motor gives the identity matrix."""
        assert torch.equal(Motor.identity().to_matrix(), torch.eye(4))

    def test_rotation_orthonormal(self, skew_line):
        """Test that the rotation block is a proper rotation."""
        motor = Motor.from_axis(_unit(skew_line), 0.9, 0.2)

        R = motor.to_matrix()[:3, :3]

        assert torch.allclose(R @ R.T, torch.eye(3), atol=1e-5)
        assert torch.allclose(torch.det(R), torch.tensor(1.0), atol=1e-5)

    def test_last_row(self):
        """Test the homogeneous row is (0, 0, 0, 1)."""
        motor = Motor.from_axis(z_axis(), 0.3, 2.0)

        assert torch.equal(motor.to_matrix()[3], torch.tensor([0.0, 0.0, 0.0, 1.0]))

    def test_quarter_turn(self):
        """Test phi = pi/4 about z rotates (1,0,0) to (0,1,0)."""
        motor = Motor.from_axis(z_axis(), math.pi / 4)
        moved = motor.apply(point(1, 0, 0).coords)

        assert torch.allclose(moved, torch.tensor([0.0, 1.0, 0.0, 1.0]), atol=1e-6)

    def test_half_turn(self):
        """Test phi = pi/2 about z maps (1,0,0) to (-1,0,0)."""
        motor = Motor.from_axis(z_axis(), math.pi / 2)
        moved = motor.apply(point(1, 0, 0).coords)

        assert torch.allclose(moved, torch.tensor([-1.0, 0.0, 0.0, 1.0]), atol=1e-6)

    def test_pure_translation(self):
        """Test zero angle translates by 2d along the axis."""
        motor = Motor.from_axis(z_axis(), 0.0, 1.5)
        moved = motor.apply(point(1, 2, 3).coords)

        assert torch.allclose(moved, torch.tensor([1.0, 2.0, 6.0, 1.0]))

    def test_screw(self):
        """Test a quarter turn with translation 2 along z."""
        motor = Motor.from_axis(z_axis(), math.pi / 4, 1.0)
        moved = motor.apply(point(1, 0, 0).coords)

        assert torch.allclose(moved, torch.tensor([0.0, 1.0, 2.0, 1.0]), atol=1e-6)

    def test_offset_axis_half_turn(self):
        """Test a half turn about the line x = 1, y = 0 maps the origin to (2,0,0)."""
        axis = line_from_points(point(1, 0, 0), point(1, 0, 1))
        motor = Motor.from_axis(axis, math.pi / 2)
        moved = motor.apply(point(0, 0, 0).coords)

        assert torch.allclose(moved, torch.tensor([2.0, 0.0, 0.0, 1.0]), atol=1e-6)

    def test_ideal_point_not_translated(self):
        """Test points at infinity only rotate."""
        motor = Motor.from_axis(z_axis(), 0.0, 1.0)
        moved = motor.apply(ideal_point(1, 0, 0).coords)

        assert torch.allclose(moved, torch.tensor([1.0, 0.0, 0.0, 0.0]))


class TestMotorStorage:
    """Test that motors hold their own float32 copy of the parts."""

    def test_parts_coerced(self):
        """Test integer and double parts are stored as float32."""
        motor = Motor(torch.tensor([0, 0, 0, 1]), torch.zeros(4, dtype=torch.float64))

        assert motor.dtype == torch.float32
        assert motor == Motor.identity()

    def test_source_tensors_copied(self):
        """Test that writing to the constructor's tensors leaves the motor alone."""
        r = torch.tensor([0.0, 0.0, 0.0, 1.0])
        u = torch.zeros(4)
        motor = Motor(r, u)
        r[3] = 5.0
        u[0] = 5.0

        assert motor == Motor.identity()

    def test_returned_tensors_are_copies(self):
        """Test that writing to returned parts leaves the motor alone."""
        motor = Motor.from_axis(z_axis(), 0.3, 0.5)
        r, u = motor.r, motor.u

        motor.r.zero_()
        motor.u.zero_()
        motor.e1234.fill_(9.0)

        assert torch.equal(motor.r, r)
        assert torch.equal(motor.u, u)

    def test_axis_unchanged(self, skew_line):
        """Test that building a motor leaves its axis unchanged."""
        v, m = skew_line.v, skew_line.m
        Motor.from_axis(skew_line, 0.4, 1.3)

        assert torch.equal(skew_line.v, v)
        assert torch.equal(skew_line.m, m)
