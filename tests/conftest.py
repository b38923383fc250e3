"""
Pytest configuration and fixtures for pga-kernel tests.
"""

import pytest
import torch

from pga_kernel.pga import point, plane, line_from_points, plane_from_points


@pytest.fixture
def unit_x():
    """Point (1, 0, 0)."""
    return point(1.0, 0.0, 0.0)


@pytest.fixture
def unit_y():
    """Point (0, 1, 0)."""
    return point(0.0, 1.0, 0.0)


@pytest.fixture
def unit_z():
    """Point (0, 0, 1)."""
    return point(0.0, 0.0, 1.0)


@pytest.fixture
def diagonal_plane(unit_x, unit_y, unit_z):
    """Plane x + y + z = 1 through the three unit points."""
    return plane_from_points(unit_x, unit_y, unit_z)


@pytest.fixture
def ground_plane(unit_x, unit_y):
    """The xy-plane joined from (1,0,0), (0,1,0) and the origin."""
    return plane_from_points(unit_x, unit_y, point(0.0, 0.0, 0.0))


@pytest.fixture
def skew_line():
    """Line through (1,0,0) and (0,1,1)."""
    return line_from_points(point(1, 0, 0), point(0, 1, 1))


@pytest.fixture
def sample_entities(skew_line):
    """One point, line and plane with integer coordinates."""
    return [
        point(1, 2, 3),
        skew_line,
        plane(1, -2, 3, 4),
    ]


@pytest.fixture
def random_points():
    """Random finite points with unit weight."""
    generator = torch.Generator().manual_seed(0)
    coords = torch.rand(8, 3, generator=generator) * 2 - 1
    return [point(x, y, z) for x, y, z in coords.tolist()]
