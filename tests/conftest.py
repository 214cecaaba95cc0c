import matplotlib

matplotlib.use("Agg")

import pytest

from config import AdvectionConfig


@pytest.fixture
def smallUniform():
    """Small uniform-velocity case, cheap enough to run many steps."""
    return AdvectionConfig(
        Nx=20,
        Ny=16,
        min_point=(0.0, 0.0),
        max_point=(1.0, 1.0),
        centre=(0.4, 0.5),
        width=(0.1, 0.1),
        bound_left=1.0,
        bound_right=2.0,
        bound_lower=3.0,
        bound_upper=4.0,
        cfl=0.9,
        num_steps=5,
        velocity="uniform",
        vel_x=0.01,
        vel_y=0.02,
    )


@pytest.fixture
def smallProfile():
    return AdvectionConfig(
        Nx=30,
        Ny=30,
        min_point=(0.0, 0.0),
        max_point=(30.0, 30.0),
        centre=(3.0, 15.0),
        width=(1.0, 5.0),
        cfl=0.9,
        num_steps=10,
        velocity="profile",
        vel_y=0.0,
    )
