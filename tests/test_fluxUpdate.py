import numpy as np
import pytest

from fluxUpdate import FluxUpdater
from grid import Grid2D
from initialCondition import GaussianInitialCondition
from variable import variable
from velocityField import LogProfileVelocityField, UniformVelocityField


def upwind_reference(u, vx, vy, dx, dy):
    """Rates on the interior with plain numpy slicing; vx is per grid line j."""
    centre = u[1:-1, 1:-1]
    return -(
        vx[None, 1:-1] * (centre - u[:-2, 1:-1]) / dx
        + vy * (centre - u[1:-1, :-2]) / dy
    )


@pytest.fixture
def setup():
    grid = Grid2D(12, 10, (0.0, 0.0), (1.0, 1.0))
    u = variable("u", 12, 10, top=0.2, bottom=0.1, left=0.3, right=0.4)
    GaussianInitialCondition((0.5, 0.5), (0.2, 0.2)).apply(u, grid.x, grid.y)
    u.applyBoundaryConditions()
    return grid, u


def test_rates_match_backward_differences(setup):
    grid, u = setup
    velocity = UniformVelocityField(grid, 0.3, 0.7)
    updater = FluxUpdater(grid, velocity)

    dudt = updater.computeRates(u)

    expected = upwind_reference(u.field, velocity.vx, 0.7, grid.Deltax, grid.Deltay)
    np.testing.assert_allclose(dudt[1:-1, 1:-1], expected, rtol=1e-12, atol=1e-15)
    # Ghost layer of the buffer is never written
    assert np.all(dudt[0, :] == 0.0)
    assert np.all(dudt[:, -1] == 0.0)


def test_rates_use_velocity_of_each_grid_line(setup):
    grid, u = setup
    velocity = LogProfileVelocityField(grid, 0.2, 0.1, 0.41)
    updater = FluxUpdater(grid, velocity)

    dudt = updater.computeRates(u)

    expected = upwind_reference(u.field, velocity.vx, 0.0, grid.Deltax, grid.Deltay)
    np.testing.assert_allclose(dudt[1:-1, 1:-1], expected, rtol=1e-12, atol=1e-15)


def test_rates_are_recomputed_not_accumulated(setup):
    grid, u = setup
    updater = FluxUpdater(grid, UniformVelocityField(grid, 0.3, 0.7))

    first = updater.computeRates(u).copy()
    second = updater.computeRates(u)

    np.testing.assert_array_equal(first, second)


def test_integrate_is_forward_euler_on_interior(setup):
    grid, u = setup
    updater = FluxUpdater(grid, UniformVelocityField(grid, 0.3, 0.7))
    before = u.field.copy()

    dudt = updater.computeRates(u).copy()
    updater.integrate(u, 0.01)

    np.testing.assert_allclose(
        u.field[1:-1, 1:-1], before[1:-1, 1:-1] + dudt[1:-1, 1:-1] * 0.01, rtol=1e-14
    )
    np.testing.assert_array_equal(u.field[0, :], before[0, :])
    np.testing.assert_array_equal(u.field[-1, :], before[-1, :])
    np.testing.assert_array_equal(u.field[:, 0], before[:, 0])
    np.testing.assert_array_equal(u.field[:, -1], before[:, -1])


def test_constant_field_does_not_change():
    grid = Grid2D(8, 8)
    u = variable("u", 8, 8, top=1.0, bottom=1.0, left=1.0, right=1.0)
    u.initialize(1.0)
    updater = FluxUpdater(grid, UniformVelocityField(grid, 0.5, 0.5))

    updater.computeRates(u)
    updater.integrate(u, 0.1)

    np.testing.assert_array_equal(u.field, 1.0)
