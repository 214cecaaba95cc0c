import numpy as np

from advection import AdvectionSolver
from grid import Grid2D
from postProcess import PostProcessor, writeField


def test_write_field_one_line_per_cell_x_outer(tmp_path):
    grid = Grid2D(3, 2, (0.0, 0.0), (3.0, 2.0))
    u = np.arange(20, dtype=float).reshape(5, 4) / 8.0
    filename = tmp_path / "field.dat"

    writeField(filename, grid.x, grid.y, u)

    lines = filename.read_text().splitlines()
    assert len(lines) == 20
    assert lines[0] == "%g %g %g" % (grid.x[0], grid.y[0], u[0, 0])
    assert lines[1] == "%g %g %g" % (grid.x[0], grid.y[1], u[0, 1])
    assert lines[4] == "%g %g %g" % (grid.x[1], grid.y[0], u[1, 0])
    assert lines[-1] == "%g %g %g" % (grid.x[4], grid.y[3], u[4, 3])


def test_write_field_round_trips_through_loadtxt(tmp_path):
    grid = Grid2D(6, 5, (0.0, 0.0), (1.0, 1.0))
    u = np.linspace(0.0, 1.0, 56).reshape(8, 7)
    filename = tmp_path / "field.dat"

    writeField(filename, grid.x, grid.y, u)

    data = np.loadtxt(filename)
    X, Y = np.meshgrid(grid.x, grid.y, indexing="ij")
    np.testing.assert_allclose(data[:, 0], X.ravel(), rtol=1e-5)
    np.testing.assert_allclose(data[:, 1], Y.ravel(), rtol=1e-5)
    np.testing.assert_allclose(data[:, 2], u.ravel(), rtol=1e-5, atol=1e-6)


def test_contour_and_profile_are_saved(tmp_path, smallProfile):
    solver = AdvectionSolver(smallProfile)
    solver.run()
    post = PostProcessor(solver)

    post.contour_u(tmp_path / "u.png")
    post.velocity_profile(tmp_path / "vx.png")

    assert (tmp_path / "u.png").stat().st_size > 0
    assert (tmp_path / "vx.png").stat().st_size > 0
