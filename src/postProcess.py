# postProcess.py
import matplotlib.pyplot as plt
import numpy as np

# ---------------------------------------------------------------------------
# Text output
# ---------------------------------------------------------------------------

def writeField(filename, x: np.ndarray, y: np.ndarray, u: np.ndarray) -> None:
    """
    Write one "x y u" line per cell, ghost cells included.

    Lines run with x as the outer and y as the inner index, matching the
    layout of u. Raises OSError if the file cannot be opened.
    """
    X, Y = np.meshgrid(x, y, indexing="ij")
    data = np.column_stack((X.ravel(), Y.ravel(), np.asarray(u).ravel()))
    np.savetxt(filename, data, fmt="%g %g %g")


# ---------------------------------------------------------------------------
# Plotting
# ---------------------------------------------------------------------------

class PostProcessor:
    """
    Handles visualization for an advection run.

    It takes an AdvectionSolver instance and draws contour plots of the
    transported field on the cell-centred grid.
    """

    def __init__(self, solver) -> None:
        self.solver = solver

    def _build_grid_for_field(self):
        """Cell-centred (X, Y) mesh matching the field layout u[i, j]."""
        return np.meshgrid(self.solver.grid.x, self.solver.grid.y, indexing="ij")

    def contour_u(self, filename=None, title=None) -> None:
        X, Y = self._build_grid_for_field()
        u = self.solver.u.field

        plt.figure()
        cs = plt.contourf(X, Y, u, levels=50, cmap="plasma")
        plt.colorbar(cs, label="u")
        if title is None:
            title = f"u after {self.solver.stepCount} steps (t = {self.solver.time:g})"
        plt.title(title)
        plt.xlabel("x")
        plt.ylabel("y")
        plt.axis("equal")
        plt.tight_layout()

        if filename is None:
            plt.show()
        else:
            plt.savefig(filename)
            plt.close()

    def velocity_profile(self, filename=None) -> None:
        """vx against height y for every grid line."""
        plt.figure()
        plt.plot(self.solver.velocity.vx, self.solver.grid.y)
        plt.title("x-velocity profile")
        plt.xlabel("vx")
        plt.ylabel("y")
        plt.tight_layout()

        if filename is None:
            plt.show()
        else:
            plt.savefig(filename)
            plt.close()
