# fluxUpdate.py
import numpy as np
from numba import njit, prange

from grid import Grid2D
from variable import variable
from velocityField import BaseVelocityField


debugging = False


# ---------------------------------------------------------------------------
# Kernels
# ---------------------------------------------------------------------------

@njit(parallel=True)
def upwindRates(u, dudt, vx, vy, dx, dy, nx, ny):
    """Backward (upwind for vx, vy >= 0) differences on interior cells."""
    for i in prange(1, nx + 1):
        for j in range(1, ny + 1):
            dudt[i, j] = -((vx[j] * ((u[i, j] - u[i - 1, j]) / dx))
                           + (vy * ((u[i, j] - u[i, j - 1]) / dy)))


@njit(parallel=True)
def eulerUpdate(u, dudt, dt, nx, ny):
    for i in prange(1, nx + 1):
        for j in range(1, ny + 1):
            u[i, j] += dudt[i, j] * dt


class FluxUpdater:
    """
    First-order upwind flux and forward Euler update for a 'variable' field.

    Responsibilities:
    - own the rate-of-change buffer dudt
    - compute dudt from the current (boundary-enforced) field
    - advance the interior of the field by dudt * dt

    computeRates() must return before integrate() is called; each is a
    single parallel kernel so the call boundary is the synchronisation point.
    The scheme is only upwind for non-negative velocity components.
    """

    def __init__(self, grid: Grid2D, velocity: BaseVelocityField) -> None:
        self.grid = grid
        self.velocity = velocity
        self.Nx = grid.Nx
        self.Ny = grid.Ny

        self.dudt = np.zeros(grid.shape)

    def computeRates(self, u: variable) -> np.ndarray:
        upwindRates(
            u.field,
            self.dudt,
            self.velocity.vx,
            self.velocity.vy,
            self.grid.Deltax,
            self.grid.Deltay,
            self.Nx,
            self.Ny,
        )

        if debugging:
            print(f"max |du/dt| for {u.name}: {np.abs(self.dudt).max():.3e}")

        return self.dudt

    def integrate(self, u: variable, dt: float) -> None:
        eulerUpdate(u.field, self.dudt, dt, self.Nx, self.Ny)
