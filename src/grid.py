# grid.py
import numpy as np
from numba import njit, prange


@njit(parallel=True)
def cellCentres(n: int, spacing: float) -> np.ndarray:
    """Cell-centred coordinates for n cells plus one ghost slot at each end."""
    coord = np.empty(n + 2, dtype=np.float64)
    for i in prange(n + 2):
        coord[i] = (i - 0.5) * spacing
    return coord


class Grid2D:
    """
    Simple 2D uniform grid with one ghost layer on each side.

    It stores the number of interior cells (Nx, Ny), the domain corners and
    the cell-centred coordinates x[0..Nx+1], y[0..Ny+1]. Index 0 and N+1 are
    the ghost/boundary positions and lie outside the physical domain.
    """
    def __init__(self, Nx: int, Ny: int, minPoint=(0.0, 0.0), maxPoint=(1.0, 1.0)) -> None:
        self.Nx = Nx
        self.Ny = Ny
        self.minPoint = (float(minPoint[0]), float(minPoint[1]))
        self.maxPoint = (float(maxPoint[0]), float(maxPoint[1]))

        self.Lx = self.maxPoint[0] - self.minPoint[0]
        self.Ly = self.maxPoint[1] - self.minPoint[1]

        self.Deltax = self.Lx / Nx
        self.Deltay = self.Ly / Ny

        # Points sit in the middle of the cell, measured from the origin
        self.x = cellCentres(Nx, self.Deltax)
        self.y = cellCentres(Ny, self.Deltay)
        self.x.flags.writeable = False
        self.y.flags.writeable = False

    @property
    def shape(self):
        """Shape of a field on this grid, ghost cells included."""
        return (self.Nx + 2, self.Ny + 2)
