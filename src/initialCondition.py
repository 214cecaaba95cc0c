# initialCondition.py
import math

import numpy as np
from numba import njit, prange

from variable import variable


@njit(parallel=True)
def gaussian(u, x, y, cx, cy, wx, wy):
    """
    u[i, j] = exp(-((x[i]-cx)^2 / (2 wx^2) + (y[j]-cy)^2 / (2 wy^2)))

    Every cell is written, ghost cells included.
    """
    wxSq = wx * wx
    wySq = wy * wy
    for i in prange(x.shape[0]):
        coordSqX = (x[i] - cx) * (x[i] - cx)
        for j in range(y.shape[0]):
            coordSqY = (y[j] - cy) * (y[j] - cy)
            u[i, j] = math.exp(-1.0 * ((coordSqX / (2.0 * wxSq)) + (coordSqY / (2.0 * wySq))))


class GaussianInitialCondition:
    """2D Gaussian bump with centre (cx, cy) and widths (wx, wy)."""

    def __init__(self, centre, width) -> None:
        self.centre = (float(centre[0]), float(centre[1]))
        self.width = (float(width[0]), float(width[1]))

    def apply(self, field: variable, x: np.ndarray, y: np.ndarray) -> None:
        gaussian(
            field.field,
            x,
            y,
            self.centre[0],
            self.centre[1],
            self.width[0],
            self.width[1],
        )
