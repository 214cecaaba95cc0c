# timeStep.py
import numpy as np
from numba import njit, prange


@njit(parallel=True)
def maxAbs(values: np.ndarray) -> float:
    """Maximum |value| over a 1D array (parallel max reduction)."""
    largest = 0.0
    for i in prange(values.shape[0]):
        largest = max(largest, abs(values[i]))
    return largest


def cflTimeStep(Deltax: float, Deltay: float, cfl: float, maxVx: float, maxVy: float) -> float:
    """
    Time step from the CFL condition

        dt = CFL / (|maxVx| / dx + |maxVy| / dy)

    The CFL number is not range checked. A field that does not move in
    either direction has no finite stable step and is rejected.
    """
    rate = abs(maxVx) / Deltax + abs(maxVy) / Deltay
    if rate == 0.0:
        raise ValueError(
            "velocity is zero in both directions: the CFL time step is unbounded"
        )
    return cfl / rate
