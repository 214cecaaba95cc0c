# velocityField.py
import math

import numpy as np
from numba import njit, prange

from grid import Grid2D
from timeStep import maxAbs


@njit(parallel=True)
def logLawProfile(y: np.ndarray, frictionVelocity: float, roughnessLength: float,
                  vonKarman: float) -> np.ndarray:
    """vx(y) = (u*/kappa) ln(y/L0) above the roughness length, zero below it."""
    vx = np.empty(y.shape[0], dtype=np.float64)
    for j in prange(y.shape[0]):
        height = y[j]
        if height <= roughnessLength:
            vx[j] = 0.0
        else:
            vx[j] = (frictionVelocity / vonKarman) * math.log(height / roughnessLength)
    return vx


class BaseVelocityField:
    """
    Base class for velocity fields.

    vx holds one sample per grid line j = 0..Ny+1 and vy is a single constant.
    """

    def __init__(self, grid: Grid2D) -> None:
        self.grid = grid
        self.vx = np.zeros(grid.Ny + 2)
        self.vy = 0.0

    def initialize_field(self) -> None:
        """Fill vx and vy from the parameters stored by the subclass."""
        raise NotImplementedError("Subclasses should implement this method.")

    def _freeze(self) -> None:
        self.vx = np.ascontiguousarray(self.vx, dtype=np.float64)
        self.vx.flags.writeable = False

    def maxVx(self) -> float:
        """Maximum |vx| over every grid line."""
        return maxAbs(self.vx)

    def maxVy(self) -> float:
        return abs(self.vy)


class UniformVelocityField(BaseVelocityField):
    """Constant velocity vector everywhere on the grid."""

    def __init__(self, grid: Grid2D, vx: float, vy: float) -> None:
        super().__init__(grid)
        self.uniformVx = float(vx)
        self.vy = float(vy)

        self.initialize_field()
        self._freeze()

    def initialize_field(self) -> None:
        self.vx = np.full(self.grid.Ny + 2, self.uniformVx)


class LogProfileVelocityField(BaseVelocityField):
    """
    Logarithmic wind profile in x with a constant y component.

    When vy is exactly zero, vx follows the log law at every height y[j].
    Any other vy switches to vx = 1 on every grid line. That branch has no
    physical model behind it and is kept only to reproduce the reference
    results; a warning is printed when it is taken.
    """

    def __init__(
        self,
        grid: Grid2D,
        frictionVelocity: float = 0.2,
        roughnessLength: float = 1.0,
        vonKarman: float = 0.41,
        vy: float = 0.0,
    ) -> None:
        super().__init__(grid)
        self.frictionVelocity = frictionVelocity
        self.roughnessLength = roughnessLength
        self.vonKarman = vonKarman
        self.vy = float(vy)

        self.initialize_field()
        self._freeze()

    def initialize_field(self) -> None:
        if self.vy == 0.0:
            self.vx = logLawProfile(
                self.grid.y,
                self.frictionVelocity,
                self.roughnessLength,
                self.vonKarman,
            )
        else:
            print(
                f"WARNING: log profile with vy = {self.vy:g} is not defined, "
                "using vx = 1 on every grid line"
            )
            self.vx = np.ones(self.grid.Ny + 2)


def makeVelocityField(config, grid: Grid2D) -> BaseVelocityField:
    """Build the velocity field variant selected by an AdvectionConfig."""
    if config.velocity == "uniform":
        return UniformVelocityField(grid, config.vel_x, config.vel_y)
    if config.velocity == "profile":
        return LogProfileVelocityField(
            grid,
            frictionVelocity=config.friction_velocity,
            roughnessLength=config.roughness_length,
            vonKarman=config.von_karman,
            vy=config.vel_y,
        )
    raise ValueError("velocity must be 'uniform' or 'profile'")
