#!/usr/bin/env python3
import os
import sys

from config import AdvectionConfig, LOG_PROFILE_CASE
from fluxUpdate import FluxUpdater
from grid import Grid2D
from initialCondition import GaussianInitialCondition
from postProcess import writeField
from timeStep import cflTimeStep
from variable import variable
from velocityField import makeVelocityField


debugging = False


# ---------------------------------------------------------------------------
# Explicit upwind solver for 2D linear advection
# ---------------------------------------------------------------------------

class AdvectionSolver:
    """
    Forward Euler / first-order upwind solver for du/dt + v . grad(u) = 0.

    Responsibilities:
    - Owns grid, velocity field and the transported field u.
    - Computes the CFL time step once, before the time loop.
    - Performs the time loop: boundary conditions, rates, update.

    The solver moves through the states "initialized" -> "stepping" ->
    "completed"; a run always takes exactly config.num_steps steps.
    """

    def __init__(self, config: AdvectionConfig) -> None:
        self.config = config.validate()

        # Grid and velocity
        self.grid = Grid2D(config.Nx, config.Ny, config.min_point, config.max_point)
        self.velocity = makeVelocityField(config, self.grid)

        # Transported field with its Dirichlet values
        self.u = variable(
            "u",
            config.Nx,
            config.Ny,
            top=config.bound_upper,
            bottom=config.bound_lower,
            left=config.bound_left,
            right=config.bound_right,
        )

        self.fluxUpdater = FluxUpdater(self.grid, self.velocity)
        self.initialCondition = GaussianInitialCondition(config.centre, config.width)

        self.dt = cflTimeStep(
            self.grid.Deltax,
            self.grid.Deltay,
            config.cfl,
            self.velocity.maxVx(),
            self.velocity.maxVy(),
        )
        self.numSteps = config.num_steps

        self.initialize()

    def initialize(self) -> None:
        """Fill u with the Gaussian and rewind the step counter."""
        self.initialCondition.apply(self.u, self.grid.x, self.grid.y)
        self.stepCount = 0
        self.state = "initialized"

    # ------------------------------------------------------------------
    # Derived quantities
    # ------------------------------------------------------------------
    @property
    def time(self) -> float:
        return self.stepCount * self.dt

    @property
    def endTime(self) -> float:
        return self.numSteps * self.dt

    @property
    def distanceAdvected(self):
        """Distance travelled in (x, y) at the fastest speed by the end time."""
        return (
            self.velocity.maxVx() * self.endTime,
            self.velocity.maxVy() * self.endTime,
        )

    def report(self) -> None:
        distX, distY = self.distanceAdvected
        print(f"Grid spacing x      = {self.grid.Deltax:g}")
        print(f"Grid spacing y      = {self.grid.Deltay:g}")
        print(f"CFL number          = {self.config.cfl:g}")
        print(f"Time step           = {self.dt:g}")
        print(f"No. of time steps   = {self.numSteps}")
        print(f"End time            = {self.endTime:g}")
        print(f"Distance advected x = {distX:g}")
        print(f"Distance advected y = {distY:g}")

    # ------------------------------------------------------------------
    # Time loop
    # ------------------------------------------------------------------
    def step(self) -> None:
        if self.stepCount >= self.numSteps:
            raise RuntimeError(f"all {self.numSteps} time steps have already been taken")

        self.state = "stepping"

        self.u.applyBoundaryConditions()
        self.fluxUpdater.computeRates(self.u)
        self.fluxUpdater.integrate(self.u, self.dt)

        self.stepCount += 1

        if debugging:
            print(f"Step {self.stepCount}: t = {self.time:g}")

        if self.stepCount == self.numSteps:
            self._complete()

    def _complete(self) -> None:
        # Integration never writes the ghost layer, so after at least one
        # step this leaves u unchanged; with no steps it sets the boundaries.
        self.u.applyBoundaryConditions()
        self.state = "completed"

    def run(self, verbose: bool = False) -> int:
        """Take the remaining time steps and return the number taken in total."""
        if self.state == "completed":
            return self.stepCount

        while self.stepCount < self.numSteps:
            self.step()
            if verbose and self.stepCount % 100 == 0:
                print(f"Step {self.stepCount} of {self.numSteps}")

        if self.state != "completed":
            self._complete()

        if verbose:
            print(f"Completed {self.stepCount} steps, t = {self.time:g}")
        return self.stepCount


# ---------------------------------------------------------------------------
# Batch run
# ---------------------------------------------------------------------------

def main(config: AdvectionConfig = LOG_PROFILE_CASE, outputDir: str = ".") -> int:
    """Run one case and write initial.dat and final.dat to outputDir."""
    solver = AdvectionSolver(config)
    solver.report()

    x = solver.grid.x
    y = solver.grid.y

    try:
        writeField(os.path.join(outputDir, "initial.dat"), x, y, solver.u.field)
    except OSError:
        print("\nError cannot open file initial.dat")
        return 1

    solver.run()

    try:
        writeField(os.path.join(outputDir, "final.dat"), x, y, solver.u.field)
    except OSError:
        print("\nError cannot open file final.dat")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
