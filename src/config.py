# config.py
import dataclasses
from dataclasses import dataclass
from typing import Tuple


VELOCITY_VARIANTS = ("uniform", "profile")


@dataclass(frozen=True)
class AdvectionConfig:
    """
    All parameters of one advection run.

    Points are (x, y) tuples. The velocity variant is either "uniform"
    (constant vel_x, vel_y) or "profile" (log-law wind in x, constant vel_y).
    """

    # Grid
    Nx: int = 1000
    Ny: int = 1000
    min_point: Tuple[float, float] = (0.0, 0.0)
    max_point: Tuple[float, float] = (30.0, 30.0)

    # Gaussian initial condition
    centre: Tuple[float, float] = (3.0, 15.0)
    width: Tuple[float, float] = (1.0, 5.0)

    # Dirichlet boundary values
    bound_left: float = 0.0
    bound_right: float = 0.0
    bound_lower: float = 0.0
    bound_upper: float = 0.0

    # Time stepping
    cfl: float = 0.9
    num_steps: int = 800

    # Velocity
    velocity: str = "profile"
    vel_x: float = 0.0
    vel_y: float = 0.0
    friction_velocity: float = 0.2
    roughness_length: float = 1.0
    von_karman: float = 0.41

    def replace(self, **changes) -> "AdvectionConfig":
        return dataclasses.replace(self, **changes)

    def validate(self) -> "AdvectionConfig":
        if self.Nx <= 0 or self.Ny <= 0:
            raise ValueError(f"grid resolution must be positive, got ({self.Nx}, {self.Ny})")
        if self.max_point[0] <= self.min_point[0] or self.max_point[1] <= self.min_point[1]:
            raise ValueError(f"empty domain {self.min_point} -> {self.max_point}")
        if self.width[0] <= 0.0 or self.width[1] <= 0.0:
            raise ValueError(f"Gaussian width must be positive, got {self.width}")
        if self.num_steps < 0:
            raise ValueError(f"num_steps must be >= 0, got {self.num_steps}")
        if self.velocity not in VELOCITY_VARIANTS:
            raise ValueError(
                f"velocity must be one of {VELOCITY_VARIANTS}, got '{self.velocity}'"
            )
        return self


# ---------------------------------------------------------------------------
# Reference cases
# ---------------------------------------------------------------------------

# Gaussian advected diagonally at a fixed velocity
UNIFORM_CASE = AdvectionConfig(
    Nx=1000,
    Ny=1000,
    min_point=(0.0, 0.0),
    max_point=(1.0, 1.0),
    centre=(0.1, 0.1),
    width=(0.03, 0.03),
    cfl=0.9,
    num_steps=1500,
    velocity="uniform",
    vel_x=0.01,
    vel_y=0.01,
)

# Gaussian advected by a logarithmic boundary-layer wind
LOG_PROFILE_CASE = AdvectionConfig()
