# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Orbital constants and mean-motion relations.

Pure mathematical helpers shared by the element-set parser and the
orbit path sampler. No external dependencies beyond numpy.
"""
import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class _OrbitalConstants:
    """Standard orbital constants (IAU/WGS84 values)."""
    MU_EARTH: float = 3.986004418e14   # gravitational parameter (m³/s²)
    R_EARTH: float = 6_371_000          # mean radius (m)
    EARTH_ROTATION_RATE: float = 7.2921159e-5  # sidereal rotation rate (rad/s)
    # WGS84 ellipsoid
    R_EARTH_EQUATORIAL: float = 6_378_137.0       # semi-major axis (m)
    R_EARTH_POLAR: float = 6_356_752.3142         # semi-minor axis (m)
    FLATTENING: float = 1.0 / 298.257223563       # WGS84 flattening
    E_SQUARED: float = 0.00669437999014           # first eccentricity squared

    @property
    def R_EARTH_KM(self) -> float:
        return self.R_EARTH / 1000.0


OrbitalConstants: _OrbitalConstants = _OrbitalConstants()


def period_from_mean_motion(mean_motion_rev_per_day: float) -> float:
    """
    Orbital period in minutes for a mean motion in revolutions per day.

    Raises:
        ValueError: If mean motion is non-positive.
    """
    if mean_motion_rev_per_day <= 0:
        raise ValueError(
            f"Mean motion must be positive, got {mean_motion_rev_per_day}"
        )
    return 1440.0 / mean_motion_rev_per_day


def semi_major_axis_km(mean_motion_rev_per_day: float) -> float:
    """
    Semi-major axis from mean motion via Kepler's third law.

        n (rad/s) = mean_motion × 2π / 86400
        a = (μ / n²)^(1/3)

    Returns:
        Semi-major axis in kilometers.
    """
    if mean_motion_rev_per_day <= 0:
        raise ValueError(
            f"Mean motion must be positive, got {mean_motion_rev_per_day}"
        )
    n_rad_s = mean_motion_rev_per_day * 2.0 * np.pi / 86400.0
    a_m = (OrbitalConstants.MU_EARTH / (n_rad_s ** 2)) ** (1.0 / 3.0)
    return float(a_m) / 1000.0


def max_step_displacement_km(
    mean_motion_rev_per_day: float,
    eccentricity: float,
    step_seconds: float,
) -> float:
    """
    Upper bound on the distance a satellite can cover in one time step.

    Perigee speed from vis-viva times the step length.
    """
    a_m = semi_major_axis_km(mean_motion_rev_per_day) * 1000.0
    r_perigee = a_m * (1.0 - eccentricity)
    v_perigee = math.sqrt(OrbitalConstants.MU_EARTH * (2.0 / r_perigee - 1.0 / a_m))
    return v_perigee * abs(step_seconds) / 1000.0
