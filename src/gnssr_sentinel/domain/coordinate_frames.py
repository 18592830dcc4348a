# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Coordinate frame conversions.

Pure mathematical transformations between ECI, ECEF, and Geodetic frames,
in kilometers. No external dependencies; stdlib math/datetime only.

Reference frames:
    ECI:      Earth-Centered Inertial (non-rotating; SGP4 TEME used as-is)
    ECEF:     Earth-Centered Earth-Fixed (rotating with Earth)
    Geodetic: Latitude, Longitude, Altitude (WGS84 ellipsoid)

The ECI→ECEF rotation is a simple Z-axis rotation by the Greenwich
Mean Sidereal Time (GMST) angle. ECEF→Geodetic uses the iterative
Bowring method on the WGS84 ellipsoid.
"""
import math
from datetime import datetime, timezone

from .orbital_mechanics import OrbitalConstants


def gmst_rad(epoch: datetime) -> float:
    """
    Compute Greenwich Mean Sidereal Time for a given UTC epoch.

    Uses the IAU formula based on Julian centuries from J2000.0:
        GMST(°) = 280.46061837 + 360.98564736629 * (JD - 2451545.0)
                  + 0.000387933 * T² - T³/38710000

    Args:
        epoch: UTC datetime.

    Returns:
        GMST in radians, normalized to [0, 2π).
    """
    if epoch.tzinfo is None:
        epoch = epoch.replace(tzinfo=timezone.utc)

    j2000 = datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
    delta = epoch - j2000
    jd_since_j2000 = delta.total_seconds() / 86400.0
    t_centuries = jd_since_j2000 / 36525.0

    gmst_deg = (
        280.46061837
        + 360.98564736629 * jd_since_j2000
        + 0.000387933 * t_centuries**2
        - t_centuries**3 / 38710000.0
    )

    gmst_deg = gmst_deg % 360.0
    if gmst_deg < 0:
        gmst_deg += 360.0

    return math.radians(gmst_deg)


def eci_to_ecef(
    pos_eci: tuple[float, float, float],
    gmst_angle_rad: float,
) -> tuple[float, float, float]:
    """
    Rotate an ECI position into ECEF via Z-axis rotation by GMST.

    The rotation matrix R_z(-θ) rotates from inertial to Earth-fixed:
        [x_ecef]   [ cos(θ)  sin(θ)  0] [x_eci]
        [y_ecef] = [-sin(θ)  cos(θ)  0] [y_eci]
        [z_ecef]   [   0       0     1] [z_eci]

    Args:
        pos_eci: Position in ECI frame (x, y, z), any length unit.
        gmst_angle_rad: GMST angle in radians (from gmst_rad()).

    Returns:
        Position in ECEF frame, same unit.
    """
    cos_t = math.cos(gmst_angle_rad)
    sin_t = math.sin(gmst_angle_rad)

    return (
        cos_t * pos_eci[0] + sin_t * pos_eci[1],
        -sin_t * pos_eci[0] + cos_t * pos_eci[1],
        pos_eci[2],
    )


def eci_to_globe_frame(
    pos_eci: tuple[float, float, float],
    epoch: datetime,
    azimuth_offset_deg: float,
) -> tuple[float, float, float]:
    """
    Rotate an ECI position into the frame of the textured globe.

    That is ECEF followed by the globe's azimuth offset about Z, so that
    projecting the result lines up with markers placed by project_geodetic.
    """
    return eci_to_ecef(pos_eci, gmst_rad(epoch) - math.radians(azimuth_offset_deg))


def ecef_to_geodetic(
    pos_ecef_km: tuple[float, float, float],
) -> tuple[float, float, float]:
    """
    Convert ECEF position to geodetic coordinates (WGS84 ellipsoid).

    Uses the iterative Bowring method for latitude convergence.

    Args:
        pos_ecef_km: Position in ECEF frame (x, y, z) in kilometers.

    Returns:
        (latitude_deg, longitude_deg, altitude_km)
        Latitude in [-90, 90], longitude in (-180, 180].
    """
    c = OrbitalConstants
    a = c.R_EARTH_EQUATORIAL / 1000.0
    b = c.R_EARTH_POLAR / 1000.0
    e2 = c.E_SQUARED

    x, y, z = pos_ecef_km
    p = math.sqrt(x**2 + y**2)

    # Longitude
    lon_rad = math.atan2(y, x)

    # Iterative Bowring method for latitude
    # Initial estimate using spherical approximation
    lat_rad = math.atan2(z, p * (1.0 - e2))

    for _ in range(10):
        sin_lat = math.sin(lat_rad)
        n = a / math.sqrt(1.0 - e2 * sin_lat**2)
        lat_rad = math.atan2(z + e2 * n * sin_lat, p)

    # Altitude
    sin_lat = math.sin(lat_rad)
    cos_lat = math.cos(lat_rad)
    n = a / math.sqrt(1.0 - e2 * sin_lat**2)

    if abs(cos_lat) > 1e-10:
        alt = p / cos_lat - n
    else:
        alt = abs(z) - b

    return math.degrees(lat_rad), math.degrees(lon_rad), alt
