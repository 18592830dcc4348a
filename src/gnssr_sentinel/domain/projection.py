# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Projection of inertial and geodetic coordinates into scene space.

Scene space is the renderer's local Cartesian frame: +Y is "up" (Earth's
rotation axis), the globe sits at the origin, and one uniform scale
factor relates kilometers to scene units.

Inertial → scene axis mapping (a proper rotation, so lengths scale exactly):
    [x_scene]   [1  0  0] [x_eci]
    [y_scene] = [0  0  1] [y_eci]  × scale
    [z_scene]   [0 -1  0] [z_eci]

Geodetic → scene uses the spherical convention of the globe texture:
    phi   = 90° − lat                    (polar angle from +Y)
    theta = lon + 180° + AZIMUTH_OFFSET_DEG
    x = −r·sin(phi)·cos(theta)
    y =  r·cos(phi)
    z =  r·sin(phi)·sin(theta)

AZIMUTH_OFFSET_DEG is the quarter turn the globe texture is mounted with.
Any consumer placing markers must use the same constant.
"""
import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np


AZIMUTH_OFFSET_DEG = 90.0


@dataclass(frozen=True)
class ScenePosition:
    """A point in the renderer's local coordinate space (scene units)."""
    x: float
    y: float
    z: float

    @property
    def radius(self) -> float:
        """Distance from the scene origin (globe centre)."""
        return math.sqrt(self.x ** 2 + self.y ** 2 + self.z ** 2)

    def distance_to(self, other: "ScenePosition") -> float:
        return math.sqrt(
            (self.x - other.x) ** 2
            + (self.y - other.y) ** 2
            + (self.z - other.z) ** 2
        )

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def with_radius(self, radius: float) -> "ScenePosition":
        """
        Same direction from the origin, new distance from the origin.

        Raises:
            ValueError: If this position is the origin.
        """
        current = self.radius
        if current == 0.0:
            raise ValueError("Cannot rescale the origin to a radius")
        k = radius / current
        return ScenePosition(self.x * k, self.y * k, self.z * k)


@dataclass(frozen=True)
class GeodeticCoordinate:
    """A fixed point of interest on Earth's surface."""
    lat_deg: float
    lon_deg: float
    label: str = ""

    def __post_init__(self):
        if not (math.isfinite(self.lat_deg) and math.isfinite(self.lon_deg)):
            raise ValueError(
                f"Coordinates must be finite, got ({self.lat_deg}, {self.lon_deg})"
            )
        if not -90.0 <= self.lat_deg <= 90.0:
            raise ValueError(f"Latitude must be in [-90, 90], got {self.lat_deg}")
        if not -180.0 <= self.lon_deg <= 180.0:
            raise ValueError(f"Longitude must be in [-180, 180], got {self.lon_deg}")


def project_inertial(
    position: Sequence[float],
    scale: float,
) -> ScenePosition:
    """
    Map an inertial-frame position into scene space.

    Inertial Z becomes scene up (+Y); inertial Y becomes scene −Z.

    Args:
        position: (x, y, z) in the inertial frame (km).
        scale: Scene units per kilometer, including any cosmetic sub-scale.

    Returns:
        ScenePosition with |result| = scale × |position|.

    Raises:
        ValueError: If the position or scale is not finite.
    """
    x, y, z = float(position[0]), float(position[1]), float(position[2])
    if not all(math.isfinite(v) for v in (x, y, z, scale)):
        raise ValueError(f"Non-finite inertial position {position} or scale {scale}")
    return ScenePosition(x * scale, z * scale, -y * scale)


def project_inertial_array(positions: np.ndarray, scale: float) -> np.ndarray:
    """
    Vectorised project_inertial for an (N, 3) array of positions.

    Rows containing non-finite values are dropped.
    """
    positions = np.asarray(positions, dtype=float).reshape(-1, 3)
    finite = np.all(np.isfinite(positions), axis=1)
    kept = positions[finite]
    return np.column_stack((kept[:, 0], kept[:, 2], -kept[:, 1])) * scale


def project_geodetic(
    lat_deg: float,
    lon_deg: float,
    radius: float,
) -> ScenePosition:
    """
    Map a latitude/longitude on a sphere of the given radius into scene space.

    Args:
        lat_deg: Latitude in degrees [-90, 90].
        lon_deg: Longitude in degrees [-180, 180].
        radius: Sphere radius in scene units (globe or marker radius).

    Returns:
        ScenePosition at distance ``radius`` from the origin.
    """
    phi = math.radians(90.0 - lat_deg)
    theta = math.radians(lon_deg + 180.0 + AZIMUTH_OFFSET_DEG)

    x = -radius * math.sin(phi) * math.cos(theta)
    y = radius * math.cos(phi)
    z = radius * math.sin(phi) * math.sin(theta)
    return ScenePosition(x, y, z)


def project_coordinate(coordinate: GeodeticCoordinate, radius: float) -> ScenePosition:
    return project_geodetic(coordinate.lat_deg, coordinate.lon_deg, radius)


def scene_to_geodetic(position: ScenePosition) -> GeodeticCoordinate:
    """
    Inverse of project_geodetic: recover latitude/longitude of a scene vector.

    The radius is discarded. Longitude is normalised to [-180, 180);
    at the poles it is arbitrary.

    Raises:
        ValueError: If the position is the origin or not finite.
    """
    r = position.radius
    if not math.isfinite(r) or r == 0.0:
        raise ValueError(f"Cannot recover a direction from {position}")

    sin_lat = max(-1.0, min(1.0, position.y / r))
    lat_deg = math.degrees(math.asin(sin_lat))

    theta_deg = math.degrees(math.atan2(position.z, -position.x))
    lon_deg = (theta_deg - 180.0 - AZIMUTH_OFFSET_DEG + 180.0) % 360.0 - 180.0
    return GeodeticCoordinate(lat_deg, lon_deg)
