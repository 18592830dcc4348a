# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Scene presentation constants.

Visual-only distances and altitude overrides used when placing
satellites and markers on the globe. None of these carry physical
meaning; they are tuned for on-screen legibility and kept configurable.
"""
import math
from dataclasses import dataclass, fields
from typing import Any

from .orbital_mechanics import OrbitalConstants


@dataclass(frozen=True)
class SceneConfig:
    """Immutable scene configuration."""
    globe_radius: float = 2.0
    earth_radius_km: float = OrbitalConstants.R_EARTH_KM
    satellite_altitude_compression: float = 0.6
    marker_radius_ratio: float = 1.025
    receiver_radius_ratio: float = 1.25
    transmitter_floor_ratio: float = 3.5
    max_links: int = 2
    orbit_path_points: int = 128
    earth_fixed: bool = False

    def __post_init__(self):
        for name in (
            "globe_radius",
            "earth_radius_km",
            "satellite_altitude_compression",
            "marker_radius_ratio",
            "receiver_radius_ratio",
            "transmitter_floor_ratio",
        ):
            value = getattr(self, name)
            if not (math.isfinite(value) and value > 0):
                raise ValueError(f"{name} must be positive and finite, got {value}")
        if self.max_links < 0:
            raise ValueError(f"max_links must be non-negative, got {self.max_links}")
        if self.orbit_path_points < 2:
            raise ValueError(
                f"orbit_path_points must be at least 2, got {self.orbit_path_points}"
            )

    @property
    def distance_scale(self) -> float:
        """Scene units per kilometer: Earth's true radius maps to the globe."""
        return self.globe_radius / self.earth_radius_km

    @property
    def satellite_scale(self) -> float:
        """Scale for satellites, with the cosmetic altitude compression."""
        return self.distance_scale * self.satellite_altitude_compression

    @property
    def marker_radius(self) -> float:
        """Surface markers sit slightly above the globe mesh."""
        return self.globe_radius * self.marker_radius_ratio

    @property
    def receiver_radius(self) -> float:
        return self.globe_radius * self.receiver_radius_ratio

    @property
    def transmitter_floor_radius(self) -> float:
        return self.globe_radius * self.transmitter_floor_ratio

    @classmethod
    def from_mapping(cls, values: dict[str, Any]) -> "SceneConfig":
        """
        Build a config from a dict of overrides on top of the defaults.

        Raises:
            ValueError: On unknown keys or invalid values.
        """
        known = {f.name: f for f in fields(cls)}
        unknown = sorted(set(values) - set(known))
        if unknown:
            raise ValueError(f"Unknown scene config keys: {', '.join(unknown)}")

        kwargs: dict[str, Any] = {}
        for key, value in values.items():
            default = known[key].default
            if isinstance(default, bool):
                if not isinstance(value, bool):
                    raise ValueError(f"{key} must be a boolean, got {value!r}")
                kwargs[key] = value
            elif isinstance(default, int):
                if isinstance(value, bool) or not isinstance(value, int):
                    raise ValueError(f"{key} must be an integer, got {value!r}")
                kwargs[key] = value
            else:
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise ValueError(f"{key} must be a number, got {value!r}")
                kwargs[key] = float(value)
        return cls(**kwargs)


DEFAULT_SCENE_CONFIG = SceneConfig()
