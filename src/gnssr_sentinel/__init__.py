# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
GNSS-R Sentinel geometry

Places satellites and surface markers on the dashboard globe. Parses a
static two-line element catalog, propagates it with SGP4, projects
inertial and geodetic coordinates into scene space at one uniform scale,
selects the satellites nearest to a selected target for signal links,
and precomputes orbit paths for the current epoch window.
"""

__version__ = "0.3.0"

from gnssr_sentinel.domain.tle import (
    MalformedElementSet,
    OrbitalElementSet,
    parse_element_set,
    tle_checksum,
)
from gnssr_sentinel.domain.catalog import (
    POINTS_OF_INTEREST,
    default_catalog,
    find_point_of_interest,
    load_catalog,
)
from gnssr_sentinel.domain.propagation import (
    PropagatedState,
    PropagationFailure,
    propagate_catalog,
    propagate_catalog_outcomes,
)
from gnssr_sentinel.domain.projection import (
    AZIMUTH_OFFSET_DEG,
    GeodeticCoordinate,
    ScenePosition,
    project_geodetic,
    project_inertial,
    scene_to_geodetic,
)
from gnssr_sentinel.domain.scene_config import DEFAULT_SCENE_CONFIG, SceneConfig
from gnssr_sentinel.domain.signal_links import (
    SignalLink,
    apply_visual_override,
    build_signal_links,
    select_nearest,
)
from gnssr_sentinel.domain.orbit_paths import (
    OrbitPath,
    compute_orbit_path,
    compute_orbit_paths,
    epoch_window_start,
)
from gnssr_sentinel.domain.frame import FrameSnapshot, SatelliteView, compute_frame

__all__ = [
    "MalformedElementSet",
    "OrbitalElementSet",
    "parse_element_set",
    "tle_checksum",
    "POINTS_OF_INTEREST",
    "default_catalog",
    "find_point_of_interest",
    "load_catalog",
    "PropagatedState",
    "PropagationFailure",
    "propagate_catalog",
    "propagate_catalog_outcomes",
    "AZIMUTH_OFFSET_DEG",
    "GeodeticCoordinate",
    "ScenePosition",
    "project_geodetic",
    "project_inertial",
    "scene_to_geodetic",
    "DEFAULT_SCENE_CONFIG",
    "SceneConfig",
    "SignalLink",
    "apply_visual_override",
    "build_signal_links",
    "select_nearest",
    "OrbitPath",
    "compute_orbit_path",
    "compute_orbit_paths",
    "epoch_window_start",
    "FrameSnapshot",
    "SatelliteView",
    "compute_frame",
]
