# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Static orbit paths for the current epoch window.

Each path is one orbital period sampled from the window start and
projected with the same satellite scale as the per-frame markers. Paths
only change when the epoch window changes.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Sequence

import numpy as np

from .coordinate_frames import eci_to_globe_frame
from .projection import AZIMUTH_OFFSET_DEG, ScenePosition, project_inertial_array
from .propagation import as_utc
from .scene_config import DEFAULT_SCENE_CONFIG, SceneConfig
from .tle import OrbitalElementSet

if TYPE_CHECKING:
    from gnssr_sentinel.ports.propagation import OrbitPropagator


_log = logging.getLogger(__name__)

DEFAULT_EPOCH_WINDOW = timedelta(hours=1)


@dataclass(frozen=True)
class OrbitPath:
    """Scene-space polyline of one satellite's orbit."""
    name: str
    start: datetime
    period_minutes: float
    points: tuple[ScenePosition, ...]


def epoch_window_start(
    epoch: datetime,
    window: timedelta = DEFAULT_EPOCH_WINDOW,
) -> datetime:
    """
    Floor an instant to the start of its epoch window.

    Raises:
        ValueError: If window is zero or negative.
    """
    window_seconds = window.total_seconds()
    if window_seconds <= 0:
        raise ValueError(f"Window must be positive, got {window}")
    epoch = as_utc(epoch)
    origin = datetime(1970, 1, 1, tzinfo=timezone.utc)
    elapsed = (epoch - origin).total_seconds()
    return origin + timedelta(seconds=(elapsed // window_seconds) * window_seconds)


def orbit_sample_epochs(
    elements: OrbitalElementSet,
    start: datetime,
    points: int,
) -> list[datetime]:
    """
    Instants evenly spread over one orbital period, starting at ``start``.

    The last sample lands exactly one period later, closing the loop.

    Raises:
        ValueError: If points < 2.
    """
    if points < 2:
        raise ValueError(f"Need at least 2 points per path, got {points}")
    start = as_utc(start)
    period_s = elements.period_minutes * 60.0
    offsets = np.linspace(0.0, period_s, points)
    return [start + timedelta(seconds=float(s)) for s in offsets]


def compute_orbit_path(
    elements: OrbitalElementSet,
    propagator: "OrbitPropagator",
    start: datetime,
    config: SceneConfig = DEFAULT_SCENE_CONFIG,
) -> OrbitPath:
    """
    Sample and project one orbit period.

    Failed samples are dropped from the polyline, so a path may be
    shorter than ``config.orbit_path_points`` or empty.
    """
    epochs = orbit_sample_epochs(elements, start, config.orbit_path_points)
    states = propagator.sample(elements, epochs)

    rows = []
    for state in states:
        if state is None:
            continue
        position = state.position_km
        if config.earth_fixed:
            position = eci_to_globe_frame(position, state.epoch, AZIMUTH_OFFSET_DEG)
        rows.append(position)

    failed = len(states) - len(rows)
    if failed:
        _log.warning(
            "%s: %d of %d orbit path samples failed", elements.name, failed, len(states)
        )

    if rows:
        projected = project_inertial_array(np.array(rows), config.satellite_scale)
        points = tuple(ScenePosition(float(x), float(y), float(z)) for x, y, z in projected)
    else:
        points = ()

    return OrbitPath(
        name=elements.name,
        start=as_utc(start),
        period_minutes=elements.period_minutes,
        points=points,
    )


def compute_orbit_paths(
    catalog: Sequence[OrbitalElementSet],
    propagator: "OrbitPropagator",
    start: datetime,
    config: SceneConfig = DEFAULT_SCENE_CONFIG,
) -> list[OrbitPath]:
    """One orbit path per catalog entry, in catalog order."""
    return [compute_orbit_path(elements, propagator, start, config) for elements in catalog]
