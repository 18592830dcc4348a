# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Per-frame composition of satellite and target geometry.

Everything is recomputed from scratch for each frame: propagate every
catalog entry, project the available states, project the selected
target, and build the signal links. Nothing is carried between frames.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Sequence

from .coordinate_frames import eci_to_globe_frame
from .projection import (
    AZIMUTH_OFFSET_DEG,
    GeodeticCoordinate,
    ScenePosition,
    project_coordinate,
    project_inertial,
)
from .propagation import PropagatedState, as_utc, propagate_catalog_outcomes
from .scene_config import DEFAULT_SCENE_CONFIG, SceneConfig
from .signal_links import SignalLink, build_signal_links
from .tle import OrbitalElementSet

if TYPE_CHECKING:
    from gnssr_sentinel.ports.propagation import OrbitPropagator


@dataclass(frozen=True)
class SatelliteView:
    """One catalog entry as seen in one frame."""
    elements: OrbitalElementSet
    state: PropagatedState | None
    position: ScenePosition | None
    failure: str | None = None

    @property
    def name(self) -> str:
        return self.elements.name

    @property
    def available(self) -> bool:
        return self.position is not None


@dataclass(frozen=True)
class FrameSnapshot:
    """Everything the presentation layer needs for one rendered frame."""
    epoch: datetime
    satellites: tuple[SatelliteView, ...]
    target: GeodeticCoordinate | None
    target_position: ScenePosition | None
    links: tuple[SignalLink, ...]

    @property
    def visible(self) -> tuple[SatelliteView, ...]:
        return tuple(view for view in self.satellites if view.available)


def satellite_scene_position(
    state: PropagatedState,
    config: SceneConfig = DEFAULT_SCENE_CONFIG,
) -> ScenePosition:
    """Project one propagated state with the shared satellite scale."""
    position = state.position_km
    if config.earth_fixed:
        position = eci_to_globe_frame(position, state.epoch, AZIMUTH_OFFSET_DEG)
    return project_inertial(position, config.satellite_scale)


def compute_frame(
    catalog: Sequence[OrbitalElementSet],
    propagator: "OrbitPropagator",
    epoch: datetime,
    target: GeodeticCoordinate | None = None,
    config: SceneConfig = DEFAULT_SCENE_CONFIG,
) -> FrameSnapshot:
    """
    Compute the geometry of one rendered frame.

    Args:
        catalog: Element sets in catalog order.
        propagator: An OrbitPropagator.
        epoch: UTC instant of the frame.
        target: Currently selected surface target, if any.
        config: Scene configuration.

    Returns:
        FrameSnapshot with one SatelliteView per catalog entry. Satellites
        that failed to propagate have no position, carry the failure
        reason and take no part in link selection.
    """
    epoch = as_utc(epoch)
    outcomes = propagate_catalog_outcomes(catalog, propagator, epoch)

    views = tuple(
        SatelliteView(
            elements=elements,
            state=state,
            position=satellite_scene_position(state, config) if state is not None else None,
            failure=failure,
        )
        for elements, (state, failure) in zip(catalog, outcomes)
    )

    target_position = None
    links: tuple[SignalLink, ...] = ()
    if target is not None:
        target_position = project_coordinate(target, config.marker_radius)
        links = build_signal_links(
            target_position,
            [(view.name, view.position) for view in views],
            config,
        )

    return FrameSnapshot(
        epoch=epoch,
        satellites=views,
        target=target,
        target_position=target_position,
        links=links,
    )
