# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Nearest-satellite selection and signal links to a surface target.

The catalog is small (tens of entries), so selection is a stable sort
over Euclidean scene distance. Ties keep catalog order.

Visual override (presentation only, applied to the rendered copy):
    rank 0 (receiver)    → moved to the receiver radius, direction kept
    rank 1 (transmitter) → raised to the transmitter floor radius if below it
"""
from dataclasses import dataclass
from typing import Hashable, Iterable, TypeVar

from .projection import ScenePosition
from .scene_config import DEFAULT_SCENE_CONFIG, SceneConfig


K = TypeVar("K", bound=Hashable)

ROLE_RECEIVER = "receiver"
ROLE_TRANSMITTER = "transmitter"


@dataclass(frozen=True)
class SignalLink:
    """A rendered line between one selected satellite and the target."""
    satellite_name: str
    rank: int
    role: str
    satellite_position: ScenePosition
    rendered_position: ScenePosition
    target_position: ScenePosition
    distance: float


def select_nearest(
    target: ScenePosition,
    candidates: Iterable[tuple[K, ScenePosition | None]],
    count: int = 2,
) -> list[tuple[K, ScenePosition, float]]:
    """
    Select the satellites closest to a target.

    Args:
        target: Target position in scene space.
        candidates: (key, position) pairs in catalog order; a None
            position marks a satellite that failed to propagate.
        count: Maximum number of satellites to return.

    Returns:
        Up to ``count`` (key, position, distance) triples in ascending
        distance order. Empty when no candidate has a position.
    """
    if count <= 0:
        return []
    ranked = [
        (key, position, target.distance_to(position))
        for key, position in candidates
        if position is not None
    ]
    ranked.sort(key=lambda entry: entry[2])
    return ranked[:count]


def link_role(rank: int) -> str:
    return ROLE_RECEIVER if rank == 0 else ROLE_TRANSMITTER


def apply_visual_override(
    rank: int,
    position: ScenePosition,
    config: SceneConfig = DEFAULT_SCENE_CONFIG,
) -> ScenePosition:
    """
    Presentation-only repositioning of a selected satellite.

    Only the distance from the globe centre changes; the direction is
    preserved. The input position is never modified.

    Args:
        rank: 0 for the nearest satellite, 1 for the second nearest.
        position: True scene position.
        config: Scene configuration with the override radii.

    Returns:
        The position to draw.
    """
    if position.radius == 0.0:
        return position
    if rank == 0:
        return position.with_radius(config.receiver_radius)
    if rank == 1 and position.radius < config.transmitter_floor_radius:
        return position.with_radius(config.transmitter_floor_radius)
    return position


def build_signal_links(
    target: ScenePosition,
    satellites: Iterable[tuple[str, ScenePosition | None]],
    config: SceneConfig = DEFAULT_SCENE_CONFIG,
) -> tuple[SignalLink, ...]:
    """
    Select the nearest satellites and build their links to the target.

    Args:
        target: Target marker position in scene space.
        satellites: (name, position) pairs in catalog order.
        config: Scene configuration (link count and override radii).

    Returns:
        Zero to ``config.max_links`` links, nearest first.
    """
    nearest = select_nearest(target, satellites, count=config.max_links)
    return tuple(
        SignalLink(
            satellite_name=name,
            rank=rank,
            role=link_role(rank),
            satellite_position=position,
            rendered_position=apply_visual_override(rank, position, config),
            target_position=target,
            distance=distance,
        )
        for rank, (name, position, distance) in enumerate(nearest)
    )
