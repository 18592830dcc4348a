# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Propagated satellite state and catalog-wide propagation.

A PropagatedState is valid for exactly one instant and is recomputed on
every frame. Propagation failures are recovered here: the satellite is
reported as absent for that instant rather than interrupting the frame.
"""
import logging
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Sequence

from .tle import OrbitalElementSet

if TYPE_CHECKING:
    from gnssr_sentinel.ports.propagation import OrbitPropagator


_log = logging.getLogger(__name__)


class PropagationFailure(RuntimeError):
    """The orbital model cannot produce a valid state for this element set and time."""

    def __init__(self, name: str, epoch: datetime, reason: str):
        self.name = name
        self.epoch = epoch
        self.reason = reason
        super().__init__(f"{name} at {epoch.isoformat()}: {reason}")


@dataclass(frozen=True)
class PropagatedState:
    """Inertial state of one satellite at one instant (km, km/s)."""
    name: str
    catalog_number: int
    epoch: datetime
    position_km: tuple[float, float, float]
    velocity_km_s: tuple[float, float, float]

    @property
    def radius_km(self) -> float:
        x, y, z = self.position_km
        return math.sqrt(x * x + y * y + z * z)

    @property
    def speed_km_s(self) -> float:
        vx, vy, vz = self.velocity_km_s
        return math.sqrt(vx * vx + vy * vy + vz * vz)


def as_utc(dt: datetime) -> datetime:
    """Ensure datetime is timezone-aware (treat naive as UTC)."""
    return dt.astimezone(timezone.utc) if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


def propagate_catalog_outcomes(
    catalog: Sequence[OrbitalElementSet],
    propagator: "OrbitPropagator",
    epoch: datetime,
) -> list[tuple[PropagatedState | None, str | None]]:
    """
    Propagate every catalog entry to one instant, keeping failure reasons.

    Returns:
        One (state, failure) pair per element set, in catalog order.
        Exactly one of the two is None.
    """
    outcomes: list[tuple[PropagatedState | None, str | None]] = []
    for elements in catalog:
        try:
            outcomes.append((propagator.propagate(elements, epoch), None))
        except PropagationFailure as e:
            _log.debug("No position this frame: %s", e)
            outcomes.append((None, e.reason))
    return outcomes


def propagate_catalog(
    catalog: Sequence[OrbitalElementSet],
    propagator: "OrbitPropagator",
    epoch: datetime,
) -> list[PropagatedState | None]:
    """
    Propagate every catalog entry to one instant.

    Args:
        catalog: Element sets in catalog order.
        propagator: An OrbitPropagator.
        epoch: UTC instant to evaluate.

    Returns:
        One entry per element set, in catalog order; None where
        propagation failed at this instant.
    """
    return [state for state, _ in propagate_catalog_outcomes(catalog, propagator, epoch)]
