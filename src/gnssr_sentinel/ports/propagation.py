# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for orbit propagators.

Adapters wrap a general-perturbations model (SGP4) behind this protocol.
"""
from datetime import datetime
from typing import Protocol, Sequence, runtime_checkable

from gnssr_sentinel.domain.propagation import PropagatedState
from gnssr_sentinel.domain.tle import OrbitalElementSet


@runtime_checkable
class OrbitPropagator(Protocol):
    """Port for evaluating an element set at one or more instants."""

    def propagate(self, elements: OrbitalElementSet, epoch: datetime) -> PropagatedState:
        """
        Inertial state at one instant.

        Raises:
            PropagationFailure: If the model cannot produce a valid state.
        """
        ...

    def sample(
        self,
        elements: OrbitalElementSet,
        epochs: Sequence[datetime],
    ) -> list[PropagatedState | None]:
        """Inertial states at many instants; None where propagation failed."""
        ...
