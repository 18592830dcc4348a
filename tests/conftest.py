# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Shared fixtures: a deterministic stand-in propagator."""
from datetime import datetime

import pytest

from gnssr_sentinel.domain.catalog import default_catalog
from gnssr_sentinel.domain.propagation import PropagatedState, PropagationFailure, as_utc
from gnssr_sentinel.domain.tle import OrbitalElementSet
from gnssr_sentinel.ports.propagation import OrbitPropagator


class FixedPropagator(OrbitPropagator):
    """Returns a fixed inertial position per satellite name; listed names fail."""

    def __init__(self, positions: dict[str, tuple[float, float, float]], failing=()):
        self._positions = positions
        self._failing = set(failing)
        self.calls = 0

    def propagate(self, elements: OrbitalElementSet, epoch: datetime) -> PropagatedState:
        self.calls += 1
        epoch = as_utc(epoch)
        if elements.name in self._failing or elements.name not in self._positions:
            raise PropagationFailure(elements.name, epoch, "SGP4 error 6: decayed")
        return PropagatedState(
            name=elements.name,
            catalog_number=elements.catalog_number,
            epoch=epoch,
            position_km=self._positions[elements.name],
            velocity_km_s=(0.0, 7.5, 0.0),
        )

    def sample(self, elements, epochs):
        states = []
        for epoch in epochs:
            try:
                states.append(self.propagate(elements, epoch))
            except PropagationFailure:
                states.append(None)
        return states


@pytest.fixture
def catalog():
    return default_catalog()


@pytest.fixture
def fixed_propagator():
    return FixedPropagator
