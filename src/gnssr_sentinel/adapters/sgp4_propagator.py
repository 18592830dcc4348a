# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
SGP4 adapter: propagates two-line element sets to inertial states.

TLE mean elements are SGP4-specific, NOT pure Keplerian.
The sgp4 library provides proper TEME state vectors; TEME is treated as
the Earth-centred inertial frame for display purposes.

Satellite records are built once per element set from the raw lines and
reused for every later frame.
"""
import logging
import math
from datetime import datetime
from typing import Sequence

import numpy as np
from sgp4.api import SGP4_ERRORS, WGS72, Satrec, jday

from gnssr_sentinel.domain.propagation import (
    PropagatedState,
    PropagationFailure,
    as_utc,
)
from gnssr_sentinel.domain.tle import MalformedElementSet, OrbitalElementSet
from gnssr_sentinel.ports.propagation import OrbitPropagator


_log = logging.getLogger(__name__)


def _datetime_to_jd(dt: datetime) -> tuple[float, float]:
    return jday(dt.year, dt.month, dt.day, dt.hour, dt.minute,
                dt.second + dt.microsecond / 1e6)


def _error_message(error_code: int) -> str:
    description = SGP4_ERRORS.get(int(error_code), "unknown error")
    return f"SGP4 error {int(error_code)}: {description}"


class SGP4Propagator(OrbitPropagator):
    """Evaluates element sets with SGP4 (WGS72 gravity constants)."""

    def __init__(self):
        self._records: dict[tuple[str, str], Satrec] = {}

    def _satrec(self, elements: OrbitalElementSet) -> Satrec:
        key = (elements.line1, elements.line2)
        sat = self._records.get(key)
        if sat is None:
            try:
                sat = Satrec.twoline2rv(elements.line1, elements.line2, WGS72)
            except ValueError as e:
                raise MalformedElementSet(elements.name, str(e)) from e
            self._records[key] = sat
            _log.debug("Initialised SGP4 record for %s", elements.name)
        return sat

    def propagate(self, elements: OrbitalElementSet, epoch: datetime) -> PropagatedState:
        """
        Propagate one element set to one instant.

        Args:
            elements: Parsed element set.
            epoch: UTC instant (naive datetimes are treated as UTC).

        Returns:
            PropagatedState with TEME position (km) and velocity (km/s).

        Raises:
            PropagationFailure: On a non-zero SGP4 error code or a
                non-finite state.
        """
        epoch = as_utc(epoch)
        sat = self._satrec(elements)
        jd, fr = _datetime_to_jd(epoch)

        error_code, position_km, velocity_km_s = sat.sgp4(jd, fr)
        if error_code != 0:
            raise PropagationFailure(elements.name, epoch, _error_message(error_code))
        if not all(math.isfinite(v) for v in (*position_km, *velocity_km_s)):
            raise PropagationFailure(elements.name, epoch, "non-finite state vector")

        return PropagatedState(
            name=elements.name,
            catalog_number=elements.catalog_number,
            epoch=epoch,
            position_km=(position_km[0], position_km[1], position_km[2]),
            velocity_km_s=(velocity_km_s[0], velocity_km_s[1], velocity_km_s[2]),
        )

    def sample(
        self,
        elements: OrbitalElementSet,
        epochs: Sequence[datetime],
    ) -> list[PropagatedState | None]:
        """
        Propagate one element set to many instants in a single SGP4 call.

        Returns:
            One entry per epoch; None where SGP4 reported an error.
        """
        if not epochs:
            return []
        sat = self._satrec(elements)
        utc_epochs = [as_utc(e) for e in epochs]
        jd_fr = np.array([_datetime_to_jd(e) for e in utc_epochs])

        errors, positions, velocities = sat.sgp4_array(
            np.ascontiguousarray(jd_fr[:, 0]),
            np.ascontiguousarray(jd_fr[:, 1]),
        )

        states: list[PropagatedState | None] = []
        for i, epoch in enumerate(utc_epochs):
            pos = positions[i]
            vel = velocities[i]
            if errors[i] != 0 or not (np.all(np.isfinite(pos)) and np.all(np.isfinite(vel))):
                states.append(None)
                continue
            states.append(PropagatedState(
                name=elements.name,
                catalog_number=elements.catalog_number,
                epoch=epoch,
                position_km=(float(pos[0]), float(pos[1]), float(pos[2])),
                velocity_km_s=(float(vel[0]), float(vel[1]), float(vel[2])),
            ))
        return states
