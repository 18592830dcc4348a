# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON frame exporter.

Serialises a FrameSnapshot for a browser front end: scene positions for
every satellite (null when unavailable), the sub-satellite point, the
target marker, signal links and optional orbit paths.
External dependencies (json, file I/O) are confined to this adapter.
"""
import json
from typing import Any, Sequence

from gnssr_sentinel.domain.coordinate_frames import ecef_to_geodetic, eci_to_ecef, gmst_rad
from gnssr_sentinel.domain.frame import FrameSnapshot, SatelliteView
from gnssr_sentinel.domain.orbit_paths import OrbitPath
from gnssr_sentinel.domain.projection import ScenePosition
from gnssr_sentinel.ports.export import FrameExporter


def _vec(position: ScenePosition | None, digits: int = 6) -> list[float] | None:
    if position is None:
        return None
    return [round(position.x, digits), round(position.y, digits), round(position.z, digits)]


def _satellite_record(view: SatelliteView) -> dict[str, Any]:
    record: dict[str, Any] = {
        'name': view.name,
        'catalog_number': view.elements.catalog_number,
        'available': view.available,
        'position': _vec(view.position),
        'subpoint': None,
        'failure': view.failure,
    }
    if view.state is not None:
        pos_ecef = eci_to_ecef(view.state.position_km, gmst_rad(view.state.epoch))
        lat_deg, lon_deg, alt_km = ecef_to_geodetic(pos_ecef)
        record['subpoint'] = {
            'lat_deg': round(lat_deg, 6),
            'lon_deg': round(lon_deg, 6),
            'alt_km': round(alt_km, 3),
        }
        record['speed_km_s'] = round(view.state.speed_km_s, 6)
    return record


def frame_to_dict(
    frame: FrameSnapshot,
    orbit_paths: Sequence[OrbitPath] = (),
) -> dict[str, Any]:
    """Plain-dict form of a frame, ready for json.dump."""
    target = None
    if frame.target is not None:
        target = {
            'label': frame.target.label,
            'lat_deg': frame.target.lat_deg,
            'lon_deg': frame.target.lon_deg,
            'position': _vec(frame.target_position),
        }

    return {
        'epoch': frame.epoch.isoformat(),
        'satellites': [_satellite_record(view) for view in frame.satellites],
        'target': target,
        'links': [
            {
                'satellite': link.satellite_name,
                'rank': link.rank,
                'role': link.role,
                'satellite_position': _vec(link.satellite_position),
                'rendered_position': _vec(link.rendered_position),
                'target_position': _vec(link.target_position),
                'distance': round(link.distance, 6),
            }
            for link in frame.links
        ],
        'orbit_paths': [
            {
                'name': path.name,
                'start': path.start.isoformat(),
                'period_minutes': round(path.period_minutes, 4),
                'points': [_vec(p, 4) for p in path.points],
            }
            for path in orbit_paths
        ],
    }


class JsonFrameExporter(FrameExporter):
    """Writes a frame snapshot as a JSON document."""

    def __init__(self, indent: int | None = 2):
        self._indent = indent

    def export(
        self,
        frame: FrameSnapshot,
        path: str,
        orbit_paths: Sequence[OrbitPath] = (),
    ) -> int:
        document = frame_to_dict(frame, orbit_paths)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(document, f, indent=self._indent, ensure_ascii=False)
        return len(frame.visible)
