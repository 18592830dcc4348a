# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the JSON frame exporter and JSON file loaders."""
import json
from datetime import datetime, timezone

import pytest

from gnssr_sentinel.adapters.frame_json import JsonFrameExporter, frame_to_dict
from gnssr_sentinel.adapters.json_io import load_catalog_file, load_scene_config
from gnssr_sentinel.adapters.sgp4_propagator import SGP4Propagator
from gnssr_sentinel.domain.catalog import CATALOG_TLE, find_point_of_interest
from gnssr_sentinel.domain.frame import compute_frame
from gnssr_sentinel.domain.orbit_paths import compute_orbit_paths
from gnssr_sentinel.domain.scene_config import SceneConfig
from gnssr_sentinel.domain.tle import MalformedElementSet
from gnssr_sentinel.ports.export import FrameExporter


T0 = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
BALTIC = find_point_of_interest("baltic")


class TestFrameToDict:

    def test_keys(self, catalog):
        frame = compute_frame(catalog, SGP4Propagator(), T0, target=BALTIC)
        doc = frame_to_dict(frame)
        assert set(doc) == {"epoch", "satellites", "target", "links", "orbit_paths"}
        assert doc["epoch"] == "2024-01-01T12:00:00+00:00"
        assert doc["orbit_paths"] == []

    def test_satellite_records(self, catalog):
        frame = compute_frame(catalog, SGP4Propagator(), T0)
        records = frame_to_dict(frame)["satellites"]
        assert len(records) == len(catalog)
        first = records[0]
        assert first["name"] == catalog[0].name
        assert first["catalog_number"] == 41884
        assert first["available"] is True
        assert len(first["position"]) == 3
        assert -90.0 <= first["subpoint"]["lat_deg"] <= 90.0
        assert 300.0 < first["subpoint"]["alt_km"] < 800.0
        assert 7.0 < first["speed_km_s"] < 8.0
        assert first["failure"] is None

    def test_unavailable_satellite_is_null(self, catalog, fixed_propagator):
        frame = compute_frame(catalog, fixed_propagator({}), T0)
        record = frame_to_dict(frame)["satellites"][0]
        assert record["available"] is False
        assert record["position"] is None
        assert record["subpoint"] is None
        assert record["failure"] == "SGP4 error 6: decayed"

    def test_target_and_links(self, catalog):
        frame = compute_frame(catalog, SGP4Propagator(), T0, target=BALTIC)
        doc = frame_to_dict(frame)
        assert doc["target"]["label"] == "Baltic Sector"
        assert doc["target"]["lat_deg"] == 54.2
        assert [link["rank"] for link in doc["links"]] == [0, 1]
        assert doc["links"][0]["role"] == "receiver"

    def test_no_target(self, catalog):
        frame = compute_frame(catalog, SGP4Propagator(), T0)
        doc = frame_to_dict(frame)
        assert doc["target"] is None
        assert doc["links"] == []

    def test_orbit_paths(self, catalog):
        propagator = SGP4Propagator()
        frame = compute_frame(catalog, propagator, T0)
        paths = compute_orbit_paths(catalog, propagator, T0, SceneConfig(orbit_path_points=4))
        doc = frame_to_dict(frame, paths)
        assert len(doc["orbit_paths"]) == len(catalog)
        assert len(doc["orbit_paths"][0]["points"]) == 4


class TestJsonFrameExporter:

    def test_implements_port(self):
        assert isinstance(JsonFrameExporter(), FrameExporter)

    def test_writes_valid_json(self, catalog, tmp_path):
        frame = compute_frame(catalog, SGP4Propagator(), T0, target=BALTIC)
        path = tmp_path / "frame.json"
        count = JsonFrameExporter().export(frame, str(path))
        assert count == len(catalog)
        doc = json.loads(path.read_text(encoding="utf-8"))
        assert len(doc["satellites"]) == len(catalog)
        assert len(doc["links"]) == 2

    def test_count_excludes_unavailable(self, catalog, fixed_propagator, tmp_path):
        propagator = fixed_propagator({catalog[0].name: (7000.0, 0.0, 0.0)})
        frame = compute_frame(catalog, propagator, T0)
        count = JsonFrameExporter(indent=None).export(frame, str(tmp_path / "f.json"))
        assert count == 1


# ── Loaders ───────────────────────────────────────────────────────

class TestLoadSceneConfig:

    def test_overrides(self, tmp_path):
        path = tmp_path / "scene.json"
        path.write_text('{"globe_radius": 3.0, "earth_fixed": true}', encoding="utf-8")
        config = load_scene_config(str(path))
        assert config.globe_radius == 3.0
        assert config.earth_fixed is True

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "scene.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid scene config"):
            load_scene_config(str(path))

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "scene.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ValueError, match="must be a JSON object"):
            load_scene_config(str(path))

    def test_infinity_rejected(self, tmp_path):
        path = tmp_path / "scene.json"
        path.write_text('{"marker_radius_ratio": Infinity}', encoding="utf-8")
        with pytest.raises(ValueError, match="marker_radius_ratio"):
            load_scene_config(str(path))

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "scene.json"
        path.write_text('{"zoom": 2}', encoding="utf-8")
        with pytest.raises(ValueError, match="Unknown scene config keys"):
            load_scene_config(str(path))


class TestLoadCatalogFile:

    def test_reads_catalog(self, tmp_path):
        path = tmp_path / "sats.tle"
        path.write_text(CATALOG_TLE, encoding="utf-8")
        assert len(load_catalog_file(str(path))) == 8

    def test_malformed_strict(self, tmp_path):
        path = tmp_path / "sats.tle"
        path.write_text(CATALOG_TLE.replace("0  9996\n", "0  9990\n", 1), encoding="utf-8")
        with pytest.raises(MalformedElementSet):
            load_catalog_file(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_catalog_file(str(tmp_path / "absent.tle"))
