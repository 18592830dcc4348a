# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON file I/O for scene configuration and catalog files.
"""
import json

from gnssr_sentinel.domain.catalog import load_catalog
from gnssr_sentinel.domain.scene_config import SceneConfig
from gnssr_sentinel.domain.tle import OrbitalElementSet


def load_scene_config(path: str) -> SceneConfig:
    """
    Read a JSON object of SceneConfig overrides.

    Raises:
        ValueError: If the file is not a JSON object or has invalid keys/values.
    """
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid scene config {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Scene config {path} must be a JSON object")
    return SceneConfig.from_mapping(data)


def load_catalog_file(path: str, strict: bool = True) -> tuple[OrbitalElementSet, ...]:
    """Read a two- or three-line TLE text file as a catalog."""
    with open(path, encoding="utf-8") as f:
        return load_catalog(f.read(), strict=strict)
