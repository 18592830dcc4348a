# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Static satellite catalog and points of interest.

The catalog is compiled in: four CYGNSS GNSS-R receivers in 35° LEO and
four GPS transmitters in MEO, all with epochs at the start of 2024. It is
parsed once and read-only afterwards. A malformed entry is a data bug,
so the default load is strict and fails at startup.
"""
import logging
from functools import lru_cache

from .projection import GeodeticCoordinate
from .tle import MalformedElementSet, OrbitalElementSet, parse_element_set, split_tle_text


_log = logging.getLogger(__name__)

CATALOG_TLE = """\
CYGNSS FM05
1 41884U 16078A   24001.41730012  .00002104  00000-0  17853-3 0  9996
2 41884  34.9612 127.4430 0014527 231.7702 128.1671 15.14503517398518
CYGNSS FM04
1 41885U 16078B   24001.38119641  .00002271  00000-0  19106-3 0  9990
2 41885  34.9597  96.3110 0016038 238.5044 121.4175 15.14712036398662
CYGNSS FM02
1 41886U 16078C   24001.44920716  .00002033  00000-0  17311-3 0  9993
2 41886  34.9617 160.2219 0013376 236.3189 123.6283 15.14621880398485
CYGNSS FM01
1 41887U 16078D   24001.35564217  .00001987  00000-0  16958-3 0  9997
2 41887  34.9601 189.0042 0012049 229.8831 130.0874 15.14339104398303
GPS BIIR-2  (PRN 13)
1 24876U 97035A   24001.52301859 -.00000032  00000-0  00000+0 0  9996
2 24876  55.7162 149.4561 0091514  56.2037 304.6698  2.00563446195043
GPS BIIF-1  (PRN 25)
1 36585U 10022A   24001.60417722 -.00000061  00000-0  00000+0 0  9995
2 36585  54.4790 217.3561 0112020  59.3844 301.9209  2.00564782101811
GPS BIIF-5  (PRN 30)
1 39533U 14008A   24001.29911005  .00000019  00000-0  00000+0 0  9999
2 39533  54.0810 336.6207 0065513 207.9451 152.0057  2.00567116 72566
GPS BIII-1  (PRN 04)
1 43873U 18109A   24001.47772651 -.00000058  00000-0  00000+0 0  9993
2 43873  55.1034  89.7425 0027731 189.4527 170.5330  2.00563729 37010
"""

# Alert locations used by the dashboard's threat markers
POINTS_OF_INTEREST: dict[str, GeodeticCoordinate] = {
    "baltic": GeodeticCoordinate(54.2, 12.1, "Baltic Sector"),
    "north-sea": GeodeticCoordinate(56.5, 3.0, "North Sea"),
    "gibraltar": GeodeticCoordinate(35.95, -5.6, "Strait of Gibraltar"),
    "malacca": GeodeticCoordinate(2.5, 101.0, "Strait of Malacca"),
    "hormuz": GeodeticCoordinate(26.6, 56.3, "Strait of Hormuz"),
}


def load_catalog(text: str, strict: bool = True) -> tuple[OrbitalElementSet, ...]:
    """
    Parse a TLE catalog text block into element sets.

    Args:
        text: Catalog in two- or three-line form.
        strict: If True, raise on any malformed entry after checking all
            of them. If False, log and skip malformed entries.

    Returns:
        Element sets in catalog order.

    Raises:
        MalformedElementSet: In strict mode, listing every bad entry.
    """
    elements: list[OrbitalElementSet] = []
    failures: list[MalformedElementSet] = []

    for name, line1, line2 in split_tle_text(text):
        try:
            elements.append(parse_element_set(name, line1, line2))
        except MalformedElementSet as e:
            if not strict:
                _log.error("Skipping malformed catalog entry %s", e)
            failures.append(e)

    if strict and failures:
        if len(failures) == 1:
            raise failures[0]
        summary = "; ".join(str(f) for f in failures)
        raise MalformedElementSet(
            "catalog", f"{len(failures)} malformed entries: {summary}"
        )

    names = [e.name for e in elements]
    duplicates = sorted({n for n in names if names.count(n) > 1})
    if duplicates:
        _log.warning("Duplicate catalog names: %s", ", ".join(duplicates))

    _log.info("Loaded %d element sets (%d skipped)", len(elements), len(failures))
    return tuple(elements)


@lru_cache(maxsize=1)
def default_catalog() -> tuple[OrbitalElementSet, ...]:
    """The compiled-in catalog, parsed once."""
    return load_catalog(CATALOG_TLE, strict=True)


def find_point_of_interest(key: str) -> GeodeticCoordinate:
    """
    Look up a named point of interest (case-insensitive).

    Raises:
        KeyError: If the name is unknown.
    """
    normalized = key.strip().lower().replace(" ", "-").replace("_", "-")
    if normalized not in POINTS_OF_INTEREST:
        known = ", ".join(sorted(POINTS_OF_INTEREST))
        raise KeyError(f"Unknown point of interest {key!r} (known: {known})")
    return POINTS_OF_INTEREST[normalized]
