# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Two-Line Element (TLE) set parsing and validation.

Converts the fixed-column TLE text format into immutable domain objects.
Each element set is validated once at load time: line length, line
numbers, matching catalog numbers, modulo-10 checksum and every numeric
field. No external dependencies; stdlib math/dataclasses/datetime only.

TLE format: https://celestrak.org/NORAD/documentation/tle-fmt.php
Lines 1 and 2 are exactly 69 characters with a modulo-10 checksum.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from .orbital_mechanics import period_from_mean_motion, semi_major_axis_km


TLE_LINE_LENGTH = 69


class MalformedElementSet(ValueError):
    """A catalog entry could not be parsed as a two-line element set."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"{name or '<unnamed>'}: {reason}")


@dataclass(frozen=True)
class OrbitalElementSet:
    """Parsed two-line element set for one satellite."""
    name: str
    line1: str
    line2: str
    catalog_number: int
    classification: str
    international_designator: str
    epoch: datetime
    mean_motion_dot: float
    mean_motion_ddot: float
    bstar: float
    inclination_deg: float
    raan_deg: float
    eccentricity: float
    arg_perigee_deg: float
    mean_anomaly_deg: float
    mean_motion_rev_per_day: float
    rev_at_epoch: int

    @property
    def period_minutes(self) -> float:
        return period_from_mean_motion(self.mean_motion_rev_per_day)

    @property
    def semi_major_axis_km(self) -> float:
        return semi_major_axis_km(self.mean_motion_rev_per_day)


def tle_checksum(line: str) -> int:
    """Compute TLE checksum: sum digits ('-' counts as 1), mod 10."""
    total = 0
    for ch in line[:68]:
        if ch.isdigit():
            total += int(ch)
        elif ch == "-":
            total += 1
    return total % 10


def _implied_decimal(field: str) -> float:
    """
    Parse a TLE implied-decimal field such as ' 38792-4' or '-11606-4'.

    The mantissa carries an implied leading '0.' and the last two
    characters are a signed power-of-ten exponent.
    """
    text = field.strip()
    if not text:
        return 0.0
    sign = 1.0
    if text[0] in "+-":
        sign = -1.0 if text[0] == "-" else 1.0
        text = text[1:]
    mantissa, exponent = text[:-2], text[-2:]
    return sign * float("0." + mantissa) * 10.0 ** int(exponent)


def _parse_epoch(field: str) -> datetime:
    """Parse the YYDDD.DDDDDDDD epoch field to a UTC datetime."""
    text = field.strip()
    year_2digit = int(text[:2])
    day_of_year = float(text[2:])
    if not 1.0 <= day_of_year < 367.0:
        raise ValueError(f"day of year out of range: {day_of_year}")
    # NORAD convention: 57-99 → 1957-1999, 00-56 → 2000-2056
    year = 1900 + year_2digit if year_2digit >= 57 else 2000 + year_2digit
    start = datetime(year, 1, 1, tzinfo=timezone.utc)
    return start + timedelta(days=day_of_year - 1.0)


def _check_line(name: str, line: str, number: int) -> None:
    if len(line) != TLE_LINE_LENGTH:
        raise MalformedElementSet(
            name, f"line {number} has {len(line)} characters, expected {TLE_LINE_LENGTH}"
        )
    if not line.startswith(f"{number} "):
        raise MalformedElementSet(name, f"line {number} must start with '{number} '")
    if not line[68].isdigit():
        raise MalformedElementSet(name, f"line {number} checksum is not a digit")
    expected = tle_checksum(line)
    if int(line[68]) != expected:
        raise MalformedElementSet(
            name, f"line {number} checksum {line[68]} does not match computed {expected}"
        )


def parse_element_set(name: str, line1: str, line2: str) -> OrbitalElementSet:
    """
    Parse and validate one two-line element set.

    Args:
        name: Satellite name (the optional "line 0").
        line1: TLE line 1, 69 columns.
        line2: TLE line 2, 69 columns.

    Returns:
        OrbitalElementSet domain object.

    Raises:
        MalformedElementSet: If either line fails validation.
    """
    name = name.strip()
    line1 = line1.rstrip()
    line2 = line2.rstrip()

    _check_line(name, line1, 1)
    _check_line(name, line2, 2)

    try:
        catnr_1 = int(line1[2:7])
        catnr_2 = int(line2[2:7])
    except ValueError:
        raise MalformedElementSet(name, "catalog number is not numeric") from None
    if catnr_1 != catnr_2:
        raise MalformedElementSet(
            name, f"catalog numbers differ between lines ({catnr_1} != {catnr_2})"
        )

    try:
        elements = OrbitalElementSet(
            name=name or str(catnr_1),
            line1=line1,
            line2=line2,
            catalog_number=catnr_1,
            classification=line1[7],
            international_designator=line1[9:17].strip(),
            epoch=_parse_epoch(line1[18:32]),
            mean_motion_dot=float(line1[33:43]),
            mean_motion_ddot=_implied_decimal(line1[44:52]),
            bstar=_implied_decimal(line1[53:61]),
            inclination_deg=float(line2[8:16]),
            raan_deg=float(line2[17:25]),
            eccentricity=float("0." + line2[26:33].strip()),
            arg_perigee_deg=float(line2[34:42]),
            mean_anomaly_deg=float(line2[43:51]),
            mean_motion_rev_per_day=float(line2[52:63]),
            rev_at_epoch=int(line2[63:68].strip() or 0),
        )
    except ValueError as e:
        raise MalformedElementSet(name, f"invalid numeric field: {e}") from e

    if not 0.0 <= elements.inclination_deg <= 180.0:
        raise MalformedElementSet(
            name, f"inclination {elements.inclination_deg} outside [0, 180]"
        )
    if elements.mean_motion_rev_per_day <= 0:
        raise MalformedElementSet(
            name, f"mean motion must be positive, got {elements.mean_motion_rev_per_day}"
        )

    return elements


def split_tle_text(text: str) -> list[tuple[str, str, str]]:
    """
    Split catalog text into (name, line1, line2) triples.

    Accepts both the three-line form (name line before each pair) and the
    bare two-line form. Blank lines are ignored.

    Raises:
        MalformedElementSet: If the lines do not form name/line 1/line 2 groups.
    """
    lines = [line.rstrip() for line in text.splitlines() if line.strip()]
    entries: list[tuple[str, str, str]] = []
    name = ""
    i = 0
    while i < len(lines):
        line = lines[i]
        if line.startswith("2 "):
            raise MalformedElementSet(name, "line 2 without a preceding line 1")
        if line.startswith("1 "):
            if i + 1 >= len(lines) or not lines[i + 1].startswith("2 "):
                raise MalformedElementSet(name, "line 1 without a following line 2")
            entries.append((name, line, lines[i + 1]))
            name = ""
            i += 2
            continue
        if name:
            raise MalformedElementSet(name, "name line without element lines")
        # 3LE files prefix the name line with "0 "
        name = line[2:].strip() if line.startswith("0 ") else line.strip()
        i += 1
    if name:
        raise MalformedElementSet(name, "name line without element lines")
    return entries
