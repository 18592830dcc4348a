# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for two-line element set parsing and validation."""
from datetime import timezone

import pytest

from gnssr_sentinel.domain.tle import (
    MalformedElementSet,
    OrbitalElementSet,
    _implied_decimal,
    parse_element_set,
    split_tle_text,
    tle_checksum,
)


ISS_NAME = "ISS (ZARYA)"
ISS_LINE1 = "1 25544U 98067A   19343.69339541  .00001764  00000-0  38792-4 0  9991"
ISS_LINE2 = "2 25544  51.6439 211.2001 0007417  17.6667  85.6398 15.50103472202482"

CYGNSS_LINE2 = "2 41884  34.9612 127.4430 0014527 231.7702 128.1671 15.14503517398518"


def _with_checksum(line68: str) -> str:
    return line68 + str(tle_checksum(line68))


# ── Checksum ──────────────────────────────────────────────────────

class TestChecksum:

    def test_iss_line1(self):
        assert tle_checksum(ISS_LINE1) == 1

    def test_iss_line2(self):
        assert tle_checksum(ISS_LINE2) == 2

    def test_minus_counts_as_one(self):
        assert tle_checksum("-" * 3 + " " * 65) == 3

    def test_ignores_column_69(self):
        assert tle_checksum(ISS_LINE1[:68] + "7") == tle_checksum(ISS_LINE1)


# ── Field parsing ─────────────────────────────────────────────────

class TestImpliedDecimal:

    def test_positive_exponent_negative(self):
        assert _implied_decimal(" 38792-4") == pytest.approx(3.8792e-5)

    def test_negative_mantissa(self):
        assert _implied_decimal("-11606-4") == pytest.approx(-1.1606e-5)

    def test_zero(self):
        assert _implied_decimal(" 00000+0") == 0.0
        assert _implied_decimal(" 00000-0") == 0.0

    def test_blank(self):
        assert _implied_decimal("        ") == 0.0


class TestParseElementSet:

    def test_returns_domain_object(self):
        elements = parse_element_set(ISS_NAME, ISS_LINE1, ISS_LINE2)
        assert isinstance(elements, OrbitalElementSet)
        assert elements.name == ISS_NAME
        assert elements.line1 == ISS_LINE1
        assert elements.line2 == ISS_LINE2

    def test_line1_fields(self):
        elements = parse_element_set(ISS_NAME, ISS_LINE1, ISS_LINE2)
        assert elements.catalog_number == 25544
        assert elements.classification == "U"
        assert elements.international_designator == "98067A"
        assert elements.mean_motion_dot == pytest.approx(1.764e-5)
        assert elements.mean_motion_ddot == 0.0
        assert elements.bstar == pytest.approx(3.8792e-5)

    def test_epoch(self):
        """19343.69339541 → 2019-12-09 16:38:29 UTC."""
        epoch = parse_element_set(ISS_NAME, ISS_LINE1, ISS_LINE2).epoch
        assert epoch.tzinfo == timezone.utc
        assert (epoch.year, epoch.month, epoch.day) == (2019, 12, 9)
        assert (epoch.hour, epoch.minute, epoch.second) == (16, 38, 29)

    def test_line2_fields(self):
        elements = parse_element_set(ISS_NAME, ISS_LINE1, ISS_LINE2)
        assert elements.inclination_deg == pytest.approx(51.6439)
        assert elements.raan_deg == pytest.approx(211.2001)
        assert elements.eccentricity == pytest.approx(0.0007417)
        assert elements.arg_perigee_deg == pytest.approx(17.6667)
        assert elements.mean_anomaly_deg == pytest.approx(85.6398)
        assert elements.mean_motion_rev_per_day == pytest.approx(15.50103472)
        assert elements.rev_at_epoch == 20248

    def test_derived_period_and_sma(self):
        elements = parse_element_set(ISS_NAME, ISS_LINE1, ISS_LINE2)
        assert 92.8 < elements.period_minutes < 93.0
        assert 6700 < elements.semi_major_axis_km < 6900

    def test_trailing_whitespace_tolerated(self):
        elements = parse_element_set(ISS_NAME, ISS_LINE1 + "  ", ISS_LINE2 + "\n")
        assert elements.line1 == ISS_LINE1

    def test_blank_name_falls_back_to_catalog_number(self):
        assert parse_element_set("", ISS_LINE1, ISS_LINE2).name == "25544"

    def test_frozen(self):
        elements = parse_element_set(ISS_NAME, ISS_LINE1, ISS_LINE2)
        with pytest.raises(AttributeError):
            elements.name = "other"

    def test_pre_2000_epoch(self):
        line1 = _with_checksum(ISS_LINE1[:18] + "98001.50000000" + ISS_LINE1[32:68])
        epoch = parse_element_set(ISS_NAME, line1, ISS_LINE2).epoch
        assert (epoch.year, epoch.month, epoch.day, epoch.hour) == (1998, 1, 1, 12)


# ── Validation ────────────────────────────────────────────────────

class TestMalformedElementSet:

    def test_is_value_error(self):
        assert issubclass(MalformedElementSet, ValueError)

    def test_short_line(self):
        with pytest.raises(MalformedElementSet, match="characters"):
            parse_element_set(ISS_NAME, ISS_LINE1[:60], ISS_LINE2)

    def test_bad_checksum(self):
        wrong = str((int(ISS_LINE1[68]) + 1) % 10)
        with pytest.raises(MalformedElementSet, match="checksum"):
            parse_element_set(ISS_NAME, ISS_LINE1[:68] + wrong, ISS_LINE2)

    def test_swapped_lines(self):
        with pytest.raises(MalformedElementSet, match="must start with"):
            parse_element_set(ISS_NAME, ISS_LINE2, ISS_LINE1)

    def test_catalog_number_mismatch(self):
        with pytest.raises(MalformedElementSet, match="catalog numbers differ"):
            parse_element_set(ISS_NAME, ISS_LINE1, CYGNSS_LINE2)

    def test_non_numeric_field(self):
        line2 = _with_checksum(ISS_LINE2[:8] + "  5x.643" + ISS_LINE2[16:68])
        with pytest.raises(MalformedElementSet, match="invalid numeric field"):
            parse_element_set(ISS_NAME, ISS_LINE1, line2)

    def test_zero_mean_motion(self):
        line2 = _with_checksum(ISS_LINE2[:52] + " 0.00000000" + ISS_LINE2[63:68])
        with pytest.raises(MalformedElementSet, match="mean motion"):
            parse_element_set(ISS_NAME, ISS_LINE1, line2)

    def test_error_carries_name_and_reason(self):
        with pytest.raises(MalformedElementSet) as exc_info:
            parse_element_set(ISS_NAME, ISS_LINE1[:60], ISS_LINE2)
        assert exc_info.value.name == ISS_NAME
        assert "line 1" in exc_info.value.reason
        assert ISS_NAME in str(exc_info.value)


# ── Catalog text splitting ────────────────────────────────────────

class TestSplitTleText:

    def test_three_line_form(self):
        text = f"{ISS_NAME}\n{ISS_LINE1}\n{ISS_LINE2}\n"
        assert split_tle_text(text) == [(ISS_NAME, ISS_LINE1, ISS_LINE2)]

    def test_two_line_form(self):
        text = f"{ISS_LINE1}\n{ISS_LINE2}\n"
        assert split_tle_text(text) == [("", ISS_LINE1, ISS_LINE2)]

    def test_3le_zero_prefix(self):
        text = f"0 {ISS_NAME}\n{ISS_LINE1}\n{ISS_LINE2}\n"
        assert split_tle_text(text)[0][0] == ISS_NAME

    def test_blank_lines_ignored(self):
        text = f"\n{ISS_NAME}\n\n{ISS_LINE1}\n{ISS_LINE2}\n\n"
        assert len(split_tle_text(text)) == 1

    def test_missing_line2(self):
        with pytest.raises(MalformedElementSet, match="without a following line 2"):
            split_tle_text(f"{ISS_NAME}\n{ISS_LINE1}\n")

    def test_orphan_line2(self):
        with pytest.raises(MalformedElementSet, match="without a preceding line 1"):
            split_tle_text(f"{ISS_NAME}\n{ISS_LINE2}\n")

    def test_dangling_name(self):
        with pytest.raises(MalformedElementSet, match="name line"):
            split_tle_text(f"{ISS_NAME}\n{ISS_LINE1}\n{ISS_LINE2}\nLONELY SAT\n")
