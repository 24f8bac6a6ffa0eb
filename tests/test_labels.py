from __future__ import annotations

import pytest

from ei_core.labels import band_label, level_label, pillar_description, pillar_label


@pytest.mark.parametrize(
    "pct,expected",
    [
        (100, "Excellent"),
        (80, "Excellent"),
        (79, "Strong"),
        (65, "Strong"),
        (64, "Developing"),
        (45, "Developing"),
        (44, "Needs Attention"),
        (0, "Needs Attention"),
    ],
)
def test_level_thresholds_are_inclusive(pct, expected):
    assert level_label(pct) == expected


@pytest.mark.parametrize(
    "pct,expected",
    [(100, "High"), (75, "High"), (74, "Medium"), (50, "Medium"), (49, "Low"), (0, "Low")],
)
def test_band_thresholds_are_inclusive(pct, expected):
    assert band_label(pct) == expected


def test_band_and_level_scales_stay_independent():
    assert (band_label(50), level_label(50)) == ("Medium", "Developing")
    assert (band_label(47), level_label(47)) == ("Low", "Developing")
    assert (band_label(77), level_label(77)) == ("High", "Strong")


def test_pillar_display_names():
    assert pillar_label("KNOW_YOURSELF") == "Know Yourself"
    assert pillar_label("GIVE_YOURSELF") == "Give Yourself"
    assert "Empathy" in pillar_description("GIVE_YOURSELF")
    assert pillar_label("OTHER") == "OTHER"
    assert pillar_description("OTHER") == ""
