"""Tests for the time axis."""

import pytest
import pytz
from hypothesis import given, settings
from hypothesis import strategies as st

from candlechart.models import Interval
from candlechart.render.x_axis import XAxis, label_formats, to_datetime


class TestLabelFormats:
    """Label detail follows the interval."""

    @pytest.mark.parametrize(
        "interval,expected",
        [
            (Interval.ONE_SECOND, "%H:%M:%S"),
            (Interval.ONE_MINUTE, "%H:%M"),
            (Interval.TWELVE_HOURS, "%H:%M"),
            (Interval.ONE_DAY, "%m/%d"),
            (Interval.ONE_WEEK, "%m/%d"),
        ],
    )
    def test_short_format(self, interval: Interval, expected: str):
        assert label_formats(interval)[-1] == expected

    def test_most_detailed_format_that_fits(self):
        assert XAxis(17, 0, 0, Interval.ONE_MINUTE, True).label_format() == "%Y/%m/%d %H:%M"
        assert XAxis(16, 0, 0, Interval.ONE_MINUTE, True).label_format() == "%H:%M"
        assert XAxis(5, 0, 0, Interval.ONE_MINUTE, True).label_format() is None

    def test_to_datetime_with_offset(self):
        moment = to_datetime(120_000, pytz.FixedOffset(330))
        assert moment.strftime("%H:%M") == "05:32"


class TestXAxisRender:
    """Border and label rows."""

    def test_full_label_at_right_edge(self):
        axis = XAxis(17, -960_000, 0, Interval.ONE_MINUTE, True)

        assert axis.render() == ["────────────────┴", "*1970/01/01 00:00"]

    def test_short_label(self):
        axis = XAxis(6, -180_000, 120_000, Interval.ONE_MINUTE, True)

        assert axis.render() == ["─────┴", "*00:02"]

    def test_not_live_has_no_marker(self):
        axis = XAxis(6, -180_000, 120_000, Interval.ONE_MINUTE, False)

        assert axis.render() == ["─────┴", " 00:02"]

    def test_display_offset(self):
        axis = XAxis(6, -180_000, 120_000, Interval.ONE_MINUTE, True)

        assert axis.render(pytz.FixedOffset(330)) == ["─────┴", "*05:32"]

    def test_two_labels(self):
        """Labels repeat leftwards while they fit, four columns apart."""
        axis = XAxis(40, 0, 39 * 60_000, Interval.ONE_MINUTE, True)

        border, labels = axis.render()

        assert border == "─" * 18 + "┴" + "─" * 20 + "┴"
        assert labels == "  " + " 1970/01/01 00:18" + "    " + "*1970/01/01 00:39"

    @pytest.mark.parametrize(
        "width,interval",
        [(1, Interval.ONE_MINUTE), (3, Interval.ONE_SECOND), (5, Interval.ONE_DAY)],
    )
    def test_too_narrow_for_any_label(self, width: int, interval: Interval):
        axis = XAxis(width, 0, 0, interval, True)

        assert axis.render() == ["─" * width, " " * width]

    @given(
        width=st.integers(min_value=1, max_value=120),
        start=st.integers(min_value=0, max_value=2 * 10**12),
        span=st.integers(min_value=0, max_value=10**10),
        interval=st.sampled_from(list(Interval)),
        is_live=st.booleans(),
    )
    @settings(max_examples=200, deadline=None)
    def test_rows_match_width(self, width, start, span, interval, is_live):
        """*For any* axis, both rows are exactly ``width`` wide and ticks carry labels."""
        axis = XAxis(width, start, start + span, interval, is_live)

        border, labels = axis.render()

        assert len(border) == width
        assert len(labels) == width
        for column, char in enumerate(border):
            if char == "┴":
                assert labels[column] != " "
        assert ("*" in labels) == (is_live and "┴" in border)


class TestTimestampAt:
    def test_ends(self):
        axis = XAxis(10, 1_000, 10_000, Interval.ONE_SECOND, True)

        assert axis.timestamp_at(0) == 1_000
        assert axis.timestamp_at(9) == 10_000

    def test_single_column(self):
        axis = XAxis(1, 1_000, 10_000, Interval.ONE_SECOND, True)

        assert axis.timestamp_at(0) == 10_000
