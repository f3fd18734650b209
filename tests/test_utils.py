"""Tests for utility functions."""

import logging

import pytest
from tunebridge.utils import format_duration, format_total_duration, parse_duration_ms


class TestFormatDuration:
    """Tests for format_duration."""

    @pytest.mark.parametrize(
        ("ms", "expected"),
        [
            (0, "0:00"),
            (999, "0:00"),
            (5_000, "0:05"),
            (354_000, "5:54"),
            (3_723_000, "62:03"),
            (-1_000, "0:00"),
        ],
    )
    def test_format(self, ms: int, expected: str) -> None:
        assert format_duration(ms) == expected


class TestFormatTotalDuration:
    """Tests for format_total_duration."""

    @pytest.mark.parametrize(
        ("ms", "expected"),
        [
            (0, "0 min"),
            (2_520_000, "42 min"),
            (3_600_000, "1h 0m"),
            (3_900_000, "1h 5m"),
        ],
    )
    def test_format(self, ms: int, expected: str) -> None:
        assert format_total_duration(ms) == expected


class TestParseDurationMs:
    """Tests for parse_duration_ms."""

    @pytest.mark.parametrize(
        ("length", "expected"),
        [
            ("3:45", 225_000),
            ("0:07", 7_000),
            ("1:02:03", 3_723_000),
            (None, 0),
            ("", 0),
        ],
    )
    def test_parse(self, length: str | None, expected: int) -> None:
        assert parse_duration_ms(length) == expected

    @pytest.mark.parametrize("length", ["abc", "3:xx", "1:2:3:4", "45"])
    def test_unparseable_logs_warning(
        self, length: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING):
            assert parse_duration_ms(length) == 0

        assert length in caplog.text
