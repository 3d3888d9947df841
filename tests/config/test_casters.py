"""Tests for _casters.py: parse_file_size."""

import pytest

from workbook_guard.config._casters import parse_file_size


class TestParseFileSize:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("10MB", 10 * 1024 * 1024),
            ("10 mb", 10 * 1024 * 1024),
            ("512KB", 512 * 1024),
            ("1.5K", 1536),
            ("2GB", 2 * 1024**3),
            ("100", 100),
            ("100B", 100),
            (2048, 2048),
        ],
    )
    def test_parses_sizes(self, value, expected):
        assert parse_file_size(value) == expected

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_empty_means_unlimited(self, value):
        assert parse_file_size(value) is None

    def test_garbage_raises(self):
        with pytest.raises(ValueError, match="Cannot parse file size"):
            parse_file_size("ten megabytes")

    def test_negative_raises(self):
        with pytest.raises(ValueError, match=">= 0"):
            parse_file_size(-1)

    def test_bool_rejected(self):
        with pytest.raises(ValueError):
            parse_file_size(True)
