"""Tests for lofi_pixel.playlist: Track, demo catalog and duration text."""

import dataclasses

import pytest

from lofi_pixel.playlist import DEMO_TRACKS, Track, format_duration


class TestTrack:
    def test_is_immutable(self):
        t = Track('Song', 'Artist', 1000)
        with pytest.raises(dataclasses.FrozenInstanceError):
            t.name = 'Other'

    def test_non_positive_duration_raises(self):
        with pytest.raises(ValueError):
            Track('Song', 'Artist', 0)
        with pytest.raises(ValueError):
            Track('Song', 'Artist', -5)

    def test_equality_by_value(self):
        assert Track('a', 'b', 1) == Track('a', 'b', 1)


class TestDemoTracks:
    def test_catalog(self):
        assert len(DEMO_TRACKS) == 5
        assert DEMO_TRACKS[0] == Track('Lake Shore Loops', 'Pixel Daydream', 186_000)
        assert DEMO_TRACKS[-1].name == 'Afterglow Arcade'
        assert all(t.duration_ms > 0 for t in DEMO_TRACKS)


class TestFormatDuration:
    @pytest.mark.parametrize('ms, text', [
        (0, '0:00'),
        (999, '0:00'),
        (61_000, '1:01'),
        (186_000, '3:06'),
        (-10, '0:00'),
    ])
    def test_format(self, ms, text):
        assert format_duration(ms) == text
