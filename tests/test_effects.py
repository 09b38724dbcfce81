"""Tests for lofi_pixel.effects: generator ranges, counts and animation phase."""

import random

import pytest

from lofi_pixel.config import ParticlesConfig, RainConfig, StarsConfig, SteamConfig
from lofi_pixel.effects import (
    animation_phase,
    create_particles,
    create_rain,
    create_stars,
    create_steam_burst,
)


@pytest.fixture
def rng():
    return random.Random(1234)


class TestStars:
    def test_default_count_and_ranges(self, rng):
        stars = create_stars(rng=rng)
        assert len(stars) == 50
        for s in stars:
            assert 2 <= s.size < 4
            assert 0 <= s.x_pct < 100
            assert 0 <= s.y_pct < 100
            assert 0 <= s.delay_s < 2
            assert 1.5 <= s.duration_s < 3.0

    def test_same_seed_same_sky(self):
        assert create_stars(rng=random.Random(5)) == create_stars(rng=random.Random(5))

    def test_custom_config(self, rng):
        stars = create_stars(StarsConfig(count=3, min_size=5, max_size=6), rng)
        assert len(stars) == 3
        assert all(5 <= s.size < 6 for s in stars)


class TestRain:
    def test_default_count_and_ranges(self, rng):
        drops = create_rain(rng=rng)
        assert len(drops) == 100
        for d in drops:
            assert 10 <= d.length < 25
            assert 0.8 <= d.duration_s < 1.5
            assert 0 <= d.delay_s < 2
            assert 0.1 <= d.opacity < 0.4

    def test_zero_count(self, rng):
        assert create_rain(RainConfig(count=0), rng) == []

    def test_negative_count_raises(self, rng):
        with pytest.raises(ValueError):
            create_rain(RainConfig(count=-1), rng)


class TestParticles:
    def test_default_count_and_ranges(self, rng):
        particles = create_particles(rng=rng)
        assert len(particles) == 15
        for p in particles:
            assert 2 <= p.size < 6
            assert 15 <= p.duration_s < 30
            # delay spread over one full float cycle
            assert 0 <= p.delay_s < p.duration_s

    def test_negative_count_raises(self, rng):
        with pytest.raises(ValueError):
            create_particles(ParticlesConfig(count=-3), rng)


class TestSteam:
    def test_burst_is_staggered(self, rng):
        puffs = create_steam_burst(rng=rng)
        assert [p.emit_at_ms for p in puffs] == [0, 200, 400]
        assert all(p.lifetime_ms == 2000 for p in puffs)
        assert all(-5 <= p.offset_x < 5 for p in puffs)

    def test_custom_stagger(self, rng):
        puffs = create_steam_burst(SteamConfig(count=2, stagger_ms=50), rng)
        assert [p.emit_at_ms for p in puffs] == [0, 50]


class TestAnimationPhase:
    def test_zero_before_delay(self):
        assert animation_phase(0.5, 1.0, 2.0) == 0.0

    def test_mid_cycle(self):
        assert animation_phase(2.0, 1.0, 2.0) == pytest.approx(0.5)

    def test_repeats(self):
        assert animation_phase(5.5, 0.0, 2.0) == pytest.approx(0.75)

    def test_zero_duration(self):
        assert animation_phase(3.0, 0.0, 0.0) == 0.0
