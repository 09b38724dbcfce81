"""Random attribute generators for the ambient scene effects (no UI).

Each generator maps a config and a ``random.Random`` to a list of frozen
records. Positions are percentages of the scene, sizes are pixels and
timings are seconds unless the field says otherwise.
"""

import random
from dataclasses import dataclass

from lofi_pixel.config import (
    PARTICLES,
    RAIN,
    STARS,
    STEAM,
    ParticlesConfig,
    RainConfig,
    StarsConfig,
    SteamConfig,
)


@dataclass(frozen=True)
class Star:
    x_pct: float
    y_pct: float
    size: float
    delay_s: float
    duration_s: float  # one twinkle cycle


@dataclass(frozen=True)
class RainDrop:
    x_pct: float
    length: float
    duration_s: float  # time to fall the full height
    delay_s: float
    opacity: float


@dataclass(frozen=True)
class Particle:
    x_pct: float
    size: float
    duration_s: float  # time to float the full height
    delay_s: float


@dataclass(frozen=True)
class SteamPuff:
    offset_x: float
    emit_at_ms: int  # relative to the start of the burst
    lifetime_ms: int


def _uniform(rng: random.Random, lo: float, hi: float) -> float:
    """Uniform in [lo, hi)."""
    return rng.random() * (hi - lo) + lo


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")


def create_stars(cfg: StarsConfig = STARS, rng: random.Random | None = None) -> list[Star]:
    rng = rng or random.Random()
    _check_count(cfg.count)
    stars = []
    for _ in range(cfg.count):
        stars.append(Star(
            x_pct=rng.random() * 100,
            y_pct=rng.random() * 100,
            size=_uniform(rng, cfg.min_size, cfg.max_size),
            delay_s=rng.random() * 2,
            duration_s=1.5 + rng.random() * 1.5,
        ))
    return stars


def create_rain(cfg: RainConfig = RAIN, rng: random.Random | None = None) -> list[RainDrop]:
    rng = rng or random.Random()
    _check_count(cfg.count)
    drops = []
    for _ in range(cfg.count):
        length = _uniform(rng, cfg.min_length, cfg.max_length)
        speed = _uniform(rng, cfg.min_speed, cfg.max_speed)
        drops.append(RainDrop(
            x_pct=rng.random() * 100,
            length=length,
            duration_s=speed,
            delay_s=rng.random() * 2,
            opacity=rng.random() * 0.3 + 0.1,
        ))
    return drops


def create_particles(cfg: ParticlesConfig = PARTICLES, rng: random.Random | None = None) -> list[Particle]:
    rng = rng or random.Random()
    _check_count(cfg.count)
    particles = []
    for _ in range(cfg.count):
        size = _uniform(rng, cfg.min_size, cfg.max_size)
        speed = _uniform(rng, cfg.min_speed, cfg.max_speed)
        particles.append(Particle(
            x_pct=rng.random() * 100,
            size=size,
            duration_s=speed,
            # Spread over a full cycle so they don't all start at the bottom together
            delay_s=rng.random() * speed,
        ))
    return particles


def create_steam_burst(cfg: SteamConfig = STEAM, rng: random.Random | None = None) -> list[SteamPuff]:
    """One burst of steam puffs, staggered by cfg.stagger_ms and centred on the cup."""
    rng = rng or random.Random()
    _check_count(cfg.count)
    half = cfg.spread_px / 2
    return [
        SteamPuff(
            offset_x=-half + rng.random() * cfg.spread_px,
            emit_at_ms=i * cfg.stagger_ms,
            lifetime_ms=cfg.lifetime_ms,
        )
        for i in range(cfg.count)
    ]


def animation_phase(elapsed_s: float, delay_s: float, duration_s: float) -> float:
    """Position in [0, 1) of an infinitely repeating animation; 0 until the delay has passed."""
    if duration_s <= 0:
        return 0.0
    t = elapsed_s - delay_s
    if t <= 0:
        return 0.0
    return (t % duration_s) / duration_s
