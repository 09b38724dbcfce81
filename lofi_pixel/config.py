"""Effect and timing configuration (no UI)."""

from dataclasses import dataclass

# Fake playback clock cadence
TICK_INTERVAL_MS = 250
# Clock label refresh
CLOCK_INTERVAL_MS = 1000
# Canvas animation frame (~30 fps)
FRAME_INTERVAL_MS = 33

CLOCK_TIMEZONE = "America/Chicago"


@dataclass(frozen=True)
class StarsConfig:
    count: int = 50
    min_size: float = 2
    max_size: float = 4


@dataclass(frozen=True)
class RainConfig:
    count: int = 100
    min_speed: float = 0.8  # seconds to fall the full height
    max_speed: float = 1.5
    min_length: float = 10
    max_length: float = 25


@dataclass(frozen=True)
class ParticlesConfig:
    count: int = 15
    min_size: float = 2
    max_size: float = 6
    min_speed: float = 15  # seconds to float the full height
    max_speed: float = 30


@dataclass(frozen=True)
class SteamConfig:
    count: int = 3
    interval_ms: int = 800
    stagger_ms: int = 200
    lifetime_ms: int = 2000
    spread_px: float = 10


STARS = StarsConfig()
RAIN = RainConfig()
PARTICLES = ParticlesConfig()
STEAM = SteamConfig()
