"""Track catalog for the demo player (no UI)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Track:
    """A fake track: only a title, an artist and a nominal length."""

    name: str
    artist: str
    duration_ms: int

    def __post_init__(self) -> None:
        if self.duration_ms <= 0:
            raise ValueError(f"duration_ms must be positive, got {self.duration_ms}")


DEMO_TRACKS: tuple[Track, ...] = (
    Track("Lake Shore Loops", "Pixel Daydream", 186_000),
    Track("Midnight CTA", "Neon Transit", 204_000),
    Track("Snowy Streetlights", "Warm Static", 174_000),
    Track("Rooftop Rain", "Lo-Fi Lanterns", 195_000),
    Track("Afterglow Arcade", "Chill Circuit", 210_000),
)


def format_duration(ms: float) -> str:
    """Format milliseconds as m:ss (negative values clamp to 0:00)."""
    total_s = max(0, int(ms // 1000))
    minutes, seconds = divmod(total_s, 60)
    return f"{minutes}:{seconds:02d}"
