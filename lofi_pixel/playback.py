"""Fake playback clock for the demo player: progress, auto-advance, play/pause.

Nothing is ever heard. The simulator only tracks how far into the current
track we would be and pushes that to a render sink. Timing goes through an
injected scheduler with Tk's ``after``/``after_cancel`` signature, so a Tk root
can be passed directly and tests can drive ticks by hand.
"""

import logging
import time
from typing import Any, Callable, Protocol, Sequence

from lofi_pixel.config import TICK_INTERVAL_MS
from lofi_pixel.playlist import Track

log = logging.getLogger(__name__)


class Scheduler(Protocol):
    def after(self, ms: int, func: Callable[[], None]) -> Any: ...

    def after_cancel(self, handle: Any) -> None: ...


class RenderSink:
    """Display surfaces the simulator pushes to. Default implementation draws nothing.

    Subclassing is optional: any object works, and a surface method it lacks is skipped.
    """

    def show_track(self, track: Track) -> None:
        pass

    def show_progress(self, percent: float, elapsed_ms: float, duration_ms: int) -> None:
        pass

    def show_playing(self, is_playing: bool) -> None:
        pass


def _monotonic_ms() -> float:
    return time.monotonic() * 1000


class PlaybackSimulator:
    """Simulated play/pause/next/previous over a fixed track list."""

    def __init__(
        self,
        tracks: Sequence[Track],
        scheduler: Scheduler,
        sink: Any = None,
        clock: Callable[[], float] = _monotonic_ms,
        tick_interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        self._tracks = tuple(tracks)
        self._scheduler = scheduler
        self._sink = sink if sink is not None else RenderSink()
        self._clock = clock
        self._tick_interval_ms = tick_interval_ms
        self._index = 0
        self._playing = False
        self._elapsed_ms = 0.0
        self._last_tick_ms: float | None = None
        self._pending = None  # scheduler handle of the next tick

        self.select_track(0, autoplay=False)

    @property
    def tracks(self) -> tuple[Track, ...]:
        return self._tracks

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def current_track(self) -> Track | None:
        if not self._tracks:
            return None
        return self._tracks[self._index]

    @property
    def is_playing(self) -> bool:
        return self._playing

    @property
    def elapsed_ms(self) -> float:
        return self._elapsed_ms

    @property
    def last_tick_ms(self) -> float | None:
        return self._last_tick_ms

    @property
    def has_pending_tick(self) -> bool:
        return self._pending is not None

    @property
    def progress_percent(self) -> float:
        track = self.current_track
        if track is None:
            return 0.0
        return min(100.0, self._elapsed_ms / max(1, track.duration_ms) * 100)

    def select_track(self, index: int, autoplay: bool | None = None) -> None:
        """Jump to tracks[index mod n] at 0:00, then play or pause.

        autoplay=None keeps the current playing state.
        """
        n = len(self._tracks)
        if n == 0:
            return
        if autoplay is None:
            autoplay = self._playing

        self._index = index % n
        self._elapsed_ms = 0.0
        self._last_tick_ms = self._clock()
        self._cancel_tick()
        log.debug("Track %d: %s - %s", self._index, self.current_track.artist, self.current_track.name)

        self._render("show_track", self.current_track)
        self._render_progress()

        if not autoplay:
            self.pause()
        elif self._playing:
            self._schedule_tick()
        else:
            self.play()

    def play(self) -> None:
        if self._playing or not self._tracks:
            return
        self._playing = True
        self._last_tick_ms = self._clock()
        self._schedule_tick()
        self._render("show_playing", True)
        log.debug("Playing")

    def pause(self) -> None:
        if not self._playing:
            self._render("show_playing", False)
            return
        self._playing = False
        self._cancel_tick()
        self._render("show_playing", False)
        log.debug("Paused at %.0f ms", self._elapsed_ms)

    def toggle_playback(self) -> None:
        if self._playing:
            self.pause()
        else:
            self.play()

    def advance(self, direction: int) -> None:
        """Move by direction (+1 / -1), keeping the current play/pause state."""
        self.select_track(self._index + direction, autoplay=self._playing)

    def next_track(self) -> None:
        self.advance(1)

    def previous_track(self) -> None:
        self.advance(-1)

    def close(self) -> None:
        """Cancel the pending tick; the simulator stays usable afterwards."""
        self._cancel_tick()
        self._playing = False

    def _schedule_tick(self) -> None:
        self._cancel_tick()
        self._pending = self._scheduler.after(self._tick_interval_ms, self._tick)

    def _cancel_tick(self) -> None:
        if self._pending is not None:
            self._scheduler.after_cancel(self._pending)
            self._pending = None

    def _tick(self) -> None:
        self._pending = None
        if not self._playing:
            return
        now = self._clock()
        last = self._last_tick_ms if self._last_tick_ms is not None else now
        self._last_tick_ms = now
        self._elapsed_ms += max(0.0, now - last)

        if self._elapsed_ms >= self.current_track.duration_ms:
            # Always forward, wrapping to the first track after the last
            self.advance(1)
            return

        self._render_progress()
        self._schedule_tick()

    def _render(self, surface: str, *args) -> None:
        """Push to one sink surface; sinks without that surface are skipped."""
        show = getattr(self._sink, surface, None)
        if show is not None:
            show(*args)

    def _render_progress(self) -> None:
        self._render("show_progress", self.progress_percent, self._elapsed_ms, self.current_track.duration_ms)
