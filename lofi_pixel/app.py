"""Tkinter GUI application: pixel scene, ambient effects, clock, demo player."""

import logging
import math
import random
import time
import tkinter as tk

from lofi_pixel import effects, log_config
from lofi_pixel.clock import format_clock
from lofi_pixel.config import CLOCK_INTERVAL_MS, FRAME_INTERVAL_MS, STEAM
from lofi_pixel.controls import SHORTCUT_HELP, bind_keys
from lofi_pixel.media_keys import MediaKeyListener
from lofi_pixel.playback import PlaybackSimulator, RenderSink
from lofi_pixel.playlist import DEMO_TRACKS, Track, format_duration
from lofi_pixel.theme import (
    ACCENT,
    ACCENT_HOVER,
    BG,
    BTN_PAD,
    CARD,
    CLOCK_FONT,
    COFFEE,
    CUP,
    DESK,
    DESK_EDGE,
    FG,
    FRAME,
    ICON_NEXT,
    ICON_PAUSE,
    ICON_PLAY,
    ICON_PREV,
    LABEL_FONT,
    MOON,
    PAD,
    PARTICLE,
    PIXEL,
    PROGRESS_HEIGHT,
    PROGRESS_WIDTH,
    RAIN,
    SCENE_HEIGHT,
    SCENE_WIDTH,
    SKY_BOTTOM,
    SKY_TOP,
    SKYLINE,
    SMALL_FONT,
    SMALL_PAD,
    STAR,
    STAR_DIM,
    STEAM as STEAM_COLOR,
    SUBTLE,
    TITLE_FONT,
    TRACK_BG,
    VINYL,
    VINYL_GROOVE,
    VINYL_LABEL,
    VISUALIZER_BAR,
    VISUALIZER_BARS,
    WINDOW_LIT,
)
from lofi_pixel.version import APP_NAME, __version__

log = logging.getLogger(__name__)

# Where things sit in the scene
SKY_HEIGHT = int(SCENE_HEIGHT * 0.6)
DESK_TOP = SCENE_HEIGHT - 80
CUP_X, CUP_Y = 520, DESK_TOP - 36
VINYL_X, VINYL_Y, VINYL_R = 110, DESK_TOP + 30, 36
VIS_X, VIS_Y = 180, DESK_TOP + 60


def _blend(c1: str, c2: str, t: float) -> str:
    """Blend two '#rrggbb' colours; t=0 gives c1, t=1 gives c2."""
    a = [int(c1[i:i + 2], 16) for i in (1, 3, 5)]
    b = [int(c2[i:i + 2], 16) for i in (1, 3, 5)]
    return '#' + ''.join(f'{round(x + (y - x) * t):02x}' for x, y in zip(a, b))


def _stipple(opacity: float) -> str:
    """Tk has no alpha; approximate faint drops with a stipple pattern."""
    if opacity < 0.2:
        return 'gray25'
    if opacity < 0.3:
        return 'gray50'
    return 'gray75'


class Scene:
    """Canvas with the static pixel art and the animated effects layered on top."""

    def __init__(self, parent, rng: random.Random | None = None):
        self.rng = rng or random.Random()
        self.canvas = tk.Canvas(
            parent, width=SCENE_WIDTH, height=SCENE_HEIGHT,
            bg=BG, highlightthickness=0
        )
        self._t0 = time.monotonic()
        self._frame_job = None
        self._steam_job = None
        self._playing = False
        self._vinyl_angle = 0.0

        self._draw_backdrop()
        self.stars = [
            (s, self.canvas.create_rectangle(0, 0, 0, 0, fill=STAR, width=0))
            for s in effects.create_stars(rng=self.rng)
        ]
        self.drops = [
            (d, self.canvas.create_line(0, 0, 0, 0, fill=RAIN, stipple=_stipple(d.opacity)))
            for d in effects.create_rain(rng=self.rng)
        ]
        self._draw_room()
        self.particles = [
            (p, self.canvas.create_oval(0, 0, 0, 0, fill=PARTICLE, width=0))
            for p in effects.create_particles(rng=self.rng)
        ]
        self._steam: list[tuple[int, float, effects.SteamPuff]] = []
        self.clock_item = self.canvas.create_text(
            SCENE_WIDTH - PAD * 2, PAD * 2, anchor='ne', text='', fill=FG, font=CLOCK_FONT
        )

    def _draw_backdrop(self):
        c = self.canvas
        bands = SKY_HEIGHT // PIXEL
        for i in range(bands):
            c.create_rectangle(
                0, i * PIXEL, SCENE_WIDTH, (i + 1) * PIXEL,
                fill=_blend(SKY_TOP, SKY_BOTTOM, i / max(1, bands - 1)), width=0
            )
        c.create_rectangle(0, SKY_HEIGHT, SCENE_WIDTH, DESK_TOP, fill=SKY_BOTTOM, width=0)
        c.create_oval(470, 40, 518, 88, fill=MOON, width=0)
        # Skyline: fixed layout so the city doesn't jump around between runs
        city = random.Random(7)
        x = 0
        while x < SCENE_WIDTH:
            w = city.randrange(8, 16) * PIXEL
            h = city.randrange(10, 30) * PIXEL
            top = DESK_TOP - h
            c.create_rectangle(x, top, x + w, DESK_TOP, fill=SKYLINE, width=0)
            for wy in range(top + PIXEL * 2, DESK_TOP - PIXEL * 2, PIXEL * 4):
                for wx in range(x + PIXEL, x + w - PIXEL, PIXEL * 3):
                    if city.random() < 0.25:
                        c.create_rectangle(wx, wy, wx + PIXEL, wy + PIXEL, fill=WINDOW_LIT, width=0)
            x += w

    def _draw_room(self):
        c = self.canvas
        # Window frame
        c.create_rectangle(0, 0, SCENE_WIDTH, PIXEL * 3, fill=FRAME, width=0)
        c.create_rectangle(0, 0, PIXEL * 3, DESK_TOP, fill=FRAME, width=0)
        c.create_rectangle(SCENE_WIDTH - PIXEL * 3, 0, SCENE_WIDTH, DESK_TOP, fill=FRAME, width=0)
        c.create_rectangle(SCENE_WIDTH // 2 - PIXEL, 0, SCENE_WIDTH // 2 + PIXEL, DESK_TOP, fill=FRAME, width=0)
        # Desk
        c.create_rectangle(0, DESK_TOP, SCENE_WIDTH, SCENE_HEIGHT, fill=DESK, width=0)
        c.create_rectangle(0, DESK_TOP, SCENE_WIDTH, DESK_TOP + PIXEL * 2, fill=DESK_EDGE, width=0)
        # Coffee cup
        c.create_rectangle(CUP_X - 16, CUP_Y, CUP_X + 16, DESK_TOP, fill=CUP, width=0)
        c.create_rectangle(CUP_X + 16, CUP_Y + 8, CUP_X + 24, CUP_Y + 24, outline=CUP, width=PIXEL)
        c.create_rectangle(CUP_X - 12, CUP_Y, CUP_X + 12, CUP_Y + PIXEL * 2, fill=COFFEE, width=0)
        # Vinyl
        c.create_oval(
            VINYL_X - VINYL_R, VINYL_Y - VINYL_R, VINYL_X + VINYL_R, VINYL_Y + VINYL_R,
            fill=VINYL, outline=VINYL_GROOVE, width=PIXEL
        )
        c.create_oval(VINYL_X - 10, VINYL_Y - 10, VINYL_X + 10, VINYL_Y + 10, fill=VINYL_LABEL, width=0)
        self.vinyl_marker = c.create_line(0, 0, 0, 0, fill=VINYL_GROOVE, width=2)
        self.bars = [
            c.create_rectangle(0, 0, 0, 0, fill=VISUALIZER_BAR, width=0)
            for _ in range(VISUALIZER_BARS)
        ]

    def start(self):
        self._frame()
        self._steam_burst()

    def stop(self):
        for job in (self._frame_job, self._steam_job):
            if job is not None:
                self.canvas.after_cancel(job)
        self._frame_job = None
        self._steam_job = None

    def set_playing(self, is_playing: bool):
        """Spin the vinyl and bounce the visualizer only while playing."""
        self._playing = is_playing

    def set_clock(self, text: str):
        self.canvas.itemconfigure(self.clock_item, text=text)

    def _frame(self):
        t = time.monotonic() - self._t0
        c = self.canvas

        for star, item in self.stars:
            phase = effects.animation_phase(t, star.delay_s, star.duration_s)
            glow = abs(phase * 2 - 1)  # 1 -> 0 -> 1 over a cycle
            x = star.x_pct / 100 * SCENE_WIDTH
            y = star.y_pct / 100 * SKY_HEIGHT
            c.coords(item, x, y, x + star.size, y + star.size)
            c.itemconfigure(item, fill=_blend(STAR_DIM, STAR, glow))

        for drop, item in self.drops:
            phase = effects.animation_phase(t, drop.delay_s, drop.duration_s)
            x = drop.x_pct / 100 * SCENE_WIDTH
            y = phase * (DESK_TOP + drop.length) - drop.length
            c.coords(item, x, y, x, y + drop.length)

        for particle, item in self.particles:
            phase = effects.animation_phase(t, particle.delay_s, particle.duration_s)
            x = particle.x_pct / 100 * SCENE_WIDTH + math.sin(phase * math.tau * 2) * 10
            y = SCENE_HEIGHT - phase * (SCENE_HEIGHT + particle.size)
            c.coords(item, x, y, x + particle.size, y + particle.size)

        now = time.monotonic()
        for item, born, puff in self._steam:
            age = (now - born) * 1000 / puff.lifetime_ms
            x = CUP_X + puff.offset_x + math.sin(age * math.tau) * 3
            y = CUP_Y - age * 40
            r = 3 + age * 4
            c.coords(item, x - r, y - r, x + r, y + r)

        if self._playing:
            self._vinyl_angle = (self._vinyl_angle + 0.15) % math.tau
        r = VINYL_R - PIXEL * 2
        c.coords(
            self.vinyl_marker,
            VINYL_X + math.cos(self._vinyl_angle) * 12, VINYL_Y + math.sin(self._vinyl_angle) * 12,
            VINYL_X + math.cos(self._vinyl_angle) * r, VINYL_Y + math.sin(self._vinyl_angle) * r,
        )
        for i, bar in enumerate(self.bars):
            h = PIXEL if not self._playing else PIXEL + abs(math.sin(t * (3 + i * 0.7) + i)) * 24
            x = VIS_X + i * PIXEL * 2
            c.coords(bar, x, VIS_Y - h, x + PIXEL, VIS_Y)

        self._frame_job = c.after(FRAME_INTERVAL_MS, self._frame)

    def _steam_burst(self):
        for puff in effects.create_steam_burst(STEAM, self.rng):
            self.canvas.after(puff.emit_at_ms, lambda p=puff: self._emit_puff(p))
        self._steam_job = self.canvas.after(STEAM.interval_ms, self._steam_burst)

    def _emit_puff(self, puff: effects.SteamPuff):
        item = self.canvas.create_oval(0, 0, 0, 0, fill=STEAM_COLOR, width=0, stipple='gray50')
        entry = (item, time.monotonic(), puff)
        self._steam.append(entry)

        def remove():
            self._steam.remove(entry)
            self.canvas.delete(item)
        self.canvas.after(puff.lifetime_ms, remove)


class PlayerCard(RenderSink):
    """Now-playing card. Any widget may be None; that surface is then skipped."""

    def __init__(self, parent, scene: Scene | None = None):
        self.scene = scene
        self.frame = tk.Frame(parent, bg=CARD)
        self.title_label = tk.Label(self.frame, text='', font=TITLE_FONT, fg=ACCENT, bg=CARD, anchor='w')
        self.title_label.pack(fill='x', padx=PAD, pady=(PAD, 0))
        self.artist_label = tk.Label(self.frame, text='', font=LABEL_FONT, fg=SUBTLE, bg=CARD, anchor='w')
        self.artist_label.pack(fill='x', padx=PAD)

        bar_row = tk.Frame(self.frame, bg=CARD)
        bar_row.pack(fill='x', padx=PAD, pady=SMALL_PAD)
        self.progress = tk.Canvas(
            bar_row, width=PROGRESS_WIDTH, height=PROGRESS_HEIGHT,
            bg=TRACK_BG, highlightthickness=0
        )
        self.progress.pack(side='left')
        self.progress_fill = self.progress.create_rectangle(0, 0, 0, PROGRESS_HEIGHT, fill=ACCENT, width=0)
        self.time_label = tk.Label(bar_row, text='0:00 / 0:00', font=SMALL_FONT, fg=SUBTLE, bg=CARD)
        self.time_label.pack(side='left', padx=(PAD, 0))

        buttons = tk.Frame(self.frame, bg=CARD)
        buttons.pack(padx=PAD, pady=(0, PAD))
        self.prev_btn = self._button(buttons, ICON_PREV)
        self.play_btn = self._button(buttons, ICON_PLAY)
        self.next_btn = self._button(buttons, ICON_NEXT)

    def _button(self, parent, text):
        btn = tk.Button(
            parent, text=text, font=LABEL_FONT, bg=CARD, fg=FG,
            activebackground=ACCENT_HOVER, activeforeground=BG,
            relief='flat', padx=BTN_PAD[0], pady=BTN_PAD[1], cursor='hand2',
            takefocus=0,
        )
        btn.pack(side='left', padx=SMALL_PAD)
        btn.bind('<Enter>', lambda e: btn.configure(bg=ACCENT, fg=BG))
        btn.bind('<Leave>', lambda e: btn.configure(bg=CARD, fg=FG))
        return btn

    def connect(self, simulator: PlaybackSimulator):
        self.prev_btn.configure(command=simulator.previous_track)
        self.play_btn.configure(command=simulator.toggle_playback)
        self.next_btn.configure(command=simulator.next_track)

    def show_track(self, track: Track) -> None:
        if self.title_label is not None:
            self.title_label.config(text=track.name)
        if self.artist_label is not None:
            self.artist_label.config(text=track.artist)

    def show_progress(self, percent: float, elapsed_ms: float, duration_ms: int) -> None:
        if self.progress is not None:
            width = max(0.0, min(100.0, percent)) / 100 * PROGRESS_WIDTH
            self.progress.coords(self.progress_fill, 0, 0, width, PROGRESS_HEIGHT)
        if self.time_label is not None:
            self.time_label.config(text=f'{format_duration(elapsed_ms)} / {format_duration(duration_ms)}')

    def show_playing(self, is_playing: bool) -> None:
        if self.play_btn is not None:
            self.play_btn.config(text=ICON_PAUSE if is_playing else ICON_PLAY)
        if self.scene is not None:
            self.scene.set_playing(is_playing)


class App:
    def __init__(self, root, rng: random.Random | None = None):
        self.root = root
        root.title(APP_NAME)
        root.configure(bg=BG)
        root.resizable(False, False)

        self.scene = Scene(root, rng=rng)
        self.scene.canvas.pack(padx=0, pady=0)
        self.player = PlayerCard(root, scene=self.scene)
        self.player.frame.pack(fill='x')
        tk.Label(
            root, text=f'v{__version__}  ·  Space play/pause  ·  ←/→ tracks',
            font=SMALL_FONT, fg=SUBTLE, bg=BG
        ).pack(anchor='e', padx=PAD, pady=(0, SMALL_PAD))

        self.simulator = PlaybackSimulator(DEMO_TRACKS, scheduler=root, sink=self.player)
        self.player.connect(self.simulator)
        bind_keys(root, self.simulator)
        self.media_keys = MediaKeyListener(root, self.simulator)
        self.media_keys.start()

        self._clock_job = None
        self._update_clock()
        self.scene.start()
        root.protocol('WM_DELETE_WINDOW', self.close)

        log.info('%s v%s started; log file: %s', APP_NAME, __version__, log_config.LOG_FILE_PATH or '(none)')
        for line in SHORTCUT_HELP:
            log.info(line)

    def _update_clock(self):
        self.scene.set_clock(format_clock())
        self._clock_job = self.root.after(CLOCK_INTERVAL_MS, self._update_clock)

    def close(self):
        log.info('Closing')
        self.media_keys.stop()
        self.simulator.close()
        self.scene.stop()
        if self._clock_job is not None:
            self.root.after_cancel(self._clock_job)
            self._clock_job = None
        self.root.destroy()
