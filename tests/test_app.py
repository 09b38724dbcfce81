"""Tests for lofi_pixel.app.PlayerCard as the player's render sink (no display needed)."""

import pytest

pytest.importorskip('tkinter')

from lofi_pixel.app import PlayerCard
from lofi_pixel.playback import PlaybackSimulator
from lofi_pixel.playlist import Track
from lofi_pixel.theme import ICON_PAUSE, ICON_PLAY, PROGRESS_HEIGHT, PROGRESS_WIDTH


class FakeLabel:
    def __init__(self):
        self.text = None

    def config(self, **kw):
        self.text = kw.get('text', self.text)


class FakeCanvas:
    def __init__(self):
        self.coords_calls = []

    def coords(self, item, *xy):
        self.coords_calls.append((item, xy))


class FakeScene:
    def __init__(self):
        self.playing = []

    def set_playing(self, is_playing):
        self.playing.append(is_playing)


class NullScheduler:
    def after(self, ms, func):
        return 'job'

    def after_cancel(self, handle):
        pass


def make_card(**overrides):
    card = PlayerCard.__new__(PlayerCard)
    card.scene = FakeScene()
    card.title_label = FakeLabel()
    card.artist_label = FakeLabel()
    card.progress = FakeCanvas()
    card.progress_fill = 'fill'
    card.time_label = FakeLabel()
    card.play_btn = FakeLabel()
    for name, value in overrides.items():
        setattr(card, name, value)
    return card


class TestShowTrack:
    def test_sets_title_and_artist(self):
        card = make_card()
        card.show_track(Track('Rooftop Rain', 'Lo-Fi Lanterns', 195_000))
        assert card.title_label.text == 'Rooftop Rain'
        assert card.artist_label.text == 'Lo-Fi Lanterns'

    def test_missing_labels_skipped(self):
        card = make_card(title_label=None, artist_label=None)
        card.show_track(Track('a', 'b', 1))


class TestShowProgress:
    def test_fill_width_and_readout(self):
        card = make_card()
        card.show_progress(50.0, 93_000, 186_000)
        assert card.progress.coords_calls[-1] == ('fill', (0, 0, PROGRESS_WIDTH / 2, PROGRESS_HEIGHT))
        assert card.time_label.text == '1:33 / 3:06'

    @pytest.mark.parametrize('percent, width', [(-5, 0.0), (150, PROGRESS_WIDTH)])
    def test_percent_clamped(self, percent, width):
        card = make_card()
        card.show_progress(percent, 0, 1_000)
        assert card.progress.coords_calls[-1][1][2] == width

    def test_missing_surfaces_skipped(self):
        card = make_card(progress=None, time_label=None)
        card.show_progress(10.0, 1_000, 10_000)


class TestShowPlaying:
    def test_glyph_swap_and_scene(self):
        card = make_card()
        card.show_playing(True)
        assert card.play_btn.text == ICON_PAUSE
        card.show_playing(False)
        assert card.play_btn.text == ICON_PLAY
        assert card.scene.playing == [True, False]

    def test_missing_button_and_scene_skipped(self):
        card = make_card(play_btn=None, scene=None)
        card.show_playing(True)


class TestCardDrivenBySimulator:
    def test_simulator_renders_into_card(self):
        card = make_card()
        tracks = [Track('A', 'x', 60_000), Track('B', 'y', 120_000)]
        sim = PlaybackSimulator(tracks, scheduler=NullScheduler(), sink=card, clock=lambda: 0.0)
        assert card.title_label.text == 'A'
        assert card.time_label.text == '0:00 / 1:00'
        sim.next_track()
        sim.play()
        assert card.title_label.text == 'B'
        assert card.time_label.text == '0:00 / 2:00'
        assert card.play_btn.text == ICON_PAUSE
