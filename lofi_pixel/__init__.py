"""Lofi pixel visualizer: ambient pixel scene with a fake "now playing" player."""

from lofi_pixel.playback import PlaybackSimulator, RenderSink
from lofi_pixel.playlist import DEMO_TRACKS, Track

__all__ = [
    'DEMO_TRACKS',
    'PlaybackSimulator',
    'RenderSink',
    'Track',
]
