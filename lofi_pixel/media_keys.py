"""Global media keys (play/pause, next, previous) using pynput."""

import logging
from typing import Any, Callable

try:
    from pynput.keyboard import Key, Listener
    MEDIA_KEYS_AVAILABLE = True
except ImportError:
    Key = None
    Listener = None
    MEDIA_KEYS_AVAILABLE = False

log = logging.getLogger(__name__)


def media_key_actions() -> dict[Any, str]:
    """Map pynput media keys to simulator method names (empty without pynput)."""
    if not MEDIA_KEYS_AVAILABLE:
        return {}
    return {
        Key.media_play_pause: 'toggle_playback',
        Key.media_next: 'next_track',
        Key.media_previous: 'previous_track',
    }


class MediaKeyListener:
    """Forward media keys to the simulator on the Tk thread.

    pynput calls on_press from its own thread, so every action is handed to
    scheduler.after(0, ...) and runs on the main loop like the other controls.
    """

    def __init__(self, scheduler, simulator) -> None:
        self._scheduler = scheduler
        self._simulator = simulator
        self._actions = media_key_actions()
        self._listener = None

    @property
    def running(self) -> bool:
        return self._listener is not None

    def start(self) -> bool:
        """Start listening. Returns False when global keys are not available."""
        if self._listener is not None:
            return True
        if not MEDIA_KEYS_AVAILABLE:
            log.warning('pynput not available; media keys disabled')
            return False
        try:
            listener = Listener(on_press=self._on_press)
            listener.daemon = True
            listener.start()
        except Exception:
            log.warning('Could not start media key listener', exc_info=True)
            return False
        self._listener = listener
        log.info('Media key listener started')
        return True

    def stop(self) -> None:
        if self._listener is None:
            return
        self._listener.stop()
        self._listener = None
        log.info('Media key listener stopped')

    def _on_press(self, key) -> None:
        action = self._actions.get(key)
        if action is None:
            return
        handler: Callable[[], None] = getattr(self._simulator, action)
        self._scheduler.after(0, handler)
