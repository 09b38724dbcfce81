"""Keyboard shortcuts for the demo player."""

import logging

log = logging.getLogger(__name__)

# Tk event sequence -> simulator method name
KEY_BINDINGS = {
    '<space>': 'toggle_playback',
    '<Right>': 'next_track',
    '<Left>': 'previous_track',
}

SHORTCUT_HELP = (
    'Demo player shortcuts:',
    '  Space: Play/Pause',
    '  Right: Next track',
    '  Left:  Previous track',
)


def bind_keys(widget, simulator) -> None:
    """Bind the player shortcuts on widget (usually the Tk root)."""
    for sequence, action in KEY_BINDINGS.items():
        handler = getattr(simulator, action)

        def _on_key(event, handler=handler):
            handler()
            # Keep the "all" bindtag out; player buttons use takefocus=0 so Space never activates them
            return 'break'

        widget.bind(sequence, _on_key)
        log.debug('Bound %s -> %s', sequence, action)
