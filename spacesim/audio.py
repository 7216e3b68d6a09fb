"""Audio subsystem lifecycle."""

from dataclasses import dataclass


@dataclass
class _AudioState:
    active: bool = False


_state = _AudioState()


def init_audio() -> None:
    """Start the audio subsystem and announce it."""
    _state.active = True
    print("Audio initialized.")


def shutdown_audio() -> None:
    """Stop the audio subsystem and announce it."""
    _state.active = False
    print("Audio shutdown.")