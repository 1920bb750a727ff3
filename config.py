"""
config.py — User Settings
==========================
Everything the menu can change at runtime lives on one Settings object,
shared by the menu, the renderer and the engine.

Bounds are module constants so the input collaborators and the CLI
validate against the same numbers.
"""

from dataclasses import dataclass
from typing import Optional


# ---------------------------------------------------------------------------
# Bounds & defaults
# ---------------------------------------------------------------------------
MIN_SIZE     = 5
MAX_SIZE     = 50
DEFAULT_SIZE = 20

MIN_DELAY_MS     = 10
MAX_DELAY_MS     = 1000
DEFAULT_DELAY_MS = 100

INTRO_PAUSE_MS = 1000      # "Starting Bubble Sort..." pause before the first frame


def valid_size(n: int) -> bool:
    return MIN_SIZE <= n <= MAX_SIZE


def valid_delay(ms: int) -> bool:
    return MIN_DELAY_MS <= ms <= MAX_DELAY_MS


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------
@dataclass
class Settings:
    """
    Attributes:
        size               : Length used for random generation.
        delay_ms           : Pause after every rendered frame. 0 disables pacing.
        intro_pause_ms     : Pause between "Starting …" and the first frame.
        clear_screen       : Clear the terminal before each frame.
        pause_after_action : Wait for Enter after every non-exit menu action.
        seed               : Seed for random generation (None = nondeterministic).
    """

    size:               int           = DEFAULT_SIZE
    delay_ms:           int           = DEFAULT_DELAY_MS
    intro_pause_ms:     int           = INTRO_PAUSE_MS
    clear_screen:       bool          = True
    pause_after_action: bool          = True
    seed:               Optional[int] = None

    def set_size(self, n: int) -> bool:
        """Apply a new generation size. Rejected values leave it unchanged."""
        if not valid_size(n):
            return False
        self.size = n
        return True

    def set_delay(self, ms: int) -> bool:
        """Apply a new frame delay. Rejected values leave it unchanged."""
        if not valid_delay(ms):
            return False
        self.delay_ms = ms
        return True

    @classmethod
    def for_tests(cls, **overrides) -> "Settings":
        """No pacing, no clearing, no "Press Enter" pauses."""
        params = dict(delay_ms=0, intro_pause_ms=0, clear_screen=False, pause_after_action=False)
        params.update(overrides)
        return cls(**params)
