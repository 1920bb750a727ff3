"""
renderer.py — Terminal Bar-Chart Renderer
==========================================
Snapshot → rich Text, then a paced print.

The renderer consumes:
  • snapshot  – values, label, step number, highlights, max value
  • config    – glyphs and colours

Layout of one frame:

    Algorithm: Quick Sort | Step: 12

          ██
      ██  ██
    ████████  ██          ← one row per height, tallest first
     3 1 4 2 0 1          ← values, width 2 each

Design decisions:
  - `render_chart` is stateless: same snapshot in, same Text out, so
    tests compare strings without a terminal.
  - `TerminalRenderer` reads the delay from Settings on every frame, so
    a speed change in the menu applies to the next run immediately.
"""

import time
from typing import Callable, Optional

from rich.console import Console
from rich.text import Text

from config import Settings
from sorts.step import Snapshot


# ---------------------------------------------------------------------------
# Visual Config — glyphs & colours
# ---------------------------------------------------------------------------
class ChartConfig:
    bar:             str = "██"
    gap:             str = "  "
    primary_style:   str = "red"      # element being compared / moved
    secondary_style: str = "green"    # its partner / the current minimum
    title_style:     str = "bold"
    value_width:     int = 2


CONFIG = ChartConfig()


# ---------------------------------------------------------------------------
# Pure render function
# ---------------------------------------------------------------------------
def render_chart(snap: Snapshot, config: ChartConfig = CONFIG) -> Text:
    """
    Returns the whole frame as one Text.

    Values ≤ 0 never reach row 1 and so draw as empty columns.
    """
    out = Text()

    if snap.algorithm:
        out.append(f"Algorithm: {snap.algorithm}", style=config.title_style)
        if snap.step_number is not None:
            out.append(f" | Step: {snap.step_number}")
        out.append("\n\n")

    for row in range(max(snap.max_value, 1), 0, -1):
        for i, value in enumerate(snap.values):
            if value < row:
                out.append(config.gap)
            elif i == snap.primary:
                out.append(config.bar, style=config.primary_style)
            elif i == snap.secondary:
                out.append(config.bar, style=config.secondary_style)
            else:
                out.append(config.bar)
        out.append("\n")

    out.append("\n")
    out.append("".join(f"{v:>{config.value_width}}" for v in snap.values))
    out.append("\n")
    return out


# ---------------------------------------------------------------------------
# Render callback handed to the engine
# ---------------------------------------------------------------------------
class TerminalRenderer:
    """
    Callable render function: draws one Snapshot, then sleeps
    `settings.delay_ms` before handing control back to the sort.
    """

    def __init__(
        self,
        console: Console,
        settings: Settings,
        config: ChartConfig = CONFIG,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.console  = console
        self.settings = settings
        self.config   = config
        self._sleep   = sleep

    def __call__(self, snap: Snapshot) -> None:
        if self.settings.clear_screen:
            self.console.clear()
        self.console.print(render_chart(snap, self.config), soft_wrap=True)
        self.pause(self.settings.delay_ms)

    def pause(self, ms: Optional[int]) -> None:
        if ms:
            self._sleep(ms / 1000)
