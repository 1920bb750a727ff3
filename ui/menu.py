"""
menu.py — Interactive Menu Loop
================================
Reads one numeric choice per iteration and dispatches it.

    1  Generate New Random Array
    2  Input Custom Array
    3  Bubble Sort          4  Selection Sort
    5  Insertion Sort       6  Quick Sort
    7  Change Array Size    8  Change Animation Speed
    9  Display Current Array
    0  Exit

Codes outside this set are re-prompted.  Size and delay entries that are
not integers or out of bounds are reported once, with no retry, and leave
Settings untouched.  Ctrl+C during a sort cancels that sort; Ctrl+C or end
of input at the prompt leaves the loop.
"""

import logging
import random
from enum import IntEnum
from typing import Optional, TextIO

from rich.console import Console

from config import Settings, MIN_SIZE, MAX_SIZE, MIN_DELAY_MS, MAX_DELAY_MS
from engine import SortEngine, Recorder
from model import ArrayModel
from sorts import get_algorithm
from sorts.step import Snapshot
from ui.prompts import read_menu_choice, read_int, read_custom_values, wait_for_enter
from ui.renderer import TerminalRenderer

logger = logging.getLogger(__name__)


class MenuAction(IntEnum):
    EXIT      = 0
    GENERATE  = 1
    CUSTOM    = 2
    BUBBLE    = 3
    SELECTION = 4
    INSERTION = 5
    QUICK     = 6
    SIZE      = 7
    SPEED     = 8
    DISPLAY   = 9


MENU_LABELS = {
    MenuAction.GENERATE:  "Generate New Random Array",
    MenuAction.CUSTOM:    "Input Custom Array",
    MenuAction.BUBBLE:    "Bubble Sort",
    MenuAction.SELECTION: "Selection Sort",
    MenuAction.INSERTION: "Insertion Sort",
    MenuAction.QUICK:     "Quick Sort",
    MenuAction.SIZE:      "Change Array Size (for random generation)",
    MenuAction.SPEED:     "Change Animation Speed",
    MenuAction.DISPLAY:   "Display Current Array",
    MenuAction.EXIT:      "Exit",
}

SORT_ACTIONS = {
    MenuAction.BUBBLE:    "bubble",
    MenuAction.SELECTION: "selection",
    MenuAction.INSERTION: "insertion",
    MenuAction.QUICK:     "quick",
}


class Menu:
    """
    Attributes:
        console  : Where everything is printed.
        settings : Shared, mutated by the size / speed actions.
        model    : The array every action works on.
        engine   : Runs the sorts.
        renderer : Render callback handed to the engine.
        stream   : Input source (None = stdin).
    """

    def __init__(
        self,
        console: Console,
        settings: Settings,
        model: Optional[ArrayModel] = None,
        renderer: Optional[TerminalRenderer] = None,
        stream: Optional[TextIO] = None,
    ):
        self.console  = console
        self.settings = settings
        self.rng      = random.Random(settings.seed)
        self.model    = model if model is not None else ArrayModel()
        self.engine   = SortEngine(self.model)
        self.renderer = renderer or TerminalRenderer(console, settings)
        self.stream   = stream

        if len(self.model) == 0:
            self.model.generate(settings.size, self.rng)

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------
    def loop(self) -> None:
        while True:
            self.print_menu()
            try:
                choice = MenuAction(read_menu_choice(self.console, [a.value for a in MenuAction], self.stream))
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                break

            if choice == MenuAction.EXIT:
                break
            self.dispatch(choice)

            if self.settings.pause_after_action:
                try:
                    wait_for_enter(self.console, self.stream)
                except (EOFError, KeyboardInterrupt):
                    break

        self.console.print("Thanks for using Sorting Visualizer!")

    def print_menu(self) -> None:
        self.console.print("\n[cyan]=== SORTING VISUALIZER ===[/cyan]")
        for action in list(MenuAction)[1:] + [MenuAction.EXIT]:
            self.console.print(f"{action.value}. {MENU_LABELS[action]}")
        self.console.print(
            f"Current Array Size: {len(self.model)} | Speed: {self.settings.delay_ms}ms"
        )

    def dispatch(self, choice: MenuAction) -> None:
        try:
            if choice in SORT_ACTIONS:
                self.run_sort(SORT_ACTIONS[choice])
            elif choice == MenuAction.GENERATE:
                self.generate()
            elif choice == MenuAction.CUSTOM:
                self.input_custom()
            elif choice == MenuAction.SIZE:
                self.change_size()
            elif choice == MenuAction.SPEED:
                self.change_speed()
            elif choice == MenuAction.DISPLAY:
                self.display()
        except EOFError:
            self.console.print("[red]No input.[/red]")

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    def generate(self) -> None:
        self.model.generate(self.settings.size, self.rng)
        self.console.print("New random array generated!")

    def input_custom(self) -> None:
        values = read_custom_values(self.console, self.stream)
        if values is None:
            return
        self.model.set_custom(values)
        self.settings.size = len(values)
        if self.model.non_positive_count():
            self.console.print("[yellow]Warning: Non-positive values will be displayed as empty bars![/yellow]")
        self.console.print("Custom array created successfully!")
        self.renderer(Snapshot.of(self.model, "Custom Array"))

    def change_size(self) -> None:
        n = read_int(self.console, f"Enter new array size for random generation ({MIN_SIZE}-{MAX_SIZE})", self.stream)
        if n is None or not self.settings.set_size(n):
            self.console.print(f"[red]Invalid size! Please enter between {MIN_SIZE} and {MAX_SIZE}.[/red]")
            logger.debug("Rejected size %s", n)
            return
        self.model.generate(self.settings.size, self.rng)
        self.console.print(f"Random array size changed to {self.settings.size}")

    def change_speed(self) -> None:
        ms = read_int(self.console, f"Enter animation delay in milliseconds ({MIN_DELAY_MS}-{MAX_DELAY_MS})", self.stream)
        if ms is None or not self.settings.set_delay(ms):
            self.console.print(f"[red]Invalid delay! Please enter between {MIN_DELAY_MS} and {MAX_DELAY_MS}.[/red]")
            logger.debug("Rejected delay %s", ms)
            return
        self.console.print(f"Animation speed changed to {self.settings.delay_ms}ms")

    def display(self) -> None:
        self.renderer(Snapshot.of(self.model))

    def run_sort(self, key: str) -> None:
        info = get_algorithm(key)
        self.console.print(f"Starting {info.label}...")
        self.console.print(f"[dim]{info.description} {info.complexity_time}[/dim]")

        rec = Recorder(forward=self.renderer, algo_key=info.key)
        try:
            self.renderer.pause(self.settings.intro_pause_ms)
            self.engine.run(info, rec)
        except KeyboardInterrupt:
            logger.info("%s interrupted", info.label)

        m = rec.metrics()
        if not m.completed:
            self.console.print(f"[yellow]{info.label} interrupted.[/yellow]")
            return
        self.console.print(
            f"{info.label}: {m.total_steps} steps, {m.comparisons} comparisons, "
            f"{m.swaps} swaps, {m.writes} writes ({m.wall_time_ms:.0f} ms)"
        )
        if not m.sorted_ok:
            self.console.print(f"[red]{info.label} finished but the array is not sorted.[/red]")
            logger.warning("%s left the array unsorted: %s", m.algo_key, self.model.values)
