"""Shared fixtures for the test modules."""

import io

from rich.console import Console

from engine import SortEngine, Recorder
from model import ArrayModel


def capture_run(key, values):
    """Run one sort with no drawing and return (model, recorder)."""
    model = ArrayModel(values)
    rec = Recorder(algo_key=key)
    SortEngine(model).run(key, rec)
    return model, rec


def make_console(width: int = 200) -> Console:
    return Console(file=io.StringIO(), width=width, force_terminal=False, color_system=None)


def console_text(console: Console) -> str:
    return console.file.getvalue()
