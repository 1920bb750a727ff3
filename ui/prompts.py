"""
prompts.py — Input Collaborators
==================================
Everything that reads from the user:

  • read_menu_choice     – one menu code, re-prompts until it is valid
  • read_int             – one integer, a single attempt (None if not an integer)
  • read_custom_values   – a count in [MIN_SIZE, MAX_SIZE], then that many ints
  • wait_for_enter       – "Press Enter to continue..."

Every function takes an optional `stream`; tests pass a StringIO in
place of stdin.  End of input raises EOFError just like input() does.

Bounds violations and non-integer entries are NOT retried: the caller
reports them and returns to the menu with its previous state untouched.
"""

import logging
from typing import Iterable, List, Optional, TextIO

from rich.console import Console
from rich.markup import escape
from rich.prompt import IntPrompt

from config import MIN_SIZE, MAX_SIZE, valid_size

logger = logging.getLogger(__name__)


class _IntPrompt(IntPrompt):
    """IntPrompt that treats an exhausted stream as EOF instead of re-prompting forever."""

    @classmethod
    def get_input(cls, console: Console, prompt, password: bool, stream: Optional[TextIO] = None) -> str:
        return _read_line(console, prompt, stream, password=password)


def _read_line(console: Console, prompt, stream: Optional[TextIO], password: bool = False) -> str:
    text = console.input(prompt, password=password, stream=stream)
    if stream is not None and text == "":
        raise EOFError
    return text


# ---------------------------------------------------------------------------
# Menu & single values
# ---------------------------------------------------------------------------
def read_menu_choice(console: Console, choices: Iterable[int], stream: Optional[TextIO] = None) -> int:
    return _IntPrompt.ask(
        "Enter choice",
        console=console,
        choices=[str(c) for c in choices],
        show_choices=False,
        stream=stream,
    )


def read_int(console: Console, prompt: str, stream: Optional[TextIO] = None) -> Optional[int]:
    """One attempt; None when the line is not an integer."""
    text = _read_line(console, f"{prompt}: ", stream).strip()
    try:
        return int(text)
    except ValueError:
        logger.debug("Rejected non-integer input %r", text)
        return None


def wait_for_enter(console: Console, stream: Optional[TextIO] = None) -> None:
    _read_line(console, "Press Enter to continue...", stream)


# ---------------------------------------------------------------------------
# Custom array
# ---------------------------------------------------------------------------
def read_custom_values(console: Console, stream: Optional[TextIO] = None) -> Optional[List[int]]:
    """
    Returns the entered values, or None when the input was rejected.

    Values may be spread over several lines; reading stops at the line
    that brings the count to n.  More than n values is rejected rather
    than truncated.
    """
    n = read_int(console, f"Enter the number of elements ({MIN_SIZE}-{MAX_SIZE})", stream)
    if n is None or not valid_size(n):
        console.print(f"[red]Invalid size! Please enter between {MIN_SIZE} and {MAX_SIZE}.[/red]")
        logger.debug("Rejected custom array size %s", n)
        return None

    console.print(f"Enter {n} integers separated by spaces:")
    tokens: List[str] = []
    while len(tokens) < n:
        tokens.extend(_read_line(console, "", stream).split())

    if len(tokens) > n:
        console.print(f"[red]Expected {n} values, got {len(tokens)}. Array unchanged.[/red]")
        logger.debug("Rejected %d custom array tokens for size %d", len(tokens), n)
        return None

    values: List[int] = []
    for tok in tokens:
        try:
            values.append(int(tok))
        except ValueError:
            console.print(f"[red]Invalid number: '{escape(tok)}'. Array unchanged.[/red]")
            logger.debug("Rejected custom array token %r", tok)
            return None
    return values
