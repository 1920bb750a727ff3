"""
ui/
---
Presentation layer.

    from ui import console, TerminalRenderer, Menu
"""

from ui.console  import console
from ui.renderer import render_chart, ChartConfig, TerminalRenderer
from ui.menu     import Menu, MenuAction

__all__ = [
    "console",
    "render_chart",
    "ChartConfig",
    "TerminalRenderer",
    "Menu",
    "MenuAction",
]
