"""Curses painter and input loop.

This is the only module that touches the real terminal. It paints the
blocks produced by `tui.views.render` and feeds decoded key presses back
into the application.
"""

from __future__ import annotations

import curses
import os
from typing import TYPE_CHECKING, List, Optional

from gazie.utils.logger import get_logger
from tui.keys import Event, ResizeEvent, decode_key
from tui.views import Block, Style, render

if TYPE_CHECKING:  # pragma: no cover
    from tui.app import GazieApp

logger = get_logger(__name__)

HEADER_PAIR = 1
STATUS_PAIR = 2


class Terminal:
    """Paints blocks onto a curses window: header, boxed body, status bar."""

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self._setup()

    def _setup(self) -> None:
        curses.raw()  # Ctrl+C arrives as a key instead of SIGINT
        self.stdscr.keypad(True)
        try:
            curses.curs_set(0)
        except curses.error:
            pass  # terminal cannot hide the cursor
        if curses.has_colors():
            curses.use_default_colors()
            curses.init_pair(HEADER_PAIR, curses.COLOR_CYAN, -1)
            curses.init_pair(STATUS_PAIR, curses.COLOR_WHITE, curses.COLOR_BLACK)

    def size(self) -> tuple:
        height, width = self.stdscr.getmaxyx()
        return width, height

    def _put(self, y: int, x: int, text: str, attr: int = 0) -> None:
        width, height = self.size()
        if y < 0 or y >= height or x >= width:
            return
        try:
            self.stdscr.addnstr(y, x, text, width - x, attr)
        except curses.error:
            # Writing the bottom-right cell moves the cursor off-screen; the
            # character is still drawn.
            pass

    def paint(self, blocks: List[Block]) -> None:
        width, height = self.size()
        self.stdscr.erase()
        body_top = 2
        body_bottom = height - 2
        for block in blocks:
            if block.style == Style.HEADER:
                self._put(1, 2, block.text, curses.A_BOLD | curses.color_pair(HEADER_PAIR))
            elif block.style == Style.BODY:
                self._paint_body(block.text, body_top + 1, body_bottom, width)
            elif block.style == Style.STATUS:
                bar = block.text.ljust(width)[: max(width - 1, 0)]
                self._put(height - 1, 0, bar, curses.A_REVERSE | curses.color_pair(STATUS_PAIR))
        self.stdscr.refresh()

    def _paint_body(self, text: str, top: int, bottom: int, width: int) -> None:
        if bottom - top < 2 or width < 6:
            return
        try:
            box = self.stdscr.derwin(bottom - top, width - 2, top, 1)
            box.box()
        except curses.error:
            return
        for i, line in enumerate(text.split("\n")):
            y = top + 1 + i
            if y >= bottom - 1:
                break
            self._put(y, 4, line[: max(width - 8, 0)])

    def read_event(self) -> Optional[Event]:
        try:
            ch = self.stdscr.get_wch()
        except curses.error:
            return None
        if ch == curses.KEY_RESIZE:
            width, height = self.size()
            return ResizeEvent(width, height)
        return decode_key(ch)


def _loop(stdscr, app: "GazieApp") -> None:
    terminal = Terminal(stdscr)
    app.dispatch(ResizeEvent(*terminal.size()))
    while True:
        terminal.paint(render(app.state))
        event = terminal.read_event()
        if event is None:
            continue
        if not app.dispatch(event):
            break


def run(app: "GazieApp") -> None:
    """Run the interactive session until the user quits."""
    # A lone Escape should register quickly.
    os.environ.setdefault("ESCDELAY", "25")
    curses.wrapper(_loop, app)
