"""tkinter renderer for the calendar widget."""

import logging
from tkinter import font as tkfont
import tkinter as tk
from typing import Callable

from calendar_widget import MissingMountTarget

logger = logging.getLogger(__name__)

# Colours
ACCENT = "#0078D4"
HEADER_BG = "#F3F3F3"
GRID_BG = "white"
DISABLED_FG = "#BBBBBB"
DAY_NAME_FG = "#888888"


class TkRenderer:
    """Draws the month grid with ``tk.Label`` cells inside a mounted frame.

    Rows are grid row indices; cells are the labels themselves.
    """

    def __init__(self, root: tk.Misc) -> None:
        self.root = root
        self._setup_fonts()
        self._container: tk.Widget | None = None
        self._title: tk.Label | None = None
        self._body: tk.Frame | None = None
        self._row_count = 0
        self._col_count: dict[int, int] = {}

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_normal = tkfont.Font(root=self.root, family=base, size=9)
        self.font_bold = tkfont.Font(root=self.root, family=base, size=9, weight="bold")
        self.font_header = tkfont.Font(root=self.root, family=base, size=10, weight="bold")
        self.font_nav = tkfont.Font(root=self.root, family=base, size=12, weight="bold")

    # ------------------------------------------------------------------
    # Shell: ◀  title  ▶ over an empty body
    # ------------------------------------------------------------------
    def mount(self, selector: str, previous_symbol: str, next_symbol: str,
              on_previous: Callable[[], None],
              on_next: Callable[[], None]) -> None:
        try:
            container = self.root.nametowidget(selector)
        except KeyError:
            raise MissingMountTarget(selector) from None
        for child in container.winfo_children():
            child.destroy()
        self._container = container

        nav = tk.Frame(container, bg=HEADER_BG)
        nav.pack(fill="x", pady=(0, 2))

        btn_prev = tk.Label(
            nav, text=previous_symbol, font=self.font_nav, bg=HEADER_BG, cursor="hand2",
        )
        btn_prev.pack(side="left", padx=6)
        btn_prev.bind("<Button-1>", lambda _e: on_previous())

        btn_next = tk.Label(
            nav, text=next_symbol, font=self.font_nav, bg=HEADER_BG, cursor="hand2",
        )
        btn_next.pack(side="right", padx=6)
        btn_next.bind("<Button-1>", lambda _e: on_next())

        self._title = tk.Label(
            nav, font=self.font_header, bg=HEADER_BG, fg="#333333",
        )
        self._title.pack(side="left", expand=True)

        self._body = tk.Frame(container, bg=GRID_BG)
        self._body.pack()
        logger.debug("Mounted tk renderer on %s", selector)

    def _require_body(self) -> tk.Frame:
        if self._body is None:
            raise RuntimeError("renderer used before mount()")
        return self._body

    # ------------------------------------------------------------------
    # Grid building
    # ------------------------------------------------------------------
    def clear(self) -> None:
        for child in self._require_body().winfo_children():
            child.destroy()
        self._row_count = 0
        self._col_count.clear()

    def set_title(self, text: str) -> None:
        if self._title is not None:
            self._title.configure(text=text)

    def create_row(self) -> int:
        row = self._row_count
        self._row_count += 1
        self._col_count[row] = 0
        return row

    def create_cell(self, row: int, text: str) -> tk.Label:
        col = self._col_count[row]
        self._col_count[row] = col + 1
        # Row 0 holds the day names
        is_header = row == 0
        cell = tk.Label(
            self._require_body(), text=text, width=3,
            font=self.font_bold if is_header else self.font_normal,
            bg=GRID_BG, fg=DAY_NAME_FG if is_header else "black",
        )
        cell.grid(row=row, column=col, padx=1, pady=1)
        return cell

    def mark_selected(self, cell: tk.Label) -> None:
        cell.configure(bg=ACCENT, fg="white", font=self.font_bold)

    def mark_disabled(self, cell: tk.Label) -> None:
        cell.configure(fg=DISABLED_FG, cursor="")

    def attach_click_handler(self, cell: tk.Label, handler: Callable[[], None]) -> None:
        cell.configure(cursor="hand2")
        cell.bind("<Button-1>", lambda _e: handler())
