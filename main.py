"""Entry point — glues pystray (daemon thread) with tkinter (main thread)."""

import logging
import threading
from datetime import date
import tkinter as tk

from calendar_widget import CalendarWidget, EventPayload
from calendar_window import GRID_BG, TkRenderer
from icon_gen import create_icon_image
from settings import apply_disabled_days, load_settings, widget_options
from tray_icon import create_tray

logger = logging.getLogger(__name__)


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=settings["log_level"],
        format="%(asctime)s | %(levelname)-8s | %(message)s",
    )

    root = tk.Tk()
    root.title("Mini Calendar")
    root.resizable(False, False)
    root.configure(bg=GRID_BG)
    tk.Frame(root, name="calendar", bg=GRID_BG).pack(padx=6, pady=4)

    tray = None
    cal = None

    def on_day_changed(payload: EventPayload) -> None:
        logger.info("Day changed: %s", payload.date)
        if tray is not None:
            tray.icon = create_icon_image(payload.date)
            tray.title = f"Mini Calendar – {payload.date:%d.%m.%Y}"

    def on_month_changed(payload: EventPayload) -> None:
        logger.info("Month changed: %s", payload.date)
        if cal is not None:
            apply_disabled_days(cal, settings)

    # Callbacks marshalled onto the tkinter main thread
    def on_show() -> None:
        def _show() -> None:
            root.deiconify()
            root.lift()
            root.focus_force()
        root.after(0, _show)

    def on_previous() -> None:
        root.after(0, cal.previous_month)

    def on_next() -> None:
        root.after(0, cal.next_month)

    def on_exit() -> None:
        def _quit() -> None:
            tray.stop()
            root.destroy()
        root.after(0, _quit)

    tray = create_tray(create_icon_image(date.today()), "Mini Calendar",
                       on_show, on_previous, on_next, on_exit)
    cal = CalendarWidget(
        TkRenderer(root),
        on_day_changed=on_day_changed,
        on_month_changed=on_month_changed,
        **widget_options(settings),
    )
    apply_disabled_days(cal, settings)

    root.protocol("WM_DELETE_WINDOW", root.withdraw)

    # Run pystray in a daemon thread so it doesn't block tkinter
    tray_thread = threading.Thread(target=tray.run, daemon=True)
    tray_thread.start()

    # tkinter main loop on the main thread
    root.mainloop()


if __name__ == "__main__":
    main()
