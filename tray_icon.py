"""System-tray icon setup via pystray."""

from typing import Callable

import pystray
from PIL import Image
from pystray import MenuItem, Menu


def create_tray(
    icon_image: Image.Image,
    title: str,
    on_show: Callable[[], None],
    on_previous: Callable[[], None],
    on_next: Callable[[], None],
    on_exit: Callable[[], None],
) -> pystray.Icon:
    """Build and return a pystray Icon (not yet started)."""
    menu = Menu(
        MenuItem("Show Calendar", lambda _icon, _item: on_show(), default=True),
        MenuItem("Previous Month", lambda _icon, _item: on_previous()),
        MenuItem("Next Month", lambda _icon, _item: on_next()),
        Menu.SEPARATOR,
        MenuItem("Exit", lambda _icon, _item: on_exit()),
    )
    return pystray.Icon("mini-calendar", icon_image, title, menu)
