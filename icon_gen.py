"""Generate the system-tray icon (PIL Image, in-memory): a tear-off calendar page."""

from datetime import date

from PIL import Image, ImageDraw, ImageFont

from calendar_logic import MONTH_ABBR

BAND_COLOR = "#0078D4"
_FONT_FILES = ("segoeuib.ttf", "DejaVuSans-Bold.ttf", "arialbd.ttf")


def _fit_font(draw: ImageDraw.ImageDraw, text: str, width: int, height: int):
    """Largest bold font whose rendering of ``text`` fits the box.

    Falls back to Pillow's built-in bitmap font when no TrueType file is found.
    """
    for name in _FONT_FILES:
        lo, hi, best = 6, max(height * 2, 7), None
        try:
            while lo <= hi:
                mid = (lo + hi) // 2
                font = ImageFont.truetype(name, mid)
                left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
                if right - left <= width and bottom - top <= height:
                    best, lo = font, mid + 1
                else:
                    hi = mid - 1
        except OSError:
            continue
        if best is not None:
            return best
    return ImageFont.load_default()


def _draw_centred(draw: ImageDraw.ImageDraw, box: tuple[int, int, int, int],
                  text: str, fill: str) -> None:
    x0, y0, x1, y1 = box
    font = _fit_font(draw, text, x1 - x0, y1 - y0)
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    x = x0 + ((x1 - x0) - (right - left)) / 2 - left
    y = y0 + ((y1 - y0) - (bottom - top)) / 2 - top
    draw.text((x, y), text, fill=fill, font=font)


def create_icon_image(day: date, size: int = 64) -> Image.Image:
    """Return a square RGBA page: month band on top, day number below."""
    img = Image.new("RGBA", (size, size), "white")
    draw = ImageDraw.Draw(img)

    band = size * 3 // 10
    pad = max(1, size // 16)
    draw.rectangle((0, 0, size - 1, band), fill=BAND_COLOR)
    draw.rectangle((0, 0, size - 1, size - 1), outline=BAND_COLOR)

    _draw_centred(draw, (pad, pad, size - pad, band - pad),
                  MONTH_ABBR[day.month - 1].upper(), "white")
    _draw_centred(draw, (pad, band + pad, size - pad, size - pad),
                  str(day.day), "black")
    return img
