from __future__ import annotations

from PIL import Image, ImageDraw


_ICON_SIZE = (64, 64)

ACTIVE_COLOR = (0, 122, 255)
INACTIVE_COLOR = (142, 142, 147)


def icon_color(*, is_monitoring: bool) -> tuple[int, int, int]:
    return ACTIVE_COLOR if is_monitoring else INACTIVE_COLOR


def create_icon(color: tuple[int, int, int]) -> Image.Image:
    """Draw a "wifi.slash" style glyph: three arcs, a dot and a strike."""

    img = Image.new("RGBA", _ICON_SIZE, color=(0, 0, 0, 0))
    draw = ImageDraw.Draw(img)

    cx, cy = 32, 50
    for radius in (12, 24, 36):
        box = [cx - radius, cy - radius, cx + radius, cy + radius]
        draw.arc(box, start=225, end=315, fill=color, width=5)

    draw.ellipse([cx - 4, cy - 4, cx + 4, cy + 4], fill=color)
    draw.line([(10, 8), (54, 56)], fill=color, width=5)
    return img
