"""Large block-glyph rendering for the detail view."""

from typing import Dict, List, Tuple

GLYPH_HEIGHT = 5
GLYPH_WIDTH = 7

_BLANK: Tuple[str, ...] = (" " * GLYPH_WIDTH,) * GLYPH_HEIGHT

BIG_GLYPHS: Dict[str, Tuple[str, ...]] = {
    "0": (" █████ ", " █   █ ", " █   █ ", " █   █ ", " █████ "),
    "1": ("   ██  ", "    █  ", "    █  ", "    █  ", "  █████"),
    "2": (" █████ ", "     █ ", " █████ ", " █     ", " █████ "),
    "3": (" █████ ", "     █ ", "  ████ ", "     █ ", " █████ "),
    "4": (" █   █ ", " █   █ ", " █████ ", "     █ ", "     █ "),
    "5": (" █████ ", " █     ", " █████ ", "     █ ", " █████ "),
    "6": (" █████ ", " █     ", " █████ ", " █   █ ", " █████ "),
    "7": (" █████ ", "     █ ", "    █  ", "   █   ", "   █   "),
    "8": (" █████ ", " █   █ ", " █████ ", " █   █ ", " █████ "),
    "9": (" █████ ", " █   █ ", " █████ ", "     █ ", " █████ "),
    ":": ("       ", "   █   ", "       ", "   █   ", "       "),
    ".": ("       ", "       ", "       ", "       ", "   █   "),
    " ": _BLANK,
}


def render_big_text(text: str) -> str:
    """Render text as rows of block glyphs.

    Characters without a glyph render as blank cells of the same width.

    Args:
        text: Time-like text, e.g. ``"12:34:56.78"``

    Returns:
        ``GLYPH_HEIGHT`` lines joined with newlines
    """
    rows: List[str] = [""] * GLYPH_HEIGHT
    for char in text:
        glyph = BIG_GLYPHS.get(char, _BLANK)
        for i in range(GLYPH_HEIGHT):
            rows[i] += glyph[i]
    return "\n".join(rows)
