"""Character rendering of a lake map."""

from dataclasses import dataclass

from ..core.grid import Grid


@dataclass(frozen=True)
class GlyphPalette:
    """One glyph per depth bucket."""

    land: str = "▓"
    shallow: str = "░"  # 1-9
    band_10: str = "~"  # 10-19
    band_20: str = "≈"  # 20-29
    band_30: str = "▒"  # 30-39
    deepest: str = "█"  # 40 and deeper


DEFAULT_PALETTE = GlyphPalette()


def glyph_for_depth(depth: int, palette: GlyphPalette = DEFAULT_PALETTE) -> str:
    if depth <= 0:
        return palette.land
    if depth < 10:
        return palette.shallow
    if depth < 20:
        return palette.band_10
    if depth < 30:
        return palette.band_20
    if depth < 40:
        return palette.band_30
    return palette.deepest


def render_map(global_map: Grid, palette: GlyphPalette = DEFAULT_PALETTE) -> str:
    """Render the map as text, one line per row, top row first."""
    lines = []
    for row in global_map.to_rows():
        lines.append("".join(glyph_for_depth(depth, palette) for depth in row))
    return "\n".join(lines)
