"""
Presentation of generated maps.
"""

from .ascii_renderer import GlyphPalette, glyph_for_depth, render_map

__all__ = ['GlyphPalette', 'glyph_for_depth', 'render_map']
