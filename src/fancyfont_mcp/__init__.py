"""fancyfont-mcp: Unicode "fancy font" text styling."""

from fancyfont_mcp.formatter import (
    preview_all,
    transform,
    transform_by_category,
    transform_explicit,
)
from fancyfont_mcp.resolver import CategoryDescriptor, RawStyle, Selector, resolve
from fancyfont_mcp.styles import STYLE_BLOCKS, Style, StyleBlock

__version__ = "0.1.0"

__all__ = [
    "CategoryDescriptor",
    "RawStyle",
    "STYLE_BLOCKS",
    "Selector",
    "Style",
    "StyleBlock",
    "preview_all",
    "resolve",
    "transform",
    "transform_by_category",
    "transform_explicit",
]
