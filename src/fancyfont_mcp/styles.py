"""Style table for the Unicode "fancy font" converter.

Each style maps ASCII A-Z and a-z onto a run of the Mathematical
Alphanumeric Symbols block (U+1D400..U+1D7FF). Some letters were assigned
to the Letterlike Symbols block (U+2100..U+214F) long before the math block
existed, so the math block leaves holes for them. Those letters are listed
per style as exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Style(str, Enum):
    """Closed set of decorative styles."""

    FRAKTUR = "fraktur"
    BOLD_SCRIPT = "bold_script"
    DOUBLE_STRUCK = "double_struck"
    MONOSPACE = "monospace"
    BOLD_SANS_SERIF = "bold_sans_serif"
    BOLD_SERIF = "bold_serif"


DEFAULT_STYLE = Style.BOLD_SANS_SERIF


@dataclass(frozen=True)
class StyleBlock:
    """Code points of a style's capital A and small a, plus its holes."""

    upper_base: int
    lower_base: int
    exceptions: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))


def _block(upper: int, lower: int, exceptions: dict[str, int] | None = None) -> StyleBlock:
    return StyleBlock(upper, lower, MappingProxyType(dict(exceptions or {})))


# ---------------------------------------------------------------------------
# Style → block table (read-only, built once at import)
# ---------------------------------------------------------------------------

STYLE_BLOCKS: Mapping[Style, StyleBlock] = MappingProxyType({
    # Mathematical Fraktur: 𝔄 .. 𝔞
    Style.FRAKTUR: _block(0x1D504, 0x1D51E, {
        "C": 0x212D,  # ℭ
        "H": 0x210C,  # ℌ
        "I": 0x2111,  # ℑ
        "R": 0x211C,  # ℜ
        "Z": 0x2128,  # ℨ
    }),
    # Mathematical Bold Script: 𝓐 .. 𝓪
    Style.BOLD_SCRIPT: _block(0x1D4D0, 0x1D4EA),
    # Mathematical Double-Struck: 𝔸 .. 𝕒
    Style.DOUBLE_STRUCK: _block(0x1D538, 0x1D552, {
        "C": 0x2102,  # ℂ
        "H": 0x210D,  # ℍ
        "N": 0x2115,  # ℕ
        "P": 0x2119,  # ℙ
        "Q": 0x211A,  # ℚ
        "R": 0x211D,  # ℝ
        "Z": 0x2124,  # ℤ
    }),
    # Mathematical Monospace: 𝙰 .. 𝚊
    Style.MONOSPACE: _block(0x1D670, 0x1D68A),
    # Mathematical Sans-Serif Bold: 𝗔 .. 𝗮
    Style.BOLD_SANS_SERIF: _block(0x1D5D4, 0x1D5EE),
    # Mathematical Bold: 𝐀 .. 𝐚
    Style.BOLD_SERIF: _block(0x1D400, 0x1D41A),
})

STYLE_LABELS: Mapping[Style, str] = MappingProxyType({
    Style.FRAKTUR: "Fraktur (blackletter)",
    Style.BOLD_SCRIPT: "Bold Script",
    Style.DOUBLE_STRUCK: "Double-Struck (hollow)",
    Style.MONOSPACE: "Monospace (typewriter)",
    Style.BOLD_SANS_SERIF: "Bold Sans-Serif",
    Style.BOLD_SERIF: "Bold Serif",
})


def parse_style(token: object) -> Style | None:
    """Return the Style whose id matches ``token`` (case-insensitive), else None."""
    if isinstance(token, Style):
        return token
    if not isinstance(token, str):
        return None
    try:
        return Style(token.lower())
    except ValueError:
        return None
