"""Plain text → Unicode "fancy font" formatter.

Converts ASCII letters to Unicode Mathematical Alphanumeric Symbols so the
text renders as styled on platforms that only accept plain text (social
bios, posts, chat). Digits, punctuation, whitespace and any non-ASCII
input pass through unchanged.

Two entry points, with different handling of an unknown style:

    transform_explicit(text, "fraktur")             unknown id → text unchanged
    transform_by_category(text, {"category": ...})  unknown    → bold_sans_serif
"""

from __future__ import annotations

from collections.abc import Mapping

from fancyfont_mcp.resolver import Selector, resolve
from fancyfont_mcp.styles import STYLE_BLOCKS, Style, StyleBlock, parse_style


def _convert_char(ch: str, block: StyleBlock) -> str:
    """Convert a single character using a style block."""
    exception = block.exceptions.get(ch)
    if exception is not None:
        return chr(exception)
    code = ord(ch)
    if 65 <= code <= 90:  # A-Z
        return chr(block.upper_base + (code - 65))
    elif 97 <= code <= 122:  # a-z
        return chr(block.lower_base + (code - 97))
    return ch


def transform(text: str | None, style: Style | str) -> str:
    """Convert ``text`` to the given style.

    ``style`` may be a Style or its id; an unrecognized id returns the
    text unchanged. Iteration is over code points, so the output always
    has the same ``len()`` as the input.
    """
    if not text:
        return ""
    resolved = parse_style(style)
    if resolved is None:
        return text
    block = STYLE_BLOCKS[resolved]
    return "".join(_convert_char(ch, block) for ch in text)


def transform_explicit(text: str | None, style: Style | str) -> str:
    """Convert text to a caller-named style; unknown style ids are a no-op."""
    return transform(text, style)


def transform_by_category(text: str | None, selector: Selector | str | Mapping | None) -> str:
    """Convert text to the style implied by a font category/family hint.

    Anything the resolver does not recognize falls back to bold sans-serif.
    """
    return transform(text, resolve(selector))


def preview_all(text: str | None) -> dict[str, str]:
    """Render ``text`` in every style, keyed by style id."""
    return {style.value: transform(text, style) for style in STYLE_BLOCKS}
