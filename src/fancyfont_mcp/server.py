"""fancyfont-mcp: FastMCP server for Unicode "fancy font" text styling.

Exposes the style resolver and formatter as MCP tools so agents and the
web UI can produce copy-pasteable styled text for social bios and posts.
"""

from __future__ import annotations

import logging
from typing import Any

from fastmcp import FastMCP

from fancyfont_mcp.formatter import preview_all, transform_by_category, transform_explicit
from fancyfont_mcp.resolver import CategoryDescriptor, RawStyle, resolve
from fancyfont_mcp.styles import DEFAULT_STYLE, STYLE_BLOCKS, STYLE_LABELS, parse_style

logger = logging.getLogger(__name__)

mcp = FastMCP("FancyFont")


# ---------------------------------------------------------------------------
# Settings singleton
# ---------------------------------------------------------------------------

_settings = None


def get_settings():
    """Get or create the Settings singleton."""
    global _settings
    if _settings is not None:
        return _settings
    from fancyfont_mcp.config import Settings

    _settings = Settings()
    return _settings


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _too_long(text: str) -> dict[str, Any] | None:
    """Return an error dict when text exceeds the configured limit, else None."""
    limit = get_settings().max_text_length
    if len(text) > limit:
        return {
            "success": False,
            "error": f"Text is {len(text)} characters; the limit is {limit}.",
            "length": len(text),
        }
    return None


def _codepoint(value: int) -> str:
    return f"U+{value:04X}"


# ---------------------------------------------------------------------------
# MCP Tools
# ---------------------------------------------------------------------------


@mcp.tool()
async def health() -> dict:
    """Health check — returns service version and status."""
    import importlib.metadata as _meta

    from fancyfont_mcp import __version__

    versions: dict[str, str] = {"fancyfont_mcp": __version__}
    try:
        versions["fastmcp"] = _meta.version("fastmcp")
    except _meta.PackageNotFoundError:
        versions["fastmcp"] = "unknown"

    return {
        "service": "fancyfont-mcp",
        "version": __version__,
        "versions": versions,
        "status": "ok",
    }


@mcp.tool()
async def list_styles() -> dict[str, Any]:
    """List the available styles with their Unicode base code points.

    Returns:
        styles: One entry per style — id, label, upper_base, lower_base,
            and the letters that map outside the math block (exceptions).
        default: Style used when a font category is not recognized.
    """
    styles = [
        {
            "id": style.value,
            "label": STYLE_LABELS[style],
            "upper_base": _codepoint(block.upper_base),
            "lower_base": _codepoint(block.lower_base),
            "exceptions": {ch: _codepoint(cp) for ch, cp in block.exceptions.items()},
        }
        for style, block in STYLE_BLOCKS.items()
    ]
    return {"styles": styles, "default": DEFAULT_STYLE.value}


@mcp.tool()
async def resolve_style(
    style: str | None = None,
    category: str | None = None,
    family: str | None = None,
) -> dict[str, Any]:
    """Resolve a style id, or a font category/family hint, to a style.

    Args:
        style: Explicit style id (fraktur, bold_script, double_struck,
            monospace, bold_sans_serif, bold_serif). Takes precedence.
        category: Font category, e.g. serif, sans-serif, monospace,
            handwriting, display.
        family: Font family name, e.g. "Roboto Mono". A family containing
            "mono" or "code" always resolves to monospace.

    Returns:
        style: The resolved style id. Unknown input resolves to bold_sans_serif.
    """
    if style:
        selector = RawStyle(style)
    else:
        selector = CategoryDescriptor(category=category or "", family=family)
    return {"style": resolve(selector).value}


@mcp.tool()
async def stylize_text(
    text: str,
    style: str | None = None,
    category: str | None = None,
    family: str | None = None,
) -> dict[str, Any]:
    """Convert plain text to a Unicode "fancy font".

    Letters A-Z and a-z are replaced with Unicode Mathematical Alphanumeric
    Symbols; digits, punctuation and emoji pass through unchanged:

        fraktur         → 𝔉𝔞𝔫𝔠𝔶
        bold_script     → 𝓕𝓪𝓷𝓬𝔂
        double_struck   → 𝔽𝕒𝕟𝕔𝕪
        monospace       → 𝙵𝚊𝚗𝚌𝚢
        bold_sans_serif → 𝗙𝗮𝗻𝗰𝘆
        bold_serif      → 𝐅𝐚𝐧𝐜𝐲

    Args:
        text: Plain text to convert.
        style: Explicit style id. An unknown id leaves the text unchanged.
        category: Font category used when no style is given.
        family: Font family name used when no style is given.

    Returns:
        text: The converted text.
        style: Style applied, or None if an unknown explicit style was given.
        length: Length of the converted text in code points.
    """
    error = _too_long(text)
    if error is not None:
        return error

    if style:
        applied = parse_style(style)
        converted = transform_explicit(text, style)
    else:
        selector = CategoryDescriptor(category=category or "", family=family)
        applied = resolve(selector)
        converted = transform_by_category(text, selector)

    return {
        "text": converted,
        "style": applied.value if applied is not None else None,
        "length": len(converted),
    }


@mcp.tool()
async def preview_styles(text: str) -> dict[str, Any]:
    """Render text in every available style, keyed by style id."""
    error = _too_long(text)
    if error is not None:
        return error
    return {"previews": preview_all(text)}


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """Entry point for the FancyFont MCP server."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    logger.info("Starting FancyFont MCP server (max_text_length=%d).", settings.max_text_length)
    mcp.run()


if __name__ == "__main__":
    main()
