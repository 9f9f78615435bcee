"""Font category/family → decorative style resolution.

A caller either already knows the style it wants (``RawStyle``) or only
knows the font it picked (``CategoryDescriptor``), e.g. a Google Fonts
entry with ``category="serif"`` and ``family="Playfair Display"``.

Resolution order (first match wins):
    1. explicit style id                  → that style
    2. category "monospace", or family
       containing "mono" / "code"         → monospace
    3. cursive / script / handwriting     → bold_script
    4. serif                              → fraktur
    5. sans-serif                         → double_struck
    6. anything else                      → bold_sans_serif
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Union

from fancyfont_mcp.styles import DEFAULT_STYLE, Style, parse_style

logger = logging.getLogger(__name__)

_SCRIPT_CATEGORIES = frozenset({"cursive", "script", "handwriting"})
_MONO_FAMILY_HINTS = ("mono", "code")


@dataclass(frozen=True)
class RawStyle:
    """A style token supplied as-is by the caller."""

    style: str


@dataclass(frozen=True)
class CategoryDescriptor:
    """Font metadata hint: generic category plus optional family name."""

    category: str = ""
    family: str | None = None


Selector = Union[RawStyle, CategoryDescriptor]


def selector_from(value: object) -> Selector:
    """Build a selector from loose caller input.

    Strings become ``RawStyle``; mappings become ``CategoryDescriptor``
    (``category`` / ``family`` keys, missing or None treated as empty).
    Anything unrecognized becomes an empty descriptor, which resolves to
    the default style.
    """
    if isinstance(value, (RawStyle, CategoryDescriptor)):
        return value
    if isinstance(value, str):
        return RawStyle(value)
    if isinstance(value, Mapping):
        category = value.get("category")
        family = value.get("family")
        return CategoryDescriptor(
            category=category if isinstance(category, str) else "",
            family=family if isinstance(family, str) else None,
        )
    return CategoryDescriptor()


def resolve_category(category: str | None, family: str | None = None) -> Style:
    """Map a font category/family hint onto a style. Never fails."""
    category = category.lower() if isinstance(category, str) else ""
    family = family.lower() if isinstance(family, str) else ""

    # Family hint overrides category for monospace
    if category == "monospace" or any(hint in family for hint in _MONO_FAMILY_HINTS):
        return Style.MONOSPACE
    if category in _SCRIPT_CATEGORIES:
        return Style.BOLD_SCRIPT
    if category == "serif":
        return Style.FRAKTUR
    if category == "sans-serif":
        return Style.DOUBLE_STRUCK

    logger.debug("No style rule for category=%r family=%r; using %s",
                 category, family, DEFAULT_STYLE.value)
    return DEFAULT_STYLE


def resolve(selector: Selector | str | Mapping | None) -> Style:
    """Resolve any selector to a canonical style, defaulting to bold_sans_serif.

    A raw token that is not a style id is read as a category name, so
    ``resolve("serif")`` and ``resolve(CategoryDescriptor("serif"))`` agree.
    """
    selector = selector_from(selector)

    if isinstance(selector, RawStyle):
        style = parse_style(selector.style)
        if style is not None:
            return style
        return resolve_category(selector.style)

    return resolve_category(selector.category, selector.family)
