"""Tests for the plain text → Unicode fancy-font formatter."""

import string

import pytest

from fancyfont_mcp.formatter import (
    preview_all,
    transform,
    transform_by_category,
    transform_explicit,
)
from fancyfont_mcp.resolver import CategoryDescriptor
from fancyfont_mcp.styles import STYLE_BLOCKS, Style


# ---------------------------------------------------------------------------
# Per-style conversions
# ---------------------------------------------------------------------------


class TestFraktur:
    def test_mixed_case(self):
        assert transform("ABCabc", Style.FRAKTUR) == "𝔄𝔅ℭ𝔞𝔟𝔠"

    def test_first_letter_is_block_base(self):
        assert transform("A", Style.FRAKTUR) == "\U0001D504"

    def test_exceptions(self):
        assert transform("CHIRZ", Style.FRAKTUR) == "ℭℌℑℜℨ"

    def test_lowercase_has_no_exceptions(self):
        assert transform("chirz", "fraktur") == "".join(
            chr(0x1D51E + ord(ch) - ord("a")) for ch in "chirz"
        )


class TestBoldScript:
    def test_mixed_case(self):
        assert transform("ABCabc", Style.BOLD_SCRIPT) == "𝓐𝓑𝓒𝓪𝓫𝓬"

    def test_last_letters(self):
        assert transform("Zz", Style.BOLD_SCRIPT) == "\U0001D4E9\U0001D503"


class TestDoubleStruck:
    def test_mixed_case(self):
        assert transform("ABCabc", Style.DOUBLE_STRUCK) == "𝔸𝔹ℂ𝕒𝕓𝕔"

    def test_exception_beats_arithmetic(self):
        """C lives at U+2102, not in the hole at upper_base + 2."""
        assert transform("C", Style.DOUBLE_STRUCK) == "ℂ"
        assert transform("C", Style.DOUBLE_STRUCK) != chr(0x1D538 + 2)

    def test_all_exceptions(self):
        assert transform("CHNPQRZ", Style.DOUBLE_STRUCK) == "ℂℍℕℙℚℝℤ"


class TestMonospace:
    def test_digits_pass_through(self):
        assert transform("ABCabc123", Style.MONOSPACE) == "𝙰𝙱𝙲𝚊𝚋𝚌123"

    def test_punctuation_preserved(self):
        assert transform("Hello, World!", Style.MONOSPACE) == "𝙷𝚎𝚕𝚕𝚘, 𝚆𝚘𝚛𝚕𝚍!"


class TestBoldSansSerif:
    def test_mixed_case(self):
        assert transform("Aa", Style.BOLD_SANS_SERIF) == "\U0001D5D4\U0001D5EE"

    def test_digits_not_converted(self):
        """Unlike markdown bold, digits stay ASCII."""
        assert transform("v2", Style.BOLD_SANS_SERIF) == "\U0001D603" + "2"


class TestBoldSerif:
    def test_mixed_case(self):
        assert transform("Aa", Style.BOLD_SERIF) == "\U0001D400\U0001D41A"


# ---------------------------------------------------------------------------
# Properties that hold for every style
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("style", list(Style))
class TestAllStyles:
    def test_length_preserved(self, style):
        text = "Hello, World! 123 ünïcödé 🚀 𝔄"
        assert len(transform(text, style)) == len(text)

    def test_non_letters_unchanged(self, style):
        text = string.digits + string.punctuation + " \t\n" + "éßΩж中🚀"
        assert transform(text, style) == text

    def test_every_letter_changes(self, style):
        out = transform(string.ascii_letters, style)
        assert all(a != b for a, b in zip(out, string.ascii_letters))

    def test_already_styled_input_unchanged(self, style):
        styled = transform("abc", style)
        assert transform(styled, style) == styled

    def test_empty(self, style):
        assert transform("", style) == ""

    def test_style_id_string_accepted(self, style):
        assert transform("Fancy", style.value) == transform("Fancy", style)


class TestTransformEdgeCases:
    def test_none_text(self):
        assert transform(None, Style.FRAKTUR) == ""

    def test_unknown_style_is_noop(self):
        assert transform("abc", "unknown") == "abc"

    def test_style_id_case_insensitive(self):
        assert transform("A", "FRAKTUR") == "\U0001D504"

    def test_uppercase_bases_cover_all_letters(self):
        """No style maps two letters to the same code point."""
        for style in STYLE_BLOCKS:
            out = transform(string.ascii_letters, style)
            assert len(set(out)) == 52


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


class TestTransformExplicit:
    def test_known_style(self):
        assert transform_explicit("ABCabc", "double_struck") == "𝔸𝔹ℂ𝕒𝕓𝕔"

    def test_unknown_style_returns_input(self):
        assert transform_explicit("abc", "unknown") == "abc"

    def test_padded_style_id_is_noop(self):
        assert transform_explicit("abc", " fraktur ") == "abc"

    def test_category_name_is_not_a_style(self):
        """Explicit path does not interpret category names."""
        assert transform_explicit("abc", "serif") == "abc"


class TestTransformByCategory:
    def test_serif_string(self):
        assert transform_by_category("ABCabc", "serif") == "𝔄𝔅ℭ𝔞𝔟𝔠"

    def test_script_and_cursive(self):
        assert transform_by_category("ABCabc", "script") == "𝓐𝓑𝓒𝓪𝓫𝓬"
        assert transform_by_category("ABCabc", "cursive") == "𝓐𝓑𝓒𝓪𝓫𝓬"

    def test_sans_serif(self):
        assert transform_by_category("ABCabc", "sans-serif") == "𝔸𝔹ℂ𝕒𝕓𝕔"

    def test_family_mono(self):
        font = CategoryDescriptor(category="sans-serif", family="Roboto Mono")
        assert transform_by_category("ABC", font) == "𝙰𝙱𝙲"

    def test_dict_descriptor(self):
        font = {"category": "sans-serif", "family": "Roboto Mono"}
        assert transform_by_category("ABC", font) == "𝙰𝙱𝙲"

    def test_unknown_category_falls_back(self):
        assert transform_by_category("Aa", "unknown_category") == "\U0001D5D4\U0001D5EE"

    def test_unknown_explicit_style_falls_back(self):
        """Same unknown token: no-op explicitly, default style by category."""
        assert transform_explicit("abc", "unknown") == "abc"
        assert transform_by_category("abc", "unknown") == transform("abc", Style.BOLD_SANS_SERIF)

    def test_explicit_style_id_honoured(self):
        assert transform_by_category("A", "bold_serif") == "\U0001D400"


class TestPreviewAll:
    def test_all_styles_present(self):
        previews = preview_all("Abc")
        assert list(previews) == [s.value for s in Style]

    def test_values_match_transform(self):
        previews = preview_all("Hello")
        for style in Style:
            assert previews[style.value] == transform("Hello", style)

    def test_empty(self):
        assert set(preview_all("").values()) == {""}
