"""Unit tests for fzf_wrapped.options."""

import pytest

from fzf_wrapped.options import Border, Color, Layout, Scheme


class TestTokens:
    def test_str_is_the_fzf_token(self):
        assert str(Layout.REVERSE_LIST) == "reverse-list"
        assert str(Color.SIXTEEN) == "16"
        assert str(Border.THINBLOCK) == "thinblock"

    @pytest.mark.parametrize("enum_type", [Scheme, Layout, Border, Color])
    def test_every_member_maps_back_from_its_token(self, enum_type):
        for member in enum_type:
            assert enum_type.from_token(member.value) is member

    def test_from_token_ignores_case_and_whitespace(self):
        assert Color.from_token("  BW ") is Color.BW
        assert Layout.from_token("Reverse") is Layout.REVERSE

    def test_from_token_passes_members_through(self):
        assert Border.from_token(Border.ROUNDED) is Border.ROUNDED


class TestDefaults:
    def test_defaults(self):
        assert Scheme.default() is Scheme.DEFAULT
        assert Layout.default() is Layout.DEFAULT
        assert Border.default() is Border.NONE
        assert Color.default() is Color.DARK

    def test_unknown_color_falls_back_to_dark(self):
        assert Color.from_token("purple") is Color.DARK

    def test_unknown_tokens_fall_back_to_default(self):
        assert Scheme.from_token("fuzzy") is Scheme.DEFAULT
        assert Layout.from_token("sideways") is Layout.DEFAULT
        assert Border.from_token("") is Border.NONE


def test_token_helpers_are_annotated():
    assert Layout.from_token.__annotations__.keys() >= {"token", "return"}
    assert "return" in Layout.default.__annotations__
