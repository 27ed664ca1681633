"""Unit tests for fzf_wrapped.builder and the FinderConfig model."""

import pytest
from pydantic import ValidationError

from fzf_wrapped import Border, Color, Finder, FinderBuilder, FinderConfig, Layout, Scheme


class TestFinderConfig:
    def test_constructible_without_arguments(self):
        config = FinderConfig()
        assert config.scheme is Scheme.DEFAULT
        assert config.layout is Layout.DEFAULT
        assert config.border is Border.NONE
        assert config.color is Color.DARK
        assert config.prompt == "> "
        assert config.pointer == ">"
        assert config.header == ""
        assert config.tabstop == 8
        assert config.custom_args == ()

    def test_is_frozen(self):
        config = FinderConfig()
        with pytest.raises(ValidationError):
            config.prompt = "$ "

    def test_enum_fields_accept_tokens(self):
        config = FinderConfig(layout="reverse", color="not-a-theme")
        assert config.layout is Layout.REVERSE
        assert config.color is Color.DARK


class TestFinderBuilder:
    def test_build_without_setters_equals_default_config(self):
        assert FinderBuilder().build() == FinderConfig()

    def test_setters_chain(self):
        builder = FinderBuilder()
        assert builder.layout(Layout.REVERSE) is builder
        assert builder.cycle() is builder

    def test_setters_store_values(self):
        config = (
            Finder.builder()
            .scheme("path")
            .literal(True)
            .layout(Layout.REVERSE)
            .border("rounded")
            .border_label("Favourite Colour")
            .prompt("colour> ")
            .header("Pick one")
            .header_first(True)
            .tabstop(4)
            .color(Color.BW)
            .no_bold(True)
            .build()
        )
        assert config.scheme is Scheme.PATH
        assert config.literal is True
        assert config.layout is Layout.REVERSE
        assert config.border is Border.ROUNDED
        assert config.border_label == "Favourite Colour"
        assert config.prompt == "colour> "
        assert config.header == "Pick one"
        assert config.header_first is True
        assert config.tabstop == 4
        assert config.color is Color.BW
        assert config.no_bold is True

    def test_false_setter_overrides_earlier_true(self):
        config = FinderBuilder().track(True).track(False).build()
        assert config.track is False

    def test_custom_args_replace_previous(self):
        config = FinderBuilder().custom_args(["--multi"]).custom_args(["--height=10"]).build()
        assert config.custom_args == ("--height=10",)

    def test_custom_args_decode_bytes(self):
        config = FinderBuilder().custom_args([b"--height=10", b"--prompt=\xff"]).build()
        assert config.custom_args == ("--height=10", "--prompt=\ufffd")

    def test_custom_args_reject_non_text(self):
        with pytest.raises(TypeError):
            FinderBuilder().custom_args(["--height=10", 3])

    def test_unknown_enum_token_uses_default(self):
        config = FinderBuilder().border("wavy").build()
        assert config.border is Border.NONE

    @pytest.mark.parametrize("width", [0, 256, -1])
    def test_tabstop_out_of_range_rejected_at_setter(self, width):
        with pytest.raises(ValueError):
            FinderBuilder().tabstop(width)

    @pytest.mark.parametrize("width", [4.7, "4"])
    def test_tabstop_rejects_non_integers(self, width):
        with pytest.raises(TypeError):
            FinderBuilder().tabstop(width)

    def test_tabstop_accepts_int(self):
        assert FinderBuilder().tabstop(4).build().tabstop == 4

    def test_build_twice_yields_equal_snapshots(self):
        builder = FinderBuilder().header("x").cycle()
        assert builder.build() == builder.build()

    def test_snapshot_not_affected_by_later_setters(self):
        builder = FinderBuilder().header("before")
        config = builder.build()
        builder.header("after")
        assert config.header == "before"
