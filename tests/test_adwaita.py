import pytest

from fynext.theme.adwaita import (
    COLOR_BLUE,
    COLOR_NAME_BACKGROUND,
    COLOR_NAME_FOREGROUND,
    COLOR_NAME_SCROLL_BAR,
    DARK_SCHEME,
    LIGHT_SCHEME,
    AdwaitaTheme,
    Color,
    Variant,
    adwaita_theme,
)


class _Fallback:
    def __init__(self):
        self.calls = []

    def color(self, name, variant):
        self.calls.append(("color", name, variant))
        return ("fallback", name, variant)

    def font(self, style):
        self.calls.append(("font", style))
        return ("font", style)

    def icon(self, name):
        self.calls.append(("icon", name))
        return ("icon", name)

    def size(self, name):
        self.calls.append(("size", name))
        return 4.0


def test_light_background():
    theme = AdwaitaTheme(_Fallback())
    assert theme.color(COLOR_NAME_BACKGROUND, Variant.LIGHT) == Color(0xFA, 0xFA, 0xFA, 0xFF)


def test_dark_background():
    theme = AdwaitaTheme(_Fallback())
    assert theme.color(COLOR_NAME_BACKGROUND, Variant.DARK) == Color(0x24, 0x24, 0x24, 0xFF)


def test_light_foreground_alpha():
    theme = AdwaitaTheme()
    assert theme.color(COLOR_NAME_FOREGROUND, Variant.LIGHT).a == 0xCC


def test_scrollbar_alpha_in_both_variants():
    theme = AdwaitaTheme()
    assert theme.color(COLOR_NAME_SCROLL_BAR, Variant.LIGHT).a == 0x5B
    assert theme.color(COLOR_NAME_SCROLL_BAR, Variant.DARK).a == 0x5B


def test_unknown_colour_goes_to_fallback():
    fallback = _Fallback()
    theme = adwaita_theme(fallback)
    assert theme.color("hover", Variant.DARK) == ("fallback", "hover", Variant.DARK)
    assert fallback.calls == [("color", "hover", Variant.DARK)]


def test_known_colour_does_not_use_fallback():
    fallback = _Fallback()
    theme = adwaita_theme(fallback)
    theme.color(COLOR_BLUE, Variant.LIGHT)
    assert fallback.calls == []


def test_unknown_colour_without_fallback_raises():
    with pytest.raises(LookupError):
        AdwaitaTheme().color("hover", Variant.LIGHT)


def test_font_icon_size_delegate():
    fallback = _Fallback()
    theme = AdwaitaTheme(fallback)
    assert theme.font("bold") == ("font", "bold")
    assert theme.icon("cancel") == ("icon", "cancel")
    assert theme.size("padding") == 4.0


def test_every_scheme_name_resolves_in_both_variants():
    fallback = _Fallback()
    theme = AdwaitaTheme(fallback)
    assert len(LIGHT_SCHEME) == 21
    for name in LIGHT_SCHEME:
        assert theme.color(name, Variant.LIGHT) == LIGHT_SCHEME[name]
        assert theme.color(name, Variant.DARK) == DARK_SCHEME[name]
    assert fallback.calls == []


def test_hex_formatting():
    assert Color(0x35, 0x84, 0xE4).hex() == "#3584e4ff"


@pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 0, 300)])
def test_colour_channel_range(channels):
    with pytest.raises(ValueError):
        Color(*channels)