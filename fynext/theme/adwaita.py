"""A theme using the Adwaita named colours for light and dark variants.

Colours that the Adwaita palette does not define, as well as fonts, icons and
sizes, come from a fallback theme.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Protocol

COLOR_RED = "red"
COLOR_ORANGE = "orange"
COLOR_YELLOW = "yellow"
COLOR_GREEN = "green"
COLOR_BLUE = "blue"
COLOR_PURPLE = "purple"
COLOR_BROWN = "brown"
COLOR_GRAY = "gray"
COLOR_NAME_BACKGROUND = "background"
COLOR_NAME_BUTTON = "button"
COLOR_NAME_ERROR = "error"
COLOR_NAME_FOREGROUND = "foreground"
COLOR_NAME_INPUT_BACKGROUND = "inputBackground"
COLOR_NAME_MENU_BACKGROUND = "menuBackground"
COLOR_NAME_OVERLAY_BACKGROUND = "overlayBackground"
COLOR_NAME_PRIMARY = "primary"
COLOR_NAME_SCROLL_BAR = "scrollBar"
COLOR_NAME_SELECTION = "selection"
COLOR_NAME_SHADOW = "shadow"
COLOR_NAME_SUCCESS = "success"
COLOR_NAME_WARNING = "warning"


@dataclass(frozen=True)
class Color:
    """A non-premultiplied RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 0xFF

    def __post_init__(self) -> None:
        for channel, value in zip("rgba", (self.r, self.g, self.b, self.a)):
            if not 0 <= value <= 0xFF:
                raise ValueError(f"channel {channel} out of range: {value}")

    def hex(self) -> str:
        """Return the colour as ``#rrggbbaa``."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}{self.a:02x}"


class Variant(enum.IntEnum):
    """The light or dark flavour of a theme."""

    DARK = 0
    LIGHT = 1


class FallbackTheme(Protocol):
    """What a theme must offer to back ``AdwaitaTheme``."""

    def color(self, name: str, variant: Variant) -> Any: ...

    def font(self, style: Any) -> Any: ...

    def icon(self, name: str) -> Any: ...

    def size(self, name: str) -> float: ...


DARK_SCHEME: Mapping[str, Color] = MappingProxyType({
    COLOR_BLUE: Color(0x35, 0x84, 0xE4, 0xFF),  # @blue_3
    COLOR_BROWN: Color(0x98, 0x6A, 0x44, 0xFF),  # @brown_3
    COLOR_GRAY: Color(0x5E, 0x5C, 0x64, 0xFF),  # @dark_2
    COLOR_GREEN: Color(0x26, 0xA2, 0x69, 0xFF),  # @green_5
    COLOR_NAME_BACKGROUND: Color(0x24, 0x24, 0x24, 0xFF),  # @window_bg_color
    COLOR_NAME_BUTTON: Color(0x30, 0x30, 0x30, 0xFF),  # @headerbar_bg_color
    COLOR_NAME_ERROR: Color(0xC0, 0x1C, 0x28, 0xFF),  # @error_bg_color
    COLOR_NAME_FOREGROUND: Color(0xFF, 0xFF, 0xFF, 0xFF),  # @window_fg_color
    COLOR_NAME_INPUT_BACKGROUND: Color(0x1E, 0x1E, 0x1E, 0xFF),  # @view_bg_color
    COLOR_NAME_MENU_BACKGROUND: Color(0x38, 0x38, 0x38, 0xFF),  # @popover_bg_color
    COLOR_NAME_OVERLAY_BACKGROUND: Color(0x1E, 0x1E, 0x1E, 0xFF),  # @view_bg_color
    COLOR_NAME_PRIMARY: Color(0x35, 0x84, 0xE4, 0xFF),  # @accent_bg_color
    COLOR_NAME_SCROLL_BAR: Color(0xFF, 0xFF, 0xFF, 0x5B),  # @light_1
    COLOR_NAME_SELECTION: Color(0x30, 0x30, 0x30, 0xFF),  # @headerbar_bg_color
    COLOR_NAME_SHADOW: Color(0x00, 0x00, 0x00, 0x5B),  # @shade_color
    COLOR_NAME_SUCCESS: Color(0x26, 0xA2, 0x69, 0xFF),  # @success_bg_color
    COLOR_NAME_WARNING: Color(0xCD, 0x93, 0x09, 0xFF),  # @warning_bg_color
    COLOR_ORANGE: Color(0xFF, 0x78, 0x00, 0xFF),  # @orange_3
    COLOR_PURPLE: Color(0x91, 0x41, 0xAC, 0xFF),  # @purple_3
    COLOR_RED: Color(0xC0, 0x1C, 0x28, 0xFF),  # @red_4
    COLOR_YELLOW: Color(0xF6, 0xD3, 0x2D, 0xFF),  # @yellow_3
})

LIGHT_SCHEME: Mapping[str, Color] = MappingProxyType({
    COLOR_BLUE: Color(0x35, 0x84, 0xE4, 0xFF),  # @blue_3
    COLOR_BROWN: Color(0x98, 0x6A, 0x44, 0xFF),  # @brown_3
    COLOR_GRAY: Color(0x5E, 0x5C, 0x64, 0xFF),  # @dark_2
    COLOR_GREEN: Color(0x2E, 0xC2, 0x7E, 0xFF),  # @green_4
    COLOR_NAME_BACKGROUND: Color(0xFA, 0xFA, 0xFA, 0xFF),  # @window_bg_color
    COLOR_NAME_BUTTON: Color(0xEB, 0xEB, 0xEB, 0xFF),  # @headerbar_bg_color
    COLOR_NAME_ERROR: Color(0xE0, 0x1B, 0x24, 0xFF),  # @error_bg_color
    COLOR_NAME_FOREGROUND: Color(0x00, 0x00, 0x00, 0xCC),  # @window_fg_color
    COLOR_NAME_INPUT_BACKGROUND: Color(0xFF, 0xFF, 0xFF, 0xFF),  # @view_bg_color
    COLOR_NAME_MENU_BACKGROUND: Color(0xFF, 0xFF, 0xFF, 0xFF),  # @popover_bg_color
    COLOR_NAME_OVERLAY_BACKGROUND: Color(0xFF, 0xFF, 0xFF, 0xFF),  # @view_bg_color
    COLOR_NAME_PRIMARY: Color(0x35, 0x84, 0xE4, 0xFF),  # @accent_bg_color
    COLOR_NAME_SCROLL_BAR: Color(0x00, 0x00, 0x00, 0x5B),  # @dark_5
    COLOR_NAME_SELECTION: Color(0xEB, 0xEB, 0xEB, 0xFF),  # @headerbar_bg_color
    COLOR_NAME_SHADOW: Color(0x00, 0x00, 0x00, 0x11),  # @shade_color
    COLOR_NAME_SUCCESS: Color(0x2E, 0xC2, 0x7E, 0xFF),  # @success_bg_color
    COLOR_NAME_WARNING: Color(0xE5, 0xA5, 0x0A, 0xFF),  # @warning_bg_color
    COLOR_ORANGE: Color(0xFF, 0x78, 0x00, 0xFF),  # @orange_3
    COLOR_PURPLE: Color(0x91, 0x41, 0xAC, 0xFF),  # @purple_3
    COLOR_RED: Color(0xE0, 0x1B, 0x24, 0xFF),  # @red_3
    COLOR_YELLOW: Color(0xF6, 0xD3, 0x2D, 0xFF),  # @yellow_3
})

_SCHEMES: Mapping[int, Mapping[str, Color]] = {
    Variant.LIGHT: LIGHT_SCHEME,
    Variant.DARK: DARK_SCHEME,
}


class AdwaitaTheme:
    """Adwaita colours, with everything else taken from ``fallback``."""

    def __init__(self, fallback: FallbackTheme | None = None) -> None:
        self.fallback = fallback

    def _require_fallback(self, what: str) -> FallbackTheme:
        if self.fallback is None:
            raise LookupError(f"no fallback theme to provide {what}")
        return self.fallback

    def color(self, name: str, variant: Variant) -> Any:
        """Return the named colour for ``variant``."""
        scheme = _SCHEMES.get(variant)
        if scheme is not None and name in scheme:
            return scheme[name]
        return self._require_fallback(f"color {name!r}").color(name, variant)

    def font(self, style: Any) -> Any:
        """Return the fallback theme's font for ``style``."""
        return self._require_fallback("fonts").font(style)

    def icon(self, name: str) -> Any:
        """Return the fallback theme's icon called ``name``."""
        return self._require_fallback(f"icon {name!r}").icon(name)

    def size(self, name: str) -> float:
        """Return the fallback theme's size called ``name``."""
        return self._require_fallback(f"size {name!r}").size(name)


def adwaita_theme(fallback: FallbackTheme | None = None) -> AdwaitaTheme:
    """Return a new Adwaita theme backed by ``fallback``."""
    return AdwaitaTheme(fallback)