"""Builds the Adwaita colour schemes from the named-colours documentation page."""

from __future__ import annotations

import re
import urllib.request
from dataclasses import dataclass
from pathlib import Path

from .adwaita import (
    COLOR_BLUE,
    COLOR_BROWN,
    COLOR_GRAY,
    COLOR_GREEN,
    COLOR_NAME_BACKGROUND,
    COLOR_NAME_BUTTON,
    COLOR_NAME_ERROR,
    COLOR_NAME_FOREGROUND,
    COLOR_NAME_INPUT_BACKGROUND,
    COLOR_NAME_MENU_BACKGROUND,
    COLOR_NAME_OVERLAY_BACKGROUND,
    COLOR_NAME_PRIMARY,
    COLOR_NAME_SCROLL_BAR,
    COLOR_NAME_SELECTION,
    COLOR_NAME_SHADOW,
    COLOR_NAME_SUCCESS,
    COLOR_NAME_WARNING,
    COLOR_ORANGE,
    COLOR_PURPLE,
    COLOR_RED,
    COLOR_YELLOW,
    Color,
    Variant,
)

_ROW = re.compile(r"<tr>(.*?)</tr>", re.DOTALL)
_CELL = re.compile(r"<tt>((?:rgba|#).*?)</tt>", re.DOTALL)
_HEX = "([0-9a-fA-F]{2})"
_HEX6 = re.compile("#" + _HEX * 3)
_HEX8 = re.compile("#" + _HEX * 4)
_RGBA = re.compile(
    r"rgba\(\s*(\d+),\s*(\d+),\s*(\d+),\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\)"
)

WIDGET_COLORS = {
    COLOR_NAME_BACKGROUND: "window_bg_color",
    COLOR_NAME_FOREGROUND: "window_fg_color",
    COLOR_NAME_MENU_BACKGROUND: "popover_bg_color",
    COLOR_NAME_SELECTION: "headerbar_bg_color",
    COLOR_NAME_OVERLAY_BACKGROUND: "view_bg_color",
    COLOR_NAME_PRIMARY: "accent_bg_color",
    COLOR_NAME_INPUT_BACKGROUND: "view_bg_color",
    COLOR_NAME_BUTTON: "headerbar_bg_color",
    COLOR_NAME_SHADOW: "shade_color",
    COLOR_NAME_SUCCESS: "success_bg_color",
    COLOR_NAME_WARNING: "warning_bg_color",
    COLOR_NAME_ERROR: "error_bg_color",
}
"""Theme colour names mapped to the Adwaita widget colour they take."""

STANDARD_COLORS = {
    COLOR_RED: "red_3,red_4",
    COLOR_ORANGE: "orange_3",
    COLOR_YELLOW: "yellow_3",
    COLOR_GREEN: "green_4,green_5",
    COLOR_BLUE: "blue_3",
    COLOR_PURPLE: "purple_3",
    COLOR_BROWN: "brown_3",
    COLOR_GRAY: "dark_2",
    COLOR_NAME_SCROLL_BAR: "dark_5,light_1",
}
"""Theme colour names mapped to palette colours, as ``light`` or ``light,dark``."""

_SCROLL_BAR_ALPHA = 0x5B


@dataclass(frozen=True)
class ColorInfo:
    """A colour together with the Adwaita name it was taken from."""

    color: Color
    adw_name: str


def _channel(text: str) -> int:
    value = int(text)
    if value > 0xFF:
        raise ValueError(f"value out of range: {text}")
    return value


def string_to_color(s: str) -> Color:
    """Parse ``#rrggbb``, ``#rrggbbaa`` or ``rgba(r, g, b, a)`` into a colour."""
    if len(s) == 7:
        match = _HEX6.match(s)
        if match is None:
            raise ValueError(f"invalid colour: {s!r}")
        r, g, b = (int(part, 16) for part in match.groups())
        return Color(r, g, b, 0xFF)
    if len(s) == 9:
        match = _HEX8.match(s)
        if match is None:
            raise ValueError(f"invalid colour: {s!r}")
        r, g, b, a = (int(part, 16) for part in match.groups())
        return Color(r, g, b, a)
    match = _RGBA.match(s)
    if match is None:
        raise ValueError(f"invalid colour: {s!r}")
    r, g, b = (_channel(part) for part in match.groups()[:3])
    return Color(r, g, b, int(float(match.group(4)) * 255))


def find_rows(page: str) -> list[str]:
    """Return every table row of ``page``, tags included."""
    return [match.group(0) for match in _ROW.finditer(page)]


def _cells_for(rows: list[str], name: str) -> list[str] | None:
    for row in rows:
        if f"&#64;{name}" in row or f"@{name}" in row:
            return _CELL.findall(row)
    return None


def _cell(cells: list[str], index: int, name: str) -> str:
    try:
        return cells[index]
    except IndexError:
        raise ValueError(f"no colour value {index + 1} in the row for {name}") from None


def widget_color(rows: list[str], name: str, variant: Variant) -> Color:
    """Return the light or dark value of the widget colour ``name``.

    A name with no row gives transparent black.
    """
    cells = _cells_for(rows, name)
    if cells is None:
        return Color(0, 0, 0, 0)
    index = 0 if variant == Variant.LIGHT else 1
    return string_to_color(_cell(cells, index, name))


def standard_color(rows: list[str], name: str) -> Color:
    """Return the value of the palette colour ``name``.

    A name with no row gives transparent black.
    """
    cells = _cells_for(rows, name)
    if cells is None:
        return Color(0, 0, 0, 0)
    return string_to_color(_cell(cells, 0, name))


def _lookup(fetch, kind: str, adw_name: str) -> Color:
    try:
        return fetch()
    except ValueError as exc:
        raise ValueError(f"failed to get {kind} color for {adw_name}: {exc}") from exc


def build_schemes(page: str) -> tuple[dict[str, ColorInfo], dict[str, ColorInfo]]:
    """Return the light and dark schemes described by the documentation ``page``."""
    rows = find_rows(page)
    light: dict[str, ColorInfo] = {}
    dark: dict[str, ColorInfo] = {}

    for name, adw_name in WIDGET_COLORS.items():
        light_color = _lookup(lambda: widget_color(rows, adw_name, Variant.LIGHT),
                              "light", adw_name)
        dark_color = _lookup(lambda: widget_color(rows, adw_name, Variant.DARK),
                             "dark", adw_name)
        light[name] = ColorInfo(light_color, adw_name)
        dark[name] = ColorInfo(dark_color, adw_name)

    for name, spec in STANDARD_COLORS.items():
        parts = spec.split(",")
        light_name, dark_name = (parts[0], parts[1]) if len(parts) == 2 else (spec, spec)
        light_color = _lookup(lambda: standard_color(rows, light_name), "light", light_name)
        dark_color = _lookup(lambda: standard_color(rows, dark_name), "dark", dark_name)
        if name == COLOR_NAME_SCROLL_BAR:
            light_color = Color(light_color.r, light_color.g, light_color.b, _SCROLL_BAR_ALPHA)
            dark_color = Color(dark_color.r, dark_color.g, dark_color.b, _SCROLL_BAR_ALPHA)
        light[name] = ColorInfo(light_color, light_name)
        dark[name] = ColorInfo(dark_color, dark_name)

    return light, dark


def _render_scheme(variable: str, scheme: dict[str, ColorInfo]) -> list[str]:
    lines = [f"{variable} = {{"]
    for name in sorted(scheme):
        info = scheme[name]
        c = info.color
        lines.append(
            f"    {name!r}: Color(0x{c.r:02x}, 0x{c.g:02x}, 0x{c.b:02x}, 0x{c.a:02x}),"
            f"  # Adwaita color name @{info.adw_name}"
        )
    lines.append("}")
    return lines


def render_color_source(light: dict[str, ColorInfo], dark: dict[str, ColorInfo]) -> str:
    """Return the source of a module defining ``DARK_SCHEME`` and ``LIGHT_SCHEME``."""
    lines = [
        '"""Adwaita colour schemes. Generated by fynext.theme.colorgen; do not edit."""',
        "",
        "from fynext.theme.adwaita import Color",
        "",
        *_render_scheme("DARK_SCHEME", dark),
        "",
        *_render_scheme("LIGHT_SCHEME", light),
    ]
    return "\n".join(lines) + "\n"


def generate_color_scheme(url: str, output: str | Path) -> None:
    """Download the documentation page at ``url`` and write the schemes to ``output``."""
    with urllib.request.urlopen(url) as response:
        charset = response.headers.get_content_charset() or "utf-8"
        page = response.read().decode(charset, errors="replace")
    light, dark = build_schemes(page)
    Path(output).write_text(render_color_source(light, dark), encoding="utf-8")