import pytest

from fynext.theme.adwaita import (
    COLOR_BLUE,
    COLOR_GREEN,
    COLOR_NAME_SCROLL_BAR,
    COLOR_RED,
    DARK_SCHEME,
    LIGHT_SCHEME,
    Color,
    Variant,
)
from fynext.theme.colorgen import (
    ColorInfo,
    build_schemes,
    find_rows,
    generate_color_scheme,
    render_color_source,
    standard_color,
    string_to_color,
    widget_color,
)

WIDGET = {
    "window_bg_color": ("#fafafa", "#242424"),
    "window_fg_color": ("rgba(0, 0, 0, 0.8)", "#ffffff"),
    "popover_bg_color": ("#ffffff", "#383838"),
    "headerbar_bg_color": ("#ebebeb", "#303030"),
    "view_bg_color": ("#ffffff", "#1e1e1e"),
    "accent_bg_color": ("#3584e4", "#3584e4"),
    "shade_color": ("rgba(0, 0, 0, 0.07)", "rgba(0, 0, 0, 0.36)"),
    "success_bg_color": ("#2ec27e", "#26a269"),
    "warning_bg_color": ("#e5a50a", "#cd9309"),
    "error_bg_color": ("#e01b24", "#c01c28"),
}

STANDARD = {
    "red_3": "#e01b24",
    "red_4": "#c01c28",
    "orange_3": "#ff7800",
    "yellow_3": "#f6d32d",
    "green_4": "#2ec27e",
    "green_5": "#26a269",
    "blue_3": "#3584e4",
    "purple_3": "#9141ac",
    "brown_3": "#986a44",
    "dark_2": "#5e5c64",
    "dark_5": "#000000",
    "light_1": "#ffffff",
}


def _page():
    rows = []
    for index, (name, (light, dark)) in enumerate(WIDGET.items()):
        at = "&#64;" if index % 2 else "@"
        rows.append(
            f"<tr><td><tt>{at}{name}</tt></td><td><tt>{light}</tt></td>"
            f"<td><tt>{dark}</tt></td></tr>"
        )
    for name, value in STANDARD.items():
        rows.append(f"<tr><td><tt>&#64;{name}</tt></td><td><tt>{value}</tt></td></tr>")
    return "<html><table>\n" + "\n".join(rows) + "\n</table></html>"


def test_string_to_color_six_digits():
    assert string_to_color("#3584e4") == Color(0x35, 0x84, 0xE4, 0xFF)


def test_string_to_color_eight_digits():
    assert string_to_color("#12345678") == Color(0x12, 0x34, 0x56, 0x78)


def test_string_to_color_rgba_truncates_alpha():
    assert string_to_color("rgba(0, 0, 0, 0.07)") == Color(0, 0, 0, 0x11)
    assert string_to_color("rgba(0, 0, 0, 0.36)") == Color(0, 0, 0, 0x5B)


@pytest.mark.parametrize("text", ["#zzzzzz", "rgb(1, 2, 3)", "rgba(300, 0, 0, 1)", ""])
def test_string_to_color_rejects(text):
    with pytest.raises(ValueError):
        string_to_color(text)


def test_find_rows_keeps_whole_rows():
    page = "<table><tr>a</tr>\n<tr>b\nc</tr></table>"
    assert find_rows(page) == ["<tr>a</tr>", "<tr>b\nc</tr>"]


def test_widget_color_variants():
    rows = find_rows(_page())
    assert widget_color(rows, "window_bg_color", Variant.LIGHT) == string_to_color("#fafafa")
    assert widget_color(rows, "window_bg_color", Variant.DARK) == string_to_color("#242424")


def test_widget_color_html_encoded_name():
    rows = find_rows(_page())
    assert widget_color(rows, "window_fg_color", Variant.DARK) == string_to_color("#ffffff")


def test_missing_name_gives_transparent_black():
    rows = find_rows(_page())
    assert standard_color(rows, "pink_9") == Color(0, 0, 0, 0)
    assert widget_color(rows, "nothing_here", Variant.LIGHT) == Color(0, 0, 0, 0)


def test_standard_color_uses_first_cell():
    rows = find_rows(_page())
    assert standard_color(rows, "purple_3") == string_to_color("#9141ac")


def test_missing_dark_cell_raises():
    rows = find_rows("<tr><tt>@solo</tt><tt>#101010</tt></tr>")
    with pytest.raises(ValueError):
        widget_color(rows, "solo", Variant.DARK)


def test_build_schemes_matches_shipped_tables():
    light, dark = build_schemes(_page())
    assert {name: info.color for name, info in light.items()} == dict(LIGHT_SCHEME)
    assert {name: info.color for name, info in dark.items()} == dict(DARK_SCHEME)


def test_build_schemes_records_source_names():
    light, dark = build_schemes(_page())
    assert light[COLOR_RED].adw_name == "red_3"
    assert dark[COLOR_RED].adw_name == "red_4"
    assert light[COLOR_GREEN].adw_name == "green_4"
    assert dark[COLOR_NAME_SCROLL_BAR].adw_name == "light_1"
    assert light[COLOR_BLUE].adw_name == dark[COLOR_BLUE].adw_name == "blue_3"


def test_build_schemes_reports_bad_value():
    page = _page().replace("#e5a50a", "#nothex")
    with pytest.raises(ValueError, match="warning_bg_color"):
        build_schemes(page)


def test_render_color_source_lines():
    light = {"blue": ColorInfo(Color(0x35, 0x84, 0xE4, 0xFF), "blue_3")}
    dark = {"blue": ColorInfo(Color(0x35, 0x84, 0xE4, 0xFF), "blue_3")}
    source = render_color_source(light, dark)
    line = "    'blue': Color(0x35, 0x84, 0xe4, 0xff),  # Adwaita color name @blue_3"
    assert source.count(line) == 2
    assert source.index("DARK_SCHEME = {") < source.index("LIGHT_SCHEME = {")


def test_render_color_source_sorted_keys():
    light, dark = build_schemes(_page())
    source = render_color_source(light, dark)
    dark_block = source[source.index("DARK_SCHEME"):source.index("LIGHT_SCHEME")]
    keys = [line.split("'")[1] for line in dark_block.splitlines() if line.startswith("    '")]
    assert keys == sorted(dark)


def test_generate_color_scheme_writes_file(tmp_path):
    page_file = tmp_path / "colors.html"
    page_file.write_text(_page(), encoding="utf-8")
    output = tmp_path / "adwaita_colors.py"
    generate_color_scheme(page_file.as_uri(), output)
    expected = render_color_source(*build_schemes(_page()))
    assert output.read_text(encoding="utf-8") == expected