# fynext

User-interface building blocks that are not tied to any drawing toolkit. They
compute sizes, positions, colours and state; a toolkit of your choice does the
drawing.

- **Layouts** (`fynext.layout`): geometry types and a plain canvas object
  (`canvas`), proportional layouts (`portion`) and a breakpoint-driven
  responsive grid (`responsive`).
- **Theme** (`fynext.theme`): the Adwaita light and dark colour schemes
  (`adwaita`) and the tools that regenerate colour and icon modules
  (`colorgen`, `icongen`).
- **Widget models** (`fynext.widget`): a month calendar (`calendar`) and a
  text entry with a keyboard-navigable completion list (`completion`).
- **Data** (`fynext.data`): observable bindings (`binding`), a JSON document
  binding with typed children (`jsonbinding`), bindings fed by an MQTT topic
  (`mqttstring`) or a WebSocket connection (`webstring`), and a password
  strength validator (`validation`).

## Installation

```
pip install fynext
```

With the test dependencies:

```
pip install "fynext[test]"
```

## Geometry and canvas objects

`fynext.layout.canvas` provides the frozen dataclasses `Size(width, height)`
and `Position(x, y)`, each with `add`, and `Size.subtract`. `CanvasObject`
holds a `size`, a `position` and a `visible` flag, and is built with the
minimum size it reports from `min_size()`. Layouts leave `PADDING` (4 pixels)
between neighbouring objects.

## Proportional layouts

`HPortion` splits the width between its objects according to a list of
portions; `VPortion` does the same along the height. Portions are relative, so
`[50, 50]` and `[0.5, 0.5]` give the same result. When the number of portions
does not match the number of objects, a warning is logged, nothing is laid out
and the minimum size is zero.

```python
from fynext.layout.canvas import CanvasObject, Size
from fynext.layout.portion import HPortion

objects = [CanvasObject(Size(80, 30)), CanvasObject(Size(40, 30))]
layout = HPortion([30, 20])
layout.layout(objects, Size(300, 40))
print([o.size for o in objects])
print(layout.min_size(objects))
```

## Responsive layout

Each object gets one width ratio per `Breakpoint` (`SMALL` 576, `MEDIUM` 768,
`LARGE` 992, `XLARGE` 1200, with the aliases `SM`, `MD`, `LG`, `XL`). Ratios
that are left out repeat the previous one and the first defaults to `1.0`;
every ratio must satisfy `0 < ratio <= 1`, otherwise `ValueError` is raised.
Objects are placed left to right and wrap onto a new line when the next
position would overflow the container.

```python
from fynext.layout.canvas import CanvasObject, Size
from fynext.layout.responsive import Breakpoint, new_responsive_layout, responsive

title = CanvasObject(Size(100, 20))
label = CanvasObject(Size(60, 20))
entry = CanvasObject(Size(60, 20))

container = new_responsive_layout(
    title,                      # plain objects fill the full width
    responsive(label, 1, 0.5),  # full width on small windows, half otherwise
    responsive(entry, 1, 0.5),
)
container.resize(Size(760, 400), window_width=Breakpoint.MEDIUM)
```

`ResponsiveObject.ratio_for(window_width)` tells which ratio applies, and
`responsive_config(*ratios)` returns the breakpoint-to-ratio mapping on its
own. A `ResponsiveLayout` raises `TypeError` when given an object that is not
a `ResponsiveObject`.

## Adwaita theme

```python
from fynext.theme.adwaita import Variant, adwaita_theme

theme = adwaita_theme()
print(theme.color("background", Variant.DARK).hex())   # "#242424ff"
```

`DARK_SCHEME` and `LIGHT_SCHEME` map colour names (the `COLOR_*` constants)
to `Color` values. Names outside the scheme, and all fonts, icons and sizes,
are asked of the fallback theme given to `adwaita_theme(fallback)`; without
one, `LookupError` is raised.

### Regenerating the colour and icon modules

`fynext-adwaita-gen` downloads the Adwaita named-colours documentation page
and the icon theme tar archive, and writes two Python modules:

```
fynext-adwaita-gen --colors-url https://example.com/named-colors.html \
                   --icons-url https://example.com/adwaita-icon-theme.tar \
                   --colors-output adwaita_colors.py \
                   --icons-output adwaita_icons.py
```

Both URLs are required; the outputs default to `adwaita_colors.py` and
`adwaita_icons.py`. The command exits with status 1 and a message on error.
Icons that must be bundled as PNG are converted with `inkscape` when it is on
the `PATH`; icons that cannot be read are logged and left out. The pieces are
also available as functions: `string_to_color`, `build_schemes`,
`render_color_source` and `generate_color_scheme` in `fynext.theme.colorgen`,
and `extract_tar`, `collect_icons`, `render_icon_source` and `generate_icons`
in `fynext.theme.icongen`.

## Calendar

```python
from datetime import datetime
from fynext.widget.calendar import Calendar

calendar = Calendar(datetime(2024, 3, 10, 9, 30), on_selected=print)
print(calendar.month_year())      # "March 2024"
calendar.next_month()             # "April 2024"
calendar.select_day(14)           # calls on_selected with 2024-04-14 09:30
```

Weeks start on Monday: `calendar_objects()` returns the seven weekday
headings, blank cells up to the first of the month, then one cell per day.
`previous_month()` moves to the first day of the preceding month at midnight.
`CalendarLayout` arranges the visible cells in seven columns.

## Completion entry

```python
from fynext.widget.completion import CompletionEntry, Key

entry = CompletionEntry(["foo", "bar", "baz"])
entry.show_completion()
entry.focused().typed_key(Key.DOWN)
entry.focused().typed_key(Key.DOWN)
entry.focused().typed_key(Key.RETURN)
print(entry.text, entry.cursor_column)   # "bar" 3
```

While the list is shown, `focused()` returns the `NavigableList`: `Key.DOWN`
and `Key.UP` move through the options, wrapping round at either end;
`Key.RETURN` or `Key.ENTER` puts the highlighted option in the entry with the
cursor at its end and hides the list; `Key.ESCAPE` hides the list. With
nothing highlighted, `Key.RETURN` hides the list and submits the entry. Typed
characters and other keys always go to the entry. `show_completion()` with no
options hides the list. `custom_create` and `custom_update` replace the plain
label items.

## Data bindings

`Binding` holds a value and calls its listeners (callables with no arguments)
once when added and after every change. `string_to_int` gives an integer view
of a string binding.

```python
from fynext.data.binding import Binding
from fynext.data.jsonbinding import new_json_from_string

source = Binding("")
document = new_json_from_string(source)
value = document.get_item_string("value")
first = document.get_item_float("array", 0)

source.set('{"value": "7", "array": [42.8]}')
print(value.get(), first.get())   # 7 42.8
value.set("8")                    # writes the updated document back to source
```

A child whose path is missing or holds the wrong type raises the reason from
`get()`. `is_empty()` is `True` until a non-empty JSON object is received.

`new_mqtt_string(client, topic)` subscribes a connected paho-mqtt client to a
topic: each message updates the binding and `set` publishes.
`new_websocket_string(url)` connects with websocket-client and holds the
latest message, read on a background thread. Both are `StringCloser`s: call
`close()` or use them in a `with` block.

## Password validation

```python
from fynext.data.validation import PasswordError, new_password

check = new_password(100)
password = "password"
try:
    check(password)
except PasswordError as err:
    print(err)   # explains how to make the password stronger
```

`get_entropy(password)` returns the entropy in bits, counting each character
at most twice; `validate(password, min_entropy)` raises `PasswordError`, a
`ValueError`, below the threshold.

## What this package does not do

It draws nothing and opens no windows: there is no rendering, event loop or
window system integration. The widgets are state models, the theme provides
colours only, and the icon generator writes a module of icon data that
nothing in the package loads.