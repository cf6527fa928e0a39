# heimdall-ui

A small UI toolkit built on pygame. It gives you a window with a
render loop and an FPS counter, a font manager, rectangle and circle
drawing, and a set of ready-made components: boxes, buttons, text
labels, text inputs, sliders, toggle switches and images. It also has
a plain HTTP/HTTPS fetch helper.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `heimdall_ui.utils`: the frozen `Vec2` (`x`, `y`) and `Size2`
  (`w`, `h`) types, and `check_collision_box(x1, y1, w1, h1, x2, y2,
  w2, h2)`, which is true when two boxes overlap (touching edges do not
  count).
- `heimdall_ui.rgb`: `Color(r, g, b, a=255)` with `as_tuple()`,
  `hex_value()` (packed as `0xRRGGBBAA`) and the `opaque` property;
  `rgb()` and `rgba()` build colours. Channels outside 0..255 raise
  `ValueError`.
- `heimdall_ui.events`: `EventType` and the `Event` dataclass (`type`,
  `x`, `y`, `button`, `scancode`, `text`). `from_pygame()` converts a
  pygame event, `poll_event()` takes the next pending one (a `NONE`
  event when the queue is empty), and `handle_window_input(window,
  event=None)` marks the window closing on a quit event and passes the
  event on to `window.ui`.
- `heimdall_ui.fonts`: `FontManager(default_font, max_size)` opens the
  font (a path, or `None` for pygame's default) at every size from 3 up
  to, but not including, `max_size`; `get_font(size)` returns one and
  raises `FontError` for a size that was not opened or after `close()`.
  It can be used as a context manager. `measure_text()` and
  `render_text()` take `%`-style arguments after the text, wrap it at
  the window width less 10 pixels, and use `window.fonts` or, failing
  that, the most recently created manager.
- `heimdall_ui.drawing`: `draw_fill_rect`, `draw_rect`,
  `draw_fill_circle` and `draw_circle` on a pygame surface
  (translucent colours are blended), plus the pure helpers
  `circle_outline_points`, `circle_span_lines` and `rect_border_rects`.
- `heimdall_ui.component`: the `Component` base dataclass (`size`,
  `pos`, `web_content`, `id`, `layer`, `ui_parent`, `last_event`), the
  `ComponentKind` and `EventKind` enums, and `component_kind_name()`.
- Components, each with `init`, `render` and `handle_event` where they
  do something:
  - `heimdall_ui.box.Box`: `filled`, `background`.
  - `heimdall_ui.button.Button`: a centred label in `value`; calls
    `callback(component, EventKind)` on click, hover and leaving hover.
  - `heimdall_ui.text.Text`: `value`, `font_size`, `color`.
  - `heimdall_ui.textinput.TextInput`: takes typed text after a click;
    backspace removes the last character; reports `CHANGE` to
    `callback`.
  - `heimdall_ui.slider.Slider`: `value` from 0 to `max_value`, set by
    clicking the track or dragging the handle.
  - `heimdall_ui.checkbox.Checkbox`: a switch toggled by a click, with
    a sliding knob; `size.w` is the radius of its rounded ends. Also
    `lerp(start, end, velocity)`.
  - `heimdall_ui.image.Image`: loads `path` in `init`; a size of -1
    means the image's own width or height.
- `heimdall_ui.ui`: `UI(window, web_content)` attaches itself as
  `window.ui`. `create_component(kind, size, pos, web_content)` builds
  the component class for a `ComponentKind`, with an id of 0xFF plus
  the number of components already added; `add_component()` appends it;
  `init()`, `render()` and `handle_event()` go through the components in
  order; `find_component(id)` returns a component or `None`.
- `heimdall_ui.window`: `initialize()` starts the display and font
  subsystems. `Window(title, size, fg, bg)` opens a display surface and
  has `clear()`, `swap_buffer()`, `tick_fps(now=None)`, `get_size()`,
  `event_loop()`, `loop()` and `close()`, and works as a context
  manager.
- `heimdall_ui.request`: `request_host(url)` GETs an `http` or `https`
  URL (a URL without a scheme is taken as `http`), follows up to 50
  redirects and returns a `Response` with `body`, `header` (the headers
  of every response on the way), `response_code`, `http_version`,
  `site_ip`, `url` and `text`. Network failures raise `RequestError`;
  HTTP error statuses are returned as responses.

## Example

```python
from heimdall_ui.component import ComponentKind
from heimdall_ui.fonts import FontManager
from heimdall_ui.rgb import rgb
from heimdall_ui.ui import UI
from heimdall_ui.utils import Size2, Vec2
from heimdall_ui.window import Window, initialize

initialize()
with Window("Demo", Size2(800, 600), rgb(255, 255, 255), rgb(20, 20, 20)) as window:
    window.fonts = FontManager(None, 32)
    ui = UI(window, None)

    button = ui.create_component(ComponentKind.BUTTON, Size2(120, 40), Vec2(20, 20), False)
    button.value = "Click me"
    button.callback = lambda component, kind: print(kind)
    ui.add_component(button)

    window.loop()
```

`Window.loop` calls the UI's `init` once, then until the window is
closed it handles every pending input event, redraws on every fifth
frame count (background, then `render_func` if set, then the UI) and
updates the FPS counter. `Window.close` closes the window's font
manager and shuts pygame's display and fonts down.

Buttons, text inputs and text labels need a font manager, either on
`window.fonts` or created beforehand. To run without a screen, set
`SDL_VIDEODRIVER=dummy` in the environment.

## What it does not do

The package does not parse or lay out HTML, so it is not a browser:
`request_host` only fetches bytes, and nothing turns them into
components. `Image` loads local files only; an image with a `url` is not
fetched. Only rectangles and circles can be drawn; there are no line or
triangle primitives.