# wristui

A compact user interface toolkit for small square touch screens such as a
240x240 smartwatch display. Everything runs in memory; it offers:

- `wristui.display`: a software `Framebuffer` with a clipping drawing window,
  pixels, lines, circles, discs, region fills and line copies, and a `Screen`
  that owns a framebuffer and keeps a backlight level;
- `wristui.touch`: a `GestureRecognizer` that turns raw touch samples
  (`RawTouchKind`) into press, release, tap and swipe events (`TouchEvent`,
  `TouchEventType`), kept in a bounded queue;
- `wristui.image`: 12-bit and 1-bit raw images (`load_image`, `Image`,
  `bitblt`);
- widgets: `Frame`, `Label`, `ImageWidget`, `Button`, `Progress`,
  `Scrollbar`, `Slider`, `Container` and the scrolling, animated `Listbox`,
  all built on `wristui.widget.Widget` and a `WidgetRegistry`;
- `wristui.tile`: `Tile` screens linked left, right, up and down, and
  `Modal` dialog boxes;
- `wristui.ui`: a `UI` that routes touch events, animates tile transitions
  and handles an inactivity-based eco mode through an `InactivityTimer`.

Colours are 12-bit values built with `wristui.events.rgb(r, g, b)`, each
channel from 0 to 15; other values raise `ValueError`.

## Installation

```
pip install wristui
```

For running the tests:

```
pip install "wristui[test]"
pytest
```

## A first screen

```python
from wristui.display import Framebuffer, Screen
from wristui.touch import GestureRecognizer, RawTouchKind
from wristui.widget import WidgetRegistry
from wristui.tile import Tile
from wristui.button import Button
from wristui.label import Label
from wristui.ui import UI, InactivityTimer

framebuffer = Framebuffer(240, 240, 8)
screen = Screen(framebuffer, 200)
touch = GestureRecognizer(239, 239, 500, 20, 30, None, 10)
registry = WidgetRegistry()

home = Tile(registry, None)
settings = Tile(registry, None)
home.link_right(settings)

Label(registry, home, 10, 10, 220, 40, "Hello")
button = Button(registry, home, 40, 120, 160, 50, "Press me")
button.on_tap = lambda b: print("tapped", b.label)

ui = UI(screen, touch, registry, power=None, vibrate=None, timer=InactivityTimer(None))
ui.select_tile(home)

# Feed raw samples from the touch panel, then run one step of the loop.
touch.process(RawTouchKind.PRESS, 100, 140)
ui.process_events()
```

Each call to `UI.process_events` takes at most one touch event (only while no
tile transition is running), forwards it to the widgets of the current tile,
or of the active modal, turns unclaimed swipes into tile navigation, and
redraws the framebuffer before committing it. Tile transitions move tiles
40 pixels per call until the target tile is in place; the old tile then
receives `TileEvent.EXIT` and the new one `TileEvent.ENTER`. A tap also calls
the `vibrate` callable, if given, with a duration of 5.

The `power` object, if given, must provide `is_userbtn_pressed()`,
`is_usb_plugged(query_irq)` and `deepsleep()` (see `wristui.ui.PowerManager`).
A user-button press returns to the default tile, or asks for deep sleep when
the default tile is already shown.

## Widgets

Every widget is created with the registry it belongs to, its parent tile
(or `None`) and its box. Widgets draw themselves through `render(display)`,
called by `draw(display)` inside a clipping window, and react to
`WidgetEvent` values through `handle_event`, which returns whether the event
was processed.

- `Button` darkens while pressed and calls its `on_tap` attribute on a tap.
- `Slider` sets its value from presses along it and then calls `on_tap`; it
  handles no events while `on_tap` is unset, and `configure` clears it.
- `Progress` and `Slider` keep `min_value`, `max_value` and `value`;
  `configure` swaps bounds given in the wrong order.
- `Container` draws its children relative to itself, shifted by `offset_x`
  and `offset_y`. When dispatching events it does not consult its last child.
- `Listbox` stacks its children, scrolls on swipes with a decaying speed,
  and on a tap sends `LB_ITEM_DESELECTED` to the previous selection and
  `LB_ITEM_SELECTED` to the tapped item and to itself.

## Modal dialog boxes

`UI.set_modal(modal)` shows a `Modal` over the current tile. While it is
shown only its widgets receive touch events and swipes do not move tiles.
Sending `TileEvent.MODAL_CLOSE` to it calls its `on_close`, which `set_modal`
points at `UI.unset_modal` when none was given.

## Eco mode

`UI.enable_ecomode()` starts the inactivity timer. After
`eco_max_inactivity` seconds (15 by default) without touch events the
backlight is dimmed; after a further `eco_max_inactivity_to_deepsleep`
seconds (60 by default, 0 to disable) the framebuffer is blanked and the
power object is asked to enter deep sleep. While eco mode is on, any touch
restores the default backlight; `UI.wakeup()` does so at any time and
restarts the timer.

## What it does not do

The package talks to no hardware: there are no display, touch-panel,
power-management or vibration-motor drivers. The framebuffer is a pair of
Python lists, the backlight is a number, and power and vibration are objects
you pass in. Text is not rasterised: `Framebuffer.draw_text` records a
`TextRun` and measures it with a fixed character width, so a renderer for
real glyphs has to be supplied by the application.