import pytest

from wristui.button import Button, ButtonState
from wristui.display import SCREEN_WIDTH, Framebuffer, Screen
from wristui.events import TileEvent, rgb
from wristui.tile import Modal, Tile
from wristui.touch import TouchEvent, TouchEventType
from wristui.ui import UI, InactivityTimer, ScreenMode, UIState
from wristui.widget import WidgetRegistry


class RecordingTile(Tile):
    def __init__(self, registry):
        super().__init__(registry)
        self.events = []

    def handle_event(self, event, x, y, velocity):
        self.events.append(event)
        return False


class FakeTouch:
    def __init__(self, events=()):
        self.events = list(events)

    def get_event(self):
        return self.events.pop(0) if self.events else None


class FakePower:
    def __init__(self):
        self.button = False
        self.usb = False
        self.sleeps = 0

    def is_userbtn_pressed(self):
        pressed, self.button = self.button, False
        return pressed

    def is_usb_plugged(self, query_irq):
        return self.usb

    def deepsleep(self):
        self.sleeps += 1


class Clock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def make_ui(events=(), power=None, clock=None, vibrate=None):
    registry = WidgetRegistry()
    screen = Screen(Framebuffer(), default_backlight=200)
    timer = InactivityTimer(clock if clock is not None else Clock())
    ui = UI(screen, FakeTouch(events), registry, power, vibrate, timer)
    return ui, registry


def test_first_selected_tile_becomes_default_and_gets_enter():
    ui, registry = make_ui()
    a, b = RecordingTile(registry), RecordingTile(registry)
    ui.select_tile(a)
    ui.select_tile(b)
    assert ui.default_tile is a
    assert ui.current_tile is b
    assert a.events == [TileEvent.ENTER, TileEvent.EXIT]
    assert b.events == [TileEvent.ENTER]


def test_swipe_left_animates_to_right_tile():
    ui, registry = make_ui()
    a, b = RecordingTile(registry), RecordingTile(registry)
    a.link_right(b)
    ui.select_tile(a)
    ui.swipe_left()
    assert ui.state is UIState.MOVE_RIGHT
    assert b.offset_x == SCREEN_WIDTH
    for _ in range(SCREEN_WIDTH // 40):
        ui.process_events()
    assert ui.state is UIState.IDLE
    assert ui.current_tile is b
    assert b.offset_x == 0
    assert a.events[-1] == TileEvent.EXIT
    assert b.events == [TileEvent.ENTER]


def test_swipe_without_neighbour_stays_idle():
    ui, registry = make_ui()
    a = RecordingTile(registry)
    ui.select_tile(a)
    ui.swipe_right()
    ui.swipe_up()
    assert ui.state is UIState.IDLE
    assert ui.to_tile is None


def test_go_down_moves_to_bottom_tile():
    ui, registry = make_ui()
    a, below = Tile(registry), Tile(registry)
    a.link_bottom(below)
    ui.select_tile(a)
    ui.go_down()
    assert ui.state is UIState.MOVE_DOWN
    assert ui.to_tile is below
    assert below.offset_y == ui.display.height


def test_secondary_tile_uses_main_tile_neighbours():
    ui, registry = make_ui()
    main, right, below = Tile(registry), Tile(registry), Tile(registry)
    main.link_right(right)
    main.link_bottom(below)
    ui.select_tile(below)
    ui.swipe_left()
    assert ui.to_tile is right
    assert ui.from_tile is below


def test_swipe_without_tile_raises():
    ui, _ = make_ui()
    with pytest.raises(RuntimeError):
        ui.swipe_left()


def test_forward_press_to_button_on_current_tile():
    ui, registry = make_ui()
    tile = Tile(registry)
    button = Button(registry, tile, 10, 10, 50, 30, "ok")
    ui.select_tile(tile)
    assert ui.forward_event_to_widget(TouchEventType.PRESS, 200, 200, 0) is False
    assert button.state is ButtonState.RELEASED
    assert ui.forward_event_to_widget(TouchEventType.PRESS, 20, 20, 0) is True
    assert button.state is ButtonState.PRESSED


def test_modal_receives_relative_coordinates_and_blocks_swipes():
    ui, registry = make_ui()
    tile = Tile(registry)
    ui.select_tile(tile)
    modal = Modal(registry, 20, 20, 100, 100)
    seen = []

    class Probe(Button):
        def handle_event(self, event, x, y, velocity):
            seen.append((event, x, y))
            return True

    Probe(registry, modal, 10, 10, 50, 30)
    ui.set_modal(modal)
    assert ui.forward_event_to_widget(TouchEventType.PRESS, 35, 35, 0) is True
    assert seen[0][1:] == (5, 5)
    assert ui.forward_event_to_widget(TouchEventType.SWIPE_LEFT, 0, 0, 50) is True


def test_modal_close_event_unsets_modal():
    ui, registry = make_ui()
    modal = Modal(registry, 0, 0, 50, 50)
    ui.set_modal(modal)
    modal.send_event(TileEvent.MODAL_CLOSE)
    assert ui.modal is None


def test_unclaimed_touch_swipe_moves_tiles():
    events = [TouchEvent(TouchEventType.SWIPE_LEFT, 100, 100, 50.0)]
    ui, registry = make_ui(events)
    a, b = Tile(registry), Tile(registry)
    a.link_right(b)
    ui.select_tile(a)
    ui.process_events()
    assert ui.state is UIState.MOVE_RIGHT
    assert ui.to_tile is b


def test_tap_gives_haptic_feedback():
    pulses = []
    events = [TouchEvent(TouchEventType.TAP, 5, 5)]
    ui, registry = make_ui(events, vibrate=pulses.append)
    ui.select_tile(Tile(registry))
    ui.process_events()
    assert pulses == [5]


def test_eco_mode_dims_then_sleeps():
    clock = Clock()
    power = FakePower()
    ui, registry = make_ui(power=power, clock=clock)
    ui.select_tile(Tile(registry))
    ui.enable_ecomode()
    clock.now = ui.eco_max_inactivity
    ui.process_events()
    assert ui.screen_mode is ScreenMode.DIMMED
    assert ui.screen.backlight == 100
    assert power.sleeps == 0
    clock.now += ui.eco_max_inactivity_to_deepsleep
    ui.process_events()
    assert power.sleeps == 1
    assert ui.timer.running is False


def test_touch_in_eco_mode_restores_backlight():
    clock = Clock()
    ui, registry = make_ui([TouchEvent(TouchEventType.PRESS, 1, 1)], clock=clock)
    ui.select_tile(Tile(registry))
    ui.enable_ecomode()
    ui.screen.backlight = 100
    ui.screen_mode = ScreenMode.DIMMED
    ui.process_events()
    assert ui.screen.backlight == ui.screen.default_backlight
    assert ui.screen_mode is ScreenMode.NORMAL


def test_user_button_on_default_tile_sleeps():
    power = FakePower()
    ui, registry = make_ui(power=power)
    tile = RecordingTile(registry)
    ui.select_tile(tile)
    power.button = True
    ui.process_events()
    assert power.sleeps == 1
    assert tile.events[-1] == TileEvent.USERBTN


def test_user_button_elsewhere_returns_to_default_tile():
    power = FakePower()
    ui, registry = make_ui(power=power)
    home, other = RecordingTile(registry), RecordingTile(registry)
    ui.select_tile(home)
    ui.select_tile(other)
    power.button = True
    ui.process_events()
    assert power.sleeps == 0
    assert ui.current_tile is home
    assert home.events[-1] == TileEvent.USERBTN


def test_usb_plug_wakes_screen():
    power = FakePower()
    ui, registry = make_ui(power=power)
    ui.select_tile(Tile(registry))
    ui.screen.backlight = 1
    power.usb = True
    ui.process_events()
    assert ui.usb_plugged is True
    assert ui.screen.backlight == ui.screen.default_backlight
    assert ui.timer.running is True


def test_process_events_commits_tile_background():
    ui, registry = make_ui()
    tile = Tile(registry)
    tile.background_color = rgb(0x1, 0x2, 0x3)
    ui.select_tile(tile)
    before = ui.display.commit_count
    ui.process_events()
    assert ui.display.commit_count == before + 1
    assert ui.display.front[10][10] == rgb(0x1, 0x2, 0x3)


def test_inactivity_timer_fires_and_rearms():
    clock = Clock()
    timer = InactivityTimer(clock)
    timer.start(10)
    clock.now = 9
    assert timer.expired() is False
    clock.now = 10
    assert timer.expired() is True
    assert timer.expired() is False
    clock.now = 10 + InactivityTimer.RETRIGGER_SECONDS
    assert timer.expired() is True
    timer.pause()
    clock.now += 100
    assert timer.expired() is False


def test_disable_ecomode_pauses_timer():
    ui, _ = make_ui()
    ui.enable_ecomode()
    assert ui.timer.running is True
    ui.disable_ecomode()
    assert ui.eco_mode_enabled is False
    assert ui.timer.running is False