import math
import unittest
from types import SimpleNamespace
from unittest.mock import patch

from collage.Core import AXIS_UNIFORM, AXIS_X, AXIS_Y
from collage.Geometry import Position
from collage.State import SpreadMode
from collage_ui.entities import SliderHandle
from collage_ui.modern_interface import ModernSpreadInterface
from collage_ui.ui_config import INPUT_REVEAL_OFFSET, THEME, TOGGLE_HOVER_SCALE, TOGGLE_PRESS_SCALE


class InterfaceTestBase(unittest.TestCase):
    @staticmethod
    def _settings(**overrides):
        data = {"card_spread": "10", "card_spread_x": "", "card_spread_y": "", "scale_value": "1.0"}
        data.update(overrides)
        return data

    def make_ui(self, **overrides):
        ui = ModernSpreadInterface(settings=self._settings(**overrides))
        ui.attach()
        return ui

    def settle(self, ui, frames=600):
        for _ in range(frames):
            if not ui.advance(1.0 / 60.0):
                return


class ModernSpreadInterfaceTestCase(InterfaceTestBase):
    def test_start_places_cards_at_rest(self):
        ui = self.make_ui()
        self.assertEqual(5, len(ui.animated_cards))
        self.assertEqual(Position(40, 60, 5.0), ui.animated_cards["card-c"].position)
        self.assertFalse(ui.advance(1.0 / 60.0))

    def test_initial_state_uses_configured_defaults(self):
        ui = self.make_ui(card_spread="12", card_spread_x="4")
        state = ui.core.state
        self.assertEqual(12, state.uniform)
        self.assertEqual(4, ui.vm.custom_x)
        self.assertEqual(0, ui.vm.custom_y)

    def test_spread_change_animates_cards(self):
        ui = self.make_ui()
        ui.core.askSetUniform(15)
        card = ui.animated_cards["card-b"]
        self.assertFalse(card.settled)
        self.assertTrue(ui.needs_redraw)
        self.settle(ui)
        self.assertEqual(Position(35, 35, -6.0), card.position)

    def test_mode_key_toggles_and_moves_knob(self):
        ui = self.make_ui()
        self.assertEqual(0.0, ui.toggle_knob.value)
        ui.on_key(SimpleNamespace(keysym="m"))
        self.assertEqual(SpreadMode.CUSTOM, ui.core.state.mode)
        self.assertEqual(1.0, ui.toggle_knob.target)
        self.settle(ui)
        self.assertEqual(1.0, ui.toggle_knob.value)
        # Custom defaults are 0 on both axes, so corners collapse onto the center.
        self.assertEqual(Position(50, 50, -5.0), ui.animated_cards["card-e"].position)

    def test_arrow_keys_nudge_within_slider_range(self):
        ui = self.make_ui(card_spread="20")
        ui.on_key(SimpleNamespace(keysym="Right"))
        self.assertEqual(20, ui.core.state.uniform)
        ui.on_key(SimpleNamespace(keysym="Left"))
        self.assertEqual(19, ui.core.state.uniform)

    def test_toggle_button_press(self):
        ui = self.make_ui()
        ui.active_buttons = [{"action": "toggle_mode", "rect": (40, 100, 140, 150)}]
        ui.on_press(SimpleNamespace(x=60, y=120))
        self.assertEqual(SpreadMode.CUSTOM, ui.core.state.mode)

    def test_slider_press_and_drag(self):
        ui = self.make_ui()
        ui.sliders = [SliderHandle(AXIS_UNIFORM, 5, 20, (100, 95, 250, 105), (260, 86, 340, 114))]
        ui.on_press(SimpleNamespace(x=250, y=100))
        self.assertEqual(20, ui.core.state.uniform)
        ui.on_drag(SimpleNamespace(x=100, y=300))
        self.assertEqual(5, ui.core.state.uniform)
        ui.on_release(SimpleNamespace(x=100, y=300))
        ui.on_drag(SimpleNamespace(x=250, y=100))
        self.assertEqual(5, ui.core.state.uniform)

    def test_value_box_prompt_parse_failure_is_zero(self):
        ui = self.make_ui(card_spread_x="6")
        ui.core.askToggleMode()
        ui.sliders = [SliderHandle(AXIS_X, 0, 20, (100, 95, 250, 105), (260, 86, 340, 114))]
        with patch("collage_ui.modern_interface.simpledialog.askstring", return_value="six"):
            ui.on_press(SimpleNamespace(x=300, y=100))
        self.assertEqual(0, ui.vm.custom_x)

    def test_value_box_prompt_accepts_unclamped_values(self):
        ui = self.make_ui()
        ui.sliders = [SliderHandle(AXIS_UNIFORM, 5, 20, (100, 95, 250, 105), (260, 86, 340, 114))]
        with patch("collage_ui.modern_interface.simpledialog.askstring", return_value="35"):
            ui.on_press(SimpleNamespace(x=300, y=100))
        self.assertEqual(35, ui.core.state.uniform)

    def test_cancelled_prompt_changes_nothing(self):
        ui = self.make_ui()
        with patch("collage_ui.modern_interface.simpledialog.askstring", return_value=None):
            self.assertFalse(ui.prompt_typed_value(AXIS_UNIFORM))
        self.assertEqual(10, ui.core.state.uniform)

    def test_card_anchor_maps_percentages_into_container(self):
        ui = self.make_ui()
        x1, y1, x2, y2 = ui.container_rect()
        cx, cy = ui.card_anchor(Position(50, 50, 0))
        self.assertAlmostEqual((x1 + x2) / 2, cx)
        self.assertAlmostEqual((y1 + y2) / 2, cy)
        cx, cy = ui.card_anchor(Position(0, 100, 0))
        self.assertAlmostEqual(x2, cx)
        self.assertAlmostEqual(y1, cy)

    def test_scale_value_shrinks_cards(self):
        full = self.make_ui()
        half = self.make_ui(scale_value="0.5")
        self.assertLess(half.card_pixel_size()[0], full.card_pixel_size()[0])

    def test_draw_without_canvas_is_noop(self):
        ui = self.make_ui()
        ui.draw()
        self.assertEqual([], ui.runtime_tk_images)

    def test_huge_typed_value_keeps_cards_finite(self):
        ui = self.make_ui()
        self.assertTrue(ui.core.askTypedValue(AXIS_UNIFORM, "1e307"))
        self.settle(ui)
        card = ui.animated_cards["card-b"]
        self.assertTrue(all(math.isfinite(v) for v in (card.top.value, card.left.value)))
        ui.core.askTypedValue(AXIS_UNIFORM, "12")
        self.settle(ui)
        self.assertEqual(Position(38, 38, -6.0), card.position)

    def test_toggle_scales_on_hover_and_press(self):
        ui = self.make_ui()
        x1, y1, x2, y2 = ui.toggle_rect()
        inside = SimpleNamespace(x=(x1 + x2) / 2, y=(y1 + y2) / 2)
        ui.on_motion(inside)
        self.assertEqual(TOGGLE_HOVER_SCALE, ui.toggle_scale.target)
        ui.active_buttons = [{"action": "toggle_mode", "rect": ui.toggle_rect()}]
        ui.on_press(inside)
        self.assertEqual(TOGGLE_PRESS_SCALE, ui.toggle_scale.target)
        self.settle(ui)
        self.assertEqual(TOGGLE_PRESS_SCALE, ui.toggle_scale.value)
        ui.on_release(inside)
        self.assertEqual(TOGGLE_HOVER_SCALE, ui.toggle_scale.target)
        ui.on_motion(SimpleNamespace(x=x2 + 50, y=y2 + 50))
        self.assertEqual(1.0, ui.toggle_scale.target)
        self.settle(ui)
        self.assertEqual(1.0, ui.toggle_scale.value)

    def test_mode_switch_reveals_slider_rows(self):
        ui = self.make_ui()
        self.assertEqual(1.0, ui.input_reveal.value)
        ui.core.askToggleMode()
        self.assertEqual(0.0, ui.input_reveal.value)
        self.assertEqual(1.0, ui.input_reveal.target)
        ui.advance(1.0 / 60.0)
        self.assertGreater(ui.input_reveal.value, 0.0)
        self.assertLess(ui.input_reveal.value, 1.0)
        self.settle(ui)
        self.assertEqual(1.0, ui.input_reveal.value)

    def test_value_change_does_not_replay_reveal(self):
        ui = self.make_ui()
        ui.core.askSetUniform(15)
        self.assertEqual(1.0, ui.input_reveal.value)


class RecordingCanvas:
    """Stands in for a Tk canvas and keeps every item it is asked to draw."""

    def __init__(self):
        self.items = []

    def delete(self, tag):
        self.items = []

    def _recorder(kind):
        def create(self, *coords, **options):
            self.items.append((kind, coords, options))
            return len(self.items)

        return create

    create_rectangle = _recorder("rectangle")
    create_oval = _recorder("oval")
    create_text = _recorder("text")
    create_line = _recorder("line")
    create_image = _recorder("image")
    del _recorder

    def of_kind(self, kind):
        return [item for item in self.items if item[0] == kind]


class DrawTestCase(InterfaceTestBase):
    def make_drawn_ui(self, **overrides):
        ui = self.make_ui(**overrides)
        ui.canvas = RecordingCanvas()
        patcher = patch.object(ui.postcards, "sprite", return_value=object())
        self.sprite = patcher.start()
        self.addCleanup(patcher.stop)
        ui.draw()
        return ui

    def texts(self, ui):
        return [options.get("text") for _, _, options in ui.canvas.of_kind("text")]

    def test_draw_registers_toggle_and_uniform_slider(self):
        ui = self.make_drawn_ui()
        self.assertEqual([{"action": "toggle_mode", "rect": ui.toggle_rect()}], ui.active_buttons)
        self.assertEqual([AXIS_UNIFORM], [s.axis for s in ui.sliders])
        self.assertEqual(5, len(ui.canvas.of_kind("image")))
        self.assertEqual(5, self.sprite.call_count)
        self.assertIn("Uniform", self.texts(ui))
        self.assertIn("Effective spread  X 10%   Y 10%", self.texts(ui))

    def test_drawn_toggle_switches_to_two_sliders(self):
        ui = self.make_drawn_ui()
        x1, y1, x2, y2 = ui.active_buttons[0]["rect"]
        ui.on_press(SimpleNamespace(x=x1 + 5, y=(y1 + y2) / 2))
        self.assertEqual(SpreadMode.CUSTOM, ui.core.state.mode)
        ui.draw()
        self.assertEqual([AXIS_X, AXIS_Y], [s.axis for s in ui.sliders])
        self.assertIn("Separate X and Y control", self.texts(ui))

    def test_drawn_slider_track_sets_value(self):
        ui = self.make_drawn_ui()
        x1, y1, x2, y2 = ui.sliders[0].rect
        ui.on_press(SimpleNamespace(x=x2, y=(y1 + y2) / 2))
        self.assertEqual(20, ui.core.state.uniform)

    def test_drawn_value_box_prompts(self):
        ui = self.make_drawn_ui()
        bx1, by1, bx2, by2 = ui.sliders[0].value_rect
        with patch("collage_ui.modern_interface.simpledialog.askstring", return_value="7") as ask:
            ui.on_press(SimpleNamespace(x=(bx1 + bx2) / 2, y=(by1 + by2) / 2))
        ask.assert_called_once()
        self.assertEqual(7, ui.core.state.uniform)

    def test_hidden_slider_rows_are_faded_and_raised(self):
        ui = self.make_drawn_ui()
        settled_y = ui.sliders[0].rect[1]
        ui.core.askToggleMode()
        ui.draw()
        self.assertAlmostEqual(settled_y - INPUT_REVEAL_OFFSET, ui.sliders[0].rect[1])
        labels = [options for _, _, options in ui.canvas.of_kind("text") if options.get("text") == "X"]
        self.assertEqual(THEME["bg_base"], labels[0]["fill"])

    def test_off_canvas_cards_are_not_drawn(self):
        ui = self.make_drawn_ui()
        ui.core.askTypedValue(AXIS_UNIFORM, "1e307")
        self.settle(ui)
        ui.draw()
        # Only the center card stays on the canvas.
        self.assertEqual(1, len(ui.canvas.of_kind("image")))



if __name__ == "__main__":
    unittest.main()
