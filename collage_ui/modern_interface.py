import argparse
import logging
import time
from tkinter import BOTH, Canvas, Tk, simpledialog

from collage import CommandLine
from collage.Core import AXIS_UNIFORM, AXIS_X, AXIS_Y, SpreadCore
from collage.Interface import Interface
from collage.State import clampToRange, initialState
from collage_ui.adapter import SpreadAdapter
from collage_ui.card_face import PostcardRenderer, mix_hex
from collage_ui.entities import AnimatedCard, SliderHandle, SpringValue, spring_from_duration
from collage_ui.logging_config import setup_logging
from collage_ui.settings_store import load_settings, save_settings, spread_defaults
from collage_ui.ui_config import (
    CARD_ASPECT,
    CARD_WIDTH_RATIO,
    CONTAINER_HEIGHT_RATIO,
    CONTAINER_TOP_RATIO,
    CONTAINER_WIDTH_RATIO,
    CONTROLS_TOP_RATIO,
    CUSTOM_RANGE,
    FPS_MS,
    INPUT_REVEAL_DURATION,
    INPUT_REVEAL_OFFSET,
    MODE_HINT,
    MODE_TEXT,
    MONO_FONT,
    SLIDER_STEP,
    THEME,
    TOGGLE_BOUNCE,
    TOGGLE_HOVER_SCALE,
    TOGGLE_PRESS_SCALE,
    TOGGLE_VISUAL_DURATION,
    UNIFORM_RANGE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)

logger = logging.getLogger(__name__)

TOGGLE_W = 100
TOGGLE_H = 50
TOGGLE_PAD = 10
KNOB_SIZE = 30
CONTROLS_LEFT = 40
MAX_FRAME_DT = 0.05


class ModernSpreadInterface(Interface):
    AXIS_LABELS = {AXIS_UNIFORM: "Uniform", AXIS_X: "X", AXIS_Y: "Y"}

    def __init__(self, width=WINDOW_WIDTH, height=WINDOW_HEIGHT, settings=None):
        super().__init__()
        self.width = width
        self.height = height
        self.root = None
        self.canvas = None

        self.defaults = spread_defaults(settings if settings is not None else load_settings())
        self.scale_value = self.defaults.scale_value
        self.vm = None
        self.animated_cards = {}
        self.toggle_knob = SpringValue(0.0, 0.0, spring_from_duration(TOGGLE_VISUAL_DURATION, TOGGLE_BOUNCE))
        self.toggle_scale = SpringValue(1.0, 1.0, spring_from_duration(TOGGLE_VISUAL_DURATION, 0.0))
        self.toggle_hover = False
        self.toggle_pressed = False
        self.input_reveal = SpringValue(1.0, 1.0, spring_from_duration(INPUT_REVEAL_DURATION, 0.0))
        self.sliders = []
        self.active_buttons = []
        self.drag_slider = None
        self.needs_redraw = True
        self.last_tick = None
        self.postcards = PostcardRenderer()
        self.runtime_tk_images = []

    def initial_state(self):
        return initialState(
            self.defaults.card_spread,
            self.defaults.card_spread_x,
            self.defaults.card_spread_y,
        )

    def attach(self, core: SpreadCore = None):
        core = core if core is not None else SpreadCore()
        core.registerInterface(self)
        core.start(self.initial_state())
        return core

    def run(self):
        self.root = Tk()
        self.root.title("Card Spread Demo")
        self.root.resizable(True, True)
        self.canvas = Canvas(self.root, width=self.width, height=self.height, highlightthickness=0, bd=0)
        self.canvas.pack(expand=1, fill=BOTH)

        self.root.bind("<Configure>", self.on_resize)
        self.root.bind("<Button-1>", self.on_press)
        self.root.bind("<Motion>", self.on_motion)
        self.root.bind("<B1-Motion>", self.on_drag)
        self.root.bind("<ButtonRelease-1>", self.on_release)
        self.root.bind("<Key>", self.on_key)
        self.root.protocol("WM_DELETE_WINDOW", self.on_close)

        self.attach()
        self.tick()
        self.root.mainloop()

    def request_redraw(self):
        self.needs_redraw = True

    def on_close(self):
        logger.info("Closing spread demo")
        if self.root is not None:
            self.root.destroy()
            self.root = None

    # Interface callbacks

    def onStart(self):
        self.refresh_view_model(snap=True)
        self.toggle_knob = SpringValue(
            self.knob_target(), self.knob_target(), self.toggle_knob.config
        )
        self.request_redraw()

    def onEvent(self, event):
        animation = SpreadAdapter.event_to_animation(event)
        self.refresh_view_model()
        if animation.type == "MODE":
            self.toggle_knob.target = self.knob_target()
            self.drag_slider = None
            # The new slider rows start hidden and slide down into place.
            self.input_reveal = SpringValue(0.0, 1.0, self.input_reveal.config)
        self.request_redraw()

    def refresh_view_model(self, snap=False):
        self.vm = SpreadAdapter.snapshot(self.core.state)
        for card in self.vm.cards:
            anim = self.animated_cards.get(card.id)
            if anim is None or snap:
                self.animated_cards[card.id] = AnimatedCard.at_rest(card.id, card.position)
            else:
                anim.retarget(card.position)

    def knob_target(self):
        return 0.0 if self.core.state.isUniform() else 1.0

    # Input

    def axis_setter(self, axis):
        return {
            AXIS_UNIFORM: self.core.askSetUniform,
            AXIS_X: self.core.askSetCustomX,
            AXIS_Y: self.core.askSetCustomY,
        }[axis]

    def visible_axes(self):
        if self.core.state.isUniform():
            return ((AXIS_UNIFORM, UNIFORM_RANGE),)
        return ((AXIS_X, CUSTOM_RANGE), (AXIS_Y, CUSTOM_RANGE))

    def axis_value(self, axis):
        if axis == AXIS_UNIFORM:
            return self.vm.uniform
        if axis == AXIS_X:
            return self.vm.custom_x
        return self.vm.custom_y

    def prompt_typed_value(self, axis):
        text = simpledialog.askstring(
            "Spread",
            f"{self.AXIS_LABELS[axis]} spread:",
            initialvalue=f"{self.axis_value(axis):g}",
            parent=self.root,
        )
        if text is None:
            return False
        return self.core.askTypedValue(axis, text)

    def on_press(self, event):
        x, y = event.x, event.y
        for btn in self.active_buttons:
            x1, y1, x2, y2 = btn["rect"]
            if x1 <= x <= x2 and y1 <= y <= y2:
                if btn["action"] == "toggle_mode":
                    self.toggle_pressed = True
                    self.update_toggle_scale()
                    self.core.askToggleMode()
                return
        for slider in self.sliders:
            vx1, vy1, vx2, vy2 = slider.value_rect
            if vx1 <= x <= vx2 and vy1 <= y <= vy2:
                self.prompt_typed_value(slider.axis)
                return
            x1, y1, x2, y2 = slider.rect
            if x1 - 6 <= x <= x2 + 6 and y1 - 12 <= y <= y2 + 12:
                self.drag_slider = slider
                self.axis_setter(slider.axis)(slider.value_at(x, SLIDER_STEP))
                return

    def on_drag(self, event):
        if self.drag_slider is None:
            return
        self.axis_setter(self.drag_slider.axis)(self.drag_slider.value_at(event.x, SLIDER_STEP))

    def on_release(self, event):
        self.drag_slider = None
        if self.toggle_pressed:
            self.toggle_pressed = False
            self.toggle_hover = self.hits_toggle(event.x, event.y)
            self.update_toggle_scale()

    def on_motion(self, event):
        hover = self.hits_toggle(event.x, event.y)
        if hover != self.toggle_hover:
            self.toggle_hover = hover
            self.update_toggle_scale()

    def hits_toggle(self, x, y):
        x1, y1, x2, y2 = self.toggle_rect()
        return x1 <= x <= x2 and y1 <= y <= y2

    def update_toggle_scale(self):
        if self.toggle_pressed:
            self.toggle_scale.target = TOGGLE_PRESS_SCALE
        elif self.toggle_hover:
            self.toggle_scale.target = TOGGLE_HOVER_SCALE
        else:
            self.toggle_scale.target = 1.0
        self.request_redraw()

    def nudge(self, delta):
        axis, (low, high) = self.visible_axes()[0]
        value = self.axis_value(axis) + delta
        self.axis_setter(axis)(clampToRange(value, low, high))

    def on_key(self, event):
        key = (event.keysym or "").lower()
        if key == "m":
            self.core.askToggleMode()
        elif key == "left":
            self.nudge(-SLIDER_STEP)
        elif key == "right":
            self.nudge(SLIDER_STEP)
        elif key == "escape":
            self.on_close()

    def on_resize(self, event):
        if event.widget is not self.root:
            return
        if event.width == self.width and event.height == self.height:
            return
        self.width = max(320, event.width)
        self.height = max(320, event.height)
        self.postcards.clear()
        self.request_redraw()

    # Frame loop

    def advance(self, dt):
        moving = False
        for anim in self.animated_cards.values():
            moving = anim.step(dt) or moving
        moving = self.toggle_knob.step(dt) or moving
        moving = self.toggle_scale.step(dt) or moving
        moving = self.input_reveal.step(dt) or moving
        return moving

    def tick(self):
        if self.root is None:
            return
        now = time.time()
        dt = 0.0 if self.last_tick is None else min(MAX_FRAME_DT, now - self.last_tick)
        self.last_tick = now
        moving = self.advance(dt)
        if self.needs_redraw or moving:
            self.draw()
            self.needs_redraw = False
        self.root.after(FPS_MS, self.tick)

    # Layout

    def container_rect(self):
        cw = self.width * CONTAINER_WIDTH_RATIO
        ch = self.height * CONTAINER_HEIGHT_RATIO
        x1 = (self.width - cw) / 2
        y1 = self.height * CONTAINER_TOP_RATIO
        return x1, y1, x1 + cw, y1 + ch

    def card_pixel_size(self):
        w = max(16, int(self.width * CARD_WIDTH_RATIO * self.scale_value))
        return w, max(12, int(w * CARD_ASPECT))

    def toggle_rect(self):
        tx1 = CONTROLS_LEFT
        ty1 = self.height * CONTROLS_TOP_RATIO + 28
        return tx1, ty1, tx1 + TOGGLE_W, ty1 + TOGGLE_H

    def card_anchor(self, position):
        x1, y1, x2, y2 = self.container_rect()
        return x1 + (x2 - x1) * position.left / 100.0, y1 + (y2 - y1) * position.top / 100.0

    # Drawing

    def draw(self):
        if self.canvas is None or self.vm is None:
            return
        c = self.canvas
        c.delete("all")
        self.runtime_tk_images = []
        c.create_rectangle(0, 0, self.width, self.height, fill=THEME["bg_base"], width=0)
        x1, y1, x2, y2 = self.container_rect()
        c.create_rectangle(x1, y1, x2, y2, outline=THEME["container_outline"], dash=(4, 4))
        self.draw_cards(c)
        self.draw_controls(c)

    def draw_cards(self, c):
        cw, ch = self.card_pixel_size()
        for card in self.vm.cards:
            anim = self.animated_cards[card.id]
            pos = anim.position
            cx, cy = self.card_anchor(pos)
            if not (-cw <= cx <= self.width + cw and -ch <= cy <= self.height + ch):
                continue
            tkimg = self.postcards.sprite(card.photo, cw, ch, pos.rotate)
            self.runtime_tk_images.append(tkimg)
            c.create_image(cx, cy, image=tkimg)

    def draw_controls(self, c):
        self.active_buttons = []
        self.sliders = []
        uniform = self.core.state.isUniform()
        mode = self.vm.mode
        accent = THEME["uniform_accent"] if uniform else THEME["custom_accent"]

        top = self.height * CONTROLS_TOP_RATIO
        c.create_text(CONTROLS_LEFT, top, anchor="nw", text="Spread Mode", fill=THEME["label_text"], font="Helvetica 11 bold")

        rect = self.toggle_rect()
        self.draw_toggle(c, rect, uniform)
        self.active_buttons.append({"action": "toggle_mode", "rect": rect})

        ty2 = rect[3]
        c.create_text(CONTROLS_LEFT, ty2 + 12, anchor="nw", text=MODE_TEXT[mode], fill=accent, font="Helvetica 10 bold")
        c.create_text(CONTROLS_LEFT, ty2 + 30, anchor="nw", text=MODE_HINT[mode], fill=THEME["hint_text"], font="Helvetica 9", width=140)

        reveal = max(0.0, min(1.0, self.input_reveal.value))
        row_y = top + 20
        for axis, (low, high) in self.visible_axes():
            self.draw_slider(c, axis, low, high, accent, row_y - INPUT_REVEAL_OFFSET * (1.0 - reveal), reveal)
            row_y += 44

        c.create_text(
            220,
            row_y + 6,
            anchor="nw",
            text=f"Effective spread  X {self.vm.effective_x:g}%   Y {self.vm.effective_y:g}%",
            fill=THEME["hint_text"],
            font=f"{MONO_FONT} 11",
        )

    def draw_toggle(self, c, rect, uniform):
        x1, y1, x2, y2 = rect
        scale = self.toggle_scale.value
        w, h = TOGGLE_W * scale, TOGGLE_H * scale
        tx1 = (x1 + x2 - w) / 2
        ty1 = (y1 + y2 - h) / 2
        tx2, ty2 = tx1 + w, ty1 + h
        pill = THEME["uniform_accent"] if uniform else THEME["toggle_off"]
        r = h / 2
        c.create_oval(tx1, ty1, tx1 + h, ty2, fill=pill, width=0)
        c.create_oval(tx2 - h, ty1, tx2, ty2, fill=pill, width=0)
        c.create_rectangle(tx1 + r, ty1, tx2 - r, ty2, fill=pill, width=0)

        pad, knob = TOGGLE_PAD * scale, KNOB_SIZE * scale
        travel = w - pad * 2 - knob
        kx = tx1 + pad + travel * self.toggle_knob.value
        ky = ty1 + (h - knob) / 2
        c.create_oval(kx + 1, ky + 2, kx + knob + 1, ky + knob + 2, fill=THEME["toggle_shadow"], width=0)
        c.create_oval(kx, ky, kx + knob, ky + knob, fill=THEME["toggle_knob"], width=0)

    def draw_slider(self, c, axis, low, high, accent, y, alpha=1.0):
        label_x = 220
        track_x1 = label_x + 100 + 10
        box_w = 80
        track_x2 = max(track_x1 + 40, self.width - 40 - box_w - 10)
        value = self.axis_value(axis)
        bg = THEME["bg_base"]
        accent = mix_hex(accent, bg, alpha)

        c.create_text(label_x, y, anchor="w", text=self.AXIS_LABELS[axis], fill=mix_hex(THEME["label_text"], bg, alpha), font=f"{MONO_FONT} 12 bold")
        c.create_rectangle(
            track_x1,
            y - 5,
            track_x2,
            y + 5,
            fill=mix_hex(THEME["track_fill"], bg, alpha),
            outline=mix_hex(THEME["track_outline"], bg, alpha),
        )
        slider = SliderHandle(
            axis=axis,
            low=low,
            high=high,
            rect=(track_x1, y - 5, track_x2, y + 5),
            value_rect=(track_x2 + 10, y - 14, track_x2 + 10 + box_w, y + 14),
        )
        hx = slider.x_for(value)
        c.create_oval(hx - 10, y - 10, hx + 10, y + 10, fill=accent, width=0)

        bx1, by1, bx2, by2 = slider.value_rect
        c.create_text(bx1, y, anchor="w", text=f"{value:g}", fill=accent, font=f"{MONO_FONT} 12")
        c.create_line(bx1, by2, bx2, by2, fill=accent, dash=(2, 2))
        self.sliders.append(slider)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Interactive card spread demo.")
    parser.add_argument("--text", action="store_true", help="run the line-oriented demo instead of the window")
    parser.add_argument("--log-level", default="INFO", choices=("DEBUG", "INFO", "WARNING", "ERROR"))
    parser.add_argument("--log-file", default=None)
    parser.add_argument("--write-config", action="store_true", help="write the sanitized settings.ini and exit")
    args = parser.parse_args(argv)

    setup_logging(getattr(logging, args.log_level), args.log_file)
    settings = load_settings()
    if args.write_config:
        save_settings(settings)
        return
    if args.text:
        defaults = spread_defaults(settings)
        CommandLine.main(initialState(defaults.card_spread, defaults.card_spread_x, defaults.card_spread_y))
        return
    ModernSpreadInterface(settings=settings).run()


if __name__ == "__main__":
    main()
