from collage.Core import SetCustomX, SetCustomY, SetUniform, SpreadEvent, ToggleMode
from collage.Geometry import calculatePosition
from collage.State import SpreadState, activeOverrides, effectiveSpread, storedValue
from collage_ui.photo_gallery import get_photo_data
from collage_ui.ui_config import DEMO_CARDS
from collage_ui.view_model import AnimationEvent, CardView, DemoViewModel


class SpreadAdapter:
    """Bridges the spread state/events to a renderer-friendly model."""

    @staticmethod
    def snapshot(state: SpreadState, demo_cards=DEMO_CARDS) -> DemoViewModel:
        custom_x, custom_y = activeOverrides(state)
        cards = []
        for card_id, slot, z_index, photo_index in demo_cards:
            cards.append(
                CardView(
                    id=card_id,
                    slot=slot,
                    z_index=z_index,
                    photo=get_photo_data(photo_index),
                    position=calculatePosition(slot, state.uniform, custom_x, custom_y),
                )
            )
        # Painter's order: back card first.
        cards.sort(key=lambda c: c.z_index)
        effective_x, effective_y = effectiveSpread(state)
        return DemoViewModel(
            mode=state.mode.value,
            uniform=state.uniform,
            custom_x=storedValue(state.customX),
            custom_y=storedValue(state.customY),
            effective_x=effective_x,
            effective_y=effective_y,
            cards=tuple(cards),
        )

    @staticmethod
    def event_to_animation(event: SpreadEvent) -> AnimationEvent:
        if isinstance(event, ToggleMode):
            return AnimationEvent(type="MODE", payload={})
        if isinstance(event, SetUniform):
            return AnimationEvent(type="RESPREAD", payload={"axis": "uniform", "value": event.value})
        if isinstance(event, SetCustomX):
            return AnimationEvent(type="RESPREAD", payload={"axis": "x", "value": event.value})
        if isinstance(event, SetCustomY):
            return AnimationEvent(type="RESPREAD", payload={"axis": "y", "value": event.value})
        return AnimationEvent(type="UNKNOWN", payload={"event": type(event).__name__})
