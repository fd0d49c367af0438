import logging

from collage.Geometry import CardSlot, Position, calculatePosition
from collage.State import (
    SpreadState,
    activeOverrides,
    effectiveSpread,
    parseSpreadInput,
    toggleMode,
    withCustomX,
    withCustomY,
    withUniform,
)

logger = logging.getLogger(__name__)

AXIS_UNIFORM = "uniform"
AXIS_X = "x"
AXIS_Y = "y"


class SpreadEvent:
    def apply(self, state: SpreadState) -> SpreadState:
        return state

    def describe(self) -> str:
        return type(self).__name__


class SetUniform(SpreadEvent):
    def __init__(self, value: float):
        self.value = value

    def apply(self, state):
        return withUniform(state, self.value)

    def describe(self):
        return f"uniform={self.value:g}"


class SetCustomX(SpreadEvent):
    def __init__(self, value: float):
        self.value = value

    def apply(self, state):
        return withCustomX(state, self.value)

    def describe(self):
        return f"x={self.value:g}"


class SetCustomY(SpreadEvent):
    def __init__(self, value: float):
        self.value = value

    def apply(self, state):
        return withCustomY(state, self.value)

    def describe(self):
        return f"y={self.value:g}"


class ToggleMode(SpreadEvent):
    def apply(self, state):
        return toggleMode(state)

    def describe(self):
        return "toggle mode"


AXIS_EVENTS = {
    AXIS_UNIFORM: SetUniform,
    AXIS_X: SetCustomX,
    AXIS_Y: SetCustomY,
}


class SpreadCore:
    """
    Owns the demo's single spread state and forwards every change to the
    registered interface.
    """

    def __init__(self):
        self.interface = None
        self.state: SpreadState = None

    def registerInterface(self, interface):
        self.interface = interface
        interface.core = self

    def start(self, state: SpreadState):
        if self.interface is None:
            raise RuntimeError("interface is null")
        self.state = state
        logger.info("Spread demo started: uniform=%g mode=%s", state.uniform, state.mode.value)
        self.interface.onStart()

    def isStarted(self):
        return self.state is not None

    def positionOf(self, slot: CardSlot) -> Position:
        customX, customY = activeOverrides(self.state)
        return calculatePosition(slot, self.state.uniform, customX, customY)

    def positions(self, slots) -> list[tuple[CardSlot, Position]]:
        return [(slot, self.positionOf(slot)) for slot in slots]

    def effectiveSpread(self) -> tuple[float, float]:
        return effectiveSpread(self.state)

    def askSetUniform(self, value) -> bool:
        return self.doEvent(SetUniform(float(value)))

    def askSetCustomX(self, value) -> bool:
        return self.doEvent(SetCustomX(float(value)))

    def askSetCustomY(self, value) -> bool:
        return self.doEvent(SetCustomY(float(value)))

    def askToggleMode(self) -> bool:
        return self.doEvent(ToggleMode())

    def askTypedValue(self, axis: str, text) -> bool:
        """Applies a value typed into a number box. Unparseable text means 0."""
        eventType = AXIS_EVENTS.get(axis)
        if eventType is None:
            raise ValueError(f"unknown axis: {axis!r}")
        return self.doEvent(eventType(parseSpreadInput(text)))

    def doEvent(self, event: SpreadEvent) -> bool:
        if self.state is None:
            raise RuntimeError("spread demo not started")
        newState = event.apply(self.state)
        if newState == self.state:
            return False
        self.state = newState
        logger.debug("Applied %s -> effective spread %s", event.describe(), self.effectiveSpread())
        self.interface.onEvent(event)
        return True
