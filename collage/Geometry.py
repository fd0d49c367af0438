from dataclasses import dataclass
from enum import Enum
from typing import Union


class CardSlot(Enum):
    CENTER = "center"
    CENTER_BACK = "center-back"
    TOP_LEFT = "top-left"
    TOP_RIGHT = "top-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_RIGHT = "bottom-right"

    def isCenter(self):
        return self in CENTER_SLOTS


CENTER_SLOTS = frozenset((CardSlot.CENTER, CardSlot.CENTER_BACK))

# Slots laid out by the demo, front card first.
DEMO_SLOTS = (
    CardSlot.CENTER,
    CardSlot.TOP_LEFT,
    CardSlot.TOP_RIGHT,
    CardSlot.BOTTOM_LEFT,
    CardSlot.BOTTOM_RIGHT,
)

# Resting tilt of each slot in degrees. Spread never changes it.
SLOT_ROTATIONS = {
    CardSlot.CENTER: 0.0,
    CardSlot.CENTER_BACK: 3.0,
    CardSlot.TOP_LEFT: -6.0,
    CardSlot.TOP_RIGHT: 5.0,
    CardSlot.BOTTOM_LEFT: 4.0,
    CardSlot.BOTTOM_RIGHT: -5.0,
}

# (top sign, left sign) applied to (spreadY, spreadX).
QUADRANT_SIGNS = {
    CardSlot.TOP_LEFT: (-1, -1),
    CardSlot.TOP_RIGHT: (-1, 1),
    CardSlot.BOTTOM_LEFT: (1, -1),
    CardSlot.BOTTOM_RIGHT: (1, 1),
}

CENTER_PERCENT = 50.0


@dataclass(frozen=True)
class Present:
    value: float


@dataclass(frozen=True)
class Absent:
    pass


ABSENT = Absent()

Override = Union[Present, Absent]


def overrideOf(value) -> Override:
    """Wraps an optional number, ``None`` meaning no override."""
    if value is None:
        return ABSENT
    return Present(float(value))


@dataclass(frozen=True)
class Position:
    top: float
    left: float
    rotate: float


def resolveSpread(uniformSpread: float, customX: Override, customY: Override) -> tuple[float, float]:
    """
    Resolves the (spreadX, spreadY) pair actually applied to corner slots.

    Both overrides present replace the uniform value on both axes. A single
    override is added on top of the uniform value for its own axis only.
    """
    if isinstance(customX, Present) and isinstance(customY, Present):
        return customX.value, customY.value
    if isinstance(customX, Present):
        return uniformSpread + customX.value, uniformSpread
    if isinstance(customY, Present):
        return uniformSpread, uniformSpread + customY.value
    return uniformSpread, uniformSpread


def calculatePosition(
    slot: CardSlot,
    uniformSpread: float,
    customX: Override = ABSENT,
    customY: Override = ABSENT,
) -> Position:
    """
    Maps a slot and the spread parameters to percentages of the container.

    Values outside the slider ranges are accepted as is and simply land off
    the canvas.
    """
    rotate = SLOT_ROTATIONS[slot]
    if slot.isCenter():
        return Position(top=CENTER_PERCENT, left=CENTER_PERCENT, rotate=rotate)

    spreadX, spreadY = resolveSpread(uniformSpread, customX, customY)
    topSign, leftSign = QUADRANT_SIGNS[slot]
    return Position(
        top=CENTER_PERCENT + topSign * spreadY,
        left=CENTER_PERCENT + leftSign * spreadX,
        rotate=rotate,
    )
