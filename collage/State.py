import logging
import math
from dataclasses import dataclass, replace
from enum import Enum

from collage.Geometry import ABSENT, Override, Present, overrideOf, resolveSpread

logger = logging.getLogger(__name__)


class SpreadMode(Enum):
    UNIFORM = "Uniform"
    CUSTOM = "Custom"


@dataclass(frozen=True)
class SpreadState:
    uniform: float
    customX: Override
    customY: Override
    mode: SpreadMode = SpreadMode.UNIFORM

    def isUniform(self):
        return self.mode == SpreadMode.UNIFORM


def initialState(uniform, customX=None, customY=None) -> SpreadState:
    """Starting state: uniform mode, custom values defaulting to 0."""
    return SpreadState(
        uniform=float(uniform),
        customX=overrideOf(0.0 if customX is None else customX),
        customY=overrideOf(0.0 if customY is None else customY),
        mode=SpreadMode.UNIFORM,
    )


def withUniform(state: SpreadState, value) -> SpreadState:
    return replace(state, uniform=float(value))


def withCustomX(state: SpreadState, value) -> SpreadState:
    return replace(state, customX=overrideOf(value))


def withCustomY(state: SpreadState, value) -> SpreadState:
    return replace(state, customY=overrideOf(value))


def toggleMode(state: SpreadState) -> SpreadState:
    # Stored values of the other mode are kept so flipping back restores them.
    mode = SpreadMode.CUSTOM if state.isUniform() else SpreadMode.UNIFORM
    return replace(state, mode=mode)


def activeOverrides(state: SpreadState) -> tuple[Override, Override]:
    if state.isUniform():
        return ABSENT, ABSENT
    return state.customX, state.customY


def effectiveSpread(state: SpreadState) -> tuple[float, float]:
    customX, customY = activeOverrides(state)
    return resolveSpread(state.uniform, customX, customY)


def storedValue(override: Override) -> float:
    """Value shown in an input box; an absent override reads as 0."""
    if isinstance(override, Present):
        return override.value
    return 0.0


def parseSpreadInput(text) -> float:
    try:
        value = float(str(text).strip())
    except ValueError:
        logger.debug("Unparseable spread input %r, using 0", text)
        return 0.0
    if not math.isfinite(value):
        logger.debug("Non-finite spread input %r, using 0", text)
        return 0.0
    return value


def clampToRange(value, low, high) -> float:
    return max(float(low), min(float(high), float(value)))
