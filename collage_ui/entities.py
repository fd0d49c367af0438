import math
from dataclasses import dataclass, field

from collage.Geometry import Position
from collage_ui.ui_config import CARD_DAMPING, CARD_MASS, CARD_STIFFNESS, REST_DELTA, REST_SPEED

MAX_SUBSTEP = 1.0 / 240.0


@dataclass(frozen=True)
class SpringConfig:
    stiffness: float
    damping: float
    mass: float = 1.0

    @property
    def damping_ratio(self):
        return self.damping / (2.0 * math.sqrt(self.stiffness * self.mass))


CARD_SPRING = SpringConfig(CARD_STIFFNESS, CARD_DAMPING, CARD_MASS)


def spring_from_duration(visual_duration: float, bounce: float) -> SpringConfig:
    """Converts a perceived duration and bounce into stiffness and damping."""
    root = 2.0 * math.pi / (visual_duration * 1.2)
    stiffness = root * root
    ratio = max(0.05, min(1.0, 1.0 - bounce))
    return SpringConfig(stiffness=stiffness, damping=2.0 * ratio * math.sqrt(stiffness))


@dataclass
class SpringValue:
    value: float
    target: float
    config: SpringConfig = CARD_SPRING
    velocity: float = 0.0

    @property
    def settled(self):
        return self.value == self.target and self.velocity == 0.0

    def step(self, dt: float) -> bool:
        """Advances the spring by ``dt`` seconds. Returns True while moving."""
        if self.settled:
            return False
        remaining = max(0.0, dt)
        while remaining > 0:
            h = min(MAX_SUBSTEP, remaining)
            force = -self.config.stiffness * (self.value - self.target) - self.config.damping * self.velocity
            self.velocity += force / self.config.mass * h
            self.value += self.velocity * h
            remaining -= h
            if not (math.isfinite(self.value) and math.isfinite(self.velocity)):
                # Overflowed on a huge distance; land on the target instead of NaN.
                self.value = self.target
                self.velocity = 0.0
                return False
        if abs(self.target - self.value) < REST_DELTA and abs(self.velocity) < REST_SPEED:
            self.value = self.target
            self.velocity = 0.0
        return not self.settled


@dataclass
class AnimatedCard:
    card_id: str
    top: SpringValue
    left: SpringValue
    rotate: SpringValue
    springs: tuple = field(init=False, repr=False)

    def __post_init__(self):
        self.springs = (self.top, self.left, self.rotate)

    @classmethod
    def at_rest(cls, card_id: str, position: Position, config: SpringConfig = CARD_SPRING):
        return cls(
            card_id=card_id,
            top=SpringValue(position.top, position.top, config),
            left=SpringValue(position.left, position.left, config),
            rotate=SpringValue(position.rotate, position.rotate, config),
        )

    def retarget(self, position: Position):
        # Current value and velocity carry over so a new input bends the motion.
        self.top.target = position.top
        self.left.target = position.left
        self.rotate.target = position.rotate

    def step(self, dt: float) -> bool:
        moving = False
        for spring in self.springs:
            moving = spring.step(dt) or moving
        return moving

    @property
    def settled(self):
        return all(s.settled for s in self.springs)

    @property
    def position(self) -> Position:
        return Position(top=self.top.value, left=self.left.value, rotate=self.rotate.value)


@dataclass
class SliderHandle:
    axis: str
    low: float
    high: float
    rect: tuple[float, float, float, float]
    value_rect: tuple[float, float, float, float]

    def value_at(self, x: float, step: float = 1.0) -> float:
        x1, _, x2, _ = self.rect
        if x2 <= x1:
            return self.low
        t = max(0.0, min(1.0, (x - x1) / (x2 - x1)))
        raw = self.low + t * (self.high - self.low)
        snapped = round((raw - self.low) / step) * step + self.low
        return max(self.low, min(self.high, snapped))

    def x_for(self, value: float) -> float:
        x1, _, x2, _ = self.rect
        if self.high == self.low:
            return x1
        t = max(0.0, min(1.0, (value - self.low) / (self.high - self.low)))
        return x1 + t * (x2 - x1)
