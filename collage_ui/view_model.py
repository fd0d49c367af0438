from dataclasses import dataclass

from collage.Geometry import CardSlot, Position
from collage_ui.photo_gallery import PhotoData


@dataclass(frozen=True)
class CardView:
    id: str
    slot: CardSlot
    z_index: int
    photo: PhotoData
    position: Position


@dataclass(frozen=True)
class DemoViewModel:
    mode: str
    uniform: float
    custom_x: float
    custom_y: float
    effective_x: float
    effective_y: float
    cards: tuple[CardView, ...]


@dataclass(frozen=True)
class AnimationEvent:
    type: str
    payload: dict
