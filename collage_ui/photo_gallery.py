from dataclasses import dataclass
from pathlib import Path

PHOTO_DIR = Path(__file__).with_name("assets").joinpath("photos")

# (file, title, footer, swatch used by the placeholder and generator scripts)
GALLERY = (
    ("harbor.png", "Harbor at Dawn", "Lisbon, 2019", ((14, 116, 144), (253, 186, 116))),
    ("alps.png", "Alpine Pass", "Grimsel, 2021", ((30, 64, 175), (226, 232, 240))),
    ("market.png", "Night Market", "Taipei, 2018", ((88, 28, 135), (251, 113, 133))),
    ("dunes.png", "Red Dunes", "Sossusvlei, 2022", ((154, 52, 18), (253, 224, 71))),
    ("forest.png", "Quiet Forest", "Hokkaido, 2020", ((20, 83, 45), (190, 242, 100))),
)


@dataclass(frozen=True)
class PhotoData:
    index: int
    path: Path
    title: str
    footer: str
    label: str
    swatch: tuple[tuple[int, int, int], tuple[int, int, int]]


def photo_count() -> int:
    return len(GALLERY)


def get_photo_data(index: int) -> PhotoData:
    """Looks up a gallery photo; indexes wrap around the gallery."""
    idx = int(index) % len(GALLERY)
    filename, title, footer, swatch = GALLERY[idx]
    return PhotoData(
        index=idx,
        path=PHOTO_DIR / filename,
        title=title,
        footer=footer,
        label=f"Demo {idx + 1}",
        swatch=swatch,
    )
