import logging

from PIL import Image, ImageDraw, ImageFilter, ImageFont, ImageOps, ImageTk

from collage_ui.photo_gallery import PhotoData
from collage_ui.ui_config import THEME

logger = logging.getLogger(__name__)

RESAMPLE = Image.Resampling.LANCZOS
ROTATE_RESAMPLE = Image.Resampling.BICUBIC

FOOTER_RATIO = 0.22
MARGIN_RATIO = 0.05
ANGLE_QUANTUM = 0.5
SPRITE_CACHE_LIMIT = 600


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    color = color.lstrip("#")
    return int(color[0:2], 16), int(color[2:4], 16), int(color[4:6], 16)


def mix_hex(color: str, background: str, alpha: float) -> str:
    """Blends ``color`` over ``background``; Tk canvas items have no opacity."""
    alpha = max(0.0, min(1.0, alpha))
    fg = hex_to_rgb(color)
    bg = hex_to_rgb(background)
    return "#%02x%02x%02x" % tuple(round(b + (f - b) * alpha) for f, b in zip(fg, bg))


def get_font(size):
    for name in ("DejaVuSans-Bold.ttf", "Arial.ttf", "Helvetica.ttc"):
        try:
            return ImageFont.truetype(name, size=size)
        except OSError:
            continue
    return ImageFont.load_default()


def placeholder_photo(photo: PhotoData, size: tuple[int, int]) -> Image.Image:
    """Diagonal gradient in the photo's swatch colors."""
    w, h = max(1, size[0]), max(1, size[1])
    (r0, g0, b0), (r1, g1, b1) = photo.swatch
    gradient = Image.linear_gradient("L").rotate(-45, expand=True).resize((w, h), RESAMPLE)
    start = Image.new("RGBA", (w, h), (r0, g0, b0, 255))
    end = Image.new("RGBA", (w, h), (r1, g1, b1, 255))
    return Image.composite(end, start, gradient)


class PostcardRenderer:
    def __init__(self):
        self.photo_sources = {}
        self.sprite_cache = {}
        self.warned_paths = set()

    def load_photo(self, photo: PhotoData):
        if photo.path in self.photo_sources:
            return self.photo_sources[photo.path]
        src = None
        if photo.path.exists():
            try:
                with Image.open(photo.path) as img:
                    src = img.convert("RGBA")
            except OSError:
                src = None
        if src is None and photo.path not in self.warned_paths:
            self.warned_paths.add(photo.path)
            logger.warning("Photo %s unavailable, using placeholder", photo.path)
        self.photo_sources[photo.path] = src
        return src

    def compose(self, photo: PhotoData, width: int, height: int) -> Image.Image:
        w, h = max(8, int(width)), max(8, int(height))
        card = Image.new("RGBA", (w, h), hex_to_rgb(THEME["card_paper"]) + (255,))

        m = max(3, int(w * MARGIN_RATIO))
        footer_h = max(10, int(h * FOOTER_RATIO))
        area = (m, m, w - m, h - footer_h)
        area_size = (max(1, area[2] - area[0]), max(1, area[3] - area[1]))

        src = self.load_photo(photo)
        if src is not None:
            picture = ImageOps.fit(src, area_size, RESAMPLE)
        else:
            picture = placeholder_photo(photo, area_size)
        card.alpha_composite(picture, (area[0], area[1]))
        draw = ImageDraw.Draw(card)

        badge_font = get_font(max(8, int(h * 0.06)))
        bx, by = area[0] + m, area[1] + m
        bbox = draw.textbbox((bx, by), photo.label, font=badge_font)
        pad = max(2, m // 2)
        draw.rounded_rectangle(
            (bbox[0] - pad, bbox[1] - pad, bbox[2] + pad, bbox[3] + pad),
            radius=pad * 2,
            fill=(255, 255, 255, 220),
        )
        draw.text((bx, by), photo.label, fill=hex_to_rgb(THEME["card_text"]), font=badge_font)

        title_font = get_font(max(8, int(footer_h * 0.36)))
        footer_font = get_font(max(7, int(footer_h * 0.24)))
        text_x = m
        draw.text((text_x, area[3] + footer_h * 0.12), photo.title, fill=hex_to_rgb(THEME["card_text"]), font=title_font)
        draw.text((text_x, area[3] + footer_h * 0.58), photo.footer, fill=hex_to_rgb(THEME["card_footer"]), font=footer_font)
        draw.rectangle((0, 0, w - 1, h - 1), outline=hex_to_rgb(THEME["card_border"]))
        return card

    def compose_with_shadow(self, photo: PhotoData, width: int, height: int, angle_deg: float) -> Image.Image:
        card = self.compose(photo, width, height)
        blur = max(2, int(card.width * 0.03))
        pad = blur * 3
        shadow = Image.new("RGBA", (card.width + pad * 2, card.height + pad * 2), (0, 0, 0, 0))
        ImageDraw.Draw(shadow).rectangle(
            (pad, pad + blur, pad + card.width, pad + card.height + blur),
            fill=hex_to_rgb(THEME["shadow"]) + (150,),
        )
        shadow = shadow.filter(ImageFilter.GaussianBlur(blur))
        shadow.alpha_composite(card, (pad, pad))
        # Positive angles turn clockwise on screen.
        return shadow.rotate(-angle_deg, resample=ROTATE_RESAMPLE, expand=True)

    def sprite(self, photo: PhotoData, width: int, height: int, angle_deg: float):
        angle_q = round(angle_deg / ANGLE_QUANTUM) * ANGLE_QUANTUM
        key = (photo.index, int(width), int(height), angle_q)
        tkimg = self.sprite_cache.get(key)
        if tkimg is None:
            tkimg = ImageTk.PhotoImage(self.compose_with_shadow(photo, width, height, angle_q))
            self.sprite_cache[key] = tkimg
            if len(self.sprite_cache) > SPRITE_CACHE_LIMIT:
                self.sprite_cache.clear()
                self.sprite_cache[key] = tkimg
        return tkimg

    def clear(self):
        self.sprite_cache.clear()
