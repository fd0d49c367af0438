import random

from PIL import Image, ImageDraw, ImageFilter

from collage_ui.photo_gallery import GALLERY, PHOTO_DIR

DISPLAY_W, DISPLAY_H = 480, 320
SCALE = 2
W, H = DISPLAY_W * SCALE, DISPLAY_H * SCALE
RESAMPLE = Image.Resampling.LANCZOS


def mix(a, b, t):
    return tuple(int(a[i] + (b[i] - a[i]) * t) for i in range(3))


def draw_sky(draw, top, bottom):
    for y in range(H):
        draw.line((0, y, W, y), fill=mix(top, bottom, y / (H - 1)))


def draw_sun(img, cx, cy, r, color):
    glow = Image.new("RGBA", img.size, (0, 0, 0, 0))
    gd = ImageDraw.Draw(glow)
    gd.ellipse((cx - r * 2, cy - r * 2, cx + r * 2, cy + r * 2), fill=color + (90,))
    glow = glow.filter(ImageFilter.GaussianBlur(r // 2))
    img.alpha_composite(glow)
    ImageDraw.Draw(img).ellipse((cx - r, cy - r, cx + r, cy + r), fill=color + (255,))


def ridge(rng, base_y, amplitude, steps=12):
    pts = [(0, H)]
    for i in range(steps + 1):
        x = W * i / steps
        pts.append((x, base_y + rng.uniform(-amplitude, amplitude)))
    pts.append((W, H))
    return pts


def draw_photo(index, out_path):
    _, title, _, (dark, light) = GALLERY[index]
    rng = random.Random(index * 7919 + len(title))
    img = Image.new("RGBA", (W, H), (0, 0, 0, 255))
    d = ImageDraw.Draw(img)
    draw_sky(d, dark, light)

    draw_sun(img, int(W * rng.uniform(0.2, 0.8)), int(H * rng.uniform(0.18, 0.4)), 28 * SCALE, light)
    d = ImageDraw.Draw(img)

    # three layers of hills, darker towards the viewer
    for layer in range(3):
        tone = mix(light, dark, 0.45 + layer * 0.2)
        base_y = H * (0.55 + layer * 0.13)
        d.polygon(ridge(rng, base_y, 18 * SCALE - layer * 4 * SCALE), fill=tone)

    out_path.parent.mkdir(parents=True, exist_ok=True)
    img.convert("RGB").resize((DISPLAY_W, DISPLAY_H), RESAMPLE).save(out_path, "PNG")


def main():
    for index, (filename, _, _, _) in enumerate(GALLERY):
        draw_photo(index, PHOTO_DIR / filename)
    print(f"Generated {len(GALLERY)} demo photos in {PHOTO_DIR}.")


if __name__ == "__main__":
    main()
