from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from plotwidget.raster.canvas import RGBA, ClipBox


DEFAULT_FONT_FAMILY = "DejaVu Sans"
TEXT_STYLE_SIZES_PX = {"body": 14.0, "small": 10.0}
LINE_SPACING_PX = 2
FONT_FALLBACK_PATTERNS = (
    "dejavusans",
    "dejavu sans",
    "helvetica",
    "arial",
    "menlo",
    "dejavusansmono",
)


def draw_text(
    dst: np.ndarray,
    x: int,
    y: int,
    text: str,
    color: RGBA,
    *,
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size_px: float = TEXT_STYLE_SIZES_PX["body"],
    embolden_px: int = 1,
    clip: ClipBox | None = None,
) -> None:
    """Draw `text` with its top-left corner at (x, y); newlines start new lines."""
    if not text:
        return
    font = _load_font(font_family=font_family, font_size_px=font_size_px)
    mask = _render_mask(text=text, font=font)
    if embolden_px > 1:
        mask = _embolden(mask, embolden_px)
    _blend_mask(dst, x, y, mask, color, clip=clip)


def text_size(
    text: str,
    *,
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size_px: float = TEXT_STYLE_SIZES_PX["body"],
) -> tuple[int, int]:
    font = _load_font(font_family=font_family, font_size_px=font_size_px)
    if not text:
        return (0, max(1, int(round(font_size_px))))
    left, top, right, bottom = _multiline_bbox(text, font)
    return (max(0, int(right - left)), max(1, int(bottom - top)))


def anchored_origin(x: float, y: float, size: tuple[int, int], anchor: str) -> tuple[int, int]:
    """Top-left corner for a `size` box anchored at (x, y), e.g. "center_bottom"."""
    w, h = size
    horizontal, vertical = anchor.split("_", 1)
    if horizontal == "center":
        x -= w / 2.0
    elif horizontal == "right":
        x -= w
    if vertical == "center":
        y -= h / 2.0
    elif vertical == "bottom":
        y -= h
    return (int(round(x)), int(round(y)))


def _multiline_bbox(text: str, font: ImageFont.FreeTypeFont | ImageFont.ImageFont) -> tuple[int, int, int, int]:
    probe = ImageDraw.Draw(Image.new("L", (1, 1), 0))
    left, top, right, bottom = probe.multiline_textbbox((0, 0), text, font=font, spacing=LINE_SPACING_PX)
    return (int(left), int(top), int(right), int(bottom))


def _blend_mask(dst: np.ndarray, x: int, y: int, mask: np.ndarray, color: RGBA, *, clip: ClipBox | None = None) -> None:
    h, w = mask.shape
    if h <= 0 or w <= 0:
        return

    cx0, cy0, cx1, cy1 = clip if clip is not None else (0, 0, dst.shape[1], dst.shape[0])
    x0 = max(cx0, x)
    y0 = max(cy0, y)
    x1 = min(cx1, x + w)
    y1 = min(cy1, y + h)
    if x1 <= x0 or y1 <= y0:
        return

    sx0 = x0 - x
    sy0 = y0 - y
    sx1 = sx0 + (x1 - x0)
    sy1 = sy0 + (y1 - y0)

    cov = mask[sy0:sy1, sx0:sx1].astype(np.float32) / 255.0
    if not np.any(cov > 0):
        return

    patch = dst[y0:y1, x0:x1]
    dst_rgb = patch[:, :, :3].astype(np.float32)
    dst_alpha = patch[:, :, 3].astype(np.float32) / 255.0

    src_alpha = (color[3] / 255.0) * cov
    src_rgb = np.asarray(color[:3], dtype=np.float32).reshape(1, 1, 3)
    out_alpha = src_alpha + dst_alpha * (1.0 - src_alpha)
    out_rgb_num = src_rgb * src_alpha[:, :, None] + dst_rgb * dst_alpha[:, :, None] * (1.0 - src_alpha[:, :, None])
    safe_alpha = np.where(out_alpha > 1e-6, out_alpha, 1.0)
    out_rgb = out_rgb_num / safe_alpha[:, :, None]

    patch[:, :, :3] = np.clip(out_rgb, 0, 255).astype(np.uint8)
    patch[:, :, 3] = np.clip(out_alpha * 255.0, 0, 255).astype(np.uint8)


def _embolden(mask: np.ndarray, embolden_px: int) -> np.ndarray:
    if embolden_px <= 1:
        return mask
    out = mask.copy()
    for shift in range(1, embolden_px):
        src = mask[:, : max(0, mask.shape[1] - shift)]
        dst = out[:, shift:]
        if src.size == 0 or dst.size == 0:
            break
        np.maximum(dst, src, out=dst)
    return out


@lru_cache(maxsize=128)
def _render_mask(text: str, font: ImageFont.FreeTypeFont | ImageFont.ImageFont) -> np.ndarray:
    if not text:
        return np.zeros((1, 1), dtype=np.uint8)
    left, top, right, bottom = _multiline_bbox(text, font)
    width = max(1, right - left)
    height = max(1, bottom - top)
    image = Image.new("L", (width, height), 0)
    draw = ImageDraw.Draw(image)
    draw.multiline_text((-left, -top), text, fill=255, font=font, spacing=LINE_SPACING_PX)
    return np.asarray(image, dtype=np.uint8)


@lru_cache(maxsize=64)
def _load_font(font_family: str, font_size_px: float) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    size = max(1, int(round(font_size_px)))
    font_path = _resolve_font_path(font_family)
    if font_path is None:
        return ImageFont.load_default()
    try:
        return ImageFont.truetype(str(font_path), size=size)
    except OSError:
        return ImageFont.load_default()


def _resolve_font_path(font_family: str) -> Path | None:
    wanted = font_family.strip().lower() if font_family.strip() else DEFAULT_FONT_FAMILY.lower()
    patterns = (wanted,) + FONT_FALLBACK_PATTERNS

    font_dirs = [
        Path.home() / "Library" / "Fonts",
        Path("/Library/Fonts"),
        Path("/System/Library/Fonts"),
        Path("/System/Library/Fonts/Supplemental"),
        Path("/usr/share/fonts"),
        Path("/usr/local/share/fonts"),
    ]

    candidates: list[Path] = []
    for base in font_dirs:
        if not base.exists():
            continue
        for ext in ("*.ttf", "*.otf", "*.ttc"):
            candidates.extend(base.rglob(ext))

    for pattern in patterns:
        p = pattern.replace(" ", "")
        for path in candidates:
            stem = path.stem.lower().replace(" ", "")
            name = path.name.lower().replace(" ", "")
            if p in stem or p in name:
                return path
    return None
