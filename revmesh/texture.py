# revmesh/texture.py
# Placeholder material texture: a vertical green gradient, independent of any mesh.

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np
from PIL import Image

TEXTURE_SIZE = 512


@dataclass
class Bitmap:
    """RGBA float samples, shape (H, W, 4). Row 0 is the bottom row (v = 0)."""

    data: np.ndarray

    @property
    def width(self) -> int:
        return int(self.data.shape[1])

    @property
    def height(self) -> int:
        return int(self.data.shape[0])

    def pixel(self, x: int, y: int) -> Tuple[float, float, float, float]:
        r, g, b, a = self.data[y, x]
        return (float(r), float(g), float(b), float(a))

    def to_rgba8(self) -> np.ndarray:
        """Quantize to uint8 with the top row first, as image files store it."""
        arr = (np.clip(self.data, 0.0, 1.0) * 255.0 + 0.5).astype(np.uint8)
        return np.ascontiguousarray(np.flipud(arr))


def gradient_texture(width: int = TEXTURE_SIZE, height: int = TEXTURE_SIZE) -> Bitmap:
    """Pixel (x, y) = (0.5, y / height, 0.5, 1.0)."""
    if width <= 0 or height <= 0:
        raise ValueError("texture size must be positive")
    data = np.empty((height, width, 4), dtype=np.float32)
    data[..., 0] = 0.5
    data[..., 1] = (np.arange(height, dtype=np.float32) / np.float32(height))[:, None]
    data[..., 2] = 0.5
    data[..., 3] = 1.0
    return Bitmap(data)


def save_png(bitmap: Bitmap, path: str) -> None:
    img = Image.fromarray(bitmap.to_rgba8())
    img.save(path, format="PNG", optimize=False, compress_level=6)
