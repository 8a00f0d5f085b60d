"""
Sprite Parser - Reads image files and bytes into RGBA sprite buffers
Supports: PNG, GIF, and anything else Pillow can decode
"""

from PIL import Image, UnidentifiedImageError
import numpy as np
from pathlib import Path
from dataclasses import dataclass
from typing import Optional, Tuple
import io


class SpriteDecodeError(ValueError):
    """Raised when image data cannot be decoded into a sprite"""


@dataclass
class Sprite:
    """A parsed sprite: an RGBA pixel buffer indexed [y, x]"""
    width: int
    height: int
    pixels: np.ndarray  # RGBA numpy array (height, width, 4)
    name: str = "sprite"
    source_path: Optional[Path] = None

    @property
    def occupied(self) -> np.ndarray:
        """Boolean mask of pixels with non-zero alpha"""
        return self.pixels[:, :, 3] != 0

    @property
    def is_empty(self) -> bool:
        """True when the buffer has no pixels at all"""
        return self.width == 0 or self.height == 0

    @property
    def bounds(self) -> Tuple[int, int, int, int]:
        """Get bounding box of non-transparent pixels (x, y, w, h)"""
        alpha = self.pixels[:, :, 3]
        rows = np.any(alpha > 0, axis=1)
        cols = np.any(alpha > 0, axis=0)
        if not np.any(rows) or not np.any(cols):
            return (0, 0, self.width, self.height)
        y_min, y_max = np.where(rows)[0][[0, -1]]
        x_min, x_max = np.where(cols)[0][[0, -1]]
        return (int(x_min), int(y_min), int(x_max - x_min + 1), int(y_max - y_min + 1))

    def to_image(self) -> Image.Image:
        """Convert to a Pillow RGBA image"""
        return Image.fromarray(self.pixels.astype(np.uint8), 'RGBA')

    def copy(self) -> 'Sprite':
        """Create a deep copy of the sprite"""
        return Sprite(
            width=self.width,
            height=self.height,
            pixels=self.pixels.copy(),
            name=self.name,
            source_path=self.source_path
        )


class SpriteParser:
    """Parses image files, raw bytes and arrays into Sprite objects"""

    SUPPORTED_FORMATS = {'.png', '.gif', '.jpg', '.jpeg', '.bmp', '.webp'}

    # Default background removal settings (conservative to avoid eating into sprites)
    DEFAULT_BG_TOLERANCE = 15

    @classmethod
    def parse(cls, path: str | Path, remove_background: bool = False,
              bg_tolerance: int = None) -> Sprite:
        """Parse an image file into a Sprite object

        Args:
            path: Path to the image file
            remove_background: Detect and remove a flat background (default: False)
            bg_tolerance: Color tolerance for background detection (default: 15)
        """
        path = Path(path)

        if bg_tolerance is None:
            bg_tolerance = cls.DEFAULT_BG_TOLERANCE

        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        suffix = path.suffix.lower()
        if suffix not in cls.SUPPORTED_FORMATS:
            raise ValueError(f"Unsupported format: {suffix}")

        sprite = cls.from_bytes(path.read_bytes(), name=path.stem)
        sprite.source_path = path

        if remove_background:
            sprite = cls._remove_background(sprite, bg_tolerance)

        return sprite

    @classmethod
    def from_bytes(cls, data: bytes, name: str = "sprite") -> Sprite:
        """Decode encoded image bytes (PNG, GIF, ...) into a Sprite"""
        try:
            img = Image.open(io.BytesIO(data))
            img.load()
        except (UnidentifiedImageError, OSError, SyntaxError) as e:
            raise SpriteDecodeError(f"Could not decode image '{name}': {e}") from e

        return cls.from_image(img, name=name)

    @classmethod
    def from_image(cls, img: Image.Image, name: str = "sprite") -> Sprite:
        """Create a Sprite from a Pillow image"""
        if img.mode != 'RGBA':
            img = img.convert('RGBA')

        return Sprite(
            width=img.width,
            height=img.height,
            pixels=np.array(img, dtype=np.uint8),
            name=name
        )

    @classmethod
    def from_array(cls, pixels: np.ndarray, name: str = "sprite") -> Sprite:
        """Create a Sprite from a numpy array"""
        if pixels.ndim != 3 or pixels.shape[2] not in (3, 4):
            raise ValueError("Pixels must be HxWx3 or HxWx4 array")

        # Ensure RGBA
        if pixels.shape[2] == 3:
            alpha = np.full((*pixels.shape[:2], 1), 255, dtype=pixels.dtype)
            pixels = np.concatenate([pixels, alpha], axis=2)

        return Sprite(
            width=pixels.shape[1],
            height=pixels.shape[0],
            pixels=pixels.astype(np.uint8),
            name=name
        )

    @classmethod
    def _remove_background(cls, sprite: Sprite, tolerance: int = 30) -> Sprite:
        """Fast background removal - detects edge color and removes matching pixels."""
        arr = sprite.pixels.copy()
        h, w = arr.shape[:2]

        if h < 3 or w < 3:
            return sprite

        # Get background color from corners
        corners = [arr[0, 0, :3], arr[0, -1, :3], arr[-1, 0, :3], arr[-1, -1, :3]]
        bg_color = np.mean(corners, axis=0).astype(np.float32)

        rgb = arr[:, :, :3].astype(np.float32)
        distance = np.sqrt(np.sum((rgb - bg_color) ** 2, axis=2))

        arr[distance < tolerance, 3] = 0

        return Sprite(
            width=sprite.width,
            height=sprite.height,
            pixels=arr,
            name=sprite.name,
            source_path=sprite.source_path
        )
