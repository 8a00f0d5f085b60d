"""
Base Overlay - Abstract base class for all procedural overlay generators
Shared grid helpers for neighborhood counting and gradient painting
"""

import numpy as np
from abc import ABC, abstractmethod
from typing import List, Dict, Any, Optional, Sequence
from dataclasses import dataclass, field
from scipy import ndimage
from ..core.parser import Sprite
from ..core.color import Color, parse_color


@dataclass
class OverlayConfig:
    """Configuration for an overlay generator"""
    seed: Optional[int] = None
    colors: List[Any] = field(default_factory=list)
    rng: Optional[np.random.Generator] = None
    extra: Dict[str, Any] = field(default_factory=dict)


class GridMath:
    """Neighborhood helpers over 2D grids. Out-of-bounds cells count as empty."""

    NEIGHBORHOOD = np.ones((3, 3), dtype=bool)

    @staticmethod
    def neighbor_count(mask: np.ndarray) -> np.ndarray:
        """Number of true cells in each cell's 3x3 neighborhood, itself included"""
        return ndimage.convolve(
            mask.astype(np.int32),
            GridMath.NEIGHBORHOOD.astype(np.int32),
            mode='constant',
            cval=0
        )

    @staticmethod
    def ring(mask: np.ndarray) -> np.ndarray:
        """Cells outside mask that touch it (8-connected)"""
        if not mask.any():
            return np.zeros_like(mask, dtype=bool)
        grown = ndimage.binary_dilation(mask, structure=GridMath.NEIGHBORHOOD)
        return grown & ~mask

    @staticmethod
    def dilate(mask: np.ndarray) -> np.ndarray:
        """Mask grown by one cell in all 8 directions"""
        if not mask.any():
            return np.zeros_like(mask, dtype=bool)
        return ndimage.binary_dilation(mask, structure=GridMath.NEIGHBORHOOD)

    @staticmethod
    def paint_gradient(index: np.ndarray, gradient: Sequence[Color]) -> np.ndarray:
        """RGBA layer from a gradient index grid (-1 = unset)"""
        h, w = index.shape
        pixels = np.zeros((h, w, 4), dtype=np.uint8)
        painted = index >= 0
        palette = np.array(gradient, dtype=np.uint8)
        pixels[painted] = palette[index[painted]]
        return pixels

    @staticmethod
    def paint_mask(mask: np.ndarray, color: Color) -> np.ndarray:
        """RGBA layer with mask cells set to a single color"""
        h, w = mask.shape
        pixels = np.zeros((h, w, 4), dtype=np.uint8)
        pixels[mask] = color
        return pixels


class BaseOverlay(ABC):
    """Abstract base class for procedural overlay generators"""

    # Overlay metadata
    name: str = "base"
    description: str = "Base overlay"

    # Colors used when the config supplies none
    DEFAULT_COLORS: tuple = ()
    COLOR_COUNT = 2

    def __init__(self, config: Optional[OverlayConfig] = None):
        self.config = config or OverlayConfig()
        if self.config.rng is not None:
            self.rng = self.config.rng
        else:
            self.rng = np.random.default_rng(self.config.seed)
        self.colors = self._resolve_colors()

    def _resolve_colors(self) -> List[Color]:
        colors = [parse_color(c) for c in (self.config.colors or self.DEFAULT_COLORS)]
        if len(colors) < self.COLOR_COUNT:
            raise ValueError(
                f"{self.name} overlay needs {self.COLOR_COUNT} color(s), got {len(colors)}"
            )
        return colors[:self.COLOR_COUNT]

    def _param(self, key: str, default: Any) -> Any:
        return self.config.extra.get(key, default)

    def apply(self, sprite: Sprite) -> Sprite:
        """Synthesize the overlay layer for a sprite silhouette."""
        if sprite.is_empty:
            raise ValueError(f"Cannot build a {self.name} overlay for an empty sprite")
        return self._create_layer(sprite, self.render(sprite))

    @abstractmethod
    def render(self, sprite: Sprite) -> np.ndarray:
        """Return the overlay's RGBA pixels for the sprite."""
        pass

    def _create_layer(self, sprite: Sprite, pixels: np.ndarray) -> Sprite:
        """Helper to wrap overlay pixels in a sprite matching the source"""
        return Sprite(
            width=sprite.width,
            height=sprite.height,
            pixels=pixels.astype(np.uint8),
            name=f"{sprite.name}_{self.name}",
            source_path=sprite.source_path
        )
