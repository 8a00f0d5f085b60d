"""
Glow Diffusion - a banded halo spreading out from the silhouette

The first pass rings the silhouette with the first gradient color. Every
later pass grows the next color outward from pixels that are already lit
and well surrounded, producing concentric color bands.
"""

import numpy as np
from typing import Optional
from .base import BaseOverlay, OverlayConfig, GridMath
from ..core.parser import Sprite
from ..core.color import build_gradient


def diffuse_glow(
    occupied: np.ndarray,
    gradient_size: int,
    rng,
    min_neighbors: int = 3,
    thinning: float = 0.1
) -> np.ndarray:
    """
    Diffuse a gradient outward from the silhouette, one color per pass.

    Args:
        occupied: Boolean silhouette mask (height, width)
        gradient_size: Number of passes / gradient colors
        rng: Random source with a random() method
        min_neighbors: Lit pixels needed in a 3x3 block before it can spread
        thinning: Chance that a qualifying pixel does not spread this pass

    Returns:
        int32 grid of gradient indices, -1 where unlit
    """
    if gradient_size < 2:
        raise ValueError(f"Gradient needs at least 2 colors, got {gradient_size}")

    index = np.full(occupied.shape, -1, dtype=np.int32)

    # Seed pass: ring the silhouette
    index[GridMath.ring(occupied)] = 0

    for k in range(1, gradient_size):
        # Only pixels lit by earlier passes carry a color other than k
        lit = index >= 0
        counts = GridMath.neighbor_count(lit)

        spreading = np.zeros_like(lit)
        for y, x in np.argwhere(lit & (counts >= min_neighbors)):
            if rng.random() < thinning:
                continue
            spreading[y, x] = True

        reached = GridMath.dilate(spreading) & ~lit & ~occupied
        index[reached] = k

    return index


class GlowOverlay(BaseOverlay):
    """Soft banded aura around the silhouette"""

    name = "glow"
    description = "Banded glow diffusing out from the sprite"

    DEFAULT_COLORS = ("#FFF8B0", "#FFD70060")
    GRADIENT_SIZE = 3
    MIN_NEIGHBORS = 3
    THINNING = 0.1

    def __init__(self, config: Optional[OverlayConfig] = None):
        super().__init__(config)

        self.gradient_size = self._param('gradient_size', self.GRADIENT_SIZE)
        self.min_neighbors = self._param('min_neighbors', self.MIN_NEIGHBORS)
        self.thinning = self._param('thinning', self.THINNING)

    def render(self, sprite: Sprite) -> np.ndarray:
        gradient = build_gradient(self.colors[0], self.colors[1], self.gradient_size)

        index = diffuse_glow(
            sprite.occupied,
            len(gradient),
            self.rng,
            min_neighbors=self.min_neighbors,
            thinning=self.thinning,
        )

        return GridMath.paint_gradient(index, gradient)
