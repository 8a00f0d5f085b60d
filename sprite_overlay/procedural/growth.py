"""
Directional Growth - flames rising off a sprite, drips running down it

Rows are scanned from the sprite's leading edge toward the trailing edge.
A transparent pixel directly past the silhouette starts the gradient; each
pixel past an already-grown pixel continues it one step, with random
thinning so the tongues break up into ragged edges.
"""

import numpy as np
from typing import Optional
from .base import BaseOverlay, OverlayConfig, GridMath
from ..core.parser import Sprite
from ..core.color import build_gradient

UP = 1
DOWN = -1


def grow_directional(
    occupied: np.ndarray,
    gradient_size: int,
    direction: int,
    rng,
    thinning: float,
    sparse_skip: float = 0.5,
    min_neighbors: int = 3
) -> np.ndarray:
    """
    Grow a gradient away from the silhouette along one vertical direction.

    Args:
        occupied: Boolean silhouette mask (height, width)
        gradient_size: Number of gradient steps available
        direction: UP (+1) grows toward row 0, DOWN (-1) toward the last row
        rng: Random source with a random() method
        thinning: Chance to skip any pixel that would continue the gradient
        sparse_skip: Extra skip chance where fewer than min_neighbors of the
            3x3 block are filled
        min_neighbors: Filled-pixel count below which sparse_skip applies

    Returns:
        int32 grid of gradient indices, -1 where nothing grew
    """
    if direction not in (UP, DOWN):
        raise ValueError(f"Direction must be +1 (up) or -1 (down), got {direction}")
    if gradient_size < 2:
        raise ValueError(f"Gradient needs at least 2 colors, got {gradient_size}")

    h, w = occupied.shape
    index = np.full((h, w), -1, dtype=np.int32)
    last = gradient_size - 1

    # Flames scan bottom-up, drips top-down; the source pixel sits behind
    rows = range(h - 1, -1, -1) if direction == UP else range(h)

    for y in rows:
        src_y = y + direction
        if not 0 <= src_y < h:
            continue

        y0, y1 = max(0, y - 1), min(h, y + 2)

        for x in range(w):
            if occupied[y, x]:
                continue

            if occupied[src_y, x]:
                index[y, x] = 0
                continue

            src_index = index[src_y, x]
            if src_index < 0:
                continue

            x0, x1 = max(0, x - 1), min(w, x + 2)
            filled = np.count_nonzero(occupied[y0:y1, x0:x1] | (index[y0:y1, x0:x1] >= 0))

            if (filled < min_neighbors and rng.random() < sparse_skip) or rng.random() < thinning:
                continue

            if src_index < last:
                index[y, x] = src_index + 1

    return index


class DirectionalOverlay(BaseOverlay):
    """Gradient growth off one side of the silhouette"""

    GRADIENT_SIZE = 10
    DIRECTION = UP
    THINNING = 0.1
    SPARSE_SKIP = 0.5
    MIN_NEIGHBORS = 3

    def __init__(self, config: Optional[OverlayConfig] = None):
        super().__init__(config)

        self.gradient_size = self._param('gradient_size', self.GRADIENT_SIZE)
        self.thinning = self._param('thinning', self.THINNING)
        self.sparse_skip = self._param('sparse_skip', self.SPARSE_SKIP)
        self.min_neighbors = self._param('min_neighbors', self.MIN_NEIGHBORS)

    def render(self, sprite: Sprite) -> np.ndarray:
        gradient = build_gradient(self.colors[0], self.colors[1], self.gradient_size)

        index = grow_directional(
            sprite.occupied,
            len(gradient),
            self.DIRECTION,
            self.rng,
            thinning=self.thinning,
            sparse_skip=self.sparse_skip,
            min_neighbors=self.min_neighbors,
        )

        return GridMath.paint_gradient(index, gradient)


class FlameOverlay(DirectionalOverlay):
    """Flames licking upward off the top of the silhouette"""

    name = "flame"
    description = "Ragged flame tongues rising from the sprite"

    DEFAULT_COLORS = ("#FF4500", "#FFD700")
    GRADIENT_SIZE = 10
    DIRECTION = UP
    THINNING = 0.1


class DripOverlay(DirectionalOverlay):
    """Liquid running down off the bottom of the silhouette"""

    name = "drip"
    description = "Drips running down from the sprite"

    DEFAULT_COLORS = ("#B00000", "#4A0000")
    GRADIENT_SIZE = 15
    DIRECTION = DOWN
    THINNING = 0.2
