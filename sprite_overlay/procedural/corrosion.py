"""
Corrosion - rust/acid patches eating into the sprite

A seeded cellular automaton confined to the silhouette. Each step a clean
cell corrodes with probability (corroded neighbors / 8); corroded cells stay
corroded. The two state grids are swapped between steps so a step only ever
reads the previous one. Seeds first show up in the result after one step.
"""

import numpy as np
from typing import Optional
from .base import BaseOverlay, OverlayConfig, GridMath
from ..core.parser import Sprite


def corrode(
    occupied: np.ndarray,
    iterations: int,
    seeds: int,
    rng
) -> np.ndarray:
    """
    Run the corrosion automaton over a silhouette.

    Args:
        occupied: Boolean silhouette mask (height, width)
        iterations: Number of growth steps
        seeds: Number of occupied cells to start corroded
        rng: Random source with permutation() and integers() methods

    Returns:
        Boolean mask of corroded cells, always a subset of occupied
    """
    if iterations < 0:
        raise ValueError(f"Iterations must be >= 0, got {iterations}")
    if seeds < 0:
        raise ValueError(f"Seed count must be >= 0, got {seeds}")

    current = np.zeros(occupied.shape, dtype=bool)
    previous = np.zeros(occupied.shape, dtype=bool)

    # Seeds are marked in current; the first step reads an empty previous
    budget = seeds
    flat_occupied = occupied.ravel()
    for cell in rng.permutation(occupied.size):
        if budget <= 0:
            break
        if flat_occupied[cell]:
            current.flat[cell] = True
            budget -= 1

    for _ in range(iterations):
        counts = GridMath.neighbor_count(previous)
        draws = rng.integers(0, 8, size=occupied.shape)

        current |= previous | (draws < counts)
        current &= occupied

        current, previous = previous, current

    return previous


class CorrosionOverlay(BaseOverlay):
    """Corroded patches painted over the silhouette"""

    name = "corrosion"
    description = "Rust or acid patches spreading across the sprite"

    DEFAULT_COLORS = ("#8B4513",)
    COLOR_COUNT = 1
    ITERATIONS = 4
    SEEDS = 3

    def __init__(self, config: Optional[OverlayConfig] = None):
        super().__init__(config)

        self.iterations = self._param('iterations', self.ITERATIONS)
        self.seeds = self._param('seeds', self.SEEDS)

    def render(self, sprite: Sprite) -> np.ndarray:
        mask = corrode(sprite.occupied, self.iterations, self.seeds, self.rng)
        return GridMath.paint_mask(mask, self.colors[0])
