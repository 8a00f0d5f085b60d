"""
Shared fixtures: sprite builders and a constant random source.
"""

import numpy as np
import pytest
from sprite_overlay.core.parser import Sprite, SpriteParser


class ConstantRng:
    """Random source that always returns the same values"""

    def __init__(self, value: float = 1.0, integer: int = 0):
        self.value = value
        self.integer = integer

    def random(self, size=None):
        if size is None:
            return self.value
        return np.full(size, self.value)

    def integers(self, low, high=None, size=None):
        if size is None:
            return self.integer
        return np.full(size, self.integer, dtype=np.int64)

    def permutation(self, n):
        return np.arange(n)


def make_sprite(mask, color=(200, 40, 40, 255)) -> Sprite:
    """Sprite whose occupied pixels are the true cells of mask"""
    mask = np.asarray(mask, dtype=bool)
    pixels = np.zeros((*mask.shape, 4), dtype=np.uint8)
    pixels[mask] = color
    return SpriteParser.from_array(pixels, name="test")


@pytest.fixture
def never_thin():
    return ConstantRng(value=1.0, integer=0)


@pytest.fixture
def always_thin():
    return ConstantRng(value=0.0, integer=7)


@pytest.fixture
def block_sprite():
    """12x12 sprite with a 4x4 opaque block in the middle"""
    mask = np.zeros((12, 12), dtype=bool)
    mask[4:8, 4:8] = True
    return make_sprite(mask)


@pytest.fixture
def blob_sprite():
    """Irregular 16x16 silhouette"""
    mask = np.zeros((16, 16), dtype=bool)
    mask[5:11, 3:13] = True
    mask[3:5, 6:9] = True
    mask[11:13, 9:12] = True
    mask[7, 3] = False
    return make_sprite(mask)
