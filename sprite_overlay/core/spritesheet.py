"""
Spritesheet - locate fixed-size tiles in a grid-tiled image
"""

import numpy as np
from pathlib import Path
from typing import Iterator
from .parser import Sprite, SpriteParser


class Spritesheet:
    """
    Index square tiles laid out left-to-right, top-to-bottom.

    Partial tiles along the right and bottom edges are ignored.

    Example:
        sheet = Spritesheet.from_path("tiles.png", tile_size=16)
        for i in range(sheet.num_tiles):
            tile = sheet.tile(i)
    """

    def __init__(self, sprite: Sprite, tile_size: int):
        if tile_size <= 0:
            raise ValueError(f"Tile size must be positive, got {tile_size}")

        self.sprite = sprite
        self.tile_size = tile_size
        self.columns = sprite.width // tile_size
        self.rows = sprite.height // tile_size

    @classmethod
    def from_bytes(cls, data: bytes, tile_size: int, name: str = "sheet") -> 'Spritesheet':
        """Decode an encoded image and index it"""
        return cls(SpriteParser.from_bytes(data, name=name), tile_size)

    @classmethod
    def from_path(cls, path: str | Path, tile_size: int) -> 'Spritesheet':
        """Load an image file and index it"""
        return cls(SpriteParser.parse(path), tile_size)

    @property
    def num_tiles(self) -> int:
        return self.columns * self.rows

    def tile_origin(self, index: int) -> tuple:
        """Top-left (x, y) of the tile at index"""
        if not 0 <= index < self.num_tiles:
            raise IndexError(f"Tile index {index} out of range (0-{self.num_tiles - 1})")

        x = (index % self.columns) * self.tile_size
        y = (index // self.columns) * self.tile_size
        return x, y

    def tile(self, index: int) -> Sprite:
        """Copy the tile at index into a new tile_size x tile_size sprite"""
        x, y = self.tile_origin(index)
        size = self.tile_size
        pixels = np.ascontiguousarray(self.sprite.pixels[y:y + size, x:x + size])

        return Sprite(
            width=size,
            height=size,
            pixels=pixels.copy(),
            name=f"{self.sprite.name}_{index:04d}",
            source_path=self.sprite.source_path
        )

    def __len__(self) -> int:
        return self.num_tiles

    def __iter__(self) -> Iterator[Sprite]:
        for i in range(self.num_tiles):
            yield self.tile(i)
