"""
Sprite Exporter - Writes sprites and overlays to PNG
"""

from PIL import Image
import numpy as np
from pathlib import Path
from typing import List
from .parser import Sprite


class SpriteExporter:
    """Exports sprites, tiles and composited overlays"""

    @classmethod
    def to_png(cls, sprite: Sprite, path: str | Path) -> Path:
        """Export a single sprite to PNG"""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        img = Image.fromarray(sprite.pixels.astype(np.uint8), 'RGBA')
        img.save(path, 'PNG')

        return path

    @classmethod
    def to_frames(
        cls,
        sprites: List[Sprite],
        directory: str | Path,
        prefix: str = "tile"
    ) -> List[Path]:
        """Export sprites as individual numbered PNGs"""
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)

        paths = []
        for i, sprite in enumerate(sprites):
            frame_path = directory / f"{prefix}_{i:04d}.png"
            cls.to_png(sprite, frame_path)
            paths.append(frame_path)

        return paths

    @classmethod
    def composite(cls, base: Sprite, *overlays: Sprite) -> Sprite:
        """Alpha-composite overlays atop the base sprite, in order"""
        result = base.to_image()

        for overlay in overlays:
            if (overlay.width, overlay.height) != (base.width, base.height):
                raise ValueError(
                    f"Overlay size {overlay.width}x{overlay.height} does not match "
                    f"sprite size {base.width}x{base.height}"
                )
            result = Image.alpha_composite(result, overlay.to_image())

        return Sprite(
            width=base.width,
            height=base.height,
            pixels=np.array(result, dtype=np.uint8),
            name=f"{base.name}_composite",
            source_path=base.source_path
        )
