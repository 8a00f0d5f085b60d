"""
Sprite Overlay - Procedural flame, drip, glow and corrosion layers for pixel art sprites
"""

from .core import (
    SpriteParser, Sprite, SpriteDecodeError, SpriteExporter, Spritesheet,
    build_gradient, parse_color,
)
from .procedural import OVERLAYS, OverlayConfig, get_overlay

__version__ = "0.1.0"
__all__ = [
    'SpriteParser',
    'Sprite',
    'SpriteDecodeError',
    'SpriteExporter',
    'Spritesheet',
    'build_gradient',
    'parse_color',
    'OVERLAYS',
    'OverlayConfig',
    'get_overlay',
    'overlay',
    'slice_sheet',
]


def overlay(
    image_path: str,
    effect: str = None,
    output_path: str = None,
    colors: list = None,
    seed: int = None,
    composite: bool = False,
    preset: str = None,
    remove_background: bool = False,
    **params
):
    """
    Generate an overlay layer for a sprite and write it as a PNG.

    Args:
        image_path: Path to the sprite image
        effect: Overlay name (flame, drip, glow, corrosion or an alias)
        output_path: Output path (auto-generated if None)
        colors: Overlay colors as hex strings or RGBA tuples (overlay defaults if None)
        seed: Random seed for reproducible output
        composite: Write the overlay composited atop the sprite instead of alone
        preset: Preset name supplying effect, colors and params
        remove_background: Auto-remove a flat background color first
        **params: Overlay tunables (gradient_size, thinning, iterations, seeds, ...)

    Returns:
        Path to the output file
    """
    from pathlib import Path
    from .core.presets import get_preset

    extra = {}
    if preset is not None:
        found = get_preset(preset)
        if found is None:
            raise ValueError(f"Unknown preset: {preset}")
        effect = effect or found.effect
        colors = colors or found.colors
        extra.update(found.params)
    extra.update(params)

    if effect is None:
        raise ValueError("An overlay effect or preset is required")

    sprite = SpriteParser.parse(image_path, remove_background=remove_background)

    OverlayClass = get_overlay(effect)
    config = OverlayConfig(seed=seed, colors=list(colors or []), extra=extra)
    layer = OverlayClass(config).apply(sprite)

    if composite:
        layer = SpriteExporter.composite(sprite, layer)

    if output_path is None:
        input_path = Path(image_path)
        output_path = input_path.parent / f"{input_path.stem}_{OverlayClass.name}.png"

    return SpriteExporter.to_png(layer, output_path)


def slice_sheet(image_path: str, tile_size: int, output_dir: str = None, prefix: str = "tile"):
    """
    Slice a grid-tiled spritesheet into one PNG per tile.

    Returns:
        List of written tile paths, in row-major order
    """
    from pathlib import Path

    sheet = Spritesheet.from_path(image_path, tile_size)

    if output_dir is None:
        input_path = Path(image_path)
        output_dir = input_path.parent / f"{input_path.stem}_tiles"

    return SpriteExporter.to_frames(list(sheet), output_dir, prefix=prefix)
