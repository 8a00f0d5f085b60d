"""
Sprite Overlay - Core Utilities
"""

from .parser import SpriteParser, Sprite, SpriteDecodeError
from .exporter import SpriteExporter
from .spritesheet import Spritesheet
from .color import (
    Color,
    parse_color, to_hex,
    interpolate_color, blend_colors, build_gradient,
    replace_color,
)
from .presets import (
    OverlayPreset, PresetManager, BUILTIN_PRESETS,
    get_preset_manager, get_preset,
)

__all__ = [
    'SpriteParser', 'Sprite', 'SpriteDecodeError',
    'SpriteExporter',
    'Spritesheet',
    # Color
    'Color',
    'parse_color', 'to_hex',
    'interpolate_color', 'blend_colors', 'build_gradient',
    'replace_color',
    # Presets
    'OverlayPreset', 'PresetManager', 'BUILTIN_PRESETS',
    'get_preset_manager', 'get_preset',
]
