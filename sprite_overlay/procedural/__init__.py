"""
Procedural Overlays - Algorithm-driven effect layers grown from a sprite silhouette
"""

from .base import BaseOverlay, OverlayConfig, GridMath
from .growth import FlameOverlay, DripOverlay, DirectionalOverlay, grow_directional, UP, DOWN
from .glow import GlowOverlay, diffuse_glow
from .corrosion import CorrosionOverlay, corrode

# Overlay registry for easy access
OVERLAYS = {
    'flame': FlameOverlay,
    'fire': FlameOverlay,  # Alias
    'burn': FlameOverlay,  # Alias
    'drip': DripOverlay,
    'melt': DripOverlay,  # Alias
    'bleed': DripOverlay,  # Alias
    'glow': GlowOverlay,
    'aura': GlowOverlay,  # Alias
    'halo': GlowOverlay,  # Alias
    'corrosion': CorrosionOverlay,
    'rust': CorrosionOverlay,  # Alias
    'acid': CorrosionOverlay,  # Alias
}


def get_overlay(name: str) -> type:
    """Get overlay class by name"""
    name = name.lower()
    if name not in OVERLAYS:
        available = sorted({cls.name for cls in OVERLAYS.values()})
        raise ValueError(f"Unknown overlay: {name}. Available: {available}")
    return OVERLAYS[name]


__all__ = [
    'BaseOverlay',
    'OverlayConfig',
    'GridMath',
    'DirectionalOverlay',
    'FlameOverlay',
    'DripOverlay',
    'GlowOverlay',
    'CorrosionOverlay',
    'grow_directional',
    'diffuse_glow',
    'corrode',
    'UP',
    'DOWN',
    'OVERLAYS',
    'get_overlay',
]
