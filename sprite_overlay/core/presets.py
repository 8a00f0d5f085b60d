"""
Overlay Presets Library - Pre-configured overlay settings
Allows users to apply a tuned effect, colors and parameters with a single flag
"""

import yaml
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional
from dataclasses import dataclass, field, asdict


# ============================================================================
# Preset Data Structures
# ============================================================================

@dataclass
class OverlayPreset:
    """A single overlay preset configuration"""

    name: str
    description: str = ""

    # Overlay generator and its colors (hex strings)
    effect: str = "flame"
    colors: List[str] = field(default_factory=list)

    # Overlay-specific tunables (gradient_size, thinning, iterations, ...)
    params: Dict[str, Any] = field(default_factory=dict)

    # Tags for organization
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for YAML serialization"""
        return {k: v for k, v in asdict(self).items() if v}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'OverlayPreset':
        """Create from dictionary"""
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_fields}

        return cls(**filtered)


# ============================================================================
# Built-in Presets
# ============================================================================

BUILTIN_PRESETS: Dict[str, Dict[str, Any]] = {
    # ==================== FIRE ====================
    "torch_flame": {
        "name": "torch_flame",
        "description": "Tall orange-to-yellow flame",
        "effect": "flame",
        "colors": ["#FF4500", "#FFD700"],
        "params": {"gradient_size": 10, "thinning": 0.1},
        "tags": ["fire", "light"],
    },

    "candle_flame": {
        "name": "candle_flame",
        "description": "Short, tidy flame for small props",
        "effect": "flame",
        "colors": ["#FFA500", "#FFFACD"],
        "params": {"gradient_size": 4, "thinning": 0.05},
        "tags": ["fire", "light", "subtle"],
    },

    # ==================== LIQUID ====================
    "blood_drip": {
        "name": "blood_drip",
        "description": "Dark red drips running off the bottom",
        "effect": "drip",
        "colors": ["#B00000", "#4A0000"],
        "params": {"gradient_size": 15, "thinning": 0.2},
        "tags": ["liquid", "gore"],
    },

    "slime_drip": {
        "name": "slime_drip",
        "description": "Green ooze dripping down",
        "effect": "drip",
        "colors": ["#7FFF00", "#228B22"],
        "params": {"gradient_size": 8, "thinning": 0.25},
        "tags": ["liquid", "poison"],
    },

    # ==================== MAGIC ====================
    "holy_glow": {
        "name": "holy_glow",
        "description": "Warm golden halo",
        "effect": "glow",
        "colors": ["#FFF8B0", "#FFD70060"],
        "params": {"gradient_size": 3},
        "tags": ["magic", "light"],
    },

    "arcane_glow": {
        "name": "arcane_glow",
        "description": "Wide violet aura fading out",
        "effect": "glow",
        "colors": ["#DA70D6", "#4B008240"],
        "params": {"gradient_size": 5, "thinning": 0.15},
        "tags": ["magic"],
    },

    # ==================== DECAY ====================
    "rust": {
        "name": "rust",
        "description": "Rust patches spreading over metal",
        "effect": "corrosion",
        "colors": ["#8B4513"],
        "params": {"iterations": 4, "seeds": 3},
        "tags": ["decay", "metal"],
    },

    "acid": {
        "name": "acid",
        "description": "Heavy acid burn eating most of the sprite",
        "effect": "corrosion",
        "colors": ["#9ACD32C0"],
        "params": {"iterations": 8, "seeds": 6},
        "tags": ["decay", "poison"],
    },
}


# ============================================================================
# Preset Manager
# ============================================================================

class PresetManager:
    """
    Built-in presets plus the user's YAML presets, looked up by name.

    A user file holds either one preset (named after the file) or a
    ``presets:`` mapping of several. User presets shadow built-ins.
    """

    def __init__(self, user_presets_dir: Optional[Path] = None):
        self.user_presets_dir = Path(user_presets_dir or Path.home() / '.sprite-overlay' / 'presets')

        self._builtin = {name: OverlayPreset.from_dict(data) for name, data in BUILTIN_PRESETS.items()}
        self._user: Dict[str, OverlayPreset] = {}

        if self.user_presets_dir.is_dir():
            for yaml_file in sorted(self.user_presets_dir.glob('*.yaml')):
                try:
                    for preset in self._read_file(yaml_file):
                        self._user[preset.name] = preset
                except (OSError, yaml.YAMLError, TypeError, AttributeError) as e:
                    print(f"Warning: Could not load preset file {yaml_file}: {e}")

    @staticmethod
    def _read_file(yaml_file: Path) -> List[OverlayPreset]:
        with open(yaml_file, 'r') as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            return []
        if 'presets' not in data:
            return [OverlayPreset.from_dict({**data, 'name': yaml_file.stem})]
        return [
            OverlayPreset.from_dict({**entry, 'name': name})
            for name, entry in data['presets'].items()
        ]

    def _presets(self) -> Dict[str, OverlayPreset]:
        return {**self._builtin, **self._user}

    def _matching(self, predicate: Callable[[OverlayPreset], bool]) -> List[str]:
        return sorted(name for name, preset in self._presets().items() if predicate(preset))

    def get(self, name: str) -> Optional[OverlayPreset]:
        """Look up a preset; a user preset wins over a built-in one"""
        return self._presets().get(name)

    def list_all(self) -> List[str]:
        return sorted(self._presets())

    def list_by_tag(self, tag: str) -> List[str]:
        """Names of presets carrying the tag (case-insensitive)"""
        tag = tag.lower()
        return self._matching(lambda p: tag in (t.lower() for t in p.tags))

    def list_by_effect(self, effect: str) -> List[str]:
        """Names of presets whose effect field is exactly ``effect``"""
        return self._matching(lambda p: p.effect == effect)

    def search(self, query: str) -> List[str]:
        """Names of presets whose name, description or a tag contains the query"""
        query = query.lower()
        return self._matching(
            lambda p: query in p.name.lower()
            or query in p.description.lower()
            or any(query in t.lower() for t in p.tags)
        )

    def save_preset(self, preset: OverlayPreset, filename: Optional[str] = None) -> Path:
        """
        Write a preset to the user directory and register it.

        Returns:
            Path of the written YAML file
        """
        filename = filename or preset.name
        if not filename.endswith('.yaml'):
            filename += '.yaml'

        self.user_presets_dir.mkdir(parents=True, exist_ok=True)
        filepath = self.user_presets_dir / filename
        with open(filepath, 'w') as f:
            yaml.dump(preset.to_dict(), f, default_flow_style=False, sort_keys=False)

        self._user[preset.name] = preset
        return filepath

    def delete_preset(self, name: str) -> bool:
        """Remove a user preset and its file; built-ins cannot be deleted"""
        if self._user.pop(name, None) is None:
            return False

        (self.user_presets_dir / f"{name}.yaml").unlink(missing_ok=True)
        return True


_manager: Optional[PresetManager] = None


def get_preset_manager() -> PresetManager:
    """Get the shared preset manager"""
    global _manager
    if _manager is None:
        _manager = PresetManager()
    return _manager


def get_preset(name: str) -> Optional[OverlayPreset]:
    return get_preset_manager().get(name)
