from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import json


@dataclass
class MagnifierPreferences:
    """Tunables for the viewport engine and the bootstrap. Read once at startup, never written."""

    # Spotlight appearance (RGBA 0-255), also the clear color while the spotlight is on
    spotlight_tint: tuple = (0, 0, 0, 190)

    # Panning
    velocity_threshold: float = 15.0  # momentum cutoff (world units / s)
    pan_key_step: float = 15.0  # screen pixels per frame while a pan key is held
    momentum_decay_rate: float = 6.0

    # Zoom
    min_zoom: float = 1.0
    max_zoom: float = 10.0
    zoom_dead_zone: float = 0.5
    zoom_decay_rate: float = 4.0
    keyboard_zoom_step: float = 0.1  # added to the scroll amount per frame while zoom_in/zoom_out is held

    # Spotlight radius animation
    min_spotlight_radius: float = 0.3
    max_spotlight_radius: float = 10.0
    radius_decay_rate: float = 4.0
    spotlight_pulse_radius: float = 5.0
    spotlight_pulse_velocity: float = -15.0

    # Bootstrap
    shader_dir: Optional[str] = None  # None = shaders shipped with the package, a path enables hot reload
    capture_all_outputs: bool = True  # False captures the selected output only
    keyboard_controls: str = "keyboard_controls.json"

    def __post_init__(self):
        self.spotlight_tint = tuple(int(c) for c in self.spotlight_tint)
        if len(self.spotlight_tint) != 4:
            raise ValueError(f"spotlight_tint needs 4 components, got {self.spotlight_tint}")

    @property
    def spotlight_tint_normalized(self) -> tuple:
        return tuple(c / 255.0 for c in self.spotlight_tint)


def load_preferences(filepath: Path | str = "magnifier_preferences.json") -> MagnifierPreferences:
    """Load preferences from a JSON file. Returns default preferences if the file doesn't exist."""
    filepath = Path(filepath)
    if not filepath.exists():
        return MagnifierPreferences()

    try:
        data = json.loads(filepath.read_text())
        # Unknown keys are ignored so old files keep loading
        valid_fields = set(MagnifierPreferences.__dataclass_fields__.keys())
        filtered_data = {k: v for k, v in data.items() if k in valid_fields}
        return MagnifierPreferences(**filtered_data)
    except (json.JSONDecodeError, TypeError, ValueError, AttributeError) as e:
        print(f"Warning: Failed to load preferences from {filepath}: {e}")
        print("Using default preferences")
        return MagnifierPreferences()
