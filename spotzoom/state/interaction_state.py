from dataclasses import dataclass, field
import numpy as np

MIN_SPOTLIGHT_RADIUS = 0.3
MAX_SPOTLIGHT_RADIUS = 10.0


@dataclass
class InteractionState:
    """Transient per-run state shared by the zoom, pan and spotlight controllers."""
    zoom_velocity: float = 0.0
    zoom_pivot: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0]))
    zoom_gesture_active: bool = False
    pan_velocity: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0]))  # world units / s
    spotlight_radius: float = 1.0
    spotlight_radius_velocity: float = 0.0

    def __post_init__(self):
        self.zoom_pivot = np.asarray(self.zoom_pivot, dtype=np.float64).copy()
        self.pan_velocity = np.asarray(self.pan_velocity, dtype=np.float64).copy()

    @classmethod
    def initial(cls, mouse_position) -> 'InteractionState':
        """Neutral state before the first frame; the pivot starts under the mouse."""
        return cls(zoom_pivot=np.array(mouse_position, dtype=np.float64))
