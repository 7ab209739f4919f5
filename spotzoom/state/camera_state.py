from dataclasses import dataclass, field
import numpy as np

MIN_ZOOM = 1.0
MAX_ZOOM = 10.0


@dataclass
class CameraState:
    """2D camera over the captured image.

    `target` is the world point drawn at `offset` (the screen center), scaled by `zoom`.
    World space is the captured image's own pixel space.
    """
    target: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0]))
    offset: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0]))
    zoom: float = 1.0
    min_zoom: float = MIN_ZOOM
    max_zoom: float = MAX_ZOOM

    def __post_init__(self):
        self.target = np.asarray(self.target, dtype=np.float64).copy()
        self.offset = np.asarray(self.offset, dtype=np.float64).copy()
        self.set_zoom(self.zoom)

    def set_zoom(self, zoom: float) -> float:
        """Set zoom, clamped to [min_zoom, max_zoom]. Returns the applied value."""
        self.zoom = float(max(self.min_zoom, min(self.max_zoom, zoom)))
        return self.zoom

    def screen_to_world(self, point) -> np.ndarray:
        """Screen pixels (origin top-left, y-down) -> world coordinates."""
        return (np.asarray(point, dtype=np.float64) - self.offset) / self.zoom + self.target

    def world_to_screen(self, point) -> np.ndarray:
        """World coordinates -> screen pixels."""
        return (np.asarray(point, dtype=np.float64) - self.target) * self.zoom + self.offset

    def recenter(self, offset) -> None:
        """Move `offset`, shifting `target` so every screen pixel keeps showing the same world point."""
        offset = np.asarray(offset, dtype=np.float64)
        self.target = self.target + (offset - self.offset) / self.zoom
        self.offset = offset.copy()
