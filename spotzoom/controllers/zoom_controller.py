import numpy as np

from spotzoom.state import CameraState, InteractionState
from .integrators import decay


def begin_zoom_gesture(interaction: InteractionState, zoom_input: float, mouse_position,
                       screen_center, keyboard_centered: bool) -> bool:
    """Latch the zoom pivot when a new gesture starts.

    The pivot is only moved when input arrives while no gesture is in flight, so a
    scroll burst keeps zooming around the point where it started.

    Returns:
        True if a new gesture started this frame
    """
    if zoom_input == 0.0 or interaction.zoom_gesture_active:
        return False
    pivot = screen_center if keyboard_centered else mouse_position
    interaction.zoom_pivot = np.array(pivot, dtype=np.float64)
    return True


def zoom_around_pivot(camera: CameraState, pivot, new_zoom: float) -> None:
    """Change zoom while keeping the world point under `pivot` at the same screen position."""
    local = np.asarray(pivot, dtype=np.float64) - camera.offset
    p0 = local / camera.zoom
    camera.set_zoom(new_zoom)
    p1 = local / camera.zoom
    camera.target += p0 - p1


def update_zoom(camera: CameraState, interaction: InteractionState, zoom_input: float,
                mouse_position, screen_center, keyboard_centered: bool, dt: float,
                dead_zone: float = 0.5, decay_rate: float = 4.0) -> None:
    """One frame of the zoom controller.

    Args:
        camera: Camera to zoom (zoom and target are mutated)
        interaction: Holds zoom_velocity / zoom_pivot
        zoom_input: Routed scroll amount for this frame, positive zooms in
        mouse_position: Current mouse position in screen pixels
        screen_center: Pivot used for keyboard zoom
        keyboard_centered: Whether a keyboard zoom key is held
        dt: Previous frame duration (seconds)
        dead_zone: Velocities at or below this magnitude do not move the camera
        decay_rate: Exponential decay rate of the velocity (1/s)
    """
    begin_zoom_gesture(interaction, zoom_input, mouse_position, screen_center, keyboard_centered)
    interaction.zoom_velocity += zoom_input

    if abs(interaction.zoom_velocity) > dead_zone:
        zoom_around_pivot(camera, interaction.zoom_pivot,
                          camera.zoom + interaction.zoom_velocity * dt)

    interaction.zoom_velocity = decay(interaction.zoom_velocity, dt, decay_rate)
    interaction.zoom_gesture_active = abs(interaction.zoom_velocity) > dead_zone
