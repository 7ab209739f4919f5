import numpy as np

from spotzoom.state import CameraState, InteractionState
from .actions import PAN_LEFT, PAN_DOWN, PAN_UP, PAN_RIGHT
from .integrators import decay

VELOCITY_THRESHOLD = 15.0

# Screen-space direction of the offset subtracted from the mouse position for each pan key
PAN_DIRECTIONS = (
    (PAN_LEFT, (1.0, 0.0)),
    (PAN_DOWN, (0.0, -1.0)),
    (PAN_UP, (0.0, 1.0)),
    (PAN_RIGHT, (-1.0, 0.0)),
)


def screen_shift_to_world(camera: CameraState, mouse_position, screen_shift) -> np.ndarray:
    """World displacement that makes the content move by `screen_shift` pixels under the mouse."""
    mouse = np.asarray(mouse_position, dtype=np.float64)
    return camera.screen_to_world(mouse - screen_shift) - camera.screen_to_world(mouse)


def pan_with_keys(camera: CameraState, actions_held, mouse_position,
                  step: float = VELOCITY_THRESHOLD) -> np.ndarray:
    """Move the camera for every held pan key. Applies regardless of drag or momentum.

    The offset goes through the coordinate transform, so the apparent speed on
    screen is the same at every zoom level.
    """
    delta = np.zeros(2)
    for action, direction in PAN_DIRECTIONS:
        if action in actions_held:
            delta += screen_shift_to_world(camera, mouse_position, np.array(direction) * step)
    camera.target += delta
    return delta


def drag_or_coast(camera: CameraState, interaction: InteractionState, primary_down: bool,
                  mouse_position, mouse_delta, dt: float, fps: float,
                  threshold: float = VELOCITY_THRESHOLD, decay_rate: float = 6.0) -> np.ndarray:
    """Mouse drag while the primary button is held, momentum after release.

    Dragging records the instantaneous speed so that releasing keeps it. Momentum
    stops outright once the speed falls to the threshold, and the velocity is zeroed.

    Returns:
        The displacement applied to camera.target this frame
    """
    if primary_down:
        delta = screen_shift_to_world(camera, mouse_position, np.asarray(mouse_delta, dtype=np.float64))
        camera.target += delta
        interaction.pan_velocity = delta * fps
        return delta

    velocity = interaction.pan_velocity
    if float(velocity @ velocity) > threshold * threshold:
        delta = velocity * dt
        camera.target += delta
        interaction.pan_velocity = decay(velocity, dt, decay_rate)
        return delta

    # Below the threshold: hard stop
    interaction.pan_velocity = np.zeros(2)
    return np.zeros(2)
