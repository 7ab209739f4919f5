import numpy as np
import pytest

from spotzoom.state import CameraState, InteractionState, FrameInput


@pytest.fixture
def camera():
    """800x600 screen, target at the world origin, no zoom."""
    return CameraState(target=np.array([0.0, 0.0]), offset=np.array([400.0, 300.0]), zoom=1.0)


@pytest.fixture
def interaction():
    return InteractionState.initial((400.0, 300.0))


def make_input(**kwargs) -> FrameInput:
    defaults = dict(dt=1 / 60, fps=60, screen_size=(800, 600), mouse_position=(400.0, 300.0))
    defaults.update(kwargs)
    for key in ('actions_held', 'actions_pressed'):
        if key in defaults:
            defaults[key] = frozenset(defaults[key])
    return FrameInput(**defaults)
