from .camera_state import CameraState
from .interaction_state import InteractionState
from .input_state import FrameInput
from .render_state import ShaderUniforms, RenderPlan
from .preferences_state import MagnifierPreferences, load_preferences

__all__ = ['CameraState', 'InteractionState', 'FrameInput', 'ShaderUniforms', 'RenderPlan', 'MagnifierPreferences', 'load_preferences']
