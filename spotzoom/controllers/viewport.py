import numpy as np

from spotzoom.state import CameraState, InteractionState, FrameInput, RenderPlan, MagnifierPreferences
from spotzoom.state.render_state import OPAQUE_BLACK
from .actions import SPOTLIGHT, FINE_ADJUST
from .input_routing import scroll_amount, keyboard_zoom_held, dispatch_scroll
from .zoom_controller import update_zoom
from .pan_controller import pan_with_keys, drag_or_coast
from .spotlight_controller import spotlight_active, apply_spotlight_pulse, update_spotlight_radius, build_uniforms


class ViewportEngine:
    """Per-frame viewport logic: owns the camera and interaction state and runs the controllers.

    Rendering is left to the caller; step() returns a RenderPlan describing what to draw.
    """

    def __init__(self, camera: CameraState, interaction: InteractionState,
                 preferences: MagnifierPreferences = None):
        self.preferences = preferences or MagnifierPreferences()
        self.camera = camera
        self.interaction = interaction

    @classmethod
    def for_screen(cls, screen_size, view_origin, mouse_position,
                   preferences: MagnifierPreferences = None) -> 'ViewportEngine':
        """Camera showing the captured image at its natural placement.

        Args:
            screen_size: Window size in screen pixels
            view_origin: World point that should appear at the window's top-left corner
            mouse_position: Initial mouse position (initial zoom pivot)
            preferences: Tunables, defaults if None
        """
        preferences = preferences or MagnifierPreferences()
        center = np.array(screen_size, dtype=np.float64) / 2.0
        camera = CameraState(
            target=np.asarray(view_origin, dtype=np.float64) + center,
            offset=center,
            zoom=1.0,
            min_zoom=preferences.min_zoom,
            max_zoom=preferences.max_zoom,
        )
        return cls(camera, InteractionState.initial(mouse_position), preferences)

    @staticmethod
    def should_exit(frame_input: FrameInput) -> bool:
        """Secondary button dismisses the overlay."""
        return frame_input.secondary_down

    def step(self, frame_input: FrameInput) -> RenderPlan:
        prefs = self.preferences
        camera = self.camera
        interaction = self.interaction
        dt = frame_input.dt

        # The window can still be resized after startup (late fullscreen switch)
        screen_center = np.array(frame_input.screen_size, dtype=np.float64) / 2.0
        if np.all(screen_center > 0.0) and not np.array_equal(screen_center, camera.offset):
            camera.recenter(screen_center)

        # 1. Dispatch: spotlight pulse, then route the scroll amount
        if frame_input.pressed(SPOTLIGHT):
            apply_spotlight_pulse(interaction, prefs.spotlight_pulse_radius, prefs.spotlight_pulse_velocity)

        spotlight = spotlight_active(frame_input)
        zoom_input = dispatch_scroll(
            interaction,
            scroll_amount(frame_input, prefs.keyboard_zoom_step),
            spotlight,
            frame_input.held(FINE_ADJUST),
        )

        # 2. Zoom
        update_zoom(camera, interaction, zoom_input, frame_input.mouse_position, screen_center,
                    keyboard_zoom_held(frame_input), dt,
                    dead_zone=prefs.zoom_dead_zone, decay_rate=prefs.zoom_decay_rate)

        # 3. Spotlight radius (always integrated so it is settled when the mode re-engages)
        update_spotlight_radius(interaction, dt, prefs.min_spotlight_radius,
                                prefs.max_spotlight_radius, prefs.radius_decay_rate)

        # 4. Pan: keys are additive, drag overrides momentum
        pan_with_keys(camera, frame_input.actions_held, frame_input.mouse_position, prefs.pan_key_step)
        drag_or_coast(camera, interaction, frame_input.primary_down, frame_input.mouse_position,
                      frame_input.mouse_delta, dt, frame_input.fps,
                      threshold=prefs.velocity_threshold, decay_rate=prefs.momentum_decay_rate)

        if spotlight:
            return RenderPlan(
                spotlight_active=True,
                clear_color=prefs.spotlight_tint,
                uniforms=build_uniforms(interaction, frame_input, prefs.spotlight_tint_normalized),
            )
        return RenderPlan(spotlight_active=False, clear_color=OPAQUE_BLACK)
