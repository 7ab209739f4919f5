from spotzoom.state import InteractionState, ShaderUniforms
from spotzoom.state.interaction_state import MIN_SPOTLIGHT_RADIUS, MAX_SPOTLIGHT_RADIUS
from .actions import SPOTLIGHT
from .integrators import clamp, decay


def spotlight_active(frame_input) -> bool:
    return frame_input.held(SPOTLIGHT)


def apply_spotlight_pulse(interaction: InteractionState, radius: float = 5.0, velocity: float = -15.0) -> None:
    """Snap the spotlight wide and let it shrink back quickly, used when the mode engages."""
    interaction.spotlight_radius = radius
    interaction.spotlight_radius_velocity = velocity


def update_spotlight_radius(interaction: InteractionState, dt: float, min_radius: float = MIN_SPOTLIGHT_RADIUS,
                            max_radius: float = MAX_SPOTLIGHT_RADIUS, decay_rate: float = 4.0) -> None:
    """Integrate the radius velocity. Runs every frame, spotlight on or off."""
    interaction.spotlight_radius = clamp(
        interaction.spotlight_radius + interaction.spotlight_radius_velocity * dt,
        min_radius, max_radius
    )
    interaction.spotlight_radius_velocity = decay(interaction.spotlight_radius_velocity, dt, decay_rate)


def cursor_to_shader_space(mouse_position, screen_size, framebuffer_scale=(1.0, 1.0)) -> tuple:
    """Mouse (screen coordinates, y-down) -> framebuffer pixels with y up, as gl_FragCoord sees them."""
    scale_x, scale_y = framebuffer_scale
    framebuffer_height = screen_size[1] * scale_y
    return (float(mouse_position[0] * scale_x), float(framebuffer_height - mouse_position[1] * scale_y))


def build_uniforms(interaction: InteractionState, frame_input, tint_normalized: tuple) -> ShaderUniforms:
    return ShaderUniforms(
        tint=tuple(tint_normalized),
        cursor_position=cursor_to_shader_space(
            frame_input.mouse_position, frame_input.screen_size, frame_input.framebuffer_scale
        ),
        radius_multiplier=float(interaction.spotlight_radius),
    )
