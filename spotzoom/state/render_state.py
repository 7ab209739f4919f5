from dataclasses import dataclass
from typing import Optional

OPAQUE_BLACK = (0, 0, 0, 255)


@dataclass(frozen=True)
class ShaderUniforms:
    """Values pushed to the spotlight shader for one frame."""
    tint: tuple               # normalized RGBA
    cursor_position: tuple    # framebuffer pixels, y-up (gl_FragCoord space)
    radius_multiplier: float


@dataclass(frozen=True)
class RenderPlan:
    """What the frame loop has to draw this frame."""
    spotlight_active: bool
    clear_color: tuple  # RGBA 0-255
    uniforms: Optional[ShaderUniforms] = None

    @property
    def clear_color_normalized(self) -> tuple:
        return tuple(c / 255.0 for c in self.clear_color)
