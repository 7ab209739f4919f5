from dataclasses import dataclass, field


@dataclass(frozen=True)
class FrameInput:
    """Snapshot of the input polled for one frame.

    Keys are already translated to action names ("pan_left", "spotlight", ...)
    by the keybinding manager, so controllers never see GLFW key codes.
    """
    # Actions whose key is currently down / went down since the last frame
    actions_held: frozenset = field(default_factory=frozenset)
    actions_pressed: frozenset = field(default_factory=frozenset)

    mouse_position: tuple = (0.0, 0.0)
    mouse_delta: tuple = (0.0, 0.0)
    scroll_delta: float = 0.0

    primary_down: bool = False    # left button
    secondary_down: bool = False  # right button, dismisses the overlay

    # Frame timing (previous frame's duration) and averaged frame rate
    dt: float = 0.0
    fps: int = 0

    # Window size in screen coordinates, and framebuffer pixels per screen coordinate
    screen_size: tuple = (0, 0)
    framebuffer_scale: tuple = (1.0, 1.0)

    def held(self, action: str) -> bool:
        return action in self.actions_held

    def pressed(self, action: str) -> bool:
        return action in self.actions_pressed
