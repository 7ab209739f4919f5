import glfw

from spotzoom.state import FrameInput
from spotzoom.utilities.keybinding_management import KeybindingManager


class InputTracker:
    """Collects GLFW input events between frames and hands out FrameInput snapshots."""

    def __init__(self, window, keybindings: KeybindingManager):
        self.window = window
        self.keybindings = keybindings

        # Input state (updated by callbacks)
        self._keys_down = set()
        self._keys_pressed = set()  # one-shot, reset after snapshot
        self._scroll_delta = 0.0
        self._mouse_pos = tuple(glfw.get_cursor_pos(window))
        self._last_snapshot_mouse_pos = self._mouse_pos

        self.setup_callbacks()

    def setup_callbacks(self):
        glfw.set_cursor_pos_callback(self.window, self.cursor_pos_callback)
        glfw.set_scroll_callback(self.window, self.scroll_callback)
        glfw.set_key_callback(self.window, self.key_callback)

    @property
    def mouse_position(self) -> tuple:
        return self._mouse_pos

    def cursor_pos_callback(self, window, xpos, ypos):
        self._mouse_pos = (xpos, ypos)

    def scroll_callback(self, window, xoffset, yoffset):
        self._scroll_delta += yoffset

    def key_callback(self, window, key, scancode, action, mods):
        if action == glfw.PRESS:
            self._keys_down.add(key)
            self._keys_pressed.add(key)
        elif action == glfw.RELEASE:
            self._keys_down.discard(key)

    def _actions(self, keys) -> frozenset:
        names = set()
        for key in keys:
            names.update(self.keybindings.actions_for_key(key))
        return frozenset(names)

    def snapshot(self, dt: float, fps: int, screen_size: tuple, framebuffer_scale: tuple) -> FrameInput:
        """Return the input for this frame and reset one-shot state."""
        mouse = self._mouse_pos
        previous = self._last_snapshot_mouse_pos
        frame_input = FrameInput(
            actions_held=self._actions(self._keys_down),
            actions_pressed=self._actions(self._keys_pressed),
            mouse_position=mouse,
            mouse_delta=(mouse[0] - previous[0], mouse[1] - previous[1]),
            scroll_delta=self._scroll_delta,
            primary_down=glfw.get_mouse_button(self.window, glfw.MOUSE_BUTTON_LEFT) == glfw.PRESS,
            secondary_down=glfw.get_mouse_button(self.window, glfw.MOUSE_BUTTON_RIGHT) == glfw.PRESS,
            dt=dt,
            fps=fps,
            screen_size=screen_size,
            framebuffer_scale=framebuffer_scale,
        )

        # Reset one-shot state
        self._keys_pressed.clear()
        self._scroll_delta = 0.0
        self._last_snapshot_mouse_pos = mouse
        return frame_input
