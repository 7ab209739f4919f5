import time
from collections import deque
from typing import Optional

import glfw
import moderngl

from spotzoom.services.screen_capture import OutputInfo
from spotzoom.utilities.errors import StartupError


class FrameClock:
    """Frame timing: dt is the previous frame's duration, fps an average over recent frames."""

    def __init__(self, clock=None, window: int = 30):
        self._clock = clock or time.perf_counter
        self._last = None
        self._durations = deque(maxlen=window)
        self.dt = 0.0

    def tick(self) -> float:
        now = self._clock()
        self.dt = 0.0 if self._last is None else max(0.0, now - self._last)
        self._last = now
        if self.dt > 0.0:
            self._durations.append(self.dt)
        return self.dt

    @property
    def fps(self) -> int:
        if not self._durations:
            return 0
        return int(round(len(self._durations) / sum(self._durations)))


class WindowService:
    """Borderless, transparent, vsynced GLFW window covering one display output."""

    def __init__(self, output: OutputInfo, title: str = "spotzoom"):
        if not glfw.init():
            raise StartupError("GLFW initialization failed")

        glfw.window_hint(glfw.CONTEXT_VERSION_MAJOR, 3)
        glfw.window_hint(glfw.CONTEXT_VERSION_MINOR, 3)
        glfw.window_hint(glfw.OPENGL_PROFILE, glfw.OPENGL_CORE_PROFILE)
        glfw.window_hint(glfw.OPENGL_FORWARD_COMPAT, True)
        glfw.window_hint(glfw.DECORATED, False)
        glfw.window_hint(glfw.TRANSPARENT_FRAMEBUFFER, True)
        glfw.window_hint(glfw.FLOATING, True)

        self.output = output
        self.window = glfw.create_window(output.width, output.height, title, None, None)
        if not self.window:
            glfw.terminate()
            raise StartupError("GLFW window creation failed")

        glfw.make_context_current(self.window)
        glfw.swap_interval(1)  # Enable vsync

        try:
            self.ctx = moderngl.create_context()
        except moderngl.Error as e:
            self.terminate()
            raise StartupError(f"Failed to create an OpenGL context: {e}") from e

        self.clock = FrameClock(clock=glfw.get_time)

    def _find_monitor(self, output: OutputInfo, output_index: Optional[int] = None):
        """GLFW monitor matching the output's position, falling back to its index."""
        monitors = glfw.get_monitors() or []
        for monitor in monitors:
            if tuple(glfw.get_monitor_pos(monitor)) == output.position:
                return monitor
        if output_index is not None and 0 <= output_index < len(monitors):
            return monitors[output_index]
        return None

    def enter_borderless_fullscreen(self, output: OutputInfo, output_index: Optional[int] = None):
        """Cover `output` with the window, using its current video mode so no mode switch happens."""
        monitor = self._find_monitor(output, output_index)
        if monitor is None:
            print(f"Warning: no GLFW monitor matches {output.name}, placing the window manually")
            glfw.set_window_pos(self.window, output.x, output.y)
            glfw.set_window_size(self.window, output.width, output.height)
            return

        mode = glfw.get_video_mode(monitor)
        glfw.set_window_monitor(self.window, monitor, 0, 0,
                                mode.size.width, mode.size.height, mode.refresh_rate)

    @property
    def screen_size(self) -> tuple:
        return tuple(glfw.get_window_size(self.window))

    @property
    def framebuffer_size(self) -> tuple:
        return tuple(glfw.get_framebuffer_size(self.window))

    @property
    def framebuffer_scale(self) -> tuple:
        width, height = self.screen_size
        fb_width, fb_height = self.framebuffer_size
        if width <= 0 or height <= 0:
            return (1.0, 1.0)
        return (fb_width / width, fb_height / height)

    def should_close(self) -> bool:
        return glfw.window_should_close(self.window)

    def poll_events(self):
        glfw.poll_events()

    def swap_buffers(self):
        glfw.swap_buffers(self.window)

    def terminate(self):
        if self.window:
            glfw.destroy_window(self.window)
            self.window = None
        glfw.terminate()
