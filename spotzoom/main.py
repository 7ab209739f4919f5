import sys

from spotzoom.camera import Camera
from spotzoom.controllers import ViewportEngine
from spotzoom.controllers.actions import RELOAD_SHADERS
from spotzoom.services import ScreenCaptureService, shader_source_for
from spotzoom.services.input_tracker import InputTracker
from spotzoom.services.window_service import WindowService
from spotzoom.state import MagnifierPreferences, load_preferences
from spotzoom.utilities.cli import CliOptions, parse_args
from spotzoom.utilities.errors import StartupError
from spotzoom.utilities.gl_helpers import texture_from_capture
from spotzoom.utilities.keybinding_management import KeybindingManager


class App:
    """Captures the screen once, then shows it pannable/zoomable until a right click."""

    def __init__(self, options: CliOptions, preferences: MagnifierPreferences = None,
                 capture_service: ScreenCaptureService = None):
        self.preferences = preferences or load_preferences()
        capture_service = capture_service or ScreenCaptureService()

        # Everything that can fail without a window goes first
        outputs = capture_service.list_outputs()
        self.output = capture_service.select_output(outputs, options.monitor)
        self.captured = capture_service.capture(None if self.preferences.capture_all_outputs else self.output)
        self.shader_source = shader_source_for(self.preferences.shader_dir)

        self.window = WindowService(self.output)
        try:
            self.window.enter_borderless_fullscreen(self.output, outputs.index(self.output))
            self.window.poll_events()

            texture = texture_from_capture(self.window.ctx, self.captured)
            self.camera = Camera(self.window.ctx, self.shader_source, texture, self.captured.size)
            print(f"Using {self.shader_source.describe()}")

            self.keybindings = KeybindingManager(self.preferences.keyboard_controls)
            self.input = InputTracker(self.window.window, self.keybindings)
        except StartupError:
            self.window.terminate()
            raise

        self.engine = ViewportEngine.for_screen(
            self.window.screen_size,
            self.captured.view_origin_for(self.output),
            self.input.mouse_position,
            self.preferences,
        )

    def run(self):
        try:
            while not self.window.should_close():
                self.window.poll_events()
                if not self.orchestrate_frame():
                    break
                self.window.swap_buffers()
        finally:
            self.cleanup()

    def orchestrate_frame(self) -> bool:
        """One frame: input, exit check, engine step, draw. Returns False when the overlay is dismissed."""
        dt = self.window.clock.tick()
        frame_input = self.input.snapshot(
            dt, self.window.clock.fps, self.window.screen_size, self.window.framebuffer_scale
        )

        if self.engine.should_exit(frame_input):
            return False

        if frame_input.pressed(RELOAD_SHADERS):
            self.camera.reload()

        plan = self.engine.step(frame_input)
        self.camera.render(plan, self.engine.camera, frame_input.screen_size, self.window.framebuffer_size)
        return True

    def cleanup(self):
        self.camera.release()
        self.camera.texture.release()
        self.window.terminate()


def main(argv=None):
    options = parse_args(argv)
    try:
        app = App(options)
    except StartupError as e:
        print(e, file=sys.stderr)
        sys.exit(1)
    app.run()


if __name__ == "__main__":
    main()
