import pytest

pytest.importorskip("glfw")

from spotzoom import main
from spotzoom.controllers import ViewportEngine
from spotzoom.controllers.actions import RELOAD_SHADERS
from spotzoom.services import ScreenCaptureService, OutputInfo
from spotzoom.services.window_service import FrameClock
from spotzoom.state import MagnifierPreferences
from conftest import make_input


class FakeCaptureService(ScreenCaptureService):
    def __init__(self, outputs):
        self.outputs = outputs

    def list_outputs(self):
        return list(self.outputs)

    def capture(self, output=None):
        raise AssertionError("capture must not run when output selection fails")


def no_window(*args, **kwargs):
    raise AssertionError("no window may be created when startup fails")


@pytest.fixture
def startup(monkeypatch):
    def configure(outputs):
        monkeypatch.setattr(main, "ScreenCaptureService", lambda: FakeCaptureService(outputs))
        monkeypatch.setattr(main, "WindowService", no_window)
        monkeypatch.setattr(main, "load_preferences", MagnifierPreferences)
    return configure


def test_unknown_monitor_exits_before_window(startup, capsys):
    startup([OutputInfo("DP-1", 0, 0, 1920, 1080)])
    with pytest.raises(SystemExit) as exc:
        main.main(["--monitor", "doesnotexist"])
    assert exc.value.code == 1
    assert "Output 'doesnotexist' not found." in capsys.readouterr().err


def test_no_outputs_exits_before_window(startup, capsys):
    startup([])
    with pytest.raises(SystemExit) as exc:
        main.main([])
    assert exc.value.code == 1
    assert "No display outputs found." in capsys.readouterr().err


class FakeWindow:
    screen_size = (800, 600)
    framebuffer_size = (1600, 1200)
    framebuffer_scale = (2.0, 2.0)

    def __init__(self):
        ticks = iter([0.0, 1 / 60, 2 / 60, 3 / 60])
        self.clock = FrameClock(clock=lambda: next(ticks))


class FakeInput:
    def __init__(self, frame_input):
        self.frame_input = frame_input

    def snapshot(self, dt, fps, screen_size, framebuffer_scale):
        return self.frame_input


class FakeCamera:
    def __init__(self):
        self.rendered = []
        self.reloads = 0

    def reload(self):
        self.reloads += 1
        return True

    def render(self, plan, camera, window_size, framebuffer_size):
        self.rendered.append((plan, window_size, framebuffer_size))


def make_app(frame_input):
    app = main.App.__new__(main.App)
    app.window = FakeWindow()
    app.input = FakeInput(frame_input)
    app.camera = FakeCamera()
    app.engine = ViewportEngine.for_screen((800, 600), (0, 0), (400.0, 300.0))
    return app


def test_frame_renders_plan():
    app = make_app(make_input())
    assert app.orchestrate_frame()
    plan, window_size, framebuffer_size = app.camera.rendered[0]
    assert not plan.spotlight_active
    assert window_size == (800, 600)
    assert framebuffer_size == (1600, 1200)
    assert app.camera.reloads == 0


def test_right_click_ends_loop():
    app = make_app(make_input(secondary_down=True))
    assert not app.orchestrate_frame()
    assert app.camera.rendered == []


def test_reload_key():
    app = make_app(make_input(actions_pressed={RELOAD_SHADERS}))
    app.orchestrate_frame()
    assert app.camera.reloads == 1
