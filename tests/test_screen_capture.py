from types import SimpleNamespace

import numpy as np
import pytest
from mss.exception import ScreenShotError
from screeninfo import ScreenInfoError

from spotzoom.services import screen_capture
from spotzoom.services.screen_capture import ScreenCaptureService, OutputInfo, CapturedImage
from spotzoom.utilities.errors import StartupError


def monitor(name, x, y, width=1920, height=1080, is_primary=False):
    return SimpleNamespace(name=name, x=x, y=y, width=width, height=height, is_primary=is_primary)


class FakeShot:
    def __init__(self, left, top, width, height, pixel=(1, 2, 3, 255)):
        self.left = left
        self.top = top
        self.size = (width, height)
        self.bgra = bytes(pixel) * (width * height)


class FakeMSS:
    """Stands in for mss.mss(): a virtual desktop of two side-by-side outputs."""
    grabbed = []

    def __init__(self):
        self.monitors = [
            {'left': 0, 'top': 0, 'width': 4, 'height': 2},
            {'left': 0, 'top': 0, 'width': 2, 'height': 2},
            {'left': 2, 'top': 0, 'width': 2, 'height': 2},
        ]

    def __enter__(self):
        return self

    def __exit__(self, *args):
        return False

    def grab(self, region):
        FakeMSS.grabbed.append(region)
        return FakeShot(region['left'], region['top'], region['width'], region['height'])


@pytest.fixture
def fake_mss(monkeypatch):
    FakeMSS.grabbed = []
    monkeypatch.setattr(screen_capture.mss, "mss", FakeMSS)
    return FakeMSS


def test_list_outputs(monkeypatch):
    monkeypatch.setattr(screen_capture, "get_monitors", lambda: [
        monitor("DP-1", 0, 0, is_primary=True),
        monitor(None, 1920, 0, 1280, 1024),
    ])
    outputs = ScreenCaptureService().list_outputs()
    assert outputs == [
        OutputInfo("DP-1", 0, 0, 1920, 1080),
        OutputInfo("Display 2", 1920, 0, 1280, 1024),
    ]


def test_list_outputs_failure(monkeypatch):
    def broken():
        raise ScreenInfoError("no enumerators")
    monkeypatch.setattr(screen_capture, "get_monitors", broken)
    with pytest.raises(StartupError, match="enumerate"):
        ScreenCaptureService().list_outputs()


def test_select_output():
    outputs = [OutputInfo("DP-1", 0, 0, 1920, 1080), OutputInfo("HDMI-1", 1920, 0, 1280, 1024)]
    assert ScreenCaptureService.select_output(outputs) is outputs[0]
    assert ScreenCaptureService.select_output(outputs, "HDMI-1") is outputs[1]

    with pytest.raises(StartupError, match="Output 'doesnotexist' not found."):
        ScreenCaptureService.select_output(outputs, "doesnotexist")
    with pytest.raises(StartupError, match="No display outputs found."):
        ScreenCaptureService.select_output([], None)


def test_capture_whole_desktop(fake_mss):
    captured = ScreenCaptureService().capture()
    assert fake_mss.grabbed == [{'left': 0, 'top': 0, 'width': 4, 'height': 2}]
    assert captured.size == (4, 2)
    assert captured.pixels.shape == (2, 4, 4)
    assert captured.pixels.dtype == np.uint8
    # BGRA in, RGBA out
    np.testing.assert_array_equal(captured.pixels[0, 0], [3, 2, 1, 255])
    assert captured.origin == (0, 0)


def test_capture_single_output(fake_mss):
    output = OutputInfo("HDMI-1", 2, 0, 2, 2)
    captured = ScreenCaptureService().capture(output)
    assert fake_mss.grabbed == [{'left': 2, 'top': 0, 'width': 2, 'height': 2}]
    assert captured.origin == (2, 0)
    assert captured.view_origin_for(output) == (0, 0)


def test_capture_failure(monkeypatch):
    def broken():
        raise ScreenShotError("denied")
    monkeypatch.setattr(screen_capture.mss, "mss", broken)
    with pytest.raises(StartupError, match="screenshot"):
        ScreenCaptureService().capture()


def test_captured_image_is_read_only():
    captured = CapturedImage(np.zeros((2, 3, 4), dtype=np.uint8))
    assert captured.size == (3, 2)
    with pytest.raises(ValueError):
        captured.pixels[0, 0, 0] = 1


def test_captured_image_needs_rgba():
    with pytest.raises(ValueError):
        CapturedImage(np.zeros((2, 3, 3), dtype=np.uint8))


def test_view_origin_for_offset_desktop():
    captured = CapturedImage(np.zeros((1, 1, 4), dtype=np.uint8), origin=(-1280, 0))
    assert captured.view_origin_for(OutputInfo("DP-2", 0, 0, 1920, 1080)) == (1280, 0)

