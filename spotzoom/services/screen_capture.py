"""
Screen capture: enumerate display outputs and grab a single still image.

Outputs come from screeninfo (names and logical placement), pixels from mss.
"""
from dataclasses import dataclass
from typing import List, Optional

import mss
from mss.exception import ScreenShotError
import numpy as np
from PIL import Image
from screeninfo import get_monitors, ScreenInfoError

from spotzoom.utilities.errors import StartupError


@dataclass(frozen=True)
class OutputInfo:
    """A display output in virtual-desktop coordinates."""
    name: str
    x: int
    y: int
    width: int
    height: int

    @property
    def position(self) -> tuple:
        return (self.x, self.y)


@dataclass(frozen=True)
class CapturedImage:
    """Immutable RGBA capture. `origin` is the virtual-desktop position of pixel (0, 0)."""
    pixels: np.ndarray  # (height, width, 4) uint8, rows top to bottom
    origin: tuple = (0, 0)

    def __post_init__(self):
        if self.pixels.ndim != 3 or self.pixels.shape[2] != 4:
            raise ValueError(f"Expected an RGBA array, got shape {self.pixels.shape}")
        self.pixels.setflags(write=False)

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def size(self) -> tuple:
        return (self.width, self.height)

    def view_origin_for(self, output: OutputInfo) -> tuple:
        """World point (image pixels) at the top-left corner of `output`."""
        return (output.x - self.origin[0], output.y - self.origin[1])


class ScreenCaptureService:
    """Lists display outputs and takes one full capture."""

    def list_outputs(self) -> List[OutputInfo]:
        try:
            monitors = get_monitors()
        except ScreenInfoError as e:
            raise StartupError(f"Failed to enumerate display outputs: {e}") from e

        outputs = []
        for i, mon in enumerate(monitors):
            outputs.append(OutputInfo(
                name=mon.name or f"Display {i+1}",
                x=mon.x,
                y=mon.y,
                width=mon.width,
                height=mon.height,
            ))
        return outputs

    @staticmethod
    def select_output(outputs: List[OutputInfo], name: Optional[str] = None) -> OutputInfo:
        """Pick an output by name, or the first one enumerated when no name is given."""
        if not outputs:
            raise StartupError("No display outputs found.")
        if name is None:
            return outputs[0]
        for output in outputs:
            if output.name == name:
                return output
        raise StartupError(f"Output '{name}' not found.")

    def capture(self, output: Optional[OutputInfo] = None) -> CapturedImage:
        """Grab the whole virtual desktop, or just `output` when given."""
        try:
            with mss.mss() as sct:
                if output is None:
                    region = sct.monitors[0]
                else:
                    region = {'left': output.x, 'top': output.y,
                              'width': output.width, 'height': output.height}
                shot = sct.grab(region)
        except ScreenShotError as e:
            raise StartupError(f"Failed to take a screenshot: {e}") from e

        # mss hands back BGRA rows, top to bottom
        image = Image.frombytes('RGB', shot.size, shot.bgra, 'raw', 'BGRX').convert('RGBA')
        return CapturedImage(pixels=np.asarray(image), origin=(shot.left, shot.top))
