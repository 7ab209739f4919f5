"""
Where shader programs come from.

EmbeddedShaderSource reads the shaders shipped inside the `shaders` package.
FileShaderSource reads them from a directory on disk and can be reloaded at
runtime (bound to the reload_shaders key), which is handy while editing them.
"""
from abc import ABC, abstractmethod
from importlib import resources
from pathlib import Path
from typing import Optional

from spotzoom.utilities.errors import StartupError
from spotzoom.utilities.gl_helpers import read_shader

VERTEX_SHADER = 'camera.vert'
PLAIN_FRAGMENT_SHADER = 'camera.frag'
SPOTLIGHT_FRAGMENT_SHADER = 'spotlight.frag'


class ShaderSource(ABC):
    supports_reload = False

    @abstractmethod
    def read(self, name: str) -> str:
        """Return the GLSL source of `name`. Raises StartupError if it can't be found."""

    def describe(self) -> str:
        return type(self).__name__


class EmbeddedShaderSource(ShaderSource):
    """Shaders packaged with the application."""

    def __init__(self, package: str = 'spotzoom.shaders'):
        self.package = package

    def read(self, name: str) -> str:
        try:
            return resources.files(self.package).joinpath(name).read_text(encoding='utf-8')
        except (FileNotFoundError, ModuleNotFoundError) as e:
            raise StartupError(f"Shader asset '{name}' missing from package '{self.package}': {e}") from e

    def describe(self) -> str:
        return f"embedded shaders ({self.package})"


class FileShaderSource(ShaderSource):
    """Shaders read from a directory every time, so edits show up on reload."""
    supports_reload = True

    def __init__(self, directory: Path | str):
        self.directory = Path(directory)

    def read(self, name: str) -> str:
        path = self.directory / name
        try:
            return read_shader(path)
        except OSError as e:
            raise StartupError(f"Failed to load shader {path}: {e}") from e

    def describe(self) -> str:
        return f"shaders from {self.directory} (hot reload enabled)"


def shader_source_for(shader_dir: Optional[str]) -> ShaderSource:
    """Pick the strategy from configuration: a directory enables hot reload."""
    if shader_dir:
        return FileShaderSource(shader_dir)
    return EmbeddedShaderSource()
