import numpy as np
import moderngl

from spotzoom.utilities.errors import StartupError


def read_shader(path):
    result = ""
    with open(path, 'r') as file:
        result = file.read()
    return result


MUTED_TRYSET_WARNINGS = {}


def tryset(program: moderngl.Program, uniform, value):
    """
    Gracefully handle a uniform that doesn't appear in program.
    Uniforms are frequently optimized out if they are not used in the current version of the shader.
    """
    if uniform in program:
        program[uniform] = value
    else:
        global MUTED_TRYSET_WARNINGS
        if uniform not in MUTED_TRYSET_WARNINGS:
            MUTED_TRYSET_WARNINGS[uniform] = 0
        MUTED_TRYSET_WARNINGS[uniform] += 1
        if MUTED_TRYSET_WARNINGS[uniform] < 10:
            print('Warning: ', uniform, ' not present in ', program)


def unit_quad_vertices() -> np.ndarray:
    """Two triangles covering (0,0)-(1,1), (0,0) being the image's top-left corner."""
    return np.array([
        0.0, 0.0,
        1.0, 0.0,
        1.0, 1.0,
        0.0, 0.0,
        1.0, 1.0,
        0.0, 1.0,
    ], dtype=np.float32)


def texture_from_capture(ctx: moderngl.Context, captured) -> moderngl.Texture:
    """
    Upload a CapturedImage as an RGBA8 texture.

    Rows are uploaded top to bottom (no flip): the vertex shader maps v = 0 to the
    top of the image.
    """
    try:
        texture = ctx.texture(captured.size, 4, np.ascontiguousarray(captured.pixels).tobytes())
    except moderngl.Error as e:
        raise StartupError(f"Failed to load screenshot into a texture: {e}") from e
    texture.filter = (moderngl.LINEAR, moderngl.NEAREST)
    return texture
