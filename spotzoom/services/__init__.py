from .screen_capture import ScreenCaptureService, OutputInfo, CapturedImage
from .shader_source import ShaderSource, EmbeddedShaderSource, FileShaderSource, shader_source_for

__all__ = ['ScreenCaptureService', 'OutputInfo', 'CapturedImage', 'ShaderSource', 'EmbeddedShaderSource', 'FileShaderSource', 'shader_source_for']
