from .viewport import ViewportEngine
from .input_routing import ScrollTarget, ROUTING_TABLE, route_scroll
from .zoom_controller import update_zoom
from .pan_controller import pan_with_keys, drag_or_coast, VELOCITY_THRESHOLD
from .spotlight_controller import update_spotlight_radius, apply_spotlight_pulse, cursor_to_shader_space

__all__ = ['ViewportEngine', 'ScrollTarget', 'ROUTING_TABLE', 'route_scroll', 'update_zoom', 'pan_with_keys', 'drag_or_coast', 'VELOCITY_THRESHOLD', 'update_spotlight_radius', 'apply_spotlight_pulse', 'cursor_to_shader_space']
