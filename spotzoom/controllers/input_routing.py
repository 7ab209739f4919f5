"""
Scroll routing: the same wheel / keyboard zoom input drives either the camera zoom
or the spotlight radius, depending on which modifiers are held. Never both.
"""
from enum import Enum, auto

from .actions import ZOOM_IN, ZOOM_OUT


class ScrollTarget(Enum):
    ZOOM = auto()
    SPOTLIGHT_RADIUS = auto()
    IGNORED = auto()


# (spotlight held, fine adjust held) -> where the frame's scroll amount goes
ROUTING_TABLE = {
    (False, False): ScrollTarget.ZOOM,
    (True, False): ScrollTarget.ZOOM,
    (True, True): ScrollTarget.SPOTLIGHT_RADIUS,
    (False, True): ScrollTarget.IGNORED,
}


def route_scroll(spotlight_held: bool, fine_held: bool) -> ScrollTarget:
    return ROUTING_TABLE[(bool(spotlight_held), bool(fine_held))]


def scroll_amount(frame_input, keyboard_step: float = 0.1) -> float:
    """Wheel movement plus the keyboard zoom keys (a fixed step per frame while held)."""
    amount = float(frame_input.scroll_delta)
    if frame_input.held(ZOOM_IN):
        amount += keyboard_step
    if frame_input.held(ZOOM_OUT):
        amount -= keyboard_step
    return amount


def keyboard_zoom_held(frame_input) -> bool:
    """Keyboard zoom pivots around the screen center instead of the mouse."""
    return frame_input.held(ZOOM_IN) or frame_input.held(ZOOM_OUT)


def dispatch_scroll(interaction, amount: float, spotlight_held: bool, fine_held: bool) -> float:
    """Apply the routing table.

    Spotlight-radius input is folded into the radius velocity here (inverted, so
    scrolling up shrinks the spotlight). Returns the share that goes to the zoom controller.
    """
    if amount == 0.0:
        return 0.0
    target = route_scroll(spotlight_held, fine_held)
    if target is ScrollTarget.ZOOM:
        return amount
    if target is ScrollTarget.SPOTLIGHT_RADIUS:
        interaction.spotlight_radius_velocity -= amount
    return 0.0
