"""Action names shared by the keybinding manager and the controllers."""

PAN_LEFT = "pan_left"
PAN_DOWN = "pan_down"
PAN_UP = "pan_up"
PAN_RIGHT = "pan_right"

ZOOM_IN = "zoom_in"
ZOOM_OUT = "zoom_out"

SPOTLIGHT = "spotlight"      # held: spotlight mode on, freshly pressed: radius pulse
FINE_ADJUST = "fine_adjust"  # held together with SPOTLIGHT: scroll resizes the spotlight

RELOAD_SHADERS = "reload_shaders"

ALL_ACTIONS = (PAN_LEFT, PAN_DOWN, PAN_UP, PAN_RIGHT, ZOOM_IN, ZOOM_OUT, SPOTLIGHT, FINE_ADJUST, RELOAD_SHADERS)
