"""
Keybinding Management System

Maps action names (see controllers.actions) to GLFW key codes. Built-in defaults
can be overridden per action from keyboard_controls.json.
"""

import json
import glfw
from pathlib import Path
from typing import Dict, List

from spotzoom.controllers import actions


class KeybindingManager:
    """Manages keyboard bindings, defaults plus optional JSON overrides."""

    # Mapping from single character/name strings to GLFW key codes
    KEY_NAME_TO_GLFW = {
        # Letters
        'A': glfw.KEY_A, 'B': glfw.KEY_B, 'C': glfw.KEY_C, 'D': glfw.KEY_D,
        'E': glfw.KEY_E, 'F': glfw.KEY_F, 'G': glfw.KEY_G, 'H': glfw.KEY_H,
        'I': glfw.KEY_I, 'J': glfw.KEY_J, 'K': glfw.KEY_K, 'L': glfw.KEY_L,
        'M': glfw.KEY_M, 'N': glfw.KEY_N, 'O': glfw.KEY_O, 'P': glfw.KEY_P,
        'Q': glfw.KEY_Q, 'R': glfw.KEY_R, 'S': glfw.KEY_S, 'T': glfw.KEY_T,
        'U': glfw.KEY_U, 'V': glfw.KEY_V, 'W': glfw.KEY_W, 'X': glfw.KEY_X,
        'Y': glfw.KEY_Y, 'Z': glfw.KEY_Z,

        # Special keys
        'SPACE': glfw.KEY_SPACE,
        'ESCAPE': glfw.KEY_ESCAPE,
        'ESC': glfw.KEY_ESCAPE,
        'ENTER': glfw.KEY_ENTER,
        'TAB': glfw.KEY_TAB,

        # Arrow keys
        'UP': glfw.KEY_UP, 'DOWN': glfw.KEY_DOWN,
        'LEFT': glfw.KEY_LEFT, 'RIGHT': glfw.KEY_RIGHT,

        # Modifiers
        'LEFT_CONTROL': glfw.KEY_LEFT_CONTROL, 'RIGHT_CONTROL': glfw.KEY_RIGHT_CONTROL,
        'LEFT_SHIFT': glfw.KEY_LEFT_SHIFT, 'RIGHT_SHIFT': glfw.KEY_RIGHT_SHIFT,
        'LEFT_ALT': glfw.KEY_LEFT_ALT, 'RIGHT_ALT': glfw.KEY_RIGHT_ALT,

        # Common punctuation
        'MINUS': glfw.KEY_MINUS, 'EQUAL': glfw.KEY_EQUAL,
    }

    DEFAULT_BINDINGS = {
        actions.PAN_LEFT: ['H'],
        actions.PAN_DOWN: ['J'],
        actions.PAN_UP: ['K'],
        actions.PAN_RIGHT: ['L'],
        actions.ZOOM_IN: ['U'],
        actions.ZOOM_OUT: ['D'],
        actions.SPOTLIGHT: ['LEFT_CONTROL', 'RIGHT_CONTROL'],
        actions.FINE_ADJUST: ['LEFT_SHIFT', 'RIGHT_SHIFT'],
        actions.RELOAD_SHADERS: ['R'],
    }

    def __init__(self, config_path: Path | str = "keyboard_controls.json"):
        """
        Initialize the keybinding manager.

        Args:
            config_path: Optional JSON file of {"action": "KEY"} or {"action": ["KEY", ...]} overrides
        """
        self.config_path = Path(config_path)
        self.bindings: Dict[str, List[int]] = {}
        self._key_to_actions: Dict[int, List[str]] = {}

        self._load_bindings()

    def _load_bindings(self):
        """Start from the defaults, then apply overrides from the JSON file if there is one."""
        for action, key_names in self.DEFAULT_BINDINGS.items():
            self._bind(action, key_names)

        if not self.config_path.exists():
            return

        try:
            with open(self.config_path, 'r') as f:
                config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            print(f"Error loading keybindings from {self.config_path}: {e}")
            return

        for action, key_names in config.items():
            if action not in self.DEFAULT_BINDINGS:
                print(f"Warning: Unknown action '{action}' in {self.config_path}")
                continue
            if isinstance(key_names, str):
                key_names = [key_names]
            self._bind(action, key_names)

        print(f"Loaded {len(config)} keybinding overrides from {self.config_path}")

    def _bind(self, action: str, key_names):
        keys = []
        for key_name in key_names:
            key_name_upper = key_name.upper()
            if key_name_upper in self.KEY_NAME_TO_GLFW:
                keys.append(self.KEY_NAME_TO_GLFW[key_name_upper])
            else:
                print(f"Warning: Unknown key name '{key_name}' for action '{action}'")
        if not keys:
            return
        self.bindings[action] = keys
        self._rebuild_index()

    def _rebuild_index(self):
        self._key_to_actions = {}
        for action, keys in self.bindings.items():
            for key in keys:
                self._key_to_actions.setdefault(key, []).append(action)

    def actions_for_key(self, key: int) -> List[str]:
        """Actions triggered by a GLFW key code."""
        return list(self._key_to_actions.get(key, []))

