"""
Registry for input sources.
Maps the names accepted on the command line to input source classes.
"""

from typing import Callable, Dict, Optional, Type


def _get_keyboard_input() -> Type:
    from .keyboard_input import KeyboardInput
    return KeyboardInput


def _get_random_player() -> Type:
    from .random_player import RandomPlayer
    return RandomPlayer


def _get_scripted_input() -> Type:
    from .scripted_input import ScriptedInput
    return ScriptedInput


# Registry: maps input name -> callable that returns the class
# Using callables so curses is only imported when the keyboard is used
INPUT_LOADERS: Dict[str, Callable[[], Type]] = {
    "keyboard": _get_keyboard_input,
    "random": _get_random_player,
    "scripted": _get_scripted_input,
}

AVAILABLE_INPUTS = list(INPUT_LOADERS.keys())

DEFAULT_INPUT = "keyboard"


def get_input_class(name: Optional[str] = None) -> Type:
    """
    Get the input source class for a given name.

    Args:
        name: One of 'keyboard', 'random', 'scripted'. If None or empty, returns keyboard.

    Returns:
        The input source class.

    Raises:
        ValueError: If name is not recognized.
    """
    if not name or name.strip() == "":
        name = DEFAULT_INPUT

    name = name.strip()

    if name not in INPUT_LOADERS:
        available = ", ".join(AVAILABLE_INPUTS)
        raise ValueError(
            f"Unknown input source '{name}'. Available inputs: {available}"
        )

    return INPUT_LOADERS[name]()


def list_inputs() -> list:
    """
    Return metadata about all available input sources.

    Returns:
        List of dicts with 'key' and 'description' for each input.
    """
    return [
        {"key": "keyboard", "description": "Left/Right arrow keys in the terminal"},
        {"key": "random", "description": "Autopilot that picks random safe turns"},
        {"key": "scripted", "description": "Replays a fixed list of turns"},
    ]
