"""
Input sources for turnsnake.

Each input source has a non-blocking poll() returning LEFT, RIGHT or None.
"""

from .random_player import RandomPlayer
from .scripted_input import ScriptedInput
from .input_registry import get_input_class, list_inputs, AVAILABLE_INPUTS

__all__ = [
    'RandomPlayer',
    'ScriptedInput',
    'get_input_class',
    'list_inputs',
    'AVAILABLE_INPUTS',
]
