"""UI components for Dicer."""

from dicer.ui.components.dice_tray import render_dice_tray
from dicer.ui.components.status_sidebar import render_status_sidebar
from dicer.ui.components.turn_controls import render_turn_controls

__all__ = [
    "render_dice_tray",
    "render_status_sidebar",
    "render_turn_controls",
]
