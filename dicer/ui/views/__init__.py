"""Page views for Dicer."""

from dicer.ui.views.game import render_game_page

__all__ = ["render_game_page"]
