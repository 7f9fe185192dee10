"""Terminal theme for Dicer."""

from dicer.ui.themes.animations import load_css, render_logo, render_outcome_banner

__all__ = [
    "load_css",
    "render_logo",
    "render_outcome_banner",
]
