"""
Rendering of launch records for the terminal.
"""

from .renderer import render_launch, render_banner

__all__ = [
    'render_launch',
    'render_banner',
]
