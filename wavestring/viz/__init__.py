"""Visualization of string states.

This module provides:
- Curve plotting of ``u``, ``u_x`` and ``u_t`` along the string
- Real-time animation of a running simulator
"""

from .curves import DEFAULT_VIEWS, CurveView, StringAnimator, plot_string_state
from .matplotlib_backends import create_string_figure, style_string_axes

__all__ = [
    "CurveView",
    "DEFAULT_VIEWS",
    "plot_string_state",
    "StringAnimator",
    "create_string_figure",
    "style_string_axes",
]
