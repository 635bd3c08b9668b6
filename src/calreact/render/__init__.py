from __future__ import annotations

from .text import render_month, render_timed

__all__ = ["render_month", "render_timed"]
