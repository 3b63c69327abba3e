"""Presentation backends for lazyacc chains (infix text, DOT)."""

from .dot_generator import DotMode, generate_dot, save_dot_file
from .infix import render_infix

__all__ = ["DotMode", "generate_dot", "save_dot_file", "render_infix"]
