from .ascii import render_frame, render_plain

__all__ = ["render_frame", "render_plain"]
