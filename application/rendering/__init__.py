"""
View renderers.

Each renderer module registers its classes with `register_renderer(...)` at import time;
`make_renderer(kind)` lazy-imports the module that owns a render kind.
"""

from application.rendering.base import RenderContext, Renderer, render_error_html, render_loading_html
from application.rendering.factory import make_renderer
from application.rendering.registry import get_renderer_class, register_renderer

__all__ = [
    "make_renderer",
    "Renderer",
    "RenderContext",
    "register_renderer",
    "get_renderer_class",
    "render_error_html",
    "render_loading_html",
]
