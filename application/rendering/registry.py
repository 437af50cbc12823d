import logging

from application.dispatch import RenderKind

from .base import Renderer

logger = logging.getLogger(__name__)

# RenderKind -> Renderer class
_RENDERER_REGISTRY: dict[RenderKind, type[Renderer]] = {}


def register_renderer(kind: RenderKind, renderer_cls: type[Renderer], *, override: bool = False) -> None:
    """Register a renderer class for a render kind.

    This is the plugin hook: renderer modules call this at import time.
    """
    if (kind in _RENDERER_REGISTRY) and not override:
        existing = _RENDERER_REGISTRY[kind]
        raise RuntimeError(
            f"Renderer already registered for kind={kind.value}: {existing.__name__}. Use override=True to replace."
        )
    _RENDERER_REGISTRY[kind] = renderer_cls
    logger.debug("Registered renderer for kind=%s: %s", kind.value, renderer_cls.__name__)


def get_renderer_class(kind: RenderKind) -> type[Renderer] | None:
    """Return the registered renderer class (or None if not registered yet)."""
    return _RENDERER_REGISTRY.get(kind)
