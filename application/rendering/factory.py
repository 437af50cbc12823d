"""Factory for creating renderers."""

import importlib
import logging

from application.dispatch import RenderKind

from .base import Renderer
from .registry import get_renderer_class

logger = logging.getLogger(__name__)

# RenderKind -> module under application/rendering/ that registers its renderer
_MODULE_BY_KIND: dict[RenderKind, str] = {
    RenderKind.EMPTY: "listing",
    RenderKind.LIST: "listing",
    RenderKind.OVERVIEW: "vocabulary",
    RenderKind.RAW: "vocabulary",
    RenderKind.CLASS: "terms",
    RenderKind.PROPERTY: "terms",
    RenderKind.ENUMERATION: "terms",
    RenderKind.ENUMERATION_MEMBER: "terms",
    RenderKind.DATA_TYPE: "terms",
}


def _ensure_renderer_imported(kind: RenderKind) -> None:
    """Lazy-import the renderer module to trigger `register_renderer(...)`."""
    module_name = f"{__package__}.{_MODULE_BY_KIND[kind]}"
    try:
        importlib.import_module(module_name)
    except ModuleNotFoundError as e:
        if getattr(e, "name", None) == module_name:
            raise RuntimeError(f"No renderer module found for kind='{kind.value}' (expected {module_name})") from e
        raise


def make_renderer(kind: RenderKind) -> Renderer:
    """
    Create the renderer registered for `kind`.

    Raises:
        RuntimeError: If no renderer registers itself for the kind
    """
    renderer_cls = get_renderer_class(kind)

    if renderer_cls is None:
        _ensure_renderer_imported(kind)
        renderer_cls = get_renderer_class(kind)

    if renderer_cls is None:
        raise RuntimeError(f"Render kind '{kind.value}' has no registered renderer.")

    return renderer_cls()
