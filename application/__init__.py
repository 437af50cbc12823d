"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure,
implementing the browsing session: navigation, vocabulary loading,
view dispatch and rendering.
"""

from application.browser import RenderedView, VocabBrowser
from application.cache import AdapterCache
from application.dispatch import RenderAction, RenderKind, ViewDispatcher
from application.lists import ListCache
from application.navigation import Navigator

__all__ = [
    # Session
    "VocabBrowser",
    "RenderedView",
    "Navigator",
    # Loading
    "AdapterCache",
    "ListCache",
    # Dispatch
    "ViewDispatcher",
    "RenderAction",
    "RenderKind",
]
