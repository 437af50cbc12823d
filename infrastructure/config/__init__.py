"""
Configuration management: models, loading, and validation.

Handles:
- BrowserConfig: main browser configuration
- VocabularySourceConfig: base vocabulary and document URL templates
- HttpConfig / LoggingConfig: client and logging defaults
- Environment variable overrides

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import apply_env_overrides, load_browser_config
from infrastructure.config.models import (
    BrowserConfig,
    HttpConfig,
    LoggingConfig,
    VocabularySourceConfig,
)

__all__ = [
    # Main config (most commonly used)
    "BrowserConfig",
    "load_browser_config",
    # Sections
    "VocabularySourceConfig",
    "HttpConfig",
    "LoggingConfig",
    # Loader helpers
    "apply_env_overrides",
]
