"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Vocabulary documents (JSON-LD graph adapter)
- Document fetching (httpx, local files)
- Host location/history
- Configuration loading (YAML, environment)
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import BrowserConfig, load_browser_config
from infrastructure.http import Fetcher, HttpFetcher
from infrastructure.location import InMemoryHistory, LocationHost
from infrastructure.vocabulary import VocabularyAdapter, make_adapter

__all__ = [
    # Vocabulary adapters (most commonly used)
    "make_adapter",
    "VocabularyAdapter",
    # Fetching
    "Fetcher",
    "HttpFetcher",
    # Host location
    "LocationHost",
    "InMemoryHistory",
    # Configuration
    "load_browser_config",
    "BrowserConfig",
]
