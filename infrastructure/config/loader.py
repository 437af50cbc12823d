"""Configuration loading from YAML files and environment overrides."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from infrastructure.config.models import BrowserConfig
from infrastructure.constants import ENV_PREFIX

logger = logging.getLogger(__name__)

# Environment variable suffix -> (section, field)
ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "BASE_VOCABULARY_URL": ("vocabulary", "base_vocabulary_url"),
    "TAXONOMY_URL_TEMPLATE": ("vocabulary", "taxonomy_url_template"),
    "LIST_URL_TEMPLATE": ("vocabulary", "list_url_template"),
    "HTTP_TIMEOUT_S": ("http", "timeout_s"),
}


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    # an empty file means "all defaults"
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def apply_env_overrides(data: dict[str, Any], environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """
    Return a copy of `data` with VOCAB_BROWSER_* environment variables applied.

    Empty variables are ignored.
    """
    env = os.environ if environ is None else environ
    out = {k: (dict(v) if isinstance(v, dict) else v) for k, v in data.items()}

    for suffix, (section, field) in ENV_OVERRIDES.items():
        value = env.get(ENV_PREFIX + suffix)
        if value is None or not value.strip():
            continue
        block = out.get(section) or {}
        if not isinstance(block, dict):
            raise ValueError(f"Config section '{section}' must be a mapping")
        block[field] = value.strip()
        out[section] = block
        logger.debug("Config override from env: %s.%s", section, field)

    base_path = env.get(ENV_PREFIX + "BASE_PATH")
    if base_path is not None:
        out["base_path"] = base_path

    return out


def load_browser_config(path: Path | None, environ: Mapping[str, str] | None = None) -> BrowserConfig:
    """
    Load browser.yaml (if given) and construct a validated BrowserConfig.

    Args:
        path: Path to the YAML file, or None for defaults
        environ: Environment mapping (defaults to os.environ)

    Raises:
        FileNotFoundError: If `path` does not exist
        ValueError: If the YAML has the wrong shape or fails validation
    """
    data = _load_yaml(path) if path is not None else {}

    unknown = set(data) - set(BrowserConfig.model_fields)
    if unknown:
        raise ValueError(f"Unknown keys in {path}: {sorted(unknown)}")

    return BrowserConfig(**apply_env_overrides(data, environ))
