from pathlib import Path

import pytest

from infrastructure.config import BrowserConfig, VocabularySourceConfig, apply_env_overrides, load_browser_config
from infrastructure.constants import DEFAULT_TAXONOMY_URL_TEMPLATE


def test_defaults_without_file() -> None:
    cfg = load_browser_config(None, environ={})

    assert cfg.vocabulary.taxonomy_url_template == DEFAULT_TAXONOMY_URL_TEMPLATE
    assert cfg.http.timeout_s == 30.0
    assert cfg.base_path == ""


def test_yaml_values_are_loaded(tmp_path: Path) -> None:
    path = tmp_path / "browser.yaml"
    path.write_text(
        "vocabulary:\n"
        "  taxonomy_url_template: 'https://voc.example/{taxonomy_id}.jsonld'\n"
        "http:\n"
        "  timeout_s: 5\n"
        "base_path: '/browser/'\n",
        encoding="utf-8",
    )

    cfg = load_browser_config(path, environ={})

    assert cfg.vocabulary.taxonomy_url("T1") == "https://voc.example/T1.jsonld"
    assert cfg.http.timeout_s == 5.0
    assert cfg.base_path == "browser"


def test_empty_yaml_means_defaults(tmp_path: Path) -> None:
    path = tmp_path / "browser.yaml"
    path.write_text("", encoding="utf-8")

    assert load_browser_config(path, environ={}) == BrowserConfig()


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_browser_config(tmp_path / "nope.yaml")


def test_unknown_keys_are_rejected(tmp_path: Path) -> None:
    path = tmp_path / "browser.yaml"
    path.write_text("provider: openai\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Unknown keys"):
        load_browser_config(path, environ={})


def test_non_mapping_yaml_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "browser.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_browser_config(path, environ={})


def test_template_without_placeholder_is_rejected() -> None:
    with pytest.raises(ValueError, match="taxonomy_id"):
        VocabularySourceConfig(taxonomy_url_template="https://voc.example/static")


def test_env_overrides_win_over_yaml(tmp_path: Path) -> None:
    path = tmp_path / "browser.yaml"
    path.write_text("http:\n  timeout_s: 5\n", encoding="utf-8")
    environ = {
        "VOCAB_BROWSER_HTTP_TIMEOUT_S": "12.5",
        "VOCAB_BROWSER_LIST_URL_TEMPLATE": "file:///data/lists/{list_id}.json",
        "VOCAB_BROWSER_BASE_VOCABULARY_URL": "  ",
        "VOCAB_BROWSER_BASE_PATH": "apps/voc",
    }

    cfg = load_browser_config(path, environ=environ)

    assert cfg.http.timeout_s == 12.5
    assert cfg.vocabulary.list_url("L1") == "file:///data/lists/L1.json"
    # blank variables are ignored
    assert cfg.vocabulary.base_vocabulary_url.startswith("https://schema.org/")
    assert cfg.base_path == "apps/voc"


def test_apply_env_overrides_does_not_mutate_input() -> None:
    data = {"http": {"timeout_s": 5}}

    out = apply_env_overrides(data, environ={"VOCAB_BROWSER_HTTP_TIMEOUT_S": "9"})

    assert data == {"http": {"timeout_s": 5}}
    assert out["http"]["timeout_s"] == "9"


def test_invalid_timeout_is_rejected() -> None:
    with pytest.raises(ValueError):
        load_browser_config(None, environ={"VOCAB_BROWSER_HTTP_TIMEOUT_S": "0"})


def test_ids_are_escaped_into_one_path_segment() -> None:
    source = VocabularySourceConfig(
        taxonomy_url_template="https://voc.example/{taxonomy_id}.jsonld",
        list_url_template="/data/lists/{list_id}.jsonld",
    )

    assert source.taxonomy_url("T1") == "https://voc.example/T1.jsonld"
    assert source.taxonomy_url("a?b#c") == "https://voc.example/a%3Fb%23c.jsonld"
    assert source.list_url("../../x") == "/data/lists/..%2F..%2Fx.jsonld"
