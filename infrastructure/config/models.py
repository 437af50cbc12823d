"""Configuration models (Pydantic classes)."""

from pathlib import Path
from urllib.parse import quote

from pydantic import BaseModel, Field, model_validator

from infrastructure.constants import (
    DEFAULT_BASE_VOCABULARY_URL,
    DEFAULT_LIST_URL_TEMPLATE,
    DEFAULT_TAXONOMY_URL_TEMPLATE,
    JSONLD_ACCEPT,
)


class VocabularySourceConfig(BaseModel):
    """Where vocabularies and lists are fetched from."""

    base_vocabulary_url: str = Field(
        default=DEFAULT_BASE_VOCABULARY_URL,
        description="URL or local path of the base reference vocabulary merged into every taxonomy.",
    )
    taxonomy_url_template: str = Field(
        default=DEFAULT_TAXONOMY_URL_TEMPLATE,
        description="Template with a {taxonomy_id} placeholder.",
    )
    list_url_template: str = Field(
        default=DEFAULT_LIST_URL_TEMPLATE,
        description="Template with a {list_id} placeholder.",
    )

    # ids come from the location; escaped so they stay one path segment
    def taxonomy_url(self, taxonomy_id: str) -> str:
        return self.taxonomy_url_template.format(taxonomy_id=quote(taxonomy_id, safe=""))

    def list_url(self, list_id: str) -> str:
        return self.list_url_template.format(list_id=quote(list_id, safe=""))

    @model_validator(mode="after")
    def _validate(self) -> "VocabularySourceConfig":
        if "{taxonomy_id}" not in self.taxonomy_url_template:
            raise ValueError("vocabulary.taxonomy_url_template must contain '{taxonomy_id}'")
        if "{list_id}" not in self.list_url_template:
            raise ValueError("vocabulary.list_url_template must contain '{list_id}'")
        if not self.base_vocabulary_url.strip():
            raise ValueError("vocabulary.base_vocabulary_url must not be empty")
        return self


class HttpConfig(BaseModel):
    """HTTP client settings for document fetches."""

    timeout_s: float = Field(default=30.0, gt=0)
    accept: str = JSONLD_ACCEPT
    follow_redirects: bool = True
    user_agent: str | None = None


class LoggingConfig(BaseModel):
    """Logging defaults (CLI flags take precedence)."""

    console_level: str = "INFO"
    file_level: str = "DEBUG"
    log_file: Path | None = None


class BrowserConfig(BaseModel):
    """
    Runtime configuration.
    - Loaded from browser.yaml
    - Environment variables override individual fields
    - Consumed by the fetcher, the adapter cache and the navigator
    """

    vocabulary: VocabularySourceConfig = Field(default_factory=VocabularySourceConfig)
    http: HttpConfig = Field(default_factory=HttpConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    base_path: str = Field(
        default="",
        description="Path prefix the browser is served under (e.g. 'browser' -> /browser/voc/<id>).",
    )

    @model_validator(mode="after")
    def _validate(self) -> "BrowserConfig":
        self.base_path = self.base_path.strip().strip("/")
        return self
