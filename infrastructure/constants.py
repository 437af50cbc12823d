from pathlib import Path

# Repo-root conventional directories/files (overrideable via CLI flags)
CONFIG_DIR = Path("configs")
BROWSER_CONFIG_FILE = CONFIG_DIR / "browser.yaml"

# Environment overrides for browser.yaml
ENV_PREFIX = "VOCAB_BROWSER_"

# Defaults of the semantify.it / schema.org hosting the browser was built for
DEFAULT_BASE_VOCABULARY_URL = "https://schema.org/version/latest/schemaorg-all-https.jsonld"
DEFAULT_TAXONOMY_URL_TEMPLATE = "https://semantify.it/voc/{taxonomy_id}"
DEFAULT_LIST_URL_TEMPLATE = "https://semantify.it/list/{list_id}"
JSONLD_ACCEPT = "application/ld+json, application/json;q=0.9"
