import os
from pathlib import Path

import yaml

from app.exceptions import CategoryCatalogError

_DEFAULT_PATH = Path(__file__).resolve().parent.parent / "data" / "categories.yaml"


def _catalog_path() -> Path:
    """Read CATEGORIES_PATH at call time (supports env var changes in tests)."""
    return Path(os.getenv("CATEGORIES_PATH", str(_DEFAULT_PATH)))


_cache: dict[str, dict] = {}


def load_categories() -> dict[str, list[str]]:
    """Load the category catalog, keyed by transaction type."""
    path = _catalog_path()
    cache_key = str(path)
    if cache_key in _cache:
        return _cache[cache_key]

    if not path.exists():
        raise CategoryCatalogError(f"No category catalog found at {path}")
    with open(path, encoding="utf-8") as f:
        catalog = yaml.safe_load(f) or {}
    if not isinstance(catalog, dict):
        raise CategoryCatalogError(f"Category catalog {path} must be a mapping")

    result = {str(k): [str(c) for c in (v or [])] for k, v in catalog.items()}
    _cache[cache_key] = result
    return result


def get_category_options(transaction_type: str) -> list[str]:
    return load_categories().get(transaction_type, [])
