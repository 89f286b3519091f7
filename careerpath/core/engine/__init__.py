"""Rule-based recommendation engine."""

from .catalog import DEFAULT_CATALOG, FALLBACK_RULE, CatalogError, RuleCatalog, load_catalog
from .evaluator import RecommendationEngine, evaluate

__all__ = [
    "CatalogError",
    "DEFAULT_CATALOG",
    "FALLBACK_RULE",
    "RecommendationEngine",
    "RuleCatalog",
    "evaluate",
    "load_catalog",
]
