"""Rule catalog for the recommendation engine.

Rules are plain data: each :class:`RuleDefinition` pairs its triggers with a
fixed payload. The engine walks the catalog in order, so the position of a
rule here decides how ties on ``match_score`` are broken.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ..models.enums import InterestArea, Skill
from ..models.recommendation import RuleDefinition
from ...observability.logger import get_logger

logger = get_logger(__name__)


class CatalogError(ValueError):
    """Raised when a rule catalog file cannot be loaded."""


class RuleCatalog:
    """Ordered rule definitions plus the fallback used when none match."""

    def __init__(self, rules: list[RuleDefinition] | tuple[RuleDefinition, ...], fallback: RuleDefinition):
        self.rules: tuple[RuleDefinition, ...] = tuple(rules)
        self.fallback = fallback

        keys = [rule.key for rule in self.rules] + [fallback.key]
        duplicates = sorted({key for key in keys if keys.count(key) > 1})
        if duplicates:
            raise CatalogError(f"Duplicate rule keys: {', '.join(duplicates)}")

    def __len__(self) -> int:
        return len(self.rules)

    def __iter__(self):
        return iter(self.rules)

    def get(self, key: str) -> RuleDefinition | None:
        if key == self.fallback.key:
            return self.fallback
        return next((rule for rule in self.rules if rule.key == key), None)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RuleCatalog:
        """Build a catalog from a ``{"rules": [...], "fallback": {...}}`` mapping.

        Raises:
            CatalogError: If the mapping is malformed
        """
        if not isinstance(data, dict):
            raise CatalogError("Catalog must be a mapping with 'rules' and 'fallback'")

        raw_rules = data.get("rules") or []
        raw_fallback = data.get("fallback")
        if not isinstance(raw_rules, list):
            raise CatalogError("'rules' must be a list")
        if not isinstance(raw_fallback, dict):
            raise CatalogError("Catalog requires a 'fallback' mapping")

        try:
            rules = [RuleDefinition.model_validate(item) for item in raw_rules]
            fallback = RuleDefinition.model_validate(raw_fallback)
        except ValidationError as e:
            raise CatalogError(f"Invalid rule definition: {e}") from e

        return cls(rules, fallback)

    @classmethod
    def from_yaml(cls, path: str | Path) -> RuleCatalog:
        """Load a catalog from a YAML file.

        Raises:
            CatalogError: If the file is missing, unreadable, or malformed
        """
        path = Path(path)
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise CatalogError(f"Cannot read catalog {path}: {e}") from e

        catalog = cls.from_dict(data)
        logger.info("catalog_loaded", path=str(path), rules=len(catalog))
        return catalog


# =============================================================================
# Built-in catalog
# =============================================================================


DEFAULT_RULES: tuple[RuleDefinition, ...] = (
    RuleDefinition(
        key="technology",
        trigger_skills=frozenset({Skill.COMPUTER_IT}),
        trigger_interests=frozenset({InterestArea.INFORMATION_TECHNOLOGY}),
        label="Software Developer",
        match_score=92,
        rationale="Strong IT skills align with India's booming tech industry",
        action_steps=(
            "Learn programming languages (Python, Java, JavaScript)",
            "Build portfolio projects on GitHub",
            "Apply to IT companies in Bangalore, Hyderabad, Pune",
        ),
        compensation_band="₹3-8 lakhs per annum",
        growth_outlook="High (25% growth projected)",
        training_paths=("Programming Bootcamp", "AWS/Cloud Certification", "Full Stack Development"),
    ),
    RuleDefinition(
        key="digital_marketing",
        trigger_skills=frozenset({Skill.DIGITAL_MARKETING, Skill.SALES_MARKETING}),
        label="Digital Marketing Specialist",
        match_score=89,
        rationale="Digital marketing is expanding rapidly in Indian businesses",
        action_steps=(
            "Get Google Ads and Analytics certification",
            "Create social media campaigns portfolio",
            "Apply to digital agencies or startups",
        ),
        compensation_band="₹2.5-6 lakhs per annum",
        growth_outlook="High (30% growth projected)",
        training_paths=("Google Digital Marketing Course", "Facebook Blueprint", "SEO Certification"),
    ),
    RuleDefinition(
        key="banking_finance",
        trigger_skills=frozenset({Skill.FINANCIAL_PLANNING}),
        trigger_interests=frozenset({InterestArea.BANKING_FINANCE}),
        label="Banking Professional",
        match_score=86,
        rationale="India's banking sector offers stable career opportunities",
        action_steps=(
            "Prepare for IBPS or SBI bank exams",
            "Complete banking certification courses",
            "Apply to public and private sector banks",
        ),
        compensation_band="₹3-7 lakhs per annum",
        growth_outlook="Moderate (8% growth projected)",
        training_paths=(
            "JAIIB/CAIIB Certification",
            "Banking Operations Course",
            "Financial Planning Certification",
        ),
    ),
    RuleDefinition(
        key="education",
        trigger_skills=frozenset({Skill.TEACHING}),
        trigger_interests=frozenset({InterestArea.EDUCATION}),
        label="Educational Professional",
        match_score=85,
        rationale="Education sector in India has diverse opportunities from teaching to EdTech",
        action_steps=(
            "Complete B.Ed or teaching certification",
            "Apply to schools, colleges, or EdTech companies",
            "Consider online tutoring platforms",
        ),
        compensation_band="₹2-5 lakhs per annum",
        growth_outlook="Moderate (12% growth projected)",
        training_paths=("B.Ed Degree", "Teaching Methodology Course", "Subject Matter Expertise"),
    ),
    RuleDefinition(
        key="government",
        trigger_interests=frozenset({InterestArea.GOVERNMENT}),
        label="Civil Services/Government Jobs",
        match_score=88,
        rationale="Government jobs offer job security and social impact in India",
        action_steps=(
            "Prepare for UPSC, SSC, or state PSC exams",
            "Join coaching institutes or online platforms",
            "Focus on current affairs and general knowledge",
        ),
        compensation_band="₹3.5-15 lakhs per annum",
        growth_outlook="Stable with regular promotions",
        training_paths=("UPSC Preparation", "Current Affairs", "Public Administration"),
    ),
    RuleDefinition(
        key="healthcare",
        trigger_skills=frozenset({Skill.HEALTHCARE}),
        trigger_interests=frozenset({InterestArea.HEALTHCARE}),
        label="Healthcare Professional",
        match_score=90,
        rationale="Healthcare sector is growing rapidly with government focus on health",
        action_steps=(
            "Complete medical/nursing/paramedical courses",
            "Get relevant certifications and licenses",
            "Apply to hospitals, clinics, or healthcare startups",
        ),
        compensation_band="₹2.5-12 lakhs per annum",
        growth_outlook="High (20% growth projected)",
        training_paths=("Medical/Nursing Degree", "Specialized Certifications", "Healthcare Management"),
    ),
    RuleDefinition(
        key="business",
        trigger_interests=frozenset({InterestArea.BUSINESS}),
        label="Business Development/Entrepreneur",
        match_score=84,
        rationale="India's startup ecosystem and business environment is thriving",
        action_steps=(
            "Develop business plan and market research",
            "Apply to incubators like NASSCOM or TiE",
            "Consider MBA or business development roles",
        ),
        compensation_band="₹3-10+ lakhs per annum",
        growth_outlook="High with unlimited potential",
        training_paths=("Business Development Course", "Startup Incubation", "Financial Management"),
    ),
)

FALLBACK_RULE = RuleDefinition(
    key="fallback",
    label="Sales Executive",
    match_score=75,
    rationale="Sales is a great entry point with high growth potential in Indian market",
    action_steps=(
        "Develop communication and persuasion skills",
        "Apply to FMCG, telecom, or insurance companies",
        "Focus on relationship building and target achievement",
    ),
    compensation_band="₹2-4 lakhs per annum + incentives",
    growth_outlook="High (15% growth projected)",
    training_paths=("Sales Training", "Customer Relationship Management", "Product Knowledge"),
)

DEFAULT_CATALOG = RuleCatalog(DEFAULT_RULES, FALLBACK_RULE)


def load_catalog(path: str | Path | None = None) -> RuleCatalog:
    """Return the catalog at ``path`` or the built-in one when no path is given."""
    if path is None:
        return DEFAULT_CATALOG
    return RuleCatalog.from_yaml(path)
