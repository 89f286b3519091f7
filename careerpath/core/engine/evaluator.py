"""Recommendation engine - scores a profile against the rule catalog."""

from ..models.profile import Profile
from ..models.recommendation import Recommendation
from ...observability.logger import get_logger
from .catalog import DEFAULT_CATALOG, RuleCatalog

logger = get_logger(__name__)


class RecommendationEngine:
    """Pure scoring pass over a :class:`RuleCatalog`.

    Every rule is checked independently and every match is emitted; there is
    no short-circuit between rules. When nothing matches the catalog's
    fallback is returned on its own, so the result is never empty. Results
    are ordered by ``match_score`` descending using a stable sort, which keeps
    catalog order for equal scores.
    """

    def __init__(self, catalog: RuleCatalog | None = None):
        self.catalog = catalog if catalog is not None else DEFAULT_CATALOG

    def evaluate(self, profile: Profile) -> list[Recommendation]:
        """Return ranked recommendations for ``profile``.

        Args:
            profile: Profile to score (not modified)

        Returns:
            Fresh, non-empty list of recommendations
        """
        matched = [rule for rule in self.catalog.rules if rule.matches(profile)]

        if matched:
            for rule in matched:
                logger.debug("rule_matched", rule=rule.key, score=rule.match_score)
        else:
            logger.debug("fallback_used", rule=self.catalog.fallback.key)
            matched = [self.catalog.fallback]

        ranked = sorted(matched, key=lambda rule: rule.match_score, reverse=True)

        logger.info(
            "engine_evaluated",
            matched=len(ranked),
            top=ranked[0].key,
            interest_area=profile.interest_area,
            skills=len(profile.skills),
        )

        return [rule.to_recommendation() for rule in ranked]


def evaluate(profile: Profile, catalog: RuleCatalog | None = None) -> list[Recommendation]:
    """Score ``profile`` against ``catalog`` (built-in catalog by default)."""
    return RecommendationEngine(catalog).evaluate(profile)
