"""Recommendation and rule definition models (Pydantic only)."""

from typing import Any

from pydantic import Field, field_validator

from .base import CareerBaseModel, FrozenModel
from .enums import InterestArea, Skill
from .profile import Profile


# =============================================================================
# Pydantic Schemas
# =============================================================================


class Recommendation(CareerBaseModel):
    """One scored, annotated career recommendation."""

    label: str = Field(..., min_length=1, description="Recommended career path")
    match_score: int = Field(..., ge=0, le=100, description="Engine-assigned match score")
    rationale: str = Field(..., description="Why this profile triggered the match")
    action_steps: list[str] = Field(default_factory=list, description="Next actions, earliest first")
    compensation_band: str = Field("", description="Descriptive salary range")
    growth_outlook: str = Field("", description="Qualitative growth outlook")
    training_paths: list[str] = Field(default_factory=list, description="Training tags")

    @field_validator("training_paths", mode="after")
    @classmethod
    def _dedupe_training(cls, value: list[str]) -> list[str]:
        return list(dict.fromkeys(value))


class RuleDefinition(FrozenModel):
    """Declarative (trigger, payload) pair in the recommendation catalog.

    A rule fires when the profile holds any of ``trigger_skills`` OR its
    interest area is one of ``trigger_interests``. A rule with no triggers
    never fires on its own; that shape is used for the fallback.
    """

    key: str = Field(..., min_length=1, description="Stable rule identifier")
    trigger_skills: frozenset[Skill] = Field(default_factory=frozenset)
    trigger_interests: frozenset[InterestArea] = Field(default_factory=frozenset)

    # Payload
    label: str = Field(..., min_length=1)
    match_score: int = Field(..., ge=0, le=100)
    rationale: str = Field(...)
    action_steps: tuple[str, ...] = Field(default_factory=tuple)
    compensation_band: str = Field("")
    growth_outlook: str = Field("")
    training_paths: tuple[str, ...] = Field(default_factory=tuple)

    def matches(self, profile: Profile) -> bool:
        if self.trigger_skills & profile.skill_set:
            return True
        return profile.interest_area is not None and profile.interest_area in self.trigger_interests

    def to_recommendation(self) -> Recommendation:
        return Recommendation(
            label=self.label,
            match_score=self.match_score,
            rationale=self.rationale,
            action_steps=list(self.action_steps),
            compensation_band=self.compensation_band,
            growth_outlook=self.growth_outlook,
            training_paths=list(self.training_paths),
        )

    def describe_triggers(self) -> dict[str, Any]:
        return {
            "skills": sorted(self.trigger_skills),
            "interests": sorted(self.trigger_interests),
        }
