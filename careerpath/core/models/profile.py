"""Profile model accumulated by the wizard (Pydantic only)."""

from typing import Any

from pydantic import Field, field_validator

from .base import FrozenModel
from .enums import EducationLevel, InterestArea, Location, Skill, Timeline


class Profile(FrozenModel):
    """User-supplied profile consumed by the recommendation engine.

    Instances are immutable; the collector replaces the whole record on every
    field update via :meth:`updated`.
    """

    education_level: EducationLevel | None = Field(None, description="Highest qualification")
    skills: tuple[Skill, ...] = Field(default_factory=tuple, description="Selected skills")
    interest_area: InterestArea | None = Field(None, description="Career interest area")
    timeline: Timeline | None = Field(None, description="Job search timeline")
    location: Location | None = Field(None, description="Preferred work location")
    salary_expectation: str | None = Field(None, description="Free-form salary expectation")

    @field_validator("skills", mode="after")
    @classmethod
    def _dedupe_skills(cls, value: tuple[Any, ...]) -> tuple[Any, ...]:
        # Keep first occurrence; skills behave as a set.
        return tuple(dict.fromkeys(value))

    def has_skill(self, skill: Skill | str) -> bool:
        return Skill(skill).value in self.skills

    @property
    def skill_set(self) -> frozenset[str]:
        return frozenset(self.skills)

    def updated(self, **changes: Any) -> "Profile":
        """Return a re-validated copy with ``changes`` applied.

        Raises:
            pydantic.ValidationError: If a value is outside its closed set
        """
        data = self.model_dump()
        data.update(changes)
        return Profile.model_validate(data)
