"""careerpath data models for profiles, recommendations, and wizard state."""

from .base import CareerBaseModel, FrozenModel
from .enums import (
    EducationLevel,
    InterestArea,
    Location,
    Skill,
    Timeline,
    WizardStage,
)
from .profile import Profile
from .recommendation import Recommendation, RuleDefinition
from .wizard_state import WizardState

__all__ = [
    # Base
    "CareerBaseModel",
    "FrozenModel",
    # Enums
    "WizardStage",
    "EducationLevel",
    "Skill",
    "InterestArea",
    "Timeline",
    "Location",
    # Profile
    "Profile",
    # Recommendations
    "Recommendation",
    "RuleDefinition",
    # Wizard
    "WizardState",
]
