"""Wizard state model (Pydantic only)."""

from pydantic import Field

from .base import CareerBaseModel
from .enums import WizardStage
from .profile import Profile
from .recommendation import Recommendation


class WizardState(CareerBaseModel):
    """Observable state of one wizard session."""

    current_stage: WizardStage = Field(WizardStage.EDUCATION, description="Current stage")
    profile: Profile = Field(default_factory=Profile, description="Accumulated profile")
    recommendations: list[Recommendation] = Field(
        default_factory=list, description="Ranked results, empty until the results stage"
    )

    @property
    def stage(self) -> WizardStage:
        return WizardStage(self.current_stage)

    @property
    def progress(self) -> float:
        """Completion percentage shown in the progress bar."""
        return self.stage.value / len(WizardStage) * 100
