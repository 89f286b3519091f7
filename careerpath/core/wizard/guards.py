"""Stage gates for the profiling wizard."""

from typing import Callable

from ..models.enums import WizardStage
from ..models.profile import Profile

Guard = Callable[[Profile], bool]


def education_selected(profile: Profile) -> bool:
    return profile.education_level is not None


def skills_selected(profile: Profile) -> bool:
    return len(profile.skills) > 0


def preferences_selected(profile: Profile) -> bool:
    return profile.interest_area is not None and profile.timeline is not None


def _closed(profile: Profile) -> bool:
    return False


# Gate checked before leaving each stage. The results stage has no forward move.
STAGE_GATES: dict[WizardStage, Guard] = {
    WizardStage.EDUCATION: education_selected,
    WizardStage.SKILLS: skills_selected,
    WizardStage.PREFERENCES: preferences_selected,
    WizardStage.RESULTS: _closed,
}

# Field a user still has to fill in when a gate is closed
MISSING_FIELD: dict[WizardStage, str] = {
    WizardStage.EDUCATION: "education level",
    WizardStage.SKILLS: "at least one skill",
    WizardStage.PREFERENCES: "interest area and timeline",
}


def gate_for(stage: WizardStage | int) -> Guard:
    return STAGE_GATES[WizardStage(stage)]


def gate_satisfied(stage: WizardStage | int, profile: Profile) -> bool:
    """Return True when ``profile`` may move forward out of ``stage``."""
    return gate_for(stage)(profile)


def is_complete(profile: Profile) -> bool:
    """A profile is complete once every gate up to the results stage holds."""
    return education_selected(profile) and skills_selected(profile) and preferences_selected(profile)
