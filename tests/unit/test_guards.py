"""Stage gate predicates."""

from careerpath.core.models.enums import EducationLevel, InterestArea, Skill, Timeline, WizardStage
from careerpath.core.models.profile import Profile
from careerpath.core.wizard.guards import (
    education_selected,
    gate_satisfied,
    is_complete,
    preferences_selected,
    skills_selected,
)


def test_individual_gates():
    empty = Profile()
    assert not education_selected(empty)
    assert not skills_selected(empty)
    assert not preferences_selected(empty)

    assert education_selected(Profile(education_level=EducationLevel.OTHER))
    assert skills_selected(Profile(skills=(Skill.COMMUNICATION,)))
    assert not preferences_selected(Profile(interest_area=InterestArea.RETAIL))
    assert not preferences_selected(Profile(timeline=Timeline.LONG))
    assert preferences_selected(Profile(interest_area=InterestArea.RETAIL, timeline=Timeline.LONG))


def test_gate_by_stage():
    profile = Profile(education_level=EducationLevel.BACHELOR)

    assert gate_satisfied(WizardStage.EDUCATION, profile)
    assert not gate_satisfied(WizardStage.SKILLS, profile)
    assert not gate_satisfied(3, profile)


def test_results_stage_never_opens():
    complete = Profile(
        education_level=EducationLevel.MASTER,
        skills=(Skill.DATA_ANALYSIS,),
        interest_area=InterestArea.INFORMATION_TECHNOLOGY,
        timeline=Timeline.IMMEDIATE,
    )
    assert is_complete(complete)
    assert not gate_satisfied(WizardStage.RESULTS, complete)


def test_location_never_gates():
    profile = Profile(
        education_level=EducationLevel.MASTER,
        skills=(Skill.DATA_ANALYSIS,),
        interest_area=InterestArea.INFORMATION_TECHNOLOGY,
        timeline=Timeline.IMMEDIATE,
    )
    assert profile.location is None
    assert is_complete(profile)
    assert not is_complete(profile.updated(skills=()))
