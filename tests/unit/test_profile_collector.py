"""Stage transitions and field updates of the profiling wizard."""

import pytest
from pydantic import ValidationError

from careerpath.core.engine.catalog import FALLBACK_RULE
from careerpath.core.models.enums import (
    EducationLevel,
    InterestArea,
    Location,
    Skill,
    Timeline,
    WizardStage,
)
from careerpath.core.models.profile import Profile
from careerpath.core.wizard.collector import ProfileCollector


class RecordingEngine:
    """Engine double that records the profiles it was asked to score."""

    def __init__(self):
        self.calls = []

    def evaluate(self, profile):
        self.calls.append(profile)
        return [FALLBACK_RULE.to_recommendation()]


def _at_preferences() -> ProfileCollector:
    collector = ProfileCollector()
    collector.set_education(EducationLevel.BACHELOR)
    collector.advance()
    collector.toggle_skill(Skill.COMPUTER_IT)
    collector.advance()
    assert collector.stage is WizardStage.PREFERENCES
    return collector


def _at_results() -> ProfileCollector:
    collector = _at_preferences()
    collector.set_interest(InterestArea.INFORMATION_TECHNOLOGY)
    collector.set_timeline(Timeline.IMMEDIATE)
    collector.submit()
    assert collector.stage is WizardStage.RESULTS
    return collector


def test_initial_state():
    collector = ProfileCollector()
    state = collector.state

    assert state.current_stage == 1
    assert state.profile == Profile()
    assert state.recommendations == []
    assert collector.progress == 25
    assert collector.stage_title == "Education Background"
    assert not collector.can_advance


def test_advance_blocked_without_education():
    collector = ProfileCollector()

    state = collector.advance()

    assert state.current_stage == WizardStage.EDUCATION
    assert collector.stage is WizardStage.EDUCATION


def test_education_opens_skills_stage():
    collector = ProfileCollector()

    collector.set_education("12th Pass")
    assert collector.can_advance
    state = collector.advance()

    assert state.current_stage == WizardStage.SKILLS
    assert state.profile.education_level == EducationLevel.TWELFTH_PASS
    assert collector.progress == 50


def test_advance_blocked_without_skills():
    collector = ProfileCollector()
    collector.set_education(EducationLevel.DIPLOMA)
    collector.advance()

    collector.advance()
    assert collector.stage is WizardStage.SKILLS

    collector.toggle_skill(Skill.DATA_ANALYSIS)
    collector.advance()
    assert collector.stage is WizardStage.PREFERENCES


@pytest.mark.parametrize(
    "interest,timeline",
    [
        (None, None),
        (InterestArea.HEALTHCARE, None),
        (None, Timeline.SHORT),
    ],
)
def test_submit_blocked_until_interest_and_timeline(interest, timeline):
    engine = RecordingEngine()
    collector = ProfileCollector(engine)
    collector.set_education(EducationLevel.MASTER)
    collector.advance()
    collector.toggle_skill(Skill.HEALTHCARE)
    collector.advance()
    if interest:
        collector.set_interest(interest)
    if timeline:
        collector.set_timeline(timeline)

    collector.advance()
    collector.submit()

    assert collector.stage is WizardStage.PREFERENCES
    assert collector.recommendations == []
    assert engine.calls == []


def test_submit_runs_engine_once_and_stores_results():
    engine = RecordingEngine()
    collector = ProfileCollector(engine)
    collector.set_education(EducationLevel.PHD)
    collector.advance()
    collector.toggle_skill(Skill.LANGUAGE)
    collector.advance()
    collector.set_interest(InterestArea.TOURISM)
    collector.set_timeline(Timeline.MEDIUM)
    collector.set_location(Location.REMOTE)

    state = collector.submit()

    assert state.current_stage == WizardStage.RESULTS
    assert len(engine.calls) == 1
    assert engine.calls[0] == state.profile
    assert state.recommendations == [FALLBACK_RULE.to_recommendation()]
    assert collector.progress == 100


def test_advance_from_preferences_submits():
    collector = _at_preferences()
    collector.set_interest(InterestArea.INFORMATION_TECHNOLOGY)
    collector.set_timeline(Timeline.IMMEDIATE)

    state = collector.advance()

    assert state.current_stage == WizardStage.RESULTS
    assert [rec.label for rec in state.recommendations] == ["Software Developer"]


def test_submit_outside_preferences_is_ignored():
    engine = RecordingEngine()
    collector = ProfileCollector(engine)
    collector.set_interest(InterestArea.BUSINESS)
    collector.set_timeline(Timeline.LONG)

    collector.submit()

    assert collector.stage is WizardStage.EDUCATION
    assert engine.calls == []


def test_back_transitions():
    collector = _at_preferences()

    collector.back()
    assert collector.stage is WizardStage.SKILLS
    collector.back()
    assert collector.stage is WizardStage.EDUCATION
    collector.back()
    assert collector.stage is WizardStage.EDUCATION

    # Profile survives navigation
    assert collector.profile.education_level == EducationLevel.BACHELOR
    assert collector.profile.has_skill(Skill.COMPUTER_IT)


def test_results_stage_is_terminal():
    collector = _at_results()
    results = collector.recommendations

    collector.advance()
    collector.back()
    collector.submit()

    assert collector.stage is WizardStage.RESULTS
    assert collector.recommendations == results


def test_field_updates_ignored_in_results():
    collector = _at_results()
    profile = collector.profile

    collector.set_interest(InterestArea.GOVERNMENT)
    collector.toggle_skill(Skill.COMPUTER_IT)

    assert collector.profile == profile


def test_toggle_skill_twice_restores_skills():
    collector = ProfileCollector()
    collector.toggle_skill(Skill.COMMUNICATION)
    collector.toggle_skill(Skill.CREATIVE)
    before = collector.profile.skills

    collector.toggle_skill(Skill.PROJECT_MANAGEMENT)
    collector.toggle_skill(Skill.PROJECT_MANAGEMENT)
    assert collector.profile.skills == before

    collector.toggle_skill("Communication Skills")
    collector.toggle_skill("Communication Skills")
    assert set(collector.profile.skills) == set(before)


def test_toggle_skill_removes_present_skill():
    collector = ProfileCollector()
    collector.toggle_skill(Skill.COMMUNICATION)
    collector.toggle_skill(Skill.CUSTOMER_SERVICE)
    collector.toggle_skill(Skill.COMMUNICATION)

    assert collector.profile.skills == (Skill.CUSTOMER_SERVICE.value,)


def test_reset_from_results_clears_everything():
    collector = _at_results()
    collector.set_location(Location.PUNE)

    state = collector.reset()

    assert state.current_stage == WizardStage.EDUCATION
    assert state.profile == Profile()
    assert state.recommendations == []


def test_reset_from_middle_stage():
    collector = _at_preferences()
    collector.set_salary_expectation("5 lakhs")

    collector.reset()

    assert collector.stage is WizardStage.EDUCATION
    assert collector.profile == Profile()


def test_invalid_values_rejected_without_state_change():
    collector = ProfileCollector()
    collector.set_education(EducationLevel.OTHER)
    before = collector.state

    with pytest.raises(ValidationError):
        collector.set_education("Kindergarten")
    with pytest.raises(ValidationError):
        collector.set_timeline("someday")
    with pytest.raises(ValueError):
        collector.toggle_skill("Juggling")

    assert collector.state == before


def test_state_snapshot_is_detached():
    collector = ProfileCollector()
    snapshot = collector.state

    snapshot.current_stage = WizardStage.RESULTS
    snapshot.recommendations.append(FALLBACK_RULE.to_recommendation())

    assert collector.stage is WizardStage.EDUCATION
    assert collector.recommendations == []


def test_location_is_optional():
    collector = _at_preferences()
    collector.set_interest(InterestArea.BANKING_FINANCE)
    collector.set_timeline(Timeline.SHORT)

    collector.submit()

    assert collector.profile.location is None
    assert collector.stage is WizardStage.RESULTS


def test_empty_skills_at_submit_still_reaches_results():
    collector = _at_preferences()
    collector.toggle_skill(Skill.COMPUTER_IT)
    collector.set_interest(InterestArea.AGRICULTURE)
    collector.set_timeline(Timeline.LONG)

    state = collector.submit()

    assert state.profile.skills == ()
    assert state.current_stage == WizardStage.RESULTS
    assert state.recommendations == [FALLBACK_RULE.to_recommendation()]


@pytest.mark.parametrize("setter", ["set_education", "set_interest", "set_timeline", "set_location"])
def test_enum_setters_reject_none(setter):
    collector = _at_preferences()
    collector.set_interest(InterestArea.RETAIL)
    collector.set_timeline(Timeline.SHORT)
    collector.set_location(Location.MUMBAI)
    before = collector.state

    with pytest.raises(ValueError):
        getattr(collector, setter)(None)

    assert collector.state == before
    assert collector.can_advance
