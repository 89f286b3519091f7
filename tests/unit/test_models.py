"""Model validation for profiles and recommendations."""

import pytest
from pydantic import ValidationError

from careerpath.core.models import Location, Profile, Recommendation, Skill, Timeline, WizardStage


def test_profile_is_frozen_and_updated_returns_copy():
    profile = Profile(timeline=Timeline.SHORT)

    with pytest.raises(ValidationError):
        profile.timeline = Timeline.LONG

    changed = profile.updated(timeline="long", location="remote")
    assert profile.timeline == "short"
    assert changed.timeline == Timeline.LONG
    assert changed.location == Location.REMOTE


def test_profile_skills_behave_as_set():
    profile = Profile(skills=("Data Analysis", Skill.DATA_ANALYSIS, "Content Writing"))

    assert profile.skills == ("Data Analysis", "Content Writing")
    assert profile.has_skill(Skill.CONTENT_WRITING)
    assert not profile.has_skill(Skill.CREATIVE)
    assert profile.skill_set == frozenset({"Data Analysis", "Content Writing"})


def test_profile_rejects_unknown_values():
    with pytest.raises(ValidationError):
        Profile(location="atlantis")
    with pytest.raises(ValidationError):
        Profile(skills=("Juggling",))


def test_recommendation_score_bounds():
    with pytest.raises(ValidationError):
        Recommendation(label="X", match_score=101, rationale="r")
    with pytest.raises(ValidationError):
        Recommendation(label="X", match_score=-1, rationale="r")

    rec = Recommendation(label="X", match_score=80, rationale="r", training_paths=["a", "b", "a"])
    assert rec.training_paths == ["a", "b"]


def test_display_labels():
    assert Timeline.IMMEDIATE.label == "Immediate (0-2 months)"
    assert Location.DELHI.label == "Delhi NCR"
    assert Location.PUNE.label == "Pune"
    assert WizardStage.SKILLS.title == "Skills & Experience"
