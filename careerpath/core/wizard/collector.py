"""ProfileCollector - the staged career profiling wizard.

The collector owns a single :class:`WizardState` and is the only writer to
it. Forward moves are guarded by the stage gates in :mod:`.guards`; a move
whose gate is closed leaves the state untouched instead of raising, so the
presentation layer decides how to surface it (usually by disabling its
"continue" control via :attr:`ProfileCollector.can_advance`).

Stage flow::

    EDUCATION -> SKILLS -> PREFERENCES -> RESULTS
                 (back)    (back)         (reset -> EDUCATION)
"""

from typing import Any

from ..engine.evaluator import RecommendationEngine
from ..models.enums import EducationLevel, InterestArea, Location, Skill, Timeline, WizardStage
from ..models.profile import Profile
from ..models.recommendation import Recommendation
from ..models.wizard_state import WizardState
from ...observability.logger import get_logger
from .guards import gate_satisfied

logger = get_logger(__name__)


def _required(field: str, value: Any) -> Any:
    if value is None:
        raise ValueError(f"{field} cannot be set to None; use reset() to clear the profile")
    return value


class ProfileCollector:
    """State machine that accumulates a :class:`Profile` across four stages."""

    def __init__(self, engine: RecommendationEngine | None = None):
        """Initialize a fresh wizard.

        Args:
            engine: Recommendation engine invoked on submit (built-in catalog by default)
        """
        self.engine = engine if engine is not None else RecommendationEngine()
        self._state = WizardState()

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------
    @property
    def state(self) -> WizardState:
        """Snapshot of the current state; editing it does not affect the wizard."""
        return self._state.model_copy(deep=True)

    @property
    def stage(self) -> WizardStage:
        return self._state.stage

    @property
    def profile(self) -> Profile:
        return self._state.profile

    @property
    def recommendations(self) -> list[Recommendation]:
        return [rec.model_copy(deep=True) for rec in self._state.recommendations]

    @property
    def can_advance(self) -> bool:
        """Whether the gate out of the current stage is open."""
        return gate_satisfied(self.stage, self.profile)

    @property
    def progress(self) -> float:
        return self._state.progress

    @property
    def stage_title(self) -> str:
        return self.stage.title

    @property
    def stage_description(self) -> str:
        return self.stage.description

    # ------------------------------------------------------------------
    # Field updates
    # ------------------------------------------------------------------
    # Enum setters only overwrite; a selection is cleared by reset() alone.
    def set_education(self, level: EducationLevel | str) -> WizardState:
        return self._update(education_level=_required("education level", level))

    def toggle_skill(self, skill: Skill | str) -> WizardState:
        """Add ``skill`` if absent, remove it if present."""
        skill = Skill(skill)
        if self.profile.has_skill(skill):
            skills = tuple(s for s in self.profile.skills if s != skill.value)
        else:
            skills = self.profile.skills + (skill.value,)
        return self._update(skills=skills)

    def set_interest(self, area: InterestArea | str) -> WizardState:
        return self._update(interest_area=_required("interest area", area))

    def set_timeline(self, timeline: Timeline | str) -> WizardState:
        return self._update(timeline=_required("timeline", timeline))

    def set_location(self, location: Location | str) -> WizardState:
        return self._update(location=_required("location", location))

    def set_salary_expectation(self, text: str | None) -> WizardState:
        return self._update(salary_expectation=text or None)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def advance(self) -> WizardState:
        """Move to the next stage if the current gate is open.

        From the preferences stage this is the same as :meth:`submit`.
        """
        if self.stage is WizardStage.PREFERENCES:
            return self.submit()

        if self.stage is WizardStage.RESULTS or not self.can_advance:
            return self._blocked("advance")

        return self._move_to(WizardStage(self.stage.value + 1), "advance")

    def back(self) -> WizardState:
        """Return to the previous stage from skills or preferences."""
        if self.stage not in (WizardStage.SKILLS, WizardStage.PREFERENCES):
            return self._blocked("back")

        return self._move_to(WizardStage(self.stage.value - 1), "back")

    def submit(self) -> WizardState:
        """Score the profile and enter the results stage.

        Only valid from the preferences stage with interest area and timeline
        chosen; otherwise nothing changes.
        """
        if self.stage is not WizardStage.PREFERENCES or not self.can_advance:
            return self._blocked("submit")

        recommendations = self.engine.evaluate(self.profile)
        self._state.recommendations = recommendations
        return self._move_to(WizardStage.RESULTS, "submit")

    def reset(self) -> WizardState:
        """Clear the profile and recommendations and return to the first stage."""
        previous = self.stage
        self._state = WizardState()
        logger.info("wizard_reset", from_stage=previous.value)
        return self.state

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _update(self, **changes: Any) -> WizardState:
        # Results always reflect the stored profile; edits wait for reset.
        if self.stage is WizardStage.RESULTS:
            logger.debug("field_update_ignored", fields=sorted(changes), stage=self.stage.value)
            return self.state

        self._state.profile = self.profile.updated(**changes)
        logger.debug("profile_updated", fields=sorted(changes), stage=self.stage.value)
        return self.state

    def _move_to(self, target: WizardStage, trigger: str) -> WizardState:
        source = self.stage
        self._state.current_stage = target
        logger.info(
            "stage_changed",
            trigger=trigger,
            from_stage=source.value,
            to_stage=target.value,
        )
        return self.state

    def _blocked(self, trigger: str) -> WizardState:
        logger.debug("transition_blocked", trigger=trigger, stage=self.stage.value)
        return self.state
