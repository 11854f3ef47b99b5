"""AdaptiveWorkoutEngine — the main orchestrator that suggests today's workout."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from load_engine.analysis.fatigue import analyze_fatigue, cold_start_analysis
from load_engine.exceptions import ProviderError
from load_engine.models.enums import (
    LAUNCHER_HISTORY_DAYS,
    LAUNCHER_PRESET_MUSCLE_GROUPS,
    LAUNCHER_PRESET_LIMIT,
    PRESET_CATEGORY,
    TEMPLATE_LOOKBACK_SESSIONS,
    VOLUME_ADJUSTMENT_PCT,
    Confidence,
    Recommendation,
)
from load_engine.models.fatigue import FatigueAnalysis
from load_engine.models.policy import DEFAULT_POLICY, ScoringPolicy
from load_engine.models.session import CompletedSession, ExerciseRef, WorkoutTemplate
from load_engine.models.workout import AdaptedWorkout, LauncherPrediction
from load_engine.providers import (
    ExerciseCatalogProvider,
    SessionHistoryProvider,
    TemplateProvider,
)
from load_engine.registry import SignalRegistry
from load_engine.workout_builder.adapter import adapt_exercises
from load_engine.workout_builder.launcher import (
    launcher_candidates,
    launcher_preset,
    prediction_from_template,
)
from load_engine.workout_builder.naming import adapted_name, estimate_duration, template_reason
from load_engine.workout_builder.preset import preset_query, synthesize_preset
from load_engine.workout_builder.template_selection import select_base_template

logger = logging.getLogger(__name__)

# Provider failures the engine degrades on instead of propagating.
# OSError covers socket timeouts and connection errors from custom providers.
_PROVIDER_FAILURES = (ProviderError, OSError)


class AdaptiveWorkoutEngine:
    """Orchestrates fatigue analysis, template adaptation and preset fallback.

    The engine holds only its collaborators and policy; nothing about a user
    is retained between calls, so one instance may serve concurrent requests.

    Usage:
        engine = AdaptiveWorkoutEngine(history, templates, catalog)
        workout = engine.generate(user_id)
        preview = engine.launcher(user_id)
    """

    def __init__(
        self,
        history: SessionHistoryProvider,
        templates: TemplateProvider,
        catalog: ExerciseCatalogProvider,
        policy: ScoringPolicy | None = None,
        registry: SignalRegistry | None = None,
    ) -> None:
        self.history = history
        self.templates = templates
        self.catalog = catalog
        self.policy = policy or DEFAULT_POLICY
        self.registry = registry if registry is not None else SignalRegistry.default()

    def analyze(self, user_id: str, now: datetime | None = None) -> FatigueAnalysis:
        """Run the fatigue analyzer over the user's trailing history.

        If history cannot be read, returns the cold-start default flagged as
        degraded rather than raising.
        """
        now = now or _utcnow()
        since = now - timedelta(days=self.policy.history_window_days)
        try:
            sessions = self.history.fetch(user_id, since)
        except _PROVIDER_FAILURES as exc:
            logger.warning(
                "Session history unavailable for user %s; using cold-start default: %s",
                user_id,
                exc,
            )
            return cold_start_analysis(self.policy, degraded=True)
        return analyze_fatigue(sessions, now, self.policy, self.registry)

    def generate(self, user_id: str, now: datetime | None = None) -> AdaptedWorkout:
        """Produce today's fatigue-adapted workout.

        Args:
            user_id: Whose history to analyze.
            now: Instant of the request; defaults to the current UTC time.

        Returns:
            An AdaptedWorkout adapted from the user's most used recent
            template (HIGH confidence) or synthesized from the exercise
            catalog (MEDIUM confidence).
        """
        analysis = self.analyze(user_id, now)
        recommendation = analysis.recommendation
        degraded = analysis.degraded

        template = self._load_base_template(user_id)
        if template is not None:
            exercises = adapt_exercises(template.exercises, recommendation)
            suggestion = LauncherPrediction(
                template_id=template.id,
                template_name=adapted_name(template.name, recommendation),
                exercises=exercises,
                estimated_duration_minutes=estimate_duration(len(exercises), recommendation),
                confidence=Confidence.HIGH,
                reason=template_reason(analysis.reason, template.name),
            )
        else:
            catalog_exercises = self._fetch_catalog_for_preset(recommendation)
            degraded = degraded or catalog_exercises is None
            suggestion = synthesize_preset(recommendation, catalog_exercises or [])

        logger.info(
            "User %s: fatigue %d -> %s (%s, %d exercises)",
            user_id,
            analysis.fatigue_score,
            recommendation.name,
            "template" if template is not None else "preset",
            len(suggestion.exercises),
        )

        return AdaptedWorkout(
            template_id=suggestion.template_id,
            template_name=suggestion.template_name,
            exercises=suggestion.exercises,
            estimated_duration_minutes=suggestion.estimated_duration_minutes,
            confidence=suggestion.confidence,
            reason=suggestion.reason,
            fatigue_score=analysis.fatigue_score,
            adaptation_type=recommendation,
            adaptation_reason=analysis.reason,
            volume_adjustment_pct=VOLUME_ADJUSTMENT_PCT[recommendation],
            degraded=degraded,
        )

    def launcher(self, user_id: str, now: datetime | None = None) -> LauncherPrediction:
        """Predict the user's usual workout for today, without adaptation."""
        now = now or _utcnow()
        since = now - timedelta(days=LAUNCHER_HISTORY_DAYS)
        try:
            history: list[CompletedSession] = self.history.fetch(user_id, since)
        except _PROVIDER_FAILURES as exc:
            logger.warning("Session history unavailable for user %s: %s", user_id, exc)
            history = []

        for candidate in launcher_candidates(history, now):
            template = self._fetch_template(candidate.template_id)
            if template is not None:
                return prediction_from_template(candidate, template)

        try:
            exercises = self.catalog.fetch(
                LAUNCHER_PRESET_MUSCLE_GROUPS, PRESET_CATEGORY, LAUNCHER_PRESET_LIMIT
            )
        except _PROVIDER_FAILURES as exc:
            logger.warning("Exercise catalog unavailable: %s", exc)
            exercises = []
        return launcher_preset(exercises)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _load_base_template(self, user_id: str) -> WorkoutTemplate | None:
        """The most used template of the last 5 sessions, if it can be loaded."""
        try:
            recent = self.history.fetch_recent(user_id, TEMPLATE_LOOKBACK_SESSIONS)
        except _PROVIDER_FAILURES as exc:
            logger.warning("Recent sessions unavailable for user %s: %s", user_id, exc)
            return None

        template_id = select_base_template(recent)
        if template_id is None:
            return None
        template = self._fetch_template(template_id)
        if template is not None and not template.exercises:
            logger.info("Template %s has no exercises; using preset", template_id)
            return None
        return template

    def _fetch_template(self, template_id: str) -> WorkoutTemplate | None:
        try:
            template = self.templates.fetch(template_id)
        except _PROVIDER_FAILURES as exc:
            logger.warning("Failed to load template %s: %s", template_id, exc)
            return None
        if template is None:
            logger.info("Template %s not found", template_id)
        return template

    def _fetch_catalog_for_preset(
        self, recommendation: Recommendation
    ) -> list[ExerciseRef] | None:
        """Catalog exercises for a preset, or None if the catalog is unavailable."""
        query = preset_query(recommendation)
        try:
            return self.catalog.fetch(query.muscle_groups, query.category, query.limit)
        except _PROVIDER_FAILURES as exc:
            logger.warning("Exercise catalog unavailable: %s", exc)
            return None


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)
