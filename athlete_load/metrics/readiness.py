"""Readiness guidance from ACWR and form.

Rules operate on raw AU values of the latest day (see get_current_metrics),
never on a window-relative percentage.
"""

from __future__ import annotations

from athlete_load.schemas.training_load import (
    AcwrSnapshot,
    CurrentMetrics,
    FormCategory,
    IntensityRecommendation,
    Recommendation,
    RiskZone,
)

_PRIORITY_ORDER = {"high": 0, "medium": 1, "low": 2}

_ZONE_RECOMMENDATIONS: dict[RiskZone, list[Recommendation]] = {
    RiskZone.DANGER: [
        Recommendation(
            code="acwr_danger",
            type="warning",
            priority="high",
            title="High injury risk",
            description="ACWR is very high (>1.5). Cut training load by 30-50% right away and favour light technical work.",
        ),
        Recommendation(
            code="prioritize_recovery",
            type="recovery",
            priority="high",
            title="Prioritize recovery",
            description="Add active recovery and stretching sessions and aim for 8-9 hours of sleep.",
        ),
    ],
    RiskZone.WARNING: [
        Recommendation(
            code="acwr_warning",
            type="warning",
            priority="medium",
            title="Warning zone",
            description="ACWR is in the warning zone (1.3-1.5). Avoid sudden load increases; hold or slightly reduce intensity.",
        ),
    ],
    RiskZone.OPTIMAL: [
        Recommendation(
            code="acwr_optimal",
            type="intensity",
            priority="low",
            title="Sweet spot",
            description="ACWR is optimal (0.8-1.3). Continue the normal program and progress load gradually if needed.",
        ),
    ],
    RiskZone.UNDERTRAINED: [
        Recommendation(
            code="acwr_undertrained",
            type="volume",
            priority="medium",
            title="Build up load",
            description="ACWR is low (<0.8). Increase volume or intensity gradually (10-15% per week) to reach the optimal zone.",
        ),
    ],
}

_FORM_VERY_LOW = Recommendation(
    code="form_very_low",
    type="recovery",
    priority="high",
    title="Very low form",
    description="Form shows heavy accumulated fatigue. Schedule 2-3 recovery days before the next high-intensity session.",
)
_FORM_LOW = Recommendation(
    code="form_fatigue",
    type="intensity",
    priority="medium",
    title="Accumulated fatigue",
    description="Negative form indicates fatigue. Keep today's session at low or medium intensity.",
)
_FORM_POSITIVE = Recommendation(
    code="form_positive",
    type="intensity",
    priority="low",
    title="Positive form, ready to perform",
    description="Good conditions for high-intensity training or competition.",
)
_LOW_BASE = Recommendation(
    code="build_base",
    type="volume",
    priority="medium",
    title="Build base fitness",
    description="Fitness is still low. Focus on increasing aerobic volume and basic strength.",
)
_HIGH_FATIGUE = Recommendation(
    code="fatigue_very_high",
    type="recovery",
    priority="high",
    title="Very high fatigue",
    description="Acute fatigue is very high. Take active rest or a deload to prevent overtraining.",
)


def classify_form(form: float) -> FormCategory:
    if form <= -50:
        return FormCategory.OVERREACHING
    if form <= -20:
        return FormCategory.FATIGUED
    if form <= 20:
        return FormCategory.BASELINE
    if form <= 50:
        return FormCategory.FRESH
    return FormCategory.PEAKED


def build_recommendations(acwr: AcwrSnapshot, current: CurrentMetrics) -> list[Recommendation]:
    """Collect recommendations from risk zone, form, base fitness and fatigue.

    Returns:
        Recommendations sorted high -> medium -> low priority; ties keep rule order
    """
    recommendations = list(_ZONE_RECOMMENDATIONS[acwr.risk_zone])

    if current.form < -30:
        recommendations.append(_FORM_VERY_LOW)
    elif current.form < -10:
        recommendations.append(_FORM_LOW)
    elif current.form > 15:
        recommendations.append(_FORM_POSITIVE)

    if current.fitness < 30 and current.fatigue < 30:
        recommendations.append(_LOW_BASE)

    if current.fatigue > 80:
        recommendations.append(_HIGH_FATIGUE)

    return sorted(recommendations, key=lambda rec: _PRIORITY_ORDER[rec.priority])


def recommend_intensity(acwr: AcwrSnapshot, current: CurrentMetrics) -> IntensityRecommendation:
    """Suggest today's intensity band."""
    if acwr.risk_zone == RiskZone.DANGER or current.form < -30:
        return IntensityRecommendation(level="rest_recovery", percentage="0-30%")
    if acwr.risk_zone == RiskZone.WARNING or current.form < -10:
        return IntensityRecommendation(level="low", percentage="30-50%")
    if acwr.risk_zone == RiskZone.OPTIMAL and current.form >= 0:
        return IntensityRecommendation(level="medium_high", percentage="70-90%")
    return IntensityRecommendation(level="medium", percentage="50-70%")
