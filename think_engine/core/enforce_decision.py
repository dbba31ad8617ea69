"""Decision Enforcement - option/criterion identity and per-option reference rules.

Invariants:
    - All functions are PURE: no IO, no side effects
    - Return error dict on violation, None on success
    - validate_decision_frame chains all checks: first error wins
    - Eisenhower quadrant follows the threshold rule: rating >= EISENHOWER_HIGH_THRESHOLD is "high"
    - Weight sums are advisory only (weight_advisories), never an error

Design Decisions:
    - The engine computes no expected values or scores; analyses are carried as data
      and only their optionId references and quadrant consistency are checked
"""

from think_engine.core.domain_types import (
    EisenhowerQuadrant,
    EISENHOWER_HIGH_THRESHOLD, WEIGHT_SUM_TARGET, WEIGHT_SUM_TOLERANCE,
)
from think_engine.core.errors import error_result
from think_engine.schemas.decide import DecisionFrame


def expected_quadrant(urgency: float, importance: float) -> EisenhowerQuadrant:
    """Quadrant implied by the urgency/importance threshold rule."""
    urgent = urgency >= EISENHOWER_HIGH_THRESHOLD
    important = importance >= EISENHOWER_HIGH_THRESHOLD
    if urgent and important:
        return EisenhowerQuadrant.DO_FIRST
    if important:
        return EisenhowerQuadrant.SCHEDULE
    if urgent:
        return EisenhowerQuadrant.DELEGATE
    return EisenhowerQuadrant.ELIMINATE


def _duplicates(ids: list[str]) -> list[str]:
    seen: set[str] = set()
    dupes: list[str] = []
    for i in ids:
        if i in seen and i not in dupes:
            dupes.append(i)
        seen.add(i)
    return dupes


def check_unique_option_ids(frame: DecisionFrame) -> dict | None:
    dupes = _duplicates([o.id for o in frame.options])
    if dupes:
        return error_result(
            "DUPLICATE_ID", f"Option ids must be unique; duplicated: {dupes}.",
            field="options", ids=dupes,
        )
    return None


def check_unique_criterion_ids(frame: DecisionFrame) -> dict | None:
    dupes = _duplicates([c.id for c in frame.criteria])
    if dupes:
        return error_result(
            "DUPLICATE_ID", f"Criterion ids must be unique; duplicated: {dupes}.",
            field="criteria", ids=dupes,
        )
    return None


def check_option_references(frame: DecisionFrame) -> dict | None:
    """Every optionId in outcomes and analysis arrays must name a declared option."""
    declared = {o.id for o in frame.options}
    dangling = []
    referencing = {
        "possibleOutcomes": frame.possible_outcomes,
        "eisenhowerClassification": frame.eisenhower_classification,
        "costBenefitAnalysis": frame.cost_benefit_analysis,
        "riskAssessment": frame.risk_assessment,
        "reversibilityAnalysis": frame.reversibility_analysis,
        "regretMinimizationAnalysis": frame.regret_minimization_analysis,
    }
    for field_name, records in referencing.items():
        for index, record in enumerate(records):
            if record.option_id not in declared:
                dangling.append({
                    "field": f"{field_name}.{index}.optionId",
                    "optionId": record.option_id,
                })
    for index, analysis in enumerate(frame.cost_benefit_analysis):
        for kind in ("costs", "benefits"):
            for item_index, item in enumerate(getattr(analysis, kind)):
                if item.option_id not in declared:
                    dangling.append({
                        "field": f"costBenefitAnalysis.{index}.{kind}.{item_index}.optionId",
                        "optionId": item.option_id,
                    })
    if dangling:
        missing = sorted({d["optionId"] for d in dangling})
        return error_result(
            "DANGLING_REFERENCE",
            f"References to undeclared options: {missing}.",
            references=dangling,
        )
    return None


def check_eisenhower_quadrants(frame: DecisionFrame) -> dict | None:
    mismatches = []
    for index, item in enumerate(frame.eisenhower_classification):
        expected = expected_quadrant(item.urgency, item.importance)
        if item.quadrant != expected:
            mismatches.append({
                "field": f"eisenhowerClassification.{index}.quadrant",
                "optionId": item.option_id,
                "quadrant": item.quadrant.value,
                "expected": expected.value,
            })
    if mismatches:
        return error_result(
            "QUADRANT_MISMATCH",
            "Eisenhower quadrant inconsistent with urgency/importance for "
            f"options: {[m['optionId'] for m in mismatches]}.",
            mismatches=mismatches,
        )
    return None


def validate_decision_frame(frame: DecisionFrame) -> dict | None:
    """Chain all decision frame checks. Returns first error or None."""
    return (
        check_unique_option_ids(frame)
        or check_unique_criterion_ids(frame)
        or check_option_references(frame)
        or check_eisenhower_quadrants(frame)
    )


def weight_advisories(frame: DecisionFrame) -> list[str]:
    """Non-blocking notes about criterion weights."""
    if not frame.criteria:
        return []
    total = sum(c.weight for c in frame.criteria)
    if abs(total - WEIGHT_SUM_TARGET) > WEIGHT_SUM_TOLERANCE:
        return [f"Criterion weights sum to {total:g}, not {WEIGHT_SUM_TARGET:g}."]
    return []
