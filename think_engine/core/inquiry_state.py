"""Inquiry State - per-session histories for reflect and hypothesis, plus their derived views.

Invariants:
    - Histories are append-only lists of validated artifacts, in call order
    - confidence_progression / hypothesis_evolution are pure reads
    - Trend compares first and last overall confidence with a +/- CONFIDENCE_TREND_BAND band
"""

from dataclasses import dataclass, field

from think_engine.core.domain_types import CONFIDENCE_TREND_BAND, ConfidenceTrend
from think_engine.schemas.hypothesis import ScientificInquiry
from think_engine.schemas.reflect import MetacognitiveMonitoring


def confidence_trend(first: float, last: float) -> ConfidenceTrend:
    difference = last - first
    if difference > CONFIDENCE_TREND_BAND:
        return ConfidenceTrend.INCREASING
    if difference < -CONFIDENCE_TREND_BAND:
        return ConfidenceTrend.DECREASING
    return ConfidenceTrend.STABLE


@dataclass
class MonitoringHistory:
    """Metacognitive monitoring entries for one monitoringId."""

    monitoring_id: str
    entries: list[MetacognitiveMonitoring] = field(default_factory=list)

    def record(self, entry: MetacognitiveMonitoring) -> None:
        self.entries.append(entry)

    def confidence_progression(self) -> dict:
        changes = [
            {
                "iteration": e.iteration,
                "stage": e.stage.value,
                "overallConfidence": e.overall_confidence,
            }
            for e in self.entries
        ]
        average = (
            sum(e.overall_confidence for e in self.entries) / len(self.entries)
            if self.entries else None
        )
        trend = None
        if len(self.entries) >= 2:
            trend = confidence_trend(
                self.entries[0].overall_confidence, self.entries[-1].overall_confidence,
            ).value
        return {
            "monitoringId": self.monitoring_id,
            "totalAssessments": len(self.entries),
            "confidenceChanges": changes,
            "averageConfidence": average,
            "confidenceTrend": trend,
        }


@dataclass
class InquiryHistory:
    """Scientific inquiry stages for one inquiryId."""

    inquiry_id: str
    entries: list[ScientificInquiry] = field(default_factory=list)

    def record(self, entry: ScientificInquiry) -> None:
        self.entries.append(entry)

    def hypothesis_evolution(self) -> dict:
        stages: list[str] = []
        for entry in self.entries:
            if entry.stage.value not in stages:
                stages.append(entry.stage.value)

        with_hypothesis = [e for e in self.entries if e.hypothesis]
        changes = [
            {
                "iteration": e.iteration,
                "stage": e.stage.value,
                "status": e.hypothesis.status.value,
                "confidence": e.hypothesis.confidence,
                "statement": e.hypothesis.statement,
            }
            for e in with_hypothesis
        ]

        status_progression: list[str] = []
        for change in changes:
            if change["status"] not in status_progression:
                status_progression.append(change["status"])

        current = {"statement": None, "status": None, "confidence": None}
        if with_hypothesis:
            latest = with_hypothesis[-1].hypothesis
            current = {
                "statement": latest.statement,
                "status": latest.status.value,
                "confidence": latest.confidence,
            }

        return {
            "inquiryId": self.inquiry_id,
            "totalStages": len(self.entries),
            "stages": stages,
            "hypothesesGenerated": len({c["statement"] for c in changes}),
            "hypothesisChanges": changes,
            "currentHypothesis": current,
            "statusProgression": status_progression,
        }
