"""Inquiry state tests - reflect confidence progression and hypothesis evolution."""

import pytest

from think_engine.core.domain_types import ConfidenceTrend
from think_engine.core.inquiry_state import InquiryHistory, MonitoringHistory, confidence_trend
from think_engine.schemas.hypothesis import ScientificInquiry
from think_engine.schemas.reflect import MetacognitiveMonitoring

from tests.payloads import hypothesis_data, inquiry, monitoring


@pytest.mark.parametrize("first,last,trend", [
    (0.5, 0.6, ConfidenceTrend.INCREASING),
    (0.6, 0.5, ConfidenceTrend.DECREASING),
    (0.5, 0.54, ConfidenceTrend.STABLE),
])
def test_confidence_trend_band(first, last, trend):
    assert confidence_trend(first, last) == trend


def test_confidence_progression():
    history = MonitoringHistory("m1")
    for iteration, confidence in enumerate((0.4, 0.6, 0.8)):
        history.record(MetacognitiveMonitoring.model_validate(monitoring(iteration, confidence)))
    progression = history.confidence_progression()
    assert progression["totalAssessments"] == 3
    assert progression["averageConfidence"] == pytest.approx(0.6)
    assert progression["confidenceTrend"] == "increasing"
    assert [c["overallConfidence"] for c in progression["confidenceChanges"]] == [0.4, 0.6, 0.8]


def test_single_assessment_has_no_trend():
    history = MonitoringHistory("m1")
    history.record(MetacognitiveMonitoring.model_validate(monitoring()))
    assert history.confidence_progression()["confidenceTrend"] is None


def test_hypothesis_evolution():
    history = InquiryHistory("i1")
    history.record(ScientificInquiry.model_validate(inquiry("observation", 1, observation="p99 spikes")))
    history.record(ScientificInquiry.model_validate(
        inquiry("hypothesis", 2, hypothesis=hypothesis_data()),
    ))
    history.record(ScientificInquiry.model_validate(
        inquiry("analysis", 3, hypothesis=hypothesis_data(status="supported", confidence=0.8)),
    ))
    evolution = history.hypothesis_evolution()
    assert evolution["stages"] == ["observation", "hypothesis", "analysis"]
    assert evolution["totalStages"] == 3
    assert evolution["hypothesesGenerated"] == 1
    assert evolution["statusProgression"] == ["proposed", "supported"]
    assert evolution["currentHypothesis"]["confidence"] == 0.8
