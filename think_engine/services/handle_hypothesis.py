"""Hypothesis Handlers - scientific inquiry histories keyed by inquiryId."""

import logging

from think_engine.config import Settings
from think_engine.core.domain_types import InquiryId, ToolName
from think_engine.core.format_artifacts import format_inquiry
from think_engine.core.inquiry_state import InquiryHistory
from think_engine.core.projections import project_inquiry
from think_engine.schemas.hypothesis import ScientificInquiry
from think_engine.services.validate_artifact import validate_artifact

logger = logging.getLogger(__name__)


class HypothesisHandlers:
    def __init__(self, settings: Settings):
        self.settings = settings
        self.histories: dict[InquiryId, InquiryHistory] = {}

    def process_inquiry(self, input_data: dict) -> dict:
        entry = validate_artifact(ScientificInquiry, input_data, ToolName.HYPOTHESIS.value)
        inquiry_id = InquiryId(entry.inquiry_id)
        history = self.histories.setdefault(inquiry_id, InquiryHistory(inquiry_id))
        history.record(entry)

        if self.settings.render_artifacts:
            logger.info(
                format_inquiry(entry),
                extra={"tool_name": ToolName.HYPOTHESIS.value, "session_id": inquiry_id},
            )
        return {"status": "ok", **project_inquiry(entry, len(history.entries))}

    def hypothesis_evolution(self, inquiry_id: str) -> dict | None:
        history = self.histories.get(InquiryId(inquiry_id))
        return history.hypothesis_evolution() if history else None
