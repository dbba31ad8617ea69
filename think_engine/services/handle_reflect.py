"""Reflect Handlers - metacognitive monitoring histories keyed by monitoringId."""

import logging

from think_engine.config import Settings
from think_engine.core.domain_types import MonitoringId, ToolName
from think_engine.core.format_artifacts import format_monitoring
from think_engine.core.inquiry_state import MonitoringHistory
from think_engine.core.projections import project_monitoring
from think_engine.schemas.reflect import MetacognitiveMonitoring
from think_engine.services.validate_artifact import validate_artifact

logger = logging.getLogger(__name__)


class ReflectHandlers:
    def __init__(self, settings: Settings):
        self.settings = settings
        self.histories: dict[MonitoringId, MonitoringHistory] = {}

    def process_monitoring(self, input_data: dict) -> dict:
        entry = validate_artifact(MetacognitiveMonitoring, input_data, ToolName.REFLECT.value)
        monitoring_id = MonitoringId(entry.monitoring_id)
        history = self.histories.setdefault(monitoring_id, MonitoringHistory(monitoring_id))
        history.record(entry)

        if self.settings.render_artifacts:
            logger.info(
                format_monitoring(entry),
                extra={"tool_name": ToolName.REFLECT.value, "session_id": monitoring_id},
            )
        return {"status": "ok", **project_monitoring(entry, len(history.entries))}

    def confidence_progression(self, monitoring_id: str) -> dict | None:
        history = self.histories.get(MonitoringId(monitoring_id))
        return history.confidence_progression() if history else None
