"""Diagram Operation Schemas - visual elements and the operations applied to them.

Invariants:
    - properties is an open mapping; its values are never inspected
    - source/target/contains are shape-checked here and resolved in core/enforce_diagram
    - elements is optional at the schema level; which operations require it is a core rule
"""

from typing import Any

from think_engine.core.domain_types import (
    DiagramOperationType, DiagramType, ElementType, TransformationType,
)
from think_engine.schemas.common import (
    ArtifactModel, Flag, Identifier, NonNegativeInt, Text,
)


class VisualElement(ArtifactModel):
    id: Identifier
    type: ElementType
    properties: dict[str, Any]
    label: Text | None = None
    source: Identifier | None = None
    target: Identifier | None = None
    contains: list[Identifier] | None = None


class DiagramOperation(ArtifactModel):
    operation: DiagramOperationType
    diagram_id: Identifier
    diagram_type: DiagramType
    iteration: NonNegativeInt
    next_operation_needed: Flag
    elements: list[VisualElement] | None = None
    transformation_type: TransformationType | None = None
    observation: Text | None = None
    insight: Text | None = None
    hypothesis: Text | None = None
