"""Diagram State - accumulated visual elements per diagramId and the pure apply step.

Invariants:
    - elements maps element id -> VisualElement in creation order
    - apply_operation never mutates its input; DiagramState.commit is the only mutator
    - delete cascades: edges touching a deleted element are removed and container
      contains lists drop deleted ids, so no edge or container ever dangles
    - update/transform merge properties key-by-key and override only fields the caller set

Design Decisions:
    - Compute-then-commit: enforce_diagram validates the would-be element set before
      anything is stored (atomic update-or-reject)
"""

from dataclasses import dataclass, field

from think_engine.core.domain_types import (
    DiagramOperationType, DiagramType, ElementType,
)
from think_engine.schemas.map import DiagramOperation, VisualElement


@dataclass
class AppliedOperation:
    """Result of applying one operation to a copy of the element set."""
    elements: dict[str, VisualElement]
    created: list[str] = field(default_factory=list)
    updated: list[str] = field(default_factory=list)
    deleted: list[str] = field(default_factory=list)
    cascaded_deletes: list[str] = field(default_factory=list)
    detached: list[str] = field(default_factory=list)

    @property
    def touched(self) -> list[str]:
        return self.created + self.updated + self.detached


def merge_element(existing: VisualElement, change: VisualElement) -> VisualElement:
    """Overlay the fields the caller set onto the stored element."""
    overrides = {
        name: getattr(change, name)
        for name in change.model_fields_set
        if name not in ("id", "properties")
    }
    overrides["properties"] = {**existing.properties, **change.properties}
    return existing.model_copy(update=overrides)


def apply_operation(
    elements: dict[str, VisualElement], operation: DiagramOperation,
) -> AppliedOperation:
    """Apply a validated operation to a copy of elements."""
    result = AppliedOperation(elements=dict(elements))
    batch = operation.elements or []
    op = operation.operation

    if op == DiagramOperationType.CREATE:
        for element in batch:
            result.elements[element.id] = element
            result.created.append(element.id)
    elif op in (DiagramOperationType.UPDATE, DiagramOperationType.TRANSFORM):
        for element in batch:
            result.elements[element.id] = merge_element(result.elements[element.id], element)
            result.updated.append(element.id)
    elif op == DiagramOperationType.DELETE:
        _delete_with_cascade(result, [e.id for e in batch])
    return result


def _delete_with_cascade(result: AppliedOperation, ids: list[str]) -> None:
    removed = set(ids)
    for element_id in ids:
        result.elements.pop(element_id, None)
        result.deleted.append(element_id)
    cascading = True
    while cascading:
        cascading = False
        for element_id, element in list(result.elements.items()):
            if element.type == ElementType.EDGE and (
                element.source in removed or element.target in removed
            ):
                del result.elements[element_id]
                result.cascaded_deletes.append(element_id)
                removed.add(element_id)
                cascading = True
    for element_id, element in list(result.elements.items()):
        if element.contains and removed.intersection(element.contains):
            kept = [c for c in element.contains if c not in removed]
            result.elements[element_id] = element.model_copy(update={"contains": kept})
            result.detached.append(element_id)


@dataclass
class DiagramState:
    """Per-diagram accumulated elements and operation log."""

    diagram_id: str
    diagram_type: DiagramType | None = None
    elements: dict[str, VisualElement] = field(default_factory=dict)
    history: list[DiagramOperation] = field(default_factory=list)
    iteration: int | None = None
    completed: bool = False

    @property
    def element_count(self) -> int:
        return len(self.elements)

    @property
    def last_operation(self) -> DiagramOperationType | None:
        return self.history[-1].operation if self.history else None

    def commit(self, operation: DiagramOperation, applied: AppliedOperation) -> None:
        self.diagram_type = self.diagram_type or operation.diagram_type
        self.elements = applied.elements
        self.history.append(operation)
        self.iteration = operation.iteration
        self.completed = not operation.next_operation_needed

    def snapshot(self) -> dict:
        """Read-only view for the sessions API."""
        return {
            "diagramId": self.diagram_id,
            "diagramType": self.diagram_type.value if self.diagram_type else None,
            "totalOperations": len(self.history),
            "elements": {k: v.to_wire() for k, v in self.elements.items()},
            "history": [
                {"operation": op.operation.value, "iteration": op.iteration}
                for op in self.history
            ],
            "lastOperation": self.last_operation.value if self.last_operation else None,
            "lastIteration": self.iteration,
            "completed": self.completed,
        }
