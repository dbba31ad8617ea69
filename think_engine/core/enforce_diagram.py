"""Diagram Enforcement - element existence, endpoint, and containment rules for map.

Invariants:
    - All functions are PURE: no IO, no side effects
    - Return error dict on violation, None on success
    - observe is always valid (no elements required, allowed after completion)
    - Edge source/target and container contains must resolve within the diagram,
      including elements created in the same batch

Design Decisions:
    - Pre-apply checks (validate_operation) guard the batch; post-apply checks
      (validate_applied) inspect the would-be element set before commit
"""

from think_engine.core.diagram_state import AppliedOperation, DiagramState
from think_engine.core.domain_types import DiagramOperationType, ElementType
from think_engine.core.enforce_stages import check_iteration_monotonic, check_session_open
from think_engine.core.errors import error_result
from think_engine.schemas.map import DiagramOperation, VisualElement

_REQUIRES_EXISTING = (
    DiagramOperationType.UPDATE,
    DiagramOperationType.DELETE,
    DiagramOperationType.TRANSFORM,
)


def check_diagram_type(state: DiagramState | None, operation: DiagramOperation) -> dict | None:
    if state and state.diagram_type and state.diagram_type != operation.diagram_type:
        return error_result(
            "DIAGRAM_TYPE_MISMATCH",
            f"Diagram '{operation.diagram_id}' is a {state.diagram_type.value}, "
            f"not a {operation.diagram_type.value}.",
            expected=state.diagram_type.value, received=operation.diagram_type.value,
        )
    return None


def check_elements_present(operation: DiagramOperation) -> dict | None:
    if operation.operation != DiagramOperationType.OBSERVE and not operation.elements:
        return error_result(
            "MISSING_ELEMENTS",
            f"Operation '{operation.operation.value}' requires a non-empty elements list.",
            field="elements",
        )
    return None


def check_transformation_type(operation: DiagramOperation) -> dict | None:
    if (
        operation.operation == DiagramOperationType.TRANSFORM
        and operation.transformation_type is None
    ):
        return error_result(
            "MISSING_TRANSFORMATION_TYPE",
            "Operation 'transform' requires transformationType.",
            field="transformationType",
        )
    return None


def check_batch_ids_unique(operation: DiagramOperation) -> dict | None:
    seen: set[str] = set()
    dupes: list[str] = []
    for element in operation.elements or []:
        if element.id in seen and element.id not in dupes:
            dupes.append(element.id)
        seen.add(element.id)
    if dupes:
        return error_result(
            "DUPLICATE_ID", f"Element ids repeated within the batch: {dupes}.", ids=dupes,
        )
    return None


def check_element_existence(
    existing: dict[str, VisualElement], operation: DiagramOperation,
) -> dict | None:
    """create needs fresh ids; update/delete/transform need stored ids."""
    ids = [e.id for e in operation.elements or []]
    if operation.operation == DiagramOperationType.CREATE:
        clashes = [i for i in ids if i in existing]
        if clashes:
            return error_result(
                "DUPLICATE_ID", f"Elements already exist: {clashes}.", ids=clashes,
            )
    elif operation.operation in _REQUIRES_EXISTING:
        unknown = [i for i in ids if i not in existing]
        if unknown:
            return error_result(
                "UNKNOWN_ELEMENT",
                f"Operation '{operation.operation.value}' targets unknown elements: {unknown}.",
                ids=unknown,
            )
    return None


def validate_operation(state: DiagramState | None, operation: DiagramOperation) -> dict | None:
    """Chain all pre-apply checks. Returns first error or None."""
    if operation.operation == DiagramOperationType.OBSERVE:
        return check_diagram_type(state, operation)
    existing = state.elements if state else {}
    return (
        check_diagram_type(state, operation)
        or check_iteration_monotonic(state.iteration if state else None, operation.iteration)
        or check_session_open(bool(state and state.completed), "Diagram", operation.diagram_id)
        or check_elements_present(operation)
        or check_transformation_type(operation)
        or check_batch_ids_unique(operation)
        or check_element_existence(existing, operation)
    )


def check_edge_endpoints(applied: AppliedOperation) -> dict | None:
    """Every touched edge has both endpoints, each resolving to a stored element."""
    for element_id in applied.touched:
        element = applied.elements.get(element_id)
        if element is None or element.type != ElementType.EDGE:
            continue
        missing = [n for n in ("source", "target") if getattr(element, n) is None]
        if missing:
            return error_result(
                "MISSING_ENDPOINT",
                f"Edge '{element_id}' is missing {', '.join(missing)}.",
                element_id=element_id, fields=missing,
            )
        dangling = [
            ref for ref in (element.source, element.target)
            if ref not in applied.elements or ref == element_id
        ]
        if dangling:
            return error_result(
                "DANGLING_REFERENCE",
                f"Edge '{element_id}' references unknown elements: {dangling}.",
                element_id=element_id, missing=dangling,
            )
    return None


def check_containment(applied: AppliedOperation) -> dict | None:
    """Every touched container's contains list resolves to stored elements."""
    for element_id in applied.touched:
        element = applied.elements.get(element_id)
        if element is None or not element.contains:
            continue
        dangling = [
            ref for ref in element.contains
            if ref not in applied.elements or ref == element_id
        ]
        if dangling:
            return error_result(
                "DANGLING_REFERENCE",
                f"Element '{element_id}' contains unknown elements: {dangling}.",
                element_id=element_id, missing=dangling,
            )
    return None


def validate_applied(applied: AppliedOperation) -> dict | None:
    """Chain all post-apply checks. Returns first error or None."""
    return check_edge_endpoints(applied) or check_containment(applied)
