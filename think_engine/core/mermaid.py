"""Mermaid Rendering - diagram elements to Mermaid source text.

Invariants:
    - Pure function of (diagram type, elements); empty element list renders ""
    - Element ids are sanitized to [A-Za-z0-9_]
    - Only nodes and edges are drawn; containers and annotations are skipped
"""

import re
from collections.abc import Iterable

from think_engine.core.domain_types import DiagramType, ElementType
from think_engine.schemas.map import VisualElement

_UNSAFE_ID = re.compile(r"[^a-zA-Z0-9_]")

NODE_SHAPES: dict[str, tuple[str, str]] = {
    "circle": ("((", "))"),
    "round": ("(", ")"),
    "stadium": ("([", "])"),
    "subroutine": ("[[", "]]"),
    "cylindrical": ("[(", ")]"),
    "diamond": ("{", "}"),
    "hexagon": ("{{", "}}"),
    "parallelogram": ("[/", "/]"),
    "trapezoid": ("[\\", "\\]"),
}
DEFAULT_SHAPE = ("[", "]")

GRAPH_HEADERS: dict[DiagramType, str] = {
    DiagramType.GRAPH: "graph TD",
    DiagramType.FLOWCHART: "flowchart LR",
    DiagramType.CONCEPT_MAP: "graph LR",
    DiagramType.TREE_DIAGRAM: "graph TD",
    DiagramType.CUSTOM: "graph LR",
}


def sanitize_id(element_id: str) -> str:
    return _UNSAFE_ID.sub("_", element_id)


def render_mermaid(diagram_type: DiagramType, elements: Iterable[VisualElement]) -> str:
    """Render the element set as Mermaid source for the given diagram type."""
    elements = list(elements)
    if not elements:
        return ""
    nodes = [e for e in elements if e.type == ElementType.NODE]
    edges = [e for e in elements if e.type == ElementType.EDGE and e.source and e.target]
    if diagram_type == DiagramType.STATE_DIAGRAM:
        return _render_state_diagram(nodes, edges)
    return _render_graph(GRAPH_HEADERS[diagram_type], nodes, edges)


def _render_graph(header: str, nodes: list[VisualElement], edges: list[VisualElement]) -> str:
    lines = [header]
    for node in nodes:
        shape = node.properties.get("shape")
        start, end = NODE_SHAPES.get(shape, DEFAULT_SHAPE) if isinstance(shape, str) else DEFAULT_SHAPE
        lines.append(f"    {sanitize_id(node.id)}{start}{node.label or node.id}{end}")
    for edge in edges:
        arrow = edge.properties.get("arrowType")
        if not isinstance(arrow, str) or not arrow:
            arrow = "-->"
        label = f"|{edge.label}|" if edge.label else ""
        lines.append(
            f"    {sanitize_id(edge.source)} {arrow}{label} {sanitize_id(edge.target)}"
        )
    return "\n".join(lines)


def _render_state_diagram(nodes: list[VisualElement], edges: list[VisualElement]) -> str:
    lines = ["stateDiagram-v2"]
    for node in nodes:
        state = sanitize_id(node.id)
        if node.properties.get("isStart"):
            lines.append(f"    [*] --> {state}")
        if node.label and node.label != node.id:
            lines.append(f"    {state}: {node.label}")
        if node.properties.get("isEnd"):
            lines.append(f"    {state} --> [*]")
    for edge in edges:
        label = f": {edge.label}" if edge.label else ""
        lines.append(
            f"    {sanitize_id(edge.source)} --> {sanitize_id(edge.target)}{label}"
        )
    return "\n".join(lines)
