"""Persona Routes - browse the predefined persona library and get recommendations.

Invariants:
    - Every route reads the registry owned by the engine on app.state; none mutate it
    - An unknown persona id is RESOURCE_NOT_FOUND (404)
"""

from fastapi import APIRouter, Depends, Query

from think_engine.api.dependencies import get_dispatch
from think_engine.core.domain_types import PersonaCategory
from think_engine.core.errors import ResourceNotFoundError
from think_engine.core.persona_registry import recommend_personas, suggest_personas_for_topic
from think_engine.services.tool_dispatch import ToolDispatch

router = APIRouter(prefix="/api/v1/personas", tags=["personas"])


@router.get("")
async def list_personas(
    category: PersonaCategory | None = None,
    dispatch: ToolDispatch = Depends(get_dispatch),
):
    personas = dispatch.registry.query(category=category)
    return {"personas": [p.to_wire() for p in personas]}


@router.get("/search")
async def search_personas(
    category: PersonaCategory | None = None,
    expertise: list[str] | None = Query(None),
    tags: list[str] | None = Query(None),
    keywords: list[str] | None = Query(None),
    limit: int | None = Query(None, gt=0, le=50),
    dispatch: ToolDispatch = Depends(get_dispatch),
):
    matches = dispatch.registry.search(category, expertise, tags, keywords, limit)
    return {
        "results": [
            {**match, "persona": match["persona"].to_wire()} for match in matches
        ],
    }


@router.get("/recommend")
async def recommend(
    topic: str = Query(..., min_length=1),
    limit: int = Query(5, gt=0, le=20),
    dispatch: ToolDispatch = Depends(get_dispatch),
):
    personas = recommend_personas(dispatch.registry.all(), topic, limit)
    return {"topic": topic, "personas": [p.to_wire() for p in personas]}


@router.get("/suggest")
async def suggest(
    topic: str = Query(..., min_length=1),
    limit: int = Query(5, gt=0, le=20),
    dispatch: ToolDispatch = Depends(get_dispatch),
):
    """Like /recommend, but spread across categories for a balanced council."""
    personas = suggest_personas_for_topic(dispatch.registry.all(), topic, limit)
    return {"topic": topic, "personas": [p.to_wire() for p in personas]}


@router.get("/{persona_id}/complementary")
async def complementary(
    persona_id: str,
    limit: int = Query(3, gt=0, le=20),
    dispatch: ToolDispatch = Depends(get_dispatch),
):
    if not dispatch.registry.has(persona_id):
        raise ResourceNotFoundError("Persona", persona_id)
    personas = dispatch.registry.complementary_personas(persona_id, limit)
    return {"personaId": persona_id, "personas": [p.to_wire() for p in personas]}
