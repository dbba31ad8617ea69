"""Persona registry tests - injectable store, scoring, recommendation, search.

Tests cover:
    - Registries are independent objects (no shared global)
    - score_persona weight table and stable descending sort
    - suggest_personas_for_topic category spread
    - query/search/complementary lookups
"""

import pytest

from think_engine.core.domain_types import PersonaCategory
from think_engine.core.persona_library import DEFAULT_PROFILES, build_default_registry
from think_engine.core.persona_registry import (
    PersonaProfile,
    PersonaRegistry,
    ScoreWeights,
    recommend_personas,
    score_persona,
    suggest_personas_for_topic,
)
from think_engine.schemas.council import Persona

from tests.payloads import persona


def _persona(persona_id: str, **overrides) -> Persona:
    return Persona.model_validate(persona(persona_id, **overrides))


def test_default_library_has_two_personas_per_category():
    registry = build_default_registry()
    assert len(registry) == len(DEFAULT_PROFILES)
    for category in PersonaCategory:
        assert len(registry.by_category(category)) == 2


def test_registries_are_independent():
    first = build_default_registry()
    second = build_default_registry()
    first.register(PersonaProfile(_persona("extra", category="general")))
    assert first.has("extra")
    assert not second.has("extra")


def test_register_requires_category():
    with pytest.raises(ValueError):
        PersonaRegistry().register(PersonaProfile(_persona("nocat")))


def test_score_weights():
    p = _persona(
        "sec", name="Security Lead", expertise=["security audits"],
        tags=["security"], concerns=["security debt", "security drift"],
    )
    assert score_persona(p, "SECURITY") == 5 + 3 + 2 + 1
    assert score_persona(p, "latency") == 0
    assert score_persona(p, "security", ScoreWeights(name=0, expertise=0, tag=1, concern=0)) == 1


def test_recommend_sorts_descending_and_keeps_ties_stable():
    a = _persona("a", tags=["api"])
    b = _persona("b", expertise=["api design"])
    c = _persona("c", tags=["api"])
    d = _persona("d")
    assert [p.id for p in recommend_personas([a, b, c, d], "api")] == ["b", "a", "c"]


def test_recommend_respects_limit_and_dedupes():
    a = _persona("a", tags=["api"])
    assert [p.id for p in recommend_personas([a, a], "api", limit=5)] == ["a"]
    registry = build_default_registry()
    assert len(recommend_personas(registry.all(), "e", limit=2)) == 2


def test_suggest_spreads_across_categories():
    registry = build_default_registry()
    picks = suggest_personas_for_topic(registry.all(), "scalability", max_personas=3)
    assert picks
    categories = [p.category for p in picks]
    assert all(categories.count(c) <= 2 for c in categories)


def test_query_filters_by_category_and_tags():
    registry = build_default_registry()
    ids = [p.id for p in registry.query(category=PersonaCategory.TECHNICAL, tags=["caching"])]
    assert ids == ["performance-engineer"]


def test_search_reports_relevance_and_reason():
    registry = build_default_registry()
    results = registry.search(expertise=["threat modeling"])
    assert results[0]["persona"].id == "security-specialist"
    assert results[0]["relevance"] == pytest.approx(0.3)
    assert "expertise in" in results[0]["matchReason"]


def test_complementary_lists_partners_first():
    registry = build_default_registry()
    partners = registry.complementary_personas("security-specialist", max_results=3)
    assert [p.id for p in partners[:2]] == ["performance-engineer", "devils-advocate"]
    assert len(partners) == 3
    assert registry.complementary_personas("ghost") == []
