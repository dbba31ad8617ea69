"""Persona Registry - injectable store of predefined personas plus pure recommendation scoring.

Invariants:
    - A registry is an ordinary object passed to the engine; there is no module singleton
    - Registration order is preserved by all(), by_category(), and query()
    - score_persona is pure: same persona, topic, and weights give the same score
    - recommend_personas sorts by descending score; ties keep registration order

Design Decisions:
    - Fixed ScoreWeights table over ad hoc string checks: the scorer is pluggable
      (pass another callable) while the default reproduces name 5 / expertise 3 /
      tag 2 / concern 1
    - Matching is case-insensitive substring containment of the topic
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from think_engine.core.domain_types import PersonaCategory
from think_engine.schemas.council import Persona


@dataclass(frozen=True)
class ScoreWeights:
    name: int = 5
    expertise: int = 3
    tag: int = 2
    concern: int = 1
    question: int = 1


DEFAULT_WEIGHTS = ScoreWeights()

Scorer = Callable[[Persona, str], int]


@dataclass(frozen=True)
class PersonaProfile:
    """A predefined persona plus registry-only metadata."""
    persona: Persona
    complementary_ids: tuple[str, ...] = ()

    @property
    def id(self) -> str:
        return self.persona.id

    @property
    def category(self) -> PersonaCategory | None:
        return self.persona.category


def _contains(text: str, topic: str) -> bool:
    return topic in text.lower()


def score_persona(
    persona: Persona, topic: str, weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> int:
    """One weight per matching field kind, regardless of how many entries match."""
    topic = topic.lower()
    score = 0
    if _contains(persona.name, topic):
        score += weights.name
    if any(_contains(e, topic) for e in persona.expertise):
        score += weights.expertise
    if any(_contains(t, topic) for t in persona.tags):
        score += weights.tag
    if any(_contains(c, topic) for c in persona.concerns):
        score += weights.concern
    return score


def count_persona_matches(
    persona: Persona, topic: str, weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> int:
    """One weight per matching entry, typical questions included."""
    topic = topic.lower()
    score = weights.name if _contains(persona.name, topic) else 0
    score += weights.expertise * sum(_contains(e, topic) for e in persona.expertise)
    score += weights.tag * sum(_contains(t, topic) for t in persona.tags)
    score += weights.concern * sum(_contains(c, topic) for c in persona.concerns)
    score += weights.question * sum(_contains(q, topic) for q in persona.typical_questions)
    return score


def recommend_personas(
    personas: Iterable[Persona], topic: str, limit: int = 5,
    scorer: Scorer = score_persona,
) -> list[Persona]:
    """Top personas for topic by score. Zero scores are dropped; ids deduplicated."""
    seen: set[str] = set()
    scored: list[tuple[int, Persona]] = []
    for persona in personas:
        if persona.id in seen:
            continue
        seen.add(persona.id)
        score = scorer(persona, topic)
        if score > 0:
            scored.append((score, persona))
    scored.sort(key=lambda pair: pair[0], reverse=True)
    return [p for _, p in scored[:limit]]


def suggest_personas_for_topic(
    personas: Iterable[Persona], topic: str, max_personas: int = 5,
) -> list[Persona]:
    """Like recommend_personas, but spreads picks across categories (2 per category
    until only one slot is left), then tops up from the best remaining."""
    scored = [
        (count_persona_matches(p, topic), p) for p in personas
    ]
    ranked = [p for score, p in sorted(
        (pair for pair in scored if pair[0] > 0),
        key=lambda pair: pair[0], reverse=True,
    )]

    selected: list[Persona] = []
    per_category: dict[PersonaCategory | None, int] = {}
    for persona in ranked:
        if len(selected) >= max_personas:
            break
        count = per_category.get(persona.category, 0)
        if count < 2 or len(selected) >= max_personas - 1:
            selected.append(persona)
            per_category[persona.category] = count + 1

    for persona in ranked:
        if len(selected) >= max_personas:
            break
        if all(s.id != persona.id for s in selected):
            selected.append(persona)
    return selected


@dataclass
class PersonaRegistry:
    """Predefined personas indexed by id and category."""

    _profiles: dict[str, PersonaProfile] = field(default_factory=dict)

    def register(self, profile: PersonaProfile) -> None:
        if profile.category is None:
            raise ValueError(f"Persona '{profile.id}' must have a category")
        self._profiles[profile.id] = profile

    def register_all(self, profiles: Iterable[PersonaProfile]) -> None:
        for profile in profiles:
            self.register(profile)

    def __len__(self) -> int:
        return len(self._profiles)

    def has(self, persona_id: str) -> bool:
        return persona_id in self._profiles

    def get(self, persona_id: str) -> Persona | None:
        profile = self._profiles.get(persona_id)
        return profile.persona if profile else None

    def all(self) -> list[Persona]:
        return [p.persona for p in self._profiles.values()]

    def by_category(self, category: PersonaCategory) -> list[Persona]:
        return [p for p in self.all() if p.category == category]

    def query(
        self,
        category: PersonaCategory | None = None,
        expertise: list[str] | None = None,
        tags: list[str] | None = None,
        keywords: list[str] | None = None,
        limit: int | None = None,
    ) -> list[Persona]:
        """Filter personas; each given criterion must match at least one term."""
        results = self.all()
        if category:
            results = [p for p in results if p.category == category]
        if expertise:
            results = [p for p in results if _matching(expertise, p.expertise)]
        if tags:
            results = [p for p in results if _matching(tags, p.tags)]
        if keywords:
            results = [p for p in results if _matching(keywords, [_search_text(p)])]
        if limit and limit > 0:
            results = results[:limit]
        return results

    def search(
        self,
        category: PersonaCategory | None = None,
        expertise: list[str] | None = None,
        tags: list[str] | None = None,
        keywords: list[str] | None = None,
        limit: int | None = None,
    ) -> list[dict]:
        """query() plus a relevance score in (0, 1] and a human-readable reason."""
        results = []
        for persona in self.query(category, expertise, tags, keywords, limit):
            relevance = 0.0
            reasons = []
            if category and persona.category == category:
                relevance += 0.3
                reasons.append(f"in {category.value} category")
            for weight, terms, haystack, label in (
                (0.3, expertise, persona.expertise, "expertise in"),
                (0.2, tags, persona.tags, "tagged as"),
                (0.2, keywords, [_search_text(persona)], "matches keywords:"),
            ):
                if not terms:
                    continue
                matched = _matching(terms, haystack)
                if matched:
                    relevance += weight * len(matched) / len(terms)
                    reasons.append(f"{label} {', '.join(matched)}")
            if relevance == 0:
                relevance = 0.1
                reasons.append("general match")
            results.append({
                "persona": persona,
                "relevance": min(relevance, 1.0),
                "matchReason": "; ".join(reasons),
            })
        results.sort(key=lambda r: r["relevance"], reverse=True)
        return results

    def complementary_personas(self, persona_id: str, max_results: int = 3) -> list[Persona]:
        """Explicitly listed partners first, then other-category personas by shared concerns."""
        profile = self._profiles.get(persona_id)
        if profile is None:
            return []
        picked: list[Persona] = [
            self._profiles[i].persona
            for i in profile.complementary_ids if i in self._profiles
        ]
        if len(picked) < max_results:
            own_concerns = set(profile.persona.concerns)
            others = [
                p for p in self.all()
                if p.id != persona_id
                and p.category != profile.category
                and all(x.id != p.id for x in picked)
            ]
            others.sort(
                key=lambda p: len([c for c in p.concerns if c in own_concerns]),
                reverse=True,
            )
            picked.extend(others)
        return picked[:max_results]


def _search_text(persona: Persona) -> str:
    return f"{persona.name} {persona.background} {persona.perspective}"


def _matching(terms: list[str], haystack: list[str]) -> list[str]:
    """Terms that occur (case-insensitively) in at least one haystack entry."""
    lowered = [h.lower() for h in haystack]
    return [t for t in terms if any(t.lower() in h for h in lowered)]
