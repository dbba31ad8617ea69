"""Persona Library - the predefined personas shipped with the engine.

Invariants:
    - Two personas per PersonaCategory; ids are kebab-case and unique
    - build_default_registry() returns a NEW registry on every call

Design Decisions:
    - Short profiles: only the fields the scorer and council roster use
"""

from think_engine.core.domain_types import PersonaCategory
from think_engine.core.persona_registry import PersonaProfile, PersonaRegistry
from think_engine.schemas.council import Communication, Persona


def _profile(
    *, id: str, name: str, category: PersonaCategory, expertise: list[str],
    background: str, perspective: str, biases: list[str], style: str, tone: str,
    tags: list[str], concerns: list[str], questions: list[str],
    complementary: tuple[str, ...],
) -> PersonaProfile:
    return PersonaProfile(
        persona=Persona(
            id=id, name=name, category=category, expertise=expertise,
            background=background, perspective=perspective, biases=biases,
            communication=Communication(style=style, tone=tone),
            tags=tags, concerns=concerns, typical_questions=questions,
        ),
        complementary_ids=complementary,
    )


DEFAULT_PROFILES: tuple[PersonaProfile, ...] = (
    _profile(
        id="security-specialist", name="Security Specialist",
        category=PersonaCategory.TECHNICAL,
        expertise=["Threat modeling", "Secure architecture", "Authentication and authorization",
                   "Compliance (GDPR, SOC2)"],
        background="Penetration tester turned security architect.",
        perspective="Security is designed in from the start; assume breach.",
        biases=["Overly risk-averse", "Focuses on unlikely attack scenarios"],
        style="Direct and methodical", tone="Serious, evidence-based",
        tags=["security", "threat-modeling", "privacy", "compliance"],
        concerns=["Data exposure", "Broken access control", "Secrets management"],
        questions=["What happens if an attacker gains access to this component?"],
        complementary=("performance-engineer", "devils-advocate"),
    ),
    _profile(
        id="performance-engineer", name="Performance Engineer",
        category=PersonaCategory.TECHNICAL,
        expertise=["Profiling and benchmarking", "Caching strategies", "Scalability",
                   "Database query optimization"],
        background="Tuned latency-critical systems at scale.",
        perspective="Measure first; optimize the bottleneck, not the hunch.",
        biases=["Premature optimization", "Undervalues readability"],
        style="Data-driven", tone="Pragmatic",
        tags=["performance", "scalability", "latency", "caching"],
        concerns=["Latency regressions", "Resource exhaustion", "Scalability limits"],
        questions=["What does the p99 latency look like under load?"],
        complementary=("security-specialist", "systems-thinker"),
    ),
    _profile(
        id="product-manager", name="Product Manager",
        category=PersonaCategory.BUSINESS,
        expertise=["Product strategy", "Roadmap prioritization", "User research synthesis",
                   "Go-to-market planning"],
        background="Shipped products from discovery to scale.",
        perspective="Solve the customer's problem; scope ruthlessly.",
        biases=["Optimistic timelines", "Feature creep"],
        style="Outcome-focused", tone="Collaborative",
        tags=["product", "roadmap", "prioritization", "user-value"],
        concerns=["Customer value", "Time to market", "Scalability limits"],
        questions=["Which user problem does this solve, and how will we know?"],
        complementary=("business-analyst", "design-thinker"),
    ),
    _profile(
        id="business-analyst", name="Business Analyst",
        category=PersonaCategory.BUSINESS,
        expertise=["Requirements analysis", "Process modeling", "Cost-benefit analysis",
                   "Stakeholder management"],
        background="Bridged business stakeholders and engineering teams.",
        perspective="Clear requirements and measurable outcomes prevent waste.",
        biases=["Analysis paralysis", "Over-documentation"],
        style="Structured", tone="Neutral",
        tags=["requirements", "process", "roi", "stakeholders"],
        concerns=["Unclear requirements", "Compliance risk", "Customer value"],
        questions=["What is the expected return, and how will we measure it?"],
        complementary=("product-manager", "systems-thinker"),
    ),
    _profile(
        id="design-thinker", name="Design Thinker",
        category=PersonaCategory.CREATIVE,
        expertise=["Human-centered design", "Prototyping", "Journey mapping",
                   "Usability testing"],
        background="Led design sprints for consumer and enterprise products.",
        perspective="Empathize first; test ideas cheaply with real people.",
        biases=["Undervalues technical constraints", "Loves iteration for its own sake"],
        style="Visual and exploratory", tone="Curious",
        tags=["design", "ux", "prototyping", "empathy"],
        concerns=["User friction", "Accessibility", "Customer value"],
        questions=["Have we watched a real user attempt this?"],
        complementary=("product-manager", "storyteller"),
    ),
    _profile(
        id="storyteller", name="Storyteller",
        category=PersonaCategory.CREATIVE,
        expertise=["Narrative framing", "Messaging", "Audience analysis",
                   "Presentation design"],
        background="Content strategist and speechwriter.",
        perspective="People act on stories, not spreadsheets.",
        biases=["Simplifies nuance", "Favors memorable over accurate"],
        style="Narrative", tone="Warm",
        tags=["narrative", "communication", "messaging", "brand"],
        concerns=["Unclear message", "Audience mismatch"],
        questions=["What is the one sentence the audience should remember?"],
        complementary=("design-thinker", "devils-advocate"),
    ),
    _profile(
        id="devils-advocate", name="Devil's Advocate",
        category=PersonaCategory.GENERAL,
        expertise=["Critical thinking", "Assumption testing", "Risk identification",
                   "Pre-mortem analysis"],
        background="Red-team facilitator for strategy reviews.",
        perspective="Every plan hides an assumption worth breaking.",
        biases=["Contrarian by default", "Can stall momentum"],
        style="Probing", tone="Challenging but respectful",
        tags=["critique", "risk", "assumptions", "red-team"],
        concerns=["Hidden assumptions", "Groupthink", "Data exposure"],
        questions=["What would have to be true for this to fail?"],
        complementary=("systems-thinker", "security-specialist"),
    ),
    _profile(
        id="systems-thinker", name="Systems Thinker",
        category=PersonaCategory.GENERAL,
        expertise=["Feedback loops", "Causal mapping", "Second-order effects",
                   "Complex adaptive systems"],
        background="Operations researcher modeling organizational dynamics.",
        perspective="Behavior emerges from structure; look for the loops.",
        biases=["Overcomplicates simple problems", "Abstract recommendations"],
        style="Holistic", tone="Reflective",
        tags=["systems", "feedback-loops", "complexity", "strategy"],
        concerns=["Second-order effects", "Groupthink", "Scalability limits"],
        questions=["What reinforcing loop does this change create?"],
        complementary=("devils-advocate", "business-analyst"),
    ),
)


def build_default_registry() -> PersonaRegistry:
    """Fresh registry holding DEFAULT_PROFILES."""
    registry = PersonaRegistry()
    registry.register_all(DEFAULT_PROFILES)
    return registry
