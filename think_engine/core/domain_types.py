"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - SessionId, DecisionId, DiagramId, MonitoringId, InquiryId wrap caller-supplied strings
    - All valid states encoded as Enums: no raw string matching in core logic
    - Stage enums declare members in their forward order; STAGE_ORDER mirrors it

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders (ADR: tool results are JSON)
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

SessionId = NewType("SessionId", str)
DecisionId = NewType("DecisionId", str)
DiagramId = NewType("DiagramId", str)
MonitoringId = NewType("MonitoringId", str)
InquiryId = NewType("InquiryId", str)
ArgumentId = NewType("ArgumentId", str)


# ─── Tools ───────────────────────────────────────────────────────

class ToolName(str, Enum):
    """The eleven fixed tool names exposed to callers."""
    TRACE = "trace"
    MODEL = "model"
    PATTERN = "pattern"
    PARADIGM = "paradigm"
    DEBUG = "debug"
    COUNCIL = "council"
    DECIDE = "decide"
    REFLECT = "reflect"
    HYPOTHESIS = "hypothesis"
    DEBATE = "debate"
    MAP = "map"


# ─── Debate ──────────────────────────────────────────────────────

class ArgumentType(str, Enum):
    THESIS = "thesis"
    ANTITHESIS = "antithesis"
    SYNTHESIS = "synthesis"
    OBJECTION = "objection"
    REBUTTAL = "rebuttal"


# ─── Council ─────────────────────────────────────────────────────

class ContributionType(str, Enum):
    OBSERVATION = "observation"
    QUESTION = "question"
    INSIGHT = "insight"
    CONCERN = "concern"
    SUGGESTION = "suggestion"
    CHALLENGE = "challenge"
    SYNTHESIS = "synthesis"


class CouncilStage(str, Enum):
    """Deliberation stages, forward-only."""
    PROBLEM_DEFINITION = "problem-definition"
    IDEATION = "ideation"
    CRITIQUE = "critique"
    INTEGRATION = "integration"
    DECISION = "decision"
    REFLECTION = "reflection"


class PersonaCategory(str, Enum):
    TECHNICAL = "technical"
    BUSINESS = "business"
    CREATIVE = "creative"
    GENERAL = "general"


# ─── Decide ──────────────────────────────────────────────────────

class DecisionStage(str, Enum):
    """Decision frame stages, forward-only."""
    PROBLEM_DEFINITION = "problem-definition"
    OPTIONS_GENERATION = "options-generation"
    CRITERIA_DEFINITION = "criteria-definition"
    EVALUATION = "evaluation"
    SENSITIVITY_ANALYSIS = "sensitivity-analysis"
    DECISION = "decision"


class AnalysisType(str, Enum):
    PROS_CONS = "pros-cons"
    WEIGHTED_CRITERIA = "weighted-criteria"
    DECISION_TREE = "decision-tree"
    EXPECTED_VALUE = "expected-value"
    SCENARIO_ANALYSIS = "scenario-analysis"
    EISENHOWER_MATRIX = "eisenhower-matrix"
    COST_BENEFIT = "cost-benefit"
    RISK_ASSESSMENT = "risk-assessment"
    REVERSIBILITY = "reversibility"
    REGRET_MINIMIZATION = "regret-minimization"


class EisenhowerQuadrant(str, Enum):
    DO_FIRST = "do-first"
    SCHEDULE = "schedule"
    DELEGATE = "delegate"
    ELIMINATE = "eliminate"


class CostBenefitType(str, Enum):
    MONETARY = "monetary"
    NON_MONETARY = "non-monetary"


class DoorType(str, Enum):
    ONE_WAY = "one-way"
    TWO_WAY = "two-way"


class RiskTolerance(str, Enum):
    RISK_AVERSE = "risk-averse"
    RISK_NEUTRAL = "risk-neutral"
    RISK_SEEKING = "risk-seeking"


# ─── Map ─────────────────────────────────────────────────────────

class ElementType(str, Enum):
    NODE = "node"
    EDGE = "edge"
    CONTAINER = "container"
    ANNOTATION = "annotation"


class DiagramOperationType(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    TRANSFORM = "transform"
    OBSERVE = "observe"


class TransformationType(str, Enum):
    ROTATE = "rotate"
    MOVE = "move"
    RESIZE = "resize"
    RECOLOR = "recolor"
    REGROUP = "regroup"


class DiagramType(str, Enum):
    GRAPH = "graph"
    FLOWCHART = "flowchart"
    STATE_DIAGRAM = "stateDiagram"
    CONCEPT_MAP = "conceptMap"
    TREE_DIAGRAM = "treeDiagram"
    CUSTOM = "custom"


# ─── Reflect ─────────────────────────────────────────────────────

class MonitoringStage(str, Enum):
    KNOWLEDGE_ASSESSMENT = "knowledge-assessment"
    PLANNING = "planning"
    EXECUTION = "execution"
    MONITORING = "monitoring"
    EVALUATION = "evaluation"
    REFLECTION = "reflection"


class KnowledgeLevel(str, Enum):
    EXPERT = "expert"
    PROFICIENT = "proficient"
    FAMILIAR = "familiar"
    BASIC = "basic"
    MINIMAL = "minimal"
    NONE = "none"


class ClaimStatus(str, Enum):
    FACT = "fact"
    INFERENCE = "inference"
    SPECULATION = "speculation"
    UNCERTAIN = "uncertain"


class AssessmentType(str, Enum):
    KNOWLEDGE = "knowledge"
    CLAIM = "claim"
    REASONING = "reasoning"
    OVERALL = "overall"


class ConfidenceTrend(str, Enum):
    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


# ─── Hypothesis ──────────────────────────────────────────────────

class InquiryStage(str, Enum):
    OBSERVATION = "observation"
    QUESTION = "question"
    HYPOTHESIS = "hypothesis"
    EXPERIMENT = "experiment"
    ANALYSIS = "analysis"
    CONCLUSION = "conclusion"
    ITERATION = "iteration"


class HypothesisStatus(str, Enum):
    PROPOSED = "proposed"
    TESTING = "testing"
    SUPPORTED = "supported"
    REFUTED = "refuted"
    REFINED = "refined"


class VariableType(str, Enum):
    INDEPENDENT = "independent"
    DEPENDENT = "dependent"
    CONTROLLED = "controlled"
    CONFOUNDING = "confounding"


# ─── Framework tools (stateless) ─────────────────────────────────

class MentalModelName(str, Enum):
    FIRST_PRINCIPLES = "first_principles"
    OPPORTUNITY_COST = "opportunity_cost"
    ERROR_PROPAGATION = "error_propagation"
    RUBBER_DUCK = "rubber_duck"
    PARETO_PRINCIPLE = "pareto_principle"
    OCCAMS_RAZOR = "occams_razor"


class DesignPatternName(str, Enum):
    MODULAR_ARCHITECTURE = "modular_architecture"
    API_INTEGRATION = "api_integration"
    STATE_MANAGEMENT = "state_management"
    ASYNC_PROCESSING = "async_processing"
    SCALABILITY = "scalability"
    SECURITY = "security"
    AGENTIC_DESIGN = "agentic_design"


class ParadigmName(str, Enum):
    IMPERATIVE = "imperative"
    PROCEDURAL = "procedural"
    OBJECT_ORIENTED = "object_oriented"
    FUNCTIONAL = "functional"
    DECLARATIVE = "declarative"
    LOGIC = "logic"
    EVENT_DRIVEN = "event_driven"
    ASPECT_ORIENTED = "aspect_oriented"
    CONCURRENT = "concurrent"
    REACTIVE = "reactive"


class DebuggingApproachName(str, Enum):
    BINARY_SEARCH = "binary_search"
    REVERSE_ENGINEERING = "reverse_engineering"
    DIVIDE_CONQUER = "divide_conquer"
    BACKTRACKING = "backtracking"
    CAUSE_ELIMINATION = "cause_elimination"
    PROGRAM_SLICING = "program_slicing"
    WOLF_FENCE = "wolf_fence"
    RUBBER_DUCK = "rubber_duck"
    DELTA_DEBUGGING = "delta_debugging"
    FAULT_TREE = "fault_tree"
    TIME_TRAVEL = "time_travel"


# ─── Stage order ─────────────────────────────────────────────────

COUNCIL_STAGE_ORDER: tuple[CouncilStage, ...] = tuple(CouncilStage)
DECISION_STAGE_ORDER: tuple[DecisionStage, ...] = tuple(DecisionStage)

# Eisenhower ratings are integers in [1, 5]; >= threshold counts as "high"
EISENHOWER_MIN_RATING = 1
EISENHOWER_MAX_RATING = 5
EISENHOWER_HIGH_THRESHOLD = 3

# Confidence trend band for reflect progression
CONFIDENCE_TREND_BAND = 0.05

# Criterion weights are advisory-checked against this sum
WEIGHT_SUM_TARGET = 1.0
WEIGHT_SUM_TOLERANCE = 1e-6
