"""Thought History - bounded in-memory record of trace thoughts and branches.

Invariants:
    - Main-line thoughts live in history; thoughts with a branch_id live in branches[branch_id]
    - len(history) <= max_thought_history after every record()
    - len(branches) <= max_branches; each branch holds <= max_thoughts_per_branch
    - Eviction prefers the oldest completed chain (a run ending at next_thought_needed=False)
      when auto cleanup is on; otherwise plain FIFO

Design Decisions:
    - Pure dataclass, no IO: TraceHandlers owns one instance per engine
    - Branch order is dict insertion order: the oldest branch is evicted first
    - Stores validated Thought models, never raw dicts
"""

from dataclasses import dataclass, field

from think_engine.schemas.trace import Thought


@dataclass
class ThoughtHistory:
    """Bounded thought store for the trace tool."""

    max_thought_history: int = 1000
    max_branches: int = 50
    max_thoughts_per_branch: int = 200
    enable_auto_cleanup: bool = True
    cleanup_on_complete: bool = True

    history: list[Thought] = field(default_factory=list)
    branches: dict[str, list[Thought]] = field(default_factory=dict)

    @property
    def branch_ids(self) -> list[str]:
        return list(self.branches)

    @property
    def evicts_completed_chains_first(self) -> bool:
        return self.enable_auto_cleanup and self.cleanup_on_complete

    def record(self, thought: Thought) -> None:
        """Store a thought, then enforce every bound."""
        if thought.branch_id:
            self._record_branch_thought(thought)
        else:
            self.history.append(thought)
            self._enforce_history_limit()

    def has_thought(self, thought_number: int, branch_id: str | None = None) -> bool:
        """True when thought_number is stored on the main line or in branch_id."""
        if any(t.thought_number == thought_number for t in self.history):
            return True
        if branch_id and branch_id in self.branches:
            return any(
                t.thought_number == thought_number for t in self.branches[branch_id]
            )
        return False

    def _record_branch_thought(self, thought: Thought) -> None:
        branch_id = thought.branch_id
        if branch_id not in self.branches:
            self.branches[branch_id] = []
            while len(self.branches) > self.max_branches:
                oldest = next(iter(self.branches))
                del self.branches[oldest]
        thoughts = self.branches[branch_id]
        thoughts.append(thought)
        if len(thoughts) > self.max_thoughts_per_branch:
            del thoughts[: len(thoughts) - self.max_thoughts_per_branch]

    def _enforce_history_limit(self) -> None:
        while len(self.history) > self.max_thought_history:
            chain = (
                self._oldest_completed_chain()
                if self.evicts_completed_chains_first else None
            )
            if chain:
                start, end = chain
                del self.history[start:end + 1]
            else:
                self.history.pop(0)

    def _oldest_completed_chain(self) -> tuple[int, int] | None:
        """(start, end) indices of the first chain ending in a completed thought."""
        start = 0
        for index, thought in enumerate(self.history):
            if thought.next_thought_needed is False:
                return start, index
        return None
