"""Thought history tests - bounds, branch eviction, completed-chain cleanup."""

from think_engine.core.thought_history import ThoughtHistory
from think_engine.schemas.trace import Thought

from tests.payloads import thought


def _t(number: int, total: int = 3, **overrides) -> Thought:
    return Thought.model_validate(thought(number, total, **overrides))


def test_main_line_thoughts_are_appended():
    history = ThoughtHistory()
    history.record(_t(1))
    history.record(_t(2))
    assert [t.thought_number for t in history.history] == [1, 2]
    assert history.branches == {}


def test_branch_thoughts_kept_apart():
    history = ThoughtHistory()
    history.record(_t(1))
    history.record(_t(2, branchFromThought=1, branchId="alt"))
    assert len(history.history) == 1
    assert history.branch_ids == ["alt"]


def test_history_limit_evicts_oldest_completed_chain_first():
    history = ThoughtHistory(max_thought_history=3)
    history.record(_t(1, 2))
    history.record(_t(2, 2))  # completes chain 1-2
    history.record(_t(1, 5))
    history.record(_t(2, 5))
    assert [t.total_thoughts for t in history.history] == [5, 5]


def test_history_limit_falls_back_to_fifo():
    history = ThoughtHistory(max_thought_history=2, enable_auto_cleanup=False)
    for number in (1, 2, 3):
        history.record(_t(number, 10))
    assert [t.thought_number for t in history.history] == [2, 3]


def test_oldest_branch_evicted_past_max_branches():
    history = ThoughtHistory(max_branches=2)
    for branch in ("a", "b", "c"):
        history.record(_t(2, branchFromThought=1, branchId=branch))
    assert history.branch_ids == ["b", "c"]


def test_branch_trimmed_to_max_thoughts():
    history = ThoughtHistory(max_thoughts_per_branch=2)
    for number in (2, 3, 4):
        history.record(_t(number, 5, branchFromThought=1, branchId="a"))
    assert [t.thought_number for t in history.branches["a"]] == [3, 4]


def test_has_thought_checks_main_line_and_branch():
    history = ThoughtHistory()
    history.record(_t(1))
    history.record(_t(2, branchFromThought=1, branchId="a"))
    assert history.has_thought(1)
    assert not history.has_thought(2)
    assert history.has_thought(2, "a")
