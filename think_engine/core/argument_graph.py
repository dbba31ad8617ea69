"""Argument Graph - accumulated debate nodes grouped into threads.

Invariants:
    - nodes maps argument id -> validated Argument; ids are unique
    - Every node belongs to exactly one thread, keyed by its root id
    - A node's root is the root of the node it respondsTo; an unknown
      respondsTo target becomes the root itself
    - closed_threads holds roots whose latest argument set nextArgumentNeeded=False

Design Decisions:
    - Mutated only by DebateHandlers after every check passed (atomic update-or-reject)
    - Resubmitting an existing id replaces the node and re-threads it
"""

from dataclasses import dataclass, field

from think_engine.schemas.debate import Argument


@dataclass
class ArgumentGraph:
    """Directed graph of arguments with respondsTo/supports/contradicts edges."""

    nodes: dict[str, Argument] = field(default_factory=dict)
    threads: dict[str, list[str]] = field(default_factory=dict)
    argument_to_root: dict[str, str] = field(default_factory=dict)
    closed_threads: set[str] = field(default_factory=set)

    def __contains__(self, argument_id: str) -> bool:
        return argument_id in self.nodes

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    def root_for(self, argument_id: str, responds_to: str | None) -> str:
        """Root id the argument would join, without mutating the graph."""
        if not responds_to:
            return argument_id
        return self.argument_to_root.get(responds_to, responds_to)

    def unresolved_references(self, argument_id: str, argument: Argument) -> list[str]:
        """Referenced ids not yet present in the graph (soft, reported only)."""
        referenced = []
        if argument.responds_to:
            referenced.append(argument.responds_to)
        referenced.extend(argument.supports)
        referenced.extend(argument.contradicts)
        missing = []
        for ref in referenced:
            if ref != argument_id and ref not in self.nodes and ref not in missing:
                missing.append(ref)
        return missing

    def add(self, argument_id: str, argument: Argument) -> str:
        """Insert or replace a node. Returns the thread root it landed in."""
        if argument_id in self.nodes:
            self._detach(argument_id)
        root = self.root_for(argument_id, argument.responds_to)
        self.nodes[argument_id] = argument
        self.argument_to_root[argument_id] = root
        self.threads.setdefault(root, []).append(argument_id)
        if argument.next_argument_needed:
            self.closed_threads.discard(root)
        else:
            self.closed_threads.add(root)
        return root

    def thread(self, root: str) -> list[Argument]:
        return [self.nodes[i] for i in self.threads.get(root, []) if i in self.nodes]

    def _detach(self, argument_id: str) -> None:
        old_root = self.argument_to_root.get(argument_id)
        members = self.threads.get(old_root, [])
        if argument_id in members:
            members.remove(argument_id)
        if old_root is not None and not members:
            self.threads.pop(old_root, None)
            self.closed_threads.discard(old_root)
