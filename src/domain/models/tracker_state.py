"""In-memory state owned by the submission tracker."""

from dataclasses import dataclass, field

from .submission import Submission


@dataclass
class TrackerState:
    """
    Pending drafts and already synchronized problems for one engine run.

    Mutated only from the engine tick; callers must not run ticks
    concurrently.
    """

    pending: dict[str, Submission] = field(default_factory=dict)
    processed: set[str] = field(default_factory=set)
    current_problem: str | None = None

    def draft_for(self, problem_id: str) -> Submission | None:
        return self.pending.get(problem_id)

    def is_processed(self, problem_id: str) -> bool:
        return problem_id in self.processed

    def mark_synced(self, problem_id: str) -> None:
        """Drop the draft and remember the problem as synchronized."""
        self.pending.pop(problem_id, None)
        self.processed.add(problem_id)


@dataclass(frozen=True)
class TrackerSnapshot:
    """Read-only view of the tracker state for logging."""

    current_problem: str | None
    pending: tuple[str, ...]
    processed: tuple[str, ...]

    @classmethod
    def of(cls, state: TrackerState) -> "TrackerSnapshot":
        return cls(
            current_problem=state.current_problem,
            pending=tuple(sorted(state.pending)),
            processed=tuple(sorted(state.processed)),
        )

    def __str__(self) -> str:
        current = self.current_problem or "-"
        return (
            f"current={current} pending={len(self.pending)} "
            f"processed={len(self.processed)}"
        )
