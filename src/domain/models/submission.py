"""Submission captured from the problem editor."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class SubmissionStatus(str, Enum):
    """Lifecycle status of a tracked submission."""

    PENDING = "pending"
    ACCEPTED = "accepted"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def normalize_code(code: str | None) -> str:
    """Normalize line endings to ``\\n`` and strip surrounding whitespace."""
    if not code:
        return ""
    return code.replace("\r\n", "\n").replace("\r", "\n").strip()


@dataclass
class Submission:
    """A solution tracked for a single problem."""

    problem_id: str
    language: str
    code: str
    status: SubmissionStatus = SubmissionStatus.PENDING
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        self.code = normalize_code(self.code)

    def update_code(self, code: str, now: datetime | None = None) -> None:
        """Overwrite the stored code, keeping identity and creation time."""
        self.code = normalize_code(code)
        self.updated_at = now or _utcnow()

    def accept(self) -> None:
        self.status = SubmissionStatus.ACCEPTED

    def reopen(self) -> None:
        """Return an accepted submission that failed to sync to the pending state."""
        self.status = SubmissionStatus.PENDING

    @property
    def is_accepted(self) -> bool:
        return self.status is SubmissionStatus.ACCEPTED

    def __str__(self) -> str:
        return f"{self.problem_id} [{self.language}, {self.status.value}]"
