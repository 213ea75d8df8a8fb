"""Domain models package."""

from .submission import Submission, SubmissionStatus, normalize_code
from .sync import SyncAction, SyncResult
from .tracker_state import TrackerSnapshot, TrackerState

__all__ = [
    "Submission",
    "SubmissionStatus",
    "normalize_code",
    "SyncAction",
    "SyncResult",
    "TrackerSnapshot",
    "TrackerState",
]
