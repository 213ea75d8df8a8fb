"""Value objects describing repository synchronization."""

from dataclasses import dataclass
from typing import Literal

SyncAction = Literal["create", "update"]


@dataclass(frozen=True)
class SyncResult:
    """Outcome of a single create-or-update call."""

    success: bool
    path: str
    action: SyncAction
    html_url: str | None = None
    status_code: int | None = None
    error: str | None = None

    def __bool__(self) -> bool:
        return self.success
