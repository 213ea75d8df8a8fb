"""Page observers backed by a live browser or a saved HTML snapshot."""

from .playwright_observer import PlaywrightObserverFactory, PlaywrightPageObserver
from .snapshot_observer import HtmlSnapshotObserver

__all__ = [
    "HtmlSnapshotObserver",
    "PlaywrightObserverFactory",
    "PlaywrightPageObserver",
]
