from .engine import SyncEngine
from .scheduler import PollScheduler

__all__ = ["PollScheduler", "SyncEngine"]
