"""Exceptions raised across the capture and synchronization layers."""


class LeetSyncError(Exception):
    """Base error for leetsync."""

    pass


class ConfigurationError(LeetSyncError):
    """Settings are missing or invalid."""

    pass


class ObservationError(LeetSyncError):
    """Reading state from the page failed."""

    pass


class SessionDeadError(ObservationError):
    """The browser session no longer answers liveness probes."""

    pass


class NavigationError(LeetSyncError):
    """Navigating the observed page to a new location failed."""

    def __init__(self, location: str, reason: str | None = None):
        self.location = location
        self.reason = reason
        message = f"Failed to navigate to {location}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class SyncError(LeetSyncError):
    """The remote repository rejected or failed a file write."""

    def __init__(self, path: str, status_code: int | None = None, body: str = ""):
        self.path = path
        self.status_code = status_code
        self.body = body
        super().__init__(f"Failed to sync {path} (status={status_code}): {body}")
