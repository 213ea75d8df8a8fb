from typing import TYPE_CHECKING

from services.tracker import SubmissionTracker

if TYPE_CHECKING:
    from application.engine import SyncEngine
    from infrastructure.github_client import GitHubRepositoryClient
    from infrastructure.settings import Settings


def create_sync_client(settings: "Settings") -> "GitHubRepositoryClient":
    """Factory function to create the GitHub client from settings."""
    from domain.languages import DEFAULT_EXTENSIONS
    from infrastructure.github_client import GitHubRepositoryClient

    return GitHubRepositoryClient(
        owner=settings.repo_owner,
        repo=settings.repo_name,
        token=settings.github_token,
        timeout=settings.http_timeout,
        extensions={**DEFAULT_EXTENSIONS, **settings.extra_extensions},
    )


def create_engine(
    settings: "Settings",
    sync_client: "GitHubRepositoryClient | None" = None,
) -> "SyncEngine":
    """Factory function to create the sync engine with all dependencies."""
    from application.engine import SyncEngine
    from infrastructure.browser import PlaywrightObserverFactory

    # Create infrastructure dependencies
    sync_client = sync_client or create_sync_client(settings)
    observer_factory = PlaywrightObserverFactory(
        profile_dir=settings.profile_dir,
        headless=settings.headless,
    )

    tracker = SubmissionTracker(sync_client=sync_client, base_url=settings.base_url)

    return SyncEngine(observer_factory, tracker, base_url=settings.base_url)


__all__ = ["SubmissionTracker", "create_engine", "create_sync_client"]
