from .github_client import GitHubRepositoryClient
from .settings import Settings, load_settings

__all__ = [
    "GitHubRepositoryClient",
    "Settings",
    "load_settings",
]
