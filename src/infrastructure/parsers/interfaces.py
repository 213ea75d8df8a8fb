"""Protocol interfaces for page observation and repository sync."""

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Protocol

from domain.models import Submission


@dataclass(frozen=True)
class PageElement:
    """Visible text and attributes of one matched element."""

    text: str = ""
    attributes: Mapping[str, str] = field(default_factory=dict)

    def attr(self, name: str, default: str = "") -> str:
        value = self.attributes.get(name)
        return default if value is None else value


class PageObserverProtocol(Protocol):
    """Protocol for reading and steering the observed page."""

    def current_location(self) -> str:
        """Return the current URL; raise SessionDeadError for a dead session."""
        ...

    def page_title(self) -> str:
        """Return the page title."""
        ...

    def query(self, selector: str) -> Sequence[PageElement]:
        """Return elements matching a CSS selector in document order."""
        ...

    def navigate(self, location: str) -> None:
        """Navigate to location; raise NavigationError on failure."""
        ...

    def close(self) -> None:
        """Release the underlying browser resources."""
        ...


PageObserverFactory = Callable[[], PageObserverProtocol]


class RepositorySyncProtocol(Protocol):
    """Protocol for pushing an accepted submission to a repository."""

    def sync(self, submission: Submission) -> bool:
        """Create or update the solution file; return True on success."""
        ...


class URLParserProtocol(Protocol):
    """Protocol for classifying site URLs."""

    @classmethod
    def problem_slug(cls, url: str) -> str | None:
        """Extract the problem slug from a URL."""
        ...

    @classmethod
    def is_problem_page(cls, url: str) -> bool:
        """Whether the URL is a problem description/editor page."""
        ...

    @classmethod
    def is_submission_page(cls, url: str) -> bool:
        """Whether the URL shows a submission result."""
        ...

    @classmethod
    def build_problem_url(cls, slug: str, base_url: str) -> str:
        """Build the canonical problem URL."""
        ...
