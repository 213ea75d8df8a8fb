"""Page observer over saved HTML, for offline inspection."""

from collections.abc import Mapping

from bs4 import BeautifulSoup, Tag
from loguru import logger

from domain.exceptions import NavigationError, ObservationError, SessionDeadError
from infrastructure.parsers.interfaces import PageElement

_VALUE_TAGS = ("textarea",)


def _attributes(tag: Tag) -> dict[str, str]:
    attributes = {}
    for name, value in tag.attrs.items():
        # Multi-valued attributes such as class come back as lists
        attributes[name] = " ".join(value) if isinstance(value, list) else str(value)
    if tag.name in _VALUE_TAGS and "value" not in attributes:
        attributes["value"] = tag.get_text()
    return attributes


class HtmlSnapshotObserver:
    """
    Observer serving CSS queries from static HTML.

    Navigation switches to another snapshot from ``pages`` when the target
    is known and to an empty page otherwise.
    """

    def __init__(
        self,
        html: str,
        url: str,
        pages: Mapping[str, str] | None = None,
    ):
        self.pages = dict(pages or {})
        self.history: list[str] = []
        self.closed = False
        self._load(url, html)

    def _load(self, url: str, html: str) -> None:
        self.url = url
        self.soup = BeautifulSoup(html, "lxml")

    def current_location(self) -> str:
        if self.closed:
            raise SessionDeadError("Snapshot observer is closed")
        return self.url

    def page_title(self) -> str:
        title = self.soup.title
        return title.get_text(strip=True) if title else ""

    def query(self, selector: str) -> tuple[PageElement, ...]:
        try:
            tags = self.soup.select(selector)
        except Exception as e:
            raise ObservationError(f"Invalid selector '{selector}': {e}") from e

        return tuple(PageElement(text=tag.get_text(), attributes=_attributes(tag)) for tag in tags)

    def navigate(self, location: str) -> None:
        if self.closed:
            raise NavigationError(location, "observer is closed")

        logger.debug(f"Snapshot navigation to {location}")
        self.history.append(location)
        self._load(location, self.pages.get(location, "<html><body></body></html>"))

    def close(self) -> None:
        self.closed = True

    @classmethod
    def from_file(cls, path: str, url: str) -> "HtmlSnapshotObserver":
        with open(path, encoding="utf-8") as f:
            return cls(f.read(), url)
