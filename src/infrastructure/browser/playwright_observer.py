"""Page observer driving a Chromium browser through Playwright."""

from pathlib import Path

from loguru import logger
from playwright.sync_api import BrowserContext, Page, Playwright, sync_playwright
from playwright.sync_api import Error as PlaywrightError

from domain.exceptions import NavigationError, ObservationError, SessionDeadError
from infrastructure.parsers.interfaces import PageElement

# Collects text, attributes and the live form value in a single round trip
_COLLECT_ELEMENTS_JS = """
els => els.map(e => ({
    text: e.innerText ?? e.textContent ?? "",
    attributes: Object.fromEntries(Array.from(e.attributes, a => [a.name, a.value])),
    value: (e.tagName === "TEXTAREA" || e.tagName === "INPUT") ? e.value : null,
}))
"""

BROWSER_ARGS = (
    "--no-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
)
VIEWPORT = {"width": 1920, "height": 1080}


class PlaywrightPageObserver:
    """Observer over a single Playwright page."""

    def __init__(
        self,
        page: Page,
        context: BrowserContext | None = None,
        playwright: Playwright | None = None,
        navigation_timeout_ms: int = 30_000,
    ):
        self.page = page
        self.context = context
        self.playwright = playwright
        self.navigation_timeout_ms = navigation_timeout_ms

    def current_location(self) -> str:
        if self.page.is_closed():
            raise SessionDeadError("Browser page is closed")
        try:
            # Round trip to the renderer; page.url alone is cached client side
            return self.page.evaluate("() => window.location.href")
        except PlaywrightError as e:
            raise SessionDeadError(f"Browser session invalid: {e}") from e

    def page_title(self) -> str:
        try:
            return self.page.title()
        except PlaywrightError as e:
            raise ObservationError(f"Failed to read page title: {e}") from e

    def query(self, selector: str) -> tuple[PageElement, ...]:
        try:
            raw = self.page.locator(selector).evaluate_all(_COLLECT_ELEMENTS_JS)
        except PlaywrightError as e:
            raise ObservationError(f"Selector query failed for '{selector}': {e}") from e

        elements = []
        for item in raw:
            attributes = dict(item.get("attributes") or {})
            if item.get("value") is not None:
                attributes["value"] = item["value"]
            elements.append(PageElement(text=item.get("text") or "", attributes=attributes))
        return tuple(elements)

    def navigate(self, location: str) -> None:
        logger.debug(f"Navigating to {location}")
        try:
            self.page.goto(
                location,
                wait_until="domcontentloaded",
                timeout=self.navigation_timeout_ms,
            )
        except PlaywrightError as e:
            raise NavigationError(location, str(e)) from e

    def close(self) -> None:
        """Close the browser context and stop Playwright; a dead browser is fine."""
        if self.context is not None:
            try:
                self.context.close()
            except PlaywrightError as e:
                logger.debug(f"Ignoring error while closing browser context: {e}")
            self.context = None
        if self.playwright is not None:
            try:
                self.playwright.stop()
            except PlaywrightError as e:
                logger.debug(f"Ignoring error while stopping Playwright: {e}")
            self.playwright = None


class PlaywrightObserverFactory:
    """Launches a persistent Chromium profile and wraps it in an observer."""

    def __init__(
        self,
        profile_dir: str | Path = ".leetsync_profile",
        headless: bool = True,
        navigation_timeout_ms: int = 30_000,
    ):
        self.profile_dir = Path(profile_dir)
        self.headless = headless
        self.navigation_timeout_ms = navigation_timeout_ms

    def __call__(self) -> PlaywrightPageObserver:
        self.profile_dir.mkdir(parents=True, exist_ok=True)

        playwright = sync_playwright().start()
        try:
            context = playwright.chromium.launch_persistent_context(
                user_data_dir=str(self.profile_dir),
                headless=self.headless,
                args=list(BROWSER_ARGS),
                viewport=VIEWPORT,
            )
        except PlaywrightError:
            playwright.stop()
            raise

        page = context.pages[0] if context.pages else context.new_page()
        page.set_default_navigation_timeout(self.navigation_timeout_ms)

        if self.headless:
            logger.info("Browser started in headless mode")
        else:
            logger.info("Running in visible mode - browser window should be visible")

        return PlaywrightPageObserver(
            page,
            context=context,
            playwright=playwright,
            navigation_timeout_ms=self.navigation_timeout_ms,
        )
