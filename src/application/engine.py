"""Engine that turns one poll of the browser into tracker transitions."""

from loguru import logger

from domain.exceptions import NavigationError, SessionDeadError
from infrastructure.parsers import PageObserverFactory, PageObserverProtocol, URLParser
from services.tracker import SubmissionTracker


class SyncEngine:
    """
    Single entry point invoked by the scheduler on every poll.

    The engine owns the page observer and re-creates it through the factory
    when the browser session dies; the tracker and its state survive.
    ``tick`` is not re-entrant and must not run concurrently with itself.
    """

    def __init__(
        self,
        observer_factory: PageObserverFactory,
        tracker: SubmissionTracker,
        *,
        base_url: str,
        url_parser: type[URLParser] = URLParser,
    ):
        """
        Initialize engine with dependency injection.

        Args:
            observer_factory: Builds a fresh page observer (launches the browser)
            tracker: Submission tracker holding the per-run state
            base_url: Site root the browser is sent to when it wanders off
            url_parser: URL classifier
        """
        self.observer_factory = observer_factory
        self.tracker = tracker
        self.base_url = base_url
        self.url_parser = url_parser
        self.observer: PageObserverProtocol | None = None

    def tick(self) -> None:
        """Run one poll. Never raises; every failure is local to the tick."""
        try:
            if self.observer is None:
                self._start_observer()

            if not self._session_alive():
                logger.warning("Browser session invalid, reinitializing driver")
                self._restart_observer()
                return

            self._route(self.observer)

        except NavigationError as e:
            logger.error(f"Navigation failed, will retry next tick: {e}")
        except SessionDeadError as e:
            logger.warning(f"Detected session error, will reinitialize on next check: {e}")
            self._drop_observer()
        except Exception:
            logger.opt(exception=True).error("Error checking for submissions")

    def _route(self, page: PageObserverProtocol) -> None:
        location = page.current_location()

        if self.url_parser.is_problem_page(location):
            self.tracker.observe_problem_page(page)
        elif self.url_parser.is_submission_page(location):
            self.tracker.observe_submission_page(page)
        elif not self.url_parser.is_on_site(location, self.base_url):
            page.navigate(self.base_url)
            logger.info(f"Navigated to {self.base_url}")
        else:
            logger.debug(f"Idle page: {location}")

    def _session_alive(self) -> bool:
        try:
            self.observer.current_location()
            return True
        except Exception as e:
            logger.debug(f"Liveness probe failed: {e}")
            return False

    def _start_observer(self) -> None:
        self.observer = self.observer_factory()
        logger.info("Page observer initialized")
        self.observer.navigate(self.base_url)
        logger.info(f"Navigated to {self.base_url}")

    def _restart_observer(self) -> None:
        self._drop_observer()
        self._start_observer()

    def _drop_observer(self) -> None:
        if self.observer is None:
            return
        try:
            self.observer.close()
        except Exception as e:
            logger.debug(f"Error closing page observer: {e}")
        self.observer = None

    def close(self) -> None:
        """Release the browser; tracker state is discarded with the engine."""
        self._drop_observer()
        logger.info(f"Engine stopped ({self.tracker.snapshot()})")
