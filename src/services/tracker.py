"""Per-problem submission state machine."""

from collections.abc import Callable
from datetime import datetime, timezone

from loguru import logger

from domain.models import (
    Submission,
    TrackerSnapshot,
    TrackerState,
    normalize_code,
)
from infrastructure.parsers import (
    CodeExtractor,
    LanguageDetector,
    PageObserverProtocol,
    RepositorySyncProtocol,
    URLParser,
)

ACCEPTED_LABEL = "Accepted"
STATUS_SELECTOR = 'div[class*="status"]'
RESULT_SELECTOR = "span"


def accepted_indicator_present(page: PageObserverProtocol, *, on_submission_page: bool) -> bool:
    """
    Whether the page shows an "Accepted" verdict.

    Problem pages carry it as the exact text of a status block; result pages
    as part of a span.
    """
    selector = RESULT_SELECTOR if on_submission_page else STATUS_SELECTOR
    try:
        elements = page.query(selector)
    except Exception as e:
        logger.debug(f"Status query '{selector}' failed: {e}")
        return False

    for element in elements:
        text = element.text.strip()
        if on_submission_page and ACCEPTED_LABEL in text:
            return True
        if text == ACCEPTED_LABEL:
            return True
    return False


class SubmissionTracker:
    """
    Decides, from polled page state, when to create, update or finalize drafts.

    Problems move Unseen -> Pending -> Accepted -> Synced. A problem that has
    been synced once in this run is never synced again. Not thread safe: the
    caller runs one tick at a time.
    """

    def __init__(
        self,
        *,
        sync_client: RepositorySyncProtocol,
        base_url: str,
        code_extractor: CodeExtractor | None = None,
        language_detector: LanguageDetector | None = None,
        url_parser: type[URLParser] = URLParser,
        state: TrackerState | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        """Initialize tracker with dependencies."""
        self.sync_client = sync_client
        self.base_url = base_url
        self.code_extractor = code_extractor or CodeExtractor()
        self.language_detector = language_detector or LanguageDetector()
        self.url_parser = url_parser
        self.state = state or TrackerState()
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    def resolve(self, page: PageObserverProtocol) -> str | None:
        """Set and return the current problem from the page, or None if unresolved."""
        location = page.current_location()
        problem_id = self.url_parser.problem_slug(location)

        if problem_id is None and self.url_parser.is_problem_page(location):
            try:
                problem_id = self.url_parser.slug_from_title(page.page_title())
            except Exception as e:
                logger.debug(f"Could not read page title: {e}")

        if problem_id != self.state.current_problem:
            logger.info(f"Detected problem: {problem_id or 'unresolved'}")
        self.state.current_problem = problem_id
        return problem_id

    def observe_problem_page(self, page: PageObserverProtocol) -> None:
        """Handle one tick on a problem page: track the draft, then look for acceptance."""
        problem_id = self.resolve(page)
        if problem_id is None:
            return

        if self.state.is_processed(problem_id):
            logger.debug(f"Already processed submission for: {problem_id}, skipping")
            return

        self.observe_editor(page)

        if accepted_indicator_present(page, on_submission_page=False):
            logger.info(f"Found accepted status on problem page for: {problem_id}")
            self.accept(page)

    def observe_submission_page(self, page: PageObserverProtocol) -> None:
        """Handle one tick on a submission result page, then return to the problem."""
        problem_id = self.resolve(page)
        if problem_id is None:
            logger.debug("Submission page without a problem slug, waiting")
            return

        if not self.state.is_processed(problem_id):
            if accepted_indicator_present(page, on_submission_page=True):
                logger.info(f"Found accepted submission on submissions page for: {problem_id}")
                self.accept(page)
        else:
            logger.debug(f"Already processed submission for: {problem_id}, skipping")

        problem_url = self.url_parser.build_problem_url(problem_id, self.base_url)
        logger.info(f"Redirecting from submissions page to main problem page: {problem_url}")
        page.navigate(problem_url)

    def observe_editor(self, page: PageObserverProtocol) -> Submission | None:
        """Create or refresh the pending draft from non-empty editor content."""
        problem_id = self.state.current_problem
        if problem_id is None or self.state.is_processed(problem_id):
            return None

        code = normalize_code(self.code_extractor.extract(page))
        draft = self.state.draft_for(problem_id)
        if not code:
            return draft

        if draft is not None:
            draft.update_code(code, now=self.clock())
            logger.debug(f"Updated pending submission code for: {problem_id}")
            return draft

        now = self.clock()
        draft = Submission(
            problem_id=problem_id,
            language=self.language_detector.detect(page),
            code=code,
            created_at=now,
            updated_at=now,
        )
        self.state.pending[problem_id] = draft
        logger.info(f"Created pending submission for: {draft}")
        return draft

    def accept(self, page: PageObserverProtocol) -> bool:
        """
        Promote the current problem to accepted and sync it.

        Reuses the pending draft when there is one, otherwise builds a fresh
        submission from the editor. Returns True only after a successful sync.
        """
        problem_id = self.state.current_problem
        if problem_id is None:
            logger.warning("Cannot handle accepted submission: no valid problem name")
            return False

        if self.state.is_processed(problem_id):
            logger.debug(f"Submission for {problem_id} already synced, ignoring acceptance")
            return False

        submission = self.state.draft_for(problem_id)
        if submission is not None:
            logger.info(f"Processing existing pending submission for: {problem_id}")
        else:
            code = normalize_code(self.code_extractor.extract(page))
            if not code:
                logger.warning(f"No code found in editor for accepted submission: {problem_id}")
                return False

            now = self.clock()
            submission = Submission(
                problem_id=problem_id,
                language=self.language_detector.detect(page),
                code=code,
                created_at=now,
                updated_at=now,
            )
            logger.info(f"Created new submission from editor for: {problem_id}")

        submission.accept()
        return self._sync(submission)

    def _sync(self, submission: Submission) -> bool:
        logger.info(f"About to upload submission to GitHub: {submission.problem_id}")

        if not self.sync_client.sync(submission):
            logger.error(f"Failed to upload submission for: {submission.problem_id}")
            submission.reopen()
            self.state.pending[submission.problem_id] = submission
            return False

        self.state.mark_synced(submission.problem_id)
        logger.info(f"Successfully processed and uploaded submission for: {submission.problem_id}")
        return True

    def snapshot(self) -> TrackerSnapshot:
        return TrackerSnapshot.of(self.state)
