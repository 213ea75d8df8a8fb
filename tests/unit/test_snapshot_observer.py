"""Unit tests for the HTML snapshot observer."""

import pytest

from domain.exceptions import ObservationError, SessionDeadError
from infrastructure.browser import HtmlSnapshotObserver
from tests.pages import PROBLEM_URL, SUBMISSION_URL, build_page


def test_query_returns_text_and_attributes():
    page = HtmlSnapshotObserver(build_page(monaco="x"), PROBLEM_URL)

    (editor,) = page.query("div.monaco-editor")
    (textarea,) = page.query("div.monaco-editor textarea")

    assert editor.attr("class") == "monaco-editor vs"
    assert textarea.attr("value") == "x"
    assert page.query("div.missing") == ()


def test_title_and_location():
    page = HtmlSnapshotObserver(build_page(), PROBLEM_URL)

    assert page.page_title() == "Two Sum - LeetCode"
    assert page.current_location() == PROBLEM_URL


def test_navigation_switches_snapshot():
    page = HtmlSnapshotObserver(
        build_page(result_span="Accepted"),
        SUBMISSION_URL,
        pages={PROBLEM_URL: build_page(monaco="code")},
    )

    page.navigate(PROBLEM_URL)

    assert page.current_location() == PROBLEM_URL
    assert page.history == [PROBLEM_URL]
    assert page.query("span") == ()
    assert page.query("textarea")[0].attr("value") == "code"


def test_invalid_selector_raises_observation_error():
    page = HtmlSnapshotObserver(build_page(), PROBLEM_URL)

    with pytest.raises(ObservationError):
        page.query("div[")


def test_closed_observer_reports_dead_session():
    page = HtmlSnapshotObserver(build_page(), PROBLEM_URL)
    page.close()

    with pytest.raises(SessionDeadError):
        page.current_location()
