# tests/url_parser_test.py
import pytest
from infrastructure.parsers import URLParser

BASE_URL = "https://leetcode.com"


@pytest.mark.parametrize(
    "url, expected_slug",
    [
        ("https://leetcode.com/problems/two-sum/", "two-sum"),
        ("https://leetcode.com/problems/two-sum/description/", "two-sum"),
        ("https://leetcode.com/problems/lru-cache/submissions/1234567/", "lru-cache"),
        ("https://leetcode.cn/problems/3sum?envType=study-plan", "3sum"),
    ],
)
def test_problem_slug_from_valid_urls(url, expected_slug) -> None:
    assert URLParser.problem_slug(url) == expected_slug


@pytest.mark.parametrize(
    "url",
    [
        "https://leetcode.com/",
        "https://leetcode.com/submissions/detail/1234567/",
        "https://leetcode.com/problemset/all/",
        "",
    ],
)
def test_problem_slug_unresolved(url) -> None:
    assert URLParser.problem_slug(url) is None


def test_page_classification() -> None:
    problem = "https://leetcode.com/problems/two-sum/description/"
    result = "https://leetcode.com/problems/two-sum/submissions/1234567/"

    assert URLParser.is_problem_page(problem)
    assert not URLParser.is_submission_page(problem)
    assert URLParser.is_submission_page(result)
    assert not URLParser.is_problem_page(result)
    assert URLParser.is_submission_page("https://leetcode.com/submissions/detail/42/")


def test_is_on_site() -> None:
    assert URLParser.is_on_site("https://leetcode.com/problemset/", BASE_URL)
    assert URLParser.is_on_site("https://assets.leetcode.com/x.png", BASE_URL)
    assert not URLParser.is_on_site("https://github.com/", BASE_URL)
    assert not URLParser.is_on_site("about:blank", BASE_URL)


def test_slug_from_title() -> None:
    assert URLParser.slug_from_title("Two Sum - LeetCode") == "two-sum"
    assert URLParser.slug_from_title("1. Two Sum - LeetCode") == "two-sum"
    assert URLParser.slug_from_title("Pow(x, n) - LeetCode") == "pow-x-n"
    assert URLParser.slug_from_title("Problem List") is None


def test_build_problem_url() -> None:
    url = URLParser.build_problem_url("two-sum", "https://leetcode.com/")
    assert url == "https://leetcode.com/problems/two-sum/"
