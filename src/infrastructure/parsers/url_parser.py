"""Parser for LeetCode page URLs."""

import re
from urllib.parse import urlparse

from loguru import logger

from .interfaces import URLParserProtocol


class URLParser(URLParserProtocol):
    """Classifier for the LeetCode URL formats the engine cares about."""

    # Matches /problems/two-sum, /problems/two-sum/description/, ...
    PROBLEM_PATTERN = r"/problems/([^/?#]+)"
    SUBMISSIONS_SEGMENT = "/submissions/"
    TITLE_SUFFIX_PATTERN = r"\s+-\s+LeetCode.*$"

    @classmethod
    def problem_slug(cls, url: str) -> str | None:
        """
        Extract the problem slug from a problem or submission URL.

        Returns None when the URL carries no slug, e.g. while the page is
        still navigating or on /submissions/detail/<id>/.
        """
        path = urlparse(url).path if url else ""
        match = re.search(cls.PROBLEM_PATTERN, path)
        if not match:
            return None

        slug = match.group(1).strip().lower()
        return slug or None

    @classmethod
    def slug_from_title(cls, title: str) -> str | None:
        """Derive a slug from a page title such as 'Two Sum - LeetCode'."""
        if not title or not re.search(cls.TITLE_SUFFIX_PATTERN, title):
            return None

        name = re.sub(cls.TITLE_SUFFIX_PATTERN, "", title).strip()
        # Titles may carry a leading number: "1. Two Sum"
        name = re.sub(r"^\d+\.\s*", "", name)
        slug = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")
        logger.debug(f"Derived slug '{slug}' from title: {title}")
        return slug or None

    @classmethod
    def is_submission_page(cls, url: str) -> bool:
        return cls.SUBMISSIONS_SEGMENT in urlparse(url).path if url else False

    @classmethod
    def is_problem_page(cls, url: str) -> bool:
        if not url:
            return False
        path = urlparse(url).path
        return "/problems/" in path and not cls.is_submission_page(url)

    @classmethod
    def is_on_site(cls, url: str, base_url: str) -> bool:
        """Whether url belongs to the same host (or a subdomain) as base_url."""
        host = (urlparse(url).hostname or "") if url else ""
        base_host = urlparse(base_url).hostname or ""
        if not host or not base_host:
            return False
        return host == base_host or host.endswith(f".{base_host}")

    @classmethod
    def build_problem_url(cls, slug: str, base_url: str) -> str:
        """
        Build the canonical problem URL.
        """
        url = f"{base_url.rstrip('/')}/problems/{slug}/"

        logger.debug(f"Built problem URL: {url}")
        return url
