"""GitHub contents API client for publishing accepted solutions."""

import base64
from collections.abc import Mapping
from typing import Any

from curl_cffi import requests
from loguru import logger

from domain.exceptions import SyncError
from domain.languages import DEFAULT_EXTENSIONS, extension_for
from domain.models import Submission, SyncAction, SyncResult

GITHUB_API_URL = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"


def _is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


class GitHubRepositoryClient:
    """Creates or updates solution files in a single repository."""

    def __init__(
        self,
        owner: str,
        repo: str,
        token: str,
        *,
        session: Any | None = None,
        base_url: str = GITHUB_API_URL,
        timeout: float = 30.0,
        extensions: Mapping[str, str] | None = None,
    ):
        """
        Initialize client.

        Args:
            owner: Repository owner (user or organization)
            repo: Repository name
            token: Bearer token with contents write permission
            session: HTTP session; a curl_cffi session is created when omitted
            base_url: API root, overridable for GitHub Enterprise
            timeout: Connect/read timeout in seconds, applied to every call
            extensions: Language id -> file extension table
        """
        self.owner = owner
        self.repo = repo
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.extensions = dict(DEFAULT_EXTENSIONS if extensions is None else extensions)
        self.session = session or requests.Session()
        self.headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
            "Authorization": f"Bearer {token}",
        }

    def build_file_path(self, submission: Submission) -> str:
        extension = extension_for(submission.language, self.extensions)
        return f"{submission.language.lower()}/{submission.problem_id}.{extension}"

    def contents_url(self, path: str) -> str:
        return f"{self.base_url}/repos/{self.owner}/{self.repo}/contents/{path}"

    def get_file_sha(self, path: str) -> str | None:
        """Return the blob sha of an existing file, or None if it is absent."""
        try:
            response = self.session.get(
                self.contents_url(path), headers=self.headers, timeout=self.timeout
            )
            if _is_success(response.status_code):
                return response.json().get("sha")

            logger.debug(f"File does not exist or error checking: {path} ({response.status_code})")
            return None
        except Exception as e:
            logger.debug(f"Error checking file existence: {path}: {e}")
            return None

    def sync(self, submission: Submission) -> bool:
        """Create or update the solution file; True on a 2xx response."""
        return self.sync_with_result(submission).success

    def sync_with_result(self, submission: Submission) -> SyncResult:
        path = self.build_file_path(submission)
        sha = self.get_file_sha(path)
        action: SyncAction = "update" if sha else "create"

        verb = "update" if sha else "add"
        payload: dict[str, str] = {
            "message": f"feat: {verb} {submission.language} solution for {submission.problem_id}",
            "content": base64.b64encode(submission.code.encode("utf-8")).decode("ascii"),
        }
        if sha:
            payload["sha"] = sha

        try:
            response = self.session.put(
                self.contents_url(path),
                headers=self.headers,
                json=payload,
                timeout=self.timeout,
            )
            if not _is_success(response.status_code):
                raise SyncError(path, response.status_code, response.text)

            html_url = (response.json().get("content") or {}).get("html_url")
        except SyncError as e:
            logger.error(f"Failed to upload to GitHub. Status: {e.status_code}, Body: {e.body}")
            logger.error(f"❌ Failed to upload: {submission.problem_id}")
            return SyncResult(False, path, action, status_code=e.status_code, error=str(e))
        except Exception as e:
            logger.opt(exception=True).error(f"Error uploading submission to GitHub: {e}")
            logger.error(f"❌ Error uploading: {submission.problem_id}")
            return SyncResult(False, path, action, error=str(e))

        past = "Updated" if sha else "Added"
        logger.info(f"✅ Uploaded: {past} {submission.language} solution for {submission.problem_id}")
        if html_url:
            logger.info(f"File URL: {html_url}")
        return SyncResult(True, path, action, html_url=html_url, status_code=response.status_code)

    def test_connection(self) -> bool:
        """Check the token by fetching the authenticated user."""
        try:
            response = self.session.get(
                f"{self.base_url}/user", headers=self.headers, timeout=self.timeout
            )
            if _is_success(response.status_code):
                login = response.json().get("login")
                logger.info(f"GitHub connection successful. User: {login}")
                return True

            logger.error(f"GitHub connection failed. Status: {response.status_code}")
            return False
        except Exception as e:
            logger.error(f"Error testing GitHub connection: {e}")
            return False

    def close(self) -> None:
        self.session.close()
