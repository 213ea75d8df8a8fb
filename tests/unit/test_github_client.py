"""Unit tests for the GitHub contents API client."""

import base64

import pytest
from unittest.mock import MagicMock

from domain.models import Submission, SubmissionStatus
from infrastructure.github_client import GitHubRepositoryClient

CONTENTS_URL = "https://api.github.com/repos/octocat/solutions/contents"


def make_response(status_code, payload=None, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload or {}
    response.text = text
    return response


@pytest.fixture
def session():
    session = MagicMock()
    session.get.return_value = make_response(404, {"message": "Not Found"})
    session.put.return_value = make_response(
        201, {"content": {"html_url": "https://github.com/octocat/solutions/blob/main/x"}}
    )
    return session


@pytest.fixture
def client(session):
    return GitHubRepositoryClient("octocat", "solutions", "ghp_token", session=session, timeout=5)


@pytest.fixture
def submission():
    return Submission(
        problem_id="two-sum",
        language="python",
        code="class Solution:\n    pass",
        status=SubmissionStatus.ACCEPTED,
    )


class TestFilePath:
    def test_path_from_language_and_problem(self, client, submission):
        assert client.build_file_path(submission) == "python/two-sum.py"

    def test_language_is_lowercased(self, client):
        submission = Submission(problem_id="lru-cache", language="CPP", code="x")
        assert client.build_file_path(submission) == "cpp/lru-cache.cpp"

    def test_unrecognized_language_uses_default_extension(self, client):
        submission = Submission(problem_id="two-sum", language="brainfuck", code="+")
        assert client.build_file_path(submission) == "brainfuck/two-sum.txt"

    def test_custom_extension_table(self, session):
        client = GitHubRepositoryClient(
            "octocat", "solutions", "t", session=session, extensions={"mysql": "sql"}
        )
        submission = Submission(problem_id="big-countries", language="mysql", code="SELECT 1")
        assert client.build_file_path(submission) == "mysql/big-countries.sql"


class TestSync:
    """Test the create-vs-update branch."""

    def test_creates_file_when_absent(self, client, session, submission):
        assert client.sync(submission) is True

        session.get.assert_called_once()
        assert session.get.call_args.args[0] == f"{CONTENTS_URL}/python/two-sum.py"

        url = session.put.call_args.args[0]
        payload = session.put.call_args.kwargs["json"]
        assert url == f"{CONTENTS_URL}/python/two-sum.py"
        assert payload["message"] == "feat: add python solution for two-sum"
        assert "sha" not in payload
        assert base64.b64decode(payload["content"]).decode("utf-8") == submission.code

    def test_updates_file_with_existing_sha(self, client, session, submission):
        session.get.return_value = make_response(200, {"sha": "abc123"})
        session.put.return_value = make_response(200, {"content": {"html_url": "u"}})

        result = client.sync_with_result(submission)

        payload = session.put.call_args.kwargs["json"]
        assert payload["sha"] == "abc123"
        assert payload["message"] == "feat: update python solution for two-sum"
        assert result.success
        assert result.action == "update"
        assert result.html_url == "u"

    def test_sends_auth_headers_and_timeout(self, client, session, submission):
        client.sync(submission)

        kwargs = session.put.call_args.kwargs
        assert kwargs["headers"]["Authorization"] == "Bearer ghp_token"
        assert kwargs["headers"]["Accept"] == "application/vnd.github+json"
        assert kwargs["headers"]["X-GitHub-Api-Version"] == "2022-11-28"
        assert kwargs["timeout"] == 5

    def test_non_success_status_returns_false(self, client, session, submission):
        session.put.return_value = make_response(422, text='{"message": "sha wasn\'t supplied"}')

        result = client.sync_with_result(submission)

        assert result.success is False
        assert result.status_code == 422
        assert result.action == "create"
        assert session.put.call_count == 1

    def test_transport_error_returns_false(self, client, session, submission):
        session.put.side_effect = ConnectionError("connection reset")

        assert client.sync(submission) is False
        assert session.put.call_count == 1

    def test_error_message_with_braces_returns_false(self, client, session, submission):
        session.put.side_effect = ValueError('bad payload {"message": "x"}')

        result = client.sync_with_result(submission)

        assert result.success is False
        assert result.error == 'bad payload {"message": "x"}'
        assert client.sync(submission) is False

    def test_lookup_error_is_treated_as_absent(self, client, session, submission):
        session.get.side_effect = TimeoutError("read timed out")

        assert client.sync(submission) is True
        assert "sha" not in session.put.call_args.kwargs["json"]

    def test_utf8_content_encoding(self, client, session):
        submission = Submission(problem_id="two-sum", language="java", code="// häßlich ✓")

        client.sync(submission)

        encoded = session.put.call_args.kwargs["json"]["content"]
        assert base64.b64decode(encoded).decode("utf-8") == "// häßlich ✓"


class TestConnection:
    def test_connection_ok(self, client, session):
        session.get.return_value = make_response(200, {"login": "octocat"})

        assert client.test_connection() is True
        assert session.get.call_args.args[0] == "https://api.github.com/user"

    def test_connection_unauthorized(self, client, session):
        session.get.return_value = make_response(401)

        assert client.test_connection() is False
