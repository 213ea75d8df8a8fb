"""Unit tests for the offline CLI commands."""

import pytest

from cli.main import main
from tests.pages import SUBMISSION_URL, build_page


def test_inspect_saved_page(tmp_path, capsys):
    html_file = tmp_path / "two-sum.html"
    html_file.write_text(
        build_page(monaco="print(1)", language="Python3", status="Accepted"), encoding="utf-8"
    )

    exit_code = main(["inspect", str(html_file), "--url", "https://leetcode.com/problems/two-sum/"])

    output = capsys.readouterr().out
    assert exit_code == 0
    assert "problem:  two-sum" in output
    assert "language: python" in output
    assert "code:     8 characters" in output
    assert "accepted: yes" in output


def test_inspect_submission_page(tmp_path, capsys):
    html_file = tmp_path / "result.html"
    html_file.write_text(build_page(result_span="Wrong Answer"), encoding="utf-8")

    main(["inspect", str(html_file), "--url", SUBMISSION_URL])

    output = capsys.readouterr().out
    assert "accepted: no" in output
    assert "code:     0 characters" in output


def test_inspect_missing_file(tmp_path):
    assert main(["inspect", str(tmp_path / "missing.html")]) == 1


def test_init_writes_template(tmp_path, capsys):
    target = tmp_path / ".env.example"

    assert main(["init", "--path", str(target)]) == 0
    assert "GITHUB_TOKEN=" in target.read_text(encoding="utf-8")

    # Existing file is kept unless --force is given
    assert main(["init", "--path", str(target)]) == 1
    assert main(["init", "--path", str(target), "--force"]) == 0


def test_check_with_invalid_configuration(monkeypatch, tmp_path):
    for name in ("GITHUB_TOKEN", "GITHUB_REPO"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)

    assert main(["check", "--env-file", str(tmp_path / "absent.env")]) == 1


def test_unknown_log_level_is_a_usage_error(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--log-level", "verbose", "init"])

    assert exc_info.value.code == 2
    assert "verbose" in capsys.readouterr().err
