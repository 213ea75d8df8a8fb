"""Builders for simulated LeetCode pages."""

from html import escape

BASE_URL = "https://leetcode.com"
PROBLEM_URL = f"{BASE_URL}/problems/two-sum/"
SUBMISSION_URL = f"{BASE_URL}/problems/two-sum/submissions/1234567/"


def build_page(
    *,
    monaco: str | None = None,
    data_cy: str | None = None,
    codemirror: list[str] | None = None,
    ace: str | None = None,
    generic: str | None = None,
    language: str | None = None,
    language_div: str | None = None,
    status: str | None = None,
    result_span: str | None = None,
    title: str = "Two Sum - LeetCode",
) -> str:
    """Render a minimal page carrying the requested editor widgets and indicators."""
    parts = []
    if monaco is not None:
        parts.append(f'<div class="monaco-editor vs"><textarea>{escape(monaco)}</textarea></div>')
    if data_cy is not None:
        parts.append(f'<textarea data-cy="code-editor">{escape(data_cy)}</textarea>')
    if codemirror is not None:
        lines = "".join(f'<pre class="CodeMirror-line">{escape(line)}</pre>' for line in codemirror)
        parts.append(f'<div class="CodeMirror">{lines}</div>')
    if ace is not None:
        parts.append(f'<div class="ace_editor"><textarea>{escape(ace)}</textarea></div>')
    if generic is not None:
        parts.append(f'<div class="code-editor-pane"><textarea>{escape(generic)}</textarea></div>')
    if language is not None:
        parts.append(
            '<select data-cy="lang-select"><option>Java</option>'
            f"<option selected>{escape(language)}</option></select>"
        )
    if language_div is not None:
        parts.append(f'<div class="language-label">{escape(language_div)}</div>')
    if status is not None:
        parts.append(f'<div class="result-status">{escape(status)}</div>')
    if result_span is not None:
        parts.append(f"<span>{escape(result_span)}</span>")

    body = "\n".join(parts)
    return f"<html><head><title>{escape(title)}</title></head><body>{body}</body></html>"
