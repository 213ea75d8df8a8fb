"""Extraction of the solution text from whichever editor widget is present."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from loguru import logger

from .interfaces import PageElement, PageObserverProtocol


def _first_value(elements: Sequence[PageElement]) -> str:
    for element in elements:
        return element.attr("value")
    return ""


def _joined_lines(elements: Sequence[PageElement]) -> str:
    return "\n".join(element.text for element in elements).strip()


@dataclass(frozen=True)
class ExtractionStrategy:
    """One editor-widget family: a selector plus how to read its matches."""

    name: str
    selector: str
    read: Callable[[Sequence[PageElement]], str]

    def apply(self, page: PageObserverProtocol) -> str:
        return self.read(page.query(self.selector)) or ""


# Most likely editor first; a later entry may match stale or hidden widgets.
DEFAULT_STRATEGIES: tuple[ExtractionStrategy, ...] = (
    ExtractionStrategy("monaco", "div.monaco-editor textarea", _first_value),
    ExtractionStrategy("monaco-data-cy", 'textarea[data-cy="code-editor"]', _first_value),
    ExtractionStrategy("codemirror", "pre.CodeMirror-line", _joined_lines),
    ExtractionStrategy("ace", "div.ace_editor textarea", _first_value),
    ExtractionStrategy("generic", 'div[class*="editor"] textarea', _first_value),
)


class CodeExtractor:
    """Reads the currently typed solution from the editor."""

    def __init__(self, strategies: Sequence[ExtractionStrategy] = DEFAULT_STRATEGIES):
        self.strategies = tuple(strategies)

    def extract(self, page: PageObserverProtocol) -> str:
        """
        Return the first non-blank editor content, or an empty string.

        An empty editor is a normal state; query failures are treated as
        "nothing found" for that strategy.
        """
        for strategy in self.strategies:
            try:
                code = strategy.apply(page)
            except Exception as e:
                logger.debug(f"Editor strategy '{strategy.name}' failed: {e}")
                continue

            if code.strip():
                logger.debug(f"Extracted code with '{strategy.name}' strategy")
                return code

        logger.debug("No code found in editor with any strategy")
        return ""
