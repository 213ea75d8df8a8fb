"""Detection of the solution language selected in the editor."""

from collections.abc import Sequence

from loguru import logger

from domain.languages import DEFAULT_LANGUAGE, canonical_language

from .interfaces import PageObserverProtocol

LANGUAGE_LABEL_SELECTORS: tuple[str, ...] = (
    'select[data-cy="lang-select"] option[selected]',
    'div[class*="language"]',
)


class LanguageDetector:
    """Maps the language label shown on the page to a canonical id."""

    def __init__(self, selectors: Sequence[str] = LANGUAGE_LABEL_SELECTORS):
        self.selectors = tuple(selectors)

    def read_label(self, page: PageObserverProtocol) -> str | None:
        """Return the raw label of the first selector that matches."""
        for selector in self.selectors:
            try:
                elements = page.query(selector)
            except Exception as e:
                logger.debug(f"Language selector '{selector}' failed: {e}")
                continue

            for element in elements:
                return element.text
        return None

    def detect(self, page: PageObserverProtocol) -> str:
        """Return the canonical language id, or "java" when unknown."""
        label = self.read_label(page)
        if label is None:
            logger.debug(f"No language indicator found, defaulting to {DEFAULT_LANGUAGE}")
            return DEFAULT_LANGUAGE

        language = canonical_language(label)
        logger.debug(f"Detected language '{language}' from label '{label.strip()}'")
        return language
