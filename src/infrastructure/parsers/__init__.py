"""Parsers for extracting data from the observed page."""

from .code_extractor import DEFAULT_STRATEGIES, CodeExtractor, ExtractionStrategy
from .interfaces import (
    PageElement,
    PageObserverFactory,
    PageObserverProtocol,
    RepositorySyncProtocol,
    URLParserProtocol,
)
from .language_detector import LANGUAGE_LABEL_SELECTORS, LanguageDetector
from .url_parser import URLParser

__all__ = [
    "CodeExtractor",
    "DEFAULT_STRATEGIES",
    "ExtractionStrategy",
    "LANGUAGE_LABEL_SELECTORS",
    "LanguageDetector",
    "PageElement",
    "PageObserverFactory",
    "PageObserverProtocol",
    "RepositorySyncProtocol",
    "URLParser",
    "URLParserProtocol",
]
