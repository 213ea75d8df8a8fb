"""Canonical language identifiers and file extensions."""

DEFAULT_LANGUAGE = "java"
DEFAULT_EXTENSION = "txt"

# Raw editor label (lowercased) -> canonical language id
LANGUAGE_SYNONYMS: dict[str, str] = {
    "python": "python",
    "python3": "python",
    "java": "java",
    "javascript": "javascript",
    "js": "javascript",
    "typescript": "typescript",
    "ts": "typescript",
    "c++": "cpp",
    "cpp": "cpp",
    "c": "c",
    "c#": "csharp",
    "csharp": "csharp",
    "go": "golang",
    "golang": "golang",
    "rust": "rust",
    "ruby": "ruby",
    "php": "php",
    "swift": "swift",
    "kotlin": "kotlin",
    "scala": "scala",
    "dart": "dart",
}

# Language id (lowercased) -> file extension without the dot
DEFAULT_EXTENSIONS: dict[str, str] = {
    "python": "py",
    "python3": "py",
    "py": "py",
    "java": "java",
    "javascript": "js",
    "js": "js",
    "typescript": "ts",
    "ts": "ts",
    "c++": "cpp",
    "cpp": "cpp",
    "c": "c",
    "c#": "cs",
    "csharp": "cs",
    "cs": "cs",
    "go": "go",
    "golang": "go",
    "rust": "rs",
    "rs": "rs",
    "ruby": "rb",
    "rb": "rb",
    "php": "php",
    "swift": "swift",
    "kotlin": "kt",
    "kt": "kt",
    "scala": "scala",
    "dart": "dart",
    "elixir": "ex",
    "ex": "ex",
    "erlang": "erl",
    "erl": "erl",
    "racket": "rkt",
    "rkt": "rkt",
}


def canonical_language(label: str | None) -> str:
    """Map a raw editor label to a canonical language id."""
    if not label:
        return DEFAULT_LANGUAGE
    return LANGUAGE_SYNONYMS.get(label.strip().lower(), DEFAULT_LANGUAGE)


def extension_for(language: str | None, table: dict[str, str] | None = None) -> str:
    """Return the file extension for a language id, or the default one."""
    if not language:
        return DEFAULT_EXTENSION
    extensions = DEFAULT_EXTENSIONS if table is None else table
    return extensions.get(language.strip().lower(), DEFAULT_EXTENSION)
