"""Application settings loaded from the environment and an optional .env file."""

import os
import re
from pathlib import Path
from urllib.parse import urlparse

from dotenv import load_dotenv
from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from domain.exceptions import ConfigurationError
from infrastructure.logging_setup import parse_log_level

TOKEN_PATTERN = r"^ghp_[a-zA-Z0-9]{36}$|^github_pat_[a-zA-Z0-9_]{82}$"

# Environment variable -> Settings field
ENV_FIELDS = {
    "GITHUB_TOKEN": "github_token",
    "GITHUB_REPO": "github_repo",
    "LEETCODE_USERNAME": "leetcode_username",
    "LEETCODE_BASE_URL": "base_url",
    "MONITOR_INTERVAL_SECONDS": "poll_interval_seconds",
    "BROWSER_HEADLESS": "headless",
    "BROWSER_PROFILE_DIR": "profile_dir",
    "HTTP_TIMEOUT_SECONDS": "http_timeout",
    "LOG_LEVEL": "log_level",
    "LEETSYNC_EXTRA_EXTENSIONS": "extra_extensions",
}

ENV_TEMPLATE = """\
# GitHub configuration
GITHUB_TOKEN=your_github_personal_access_token_here
GITHUB_REPO=https://github.com/yourusername/yourrepo

# LeetCode configuration (optional)
LEETCODE_USERNAME=your_leetcode_username
LEETCODE_BASE_URL=https://leetcode.com

# Application settings
MONITOR_INTERVAL_SECONDS=3
BROWSER_HEADLESS=true
BROWSER_PROFILE_DIR=.leetsync_profile
HTTP_TIMEOUT_SECONDS=30
LOG_LEVEL=INFO

# Extra language extensions, e.g. "mysql=sql,bash=sh"
LEETSYNC_EXTRA_EXTENSIONS=
"""


class Settings(BaseModel):
    """Validated configuration for a leetsync run."""

    github_token: str
    github_repo: str
    leetcode_username: str = ""
    base_url: str = "https://leetcode.com"
    poll_interval_seconds: float = Field(default=3.0, gt=0)
    headless: bool = True
    profile_dir: Path = Path(".leetsync_profile")
    http_timeout: float = Field(default=30.0, gt=0)
    log_level: str = "INFO"
    extra_extensions: dict[str, str] = Field(default_factory=dict)

    repo_owner: str = ""
    repo_name: str = ""

    @field_validator("github_token", "github_repo")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        return parse_log_level(value)

    @field_validator("extra_extensions", mode="before")
    @classmethod
    def _parse_extensions(cls, value: object) -> object:
        """Accept "lang=ext,lang=ext" strings as well as mappings."""
        if not isinstance(value, str):
            return value

        table = {}
        for item in value.split(","):
            if not item.strip():
                continue
            language, sep, extension = item.partition("=")
            if not sep or not language.strip() or not extension.strip():
                raise ValueError(f"invalid extension mapping: {item!r}")
            table[language.strip().lower()] = extension.strip().lstrip(".")
        return table

    @model_validator(mode="after")
    def _split_repo(self) -> "Settings":
        parts = [part for part in urlparse(self.github_repo).path.split("/") if part]
        if len(parts) < 2:
            raise ValueError(f"Invalid GitHub repository URL: {self.github_repo}")

        self.repo_owner = parts[0]
        self.repo_name = parts[1].removesuffix(".git")
        return self

    @property
    def token_looks_valid(self) -> bool:
        return re.match(TOKEN_PATTERN, self.github_token) is not None


def settings_from_env(environ: dict[str, str] | None = None) -> dict[str, str]:
    """Collect raw setting values from environment variables."""
    environ = os.environ if environ is None else environ
    return {
        field: environ[name]
        for name, field in ENV_FIELDS.items()
        if name in environ and environ[name] != ""
    }


def load_settings(
    env_file: str | Path | None = None,
    environ: dict[str, str] | None = None,
) -> Settings:
    """
    Load and validate settings.

    Args:
        env_file: Optional .env file; the default lookup of python-dotenv
            applies when omitted
        environ: Explicit environment mapping (skips .env loading)

    Raises:
        ConfigurationError: If required values are missing or invalid
    """
    if environ is None:
        load_dotenv(dotenv_path=env_file)

    raw = settings_from_env(environ)
    try:
        settings = Settings(**raw)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc']) or 'settings'}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigurationError(f"Invalid configuration: {problems}") from e

    if not settings.token_looks_valid:
        logger.warning("GitHub token format doesn't match expected pattern")

    logger.info("Configuration validation passed")
    return settings


def write_env_template(path: str | Path = ".env.example", overwrite: bool = False) -> Path:
    """Write a commented configuration template."""
    target = Path(path)
    if target.exists() and not overwrite:
        raise ConfigurationError(f"Refusing to overwrite existing file: {target}")

    target.write_text(ENV_TEMPLATE, encoding="utf-8")
    logger.info(f"Configuration template written to {target}")
    return target
