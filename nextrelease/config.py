"""Configuration loading from YAML and environment.

Secrets (tokens) are taken from environment variables or from files
(Docker secrets). Never put real tokens in config files committed to the
repo.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from nextrelease.models import Project, Repository


def _read_secret(env_key: str, file_env_key: str) -> str | None:
    """Read secret from env var or from file path in env (e.g. Docker
    secrets)."""
    value = _current_env.get(env_key)
    if value:
        return value.strip()
    file_path = _current_env.get(file_env_key)
    if file_path:
        return Path(file_path).read_text().strip()
    return None


# Injected by load_config so secrets can be read from env/file
_current_env: dict[str, str] = {}


class GitHubConfig(BaseSettings):
    """GitHub API settings."""

    model_config = SettingsConfigDict(env_prefix="GITHUB_", extra="ignore")

    token: str | None = Field(default=None, description="PAT or app token; use env or secret file")
    api_url: str = Field(default="https://api.github.com", description="API base URL")
    timeout: int = Field(default=30, ge=1, description="Request timeout in seconds")


class ReleaseConfig(BaseSettings):
    """Release automation identity."""

    model_config = SettingsConfigDict(env_prefix="RELEASE_", extra="ignore")

    # Pull requests authored by this login are not part of a release (empty disables)
    bot_username: str = Field(default="SonataCI", description="Login of the release automation bot")


class ProjectConfig(BaseModel):
    """One project: repository and maintained branches, newest first."""

    repository: str = Field(description="Repository e.g. sonata-project/SonataAdminBundle")
    branches: list[str] = Field(default_factory=list, description="Branches, newest line first")

    @field_validator("repository")
    @classmethod
    def _check_repository(cls, value: str) -> str:
        Repository.from_string(value)
        return value


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )


class AppConfig(BaseSettings):
    """Root application config from YAML + env."""

    model_config = SettingsConfigDict(extra="ignore")

    github: GitHubConfig = Field(default_factory=GitHubConfig)
    release: ReleaseConfig = Field(default_factory=ReleaseConfig)
    projects: dict[str, ProjectConfig] = Field(default_factory=dict)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def github_token_resolved(self) -> str | None:
        """Resolve GitHub token from env or Docker secret file."""
        t = self.github.token
        if t and not t.startswith("${") and t != "your-token-here":
            return t
        return _read_secret("GITHUB_TOKEN", "GITHUB_TOKEN_FILE")

    def project(self, name: str) -> Project:
        """Build the Project model for a configured project; KeyError if unknown."""
        cfg = self.projects[name]
        return Project(
            name=name,
            repository=Repository.from_string(cfg.repository),
            branches=cfg.branches,
        )


def _substitute_env(value: Any) -> Any:
    """Replace ${VAR} and $VAR in strings with os.environ."""
    if isinstance(value, str):
        if value.startswith("${") and value.endswith("}"):
            key = value[2:-1].strip()
            return _current_env.get(key, value)
        if value.startswith("$") and not value.startswith("${"):
            key = value[1:].strip()
            return _current_env.get(key, value)
        return value
    if isinstance(value, dict):
        return {k: _substitute_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env(v) for v in value]
    return value


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load config from YAML file and environment.

    Secrets: GITHUB_TOKEN or GITHUB_TOKEN_FILE.
    """
    global _current_env

    _current_env = dict(os.environ)

    path = config_path or Path("config.yaml")
    if not path.is_file():
        return AppConfig()

    raw = yaml.safe_load(path.read_text()) or {}
    raw = _substitute_env(raw)

    release_raw = raw.get("release") or {}
    if "RELEASE_BOT_USERNAME" in _current_env:
        release_raw = {**release_raw, "bot_username": _current_env["RELEASE_BOT_USERNAME"]}

    projects = {
        name: ProjectConfig(**(val or {}))
        for name, val in (raw.get("projects") or {}).items()
    }

    return AppConfig(
        github=GitHubConfig(**(raw.get("github") or {})),
        release=ReleaseConfig(**release_raw),
        projects=projects,
        logging=LoggingConfig(**(raw.get("logging") or {})),
    )
