"""Runtime settings, built once per invocation from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_MODEL = "gpt-4"
DEFAULT_NODE_CONSTRAINT = ">=18.0.0"
DEFAULT_REGISTRY_URL = "https://registry.npmjs.org"
DEFAULT_NPM_BIN = "npm"

_ENV_API_KEY = "OPENAI_API_KEY"
_ENV_MODEL = "THEME_AI_MODEL"
_ENV_DEFAULT_NODE = "THEME_AI_DEFAULT_NODE"
_ENV_REGISTRY_URL = "THEME_AI_REGISTRY_URL"
_ENV_NPM_BIN = "THEME_AI_NPM_BIN"


@dataclass(frozen=True)
class Settings:
    """Explicit configuration passed to every stage that needs it."""

    project_root: Path
    api_key: str | None = None
    model: str = DEFAULT_MODEL
    default_node: str = DEFAULT_NODE_CONSTRAINT
    registry_url: str = DEFAULT_REGISTRY_URL
    npm_bin: str = DEFAULT_NPM_BIN

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls, project_root: Path | str | None = None) -> Settings:
        """Build settings from ``os.environ`` after loading ``<root>/.env``.

        Variables already present in the environment are not overridden by
        the ``.env`` file.
        """
        root = Path(project_root) if project_root is not None else Path.cwd()
        env_file = root / ".env"
        if env_file.is_file():
            load_dotenv(env_file, override=False)

        return cls(
            project_root=root,
            api_key=os.environ.get(_ENV_API_KEY) or None,
            model=os.environ.get(_ENV_MODEL, DEFAULT_MODEL),
            default_node=os.environ.get(_ENV_DEFAULT_NODE, DEFAULT_NODE_CONSTRAINT),
            registry_url=os.environ.get(_ENV_REGISTRY_URL, DEFAULT_REGISTRY_URL).rstrip("/"),
            npm_bin=os.environ.get(_ENV_NPM_BIN, DEFAULT_NPM_BIN),
        )
