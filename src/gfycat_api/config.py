"""Configuration management for the Gfycat API client.

Loads credentials from the environment (or .env) and a local JSON
credentials file, and service endpoints from config/service.yaml.
"""

from __future__ import annotations

import json
import os
from functools import lru_cache
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from gfycat_api.errors import auth_error_from

DEFAULT_BASE_URL = "https://api.gfycat.com/v1/"


class Credentials(BaseModel):
    """OAuth2 client credentials. The credentials file uses ``id``/``secret``."""
    client_id: str = Field(alias="id")
    client_secret: str = Field(alias="secret")

    model_config = {"populate_by_name": True, "frozen": True}


class ServiceEndpoints(BaseModel):
    """Where the remote service lives."""
    base_url: str = DEFAULT_BASE_URL
    token_path: str = "oauth/token"

    @property
    def token_url(self) -> str:
        return self.base_url + self.token_path


class Settings(BaseModel):
    """Application settings loaded from environment variables."""
    client_id: str = Field(default="", description="Gfycat OAuth client ID")
    client_secret: str = Field(default="", description="Gfycat OAuth client secret")
    credentials_file: str = Field(default="config.json", description="JSON file with id/secret")
    timeout: float = Field(default=30.0, description="Default request timeout in seconds")


class Config(BaseModel):
    """Full application configuration."""
    settings: Settings
    endpoints: ServiceEndpoints = ServiceEndpoints()

    def get_credentials(self) -> Credentials:
        """Credentials from the environment, falling back to the credentials file."""
        if self.settings.client_id and self.settings.client_secret:
            return Credentials(
                client_id=self.settings.client_id,
                client_secret=self.settings.client_secret,
            )
        return load_credentials(self.settings.credentials_file)


def load_credentials(path: str | Path) -> Credentials:
    """Read a ``{"id": ..., "secret": ...}`` credentials file.

    Raises:
        AuthIOError: The file could not be read.
        AuthDecodeError: The file is not valid JSON or lacks a field.
    """
    try:
        with open(path) as f:
            data = json.load(f)
        return Credentials.model_validate(data)
    except (OSError, ValueError, ValidationError) as e:
        raise auth_error_from(e) from e


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (where config/ lives)."""
    current = Path(__file__).resolve().parent
    for parent in [current, *current.parents]:
        if (parent / "config" / "service.yaml").exists():
            return parent
    return Path.cwd()


def _load_endpoints(project_root: Path) -> ServiceEndpoints:
    """Load service endpoints from service.yaml, defaults when absent."""
    service_path = project_root / "config" / "service.yaml"
    if not service_path.exists():
        return ServiceEndpoints()

    with open(service_path) as f:
        data = yaml.safe_load(f) or {}

    return ServiceEndpoints(**data.get("service", {}))


def _env(*keys: str, default: str = "") -> str:
    """Try multiple env var names, return the first one found."""
    for key in keys:
        val = os.environ.get(key, "")
        if val:
            return val.strip().strip('"')
    return default


def _load_settings() -> Settings:
    """Load settings from environment variables.

    Supports both GFYCAT_* and legacy camelCase names from .env.
    """
    return Settings(
        client_id=_env("GFYCAT_CLIENT_ID", "clientId"),
        client_secret=_env("GFYCAT_CLIENT_SECRET", "clientSecret"),
        credentials_file=_env("GFYCAT_CREDENTIALS_FILE", default="config.json"),
        timeout=float(_env("GFYCAT_TIMEOUT", default="30")),
    )


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Load and cache the full application configuration."""
    project_root = _find_project_root()

    env_path = project_root / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    return Config(settings=_load_settings(), endpoints=_load_endpoints(project_root))
