"""Client configuration, supplied explicitly or read from the environment."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class JustCmsConfig(BaseSettings):
    """API token and project id for one JustCMS project.

    Values come from keyword arguments, or from ``JUSTCMS_API_TOKEN`` /
    ``JUSTCMS_PROJECT_ID`` in the environment or a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="JUSTCMS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    api_token: str = ""
    project_id: str = ""


@lru_cache(maxsize=1)
def get_config() -> JustCmsConfig:
    return JustCmsConfig()
