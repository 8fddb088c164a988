"""Process configuration read from the environment (and an optional ``.env``)."""

import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

# Used for image URLs when neither an image host nor an API host is configured
DEFAULT_CMS_URL = "http://localhost:1337"


def _first_env(*names: str) -> Optional[str]:
    for name in names:
        value = os.environ.get(name, "").strip()
        if value:
            return value
    return None


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    cms_api_url: Optional[str] = None
    cms_api_token: Optional[str] = None
    cms_image_url: Optional[str] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``STRAPI_*`` environment variables.

        The ``NEXT_PUBLIC_`` spellings are accepted too so an existing
        frontend ``.env`` file can be shared as-is.
        """
        api_url = _first_env("STRAPI_API_URL", "NEXT_PUBLIC_STRAPI_API_URL")
        image_url = _first_env("STRAPI_IMAGE_URL", "NEXT_PUBLIC_STRAPI_IMAGE_URL")
        return cls(
            cms_api_url=api_url.rstrip("/") if api_url else None,
            cms_api_token=_first_env("STRAPI_API_TOKEN"),
            cms_image_url=image_url.rstrip("/") if image_url else None,
            log_level=(_first_env("LOG_LEVEL") or "INFO").upper(),
        )

    @property
    def image_base_url(self) -> str:
        return self.cms_image_url or self.cms_api_url or DEFAULT_CMS_URL


@lru_cache
def get_settings() -> Settings:
    load_dotenv()
    return Settings.from_env()
