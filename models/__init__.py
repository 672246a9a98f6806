"""Data models and configuration.

Pydantic models and configuration:
- models: Kitsu API response models
- config: Centralized configuration (Pydantic Settings)
"""

from models.config import AppSettings, settings
from models.models import KitsuMangaResponse, MangaAttributes, MangaResource, PosterImage

__all__ = [
    "AppSettings",
    "KitsuMangaResponse",
    "MangaAttributes",
    "MangaResource",
    "PosterImage",
    "settings",
]
