"""Pydantic data models for the Kitsu manga API.

Defines DTOs (Data Transfer Objects) for:
- PosterImage: Cover image URLs at three resolutions
- MangaAttributes: The attributes block of one manga resource
- MangaResource: One JSON:API resource (id, type, attributes)
- KitsuMangaResponse: The top-level search response

The API schema is treated as an external contract: unknown fields are
ignored, and missing or null fields fall back to their zero value.
"""

from typing import Any, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

# Type aliases for common patterns
MangaTitle: TypeAlias = str
ImageURL: TypeAlias = str


class KitsuModel(BaseModel):
    """Base model: camelCase aliases, unknown fields ignored, null -> default."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def null_as_default(cls, v: Any, info: ValidationInfo) -> Any:
        """Replace JSON null with the field's zero value."""
        if v is None:
            field = cls.model_fields[info.field_name]
            return field.get_default(call_default_factory=True)
        return v


class PosterImage(KitsuModel):
    """Cover image URLs.

    Attributes:
        small: Small resolution URL
        medium: Medium resolution URL (shown in the report)
        large: Large resolution URL
    """

    small: ImageURL = ""
    medium: ImageURL = ""
    large: ImageURL = ""


class MangaAttributes(KitsuModel):
    """Attributes of a manga resource.

    A count of 0 means "absent": the API's missing and zero values are
    indistinguishable here.
    """

    canonical_title: MangaTitle = Field("", alias="canonicalTitle")
    abbreviated_title: MangaTitle = Field("", alias="abbreviatedTitle")
    chapter_count: int = Field(0, alias="chapterCount")
    volume_count: int = Field(0, alias="volumeCount")
    average_rating: str = Field("", alias="averageRating")
    popularity_rank: int = Field(0, alias="popularityRank")
    synopsis: str = ""
    poster_image: PosterImage = Field(default_factory=PosterImage, alias="posterImage")


class MangaResource(KitsuModel):
    """One entry of the response ``data`` list."""

    id: str = ""
    type: str = ""
    attributes: MangaAttributes = Field(default_factory=MangaAttributes)


class KitsuMangaResponse(KitsuModel):
    """Top-level response of ``GET /manga``."""

    data: list[MangaResource] = Field(default_factory=list)

    def first(self) -> MangaAttributes | None:
        """Return the attributes of the first result, or None if there are none."""
        if not self.data:
            return None
        return self.data[0].attributes
