from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class TagCategory(str, Enum):
    LANGUAGES = "languages"
    FRAMEWORKS = "frameworks"
    TOOLS = "tools"
    CONCEPTS = "concepts"
    PLATFORMS = "platforms"
    DATABASES = "databases"
    MOBILE = "mobile"
    AI_ML = "ai-ml"


UNCATEGORIZED = "uncategorized"


class NormalizedTag(BaseModel):
    name: str
    category: str | None = None


class TagNormalizeRequest(BaseModel):
    tags: str | list[str | int | float | dict | None] | None = None
    source_name: str = Field(default="api", max_length=200)


class TagNormalizeResponse(BaseModel):
    tags: list[str]
    rules: list[NormalizedTag] = Field(default_factory=list)
    inferred_category: str | None = None


class TagCategorizeRequest(BaseModel):
    tags: list[str] = Field(default_factory=list, max_length=500)


class TagCategorizeResponse(BaseModel):
    categories: dict[str, list[str]]
    statistics: dict[str, int]
