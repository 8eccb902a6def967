from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ContentOverridesRead(BaseModel):
    hero_image_path: str = Field(default="", alias="heroImagePath")
    module_images: dict[str, str] = Field(default_factory=dict, alias="moduleImages")

    model_config = ConfigDict(populate_by_name=True)


class AdminContentResponse(BaseModel):
    success: bool = True
    overrides: ContentOverridesRead
    content: dict[str, Any]
