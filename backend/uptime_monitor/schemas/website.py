"""Website schemas for API."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema that speaks camelCase on the wire and accepts snake_case."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class WebsiteCreate(CamelModel):
    """Schema for registering a website."""
    name: str = Field(..., min_length=1, max_length=255)
    url: str = Field(..., min_length=1)
    interval: Optional[int] = Field(None, gt=0)  # milliseconds
    is_active: bool = True


class WebsiteUpdate(CamelModel):
    """Schema for a partial website update."""
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    url: Optional[str] = Field(None, min_length=1)
    interval: Optional[int] = Field(None, gt=0)
    is_active: Optional[bool] = None


class WebsiteResponse(CamelModel):
    """Schema for a website in API responses."""
    id: str
    url: str
    name: str
    interval: int
    is_active: bool
    created_at: str


class DeleteResponse(BaseModel):
    """Result of deleting a website."""
    success: bool
