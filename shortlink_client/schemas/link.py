from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Union
from datetime import datetime


class Link(BaseModel):
    """A short link as returned by the API.

    Field names are snake_case in Python and camelCase on the wire;
    ``populate_by_name`` accepts either when parsing.
    """
    id: Union[int, str]
    original_url: str = Field(..., alias="originalUrl")
    short_code: str = Field(..., alias="shortCode")
    click_count: int = Field(0, ge=0, alias="clickCount")
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class LinkStats(BaseModel):
    """Stats object for a single link; shape is owned by the server"""
    click_count: Optional[int] = Field(None, alias="clickCount")

    model_config = ConfigDict(populate_by_name=True, extra="allow")
