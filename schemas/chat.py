"""
Pydantic schemas for the device chat endpoint
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ChatRequest(BaseModel):
    """Body of POST /api/devices/<id>/chat"""
    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(..., min_length=1, description="User question, sent verbatim")
    image_url: Optional[str] = Field(
        None,
        alias="imageUrl",
        description="URL returned by /api/upload, if the user attached an image",
    )
