"""
Pydantic schemas for category and device payloads.

Wire names are camelCase; ``model_dump()`` yields the snake_case keys the
data store takes.  Media items keep their camelCase shape because they are
stored as opaque JSON and handed back to the client as-is.
"""

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, model_validator

ContentField = Union[Dict[str, Any], List[Any]]

MediaType = Literal["image", "diagram", "pdf", "video"]
RelatedSection = Literal[
    "specifications",
    "materials",
    "safetyRequirements",
    "usageInstructions",
    "troubleshooting",
]


class CategoryCreate(BaseModel):
    """Body of POST /api/device-categories"""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=100)
    icon: str = Field(..., min_length=1, max_length=100)


class MediaItem(BaseModel):
    """Image, diagram, PDF or video attached to a device"""
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    id: Optional[str] = None
    title: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)
    type: MediaType
    description: Optional[str] = None
    related_section: Optional[RelatedSection] = Field(None, alias="relatedSection")
    related_instruction_index: Optional[int] = Field(
        None, alias="relatedInstructionIndex", ge=0
    )


class _DeviceFields(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    @field_serializer("media_items", check_fields=False)
    def _media_items_camel(self, items):
        if items is None:
            return None
        return [m.model_dump(by_alias=True, exclude_none=True) for m in items]


class DeviceCreate(_DeviceFields):
    """Body of POST /api/devices"""

    name: str = Field(..., min_length=1, max_length=150)
    icon: str = Field(..., min_length=1, max_length=100)
    short_description: str = Field(..., min_length=1, alias="shortDescription")
    category_id: int = Field(..., ge=1, alias="categoryId")
    specifications: ContentField
    materials: ContentField
    safety_requirements: ContentField = Field(..., alias="safetyRequirements")
    usage_instructions: ContentField = Field(..., alias="usageInstructions")
    troubleshooting: ContentField
    media_items: List[MediaItem] = Field(default_factory=list, alias="mediaItems")


class DeviceUpdate(_DeviceFields):
    """Body of PATCH /api/devices/<id>; only the keys sent are applied"""

    name: Optional[str] = Field(None, min_length=1, max_length=150)
    icon: Optional[str] = Field(None, min_length=1, max_length=100)
    short_description: Optional[str] = Field(None, min_length=1, alias="shortDescription")
    category_id: Optional[int] = Field(None, ge=1, alias="categoryId")
    specifications: Optional[ContentField] = None
    materials: Optional[ContentField] = None
    safety_requirements: Optional[ContentField] = Field(None, alias="safetyRequirements")
    usage_instructions: Optional[ContentField] = Field(None, alias="usageInstructions")
    troubleshooting: Optional[ContentField] = None
    media_items: Optional[List[MediaItem]] = Field(None, alias="mediaItems")

    @model_validator(mode="after")
    def _no_explicit_nulls(self):
        nulls = [name for name in self.model_fields_set if getattr(self, name) is None]
        if nulls:
            raise ValueError(f"fields cannot be null: {', '.join(sorted(nulls))}")
        return self
