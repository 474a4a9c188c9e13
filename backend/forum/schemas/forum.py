"""
Pydantic schemas for topic, response, side and label endpoints.
"""
from typing import Optional
from pydantic import BaseModel

__all__ = ["TopicIn", "ResponseIn", "ResponseTitleIn", "ResponseContentIn", "SideIn", "SideUpdateIn", "LabelIn"]

class TopicIn(BaseModel):
    title: str = ""  # Must be non-empty and unique
    description: str = ""

class ResponseIn(BaseModel):
    title: str = ""
    content: str = ""

class ResponseTitleIn(BaseModel):
    """Omitting the title leaves it unchanged."""
    title: Optional[str] = None

class ResponseContentIn(BaseModel):
    """Omitting the content leaves it unchanged."""
    content: Optional[str] = None

class SideIn(BaseModel):
    degree: str  # One of the eight Degree values

class SideUpdateIn(BaseModel):
    """Omitting newside leaves the side unchanged."""
    newside: Optional[str] = None

class LabelIn(BaseModel):
    label: str = ""  # Label title, unique per kind
