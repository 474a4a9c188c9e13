"""
Database model for responses.
Responses to topics and responses to responses share one table; the target
reference is a tagged variant (target_kind, target).
"""
from enum import Enum
from tortoise import fields

from .base import DocModel

class TargetKind(str, Enum):
    TOPIC = "topic"
    RESPONSE = "response"

class Response(DocModel):
    """Response document (Responding)."""
    author = fields.UUIDField(index=True)
    title = fields.CharField(max_length=256)
    content = fields.TextField()
    target_kind = fields.CharEnumField(TargetKind, max_length=16)  # What `target` points at
    target = fields.UUIDField(index=True)  # Topic id or Response id

    class Meta:
        table = "responses"
