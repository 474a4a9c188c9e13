from enum import Enum
from tortoise import fields

from .base import DocModel

class Degree(str, Enum):
    """Stance values on the fixed 8-point agreement scale."""
    STRONGLY_DISAGREE = "Strongly Disagree"
    DISAGREE = "Disagree"
    SLIGHTLY_DISAGREE = "Slightly Disagree"
    NEUTRAL = "Neutral"
    SLIGHTLY_AGREE = "Slightly Agree"
    AGREE = "Agree"
    STRONGLY_AGREE = "Strongly Agree"
    UNDECIDED = "Undecided"

class Side(DocModel):
    """
    A user's stance on a topic (Sideing).
    At most one side per (user, issue), enforced by the database.
    """
    user = fields.UUIDField(index=True)
    issue = fields.UUIDField(index=True)  # Topic id
    degree = fields.CharEnumField(Degree, max_length=32)

    class Meta:
        table = "sides"
        unique_together = (("user", "issue"),)
