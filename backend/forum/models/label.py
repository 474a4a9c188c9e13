from tortoise import fields

from .base import DocModel
from .response import TargetKind

class Label(DocModel):
    """
    Named tag over topics or responses (Labeling).
    Titles are unique per kind; `items` holds the labelled ids as strings.
    """
    author = fields.UUIDField(index=True)
    kind = fields.CharEnumField(TargetKind, max_length=16)
    title = fields.CharField(max_length=128)
    items = fields.JSONField(default=list)

    class Meta:
        table = "labels"
        unique_together = (("kind", "title"),)
