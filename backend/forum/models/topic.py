from tortoise import fields

from .base import DocModel

class Topic(DocModel):
    """Discussion topic (Topicing). Titles are unique across all topics."""
    author = fields.UUIDField(index=True)
    title = fields.CharField(max_length=256, unique=True)
    description = fields.TextField(default="")

    class Meta:
        table = "topics"
