"""
Shared base model for every concept collection.
Gives each document an opaque identifier plus creation/update timestamps and a
JSON-ready view of its fields.
"""
import datetime as dt
import uuid
from enum import Enum
from tortoise import fields, models


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


class DocModel(models.Model):
    """
    Abstract document: {id, createdAt, updatedAt}.

    `updated_at` is refreshed by `save()`; queryset `.update()` bypasses it, so
    concepts mutate documents by loading and saving them.
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)  # Primary key: opaque document identifier
    created_at = fields.DatetimeField(auto_now_add=True)  # Set once on insert
    updated_at = fields.DatetimeField(auto_now=True)  # Refreshed on every save

    # Field name -> key used in the JSON document, for names that camelCase badly
    doc_aliases: dict[str, str] = {}
    # Fields never exposed to clients
    doc_hidden: tuple[str, ...] = ()

    class Meta:
        abstract = True

    def to_doc(self) -> dict:
        """Return the document as a JSON-serialisable dict (ids as strings)."""
        doc = {}
        for name in self._meta.fields_map:
            if name in self.doc_hidden:
                continue
            value = getattr(self, name)
            if isinstance(value, uuid.UUID):
                value = str(value)
            elif isinstance(value, dt.datetime):
                value = value.isoformat()
            elif isinstance(value, Enum):
                value = value.value
            doc[self.doc_aliases.get(name, _camel(name))] = value
        return doc
