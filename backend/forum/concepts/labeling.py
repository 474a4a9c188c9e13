"""
Labeling concept: uniquely titled labels attached to items.

Like Responding, one class serves both item kinds (topics, responses); each
instance only sees labels of its own kind.
"""
import logging
from uuid import UUID

from tortoise.exceptions import IntegrityError
from tortoise.transactions import in_transaction

from forum.core.errors import BadValuesError, ConflictError, NotAllowedError, NotFoundError
from forum.models.label import Label
from forum.models.response import TargetKind

logger = logging.getLogger("uvicorn.error")


class LabelAuthorNotMatchError(NotAllowedError):
    def __init__(self, author: UUID, title: str):
        self.author = author
        self.title = title
        super().__init__("{0} is not the author of label {1}!", author, title)


class LabelingConcept:
    """Owns the rows of the `labels` table whose kind is `kind`."""

    def __init__(self, kind: TargetKind):
        self.kind = kind

    def _rows(self):
        return Label.filter(kind=self.kind)

    async def create(self, author: UUID, title: str) -> dict:
        if not title:
            raise BadValuesError("Title must be non-empty!")
        try:
            label = await Label.create(author=author, kind=self.kind, title=title, items=[])
        except IntegrityError:
            raise ConflictError("Label with title {0} already exists!", title)
        logger.info("[labels] %s created %s label %s", author, self.kind.value, title)
        return {"msg": "Label successfully created!", "label": label}

    async def get_all_labels(self) -> list[Label]:
        return await self._rows().order_by("-created_at")

    async def get_label_by_title(self, title: str) -> Label:
        label = await self._rows().get_or_none(title=title)
        if label is None:
            raise NotFoundError("Label {0} not found!", title)
        return label

    async def get_labels_by_item(self, item: UUID) -> list[Label]:
        return [label for label in await self.get_all_labels() if str(item) in label.items]

    async def _locked(self, title: str, conn) -> Label:
        # Row lock for the read-modify-write of `items` (a no-op on SQLite)
        label = await self._rows().select_for_update().using_db(conn).get_or_none(title=title)
        if label is None:
            raise NotFoundError("Label {0} not found!", title)
        return label

    async def add_label_to_item(self, title: str, item: UUID) -> dict:
        async with in_transaction() as conn:
            label = await self._locked(title, conn)
            if str(item) in label.items:
                raise ConflictError("Item {0} already has label {1}!", item, title)
            label.items = [*label.items, str(item)]
            await label.save(using_db=conn)
        return {"msg": "Label successfully added!"}

    async def remove_label_from_item(self, title: str, item: UUID) -> dict:
        async with in_transaction() as conn:
            label = await self._locked(title, conn)
            if str(item) not in label.items:
                raise NotFoundError("Item {0} does not have label {1}!", item, title)
            label.items = [i for i in label.items if i != str(item)]
            await label.save(using_db=conn)
        return {"msg": "Label successfully removed!"}

    async def delete(self, _id: UUID) -> dict:
        await self._rows().filter(id=_id).delete()
        logger.info("[labels] deleted %s label %s", self.kind.value, _id)
        return {"msg": "Label deleted successfully!"}

    async def assert_author_is_user(self, title: str, user: UUID) -> None:
        label = await self.get_label_by_title(title)
        if label.author != user:
            raise LabelAuthorNotMatchError(user, title)
