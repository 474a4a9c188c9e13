"""
Topicing concept: discussion topics with unique titles.
"""
import logging
from uuid import UUID

from tortoise.exceptions import IntegrityError

from forum.core.errors import BadValuesError, ConflictError, NotAllowedError, NotFoundError
from forum.models.topic import Topic

logger = logging.getLogger("uvicorn.error")

DELETED_TOPIC = "DELETED_TOPIC"


class TopicAuthorNotMatchError(NotAllowedError):
    def __init__(self, author: UUID, _id: UUID):
        self.author = author
        self._id = _id
        super().__init__("{0} is not the author of topic {1}!", author, _id)


class TopicingConcept:
    """Owns the `topics` table."""

    async def create(self, author: UUID, title: str, description: str | None = None) -> dict:
        if not title:
            raise BadValuesError("Title must be non-empty!")
        try:
            topic = await Topic.create(author=author, title=title, description=description or "")
        except IntegrityError:
            raise ConflictError("Topic with title {0} already exists!", title)
        logger.info("[topics] %s created topic %s", author, topic.id)
        return {"msg": "Topic successfully created!", "topic": topic}

    async def get_topics(self) -> list[Topic]:
        # Returns all topics, newest first
        return await Topic.all().order_by("-created_at")

    async def search_topic_titles(self, search: str) -> list[Topic]:
        return await Topic.filter(title__icontains=search).order_by("-created_at")

    async def get_topic_by_id(self, _id: UUID) -> Topic:
        topic = await Topic.get_or_none(id=_id)
        if topic is None:
            raise NotFoundError("Topic {0} does not exist!", _id)
        return topic

    async def get_topic_by_title(self, title: str) -> Topic:
        topic = await Topic.get_or_none(title=title)
        if topic is None:
            raise NotFoundError("Topic {0} not found!", title)
        return topic

    async def get_topics_by_ids(self, ids: list[UUID]) -> list[Topic]:
        return await Topic.filter(id__in=ids).order_by("-created_at")

    async def ids_to_titles(self, ids: list[UUID]) -> list[str]:
        topics = await Topic.filter(id__in=list(set(ids)))
        id_to_title = {t.id: t.title for t in topics}
        return [id_to_title.get(i, DELETED_TOPIC) for i in ids]

    async def delete(self, _id: UUID) -> dict:
        await Topic.filter(id=_id).delete()
        logger.info("[topics] deleted topic %s", _id)
        return {"msg": "Topic deleted successfully!"}

    async def assert_author_is_user(self, _id: UUID, user: UUID) -> None:
        topic = await self.get_topic_by_id(_id)
        if topic.author != user:
            raise TopicAuthorNotMatchError(user, _id)
