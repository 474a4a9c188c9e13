"""
Responding concept: titled responses attached to a target.

One class serves both response kinds. An instance is bound to a TargetKind and
only ever sees rows of that kind, so "responses to topics" and "responses to
responses" behave as separate collections while sharing one table.
"""
import logging
from dataclasses import dataclass
from uuid import UUID

from forum.core.errors import BadValuesError, NotAllowedError, NotFoundError
from forum.models.response import Response, TargetKind

logger = logging.getLogger("uvicorn.error")

DELETED_RESPONSE = "DELETED_RESPONSE"


@dataclass(frozen=True)
class Target:
    """Tagged reference to the entity a response answers."""
    kind: TargetKind
    id: UUID


class ResponseAuthorNotMatchError(NotAllowedError):
    def __init__(self, author: UUID, _id: UUID):
        self.author = author
        self._id = _id
        super().__init__("{0} is not the author of response {1}!", author, _id)


class RespondingConcept:
    """Owns the rows of the `responses` table whose target_kind is `kind`."""

    def __init__(self, kind: TargetKind):
        self.kind = kind

    def _rows(self):
        return Response.filter(target_kind=self.kind)

    async def create(self, author: UUID, title: str, content: str, target: Target) -> dict:
        if target.kind != self.kind:
            raise BadValuesError("Expected a {0} target, got {1}!", self.kind.value, target.kind.value)
        if not title:
            raise BadValuesError("Title must be non-empty!")
        if not content:
            raise BadValuesError("Content must be non-empty!")
        response = await Response.create(
            author=author, title=title, content=content, target_kind=self.kind, target=target.id,
        )
        logger.info("[responses] %s responded to %s %s", author, self.kind.value, target.id)
        return {"msg": "Response successfully created!", "response": response}

    async def get_responses(self) -> list[Response]:
        # Returns all responses of this kind, newest first
        return await self._rows().order_by("-created_at")

    async def get_by_author(self, author: UUID) -> list[Response]:
        return await self._rows().filter(author=author).order_by("-created_at")

    async def get_by_target(self, target: UUID) -> list[Response]:
        return await self._rows().filter(target=target).order_by("-created_at")

    async def get_by_author_and_target(self, author: UUID, target: UUID) -> list[Response]:
        return await self._rows().filter(author=author, target=target).order_by("-created_at")

    async def get_by_id(self, _id: UUID) -> Response:
        response = await self._rows().get_or_none(id=_id)
        if response is None:
            raise NotFoundError("Response {0} does not exist!", _id)
        return response

    async def ids_to_titles(self, ids: list[UUID]) -> list[str]:
        """Resolve ids positionally; missing (or deleted) responses map to DELETED_RESPONSE."""
        responses = await self._rows().filter(id__in=list(set(ids)))
        id_to_title = {r.id: r.title for r in responses}
        return [id_to_title.get(i, DELETED_RESPONSE) for i in ids]

    async def ids_to_responses(self, ids: list[UUID]) -> list[Response]:
        return await self._rows().filter(id__in=ids)

    async def count_by_targets(self, targets: list[UUID]) -> list[int]:
        """Number of responses attached to each target, positionally."""
        counts = {t: 0 for t in targets}
        for response in await self._rows().filter(target__in=targets):
            counts[response.target] += 1
        return [counts[t] for t in targets]

    async def update_title(self, _id: UUID, title: str | None = None) -> dict:
        # A missing title leaves the field untouched
        if title is not None:
            if not title:
                raise BadValuesError("Title must be non-empty!")
            response = await self.get_by_id(_id)
            response.title = title
            await response.save()
        return {"msg": "Response successfully updated!"}

    async def update_content(self, _id: UUID, content: str | None = None) -> dict:
        if content is not None:
            if not content:
                raise BadValuesError("Content must be non-empty!")
            response = await self.get_by_id(_id)
            response.content = content
            await response.save()
        return {"msg": "Response successfully updated!"}

    async def delete(self, _id: UUID) -> dict:
        await self._rows().filter(id=_id).delete()
        logger.info("[responses] deleted %s response %s", self.kind.value, _id)
        return {"msg": "Response deleted successfully!"}

    async def assert_author_is_user(self, _id: UUID, user: UUID) -> None:
        response = await self.get_by_id(_id)
        if response.author != user:
            raise ResponseAuthorNotMatchError(user, _id)
