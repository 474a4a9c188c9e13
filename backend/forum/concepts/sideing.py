"""
Sideing concept: a user's stance (degree) on a topic.
"""
from uuid import UUID

from tortoise.exceptions import IntegrityError

from forum.core.errors import ConflictError, NotFoundError
from forum.models.side import Degree, Side


class UserAlreadyHasTopicSideError(ConflictError):
    def __init__(self, author: UUID, _id: UUID):
        self.author = author
        self._id = _id
        super().__init__("{0} already has a side for {1}!", author, _id)


class NoSideFoundForUserError(NotFoundError):
    def __init__(self, author: UUID, _id: UUID):
        self.author = author
        self._id = _id
        super().__init__("{0} doesn't have a side for topic {1}!", author, _id)


class SideingConcept:
    """Owns the `sides` table; (user, issue) is unique."""

    async def create(self, user: UUID, issue: UUID, degree: str) -> dict:
        value = self.assert_degree(degree)
        try:
            side = await Side.create(user=user, issue=issue, degree=value)
        except IntegrityError:
            raise UserAlreadyHasTopicSideError(user, issue)
        return {"msg": "Side successfully created!", "side": side}

    async def get_side_by_user_and_issue(self, user: UUID, issue: UUID) -> list[Side]:
        return await Side.filter(user=user, issue=issue)

    async def get_side_by_user(self, user: UUID) -> list[Side]:
        return await Side.filter(user=user).order_by("-created_at")

    async def get_sides_by_issue_and_degree(self, issue: UUID, degree: str) -> list[Side]:
        return await Side.filter(issue=issue, degree=self.assert_degree(degree))

    async def update(self, user: UUID, issue: UUID, newside: str | None = None) -> dict:
        if newside:
            value = self.assert_degree(newside)
            side = await Side.get_or_none(user=user, issue=issue)
            if side is None:
                raise NoSideFoundForUserError(user, issue)
            side.degree = value
            await side.save()
        return {"msg": "Side successfully updated!"}

    async def assert_user_has_side(self, user: UUID, issue: UUID) -> None:
        if not await Side.exists(user=user, issue=issue):
            raise NoSideFoundForUserError(user, issue)

    @staticmethod
    def assert_degree(degree: str) -> Degree:
        try:
            return Degree(degree)
        except ValueError:
            raise NotFoundError("Degree {0} is not a valid side!", degree)
